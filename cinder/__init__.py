# Core type aliases for Cinder's data model.
# Expressions are plain Python values: int and Symbol leaves, list for forms.
# Runtime values are int, Symbol or a Function instance.
#
# Naming guidance:
# - SExpression: Use in reader code and special forms to denote syntactic forms.
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
SExpression = LispValue

# Evaluator function type, handed to special forms and the application engine
EvaluatorFn = Callable[..., LispValue]

__version__ = "0.1.0"
