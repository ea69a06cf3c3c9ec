from cinder.types.symbol import Symbol
from cinder.types.function import Function, Builtin, Constant, as_binding
from cinder.types.environment import Environment
from cinder.types.lambda_fn import Lambda

__all__ = (
    "Symbol",
    "Function",
    "Builtin",
    "Constant",
    "as_binding",
    "Environment",
    "Lambda",
)
