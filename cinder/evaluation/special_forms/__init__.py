"""Registry of special forms for the Cinder evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table before ordinary function application.
Handlers take `(tail, env, evaluate_fn)`, where `tail` holds the unevaluated
operands.
"""

from cinder.types.symbol import Symbol
from cinder.evaluation.special_forms.def_form import def_form
from cinder.evaluation.special_forms.lambda_form import lambda_form

SPECIAL_FORMS = {
    Symbol("def"): def_form,
    Symbol("lambda"): lambda_form,
}
