from cinder import EvaluatorFn
from cinder import SExpression, LispValue
from cinder.errors import CinderMalformedExpression
from cinder.types.environment import Environment
from cinder.types.function import as_binding
from cinder.types.symbol import Symbol


def def_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (def name value)
    Binds in the current scope, replacing an existing binding there, and
    returns the value.
    """
    if len(tail) != 2:
        raise CinderMalformedExpression("def requires exactly 2 arguments: (def name value)")

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise CinderMalformedExpression(f"def first argument must be a Symbol, got {name!r}")
    value = evaluate_fn(val_expr, env)
    env.define(name, as_binding(value))
    return value
