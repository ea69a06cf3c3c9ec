from cinder import EvaluatorFn
from cinder import SExpression, LispValue
from cinder.errors import CinderEmptyLambdaBody, CinderMalformedExpression
from cinder.types.environment import Environment
from cinder.types.lambda_fn import Lambda
from cinder.types.symbol import Symbol


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (lambda (params) body...): the body is one or more forms evaluated in
    # order, and the closure scope is a child of `env` created here, once.
    if not tail:
        raise CinderMalformedExpression("lambda requires a parameter list")

    params, *body = tail
    if not isinstance(params, list) or not all(isinstance(p, Symbol) for p in params):
        raise CinderMalformedExpression(
            f"lambda parameter list must be a list of symbols, got {params!r}"
        )
    # Checked here rather than at the first call
    if not body:
        raise CinderEmptyLambdaBody("lambda requires at least one body expression")

    return Lambda(params, body, env.child())
