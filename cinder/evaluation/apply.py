"""Application engine for Cinder.

Centralizes function application so the evaluator, symbol lookup and
Lambda.__call__ share one set of semantics:
- Lambda: arity check, fresh per-call scope, body evaluated in sequence.
- Builtin and Constant: called directly with the argument list.
"""

from __future__ import annotations

from cinder import LispValue, EvaluatorFn
from cinder.errors import CinderTypeError
from cinder.types.function import Builtin, Constant
from cinder.types.lambda_fn import Lambda


def apply_lambda(fn: Lambda, args: list[LispValue], evaluate_fn: EvaluatorFn) -> LispValue:
    """Apply a Lambda to already-evaluated arguments.

    Each body form is evaluated in a fresh scope whose outer is the scope the
    lambda captured when it was built; the value of the last form is returned.
    """
    call_env = fn.bind_arguments(list(args))
    result: LispValue = None
    for form in fn.body:
        result = evaluate_fn(form, call_env)
    return result


def apply(head: object, args: list[LispValue], evaluate_fn: EvaluatorFn) -> LispValue:
    """Apply either a Lambda or a host Function to `args`."""
    match head:
        case Lambda():
            return apply_lambda(head, args, evaluate_fn)
        case Builtin() | Constant():
            return head(args)
    raise CinderTypeError(f"Cannot apply non-function {head!r}")
