"""Core evaluator for the Cinder interpreter.

Dispatches on expression shape: integers self-evaluate, symbols are looked up
and called with no arguments, forms go to a special form handler or to
ordinary application with strict, left-to-right operand evaluation.
"""

from __future__ import annotations

import logging

from cinder import SExpression, LispValue
from cinder.errors import CinderMalformedExpression
from cinder.types.environment import Environment
from cinder.types.symbol import Symbol
from cinder.evaluation.apply import apply
from cinder.evaluation.special_forms import SPECIAL_FORMS

logger = logging.getLogger(__name__)


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Evaluate `expr` in `env` and return its value.

    Any CinderError raised by a sub-evaluation propagates unchanged.
    """
    match expr:
        case bool():
            raise CinderMalformedExpression(f"Cannot evaluate {expr!r}")

        case int():
            return expr

        case Symbol():
            return apply(env.lookup(expr), [], evaluate)

        case []:
            raise CinderMalformedExpression("Cannot evaluate an empty form")

        case [Symbol() as head, *tail]:
            if head in SPECIAL_FORMS:
                logger.debug("special form %s", head)
                return SPECIAL_FORMS[head](tail, env, evaluate)

            fn = env.lookup(head)
            args = [evaluate(arg, env) for arg in tail]
            logger.debug("apply %s to %d argument(s)", head, len(args))
            return apply(fn, args, evaluate)

        case [head, *_]:
            raise CinderMalformedExpression(
                f"Expected symbol in operator position, got {head!r}"
            )

    raise CinderMalformedExpression(f"Cannot evaluate {expr!r}")
