"""Built-in functions for the Cinder runtime environment.

This module defines integer arithmetic and the registration helper that
installs it into the global scope.
"""
from __future__ import annotations

from cinder import LispValue
from cinder.errors import (
    CinderArityError,
    CinderOverflowError,
    CinderTypeError,
    CinderZeroDivisionError,
)
from cinder.reader.parser import INT_MAX, INT_MIN
from cinder.types.environment import Environment
from cinder.types.function import Builtin
from cinder.types.symbol import Symbol


def _integers(name: str, expr: list[LispValue]) -> list[int]:
    for x in expr:
        if isinstance(x, bool) or not isinstance(x, int):
            raise CinderTypeError(f"All arguments to {name} must be integers, got {x!r}")
    return expr


def _checked(name: str, value: int) -> int:
    if not INT_MIN <= value <= INT_MAX:
        raise CinderOverflowError(f"Integer overflow in {name}")
    return value


# -------------------------------
# Arithmetic
# -------------------------------
def add(expr: list[LispValue]) -> int:
    """Return the sum of all arguments; (+) is 0."""
    return _checked("+", sum(_integers("+", expr)))


def sub(expr: list[LispValue]) -> int:
    """Subtract all subsequent integers from the first; unary negation for one arg."""
    if not expr:
        raise CinderArityError("- requires at least 1 argument")
    nums = _integers("-", expr)
    if len(nums) == 1:
        return _checked("-", -nums[0])
    result = nums[0]
    for x in nums[1:]:
        result = _checked("-", result - x)
    return result


def mul(expr: list[LispValue]) -> int:
    """Return the product of all arguments; (*) is 1."""
    result = 1
    for x in _integers("*", expr):
        result = _checked("*", result * x)
    return result


def _truncating_div(n: int, d: int) -> int:
    if d == 0:
        raise CinderZeroDivisionError("Division by zero")
    q = abs(n) // abs(d)
    return q if (n < 0) == (d < 0) else -q


def div(expr: list[LispValue]) -> int:
    """Divide left-to-right, truncating toward zero; with one arg returns 1 / n."""
    if not expr:
        raise CinderArityError("/ requires at least 1 argument")
    nums = _integers("/", expr)
    if len(nums) == 1:
        return _truncating_div(1, nums[0])
    result = nums[0]
    for x in nums[1:]:
        result = _checked("/", _truncating_div(result, x))
    return result


BUILTINS = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
}


def register(env: Environment) -> None:
    """Register all builtin functions into the given environment."""
    env.update({Symbol(name): Builtin(name, fn) for name, fn in BUILTINS.items()})
