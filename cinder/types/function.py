"""Function values for Cinder.

Every binding in an Environment holds a Function. A Function takes an ordered
list of evaluated arguments and returns a single value; it carries no name of
its own, since names belong to the environment that binds it.
"""

from __future__ import annotations

from typing import Callable

from cinder import LispValue


class Function:
    """Base class of all callable values."""

    __slots__ = ()

    def __call__(self, args: list[LispValue]) -> LispValue:
        raise NotImplementedError

    def __repr__(self) -> str:
        return "#<function>"


class Builtin(Function):
    """A host function registered in the global environment."""

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: Callable[[list[LispValue]], LispValue]):
        self.name = name
        self.fn = fn

    def __call__(self, args: list[LispValue]) -> LispValue:
        return self.fn(args)

    def __repr__(self) -> str:
        return f"#<builtin {self.name}>"


class Constant(Function):
    """Thunk returning a fixed value; any arguments are ignored."""

    __slots__ = ("value",)

    def __init__(self, value: LispValue):
        self.value = value

    def __call__(self, args: list[LispValue]) -> LispValue:
        return self.value

    def __repr__(self) -> str:
        return f"#<constant {self.value!r}>"


def as_binding(value: LispValue) -> Function:
    """Return the Function to store when `value` is bound to a name.

    Functions are bound as themselves; any other value is wrapped in a Constant,
    so that looking the name up and calling it with no arguments yields `value`.
    """
    if isinstance(value, Function):
        return value
    return Constant(value)
