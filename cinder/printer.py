"""Textual form of Cinder values, as shown by the REPL."""

from cinder import LispValue
from cinder.errors import CinderTypeError
from cinder.types.function import Function
from cinder.types.symbol import Symbol

FUNCTION_MARKER = "#<function>"


def to_string(value: LispValue) -> str:
    match value:
        case bool():
            pass
        case int():
            return str(value)
        case Symbol():
            return value.id
        case Function():
            return FUNCTION_MARKER
    raise CinderTypeError(f"Not a Cinder value: {value!r}")
