"""Runtime environment for Cinder.

The Environment stores bindings of Symbols to Function values and supports
nested scopes via an `outer` link. Lookup walks from the current scope outward
to the global scope; the first match wins.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from cinder.errors import CinderMalformedExpression, CinderTypeError, CinderUnboundSymbol
from cinder.types.function import Function
from cinder.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to Function values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, Function] = {}
        self.outer: Environment | None = outer

    def child(self) -> Environment:
        """Return a fresh, empty scope whose parent is this one."""
        return Environment(outer=self)

    def define(self, name: Symbol, value: Function) -> None:
        """Bind `name` to `value` in this scope, replacing any existing binding.

        Never touches an outer scope. Raises CinderMalformedExpression if `name`
        is not a Symbol and CinderTypeError if `value` is not a Function.
        """
        if not isinstance(name, Symbol):
            raise CinderMalformedExpression(f"Cannot define {name!r} as a symbol")
        if not isinstance(value, Function):
            raise CinderTypeError(f"Cannot bind {name} to non-function {value!r}")
        self.vars[name] = value

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol) -> Function:
        """Look up the Function bound to `name`.

        Raises CinderUnboundSymbol if no scope in the chain binds it.
        """
        env = self.find(name)
        if env is None:
            raise CinderUnboundSymbol(name)
        return env.vars[name]

    def update(self, mapping: dict[Symbol, Function]) -> None:
        """Bulk-define a mapping of Symbol -> Function in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        first = True
        for k, v in self.vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v!r}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as env_buf:
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
            env = env.outer
        return f"<Environment chain: {' -> '.join(chain)}>"
