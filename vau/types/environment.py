"""Runtime environments for vau.

An Environment stores bindings of Symbols to values and defers failed
lookups to its parent. The parent is referenced, never copied, so a binding
added to a parent later is visible through every existing child until the
child shadows it locally. Every frame binds `current-world` to a native
function returning the frame itself.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from vau import Expression
from vau.errors import VauNoEnvironment, VauReferenceError, VauTypeError
from vau.types.symbol import Symbol

CURRENT_WORLD = Symbol("current-world")


def _as_symbol(name: Symbol | str) -> Symbol:
    if isinstance(name, Symbol):
        return name
    if isinstance(name, str):
        return Symbol(name)
    raise VauTypeError("symbol", name)


class Environment:
    """Mutable frame of bindings with a parent fallback."""

    __slots__ = ("bindings", "parent")

    def __init__(self, parent: Optional[Environment] = None):
        self.bindings: dict[Symbol, Expression] = {}
        self.parent: Environment | None = parent

        def current_world(*_):
            return self

        self.bindings[CURRENT_WORLD] = current_world

    def child(self) -> Environment:
        return Environment(self)

    def define(self, name: Symbol | str, value: Expression) -> Expression:
        """Bind `name` to `value` in this frame only and return `value`."""
        self.bindings[_as_symbol(name)] = value
        return value

    def find(self, name: Symbol | str) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name`."""
        symbol = _as_symbol(name)
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.bindings:
                return env
            env = env.parent
        return None

    def lookup(self, name: Symbol | str) -> Expression:
        """Return the nearest binding of `name`; raises VauReferenceError if unbound."""
        symbol = _as_symbol(name)
        env = self.find(symbol)
        if env is None:
            raise VauReferenceError(symbol.name)
        return env.bindings[symbol]

    def update(self, mapping: dict[Symbol | str, Expression]) -> None:
        """Bulk-define a mapping of names to values in this frame."""
        for name, value in mapping.items():
            self.define(name, value)

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, (Symbol, str)):
            return False
        return self.find(name) is not None

    def _write_bindings(self, buffer: StringIO) -> None:
        """Write this frame's names into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(str(k) for k in self.bindings if k != CURRENT_WORLD))
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_bindings(buffer)
            if self.parent is not None:
                buffer.write(" -> ...")  # indicate parent exists
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            env = self
            first = True
            while env is not None:
                if not first:
                    buffer.write(" -> ")
                env._write_bindings(buffer)
                first = False
                env = env.parent
            buffer.write(">")
            return buffer.getvalue()


def make_environment(parent: Optional[Environment] = None) -> Environment:
    """Create a frame whose failed lookups fall through to `parent`."""
    return Environment(parent)


def lookup(name: Symbol | str, environment: Optional[Environment]) -> Expression:
    if environment is None:
        raise VauNoEnvironment(name)
    return environment.lookup(name)


def define(name: Symbol | str, value: Expression, environment: Environment) -> Expression:
    return environment.define(name, value)
