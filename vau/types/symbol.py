"""Interned identifiers.

`Symbol(name)` returns the one Symbol object for `name`, so symbols compare
by identity and names read from source share storage with those built by
the host.
"""

from __future__ import annotations

from typing import ClassVar


class Symbol:
    __slots__ = ("name",)

    _table: ClassVar[dict[str, Symbol]] = {}

    def __new__(cls, name: str) -> Symbol:
        if not isinstance(name, str):
            raise TypeError(f"symbol name must be a str, got {type(name).__name__}")
        symbol = cls._table.get(name)
        if symbol is None:
            symbol = super().__new__(cls)
            symbol.name = name
            cls._table[name] = symbol
        return symbol

    def __reduce__(self):
        return (Symbol, (self.name,))

    def __repr__(self) -> str:
        return f"Symbol({self.name!r})"

    def __str__(self) -> str:
        return self.name
