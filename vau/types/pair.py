"""List-shaped values: cons pairs and strings.

Pairs are the only compound structure. Strings double as lists of
character codes without being converted into pair chains: the head of a
string is the code point of its first character and the tail is the rest
of the string.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import reduce
from typing import Iterable, Iterator

from vau import Expression
from vau.errors import VauTypeError
from vau.types.nil import Nil


@dataclass(frozen=True, slots=True)
class Pair:
    head: Expression
    tail: Expression

    def __iter__(self) -> Iterator[Expression]:
        return iter_list(self)

    def __repr__(self) -> str:
        from vau.printer import render
        return render(self)


@dataclass(frozen=True, slots=True)
class Str:
    """A string literal as read from source."""
    value: str

    def __len__(self) -> int:
        return len(self.value)

    def __repr__(self) -> str:
        return f"Str({self.value!r})"


def to_list(items: Iterable[Expression], tail: Expression = Nil) -> Expression:
    """Right-fold `items` into pairs; the first item becomes the outermost pair."""
    return reduce(lambda rest, item: Pair(item, rest), reversed(list(items)), tail)


def iter_list(expression: Expression) -> Iterator[Expression]:
    """Yield the elements of a proper list, failing on an improper tail."""
    current = expression
    while isinstance(current, Pair):
        yield current.head
        current = current.tail
    if current is not Nil:
        raise VauTypeError("list", expression)


def _is_text(value: Expression) -> bool:
    return isinstance(value, (Str, str))


def head(value: Expression) -> Expression:
    """First element of any list-shaped value."""
    if isinstance(value, Pair):
        return value.head
    if value is Nil:
        return Nil
    if _is_text(value):
        text = value.value if isinstance(value, Str) else value
        return ord(text[0]) if text else Nil
    raise VauTypeError("list", value)


def tail(value: Expression) -> Expression:
    """Everything after the first element of any list-shaped value."""
    if isinstance(value, Pair):
        return value.tail
    if value is Nil:
        return Nil
    if isinstance(value, Str):
        return Str(value.value[1:])
    if _is_text(value):
        return value[1:]
    raise VauTypeError("list", value)
