"""Classification predicates over expressions."""

from __future__ import annotations

from vau import Expression
from vau.types.combiner import (
    is_applicative,
    is_combiner,
    is_native,
    is_operative,
)
from vau.types.environment import Environment
from vau.types.nil import Nil
from vau.types.pair import Pair, Str
from vau.types.symbol import Symbol

__all__ = [
    "is_symbol",
    "is_string",
    "is_list",
    "is_pair",
    "is_applicable_list",
    "is_number",
    "is_combiner",
    "is_operative",
    "is_applicative",
    "is_native",
    "is_environment",
]


def is_symbol(value: Expression) -> bool:
    return isinstance(value, Symbol)


def is_string(value: Expression) -> bool:
    return isinstance(value, (Str, str))


def is_pair(value: Expression) -> bool:
    """A pair chain, including the empty list."""
    return value is Nil or isinstance(value, Pair)


def is_list(value: Expression) -> bool:
    return is_pair(value) or is_string(value)


def is_applicable_list(value: Expression) -> bool:
    return isinstance(value, Pair)


def is_number(value: Expression) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_environment(value: Expression) -> bool:
    return isinstance(value, Environment)
