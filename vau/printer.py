from __future__ import annotations

from io import StringIO

from vau import Expression
from vau.types.combiner import Combiner
from vau.types.environment import Environment
from vau.types.nil import Nil
from vau.types.pair import Pair, Str
from vau.types.symbol import Symbol


def _write_string(text: str, buffer: StringIO) -> None:
    buffer.write('"')
    buffer.write(text.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n"))
    buffer.write('"')


def _write(value: Expression, buffer: StringIO) -> None:
    if value is Nil or value is None:
        buffer.write("()")
    elif isinstance(value, Pair):
        buffer.write("(")
        _write(value.head, buffer)
        rest = value.tail
        while isinstance(rest, Pair):
            buffer.write(" ")
            _write(rest.head, buffer)
            rest = rest.tail
        if rest is not Nil:
            buffer.write(" . ")
            _write(rest, buffer)
        buffer.write(")")
    elif isinstance(value, Symbol):
        buffer.write(value.name)
    elif isinstance(value, Str):
        _write_string(value.value, buffer)
    elif isinstance(value, str):
        _write_string(value, buffer)
    elif isinstance(value, Environment):
        buffer.write("#[environment]")
    elif isinstance(value, Combiner):
        buffer.write(repr(value))
    elif callable(value):
        buffer.write(f"#[native {getattr(value, '__name__', 'function')}]")
    else:
        buffer.write(repr(value))


def render(value: Expression) -> str:
    """External representation of a value, in concrete syntax where one exists."""
    with StringIO() as buffer:
        _write(value, buffer)
        return buffer.getvalue()
