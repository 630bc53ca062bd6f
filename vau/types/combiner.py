"""Combiners: everything that may sit in operator position.

- PrimitiveOperative: a host function receiving the caller's environment and
  the operands exactly as written.
- Applicative: evaluates its operands, then hands the values to the
  combiner it wraps.
- CompoundOperative: built by `$vau`; binds unevaluated operands to its
  formals in a fresh child of its closure and evaluates its body there.

Plain Python callables are native functions. They are invoked like
operatives (`fn(environment, *operands)`) and may be wrapped.
"""

from __future__ import annotations

import inspect
import logging
from io import StringIO
from typing import Optional

from vau import Expression, HostFunction
from vau.errors import VauArityError, VauTypeError
from vau.types.environment import Environment
from vau.types.pair import iter_list, to_list
from vau.types.symbol import Symbol

logger = logging.getLogger(__name__)


class Combiner:
    """Base class for combiner values."""

    __slots__ = ()

    def invoke(self, operands: Expression, environment: Environment) -> Expression:
        raise NotImplementedError


class Operative(Combiner):
    __slots__ = ()


def signature_of(fn: HostFunction) -> Optional[inspect.Signature]:
    """Signature of a host function, or None when it cannot be inspected."""
    try:
        return inspect.signature(fn)
    except (TypeError, ValueError):
        return None


def check_operand_count(
    signature: Optional[inspect.Signature],
    name: str,
    environment: Environment,
    args: list[Expression],
) -> None:
    """Raise VauArityError when `fn(environment, *args)` would not bind."""
    if signature is None:
        return
    try:
        signature.bind(environment, *args)
    except TypeError:
        raise VauArityError(f"{name} cannot take {len(args)} operands") from None


class PrimitiveOperative(Operative):
    """Operative implemented by a host function `fn(environment, *operands)`."""

    __slots__ = ("fn", "name", "signature")

    def __init__(self, fn: HostFunction, name: Optional[str] = None):
        if not callable(fn):
            raise VauTypeError("host function", fn)
        self.fn = fn
        self.name = name or getattr(fn, "__name__", "primitive")
        self.signature = signature_of(fn)

    def invoke(self, operands: Expression, environment: Environment) -> Expression:
        args = list(iter_list(operands))
        check_operand_count(self.signature, self.name, environment, args)
        return self.fn(environment, *args)

    def __repr__(self) -> str:
        return f"#[operative {self.name}]"


class Applicative(Combiner):
    """Combiner that evaluates its operands before delegating to `underlying`."""

    __slots__ = ("underlying",)

    def __init__(self, underlying: Expression):
        if not is_combiner(underlying):
            raise VauTypeError("combiner", underlying)
        self.underlying = underlying

    def invoke(self, operands: Expression, environment: Environment) -> Expression:
        from vau.evaluation.evaluator import evaluate
        from vau.evaluation.apply import apply

        # Left to right; operands may have effects on `environment`.
        values = [evaluate(operand, environment) for operand in iter_list(operands)]
        return apply(self.underlying, to_list(values), environment)

    def __repr__(self) -> str:
        return f"#[applicative {self.underlying!r}]"


class CompoundOperative(Operative):
    """A first-class operative with formals, optional rest formal, body and closure."""

    __slots__ = ("params", "rest", "body", "closure")

    def __init__(
        self,
        params: list[Symbol],
        rest: Optional[Symbol],
        body: list[Expression],
        closure: Environment,
    ):
        if not body:
            raise VauArityError("$vau requires at least one body expression")
        self.params: list[Symbol] = list(params)
        self.rest: Symbol | None = rest
        self.body: list[Expression] = list(body)
        self.closure: Environment = closure

    def bind(self, operands: Expression) -> Environment:
        """Return a fresh call frame with the formals bound to `operands`."""
        supplied = list(iter_list(operands))
        arity = len(self.params)
        if len(supplied) < arity:
            raise VauArityError(
                f"Operative expected {arity} operands, got {len(supplied)}"
            )
        if len(supplied) > arity and self.rest is None:
            raise VauArityError(f"Too many operands: {to_list(supplied[arity:])!r}")

        frame = Environment(self.closure)
        for param, operand in zip(self.params, supplied):
            frame.define(param, operand)
        if self.rest is not None:
            frame.define(self.rest, to_list(supplied[arity:]))
        return frame

    def invoke(self, operands: Expression, environment: Environment) -> Expression:
        from vau.evaluation.evaluator import evaluate

        frame = self.bind(operands)
        logger.debug("invoking %r", self)
        *effects, last = self.body
        for expression in effects:
            evaluate(expression, frame)
        return evaluate(last, frame)

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("($vau (")
            buffer.write(" ".join(str(p) for p in self.params))
            buffer.write(")")
            if self.rest is not None:
                buffer.write(f" . {self.rest}")
            buffer.write(" ...)")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"#[operative {self}]"


def is_native(value: Expression) -> bool:
    """A plain host callable that is neither a combiner nor a type."""
    return callable(value) and not isinstance(value, (Combiner, type))


def is_combiner(value: Expression) -> bool:
    return isinstance(value, Combiner) or is_native(value)


def is_operative(value: Expression) -> bool:
    return isinstance(value, Operative) or is_native(value)


def is_applicative(value: Expression) -> bool:
    return isinstance(value, Applicative)


def wrap(combiner: Expression) -> Applicative:
    return Applicative(combiner)


def unwrap(applicative: Expression) -> Expression:
    if not is_applicative(applicative):
        raise VauTypeError("applicative", applicative)
    return applicative.underlying
