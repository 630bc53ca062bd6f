"""Bootstrap primitives for the vau root environment.

This module defines the special forms ($define!, $vau), evaluation helpers
(eval, wrap, unwrap, read), predicates, list operations, boolean selectors
and comparison, and installs them into an environment.

Every host function here takes the invocation environment first. Those
exposed as applicatives receive already-evaluated operands.
"""
from __future__ import annotations

import logging
from typing import Optional

from vau import Expression, HostFunction
from vau.errors import VauTypeError
from vau.evaluation.evaluator import evaluate
from vau.reader.parser import parse_to_expression
from vau.types.combiner import (
    Applicative,
    CompoundOperative,
    PrimitiveOperative,
    is_applicative,
    is_operative,
    unwrap,
    wrap,
)
from vau.types.environment import Environment, make_environment
from vau.types.nil import Nil
from vau.types.pair import Pair, Str, head, iter_list, tail
from vau.types.predicates import is_list, is_number, is_symbol
from vau.types.symbol import Symbol

logger = logging.getLogger(__name__)


# -------------------------------
# Booleans
# -------------------------------
def true(env: Environment, consequent: Expression, alternative: Expression) -> Expression:
    """#t selects its first operand."""
    return consequent


def false(env: Environment, consequent: Expression, alternative: Expression) -> Expression:
    """#f selects its second operand."""
    return alternative


def boolean(flag: bool) -> HostFunction:
    return true if flag else false


# -------------------------------
# Special forms
# -------------------------------
def define_form(env: Environment, name: Expression, expression: Expression) -> Expression:
    """($define! name expression): bind name in the caller's frame."""
    if not is_symbol(name):
        raise VauTypeError("symbol", name)
    value = evaluate(expression, env)
    env.define(name, value)
    logger.debug("defined %s", name)
    return value


def _parse_formals(formals: Expression) -> tuple[list[Symbol], Optional[Symbol]]:
    """Split `(params . rest)` into the fixed parameter symbols and the rest symbol.

    `params` is a list of symbols, or a lone symbol naming one parameter,
    so `((a) . rest)` and `(a . rest)` are equivalent.
    """
    if formals is Nil:
        return [], None
    if not isinstance(formals, Pair):
        raise VauTypeError("formals list", formals)

    if is_symbol(formals.head):
        params = [formals.head]
    else:
        params = list(iter_list(formals.head))
    for param in params:
        if not is_symbol(param):
            raise VauTypeError("symbol", param)

    rest = formals.tail
    if rest is Nil:
        return params, None
    if not is_symbol(rest):
        raise VauTypeError("symbol", rest)
    return params, rest


def vau_form(env: Environment, formals: Expression, *body: Expression) -> CompoundOperative:
    """($vau (params . rest) body...): build an operative closing over the caller."""
    params, rest = _parse_formals(formals)
    operative = CompoundOperative(params, rest, list(body), make_environment(env))
    logger.debug("constructed %r", operative)
    return operative


# -------------------------------
# Evaluation
# -------------------------------
def eval_applicative(env: Environment, expression: Expression, environment: Expression = None) -> Expression:
    """(eval expression [environment]), defaulting to the caller's environment."""
    if environment is None:
        environment = env
    elif not isinstance(environment, Environment):
        raise VauTypeError("environment", environment)
    return evaluate(expression, environment)


def wrap_applicative(env: Environment, combiner: Expression) -> Applicative:
    return wrap(combiner)


def unwrap_applicative(env: Environment, applicative: Expression) -> Expression:
    return unwrap(applicative)


def read(env: Environment, text: Expression) -> Expression:
    """Parse source text into an unevaluated expression."""
    if isinstance(text, Str):
        text = text.value
    if not isinstance(text, str):
        raise VauTypeError("string", text)
    return parse_to_expression(text)


# -------------------------------
# Predicates
# -------------------------------
def list_p(env: Environment, value: Expression) -> HostFunction:
    return boolean(is_list(value))


def operative_p(env: Environment, value: Expression) -> HostFunction:
    return boolean(is_operative(value))


def applicative_p(env: Environment, value: Expression) -> HostFunction:
    return boolean(is_applicative(value))


def number_p(env: Environment, value: Expression) -> HostFunction:
    return boolean(is_number(value))


def symbol_p(env: Environment, value: Expression) -> HostFunction:
    return boolean(is_symbol(value))


# -------------------------------
# Lists
# -------------------------------
def head_applicative(env: Environment, value: Expression) -> Expression:
    return head(value)


def tail_applicative(env: Environment, value: Expression) -> Expression:
    return tail(value)


# -------------------------------
# Equality and ordering
# -------------------------------
def is_identical(a: Expression, b: Expression) -> bool:
    """Strict equality: identity for compound values, value equality for atoms."""
    if a is b:
        return True
    if is_number(a) and is_number(b):
        return a == b
    if isinstance(a, Symbol) and isinstance(b, Symbol):
        return a == b
    if type(a) is str and type(b) is str:
        return a == b
    return False


def equals(env: Environment, a: Expression, b: Expression) -> HostFunction:
    return boolean(is_identical(a, b))


def less_than(env: Environment, a: Expression, b: Expression) -> HostFunction:
    for operand in (a, b):
        if not is_number(operand):
            raise VauTypeError("number", operand)
    return boolean(a < b)


def _applicative(fn: HostFunction, name: str) -> Applicative:
    return Applicative(PrimitiveOperative(fn, name))


# -------------------------------
# Registration
# -------------------------------
def register(env: Environment) -> None:
    env.update({
        Symbol('eval'): _applicative(eval_applicative, 'eval'),
        Symbol('wrap'): _applicative(wrap_applicative, 'wrap'),
        Symbol('unwrap'): _applicative(unwrap_applicative, 'unwrap'),
        Symbol('$define!'): PrimitiveOperative(define_form, '$define!'),
        Symbol('$vau'): PrimitiveOperative(vau_form, '$vau'),
        Symbol('read'): _applicative(read, 'read'),
        Symbol('list?'): _applicative(list_p, 'list?'),
        Symbol('operative?'): _applicative(operative_p, 'operative?'),
        Symbol('applicative?'): _applicative(applicative_p, 'applicative?'),
        Symbol('number?'): _applicative(number_p, 'number?'),
        Symbol('symbol?'): _applicative(symbol_p, 'symbol?'),
        Symbol('nil'): Nil,
        Symbol('head'): _applicative(head_applicative, 'head'),
        Symbol('tail'): _applicative(tail_applicative, 'tail'),
        Symbol('#t'): true,
        Symbol('#f'): false,
        Symbol('='): _applicative(equals, '='),
        Symbol('<'): _applicative(less_than, '<'),
    })


def make_world() -> Environment:
    """Create a parentless root environment holding the bootstrap primitives."""
    world = make_environment(None)
    register(world)
    return world


# Process-wide root environment, created on first use.
_world: Optional[Environment] = None


def get_world() -> Environment:
    global _world
    if _world is None:
        _world = make_world()
    return _world
