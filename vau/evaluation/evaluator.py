"""Core evaluator for vau.

A plain recursive-descent evaluator: the depth of the host stack follows the
nesting depth of the expression being evaluated.
"""

from __future__ import annotations

from vau import Expression
from vau.evaluation.apply import apply
from vau.types.environment import Environment, lookup
from vau.types.nil import Nil
from vau.types.pair import Pair, Str
from vau.types.symbol import Symbol


def evaluate(expression: Expression, environment: Environment | None) -> Expression:
    """Evaluate `expression` in `environment`.

    Only the operator position of a combination is evaluated here; the operand
    list goes to `apply` untouched.
    """
    match expression:
        case Pair(head=operator_expression, tail=operands):
            operator = evaluate(operator_expression, environment)
            return apply(operator, operands, environment)
        case Symbol():
            return lookup(expression, environment)
        case Str(value=value):
            return value
        case None:
            return Nil

    # Atoms, including Nil, evaluate to themselves.
    return expression
