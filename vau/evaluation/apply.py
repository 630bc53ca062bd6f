"""Application engine for vau.

`apply` is the single place where an operator meets its operand list. The
operand list is always passed through unevaluated; whether and when operands
are evaluated is decided by the combiner.
"""

from vau import Expression
from vau.errors import VauInvocationError
from vau.types.combiner import Combiner, check_operand_count, is_native, signature_of
from vau.types.environment import Environment
from vau.types.pair import iter_list


def apply(operator: Expression, operands: Expression, environment: Environment) -> Expression:
    """Invoke `operator` on the unevaluated `operands` list.

    - Combiners dispatch on their kind via `invoke`.
    - Native functions are called as `operator(environment, *operands)`,
      after the operand count is checked against their signature.
    - Anything else raises VauInvocationError.
    """
    if isinstance(operator, Combiner):
        return operator.invoke(operands, environment)
    if is_native(operator):
        args = list(iter_list(operands))
        name = getattr(operator, "__name__", "native")
        check_operand_count(signature_of(operator), name, environment, args)
        return operator(environment, *args)
    raise VauInvocationError(operator)
