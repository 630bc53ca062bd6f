# Core type aliases for the vau data model.
# Code and data share one representation: Nil, Pair, Str, Symbol, numbers,
# native Python callables, Combiner instances and Environments.
#
# Naming guidance:
# - Expression: anything the evaluator can be handed or can return.
# - HostFunction: a native function, called as fn(environment, *operands).

from typing import Any, Callable

Expression = Any

HostFunction = Callable[..., Expression]
