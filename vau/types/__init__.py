from vau.types.nil import Nil, NilType
from vau.types.symbol import Symbol
from vau.types.pair import Pair, Str, head, tail, iter_list, to_list
from vau.types.environment import Environment, make_environment, lookup, define
from vau.types.combiner import (
    Combiner,
    Operative,
    PrimitiveOperative,
    Applicative,
    CompoundOperative,
    wrap,
    unwrap,
)
from vau.types.predicates import (
    is_symbol,
    is_string,
    is_list,
    is_pair,
    is_applicable_list,
    is_number,
    is_combiner,
    is_operative,
    is_applicative,
    is_native,
    is_environment,
)
