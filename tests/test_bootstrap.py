import logging

import pytest
from hypothesis import given, strategies as st

from vau.builtin.env_builtin import false, get_world, make_world, true
from vau.errors import (
    VauArityError,
    VauInvocationError,
    VauSyntaxError,
    VauTypeError,
)
from vau.types.combiner import Applicative, CompoundOperative, PrimitiveOperative
from vau.types.environment import make_environment
from vau.types.nil import Nil
from vau.types.pair import to_list
from vau.types.symbol import Symbol


# -----------------------------------------------------
# World
# -----------------------------------------------------

def test_world_has_no_parent_and_holds_primitives(world):
    assert world.parent is None
    for name in ("eval", "wrap", "unwrap", "$define!", "$vau", "read", "list?",
                 "operative?", "applicative?", "number?", "symbol?", "nil",
                 "head", "tail", "#t", "#f", "=", "<", "current-world"):
        assert name in world


def test_get_world_is_created_once():
    assert get_world() is get_world()
    assert "$vau" in get_world()


def test_make_world_returns_independent_worlds():
    a, b = make_world(), make_world()
    a.define("only-a", 1)
    assert "only-a" not in b


def test_current_world(world, run):
    assert run("(current-world)") is world


# -----------------------------------------------------
# $define!
# -----------------------------------------------------

def test_define_then_lookup(world, run):
    assert run("($define! y 42)") == 42
    assert run("y") == 42
    assert world.lookup("y") == 42


def test_define_evaluates_its_value(run):
    run("($define! s \"ab\")")
    assert run("(head s)") == 97


@pytest.mark.parametrize("source", ["($define! 1 2)", '($define! "s" 2)', "($define! (a) 2)"])
def test_define_requires_a_symbol(run, source):
    with pytest.raises(VauTypeError) as exc:
        run(source)
    assert exc.value.expected == "symbol"


def test_define_checks_the_name_before_evaluating(world, run):
    with pytest.raises(VauTypeError):
        run("($define! 1 ($define! z 3))")
    assert "z" not in world


def test_define_arity(run):
    with pytest.raises(VauArityError):
        run("($define! x)")


def test_define_logs_at_debug_level(run, caplog):
    caplog.set_level(logging.DEBUG, logger="vau.builtin.env_builtin")
    run("($define! logged 1)")
    assert "defined logged" in caplog.text


# -----------------------------------------------------
# $vau
# -----------------------------------------------------

def test_vau_returns_an_unwrapped_operative(run):
    op = run("($vau ((x)) x)")
    assert isinstance(op, CompoundOperative)
    assert run("(operative? ($vau ((x)) x))") is true
    assert run("(applicative? ($vau ((x)) x))") is false


def test_vau_binds_fixed_and_rest_formals(run):
    assert run("(($vau ((a) . rest) a) 1 2 3)") == 1
    assert run("(($vau ((a) . rest) rest) 1 2 3)") == to_list([2, 3])


def test_vau_accepts_a_lone_symbol_before_the_rest_formal(run):
    assert run("(($vau (a . rest) a) 1 2 3)") == 1
    assert run("(($vau (a . rest) rest) 1 2 3)") == to_list([2, 3])
    assert run("(($vau (a . rest) rest) 1)") is Nil


def test_vau_with_only_a_rest_formal(run):
    assert run("(($vau (() . all) all) 1 2)") == to_list([1, 2])


def test_vau_with_empty_formals(run):
    assert run("(($vau () 5))") == 5
    assert run("(($vau (()) 6))") == 6


def test_vau_operands_are_not_evaluated(run):
    assert run("(($vau ((x)) x) (no such thing))") == to_list(
        [Symbol("no"), Symbol("such"), Symbol("thing")]
    )


def test_vau_closure_is_a_child_of_the_caller(world, run):
    op = run("($vau ((x)) x)")
    assert op.closure.parent is world
    assert op.closure is not world


def test_vau_body_sees_later_definitions(run):
    run("($define! f ($vau (()) later))")
    run("($define! later 5)")
    assert run("(f)") == 5


def test_vau_body_definitions_stay_local(world, run):
    run("($define! g ($vau (()) ($define! inner 1) inner))")
    assert run("(g)") == 1
    assert "inner" not in world


@pytest.mark.parametrize("source", ["($vau 1 x)", "($vau ((1)) x)", "($vau ((a) . 3) x)", "($vau ((a . b)) x)"])
def test_vau_rejects_malformed_formals(run, source):
    with pytest.raises(VauTypeError):
        run(source)


@pytest.mark.parametrize("source", ["($vau)", "($vau ((x)))"])
def test_vau_arity(run, source):
    with pytest.raises(VauArityError):
        run(source)


# -----------------------------------------------------
# Derived forms built from $vau
# -----------------------------------------------------

def test_quote_from_vau(run):
    run("($define! $quote ($vau ((x)) x))")
    assert run("($quote (a b))") == to_list([Symbol("a"), Symbol("b")])


def test_if_from_boolean_selectors(run):
    run("($define! $if ($vau ((c then else)) (eval (eval ((eval c) then else)))))")
    assert run("($if (< 1 2) 10 20)") == 10
    assert run("($if (< 2 1) 10 20)") == 20
    # The branch that is not selected is never evaluated.
    assert run("($if (= 1 1) 1 (undefined-thing))") == 1


def test_wrapped_vau_evaluates_operands_in_order(world, run):
    assert run("((wrap ($vau ((a b)) b)) ($define! q 1) q)") == 1
    assert world.lookup("q") == 1


# -----------------------------------------------------
# eval / wrap / unwrap / read
# -----------------------------------------------------

def test_eval_defaults_to_caller_environment(run):
    run("($define! x 3)")
    assert run('(eval (read "x"))') == 3
    assert run('(eval (read "(head \\"ab\\")"))') == 97


def test_eval_in_an_explicit_environment(world, run):
    other = make_environment(world)
    other.define("x", "from other")
    world.define("there", other)
    assert run('(eval (read "x") there)') == "from other"
    run("($define! x 3)")
    assert run('(eval (read "x") (current-world))') == 3


def test_eval_rejects_non_environments(run):
    with pytest.raises(VauTypeError) as exc:
        run("(eval 1 2)")
    assert exc.value.expected == "environment"


def test_wrap_and_unwrap_applicatives(run):
    assert isinstance(run("(unwrap head)"), PrimitiveOperative)
    assert isinstance(run("(wrap (unwrap head))"), Applicative)
    assert run('((wrap (unwrap head)) "ab")') == 97


@pytest.mark.parametrize("source", ["(wrap 1)", "(unwrap 1)", "(unwrap $vau)"])
def test_wrap_and_unwrap_type_errors(run, source):
    with pytest.raises(VauTypeError):
        run(source)


def test_read_returns_unevaluated_expressions(run):
    assert run('(read "(a b)")') == to_list([Symbol("a"), Symbol("b")])
    assert run('(read "42")') == 42


def test_read_errors(run):
    with pytest.raises(VauTypeError):
        run("(read 42)")
    with pytest.raises(VauSyntaxError):
        run('(read "(")')


# -----------------------------------------------------
# Predicates and lists
# -----------------------------------------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(list? nil)", true),
        ('(list? "ab")', true),
        ('(list? (read "(1 2)"))', true),
        ("(list? 1)", false),
        ("(number? 1)", true),
        ("(number? 1.5)", true),
        ("(number? nil)", false),
        ('(symbol? (read "a"))', true),
        ('(symbol? "a")', false),
        ("(symbol? 1)", false),
        ("(operative? $vau)", true),
        ("(operative? #t)", true),
        ("(operative? head)", false),
        ("(applicative? head)", true),
        ("(applicative? (unwrap head))", false),
    ],
)
def test_predicates(run, source, expected):
    assert run(source) is expected


def test_list_primitives(run):
    assert run("nil") is Nil
    assert run('(head "ab")') == 97
    assert run('(tail "ab")') == "b"
    assert run('(head (read "(1 2)"))') == 1
    assert run('(tail (read "(1 2)"))') == to_list([2])
    assert run("(head nil)") is Nil


def test_head_of_non_list(run):
    with pytest.raises(VauTypeError):
        run("(head 1)")


# -----------------------------------------------------
# Booleans, equality and ordering
# -----------------------------------------------------

@given(st.integers(), st.integers())
def test_boolean_selector_law(x, y):
    env = make_environment(None)
    assert true(env, x, y) == x
    assert false(env, x, y) == y


def test_booleans_select_unevaluated_operands(run):
    assert run("(#t 1 2)") == 1
    assert run("(#f 1 2)") == 2
    assert run("(#t a b)") == Symbol("a")


@pytest.mark.parametrize(
    "source",
    ["(#t)", "(#f 1)", "(#t 1 2 3)", "((wrap #t) 1 2 3)", "((wrap #f) 1)"],
)
def test_booleans_require_exactly_two_operands(run, source):
    with pytest.raises(VauArityError):
        run(source)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(= 1 1)", true),
        ("(= 1 2)", false),
        ("(= 1 1.0)", true),
        ('(= "ab" "ab")', true),
        ("(= nil nil)", true),
        ('(= (read "a") (read "a"))', true),
        ('(= (read "(1)") (read "(1)"))', false),
        ("(= head head)", true),
        ("(= head tail)", false),
        ("(< 1 2)", true),
        ("(< 2 1)", false),
        ("(< 1 1)", false),
    ],
)
def test_equality_and_ordering(run, source, expected):
    assert run(source) is expected


def test_less_than_requires_numbers(run):
    with pytest.raises(VauTypeError) as exc:
        run('(< "a" 1)')
    assert exc.value.expected == "number"


def test_calling_a_number_fails(run):
    with pytest.raises(VauInvocationError):
        run("(1 2)")
