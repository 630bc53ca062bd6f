import pytest

from vau.errors import VauNoEnvironment, VauReferenceError, VauTypeError
from vau.evaluation.evaluator import evaluate
from vau.types.environment import Environment, define, lookup, make_environment
from vau.types.pair import to_list
from vau.types.symbol import Symbol


@pytest.fixture
def parent():
    env = make_environment(None)
    env.define(Symbol("x"), 1)
    return env


def test_lookup_finds_local_binding(parent):
    assert lookup(Symbol("x"), parent) == 1
    assert lookup("x", parent) == 1


def test_child_shadows_parent(parent):
    child = make_environment(parent)
    define(Symbol("x"), 2, child)
    assert lookup("x", child) == 2
    assert lookup("x", parent) == 1


def test_child_falls_back_to_parent(parent):
    child = make_environment(parent)
    assert lookup("x", child) == 1
    assert child.find("x") is parent


def test_define_touches_only_the_local_frame(parent):
    child = make_environment(parent)
    assert define("y", 5, child) == 5
    assert "y" in child
    assert "y" not in parent


def test_later_parent_definitions_are_visible_to_children(parent):
    child = make_environment(parent)
    parent.define("late", 7)
    assert child.lookup("late") == 7
    parent.define("x", 10)
    assert child.lookup("x") == 10


def test_unbound_symbol_raises_reference_error(parent):
    with pytest.raises(VauReferenceError) as exc:
        lookup(Symbol("missing"), make_environment(parent))
    assert exc.value.name == "missing"


def test_lookup_without_environment():
    with pytest.raises(VauNoEnvironment):
        lookup(Symbol("x"), None)


def test_define_requires_a_symbol(parent):
    with pytest.raises(VauTypeError):
        parent.define(42, 1)


def test_current_world_returns_its_own_frame(parent):
    child = make_environment(parent)
    call = to_list([Symbol("current-world")])
    assert evaluate(call, child) is child
    assert evaluate(call, parent) is parent


def test_update_defines_many_bindings():
    env = Environment()
    env.update({Symbol("a"): 1, "b": 2})
    assert env.lookup("a") == 1
    assert env.lookup("b") == 2


def test_environment_rendering(parent):
    child = parent.child()
    child.define("y", 2)
    assert str(child) == "{y} -> ..."
    assert repr(child) == "<Environment chain: {y} -> {x}>"
