import pytest

from vau.builtin.env_builtin import make_world
from vau.interpreter import Interpreter
from vau.reader.parser import parse_to_expression
from vau.evaluation.evaluator import evaluate
from vau.types.environment import make_environment


@pytest.fixture
def world():
    """A fresh root environment with the bootstrap primitives."""
    return make_world()


@pytest.fixture
def env(world):
    return make_environment(world)


@pytest.fixture
def interp(monkeypatch):
    monkeypatch.delenv("VAU_PRELUDE_PATH", raising=False)
    monkeypatch.delenv("VAU_RECURSION_LIMIT", raising=False)
    return Interpreter(prelude=None)


@pytest.fixture
def run(world):
    """Read one expression from source and evaluate it in the world."""
    def _run(source: str):
        return evaluate(parse_to_expression(source), world)
    return _run
