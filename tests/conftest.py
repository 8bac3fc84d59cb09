import pytest

from lispy.builtin.env_builtin import register
from lispy.interpreter import Interpreter
from lispy.types.environment import Environment


@pytest.fixture
def env():
    """Fresh environment with builtins loaded."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def interp():
    """Interpreter whose definitions persist for the duration of one test."""
    it = Interpreter()
    yield it
    it.close()


@pytest.fixture
def run(interp):
    """Evaluate a line of source and return the printed result."""
    return interp.eval_to_string
