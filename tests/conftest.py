import pytest

from cinder.types.environment import Environment
from cinder.builtin.env_builtin import register
from cinder.interpreter import Interpreter


@pytest.fixture
def env():
    """Fresh global environment with builtins loaded."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def interp():
    return Interpreter()
