# tests/conftest.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from unittest.mock import MagicMock

import pytest


def pytest_configure(config):
    """Register custom marks."""
    config.addinivalue_line("markers", "property: mark test as a property-based test")
    config.addinivalue_line("markers", "integration: mark test as an integration scenario")


@pytest.fixture
def make_state():
    """Returns a factory building a State whose work is a MagicMock returning ``result``."""
    from stepfsm.core.states import State

    def _factory(name, result=None, on_completion=None):
        return State(name=name, work=MagicMock(name=f"{name}.work", return_value=result), on_completion=on_completion)

    return _factory


@pytest.fixture
def state_a(make_state):
    """State A, whose work returns 'ResultX'."""
    return make_state("A", result="ResultX")


@pytest.fixture
def state_b(make_state):
    """State B, whose work returns 'ResultY'."""
    return make_state("B", result="ResultY")


@pytest.fixture
def state_c(make_state):
    """State C, whose work returns 'ResultZ'."""
    return make_state("C", result="ResultZ")


@pytest.fixture
def mock_logger():
    """A logger double recording debug/error calls."""
    return MagicMock(name="logger")


@pytest.fixture
def machine(mock_logger):
    """An empty machine with an injected logger and no hooks."""
    from stepfsm.core.state_machine import StateMachine

    return StateMachine(logger=mock_logger)


@pytest.fixture
def dummy_hooks():
    """A list of hook mocks for testing HookManager."""
    hook = MagicMock()
    # hook should have on_enter(state), on_exit(state), on_error(error)
    hook.on_enter = MagicMock()
    hook.on_exit = MagicMock()
    hook.on_error = MagicMock()
    return [hook]


@pytest.fixture
def error_classes():
    """Provides a tuple of error classes for quick reference."""
    from stepfsm.core.errors import MachineNotStartedError, StepFSMError, TransitionError

    return (StepFSMError, TransitionError, MachineNotStartedError)
