"""
Core package providing the step-driven state machine.

Import order matters to avoid circular dependencies: value types first, then
the machine that uses them.
"""

from .errors import MachineNotStartedError, StepFSMError, TransitionError
from .states import State
from .transitions import Transition
from .result import Result
from .hooks import HookManager
from .state_machine import StateMachine

__all__ = [
    # Errors
    "StepFSMError",
    "TransitionError",
    "MachineNotStartedError",
    # Value types
    "State",
    "Transition",
    "Result",
    # Machine
    "HookManager",
    "StateMachine",
]
