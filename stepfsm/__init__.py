"""stepfsm: a small finite state machine for reconciliation loops

The caller owns the loop. Each tick it calls ``StateMachine.step()``, which
evaluates the guards leaving the current state in registration order, follows
the first one that holds, then runs the current state's work and completion
callbacks and hands the work's result back to the caller.

Responsibilities:
    - State and guarded transition registration
    - Guard evaluation and state changes
    - Running state work and completion callbacks
    - Lifecycle hooks and transition logging

Not covered:
    - Scheduling, retries and backoff (the caller's loop)
    - Persistence of the current state
    - Sharing one machine between threads
"""

from stepfsm.core import (
    HookManager,
    MachineNotStartedError,
    Result,
    State,
    StateMachine,
    StepFSMError,
    Transition,
    TransitionError,
)

__version__ = "0.1.0"

__all__ = [
    "HookManager",
    "MachineNotStartedError",
    "Result",
    "State",
    "StateMachine",
    "StepFSMError",
    "Transition",
    "TransitionError",
]
