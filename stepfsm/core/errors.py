# stepfsm/core/errors.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details


class StepFSMError(Exception):
    """
    Base exception class for errors raised by the state machine engine itself.
    Errors raised by predicates, work or completion callables are propagated
    unchanged and do not derive from this class.
    """


class TransitionError(StepFSMError):
    """
    Raised when a selected transition cannot be applied to the machine.
    """


class MachineNotStartedError(BaseException):
    """
    Raised when a step is requested before any state has ever been set.

    This is an invariant violation, not a recoverable condition: it derives
    from BaseException so that driving loops catching ``Exception`` for
    retry purposes do not absorb it.
    """
