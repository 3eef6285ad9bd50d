# tests/unit/test_errors.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details


def test_error_hierarchy(error_classes):
    StepFSMError, TransitionError, MachineNotStartedError = error_classes
    assert issubclass(StepFSMError, Exception)
    assert issubclass(TransitionError, StepFSMError)


def test_not_started_error_escapes_exception_handlers(error_classes):
    _, _, MachineNotStartedError = error_classes
    assert issubclass(MachineNotStartedError, BaseException)
    assert not issubclass(MachineNotStartedError, Exception)


def test_exceptions_instantiation(error_classes):
    StepFSMError, TransitionError, MachineNotStartedError = error_classes
    e = TransitionError("Bad transition")
    assert str(e) == "Bad transition"
    e = MachineNotStartedError("no current state!")
    assert str(e) == "no current state!"
