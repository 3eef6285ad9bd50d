# stepfsm/core/result.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Union


@dataclass(frozen=True)
class Result:
    """
    Reconciliation outcome returned by a state's work: whether the caller's
    driving loop should run the machine again, and after how long.

    The machine never looks inside a Result. It is provided for work
    callables that want the usual requeue semantics; any other return type
    works just as well.
    """

    requeue: bool = False
    requeue_after: timedelta = timedelta(0)

    def __post_init__(self) -> None:
        if self.requeue_after < timedelta(0):
            raise ValueError("requeue_after cannot be negative")

    @classmethod
    def after(cls, delay: Union[float, timedelta]) -> "Result":
        """
        Build a result asking to be run again after ``delay``.

        :param delay: Seconds, or a timedelta.
        """
        if not isinstance(delay, timedelta):
            delay = timedelta(seconds=delay)
        return cls(requeue=True, requeue_after=delay)

    def is_zero(self) -> bool:
        """True for the default result, which asks for nothing further."""
        return not self.requeue and not self.requeue_after
