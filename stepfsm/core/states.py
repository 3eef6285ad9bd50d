# stepfsm/core/states.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from stepfsm.interfaces.types import Completion, Work


@dataclass(frozen=True)
class State:
    """
    A named unit of reconciliation work. The machine runs ``work`` every step
    while this state is current, followed by ``on_completion`` when one is set.

    States are immutable value records. The machine identifies them by
    ``name`` alone, so two State objects carrying the same name are the same
    state as far as transitions are concerned.
    """

    name: str
    work: Work
    on_completion: Optional[Completion] = None

    def __post_init__(self) -> None:
        """
        Reject malformed states at construction time so that registering
        them with a machine cannot fail later.

        :raises TypeError: If name is not a string or a callback is not callable.
        :raises ValueError: If name is empty.
        """
        if not isinstance(self.name, str):
            raise TypeError("State name must be a string")
        if not self.name:
            raise ValueError("State name cannot be empty")
        if not callable(self.work):
            raise TypeError(f"State '{self.name}' work must be callable")
        if self.on_completion is not None and not callable(self.on_completion):
            raise TypeError(f"State '{self.name}' on_completion must be callable or None")

    def same_as(self, other: Optional["State"]) -> bool:
        """Return True if ``other`` is a state with the same name."""
        return other is not None and other.name == self.name
