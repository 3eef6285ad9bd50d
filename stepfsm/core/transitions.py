# stepfsm/core/transitions.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from dataclasses import dataclass

from stepfsm.core.states import State
from stepfsm.interfaces.types import Predicate


@dataclass(frozen=True)
class Transition:
    """
    Defines a possible path from one state to another, guarded by a predicate.
    The predicate takes no arguments; it closes over whatever context it needs
    to decide whether the machine should move to ``target``.
    """

    source: State
    target: State
    predicate: Predicate

    def evaluate(self) -> bool:
        """
        Evaluate the guard predicate.

        :return: True if the transition may be taken.
        :raises Exception: Whatever the predicate raises, unchanged.
        """
        return bool(self.predicate())
