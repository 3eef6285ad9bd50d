# stepfsm/core/state_machine.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple

from stepfsm.core.errors import MachineNotStartedError, TransitionError
from stepfsm.core.hooks import HookManager
from stepfsm.core.states import State
from stepfsm.core.transitions import Transition
from stepfsm.interfaces.protocols import Logger
from stepfsm.interfaces.types import Predicate, StateName

_default_logger = logging.getLogger(__name__)


class StateMachine:
    """
    A finite state machine driven one step at a time by an external
    reconciliation loop.

    Each call to ``step`` evaluates the guards leaving the current state in
    the order they were registered, follows the first one that holds, then
    runs the current state's work and completion callbacks. The machine never
    schedules itself and holds no locks; give each reconciled entity its own
    instance.
    """

    def __init__(
        self,
        logger: Optional[Logger] = None,
        hooks: Optional[List] = None,
        initial_state: Optional[State] = None,
    ):
        """
        :param logger: Logger used for transition and failure records. Defaults to this module's logger.
        :param hooks: Optional list of hook objects implementing on_enter, on_exit, on_error.
        :param initial_state: Optional state to start in, applied through set_state.
        """
        self._logger = logger if logger is not None else _default_logger
        self._hooks = HookManager(hooks)

        self._states: Dict[StateName, State] = {}
        self._transitions: Dict[StateName, List[Transition]] = {}
        self._current_transitions: Tuple[Transition, ...] = ()
        self._current_state: Optional[State] = None

        if initial_state is not None:
            self.set_state(initial_state)

    @property
    def current_state(self) -> Optional[State]:
        """Get the current active state, or None before the first set_state."""
        return self._current_state

    @property
    def states(self) -> Mapping[StateName, State]:
        """Read-only view of every registered state, keyed by name."""
        return MappingProxyType(self._states)

    @property
    def current_transitions(self) -> Tuple[Transition, ...]:
        """Transitions leaving the current state, in evaluation order."""
        return self._current_transitions

    def transitions_from(self, name: StateName) -> Tuple[Transition, ...]:
        """Return the transitions registered with ``name`` as source, in registration order."""
        return tuple(self._transitions.get(name, ()))

    def is_terminal(self) -> bool:
        """True when the current state has no outgoing transitions at all."""
        return self._current_state is not None and not self._current_transitions

    def add_transition(self, source: State, target: State, predicate: Predicate) -> None:
        """
        Register a guarded edge from ``source`` to ``target``.

        Both states are (re)registered under their names; a later registration
        of the same name replaces the earlier definition in ``states``. Edges
        leaving a state are evaluated in the order they were added.

        :param source: State the edge leaves.
        :param target: State the edge enters.
        :param predicate: No-argument callable deciding whether the edge is taken.
        """
        transition = Transition(source=source, target=target, predicate=predicate)
        self._transitions.setdefault(source.name, []).append(transition)

        self._states[source.name] = source
        self._states[target.name] = target

        # keep the cache in step when wiring edges onto the active state
        if source.same_as(self._current_state):
            self._current_transitions = tuple(self._transitions[source.name])

    def set_state(self, state: State) -> None:
        """
        Make ``state`` the current state.

        Setting the state that is already current (by name) does nothing: no
        log record, no hooks, and the cached transitions stay as they are.

        :param state: The state to activate.
        """
        previous = self._current_state
        if state.same_as(previous):
            return

        if previous is not None:
            self._logger.debug("Transitioning from %s to %s.", previous.name, state.name)
            self._hooks.execute_on_exit(previous)
        else:
            self._logger.debug("Setting starting state %s.", state.name)

        previous_transitions = self._current_transitions
        self._current_state = state
        self._current_transitions = tuple(self._transitions.get(state.name, ()))

        try:
            self._hooks.execute_on_enter(state)
        except Exception:
            self._current_state = previous
            self._current_transitions = previous_transitions
            raise

    def step(self) -> Any:
        """
        Run one reconciliation step.

        Guards are evaluated first, against the state that is current when the
        step begins. Work and completion then run for the state that is current
        after any transition.

        :return: Whatever the current state's work returned.
        :raises Exception: A predicate, work or completion failure, unchanged.
            A completion failure supersedes the work outcome. Completion is
            skipped when work is interrupted by a non-Exception (KeyboardInterrupt,
            SystemExit).
        :raises TransitionError: If the selected transition could not be applied.
        :raises MachineNotStartedError: If no state has ever been set.
        """
        transition = self._select_transition()
        if transition is not None:
            self._apply(transition)

        state = self._current_state
        if state is None:
            raise MachineNotStartedError("no current state!")

        try:
            try:
                result = state.work()
            except Exception:
                self._complete(state)
                raise
            self._complete(state)
        except Exception as error:
            self._notify_error(error)
            raise
        return result

    def _select_transition(self) -> Optional[Transition]:
        """Return the first transition whose predicate holds, or None."""
        for transition in self._current_transitions:
            if transition.evaluate():
                return transition
        return None

    def _apply(self, transition: Transition) -> None:
        try:
            self.set_state(transition.target)
        except Exception as e:
            raise TransitionError(
                f"Failed to transition from {transition.source.name} to {transition.target.name}: {e}"
            ) from e

    def _complete(self, state: State) -> None:
        if state.on_completion is None:
            return
        try:
            state.on_completion()
        except Exception as e:
            self._logger.error("error running on_completion for state %s: %s", state.name, e)
            raise

    def _notify_error(self, error: Exception) -> None:
        try:
            self._hooks.execute_on_error(error)
        except Exception as hook_error:
            raise hook_error from error
