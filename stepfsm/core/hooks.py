# stepfsm/core/hooks.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Optional

if TYPE_CHECKING:
    from stepfsm.core.states import State


class HookManager:
    """
    Manages the registration and execution of hooks that listen to state machine
    lifecycle events (on_enter, on_exit, on_error). Users can attach metrics,
    auditing, or custom side effects without altering core logic.

    A hook may implement any subset of the lifecycle methods.
    """

    def __init__(self, hooks: Optional[List[Any]] = None) -> None:
        """
        Initialize with an optional list of hook objects.
        """
        self._hooks: List[Any] = list(hooks or [])

    def register_hook(self, hook: Any) -> None:
        """
        Add a new hook to the manager's list of hooks.

        :param hook: An object implementing some of the Hook protocol methods.
        """
        self._hooks.append(hook)

    @property
    def hooks(self) -> List[Any]:
        return list(self._hooks)

    def execute_on_enter(self, state: "State") -> None:
        """
        Run all hooks' on_enter logic after entering a state.
        """
        self._invoke("on_enter", state)

    def execute_on_exit(self, state: "State") -> None:
        """
        Run all hooks' on_exit logic before leaving a state.
        """
        self._invoke("on_exit", state)

    def execute_on_error(self, error: Exception) -> None:
        """
        Run all hooks' on_error logic when a step fails.
        """
        self._invoke("on_error", error)

    def _invoke(self, method: str, arg: Any) -> None:
        for hook in self._hooks:
            fn = getattr(hook, method, None)
            if fn is not None:
                fn(arg)
