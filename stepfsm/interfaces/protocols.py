# stepfsm/interfaces/protocols.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Logger(Protocol):
    """
    Logger protocol for type checking.

    Methods:
        debug(): Emit a debug record, formatting ``msg % args`` lazily.
        error(): Emit an error record, formatting ``msg % args`` lazily.

    Any ``logging.Logger`` or ``logging.LoggerAdapter`` satisfies this
    protocol. The machine only uses it for observability; no behavior
    depends on what the logger does with the records.
    """

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log a debug-level message."""
        ...

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log an error-level message."""
        ...


@runtime_checkable
class Hook(Protocol):
    """
    Lifecycle hook protocol for type checking.

    Methods:
        on_enter(state): Called after the machine enters a state.
        on_exit(state): Called before the machine leaves a state.
        on_error(error): Called when a step fails in work or completion.

    Runtime Invariants:
    - Hooks are only notified of real state changes. Re-setting the state
      that is already current does not call on_exit/on_enter.

    Error Handling:
    - Exceptions raised by a hook propagate to whoever drove the machine.
      Hooks that should never fail must catch their own errors.
    - An exception raised by on_error replaces the step failure it was
      reporting; that failure is kept as the hook error's __cause__.

    The HookManager tolerates objects that implement only some of these
    methods; the protocol describes the full surface.
    """

    def on_enter(self, state: Any) -> None:
        ...

    def on_exit(self, state: Any) -> None:
        ...

    def on_error(self, error: Exception) -> None:
        ...
