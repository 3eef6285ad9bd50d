# tests/unit/test_hooks.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from typing import List

from stepfsm.core.hooks import HookManager
from stepfsm.core.states import State
from stepfsm.interfaces.protocols import Hook


def test_hook_manager(dummy_hooks: List[Hook], state_a: State):
    hm = HookManager(hooks=dummy_hooks)
    hm.execute_on_enter(state_a)
    dummy_hooks[0].on_enter.assert_called_once_with(state_a)
    hm.execute_on_exit(state_a)
    dummy_hooks[0].on_exit.assert_called_once_with(state_a)
    err = Exception("TestError")
    hm.execute_on_error(err)
    dummy_hooks[0].on_error.assert_called_once_with(err)


def test_hook_manager_register(dummy_hooks: List[Hook]):
    hm = HookManager()
    hm.register_hook(dummy_hooks[0])
    # Now hook is included in manager's list
    assert hm.hooks == dummy_hooks


def test_partial_hooks_are_tolerated(state_a: State):
    class EnterOnly:
        def __init__(self):
            self.entered = []

        def on_enter(self, state):
            self.entered.append(state.name)

    hook = EnterOnly()
    hm = HookManager([hook])
    hm.execute_on_enter(state_a)
    hm.execute_on_exit(state_a)
    hm.execute_on_error(RuntimeError("ignored"))
    assert hook.entered == ["A"]
