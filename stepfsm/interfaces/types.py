# stepfsm/interfaces/types.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from typing import Any, Callable

StateName = str

# Callback Types
Predicate = Callable[[], bool]
Work = Callable[[], Any]
Completion = Callable[[], None]
