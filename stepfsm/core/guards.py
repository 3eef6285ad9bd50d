# stepfsm/core/guards.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from stepfsm.interfaces.types import Predicate


def always() -> Predicate:
    """Return a predicate that is always satisfied."""
    return lambda: True


def never() -> Predicate:
    """Return a predicate that is never satisfied."""
    return lambda: False


def negate(predicate: Predicate) -> Predicate:
    """
    Invert a predicate. Errors raised by the wrapped predicate propagate.
    """

    def _negated() -> bool:
        return not predicate()

    return _negated


def all_of(*predicates: Predicate) -> Predicate:
    """
    Combine predicates so that all must hold. Evaluation stops at the first
    predicate that is not satisfied; later predicates are not called.
    With no predicates the result is always satisfied.
    """

    def _all() -> bool:
        for p in predicates:
            if not p():
                return False
        return True

    return _all


def any_of(*predicates: Predicate) -> Predicate:
    """
    Combine predicates so that one must hold. Evaluation stops at the first
    satisfied predicate. With no predicates the result is never satisfied.
    """

    def _any() -> bool:
        for p in predicates:
            if p():
                return True
        return False

    return _any
