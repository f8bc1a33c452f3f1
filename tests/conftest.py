"""Shared fixtures and helpers for retainmut tests."""

from collections.abc import Callable

import pytest

from retainmut import Slot


class Resource:
    """Element that records how often it was closed."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.closed = 0

    def close(self) -> None:
        self.closed += 1

    def __repr__(self) -> str:
        return f"Resource({self.name!r})"


class RecordingPredicate:
    """Predicate wrapper that records the original index of every visited slot."""

    def __init__(self, func: Callable[[Slot], bool]) -> None:
        self.func = func
        self.visited: list[int] = []

    def __call__(self, slot: Slot) -> bool:
        self.visited.append(slot.index)
        return self.func(slot)


@pytest.fixture
def numbers() -> list[int]:
    return [1, 2, 3, 4, 5, 6]


@pytest.fixture
def resources() -> list[Resource]:
    return [Resource(name) for name in "abcde"]


@pytest.fixture
def always_true() -> RecordingPredicate:
    return RecordingPredicate(lambda slot: True)


@pytest.fixture
def always_false() -> RecordingPredicate:
    return RecordingPredicate(lambda slot: False)


def double_even(slot: Slot[int]) -> bool:
    if slot.value % 2:
        return False

    slot.value *= 2
    return True
