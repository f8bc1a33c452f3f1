from collections.abc import MutableSequence
from typing import Any

from . import constants

__all__ = ["BorrowError", "Slot"]


class BorrowError(RuntimeError):
    """Raised when a sequence or slot is accessed outside of its exclusive borrow."""


class Slot[T]:
    """Mutable reference to the element under the read cursor of `retain_mut`.

    A slot is only valid while the predicate it was handed to is running.
    Reading `value` returns the element, assigning to it replaces the element
    in the underlying sequence.
    In-place changes to mutable elements are visible without reassignment.

    Examples:
        >>> values = [1, 2]
        >>> slot = Slot(values, 1)
        >>> slot.value *= 10
        >>> values
        [1, 20]
        >>> slot.index
        1
    """

    __slots__ = ("_sequence", "_index", "_alive")

    _sequence: MutableSequence[T] | Any
    _index: int
    _alive: bool

    def __init__(self, sequence: MutableSequence[T] | Any, index: int) -> None:
        self._sequence = sequence
        self._index = index
        self._alive = True

    @property
    def index(self) -> int:
        """Original index of the element, retention does not shift it during the pass."""
        return self._index

    @property
    def alive(self) -> bool:
        return self._alive

    @property
    def value(self) -> T:
        self._check()
        return self._sequence[self._index]

    @value.setter
    def value(self, value: T) -> None:
        self._check()
        self._sequence[self._index] = value

    def release(self) -> None:
        if constants.STRICT_SLOTS:
            self._alive = False

    def _check(self) -> None:
        if not self._alive:
            raise BorrowError(
                f"Slot for index {self._index} was used after its predicate returned"
            )

    def __repr__(self) -> str:
        if not self._alive:
            return f"Slot(index={self._index}, released)"

        return f"Slot(index={self._index}, value={self.value!r})"
