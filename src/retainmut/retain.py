from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Callable, MutableSequence
from typing import Any, override

from . import constants
from .helpers import get_logger
from .slot import BorrowError, Slot
from .typing import DiscardFunc, MutPredicate

__all__ = ["RetainMutable", "RetainMutMixin", "retain_mut"]

logger = get_logger(__name__)

type TruncateFunc = Callable[[Any, int, int], None]

# ids of the sequences currently borrowed by a running pass
_borrowed: set[int] = set()


class RetainMutable[T](ABC):
    """Capability of a sequence type to retain its elements in place.

    `retain_mut` hands the call to any instance of this class,
    so custom containers can provide their own compaction.
    """

    @abstractmethod
    def retain_mut(
        self,
        predicate: MutPredicate[T],
        /,
        *,
        on_discard: DiscardFunc[T] | None = None,
    ) -> None: ...


class RetainMutMixin[T](RetainMutable[T]):
    """Adds a `retain_mut` method to a `MutableSequence` subclass.

    Examples:
        >>> class Stack(RetainMutMixin[int], list[int]):
        ...     pass
        >>> stack = Stack([3, 4, 5])
        >>> stack.retain_mut(lambda slot: slot.value != 4)
        >>> stack
        [3, 5]
    """

    __slots__ = ()

    @override
    def retain_mut(
        self,
        predicate: MutPredicate[T],
        /,
        *,
        on_discard: DiscardFunc[T] | None = None,
    ) -> None:
        _retain(self, predicate, on_discard, _truncator(self))


def retain_mut[T](
    sequence: MutableSequence[T] | deque[T] | RetainMutable[T],
    predicate: MutPredicate[T],
    /,
    *,
    on_discard: DiscardFunc[T] | None = None,
) -> None:
    """Retains only the elements for which the predicate returns true.

    Every element is visited exactly once in its original order and handed to
    the predicate as a `Slot`, through which it may be read and modified.
    Kept elements (including their modifications) are compacted towards the
    front of the same sequence in their original order,
    then the remaining tail is deleted.
    No second sequence is built.

    Args:
        sequence: The sequence to filter in place. It must not be accessed
            by anything else while the call runs.
        predicate: Receives a slot per element and returns whether to keep it.
            It must not resize or reorder the sequence.
        on_discard: Called exactly once with every element that is not kept,
            before the next element is visited.

    Raises:
        TypeError: If the sequence is neither a `MutableSequence` nor `RetainMutable`.
        BorrowError: If the sequence is already being retained
            or the predicate changes its length.

    If the predicate (or `on_discard`) raises, the exception propagates
    unchanged. Elements decided before the failure are compacted as usual,
    the element being processed and all unvisited elements are kept
    unmodified behind them, so the resulting length is
    `kept + (len(sequence) - visited)`.
    An element whose `on_discard` call failed counts as discarded.
    If the predicate changes the length of the sequence, the pass stops with
    `BorrowError` and the sequence is left exactly as the predicate changed it.

    Every element is accessed by index. For a `deque` that is O(n) away from
    its ends, so a pass over a large deque takes quadratic time.

    Examples:
        >>> values = [1, 2, 3, 4, 5, 6]
        >>> def double_even(slot):
        ...     if slot.value % 2:
        ...         return False
        ...     slot.value *= 2
        ...     return True
        >>> retain_mut(values, double_even)
        >>> values
        [4, 8, 12]
        >>> queue = deque(["a", "bb", "ccc"])
        >>> retain_mut(queue, lambda slot: len(slot.value) > 1)
        >>> queue
        deque(['bb', 'ccc'])
    """
    if isinstance(sequence, RetainMutable):
        sequence.retain_mut(predicate, on_discard=on_discard)
        return

    if not isinstance(sequence, MutableSequence):
        raise TypeError(
            f"Expected a MutableSequence or RetainMutable, but got {type(sequence)}"
        )

    _retain(sequence, predicate, on_discard, _truncator(sequence))


def _retain[T](
    sequence: MutableSequence[T] | Any,
    predicate: MutPredicate[T],
    on_discard: DiscardFunc[T] | None,
    truncate: TruncateFunc,
) -> None:
    key = id(sequence)

    if key in _borrowed:
        raise BorrowError(f"{type(sequence).__name__} is already being retained")

    _borrowed.add(key)
    total = len(sequence)
    # write cursor, everything before it is kept
    kept = 0
    # elements in [kept, visited) are stale and deleted at the end
    visited = 0

    try:
        for index in range(total):
            slot = Slot(sequence, index)

            try:
                keep = predicate(slot)
            finally:
                slot.release()

            if len(sequence) != total:
                raise BorrowError("Predicate changed the length of the sequence")

            visited = index + 1

            if keep:
                if kept < index:
                    sequence[kept] = sequence[index]

                kept += 1
            elif on_discard is not None:
                on_discard(sequence[index])

    finally:
        _borrowed.discard(key)

        if len(sequence) == total:
            truncate(sequence, kept, visited)

    if logger.isEnabledFor(constants.LOG_LEVEL):
        logger.log(constants.LOG_LEVEL, f"Retained {kept}/{total} elements")


def _truncator(sequence: Any) -> TruncateFunc:
    if isinstance(sequence, deque):
        return _truncate_deque

    return _truncate_slice


def _truncate_slice(sequence: MutableSequence[Any], start: int, stop: int) -> None:
    if start < stop:
        del sequence[start:stop]


def _truncate_deque(sequence: deque[Any], start: int, stop: int) -> None:
    count = stop - start

    if count <= 0:
        return

    if stop == len(sequence):
        for _ in range(count):
            sequence.pop()

        return

    sequence.rotate(-start)

    for _ in range(count):
        sequence.popleft()

    sequence.rotate(start)
