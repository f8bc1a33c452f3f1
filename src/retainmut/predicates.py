from dataclasses import dataclass
from typing import override

from .helpers import get_metadata
from .slot import Slot
from .typing import (
    HasMetadata,
    JsonDict,
    MutPredicate,
    UpdateFunc,
    ValuePredicate,
)

__all__ = [
    "chain",
    "invert",
    "keep_if",
    "update",
]


@dataclass(slots=True, frozen=True)
class keep_if[T](MutPredicate[T]):
    """Keeps elements for which a read-only predicate holds.

    Args:
        func: Receives the element value and returns whether to keep it.

    Examples:
        >>> from retainmut import retain_mut
        >>> values = [1, 2, 3, 4]
        >>> retain_mut(values, keep_if(lambda x: x > 2))
        >>> values
        [3, 4]
    """

    func: ValuePredicate[T]

    @override
    def __call__(self, slot: Slot[T], /) -> bool:
        return bool(self.func(slot.value))


@dataclass(slots=True, frozen=True)
class update[T](MutPredicate[T], HasMetadata):
    """Replaces every element with a new value and decides on the new value.

    Args:
        func: Computes the replacement for the element.
        keep: Either a fixed decision or a read-only predicate
            evaluated on the replacement.

    Examples:
        >>> from retainmut import retain_mut
        >>> values = ["a", "", "b"]
        >>> retain_mut(values, update(str.upper, keep=bool))
        >>> values
        ['A', 'B']
    """

    func: UpdateFunc[T]
    keep: bool | ValuePredicate[T] = True

    @property
    @override
    def metadata(self) -> JsonDict:
        return {
            "func": get_metadata(self.func),
            "keep": get_metadata(self.keep),
        }

    @override
    def __call__(self, slot: Slot[T], /) -> bool:
        slot.value = self.func(slot.value)

        if isinstance(self.keep, bool):
            return self.keep

        return bool(self.keep(slot.value))


@dataclass(slots=True, frozen=True, init=False)
class chain[T](MutPredicate[T], HasMetadata):
    """Applies multiple predicates to the same element until one rejects it.

    Later predicates see the modifications of earlier ones.
    An element is kept only if all predicates return true.

    Examples:
        >>> from retainmut import retain_mut
        >>> values = [1, 2, 3, 4]
        >>> retain_mut(values, chain(update(lambda x: x * 3), keep_if(lambda x: x % 2 == 0)))
        >>> values
        [6, 12]
    """

    predicates: tuple[MutPredicate[T], ...]

    def __init__(self, *predicates: MutPredicate[T]) -> None:
        object.__setattr__(self, "predicates", predicates)

    @property
    @override
    def metadata(self) -> JsonDict:
        return {"predicates": [get_metadata(func) for func in self.predicates]}

    @override
    def __call__(self, slot: Slot[T], /) -> bool:
        for predicate in self.predicates:
            if not predicate(slot):
                return False

        return True


@dataclass(slots=True, frozen=True)
class invert[T](MutPredicate[T]):
    """Negates the decision of a predicate, its modifications still apply.

    Examples:
        >>> from retainmut import retain_mut
        >>> values = [0, 1, 0, 2]
        >>> retain_mut(values, invert(keep_if(lambda x: x == 0)))
        >>> values
        [1, 2]
    """

    predicate: MutPredicate[T]

    @override
    def __call__(self, slot: Slot[T], /) -> bool:
        return not self.predicate(slot)
