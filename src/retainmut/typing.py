from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping, Sequence
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .slot import Slot

__all__ = [
    "DiscardFunc",
    "Factory",
    "HasMetadata",
    "JsonDict",
    "JsonEntry",
    "MaybeFactories",
    "MaybeFactory",
    "MutPredicate",
    "UpdateFunc",
    "ValuePredicate",
]

type JsonEntry = (
    Mapping[str, "JsonEntry"] | Sequence["JsonEntry"] | str | int | float | bool | None
)
type JsonDict = dict[str, JsonEntry]
type Factory[T] = Callable[[], T]
type MaybeFactory[T] = T | Factory[T]
type MaybeFactories[T] = T | Factory[T] | Sequence[T | Factory[T]]


class HasMetadata(ABC):
    @property
    @abstractmethod
    def metadata(self) -> JsonDict: ...


class MutPredicate[T](Protocol):
    """Decides whether to keep an element, possibly modifying it through its slot."""

    def __call__(
        self,
        slot: "Slot[T]",
        /,
    ) -> bool: ...


class ValuePredicate[T](Protocol):
    """Decides whether to keep a value without modifying it."""

    def __call__(
        self,
        value: T,
        /,
    ) -> bool: ...


class UpdateFunc[T](Protocol):
    """Computes the replacement for a value."""

    def __call__(
        self,
        value: T,
        /,
    ) -> T: ...


class DiscardFunc[T](Protocol):
    """Cleans up an element that was not retained."""

    def __call__(
        self,
        value: T,
        /,
    ) -> None: ...
