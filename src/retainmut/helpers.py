import inspect
import logging
from collections.abc import Callable, Sequence
from dataclasses import fields, is_dataclass
from typing import Any, TypeGuard, cast

from .typing import (
    Factory,
    HasMetadata,
    JsonEntry,
    MaybeFactories,
    MaybeFactory,
)

__all__ = [
    "get_logger",
    "get_metadata",
    "get_name",
    "get_optional_name",
    "is_factory",
    "log_step",
    "produce_factories",
    "produce_factory",
    "total_params",
]


def get_name(obj: Any) -> str:
    if obj is None:
        return ""

    if isinstance(obj, str):
        return obj

    if hasattr(obj, "__name__"):
        return obj.__name__

    return type(obj).__name__


def get_optional_name(obj: Any | None) -> str | None:
    if obj is None:
        return None

    return get_name(obj)


def get_metadata(obj: Any) -> JsonEntry:
    """Describe a predicate (or any value) as JSON-compatible data.

    Examples:
        >>> get_metadata(len)["name"]
        'len'
        >>> get_metadata({"limit": 3})
        {'limit': 3}
    """
    if isinstance(obj, HasMetadata):
        return {
            "name": get_optional_name(obj),
            "doc": inspect.getdoc(obj),
            "metadata": obj.metadata,
        }

    if is_dataclass(obj):
        return {
            "name": get_optional_name(obj),
            "doc": inspect.getdoc(obj),
            "metadata": {
                field.name: get_metadata(getattr(obj, field.name))
                for field in fields(obj)
                if field.repr
            },
        }

    if isinstance(obj, Callable):
        return {
            "name": get_optional_name(obj),
            "doc": inspect.getdoc(obj),
        }

    if isinstance(obj, dict):
        return {key: get_metadata(value) for key, value in obj.items()}

    if isinstance(obj, list | tuple):
        return [get_metadata(value) for value in obj]

    if isinstance(obj, str | int | float | bool):
        return obj

    return None


def get_logger(obj: Any) -> logging.Logger:
    if isinstance(obj, str):
        return logging.getLogger(obj)

    if hasattr(obj, "__self__"):
        obj = obj.__self__

    if hasattr(obj, "__class__"):
        obj = obj.__class__

    name = obj.__module__

    if not name.endswith(obj.__qualname__):
        name += f".{obj.__qualname__}"

    return logging.getLogger(name)


def log_step(
    logger: logging.Logger,
    name: str,
    i: int,
    total: int,
) -> None:
    logger.info(f"Processing {name} {i}/{total}")


def total_params(func: Callable) -> int:
    try:
        return len(inspect.signature(func).parameters)
    except ValueError:
        # some builtins do not expose a signature
        return -1


def is_factory[T](obj: MaybeFactory[T]) -> TypeGuard[Factory[T]]:
    return callable(obj) and total_params(obj) == 0


def produce_factory[T](obj: MaybeFactory[T]) -> T:
    if is_factory(obj):
        return obj()

    return cast(T, obj)


def produce_factories[T](obj: MaybeFactories[T]) -> list[T]:
    """Resolve a single item, a factory, or a sequence of either into a list.

    Examples:
        >>> produce_factories(lambda: 1)
        [1]
        >>> produce_factories([2, lambda: 3])
        [2, 3]
    """
    if isinstance(obj, Sequence) and not isinstance(obj, str):
        return [produce_factory(item) for item in obj]

    return [produce_factory(obj)]
