"""
In-place, order-preserving retention for mutable sequences.

`retain_mut` keeps the elements of a sequence for which a predicate returns
true. Unlike a plain filter, the predicate receives a `Slot` through which it
may also modify the element it decides on, and the sequence is compacted in
place instead of being rebuilt.

Example:
    >>> import retainmut
    >>> values = [1, 2, 3, 4]
    >>> def triple_even(slot):
    ...     slot.value *= 3
    ...     return slot.value % 2 == 0
    >>> retainmut.retain_mut(values, triple_even)
    >>> values
    [6, 12]
"""

import logging

from . import apply, constants, helpers, model, predicates, typing
from .retain import RetainMutable, RetainMutMixin, retain_mut
from .slot import BorrowError, Slot

__all__ = [
    "apply",
    "constants",
    "helpers",
    "model",
    "predicates",
    "typing",
    "BorrowError",
    "RetainMutable",
    "RetainMutMixin",
    "Slot",
    "retain_mut",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
