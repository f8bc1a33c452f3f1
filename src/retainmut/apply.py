from collections import deque
from collections.abc import Mapping, MutableSequence
from dataclasses import dataclass
from timeit import default_timer
from typing import override

from .helpers import get_logger, get_metadata, log_step, produce_factories
from .model import Result, ResultStep, SequenceResult
from .retain import RetainMutable, retain_mut
from .slot import Slot
from .typing import DiscardFunc, MaybeFactories, MutPredicate

__all__ = ["apply_batches", "apply_sequence"]

logger = get_logger(__name__)

type Retainable[T] = MutableSequence[T] | deque[T] | RetainMutable[T]


@dataclass(slots=True)
class _counting[T](MutPredicate[T]):
    """Counts the visited and kept elements of a pass, so no container needs a length."""

    predicate: MutPredicate[T]
    visited: int = 0
    kept: int = 0

    @override
    def __call__(self, slot: Slot[T], /) -> bool:
        self.visited += 1
        keep = bool(self.predicate(slot))

        if keep:
            self.kept += 1

        return keep


def apply_batches[K, T](
    batches: Mapping[K, Retainable[T]],
    predicates: MaybeFactories[MutPredicate[T]],
    on_discard: DiscardFunc[T] | None = None,
) -> Result[K]:
    """Applies predicates one after another to multiple sequences in place.

    Every predicate forms a step: it is applied to all sequences before
    the next predicate runs, so later predicates only see retained elements.

    Args:
        batches: A mapping of keys to the sequences that are filtered in place.
        predicates: The predicates (or factories producing them) that will be applied.
        on_discard: Called once with every element that any predicate discards.

    Returns:
        Returns an object of type Result.

    Examples:
        >>> from retainmut.predicates import keep_if
        >>> batches = {"a": [1, 2, 3], "b": [4, 5]}
        >>> result = apply_batches(batches, keep_if(lambda x: x % 2 == 1))
        >>> batches
        {'a': [1, 3], 'b': [5]}
        >>> result.final_step.discarded
        2
    """
    predicate_funcs = produce_factories(predicates)
    steps: list[ResultStep[K]] = []

    loop_start_time = default_timer()

    for i, predicate in enumerate(predicate_funcs, start=1):
        log_step(logger, "predicate", i, len(predicate_funcs))
        start_time = default_timer()
        step_sequences: dict[K, SequenceResult] = {}

        for key, sequence in batches.items():
            sequence_start_time = default_timer()
            counter = _counting(predicate)
            retain_mut(sequence, counter, on_discard=on_discard)

            step_sequences[key] = SequenceResult(
                before=counter.visited,
                after=counter.kept,
                duration=default_timer() - sequence_start_time,
            )

        steps.append(
            ResultStep(
                sequences=step_sequences,
                metadata=get_metadata(predicate),
                duration=default_timer() - start_time,
            )
        )

    return Result(steps=steps, duration=default_timer() - loop_start_time)


def apply_sequence[T](
    sequence: Retainable[T],
    predicates: MaybeFactories[MutPredicate[T]],
    on_discard: DiscardFunc[T] | None = None,
) -> Result[str]:
    """Applies predicates one after another to a single sequence in place.

    Args:
        sequence: The sequence that is filtered in place.
        predicates: The predicates (or factories producing them) that will be applied.
        on_discard: Called once with every element that any predicate discards.

    Returns:
        Returns an object of type Result with the key ``"default"``.
    """
    return apply_batches({"default": sequence}, predicates, on_discard)
