from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict

from .typing import JsonEntry

__all__ = ["Result", "ResultStep", "SequenceResult"]


class SequenceResult(BaseModel):
    model_config = ConfigDict(frozen=True)
    before: int
    after: int
    duration: float

    @property
    def kept(self) -> int:
        return self.after

    @property
    def discarded(self) -> int:
        return self.before - self.after


class ResultStep[K](BaseModel):
    model_config = ConfigDict(frozen=True)
    sequences: Mapping[K, SequenceResult]
    metadata: JsonEntry
    duration: float

    @property
    def kept(self) -> int:
        return sum(entry.kept for entry in self.sequences.values())

    @property
    def discarded(self) -> int:
        return sum(entry.discarded for entry in self.sequences.values())


class Result[K](BaseModel):
    model_config = ConfigDict(frozen=True)
    steps: list[ResultStep[K]]
    duration: float

    @property
    def first_step(self) -> ResultStep[K]:
        return self.steps[0]

    @property
    def final_step(self) -> ResultStep[K]:
        return self.steps[-1]

    @property
    def sequences(self) -> Mapping[K, SequenceResult]:
        return self.final_step.sequences

    @property
    def discarded(self) -> int:
        return sum(step.discarded for step in self.steps)
