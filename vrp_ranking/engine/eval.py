"""Cost/duration/distance accumulator produced by the cost model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class Eval:
    cost: int = 0
    duration: int = 0
    distance: int = 0

    @classmethod
    def zero(cls) -> "Eval":
        return cls()

    def __add__(self, other: "Eval") -> "Eval":
        if not isinstance(other, Eval):
            return NotImplemented
        return Eval(
            self.cost + other.cost,
            self.duration + other.duration,
            self.distance + other.distance,
        )


def total(evals: Iterable[Eval]) -> Eval:
    acc = Eval.zero()
    for e in evals:
        acc = acc + e
    return acc
