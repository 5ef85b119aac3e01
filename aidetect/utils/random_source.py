from __future__ import annotations

import random
from typing import Protocol, Sequence, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    """Anything that draws floats like ``random.Random``."""

    def random(self) -> float: ...

    def uniform(self, a: float, b: float) -> float: ...


def make_random_source(seed: int | None = None) -> RandomSource:
    return random.Random(seed)


def shuffled(items: Sequence[T], rng: RandomSource) -> list[T]:
    """Fisher-Yates shuffle of a copy of ``items``."""
    result = list(items)
    for i in range(len(result) - 1, 0, -1):
        j = int(rng.random() * (i + 1))
        result[i], result[j] = result[j], result[i]
    return result
