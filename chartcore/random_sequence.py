"""Sequences of pseudo-random values."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from chartcore.seq import Seq

_MAX_INT32 = 2147483647


@dataclass
class RandomSeq:
    """Random values, optionally bounded by ``minimum`` and ``maximum``."""

    length: int | None = None
    minimum: float | None = None
    maximum: float | None = None
    rng: random.Random = field(default_factory=random.Random, repr=False)

    def __len__(self) -> int:
        if self.length is not None:
            return self.length
        return _MAX_INT32

    def get_value(self, index: int) -> float:
        r = self.rng.random()
        if self.minimum is not None and self.maximum is not None:
            if self.maximum > self.minimum:
                delta = self.maximum - self.minimum
            else:
                delta = self.minimum - self.maximum
            return self.minimum + r * delta
        if self.maximum is not None:
            return r * self.maximum
        if self.minimum is not None:
            return self.minimum + r
        return r


def random_values(count: int) -> list[float]:
    """``count`` random values in [0, 1)."""
    return Seq(RandomSeq(length=count)).values()


def random_values_with_max(count: int, maximum: float) -> list[float]:
    """``count`` random values in [0, maximum)."""
    return Seq(RandomSeq(length=count, maximum=maximum)).values()