"""Evenly stepped value sequences."""

from __future__ import annotations

from dataclasses import dataclass

from chartcore.seq import Seq


@dataclass
class LinearSeq:
    """Values from ``start`` toward ``end`` in increments of ``step``."""

    start: float = 0.0
    end: float = 0.0
    step: float = 1.0

    def __len__(self) -> int:
        if self.start < self.end:
            return int((self.end - self.start) / self.step) + 1
        return int((self.start - self.end) / self.step) + 1

    def get_value(self, index: int) -> float:
        offset = float(index) * self.step
        if self.start < self.end:
            return self.start + offset
        return self.start - offset


def linear_range(start: float, end: float) -> list[float]:
    """Values from start to end, one apart."""
    return Seq(LinearSeq(start=start, end=end, step=1.0)).values()


def linear_range_with_step(start: float, end: float, step: float) -> list[float]:
    """Values from start to end, ``step`` apart."""
    return Seq(LinearSeq(start=start, end=end, step=step)).values()