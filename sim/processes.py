"""Random variate streams for inter-arrival and service times."""

from __future__ import annotations

from typing import Iterable

import numpy as np


def stream_seeds(seed: int | None) -> tuple[np.random.SeedSequence, np.random.SeedSequence]:
    """Spawn independent (arrival, service) seeds from one base seed.

    The same base seed yields the same pair, so every server count in a sweep
    sees the same arrival sequence. seed=None draws fresh OS entropy.
    """
    arrival, service = np.random.SeedSequence(seed).spawn(2)
    return arrival, service


class ExponentialVariate:
    """Exponential draws with a fixed mean from a private numpy Generator."""

    def __init__(self, mean: float, seed: int | np.random.SeedSequence | None = None) -> None:
        if mean <= 0:
            raise ValueError(f"mean must be > 0, got {mean}")
        self.mean = float(mean)
        self._rng = np.random.default_rng(seed)

    @classmethod
    def from_rate(cls, rate: float, seed: int | np.random.SeedSequence | None = None) -> ExponentialVariate:
        if rate <= 0:
            raise ValueError(f"rate must be > 0, got {rate}")
        return cls(1.0 / rate, seed)

    def next(self) -> float:
        return float(self._rng.exponential(self.mean))


class TraceVariate:
    """Replays a fixed sequence of durations; returns inf once exhausted."""

    def __init__(self, values: Iterable[float]) -> None:
        self._values = [float(v) for v in values]
        self._pos = 0

    @property
    def remaining(self) -> int:
        return len(self._values) - self._pos

    def next(self) -> float:
        if self._pos >= len(self._values):
            return float("inf")
        value = self._values[self._pos]
        self._pos += 1
        return value
