# ======================================================================
#  File......: random_source.py
#  Purpose...: Injectable random source for mock job attributes.
#  Version...: 0.1.0
#  Date......: 2026-03-09
#  Author....: Edwin Rodriguez (Arthrex IT SAP COE)
# ======================================================================

from __future__ import annotations

import random
from typing import Optional, Sequence, Set, TypeVar

from models import (
    STATUS_COMPLETED, STATUS_FAILED, STATUS_RUNNING, STATUS_NOT_RUNNING, TIERS,
)

T = TypeVar("T")


class RandomSource:
    """
    Thin wrapper over random.Random.

    Every generator takes one of these instead of touching the module-level
    `random` functions, so tests can pass a seeded instance and get the same
    dataset back.
    """

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None):
        self.seed = seed
        self._rng = rng if rng is not None else random.Random(seed)
        self._issued: Set[str] = set()

    def randint(self, n: int) -> int:
        """Uniform integer in [0, n)."""
        return int(self._rng.random() * n)

    def between(self, low: int, high: int) -> int:
        """Uniform integer in [low, high)."""
        return low + self.randint(high - low)

    def uniform(self) -> float:
        """Float in [0, 1)."""
        return self._rng.random()

    def choice(self, seq: Sequence[T]) -> T:
        return seq[self.randint(len(seq))]

    def chance(self, p: float) -> bool:
        return self._rng.random() < p

    def weighted_status(self) -> str:
        """
        Nested-remainder draw:
          < 0.70 Completed, < 0.90 Failed, < 0.95 Running, else Not Running
        """
        r = self._rng.random()
        if r < 0.7:
            return STATUS_COMPLETED
        if r < 0.9:
            return STATUS_FAILED
        if r < 0.95:
            return STATUS_RUNNING
        return STATUS_NOT_RUNNING

    def weighted_tier(self) -> str:
        return TIERS[0] if self._rng.random() < 0.7 else TIERS[1]

    def identifier(self, prefix: str, digits: int = 9) -> str:
        """Random id, never repeated by this source (redraws on collision)."""
        while True:
            ident = f"{prefix}-{self.randint(10 ** digits):0{digits}d}"
            if ident not in self._issued:
                self._issued.add(ident)
                return ident
