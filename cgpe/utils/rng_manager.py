"""Owned, seeded random number generation for expressions.

An ``RNGManager`` wraps exactly one ``random.Random`` instance. Initial
genotype sampling and every mutation operator draw from it, so two
expressions built with the same seed and driven by the same calls produce the
same genotypes. The generator is never shared through module state.
"""

from __future__ import annotations

import random
from typing import Any


class RNGManager:
    """Single seeded generator with state snapshot/restore."""

    def __init__(self, seed: int | None = None) -> None:
        self.seed = 0 if seed is None else int(seed)
        self._rng = random.Random(self.seed)

    def get_rng_for_initialization(self) -> random.Random:
        return self._rng

    def get_rng_for_mutation(self) -> random.Random:
        return self._rng

    def randint(self, lb: int, ub: int) -> int:
        """Uniform integer in the closed range ``[lb, ub]``."""
        return self._rng.randint(lb, ub)

    def randint_excluding(self, lb: int, ub: int, current: int) -> int:
        """Uniform integer in ``[lb, ub]`` other than ``current``.

        Requires ``lb < ub``. When ``current`` lies outside the range every
        value in it is eligible.
        """
        if lb >= ub:
            raise ValueError(f"Empty sampling range [{lb}, {ub}] excluding {current}")
        if current < lb or current > ub:
            return self._rng.randint(lb, ub)
        value = self._rng.randint(lb, ub - 1)
        if value >= current:
            value += 1
        return value

    def get_state(self) -> Any:
        return self._rng.getstate()

    def set_state(self, state: Any) -> None:
        self._rng.setstate(state)


__all__ = ["RNGManager"]
