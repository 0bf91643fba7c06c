"""Transactions for staged genotype modifications.

Implements a GeneTransaction with a ChangeBuffer that:
- Stages gene writes by absolute index
- On begin(), snapshots RNGManager state
- On commit(), validates staged writes against the bounds, installs the new
  genotype on the expression in one step (which recomputes the active set
  once) and returns the indices whose value changed
- On rollback(), clears staged writes and restores RNGManager state
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from cgpe.utils.validation import IncompatibleGenotypeError, check_gene_index


class ChangeBuffer:
    """In-memory buffer for staging gene writes prior to commit."""

    def __init__(self) -> None:
        # gene index → staged value (last write wins)
        self._writes: dict[int, int] = {}

    def reset(self) -> None:
        self._writes.clear()

    def set_gene(self, idx: int, value: int) -> None:
        self._writes[idx] = int(value)

    def staged(self) -> dict[int, int]:
        return dict(self._writes)

    def __len__(self) -> int:
        return len(self._writes)


@dataclass
class GeneTransaction:
    expression: Any
    rng_manager: Any
    buffer: ChangeBuffer = field(default_factory=ChangeBuffer)

    _rng_state_snapshot: Any = None

    def begin(self) -> None:
        """Begin a transaction by snapshotting RNG state and clearing buffer."""
        if self.rng_manager is not None:
            self._rng_state_snapshot = self.rng_manager.get_state()
        self.buffer.reset()

    def stage(self, idx: int, value: int) -> None:
        length = len(self.expression.get())
        self.buffer.set_gene(check_gene_index(idx, length), value)

    def _validate(self, genes: list[int]) -> None:
        lb, ub = self.expression.lb, self.expression.ub
        for idx in self.buffer.staged():
            if not lb[idx] <= genes[idx] <= ub[idx]:
                raise IncompatibleGenotypeError(
                    "Staged gene value outside its bounds",
                    idx=idx, value=genes[idx], lb=lb[idx], ub=ub[idx],
                )

    def rollback(self) -> None:
        """Discard staged writes and restore RNG state."""
        if len(self.buffer):
            logging.warning("Rolling back %d staged gene writes", len(self.buffer))
        self.buffer.reset()
        if self._rng_state_snapshot is not None and self.rng_manager is not None:
            self.rng_manager.set_state(self._rng_state_snapshot)
            self._rng_state_snapshot = None

    def commit(self) -> list[int]:
        """Validate and apply staged writes. Returns the changed gene indices."""
        if not len(self.buffer):
            logging.warning("Commit with no staged gene writes")
            self._rng_state_snapshot = None
            return []

        current = list(self.expression.get())
        genes = list(current)
        for idx, value in self.buffer.staged().items():
            genes[idx] = value
        self._validate(genes)

        changed = [i for i in sorted(self.buffer.staged()) if genes[i] != current[i]]
        if changed:
            self.expression._install(genes)

        # Done - clear buffer; RNG snapshot is no longer needed
        self.buffer.reset()
        self._rng_state_snapshot = None
        return changed


__all__ = ["ChangeBuffer", "GeneTransaction"]
