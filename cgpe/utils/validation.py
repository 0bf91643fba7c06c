"""Typed validation errors raised by the expression engine.

Every error is a local precondition violation detected before any state
changes. The base class carries a machine-readable ``error_type`` and a
``details`` mapping so callers can branch without parsing messages.
"""

from __future__ import annotations

import numbers
from typing import Any


class ValidationError(ValueError):
    """Base error with a stable ``error_type`` tag and structured details."""

    def __init__(self, error_type: str, message: str, **details: Any) -> None:
        super().__init__(message)
        self.error_type = error_type
        self.message = message
        self.details: dict[str, Any] = dict(details)

    def __str__(self) -> str:
        if not self.details:
            return self.message
        extra = ", ".join(f"{k}={v!r}" for k, v in sorted(self.details.items()))
        return f"{self.message} ({extra})"


class StructuralConfigError(ValidationError):
    """Invalid structural parameter (zero size, arity < 2, empty kernel set)."""

    def __init__(self, message: str, **details: Any) -> None:
        super().__init__("structural_config", message, **details)


class IncompatibleGenotypeError(ValidationError):
    """Genotype has the wrong length or a gene outside its bounds."""

    def __init__(self, message: str, **details: Any) -> None:
        super().__init__("incompatible_genotype", message, **details)


class GeneIndexError(ValidationError, IndexError):
    """Absolute gene index outside ``[0, len(genotype))``."""

    def __init__(self, message: str, **details: Any) -> None:
        super().__init__("gene_index_out_of_range", message, **details)


class InputSizeError(ValidationError):
    """Input vector length differs from the number of expression inputs."""

    def __init__(self, message: str, **details: Any) -> None:
        super().__init__("input_size_mismatch", message, **details)


def check_gene_index(idx: int, length: int) -> int:
    """Return ``idx`` as an int or raise ``GeneIndexError``."""
    if isinstance(idx, bool) or not isinstance(idx, numbers.Integral):
        raise GeneIndexError("Gene index must be an integer", idx=idx)
    idx = int(idx)
    if idx < 0 or idx >= length:
        raise GeneIndexError(
            "idx of gene to be mutated is out of bounds",
            idx=idx,
            length=length,
        )
    return idx


__all__ = [
    "ValidationError",
    "StructuralConfigError",
    "IncompatibleGenotypeError",
    "GeneIndexError",
    "InputSizeError",
    "check_gene_index",
]
