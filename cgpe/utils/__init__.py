"""Shared utilities: validation errors, random generation, diagnostics."""

from .rng_manager import RNGManager
from .validation import (
    GeneIndexError,
    IncompatibleGenotypeError,
    InputSizeError,
    StructuralConfigError,
    ValidationError,
)

__all__ = [
    'RNGManager',
    'ValidationError',
    'StructuralConfigError',
    'IncompatibleGenotypeError',
    'GeneIndexError',
    'InputSizeError',
]
