"""Genotype decoding: active-set resolution, evaluation and staged writes."""

from .active import ActiveSet, resolve_active, resolve_active_nodes  # noqa: F401
from .evaluator import evaluate  # noqa: F401
from .transaction import ChangeBuffer, GeneTransaction  # noqa: F401

__all__ = [
    'ActiveSet',
    'resolve_active',
    'resolve_active_nodes',
    'evaluate',
    'ChangeBuffer',
    'GeneTransaction',
]
