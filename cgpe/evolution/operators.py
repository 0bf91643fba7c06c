"""Mutation operators for CGP expressions.

Every operator draws the replacement value uniformly from the gene's bounds
excluding its current value; a gene whose lower and upper bound coincide is
left alone. Writes go through a GeneTransaction so that a multi-gene
mutation either installs every write (and recomputes the active set once) or
leaves the expression untouched.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable

from cgpe.generation.transaction import GeneTransaction
from cgpe.utils.rng_manager import RNGManager
from cgpe.utils.validation import check_gene_index


def _stage_point_mutation(tx: GeneTransaction, expression: Any, rng_manager: RNGManager, idx: int) -> None:
    lo, hi = expression.lb[idx], expression.ub[idx]
    if lo == hi:
        return
    current = tx.buffer.staged().get(idx, expression.get()[idx])
    tx.stage(idx, rng_manager.randint_excluding(lo, hi, current))


def _run(expression: Any, rng_manager: RNGManager, indices: Iterable[int]) -> list[int]:
    tx = GeneTransaction(expression, rng_manager)
    tx.begin()
    try:
        for idx in indices:
            _stage_point_mutation(tx, expression, rng_manager, idx)
        if not len(tx.buffer):
            tx.rollback()
            return []
        return tx.commit()
    except Exception:
        tx.rollback()
        raise


def mutate_genes(expression: Any, idxs: Iterable[int], rng_manager: RNGManager) -> list[int]:
    """Mutate the genes at absolute indices ``idxs``.

    All indices are checked before anything is drawn, so an out-of-range
    index raises ``GeneIndexError`` with the expression unchanged. Repeated
    indices are mutated repeatedly. Returns the indices whose value changed.
    """
    length = len(expression.get())
    checked = [check_gene_index(i, length) for i in idxs]
    return _run(expression, rng_manager, checked)


def mutate_gene(expression: Any, idx: int, rng_manager: RNGManager) -> list[int]:
    return mutate_genes(expression, [idx], rng_manager)


def mutate_random(expression: Any, n_mutations: int, rng_manager: RNGManager) -> list[int]:
    """Mutate ``n_mutations`` genes drawn uniformly (with replacement) from the genotype.

    The indices are drawn before the transaction opens, so the generator
    advances even when every drawn gene is frozen.
    """
    length = len(expression.get())
    indices = [rng_manager.randint(0, length - 1) for _ in range(int(n_mutations))]
    return _run(expression, rng_manager, indices)


def mutate_active(expression: Any, n_mutations: int, rng_manager: RNGManager) -> list[int]:
    """Mutate ``n_mutations`` active genes, one at a time.

    Each draw sees the active set left by the previous mutation.
    """
    changed: list[int] = []
    for _ in range(int(n_mutations)):
        active_genes = expression.active_genes
        idx = active_genes[rng_manager.randint(0, len(active_genes) - 1)]
        changed.extend(mutate_gene(expression, idx, rng_manager))
    return changed


def _random_active_block(expression: Any, rng_manager: RNGManager) -> int | None:
    """Gene offset of a uniformly chosen active computational node, or None."""
    block_size = expression.arity + 1
    node_genes = len(expression.active_genes) - expression.m
    if node_genes <= 0:
        return None
    block = rng_manager.randint(0, node_genes // block_size - 1)
    return expression.active_genes[block * block_size]


def mutate_active_fgene(expression: Any, rng_manager: RNGManager) -> list[int]:
    """Mutate the function gene of one active node."""
    idx = _random_active_block(expression, rng_manager)
    if idx is None:
        logging.info("No active function genes; function mutation skipped")
        return []
    return mutate_gene(expression, idx, rng_manager)


def mutate_active_cgene(expression: Any, rng_manager: RNGManager) -> list[int]:
    """Mutate one connection gene of one active node."""
    idx = _random_active_block(expression, rng_manager)
    if idx is None:
        logging.info("No active connection genes; connection mutation skipped")
        return []
    idx += rng_manager.randint(1, expression.arity)
    return mutate_gene(expression, idx, rng_manager)


def mutate_ogene(expression: Any, rng_manager: RNGManager) -> list[int]:
    """Mutate one output gene."""
    m = expression.m
    j = rng_manager.randint(0, m - 1) if m > 1 else 0
    return mutate_gene(expression, expression.layout.output_gene(j), rng_manager)


__all__ = [
    "mutate_gene",
    "mutate_genes",
    "mutate_random",
    "mutate_active",
    "mutate_active_fgene",
    "mutate_active_cgene",
    "mutate_ogene",
]
