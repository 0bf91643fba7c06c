"""Active-set resolution: which nodes and genes actually reach the outputs.

Reachability is expanded one level at a time backwards from the output
genes. Each next frontier is sorted and deduplicated before it is expanded,
so a node shared by many consumers is visited once per level instead of once
per path; without this a chain of nodes each feeding its successor twice
expands ``2**depth`` paths.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from cgpe.core.bounds import GeneLayout


@dataclass(frozen=True)
class ActiveSet:
    """Sorted active node ids and active gene indices (outputs last)."""

    nodes: tuple[int, ...]
    genes: tuple[int, ...]


def resolve_active_nodes(genes: Sequence[int], layout: GeneLayout) -> list[int]:
    n, arity = layout.n, layout.arity
    current = [genes[layout.output_gene(j)] for j in range(layout.m)]
    active: list[int] = []
    while current:
        active.extend(current)
        nxt: list[int] = []
        for node_id in current:
            if node_id >= n:
                offset = layout.node_gene_offset(node_id)
                nxt.extend(genes[offset + 1:offset + 1 + arity])
        current = sorted(set(nxt))
    return sorted(set(active))


def resolve_active(genes: Sequence[int], layout: GeneLayout) -> ActiveSet:
    """Compute the active set of ``genes`` under ``layout``."""
    nodes = resolve_active_nodes(genes, layout)
    active_genes: list[int] = []
    for node_id in nodes:
        if node_id >= layout.n:
            offset = layout.node_gene_offset(node_id)
            active_genes.extend(range(offset, offset + layout.block_size))
    active_genes.extend(layout.output_gene(j) for j in range(layout.m))
    logging.debug("Active set resolved: %d nodes, %d genes", len(nodes), len(active_genes))
    return ActiveSet(nodes=tuple(nodes), genes=tuple(active_genes))


__all__ = ["ActiveSet", "resolve_active", "resolve_active_nodes"]
