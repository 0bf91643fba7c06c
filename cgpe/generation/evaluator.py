"""Forward evaluation of the active sub-graph.

The evaluator knows nothing about the element type: input values are stored
as given and every computational node delegates to its kernel. Whatever the
kernels accept (floats, numpy arrays, torch tensors, strings) flows through
unchanged.
"""

from __future__ import annotations

from typing import Any, Sequence

from cgpe.core.bounds import GeneLayout
from cgpe.utils.validation import InputSizeError


def evaluate(genes: Sequence[int], layout: GeneLayout, active_nodes: Sequence[int],
             kernels: Sequence[Any], inputs: Sequence[Any]) -> list[Any]:
    """Evaluate the expression encoded by ``genes`` at ``inputs``.

    Args:
        genes: Full genotype.
        layout: Gene layout the genotype follows.
        active_nodes: Sorted active node ids for ``genes``.
        kernels: Indexable kernel collection; ``kernels[f](values)`` must
            accept a list of ``layout.arity`` values.
        inputs: Sequence of length ``layout.n``.

    Returns:
        List of ``layout.m`` output values, in output-gene order.
    """
    if len(inputs) != layout.n:
        raise InputSizeError("Input size is incompatible", expected=layout.n, got=len(inputs))

    arity = layout.arity
    node: dict[int, Any] = {}
    for i in active_nodes:
        if i < layout.n:
            node[i] = inputs[i]
        else:
            idx = layout.node_gene_offset(i)
            function_in = [node[genes[idx + j + 1]] for j in range(arity)]
            node[i] = kernels[genes[idx]](function_in)
    return [node[genes[layout.output_gene(j)]] for j in range(layout.m)]


__all__ = ["evaluate"]
