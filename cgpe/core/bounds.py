"""Gene layout and bounds derivation.

Genotype layout for ``n`` inputs, ``m`` outputs and an ``rows x cols`` grid:

    [f, c_1 .. c_arity] * (rows * cols)  +  [o_1 .. o_m]

Node ids ``0..n-1`` are inputs, ``n..n+rows*cols-1`` computational nodes laid
out column-major. A connection gene of a node in column ``i`` may only name
inputs or nodes in columns ``[max(0, i - levels_back), i - 1]``, which keeps
the graph acyclic.
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Any

from cgpe.utils.validation import StructuralConfigError


def validate_structure(n: int, m: int, rows: int, cols: int, levels_back: int,
                       arity: int, n_functions: int) -> None:
    """Raise ``StructuralConfigError`` on the first violated precondition."""
    if n == 0:
        raise StructuralConfigError("Number of inputs is 0", n=n)
    if m == 0:
        raise StructuralConfigError("Number of outputs is 0", m=m)
    if cols == 0:
        raise StructuralConfigError("Number of columns is 0", cols=cols)
    if rows == 0:
        raise StructuralConfigError("Number of rows is 0", rows=rows)
    if levels_back == 0:
        raise StructuralConfigError("Number of level-backs is 0", levels_back=levels_back)
    if arity < 2:
        raise StructuralConfigError("Basis functions arity must be at least 2", arity=arity)
    if n_functions == 0:
        raise StructuralConfigError("Number of basis functions is 0", n_functions=n_functions)
    for name, value in (("n", n), ("m", m), ("rows", rows), ("cols", cols),
                        ("levels_back", levels_back)):
        if value < 0:
            raise StructuralConfigError(f"Structural parameter {name} is negative", **{name: value})


@dataclass(frozen=True)
class GeneLayout:
    """Structural parameters plus the index arithmetic derived from them."""

    n: int
    m: int
    rows: int
    cols: int
    levels_back: int
    arity: int
    n_functions: int

    def __post_init__(self) -> None:
        validate_structure(self.n, self.m, self.rows, self.cols,
                           self.levels_back, self.arity, self.n_functions)

    @property
    def n_nodes(self) -> int:
        return self.rows * self.cols

    @property
    def block_size(self) -> int:
        return self.arity + 1

    @property
    def output_offset(self) -> int:
        return self.block_size * self.n_nodes

    @property
    def genotype_length(self) -> int:
        return self.output_offset + self.m

    def node_column(self, node_id: int) -> int:
        return (node_id - self.n) // self.rows

    def node_gene_offset(self, node_id: int) -> int:
        """Index of the function gene of a computational node."""
        return (node_id - self.n) * self.block_size

    def output_gene(self, j: int) -> int:
        return self.output_offset + j

    def is_output_gene(self, idx: int) -> bool:
        return idx >= self.output_offset

    def is_function_gene(self, idx: int) -> bool:
        return idx < self.output_offset and idx % self.block_size == 0

    def to_dict(self) -> dict[str, Any]:
        return {
            'n': self.n,
            'm': self.m,
            'rows': self.rows,
            'cols': self.cols,
            'levels_back': self.levels_back,
            'arity': self.arity,
            'n_functions': self.n_functions,
        }


@dataclass(frozen=True)
class Bounds:
    lb: tuple[int, ...]
    ub: tuple[int, ...]

    def __len__(self) -> int:
        return len(self.lb)

    def is_frozen(self, idx: int) -> bool:
        return self.lb[idx] == self.ub[idx]

    def admits(self, idx: int, value) -> bool:
        """True if ``value`` is an integer within the bounds of gene ``idx``."""
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            return False
        return self.lb[idx] <= value <= self.ub[idx]

    def contains(self, genes) -> bool:
        if len(genes) != len(self.lb):
            return False
        return all(self.admits(i, g) for i, g in enumerate(genes))


def compute_bounds(layout: GeneLayout) -> Bounds:
    """Derive per-gene ``[lb, ub]`` ranges from the structural parameters."""
    n, r, c, l = layout.n, layout.rows, layout.cols, layout.levels_back
    lb = [0] * layout.genotype_length
    ub = [0] * layout.genotype_length

    # Function genes
    for i in range(0, layout.output_offset, layout.block_size):
        ub[i] = layout.n_functions - 1

    # Output genes
    for i in range(layout.output_offset, layout.genotype_length):
        ub[i] = n + r * c - 1
        if l <= c:
            lb[i] = n + r * (c - l)

    # Connection genes
    for i in range(c):
        for j in range(r):
            block = (i * r + j) * layout.block_size
            for k in range(1, layout.arity + 1):
                ub[block + k] = n + i * r - 1
                if i >= l:
                    lb[block + k] = n + r * (i - l)

    return Bounds(lb=tuple(lb), ub=tuple(ub))


__all__ = ["GeneLayout", "Bounds", "compute_bounds", "validate_structure"]
