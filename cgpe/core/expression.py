"""The CGP expression engine.

An ``Expression`` owns a fixed-length integer genotype, its per-gene bounds,
the derived active set and one seeded random generator. The genotype and the
active set are installed together as a single immutable snapshot, so a
reader calling the expression never sees a genotype paired with a stale
active set.
"""

from __future__ import annotations

import logging
import numbers
from collections import abc
from typing import Any, Iterable, Sequence

from cgpe.config import resolve_config
from cgpe.core.bounds import Bounds, GeneLayout, compute_bounds
from cgpe.core.kernel import KernelSet
from cgpe.evolution import operators
from cgpe.generation.active import ActiveSet, resolve_active
from cgpe.generation.evaluator import evaluate
from cgpe.utils.rng_manager import RNGManager
from cgpe.utils.validation import IncompatibleGenotypeError


class Expression:
    """A CGP-encoded expression with decode, evaluate and mutate operations.

    Args:
        n: number of inputs (independent variables)
        m: number of outputs (dependent variables)
        r: number of rows of the grid
        c: number of columns of the grid
        l: number of levels-back allowed
        arity: arity of the kernels
        kernels: ``KernelSet`` or iterable of kernel names / kernels
        seed: seed for the generator driving the initial genotype and mutations

    Raises:
        StructuralConfigError: if any of ``n, m, r, c, l`` is 0, ``arity < 2``
            or the kernel set is empty.
    """

    def __init__(self, n: int, m: int, r: int, c: int, l: int, arity: int,
                 kernels: Iterable[Any], seed: int = 0) -> None:
        kernel_set = kernels if isinstance(kernels, KernelSet) else KernelSet(kernels)
        self._layout = GeneLayout(n=n, m=m, rows=r, cols=c, levels_back=l,
                                  arity=arity, n_functions=len(kernel_set))
        self._kernels = kernel_set
        self._bounds: Bounds = compute_bounds(self._layout)
        self._rng_manager = RNGManager(seed)

        rng = self._rng_manager.get_rng_for_initialization()
        genes = [rng.randint(lo, hi) for lo, hi in zip(self._bounds.lb, self._bounds.ub)]
        self._install(genes)

    @classmethod
    def from_config(cls, n: int, m: int, config: dict | None = None,
                    kernels: Iterable[Any] | None = None) -> "Expression":
        """Build from a config dict (see ``cgpe.config``); ``kernels`` overrides ``config['kernels']``."""
        cfg = resolve_config(config)
        return cls(
            n, m,
            int(cfg['rows']), int(cfg['cols']), int(cfg['levels_back']), int(cfg['arity']),
            kernels if kernels is not None else cfg['kernels'],
            int(cfg['seed']),
        )

    # Genotype ------------------------------------------------------------------

    def _install(self, genes: Sequence[int]) -> None:
        genes = tuple(int(g) for g in genes)
        self._state: tuple[tuple[int, ...], ActiveSet] = (genes, resolve_active(genes, self._layout))

    def get(self) -> tuple[int, ...]:
        """The current genotype."""
        return self._state[0]

    def is_valid(self, x: Sequence[int]) -> bool:
        """True if ``x`` has the genotype length and every gene is an integer within bounds."""
        return self._bounds.contains(x)

    def set(self, x: Sequence[int]) -> None:
        """Install ``x`` as the genotype and recompute the active set.

        Raises:
            IncompatibleGenotypeError: if ``x`` fails ``is_valid``; the current
                genotype is kept.
        """
        x = list(x)
        if len(x) != len(self._bounds):
            raise IncompatibleGenotypeError(
                "Chromosome is incompatible",
                expected_length=len(self._bounds), got_length=len(x),
            )
        for i, g in enumerate(x):
            if not self._bounds.admits(i, g):
                raise IncompatibleGenotypeError(
                    "Chromosome is incompatible",
                    idx=i, value=g, lb=self._bounds.lb[i], ub=self._bounds.ub[i],
                )
        self._install(x)
        logging.debug("Genotype replaced; %d active nodes", len(self.active_nodes))

    # Accessors -----------------------------------------------------------------

    @property
    def lb(self) -> tuple[int, ...]:
        return self._bounds.lb

    @property
    def ub(self) -> tuple[int, ...]:
        return self._bounds.ub

    @property
    def active_nodes(self) -> tuple[int, ...]:
        return self._state[1].nodes

    @property
    def active_genes(self) -> tuple[int, ...]:
        return self._state[1].genes

    @property
    def layout(self) -> GeneLayout:
        return self._layout

    @property
    def n(self) -> int:
        return self._layout.n

    @property
    def m(self) -> int:
        return self._layout.m

    @property
    def rows(self) -> int:
        return self._layout.rows

    @property
    def cols(self) -> int:
        return self._layout.cols

    @property
    def levels_back(self) -> int:
        return self._layout.levels_back

    @property
    def arity(self) -> int:
        return self._layout.arity

    @property
    def kernels(self) -> KernelSet:
        return self._kernels

    @property
    def seed(self) -> int:
        return self._rng_manager.seed

    # Mutation ------------------------------------------------------------------

    def mutate(self, idx: int | Iterable[int]) -> None:
        """Mutate the gene at ``idx``, or every gene in a list of indices.

        Raises:
            GeneIndexError: if an index is outside the genotype.
        """
        if isinstance(idx, numbers.Integral) or not isinstance(idx, abc.Iterable):
            operators.mutate_gene(self, idx, self._rng_manager)
        else:
            operators.mutate_genes(self, idx, self._rng_manager)

    def mutate_random(self, N: int = 1) -> None:
        """Mutate ``N`` genes chosen at random over the whole genotype."""
        operators.mutate_random(self, N, self._rng_manager)

    def mutate_active(self, N: int = 1) -> None:
        """Mutate ``N`` active genes (function, connection or output)."""
        operators.mutate_active(self, N, self._rng_manager)

    def mutate_active_fgene(self) -> None:
        operators.mutate_active_fgene(self, self._rng_manager)

    def mutate_active_cgene(self) -> None:
        operators.mutate_active_cgene(self, self._rng_manager)

    def mutate_ogene(self) -> None:
        operators.mutate_ogene(self, self._rng_manager)

    # Evaluation ----------------------------------------------------------------

    def __call__(self, inputs: Sequence[Any]) -> list[Any]:
        """Evaluate at ``inputs`` (numbers, arrays, tensors or symbol names).

        Raises:
            InputSizeError: if ``len(inputs) != n``.
        """
        genes, active = self._state
        return evaluate(genes, self._layout, active.nodes, self._kernels, inputs)

    def __repr__(self) -> str:
        from cgpe.utils.observability import format_expression

        return format_expression(self)


__all__ = ["Expression"]
