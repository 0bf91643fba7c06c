"""Mutation operators for CGP expressions."""

from .operators import (
    mutate_active,
    mutate_active_cgene,
    mutate_active_fgene,
    mutate_gene,
    mutate_genes,
    mutate_ogene,
    mutate_random,
)

__all__ = [
    "mutate_gene",
    "mutate_genes",
    "mutate_random",
    "mutate_active",
    "mutate_active_fgene",
    "mutate_active_cgene",
    "mutate_ogene",
]
