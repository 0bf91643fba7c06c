"""Core data structures: gene layout, bounds, kernels and the expression engine."""

from .bounds import Bounds, GeneLayout, compute_bounds, validate_structure
from .kernel import Kernel, KernelSet, available_kernels, register_kernel
from .expression import Expression

__all__ = [
    'Bounds',
    'GeneLayout',
    'compute_bounds',
    'validate_structure',
    'Kernel',
    'KernelSet',
    'available_kernels',
    'register_kernel',
    'Expression',
]
