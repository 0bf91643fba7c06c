"""Kernels: the primitive functions applied by computational nodes.

A kernel receives the full ``arity``-length list of its node's input values
and returns one value of the same element type. String inputs select the
symbolic printer instead of the numeric function, so one genotype can be
evaluated over floats, numpy arrays, torch tensors (autograd acts as the
differentiation jet) or rendered as a formula.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Sequence

import numpy as np
import torch


@dataclass(frozen=True)
class Kernel:
    name: str
    function: Callable[[Sequence[Any]], Any]
    printer: Callable[[Sequence[str]], str]

    def __call__(self, inputs: Sequence[Any]) -> Any:
        if len(inputs) > 0 and isinstance(inputs[0], str):
            return self.printer(inputs)
        return self.function(inputs)

    def __str__(self) -> str:
        return self.name


def _backend(x: Any):
    """Module providing elementwise math for ``x`` (torch, numpy or math)."""
    if isinstance(x, torch.Tensor):
        return torch
    if isinstance(x, (np.ndarray, np.generic)):
        return np
    return math


def _exp(x: Any) -> Any:
    return _backend(x).exp(x)


def _log(x: Any) -> Any:
    return _backend(x).log(x)


def _sin(x: Any) -> Any:
    return _backend(x).sin(x)


def _cos(x: Any) -> Any:
    return _backend(x).cos(x)


def _tanh(x: Any) -> Any:
    return _backend(x).tanh(x)


def _sqrt(x: Any) -> Any:
    return _backend(x).sqrt(x)


def _abs(x: Any) -> Any:
    if _backend(x) is math:
        return abs(x)
    return _backend(x).abs(x)


def _where(cond: Any, a: Any, b: Any) -> Any:
    backend = _backend(cond)
    if backend is math:
        return a if cond else b
    if backend is torch:
        return torch.where(cond, a, b)
    return np.where(cond, a, b)


def _total(xs: Sequence[Any]) -> Any:
    retval = xs[0]
    for x in xs[1:]:
        retval = retval + x
    return retval


# Numeric definitions -------------------------------------------------------

def _sum(xs):
    return _total(xs)


def _diff(xs):
    retval = xs[0]
    for x in xs[1:]:
        retval = retval - x
    return retval


def _mul(xs):
    retval = xs[0]
    for x in xs[1:]:
        retval = retval * x
    return retval


def _div(xs):
    retval = xs[0]
    for x in xs[1:]:
        retval = retval / x
    return retval


def _pdiv(xs):
    # Protected division: 1 wherever the denominator is zero
    retval = xs[0]
    for x in xs[1:]:
        backend = _backend(x) if _backend(retval) is math else _backend(retval)
        if backend is math:
            retval = retval / x if x != 0 else 1.0
        elif backend is torch:
            den = torch.as_tensor(x)
            zero = den == 0
            q = retval / torch.where(zero, torch.ones_like(den), den)
            retval = torch.where(zero, torch.ones_like(q), q)
        else:
            den = np.asarray(x, dtype=float)
            zero = den == 0
            retval = np.where(zero, 1.0, np.divide(retval, np.where(zero, 1.0, den)))
    return retval


def _sig(xs):
    return 1.0 / (1.0 + _exp(-_total(xs)))


def _tanh_k(xs):
    return _tanh(_total(xs))


def _relu(xs):
    s = _total(xs)
    return _where(s > 0, s, s * 0)


def _elu(xs):
    s = _total(xs)
    return _where(s > 0, s, _exp(s) - 1.0)


def _isru(xs):
    s = _total(xs)
    return s / _sqrt(1.0 + s * s)


def _gaussian(xs):
    s = _total(xs)
    return _exp(-(s * s))


def _sin_k(xs):
    return _sin(xs[0])


def _cos_k(xs):
    return _cos(xs[0])


def _log_k(xs):
    return _log(xs[0])


def _exp_k(xs):
    return _exp(xs[0])


def _inv(xs):
    return 1.0 / xs[0]


def _abs_k(xs):
    return _abs(xs[0])


# Symbolic definitions ------------------------------------------------------

def _join(op: str) -> Callable[[Sequence[str]], str]:
    def printer(xs: Sequence[str]) -> str:
        return "(" + op.join(xs) + ")"
    return printer


def _wrap_sum(fname: str) -> Callable[[Sequence[str]], str]:
    def printer(xs: Sequence[str]) -> str:
        return f"{fname}(" + "+".join(xs) + ")"
    return printer


def _wrap_first(fname: str) -> Callable[[Sequence[str]], str]:
    def printer(xs: Sequence[str]) -> str:
        return f"{fname}({xs[0]})"
    return printer


_REGISTRY: dict[str, Kernel] = {}


def register_kernel(kernel: Kernel) -> Kernel:
    """Add ``kernel`` to the name registry used by ``KernelSet``."""
    _REGISTRY[kernel.name] = kernel
    return kernel


def available_kernels() -> list[str]:
    return sorted(_REGISTRY)


for _k in (
    Kernel("sum", _sum, _join("+")),
    Kernel("diff", _diff, _join("-")),
    Kernel("mul", _mul, _join("*")),
    Kernel("div", _div, _join("/")),
    Kernel("pdiv", _pdiv, _join("/")),
    Kernel("sig", _sig, _wrap_sum("sig")),
    Kernel("tanh", _tanh_k, _wrap_sum("tanh")),
    Kernel("ReLu", _relu, _wrap_sum("ReLu")),
    Kernel("ELU", _elu, _wrap_sum("ELU")),
    Kernel("ISRU", _isru, _wrap_sum("ISRU")),
    Kernel("gaussian", _gaussian, _wrap_sum("gaussian")),
    Kernel("sin", _sin_k, _wrap_first("sin")),
    Kernel("cos", _cos_k, _wrap_first("cos")),
    Kernel("log", _log_k, _wrap_first("log")),
    Kernel("exp", _exp_k, _wrap_first("exp")),
    Kernel("inv", _inv, _wrap_first("1/")),
    Kernel("abs", _abs_k, _wrap_first("abs")),
):
    register_kernel(_k)


class KernelSet:
    """Ordered collection of kernels; a function gene indexes into it."""

    def __init__(self, kernels: Iterable[str | Kernel] = ()) -> None:
        self._kernels: list[Any] = []
        for k in kernels:
            self.push_back(k)

    def push_back(self, kernel: str | Kernel) -> None:
        # Anything callable with a ``name`` satisfies the kernel contract
        if not isinstance(kernel, str):
            if not callable(kernel) or not hasattr(kernel, 'name'):
                raise TypeError(f"Kernel must be callable and named, got {kernel!r}")
            self._kernels.append(kernel)
            return
        try:
            self._kernels.append(_REGISTRY[kernel])
        except KeyError:
            raise ValueError(
                f"Unknown kernel {kernel!r}; available: {available_kernels()}"
            ) from None

    def names(self) -> list[str]:
        return [k.name for k in self._kernels]

    def __len__(self) -> int:
        return len(self._kernels)

    def __getitem__(self, idx: int) -> Kernel:
        return self._kernels[idx]

    def __iter__(self):
        return iter(self._kernels)

    def __repr__(self) -> str:
        return f"KernelSet({self.names()!r})"


__all__ = ["Kernel", "KernelSet", "register_kernel", "available_kernels"]
