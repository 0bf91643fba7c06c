"""Translation of an expression's active graph into a PyTorch module.

The module freezes the genotype at translation time and evaluates it on a
``[batch, n]`` tensor through the expression's own kernels, so autograd
provides derivatives of every output with respect to every input.
"""

from __future__ import annotations

from typing import Any

import torch
import torch.nn as nn

from cgpe.generation.evaluator import evaluate
from cgpe.utils.validation import InputSizeError


class ExpressionModule(nn.Module):
    """Batched torch evaluation of a frozen CGP genotype."""

    def __init__(self, expression: Any, device: str | torch.device = "cpu",
                 dtype: torch.dtype = torch.float32) -> None:
        super().__init__()
        self.layout = expression.layout
        self.kernels = expression.kernels
        self.genes = tuple(expression.get())
        self.active_nodes = tuple(expression.active_nodes)
        self.device = torch.device(device)
        self.dtype = dtype

    def forward(self, x: torch.Tensor) -> torch.Tensor:
        if x.dim() != 2 or x.shape[1] != self.layout.n:
            raise InputSizeError(
                "Input tensor must have shape [batch, n]",
                expected=self.layout.n, got=tuple(x.shape),
            )
        x = x.to(device=self.device, dtype=self.dtype)
        columns = [x[:, i] for i in range(self.layout.n)]
        outputs = evaluate(self.genes, self.layout, self.active_nodes, self.kernels, columns)
        return torch.stack(outputs, dim=1)


def to_pytorch_model(expression: Any, config: dict | None = None) -> ExpressionModule:
    """Translate ``expression`` to an ``nn.Module``.

    Config keys: ``device`` (default ``"cpu"``), ``dtype`` (default ``torch.float32``).
    """
    config = config or {}
    return ExpressionModule(
        expression,
        device=config.get('device', 'cpu'),
        dtype=config.get('dtype', torch.float32),
    )


__all__ = ["ExpressionModule", "to_pytorch_model"]
