"""Translation of expressions to PyTorch modules."""

from .pytorch import ExpressionModule, to_pytorch_model  # noqa: F401

__all__ = ['ExpressionModule', 'to_pytorch_model']
