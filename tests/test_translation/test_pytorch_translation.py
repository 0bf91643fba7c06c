import pytest
import torch

from cgpe.core.expression import Expression
from cgpe.translation.pytorch import to_pytorch_model
from cgpe.utils.validation import InputSizeError


def _product():
    e = Expression(2, 1, 1, 1, 1, 2, ["sum", "mul"], 0)
    e.set([1, 0, 1, 2])
    return e


def test_module_matches_scalar_evaluation():
    e = Expression(3, 2, 2, 6, 3, 2, ["sum", "diff", "mul", "sin"], 12)
    model = to_pytorch_model(e, {'device': 'cpu', 'dtype': torch.float64})
    x = torch.tensor([[0.5, -1.0, 2.0], [1.5, 0.25, -0.75]], dtype=torch.float64)
    y = model(x)
    assert y.shape == (2, 2)
    for row in range(2):
        expected = e([float(v) for v in x[row]])
        assert torch.allclose(y[row], torch.tensor(expected, dtype=torch.float64))


def test_gradients_flow_through_module():
    model = to_pytorch_model(_product())
    x = torch.tensor([[1.0, 2.0], [3.0, 4.0]], requires_grad=True)
    y = model(x)
    assert torch.allclose(y, torch.tensor([[2.0], [12.0]]))
    y.sum().backward()
    assert torch.allclose(x.grad, torch.tensor([[2.0, 1.0], [4.0, 3.0]]))


def test_expression_evaluates_autograd_tensors_directly():
    e = _product()
    a = torch.tensor(1.5, requires_grad=True)
    b = torch.tensor(2.0, requires_grad=True)
    out = e([a, b])[0]
    out.backward()
    assert torch.isclose(a.grad, torch.tensor(2.0))
    assert torch.isclose(b.grad, torch.tensor(1.5))


def test_module_freezes_genotype_at_translation():
    e = _product()
    model = to_pytorch_model(e)
    e.set([0, 0, 1, 2])
    y = model(torch.tensor([[3.0, 4.0]]))
    assert torch.allclose(y, torch.tensor([[12.0]]))


def test_module_rejects_wrong_width():
    model = to_pytorch_model(_product())
    with pytest.raises(InputSizeError):
        model(torch.zeros(2, 3))
