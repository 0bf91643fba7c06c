import math

import numpy as np
import pytest
import torch

from cgpe.core.kernel import Kernel, KernelSet, available_kernels, register_kernel


def _k(name):
    return KernelSet([name])[0]


def test_arithmetic_kernels_use_all_inputs():
    assert _k("sum")([1.0, 2.0, 3.0]) == 6.0
    assert _k("diff")([5.0, 2.0, 1.0]) == 2.0
    assert _k("mul")([2.0, 3.0, 4.0]) == 24.0
    assert _k("div")([8.0, 2.0, 2.0]) == 2.0


def test_protected_division():
    assert _k("pdiv")([1.0, 0.0]) == 1.0
    assert _k("pdiv")([3.0, 2.0]) == 1.5
    out = _k("pdiv")([np.array([1.0, 2.0]), np.array([0.0, 4.0])])
    np.testing.assert_allclose(out, [1.0, 0.5])
    t = _k("pdiv")([torch.tensor([1.0, 2.0]), torch.tensor([0.0, 4.0])])
    assert torch.allclose(t, torch.tensor([1.0, 0.5]))


def test_nonlinear_kernels_on_floats():
    assert _k("sig")([0.0, 0.0]) == 0.5
    assert _k("tanh")([0.25, 0.25]) == pytest.approx(math.tanh(0.5))
    assert _k("ReLu")([-1.0, 0.5]) == 0.0
    assert _k("ReLu")([1.0, 0.5]) == 1.5
    assert _k("ELU")([-1.0, 0.0]) == pytest.approx(math.exp(-1.0) - 1.0)
    assert _k("ISRU")([0.0, 0.0]) == 0.0
    assert _k("gaussian")([0.0, 0.0]) == 1.0
    assert _k("sin")([0.0, 5.0]) == 0.0
    assert _k("cos")([0.0, 5.0]) == 1.0
    assert _k("exp")([0.0, 5.0]) == 1.0
    assert _k("log")([1.0, 5.0]) == 0.0
    assert _k("inv")([4.0, 5.0]) == 0.25
    assert _k("abs")([-3.0, 5.0]) == 3.0


def test_math_kernels_dispatch_on_arrays_and_tensors():
    arr = _k("sin")([np.array([0.0, np.pi / 2]), np.array([0.0, 0.0])])
    np.testing.assert_allclose(arr, [0.0, 1.0], atol=1e-12)
    x = torch.tensor(0.5, requires_grad=True)
    y = _k("sin")([x, torch.tensor(0.0)])
    y.backward()
    assert torch.isclose(x.grad, torch.cos(torch.tensor(0.5)))


def test_symbolic_printers():
    assert _k("sum")(["x", "y", "z"]) == "(x+y+z)"
    assert _k("diff")(["x", "y"]) == "(x-y)"
    assert _k("sig")(["x", "y"]) == "sig(x+y)"
    assert _k("sin")(["x", "y"]) == "sin(x)"


def test_kernel_set_indexing_and_names():
    ks = KernelSet(["sum", "mul"])
    ks.push_back("cos")
    assert len(ks) == 3
    assert ks.names() == ["sum", "mul", "cos"]
    assert str(ks[2]) == "cos"
    assert [k.name for k in ks] == ["sum", "mul", "cos"]


def test_unknown_kernel_name_raises():
    with pytest.raises(ValueError) as excinfo:
        KernelSet(["sum", "nope"])
    assert "nope" in str(excinfo.value)


def test_register_custom_kernel():
    square_sum = Kernel("square_sum", lambda xs: sum(x * x for x in xs), lambda xs: "(" + "+".join(f"{x}^2" for x in xs) + ")")
    register_kernel(square_sum)
    assert "square_sum" in available_kernels()
    ks = KernelSet(["square_sum"])
    assert ks[0]([1.0, 2.0]) == 5.0
    assert ks[0](["a", "b"]) == "(a^2+b^2)"


def test_non_callable_kernel_rejected():
    with pytest.raises(TypeError):
        KernelSet([42])
