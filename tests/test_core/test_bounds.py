import pytest

from cgpe.core.bounds import GeneLayout, compute_bounds
from cgpe.core.expression import Expression
from cgpe.utils.validation import StructuralConfigError, ValidationError


def _bounds(n, m, r, c, l, arity, f):
    return compute_bounds(GeneLayout(n, m, r, c, l, arity, f))


def test_single_node_bounds_freeze_output_gene():
    b = _bounds(2, 1, 1, 1, 1, 2, 2)
    assert b.lb == (0, 0, 0, 2)
    assert b.ub == (1, 1, 1, 2)
    assert b.is_frozen(3)
    assert not b.is_frozen(0)


def test_genotype_length_follows_grid_and_arity():
    layout = GeneLayout(3, 2, 2, 4, 2, 3, 5)
    assert layout.genotype_length == (3 + 1) * 2 * 4 + 2
    assert len(compute_bounds(layout)) == layout.genotype_length
    assert layout.output_offset == 32


def test_levels_back_window_restricts_connections_and_outputs():
    # n=2, rows=2, cols=3, levels_back=1: each column only sees the previous one
    b = _bounds(2, 1, 2, 3, 1, 2, 2)
    # node in column 2, row 0 → block 4 → genes 12..14
    assert (b.lb[12], b.ub[12]) == (0, 1)
    assert (b.lb[13], b.ub[13]) == (4, 5)
    assert (b.lb[14], b.ub[14]) == (4, 5)
    # column 0 connections can only reach inputs
    assert (b.lb[1], b.ub[1]) == (0, 1)
    # output gene restricted to the last column
    assert (b.lb[18], b.ub[18]) == (6, 7)


def test_levels_back_larger_than_columns_lets_outputs_reach_inputs():
    b = _bounds(2, 2, 1, 3, 4, 2, 1)
    assert b.lb[-2:] == (0, 0)
    assert b.ub[-2:] == (4, 4)
    # single-kernel set freezes every function gene
    assert all(b.lb[i] == b.ub[i] == 0 for i in range(0, 9, 3))


def test_layout_gene_arithmetic():
    layout = GeneLayout(2, 1, 2, 3, 1, 2, 2)
    assert layout.node_column(2) == 0
    assert layout.node_column(5) == 1
    assert layout.node_column(7) == 2
    assert layout.node_gene_offset(5) == 9
    assert layout.is_function_gene(9)
    assert not layout.is_function_gene(10)
    assert layout.is_output_gene(layout.output_gene(0))


@pytest.mark.parametrize(
    "args",
    [
        (0, 1, 1, 1, 1, 2),
        (1, 0, 1, 1, 1, 2),
        (1, 1, 0, 1, 1, 2),
        (1, 1, 1, 0, 1, 2),
        (1, 1, 1, 1, 0, 2),
        (1, 1, 1, 1, 1, 1),
    ],
)
def test_structural_parameter_violations_raise(args):
    with pytest.raises(StructuralConfigError) as excinfo:
        Expression(*args, ["sum", "mul"], 0)
    assert excinfo.value.error_type == "structural_config"
    assert isinstance(excinfo.value, ValidationError)


def test_empty_kernel_set_raises():
    with pytest.raises(StructuralConfigError):
        Expression(2, 1, 1, 1, 1, 2, [], 0)


def test_several_zero_parameters_raise_one_error():
    with pytest.raises(StructuralConfigError):
        Expression(0, 0, 0, 0, 0, 2, ["sum"], 0)
