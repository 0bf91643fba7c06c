import time

from cgpe.core.bounds import GeneLayout
from cgpe.core.expression import Expression
from cgpe.generation.active import resolve_active, resolve_active_nodes


def _two_node_layout():
    # n=2, m=2, one row of two columns, outputs may reach the inputs
    return GeneLayout(2, 2, 1, 2, 3, 2, 2)


def test_active_set_follows_connections_back_to_inputs():
    active = resolve_active([0, 0, 1, 1, 2, 2, 3, 0], _two_node_layout())
    assert active.nodes == (0, 1, 2, 3)
    assert active.genes == (0, 1, 2, 3, 4, 5, 6, 7)


def test_unreachable_node_is_inactive():
    # node 3 reads node 2, but only node 2 feeds the outputs
    active = resolve_active([0, 0, 1, 1, 2, 2, 2, 2], _two_node_layout())
    assert active.nodes == (0, 1, 2)
    assert active.genes == (0, 1, 2, 6, 7)


def test_outputs_on_inputs_leave_only_output_genes():
    active = resolve_active([0, 0, 1, 1, 2, 2, 1, 0], _two_node_layout())
    assert active.nodes == (0, 1)
    assert active.genes == (6, 7)


def test_output_genes_are_last_and_in_order():
    e = Expression(3, 4, 3, 8, 3, 3, ["sum", "diff", "mul"], 9)
    m = e.m
    expected_tail = tuple(range(len(e.get()) - m, len(e.get())))
    for _ in range(50):
        assert e.active_genes[-m:] == expected_tail
        e.mutate_active(2)


def test_active_nodes_sound_and_sorted():
    e = Expression(2, 3, 2, 10, 4, 2, ["sum", "diff", "mul"], 4)
    max_id = e.n + e.rows * e.cols - 1
    for _ in range(50):
        nodes = e.active_nodes
        assert list(nodes) == sorted(set(nodes))
        assert all(0 <= i <= max_id for i in nodes)
        for j in range(e.m):
            assert e.get()[e.layout.output_gene(j)] in nodes
        e.mutate_random(3)


def test_active_genes_cover_exactly_the_active_node_blocks():
    e = Expression(2, 2, 2, 6, 3, 2, ["sum", "mul"], 21)
    blocks = [g for g in e.active_genes[:-e.m]]
    computational = [i for i in e.active_nodes if i >= e.n]
    assert len(blocks) == 3 * len(computational)
    for k, node_id in enumerate(computational):
        offset = e.layout.node_gene_offset(node_id)
        assert blocks[3 * k:3 * k + 3] == [offset, offset + 1, offset + 2]


def test_fan_in_heavy_chain_resolves_in_linear_time():
    # Every node reads its predecessor twice: without per-level deduplication
    # the frontier doubles at each of the 200 levels.
    cols = 200
    layout = GeneLayout(1, 1, 1, cols, cols, 2, 2)
    genes = []
    for k in range(cols):
        prev = 0 if k == 0 else layout.n + k - 1
        genes.extend([0, prev, prev])
    genes.append(layout.n + cols - 1)

    start = time.perf_counter()
    nodes = resolve_active_nodes(genes, layout)
    active = resolve_active(genes, layout)
    elapsed = time.perf_counter() - start

    assert nodes == list(range(0, cols + 1))
    assert active.genes == tuple(range(0, 3 * cols + 1))
    assert elapsed < 1.0


def test_active_set_is_a_pure_function_of_the_genotype():
    a = Expression(2, 2, 2, 5, 2, 2, ["sum", "mul"], 1)
    b = Expression(2, 2, 2, 5, 2, 2, ["sum", "mul"], 2)
    b.set(a.get())
    assert a.active_nodes == b.active_nodes
    assert a.active_genes == b.active_genes


def test_inputs_reached_on_several_paths_listed_once():
    # output 0 reads node 2 (which reads input 0 twice), output 1 reads input 0 directly
    nodes = resolve_active_nodes([0, 0, 0, 1, 2, 2, 2, 0], _two_node_layout())
    assert nodes == [0, 2]
