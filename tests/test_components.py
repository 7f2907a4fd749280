import random

import pytest

from netbunch.components import (
    connected_components,
    largest_component_edges,
    largest_component_main,
    main,
)
from netbunch.graph import Graph


def _random_graph(seed, nodes=30, edges=25):
    rng = random.Random(seed)
    return Graph.from_edges(
        [(rng.randrange(nodes), rng.randrange(nodes)) for _ in range(edges)]
    )


def test_two_components():
    graph = Graph.from_edges([(0, 1), (1, 2), (3, 4)])
    assert connected_components(graph) == [[0, 1, 2], [3, 4]]


def test_isolated_node_is_its_own_component():
    graph = Graph.from_edges([(0, 1), (3, 3)])
    assert connected_components(graph) == [[0, 1], [2], [3]]


def test_empty_graph_has_no_components():
    assert connected_components(Graph.from_edges([])) == []
    assert largest_component_edges(Graph.from_edges([])) == []


@pytest.mark.parametrize("seed", range(5))
def test_components_partition_the_nodes(seed):
    graph = _random_graph(seed)
    components = connected_components(graph)
    flat = sorted(n for c in components for n in c)
    assert flat == list(range(graph.num_nodes))
    assert [c[0] for c in components] == sorted(c[0] for c in components)


@pytest.mark.parametrize("seed", range(5))
def test_edges_stay_inside_components(seed):
    graph = _random_graph(seed)
    where = {n: k for k, c in enumerate(connected_components(graph)) for n in c}
    for i, j, _ in graph.edges():
        assert where[i] == where[j]


def test_largest_component_edges():
    graph = Graph.from_edges([(3, 4), (0, 1), (1, 2)])
    assert largest_component_edges(graph) == [(0, 1), (1, 2)]


def test_largest_component_tie_takes_first():
    graph = Graph.from_edges([(2, 3), (0, 1)])
    assert largest_component_edges(graph) == [(0, 1)]


@pytest.mark.parametrize("seed", range(5))
def test_largest_component_edges_belong_to_largest(seed):
    graph = _random_graph(seed)
    components = connected_components(graph)
    size = max(len(c) for c in components)
    edges = largest_component_edges(graph)
    nodes = {n for e in edges for n in e}
    assert all(i < j for i, j in edges)
    if edges:
        assert len(nodes) == size


def test_main_prints_sizes(tmp_path, capsys):
    path = tmp_path / "g.txt"
    path.write_text("0 1\n1 2\n3 4\n")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == "3\n2\n"


def test_main_show(tmp_path, capsys):
    path = tmp_path / "g.txt"
    path.write_text("0 1\n1 2\n3 4\n")
    assert main([str(path), "show"]) == 0
    assert capsys.readouterr().out == "3: 0 1 2\n2: 3 4\n"


def test_main_without_arguments():
    assert main([]) == 1


def test_main_missing_file(tmp_path):
    assert main([str(tmp_path / "missing.txt")]) == 2


def test_largest_component_main(tmp_path, capsys):
    path = tmp_path / "g.txt"
    path.write_text("3 4\n0 1\n1 2\n")
    assert largest_component_main([str(path)]) == 0
    assert capsys.readouterr().out == "0 1\n1 2\n"


def test_largest_component_main_without_arguments():
    assert largest_component_main([]) == 1