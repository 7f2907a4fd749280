import pytest

from netbunch.clustering import (
    average_clustering,
    average_weighted_clustering,
    main,
    main_weighted,
    node_clustering,
    node_weighted_clustering,
)
from netbunch.graph import Graph

TRIANGLE = [(0, 1), (1, 2), (2, 0)]
MIXED = [(0, 1), (1, 2), (2, 0), (2, 3), (3, 4), (4, 2), (4, 5)]


def test_triangle_fully_clustered():
    g = Graph.from_edges(TRIANGLE, directed=False)
    assert node_clustering(g) == [1.0, 1.0, 1.0]
    assert average_clustering(g) == 1.0


def test_star_has_zero_clustering():
    g = Graph.from_edges([(0, 1), (0, 2), (0, 3)], directed=False)
    assert node_clustering(g) == [0.0, 0.0, 0.0, 0.0]


def test_values_in_unit_interval_and_average_is_mean():
    g = Graph.from_edges(MIXED, directed=False)
    values = node_clustering(g)
    assert all(0.0 <= c <= 1.0 for c in values)
    assert average_clustering(g) == pytest.approx(sum(values) / len(values))
    assert values[5] == 0.0


def test_uniform_weights_match_unweighted():
    g = Graph.from_edges(MIXED, directed=False)
    w = Graph.from_edges([(i, j, 3.0) for i, j in MIXED], directed=False)
    assert node_weighted_clustering(w) == pytest.approx(node_clustering(g))
    assert average_weighted_clustering(w) == pytest.approx(average_clustering(g))


def test_weighted_clustering_scale_invariant():
    edges = [(0, 1, 1.0), (1, 2, 2.0), (2, 0, 3.0), (2, 3, 4.0)]
    g = Graph.from_edges(edges, directed=False)
    scaled = Graph.from_edges([(i, j, 10 * w) for i, j, w in edges], directed=False)
    assert node_weighted_clustering(scaled) == pytest.approx(node_weighted_clustering(g))


def test_empty_graph_rejected():
    g = Graph.from_edges([], directed=False)
    with pytest.raises(ValueError):
        average_clustering(g)
    with pytest.raises(ValueError):
        average_weighted_clustering(g)


def test_main_prints_average(tmp_path, capsys):
    path = tmp_path / "g.txt"
    path.write_text("0 1\n1 2\n2 0\n")
    assert main([str(path)]) == 0
    out = capsys.readouterr()
    assert out.out == "1.00000000\n"
    assert out.err == ""


def test_main_show_lists_nodes(tmp_path, capsys):
    path = tmp_path / "g.txt"
    path.write_text("0 1\n0 2\n")
    assert main([str(path), "show"]) == 0
    out = capsys.readouterr()
    assert out.err.splitlines() == ["0 2 0", "1 1 0", "2 1 0"]


def test_main_without_arguments(capsys):
    assert main([]) == 1
    assert "Usage" in capsys.readouterr().out


def test_main_missing_file(tmp_path):
    assert main([str(tmp_path / "nope.txt")]) == 2


def test_main_weighted_matches_function(tmp_path, capsys):
    path = tmp_path / "g.txt"
    path.write_text("0 1 1\n1 2 2\n2 0 3\n2 3 1\n")
    assert main_weighted([str(path), "x"]) == 0
    out = capsys.readouterr()
    g = Graph.from_edges(
        [(0, 1, 1.0), (1, 2, 2.0), (2, 0, 3.0), (2, 3, 1.0)], directed=False
    )
    assert out.out == f"{average_weighted_clustering(g):.8f}\n"
    assert len(out.err.splitlines()) == 4