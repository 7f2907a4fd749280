import random
from collections import Counter

import pytest

from netbunch.conf import main, sample_simple_graph


def test_single_edge():
    assert sample_simple_graph([1, 1], rng=random.Random(1)) == [(0, 1)]


def test_triangle_is_the_only_choice():
    edges = sample_simple_graph([2, 2, 2], rng=random.Random(3))
    assert edges == [(0, 1), (0, 2), (1, 2)]


def test_empty_sequence():
    assert sample_simple_graph([], rng=random.Random(0)) == []


def test_odd_sequence_raises():
    with pytest.raises(ValueError):
        sample_simple_graph([1, 2, 2], rng=random.Random(0))


@pytest.mark.parametrize("seed", range(6))
def test_degrees_are_honoured(seed):
    degrees = [3, 3, 2, 2, 2, 1, 1, 0]
    edges = sample_simple_graph(degrees, rng=random.Random(seed))
    counts = Counter(n for e in edges for n in e)
    assert [counts[n] for n in range(len(degrees))] == degrees
    assert all(i < j for i, j in edges)
    assert len(set(edges)) == len(edges)


@pytest.mark.parametrize("seed", range(4))
def test_edges_are_ordered_by_larger_endpoint(seed):
    edges = sample_simple_graph([2, 2, 2, 2, 2, 2], rng=random.Random(seed))
    assert edges == sorted(edges, key=lambda e: (e[1], e[0]))


def test_threshold_accepts_unmatched_stubs():
    edges = sample_simple_graph([2, 0], threshold=2, rng=random.Random(0), max_rejects=10)
    assert edges == []


def test_main_prints_edges(tmp_path, capsys):
    path = tmp_path / "degs.txt"
    path.write_text("1\n1\n")
    assert main([str(path)]) == 0
    captured = capsys.readouterr()
    assert captured.out == "0 1\n"
    assert "Found a graph!" in captured.err


def test_main_odd_sequence(tmp_path):
    path = tmp_path / "degs.txt"
    path.write_text("1\n1\n1\n")
    assert main([str(path)]) == 3


def test_main_without_arguments():
    assert main([]) == 1


def test_main_missing_file(tmp_path):
    assert main([str(tmp_path / "missing.txt")]) == 2