"""Node and graph clustering coefficients, plain and weighted."""

from __future__ import annotations

import sys

from .graph import Graph, open_input, read_graph, read_weighted_graph


def node_clustering(graph: Graph) -> list[float]:
    """Return the clustering coefficient of every node.

    Nodes with degree smaller than 2 get a coefficient of zero.
    """
    result = []
    for i in range(graph.num_nodes):
        k = graph.degree(i)
        closed = sum(
            1
            for j in graph.neighbours(i)
            for l in graph.neighbours(j)
            if l != i and graph.has_edge(i, l)
        )
        result.append(closed / (k * (k - 1)) if k > 1 else 0.0)
    return result


def _mean(values: list[float]) -> float:
    if not values:
        raise ValueError("the graph has no nodes")
    return sum(values) / len(values)


def average_clustering(graph: Graph) -> float:
    """Return the graph clustering coefficient, the mean over all nodes."""
    return _mean(node_clustering(graph))


def node_weighted_clustering(graph: Graph) -> list[float]:
    """Return the weighted clustering coefficient of every node.

    Each closed triangle through i contributes the mean weight of its two
    edges at i, and the sum is divided by s_i * (k_i - 1).
    """
    result = []
    for i in range(graph.num_nodes):
        k = graph.degree(i)
        total = 0.0
        for j in graph.neighbours(i):
            w_ij = graph.weight(i, j)
            for l in graph.neighbours(j):
                w_il = graph.weight(i, l)
                if l != i and w_il > 0.0:
                    total += (w_ij + w_il) / 2.0
        result.append(total / (graph.strength(i) * (k - 1)) if k > 1 else 0.0)
    return result


def average_weighted_clustering(graph: Graph) -> float:
    """Return the weighted graph clustering coefficient."""
    return _mean(node_weighted_clustering(graph))


def _run(argv, prog, reader, per_node, fmt, show_flag) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print(f"Usage: {prog} <graph_in> [SHOW]")
        print("Compute the clustering coefficient of 'graph_in' ('-' reads STDIN).")
        return 1
    show = show_flag(args[1:])
    try:
        with open_input(args[0]) as stream:
            graph = reader(stream)
    except OSError as exc:
        print(f"{prog}: {exc}", file=sys.stderr)
        return 2
    except ValueError as exc:
        print(f"{prog}: {exc}", file=sys.stderr)
        return 1
    values = per_node(graph)
    if show:
        for i, c in enumerate(values):
            print(f"{i} {graph.degree(i)} {c:{fmt}}", file=sys.stderr)
    try:
        print(f"{_mean(values):.8f}")
    except ValueError as exc:
        print(f"{prog}: {exc}", file=sys.stderr)
        return 1
    return 0


def main(argv=None) -> int:
    """Print the clustering coefficient of an edge-list graph."""
    return _run(
        argv,
        "clust",
        read_graph,
        node_clustering,
        "g",
        lambda rest: bool(rest) and rest[0].upper() == "SHOW",
    )


def main_weighted(argv=None) -> int:
    """Print the weighted clustering coefficient of a weighted edge-list graph."""
    return _run(
        argv,
        "clust_w",
        read_weighted_graph,
        node_weighted_clustering,
        ".14g",
        bool,
    )