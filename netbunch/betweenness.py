"""Node and edge betweenness with Brandes' algorithm."""

from __future__ import annotations

import random
import sys
from collections import defaultdict
from typing import Iterable

from .graph import Graph, open_input, read_graph


def _brandes(
    graph: Graph,
    sources: Iterable[int],
    edge_bet: defaultdict | None = None,
) -> list[float]:
    """Accumulate dependencies from each source; update edge_bet if given."""
    n = graph.num_nodes
    node_bet = [0.0] * n
    for source in sources:
        if not 0 <= source < n:
            raise ValueError(f"node {source} is not in the graph")
        dist = [-1] * n
        sigma = [0] * n
        preds: list[list[int]] = [[] for _ in range(n)]
        delta = [0.0] * n
        dist[source] = 0
        sigma[source] = 1
        order = [source]
        frontier = [source]
        depth = 0
        while frontier:
            found: list[int] = []
            for current in frontier:
                for w in graph.neighbours(current):
                    if dist[w] == depth + 1:
                        preds[w].append(current)
                        sigma[w] += sigma[current]
                    elif dist[w] == -1:
                        dist[w] = depth + 1
                        found.append(w)
                        preds[w].append(current)
                        sigma[w] += sigma[current]
            order.extend(found)
            frontier = found
            depth += 1
        for w in reversed(order[1:]):
            for i in preds[w]:
                value = sigma[i] / sigma[w] * (1.0 + delta[w])
                delta[i] += value
                if edge_bet is not None:
                    edge_bet[(i, w)] += value
                    edge_bet[(w, i)] += value
            node_bet[w] += delta[w]
    return node_bet


def betweenness(
    graph: Graph, sources: Iterable[int] | None = None
) -> tuple[list[float], dict[tuple[int, int], float]]:
    """Return node and edge betweenness due to shortest paths from sources.

    All nodes are used as sources when none are given. Edge betweenness is
    keyed by ordered pairs (i, j); both orientations of an edge hold the
    same value.
    """
    if sources is None:
        sources = range(graph.num_nodes)
    edge_bet: defaultdict = defaultdict(float)
    node_bet = _brandes(graph, sources, edge_bet)
    return node_bet, dict(edge_bet)


def dependency(graph: Graph, start: int = 0, end: int | None = None) -> list[float]:
    """Return the betweenness dependency due to the sources start..end inclusive.

    end defaults to the last node; it is clipped to the last node.
    """
    last = graph.num_nodes - 1
    end = last if end is None else min(end, last)
    if start < 0:
        raise ValueError("start node must be non-negative")
    return _brandes(graph, range(start, end + 1))


def _load(path: str, prog: str) -> Graph | int:
    try:
        with open_input(path) as stream:
            return read_graph(stream)
    except OSError as exc:
        print(f"{prog}: {exc}", file=sys.stderr)
        return 2
    except ValueError as exc:
        print(f"{prog}: {exc}", file=sys.stderr)
        return 1


def _select_sources(args: list[str], n: int, rng: random.Random) -> list[int]:
    nodes = list(range(n))
    if len(args) < 3:
        return nodes
    mode = args[1].upper()
    if mode == "SEQ":
        start = int(args[2])
        if start < 0 or start > n - 1:
            start = 0
        end = int(args[3]) if len(args) > 3 else n - 1
        end = min(end, n - 1)
        return nodes[start : end + 1]
    if mode == "RND":
        num = int(args[2])
        if num > n or num < 1:
            num = n
        rng.shuffle(nodes)
        return nodes[:num]
    return nodes


def main(argv=None) -> int:
    """Print node betweenness on STDOUT and edge betweenness on STDERR."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("Usage: betweenness <graph_in> [SEQ <node_start> [<node_end>]]")
        print("Usage: betweenness <graph_in> [RND <num>]")
        print("Compute node and edge betweenness from a set of source nodes")
        print("('-' reads STDIN).")
        return 1
    graph = _load(args[0], "betweenness")
    if isinstance(graph, int):
        return graph
    try:
        sources = _select_sources(args, graph.num_nodes, random.Random())
    except ValueError as exc:
        print(f"betweenness: {exc}", file=sys.stderr)
        return 1
    node_bet, edge_bet = betweenness(graph, sources)
    for value in node_bet:
        print(f"{value:g}")
    for i in range(graph.num_nodes):
        for j in sorted(graph.neighbours(i)):
            print(f"{i} {j} {edge_bet.get((i, j), 0.0):g}", file=sys.stderr)
    return 0


def dependency_main(argv=None) -> int:
    """Print the betweenness dependency of every node."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not 1 <= len(args) <= 3:
        print("Usage: bet_dependency <graph_in> [<node_start> [<node_end>]]")
        print("Compute the betweenness dependency due to the shortest paths")
        print("from the nodes node_start..node_end ('-' reads STDIN).")
        return 1
    try:
        start = int(args[1]) if len(args) > 1 else 0
        end = int(args[2]) if len(args) > 2 else None
    except ValueError:
        print("bet_dependency: invalid node label", file=sys.stderr)
        return 1
    graph = _load(args[0], "bet_dependency")
    if isinstance(graph, int):
        return graph
    try:
        values = dependency(graph, start, end)
    except ValueError as exc:
        print(f"bet_dependency: {exc}", file=sys.stderr)
        return 1
    for value in values:
        print(f"{value:g}")
    return 0