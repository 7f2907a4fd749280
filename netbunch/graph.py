"""Graph storage and edge-list readers."""

from __future__ import annotations

import sys
from contextlib import contextmanager
from typing import IO, Iterable, Iterator


class Graph:
    """A graph stored as adjacency lists, with an optional weight on every edge.

    In an undirected graph each edge appears in the adjacency lists of both
    its endpoints, so a self-loop counts twice towards the degree of its node.
    Multiple edges are kept.
    """

    def __init__(self, num_nodes: int = 0, directed: bool = False) -> None:
        self.directed = directed
        self._adj: list[list[tuple[int, float]]] = [[] for _ in range(num_nodes)]
        self._edges: list[tuple[int, int, float]] = []

    @classmethod
    def from_edges(cls, edges: Iterable[tuple], directed: bool = False) -> "Graph":
        """Build a graph from (i, j) or (i, j, weight) tuples.

        The number of nodes is one more than the largest label used.
        """
        edge_list: list[tuple[int, int, float]] = []
        for edge in edges:
            if len(edge) == 2:
                i, j = edge
                weight = 1.0
            elif len(edge) == 3:
                i, j, weight = edge
            else:
                raise ValueError(f"an edge needs two or three fields, got {edge!r}")
            i, j = int(i), int(j)
            if i < 0 or j < 0:
                raise ValueError(f"node labels must be non-negative, got {edge!r}")
            edge_list.append((i, j, float(weight)))
        num_nodes = max((max(i, j) for i, j, _ in edge_list), default=-1) + 1
        graph = cls(num_nodes, directed)
        for i, j, weight in edge_list:
            graph._add(i, j, weight)
        return graph

    def _add(self, i: int, j: int, weight: float) -> None:
        self._edges.append((i, j, weight))
        self._adj[i].append((j, weight))
        if not self.directed:
            self._adj[j].append((i, weight))

    @property
    def num_nodes(self) -> int:
        return len(self._adj)

    def __len__(self) -> int:
        return len(self._adj)

    def neighbours(self, node: int) -> list[int]:
        """Return the (out-)neighbours of a node, with repetitions for multi-edges."""
        return [j for j, _ in self._adj[node]]

    def degree(self, node: int) -> int:
        """Return the (out-)degree of a node."""
        return len(self._adj[node])

    def has_edge(self, i: int, j: int) -> bool:
        """Tell whether j is a neighbour of i."""
        return any(k == j for k, _ in self._adj[i])

    def weight(self, i: int, j: int) -> float:
        """Return the weight of the first edge from i to j, or 0.0 if there is none."""
        return next((w for k, w in self._adj[i] if k == j), 0.0)

    def strength(self, node: int) -> float:
        """Return the sum of the weights of the edges of a node."""
        return sum(w for _, w in self._adj[node])

    def edges(self) -> list[tuple[int, int, float]]:
        """Return the edges in the order they were added, as (i, j, weight)."""
        return list(self._edges)

    def transpose(self) -> "Graph":
        """Return a graph with every edge reversed."""
        graph = Graph(self.num_nodes, self.directed)
        for i, j, weight in self._edges:
            graph._add(j, i, weight)
        return graph


def _data_lines(stream: IO[str]) -> Iterator[tuple[int, list[str]]]:
    for lineno, line in enumerate(stream, start=1):
        fields = line.split()
        if not fields or fields[0].startswith("#"):
            continue
        yield lineno, fields


def read_edges(stream: IO[str]) -> Iterator[tuple[int, int]]:
    """Yield (i, j) pairs from an edge list, one edge per line."""
    for lineno, fields in _data_lines(stream):
        if len(fields) < 2:
            raise ValueError(f"line {lineno}: expected two node labels")
        try:
            yield int(fields[0]), int(fields[1])
        except ValueError:
            raise ValueError(f"line {lineno}: invalid node label") from None


def read_weighted_edges(stream: IO[str]) -> Iterator[tuple[int, int, float]]:
    """Yield (i, j, weight) triples from a weighted edge list."""
    for lineno, fields in _data_lines(stream):
        if len(fields) < 3:
            raise ValueError(f"line {lineno}: expected two node labels and a weight")
        try:
            yield int(fields[0]), int(fields[1]), float(fields[2])
        except ValueError:
            raise ValueError(f"line {lineno}: invalid edge") from None


def read_graph(stream: IO[str]) -> Graph:
    """Read an undirected graph from an edge list."""
    return Graph.from_edges(read_edges(stream), directed=False)


def read_weighted_graph(stream: IO[str]) -> Graph:
    """Read an undirected weighted graph from an edge list with weights."""
    return Graph.from_edges(read_weighted_edges(stream), directed=False)


def read_directed_graph(stream: IO[str]) -> Graph:
    """Read a directed graph from an edge list."""
    return Graph.from_edges(read_edges(stream), directed=True)


def read_degree_sequence(stream: IO[str]) -> list[int]:
    """Read a degree sequence, one degree per line."""
    degrees = []
    for lineno, fields in _data_lines(stream):
        try:
            degree = int(fields[0])
        except ValueError:
            raise ValueError(f"line {lineno}: invalid degree") from None
        if degree < 0:
            raise ValueError(f"line {lineno}: degrees must be non-negative")
        degrees.append(degree)
    return degrees


@contextmanager
def open_input(path: str) -> Iterator[IO[str]]:
    """Open a file for reading; '-' stands for standard input."""
    if path == "-":
        yield sys.stdin
    else:
        with open(path, encoding="utf-8") as handle:
            yield handle