"""Multigraphs sampled from the configuration model."""

from __future__ import annotations

import random
import sys
from typing import Sequence

from .graph import open_input, read_degree_sequence


def sample_multigraph(
    degrees: Sequence[int], rng: random.Random | None = None
) -> list[tuple[int, int]]:
    """Match the stubs of a degree sequence at random and return the edges.

    The result may contain self-loops and multiple edges. Each edge (i, j)
    has i <= j; edges come in the order they were formed.
    """
    if sum(degrees) % 2:
        raise ValueError("The sequence is not even!")
    rng = rng if rng is not None else random.Random()
    stubs = [node for node, k in enumerate(degrees) for _ in range(k)]
    edges: list[tuple[int, int]] = []
    while stubs:
        first = rng.randrange(len(stubs))
        second = rng.randrange(len(stubs) - 1)
        if first == second:
            continue
        a, b = stubs[first], stubs[second]
        edges.append((min(a, b), max(a, b)))
        for index in sorted((first, second), reverse=True):
            stubs[index] = stubs[-1]
            stubs.pop()
    return edges


def main(argv=None) -> int:
    """Print the edge list of a multigraph with the given degree sequence."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("Usage: conf_model_deg_nocheck <degs>")
        print("Sample a multigraph from the configuration model of a degree")
        print("sequence ('-' reads STDIN).")
        return 1
    try:
        with open_input(args[0]) as stream:
            degrees = read_degree_sequence(stream)
    except OSError as exc:
        print(f"conf_model_deg_nocheck: {exc}", file=sys.stderr)
        return 2
    except ValueError as exc:
        print(f"conf_model_deg_nocheck: {exc}", file=sys.stderr)
        return 1
    try:
        edges = sample_multigraph(degrees)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 3
    for i, j in edges:
        print(f"{i} {j}")
    return 0