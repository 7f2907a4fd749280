"""Simple graphs sampled from the configuration model."""

from __future__ import annotations

import random
import sys
from typing import Callable, Sequence

from .graph import open_input, read_degree_sequence

MAX_REJECTS = 1_000_000


def _sample(
    degrees: Sequence[int],
    threshold: int,
    rng: random.Random,
    max_rejects: int,
    report: Callable[[str], None],
) -> list[tuple[int, int]]:
    if sum(degrees) % 2:
        raise ValueError("The sequence is not even!")
    while True:
        stubs = [node for node, k in enumerate(degrees) for _ in range(k)]
        remaining = len(stubs)
        rejects = 0
        edges: set[tuple[int, int]] = set()
        while remaining > 0 and rejects < max_rejects:
            first = rng.randrange(remaining)
            second = rng.randrange(remaining - 1)
            if first == second:
                continue
            a, b = stubs[first], stubs[second]
            if a == b:
                rejects += 1
                continue
            edge = (min(a, b), max(a, b))
            if edge in edges:
                rejects += 1
                continue
            edges.add(edge)
            last = remaining - 1
            stubs[first], stubs[last] = stubs[last], stubs[first]
            stubs[second], stubs[last - 1] = stubs[last - 1], stubs[second]
            remaining -= 2
        if rejects < max_rejects:
            report("Found a graph!")
            break
        if remaining <= threshold:
            report(
                f"Found a graph (unmatched stubs: {remaining} <= threshold: {threshold})"
            )
            break
        report(
            f"Graph not found (unmatched stubs: {remaining} > threshold: {threshold})"
        )
    return sorted(edges, key=lambda e: (e[1], e[0]))


def sample_simple_graph(
    degrees: Sequence[int],
    threshold: int = 0,
    rng: random.Random | None = None,
    max_rejects: int = MAX_REJECTS,
) -> list[tuple[int, int]]:
    """Sample a graph without self-loops or multiple edges from a degree sequence.

    Stubs are matched at random; a pair that would form a self-loop or a
    repeated edge is rejected. After max_rejects rejections the attempt ends:
    it is accepted if at most threshold stubs are left unmatched, and started
    again otherwise. Edges (i, j) with i < j are returned ordered by j, then i.
    """
    return _sample(
        degrees,
        threshold,
        rng if rng is not None else random.Random(),
        max_rejects,
        lambda _message: None,
    )


def main(argv=None) -> int:
    """Print the edge list of a simple graph with the given degree sequence."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("Usage: conf_model_deg <degs> [<threshold>]")
        print("Sample a simple graph from the configuration model of a degree")
        print("sequence ('-' reads STDIN); 'threshold' stubs may stay unmatched.")
        return 1
    try:
        threshold = int(args[1]) if len(args) > 1 else 0
    except ValueError:
        print(f"conf_model_deg: invalid threshold {args[1]!r}", file=sys.stderr)
        return 1
    try:
        with open_input(args[0]) as stream:
            degrees = read_degree_sequence(stream)
    except OSError as exc:
        print(f"conf_model_deg: {exc}", file=sys.stderr)
        return 2
    except ValueError as exc:
        print(f"conf_model_deg: {exc}", file=sys.stderr)
        return 1
    try:
        edges = _sample(
            degrees,
            threshold,
            random.Random(),
            MAX_REJECTS,
            lambda message: print(message, file=sys.stderr),
        )
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 3
    for i, j in edges:
        print(f"{i} {j}")
    return 0