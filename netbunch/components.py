"""Connected components of undirected graphs."""

from __future__ import annotations

import sys

from .graph import Graph, open_input, read_graph


def _component_labels(graph: Graph) -> tuple[list[int], int]:
    """Label every node with the 1-based index of its component.

    Components are numbered in the order of their smallest node.
    """
    labels = [0] * graph.num_nodes
    count = 0
    for start in range(graph.num_nodes):
        if labels[start]:
            continue
        count += 1
        labels[start] = count
        stack = [start]
        while stack:
            node = stack.pop()
            for neighbour in graph.neighbours(node):
                if not labels[neighbour]:
                    labels[neighbour] = count
                    stack.append(neighbour)
    return labels, count


def connected_components(graph: Graph) -> list[list[int]]:
    """Return the connected components, each as an ascending list of nodes.

    Components come in the order of their smallest node.
    """
    labels, count = _component_labels(graph)
    components: list[list[int]] = [[] for _ in range(count)]
    for node, label in enumerate(labels):
        components[label - 1].append(node)
    return components


def largest_component_edges(graph: Graph) -> list[tuple[int, int]]:
    """Return the edges (i, j), i < j, of the largest connected component.

    When several components share the largest size, the first one is used.
    """
    components = connected_components(graph)
    if not components:
        return []
    largest = components[0]
    for component in components[1:]:
        if len(component) > len(largest):
            largest = component
    return [
        (i, j)
        for i in largest
        for j in graph.neighbours(i)
        if j > i
    ]


def _load(args: list[str], prog: str) -> Graph | int:
    try:
        with open_input(args[0]) as stream:
            return read_graph(stream)
    except OSError as exc:
        print(f"{prog}: {exc}", file=sys.stderr)
        return 2
    except ValueError as exc:
        print(f"{prog}: {exc}", file=sys.stderr)
        return 1


def main(argv=None) -> int:
    """Print the size (and optionally the nodes) of every connected component."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("Usage: components <graph_in> [SHOW]")
        print("Print the size of each connected component ('-' reads STDIN);")
        print("with SHOW, also list the nodes of each component.")
        return 1
    show = len(args) > 1 and args[1].upper() == "SHOW"
    graph = _load(args, "components")
    if isinstance(graph, int):
        return graph
    for component in connected_components(graph):
        if show:
            print(f"{len(component)}: " + " ".join(str(n) for n in component))
        else:
            print(len(component))
    return 0


def largest_component_main(argv=None) -> int:
    """Print the edge list of the largest connected component."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("Usage: largest_component <graph_in>")
        print("Print the edge list of the largest connected component ('-' reads STDIN).")
        return 1
    graph = _load(args, "largest_component")
    if isinstance(graph, int):
        return graph
    for i, j in largest_component_edges(graph):
        print(f"{i} {j}")
    return 0