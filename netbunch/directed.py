"""Components of directed graphs: OUT-, IN-, weakly and strongly connected."""

from __future__ import annotations

import sys
from typing import Callable

from .graph import Graph, open_input, read_directed_graph


def _check_node(graph: Graph, node: int) -> None:
    if not 0 <= node < graph.num_nodes:
        raise ValueError(f"node {node} is not in the graph")


def _reach(graph: Graph, node: int, allowed: Callable[[int], bool] = lambda _n: True) -> list[int]:
    """Return the ascending list of nodes reachable from node, itself included."""
    seen = {node}
    stack = [node]
    while stack:
        current = stack.pop()
        for neighbour in graph.neighbours(current):
            if neighbour not in seen and allowed(neighbour):
                seen.add(neighbour)
                stack.append(neighbour)
    return sorted(seen)


def _undirected(graph: Graph) -> Graph:
    return Graph.from_edges(graph.edges(), directed=False) if graph.num_nodes else Graph()


def out_component(graph: Graph, node: int) -> list[int]:
    """Return the nodes reachable from node along edge directions, ascending."""
    _check_node(graph, node)
    return _reach(graph, node)


def in_component(graph: Graph, node: int) -> list[int]:
    """Return the nodes from which node can be reached, ascending."""
    _check_node(graph, node)
    return _reach(graph.transpose(), node)


def weak_component(graph: Graph, node: int) -> list[int]:
    """Return the weakly connected component of node, ascending."""
    _check_node(graph, node)
    undirected = _undirected(graph)
    if undirected.num_nodes <= node:
        return [node]
    return _reach(undirected, node)


def _finish_order(graph: Graph) -> list[int]:
    """Return the nodes in increasing order of depth-first finishing time."""
    visited = [False] * graph.num_nodes
    order: list[int] = []
    for start in range(graph.num_nodes):
        if visited[start]:
            continue
        visited[start] = True
        stack = [(start, iter(graph.neighbours(start)))]
        while stack:
            node, pending = stack[-1]
            for neighbour in pending:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    stack.append((neighbour, iter(graph.neighbours(neighbour))))
                    break
            else:
                stack.pop()
                order.append(node)
    return order


def strong_components(graph: Graph) -> list[list[int]]:
    """Return the strongly connected components, each as an ascending list.

    Components are found with the Kosaraju-Sharir algorithm and come in
    topological order of the condensed graph: an edge between two distinct
    components always goes from an earlier one to a later one.
    """
    transposed = graph.transpose()
    assigned = [False] * graph.num_nodes
    components: list[list[int]] = []
    for root in reversed(_finish_order(graph)):
        if assigned[root]:
            continue
        members = _reach(transposed, root, lambda n: not assigned[n])
        for member in members:
            assigned[member] = True
        components.append(members)
    return components


def strong_component(graph: Graph, node: int) -> list[int]:
    """Return the strongly connected component of node, ascending."""
    _check_node(graph, node)
    forward = set(_reach(graph, node))
    return [n for n in _reach(graph.transpose(), node) if n in forward]


def _load(path: str, prog: str) -> Graph | int:
    try:
        with open_input(path) as stream:
            return read_directed_graph(stream)
    except OSError as exc:
        print(f"{prog}: {exc}", file=sys.stderr)
        return 2
    except ValueError as exc:
        print(f"{prog}: {exc}", file=sys.stderr)
        return 1


def _format(label: str | int, members: list[int], show: bool) -> str:
    line = f"{label}{len(members)}" if isinstance(label, str) else str(len(members))
    if show:
        if not isinstance(label, str):
            line += ":"
        line += "".join(f" {n}" for n in members)
    return line


def main(argv=None) -> int:
    """Print the size (and optionally the nodes) of every strongly connected component."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("Usage: strong_conn <graph_in> [SHOW]")
        print("Print the size of each strongly connected component of a directed")
        print("graph ('-' reads STDIN); with SHOW, also list the nodes of each.")
        return 1
    show = len(args) == 2 and args[1].upper() == "SHOW"
    graph = _load(args[0], "strong_conn")
    if isinstance(graph, int):
        return graph
    for component in strong_components(graph):
        print(_format(0, component, show))
    return 0


_MODES = {
    "IN": ("IN",),
    "OUT": ("OUT",),
    "INOUT": ("IN", "OUT"),
    "WCC": ("WCC",),
    "SCC": ("SCC",),
}
_ALL = ("IN", "OUT", "WCC", "SCC")
_FUNCTIONS = {
    "IN": in_component,
    "OUT": out_component,
    "WCC": weak_component,
    "SCC": strong_component,
}


def node_components_main(argv=None) -> int:
    """Print the IN-, OUT-, weak and strong components of one node."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) < 2:
        print("Usage: node_components <graph_in> <node> [<component> [SHOW]]")
        print("Print the components (IN, OUT, INOUT, WCC, SCC or ALL) to which")
        print("'node' belongs; with SHOW, also list their nodes.")
        return 1
    try:
        node = int(args[1])
    except ValueError:
        print(f"node_components: invalid node {args[1]!r}", file=sys.stderr)
        return 1
    modes = _MODES.get(args[2].upper(), _ALL) if len(args) > 2 else _ALL
    show = len(args) > 3 and args[3].upper() == "SHOW"
    graph = _load(args[0], "node_components")
    if isinstance(graph, int):
        return graph
    try:
        results = [(mode, _FUNCTIONS[mode](graph, node)) for mode in modes]
    except ValueError as exc:
        print(f"node_components: {exc}", file=sys.stderr)
        return 1
    for mode, members in results:
        print(_format(f"{mode}: ", members, show))
    return 0