# netbunch

Tools for analysing complex networks. It has no dependencies outside the
standard library.

It provides:

- node and average clustering coefficients, unweighted and weighted
- connected components and the largest component of undirected graphs
- strongly connected components of directed graphs, and the IN-, OUT-,
  weakly and strongly connected components of a single node
- node and edge betweenness (Brandes' algorithm), and betweenness dependency
- sampling from the configuration model of a degree sequence, as a simple
  graph or as a multigraph

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Input formats

Graphs are read as edge lists, one edge per line:

```
0 1
1 2
2 0
```

Blank lines and lines starting with `#` are skipped. Weighted graphs add a
third column holding the weight of the edge. Degree sequences have one
degree per line, the i-th line being the degree of node i. Wherever a
command takes an input file, `-` reads it from standard input.

## Commands

| Command | What it does |
| --- | --- |
| `clust <graph_in> [SHOW]` | Average clustering coefficient; with `SHOW`, each node's label, degree and coefficient on standard error |
| `clust_w <graph_in> [SHOW]` | Weighted clustering coefficient; any second argument prints the per-node values on standard error |
| `components <graph_in> [SHOW]` | Size of each connected component, and with `SHOW` its nodes |
| `largest_component <graph_in>` | Edge list of the largest connected component |
| `strong_conn <graph_in> [SHOW]` | Size of each strongly connected component of a directed graph, and with `SHOW` its nodes |
| `node_components <graph_in> <node> [IN\|OUT\|INOUT\|WCC\|SCC\|ALL [SHOW]]` | Components that a node of a directed graph belongs to (all of them by default) |
| `betweenness <graph_in> [SEQ <start> [<end>]]` or `[RND <num>]` | Node betweenness on standard output, edge betweenness on standard error |
| `bet_dependency <graph_in> [<start> [<end>]]` | Betweenness dependency due to a range of source nodes |
| `conf_model_deg <degs> [<threshold>]` | Simple graph from the configuration model; up to `threshold` stubs may stay unmatched |
| `conf_model_deg_nocheck <degs>` | Multigraph from the configuration model; self-loops and multiple edges allowed |

Examples:

```
clust graph.txt
components graph.txt SHOW
node_components graph.txt 0 SCC SHOW
conf_model_deg degrees.txt > sample.txt
```

## Library use

The same computations are available from Python:

```python
from netbunch.graph import read_graph
from netbunch.clustering import average_clustering, node_clustering
from netbunch.components import connected_components
from netbunch.betweenness import betweenness

with open("graph.txt") as stream:
    graph = read_graph(stream)

print(average_clustering(graph))
print(node_clustering(graph))
print(connected_components(graph))
node_bet, edge_bet = betweenness(graph, range(10))
```

Directed graphs are read with `read_directed_graph` and analysed with
`netbunch.directed` (`out_component`, `in_component`, `weak_component`,
`strong_component`, `strong_components`).

The samplers take a `random.Random` instance, so results can be repeated:

```python
import random
from netbunch.conf import sample_simple_graph
from netbunch.multigraph import sample_multigraph

edges = sample_simple_graph([2, 2, 2, 2], 0, random.Random(42))
multi = sample_multigraph([3, 1, 2], random.Random(42))
```

`netbunch.graph.Graph` is an adjacency structure with `neighbours`,
`degree`, `has_edge`, `weight`, `strength`, `edges` and `transpose`;
build one with `Graph.from_edges`.

## What it does not do

The package analyses given graphs and samples from the configuration model
only. It has no community detection or modularity optimisation, and no
growth models such as preferential attachment.