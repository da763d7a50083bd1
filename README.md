# graphwizard

Structural anomaly detection for undirected graphs, a few synthetic graph
generators, the Zachary karate club benchmark graph, and the small in-memory
graph model they all work on.

The package uses only the Python standard library and supports Python 3.10
and later.

## Installation

From a checkout of the project:

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Graphs

`graphwizard.graph.UndirectedGraph` is a simple undirected graph with integer
node IDs. Nodes keep the order in which they were first added.

```python
from graphwizard.graph import UndirectedGraph

g = UndirectedGraph()
g.add_edge(0, 1)           # missing endpoints are added
g.add_edge(0, 2)
g.add_node(7)

g.has_edge_between(1, 0)   # True
g.neighbors(0)             # [1, 2]
g.degree(0)                # 2
g.nodes()                  # [0, 1, 2, 7]
g.number_of_edges()        # 2
len(g), 7 in g             # (4, True)
```

- `add_node` raises `ValueError` if the ID is already present.
- `add_edge` raises `ValueError` for a self-loop (`u == v`). Adding an edge
  that already exists leaves a single edge.
- `neighbors` and `degree` of an unknown node give `[]` and `0`.

`WeightedUndirectedGraph` adds edge weights:

```python
from graphwizard.graph import WeightedUndirectedGraph

w = WeightedUndirectedGraph()          # self_weight=0.0, absent_weight=inf
w.add_weighted_edge(0, 1, 2.5)
w.weight(0, 1)   # 2.5
w.weight(1, 1)   # 0.0  (self_weight)
w.weight(0, 9)   # inf  (absent_weight)
```

Both graph types also provide a dense index and an edge stream:

- `node_ids()` returns the node IDs in dense-index order, `dense_neighbors(i)`
  the dense indices of the neighbours of index `i`, and `num_nodes()` the node
  count. The index is built on first use and rebuilt after any change.
- `scan_weighted_edges()` yields `(src, dst, weight)` for every edge in both
  directions; unweighted edges have weight `1.0`.

These match the `DenseAdjacency` and `EdgeScanner` protocols in
`graphwizard.graph`, which are runtime-checkable, so
`isinstance(g, DenseAdjacency)` works for any object providing those methods.

## Anomaly detection

`graphwizard.anomaly` works on any object with `nodes()`, `neighbors(id)` and
`has_edge_between(u, v)`.

```python
from graphwizard.anomaly import degree_z_score, isolation_score, structural_outliers
from graphwizard.generators import karate_club

g = karate_club()

z = degree_z_score(g)              # {node_id: z-score of its degree}
scores = isolation_score(g)        # {node_id: score in [0, 1]}
top = structural_outliers(g, 5)    # five most anomalous node IDs
```

- `degree_z_score` compares each node's degree with the graph-wide mean and
  population standard deviation. With fewer than two nodes, or when every
  node has the same degree, every score is 0.
- `isolation_score` is the mean of three signals, each divided by its largest
  value to lie in [0, 1]: the absolute degree z-score, how far the node's
  local clustering coefficient is from its neighbours' mean, and the variance
  of its neighbours' degrees.
- `structural_outliers` returns the `k` highest-scoring node IDs, most
  anomalous first, with equal scores ordered by ascending node ID. If `k` is
  larger than the graph every node is returned; if `k` is zero or negative
  the list is empty.

## Generators

The random generators in `graphwizard.generators` take a `random.Random`
instance, so a fixed seed gives the same graph each time.

```python
import random
from graphwizard.generators import (
    barabasi_albert,
    erdos_renyi,
    karate_club,
    karate_club_ground_truth,
    two_cluster_graph,
    weighted_erdos_renyi,
)

rng = random.Random(42)

er = erdos_renyi(100, 0.05, rng)                  # G(n, p) on nodes 0..n-1
ba = barabasi_albert(1000, 3, rng)                # preferential attachment
wer = weighted_erdos_renyi(100, 0.1, 10.0, rng)   # weights in [0, max_weight)
tc = two_cluster_graph(50, 0.3, 0.01, rng)        # two dense clusters, sparse bridge

club = karate_club()                   # 34 nodes, 78 edges
factions = karate_club_ground_truth()  # {node_id: 0 (Mr. Hi) or 1 (Officer)}
```

- `barabasi_albert` starts from `m + 1` (at most `n`) fully connected nodes and
  links each later node to `m` distinct earlier nodes chosen with probability
  proportional to their degree. It returns an empty graph if `n` or `m` is not
  positive.
- `two_cluster_graph` places nodes `0 .. n-1` in the first cluster and
  `n .. 2n-1` in the second. Only nodes that receive at least one edge are in
  the result.
- `erdos_renyi` and `weighted_erdos_renyi` always contain all `n` nodes.

## What the package does not do

- It has no command-line interface; everything is used from Python.
- Graphs live in memory only: there is no loading from or saving to files or
  databases.
- There are no directed graphs, and no graph algorithms beyond the anomaly
  scores above (no centrality, community detection, paths or traversal).