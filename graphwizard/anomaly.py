"""Graph-based anomaly detection.

Identifies structurally unusual nodes with degree z-scores, deviation of
the local clustering coefficient, and variance of neighbour degrees.
"""

from __future__ import annotations

import math
from itertools import combinations
from typing import Protocol


class _Undirected(Protocol):
    def nodes(self) -> list[int]: ...

    def neighbors(self, node_id: int) -> list[int]: ...

    def has_edge_between(self, u: int, v: int) -> bool: ...


def degree_z_score(graph: _Undirected) -> dict[int, float]:
    """Return the z-score of each node's degree.

    With fewer than two nodes, or no variance in degree, every score is 0.
    """
    degrees = {node: len(graph.neighbors(node)) for node in graph.nodes()}
    n = len(degrees)
    if n < 2:
        return {node: 0.0 for node in degrees}

    mean = sum(degrees.values()) / n
    stddev = math.sqrt(sum((d - mean) ** 2 for d in degrees.values()) / n)
    if stddev == 0:
        return {node: 0.0 for node in degrees}
    return {node: (d - mean) / stddev for node, d in degrees.items()}


def _local_clustering(graph: _Undirected) -> dict[int, float]:
    result: dict[int, float] = {}
    for node in graph.nodes():
        nbrs = graph.neighbors(node)
        k = len(nbrs)
        if k < 2:
            result[node] = 0.0
            continue
        links = sum(1 for a, b in combinations(nbrs, 2) if graph.has_edge_between(a, b))
        result[node] = 2.0 * links / (k * (k - 1))
    return result


def _neighbor_degree_variance(graph: _Undirected) -> dict[int, float]:
    result: dict[int, float] = {}
    for node in graph.nodes():
        degs = [len(graph.neighbors(n)) for n in graph.neighbors(node)]
        if not degs:
            result[node] = 0.0
            continue
        mean = sum(degs) / len(degs)
        result[node] = sum((d - mean) ** 2 for d in degs) / len(degs)
    return result


def _normalize(values: dict[int, float]) -> dict[int, float]:
    top = max((v for v in values.values() if v > 0), default=0.0)
    if top == 0:
        return {node: 0.0 for node in values}
    return {node: v / top for node, v in values.items()}


def _normalize_absolute(values: dict[int, float]) -> dict[int, float]:
    return _normalize({node: abs(v) for node, v in values.items()})


def _clustering_deviation(graph: _Undirected, cc: dict[int, float]) -> dict[int, float]:
    deviation: dict[int, float] = {}
    for node, c in cc.items():
        nbrs = graph.neighbors(node)
        if not nbrs:
            deviation[node] = 0.0
            continue
        neighbour_mean = sum(cc[n] for n in nbrs) / len(nbrs)
        deviation[node] = abs(c - neighbour_mean)
    return _normalize(deviation)


def isolation_score(graph: _Undirected) -> dict[int, float]:
    """Return an anomaly score in [0, 1] for each node; higher is more unusual.

    The score is the mean of three signals, each scaled to [0, 1]: the
    absolute degree z-score, the deviation of the node's clustering
    coefficient from its neighbours' mean, and neighbour degree variance.
    """
    zscores = degree_z_score(graph)
    norm_z = _normalize_absolute(zscores)
    norm_cc = _clustering_deviation(graph, _local_clustering(graph))
    norm_ndv = _normalize(_neighbor_degree_variance(graph))
    return {
        node: (norm_z[node] + norm_cc[node] + norm_ndv[node]) / 3.0 for node in zscores
    }


def structural_outliers(graph: _Undirected, k: int) -> list[int]:
    """Return the ``k`` most anomalous nodes, highest score first.

    Ties are broken by ascending node ID; if the graph has fewer than ``k``
    nodes, all of them are returned.
    """
    scores = isolation_score(graph)
    ranked = sorted(scores.items(), key=lambda item: (-item[1], item[0]))
    return [node for node, _ in ranked[: max(k, 0)]]