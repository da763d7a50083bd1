"""Standard benchmark graphs and random graph generators.

Includes the Zachary karate club graph with its ground-truth split and
Erdos-Renyi, Barabasi-Albert and two-cluster random graphs.
"""

from __future__ import annotations

import random
from bisect import bisect_right
from itertools import accumulate

from .graph import UndirectedGraph, WeightedUndirectedGraph


def erdos_renyi(n: int, p: float, rng: random.Random) -> UndirectedGraph:
    """Return a graph on nodes 0..n-1 where each edge exists with probability ``p``."""
    g = UndirectedGraph()
    for i in range(n):
        g.add_node(i)
    for i in range(n):
        for j in range(i + 1, n):
            if rng.random() < p:
                g.add_edge(i, j)
    return g


def barabasi_albert(n: int, m: int, rng: random.Random) -> UndirectedGraph:
    """Return a scale-free graph grown by preferential attachment.

    Starts from ``m + 1`` (at most ``n``) fully connected nodes; every later
    node links to ``m`` distinct earlier nodes chosen with probability
    proportional to their degree.
    """
    g = UndirectedGraph()
    if n <= 0 or m <= 0:
        return g

    m0 = min(m + 1, n)
    for i in range(m0):
        for j in range(i + 1, m0):
            g.add_edge(i, j)

    degree = [0] * n
    for i in range(m0):
        degree[i] = m0 - 1
    total_degree = m0 * (m0 - 1)

    for i in range(m0, n):
        g.add_node(i)
        cumulative = list(accumulate(degree[:i]))
        targets: dict[int, None] = {}
        while len(targets) < m and len(targets) < i:
            r = rng.randrange(total_degree)
            targets[bisect_right(cumulative, r)] = None
        for t in targets:
            g.add_edge(i, t)
            degree[i] += 1
            degree[t] += 1
            total_degree += 2
    return g


def weighted_erdos_renyi(
    n: int, p: float, max_weight: float, rng: random.Random
) -> WeightedUndirectedGraph:
    """Return an Erdos-Renyi graph whose edges have weights in [0, max_weight)."""
    g = WeightedUndirectedGraph()
    for i in range(n):
        g.add_node(i)
    for i in range(n):
        for j in range(i + 1, n):
            if rng.random() < p:
                g.add_weighted_edge(i, j, rng.random() * max_weight)
    return g


def two_cluster_graph(
    cluster_size: int, p_in: float, p_out: float, rng: random.Random
) -> UndirectedGraph:
    """Return two random clusters, 0..n-1 and n..2n-1, joined by sparse edges.

    Intra-cluster edges appear with probability ``p_in`` and inter-cluster
    edges with ``p_out``. Only nodes that receive an edge are present.
    """
    g = UndirectedGraph()
    n = cluster_size
    for lo in (0, n):
        for i in range(lo, lo + n):
            for j in range(i + 1, lo + n):
                if rng.random() < p_in:
                    g.add_edge(i, j)
    for i in range(n):
        for j in range(n, 2 * n):
            if rng.random() < p_out:
                g.add_edge(i, j)
    return g


_KARATE_EDGES = (
    (0, 1), (0, 2), (0, 3), (0, 4), (0, 5), (0, 6), (0, 7), (0, 8),
    (0, 10), (0, 11), (0, 12), (0, 13), (0, 17), (0, 19), (0, 21), (0, 31),
    (1, 2), (1, 3), (1, 7), (1, 13), (1, 17), (1, 19), (1, 21), (1, 30),
    (2, 3), (2, 7), (2, 8), (2, 9), (2, 13), (2, 27), (2, 28), (2, 32),
    (3, 7), (3, 12), (3, 13),
    (4, 6), (4, 10),
    (5, 6), (5, 10), (5, 16),
    (6, 16),
    (8, 30), (8, 32), (8, 33),
    (9, 33),
    (13, 33),
    (14, 32), (14, 33),
    (15, 32), (15, 33),
    (18, 32), (18, 33),
    (19, 33),
    (20, 32), (20, 33),
    (22, 32), (22, 33),
    (23, 25), (23, 27), (23, 29), (23, 32), (23, 33),
    (24, 25), (24, 27), (24, 31),
    (25, 31),
    (26, 29), (26, 33),
    (27, 33),
    (28, 31), (28, 33),
    (29, 32), (29, 33),
    (30, 32), (30, 33),
    (31, 32), (31, 33),
    (32, 33),
)

_MR_HI = frozenset({0, 1, 2, 3, 4, 5, 6, 7, 10, 11, 12, 13, 16, 17, 19, 21})


def karate_club_ground_truth() -> dict[int, int]:
    """Return the known split: 0 for Mr. Hi's faction, 1 for the Officer's."""
    return {node: 0 if node in _MR_HI else 1 for node in range(34)}


def karate_club() -> UndirectedGraph:
    """Return Zachary's karate club graph (34 nodes, 78 edges)."""
    g = UndirectedGraph()
    for u, v in _KARATE_EDGES:
        g.add_edge(u, v)
    return g