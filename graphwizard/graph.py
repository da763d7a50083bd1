"""Undirected graph containers and the optional fast-access protocols."""

from __future__ import annotations

import math
from typing import Iterator, Protocol, Sequence, runtime_checkable


@runtime_checkable
class DenseAdjacency(Protocol):
    """A graph that exposes its adjacency under contiguous indices 0..N-1.

    ``node_ids()[i]`` is the original ID of dense index ``i``.
    """

    def node_ids(self) -> Sequence[int]:
        """Return the original node IDs in dense-index order."""

    def dense_neighbors(self, i: int) -> Sequence[int]:
        """Return the dense indices of the neighbours of dense index ``i``."""

    def num_nodes(self) -> int:
        """Return the number of nodes."""


@runtime_checkable
class EdgeScanner(Protocol):
    """A graph that can stream every directed edge entry in one pass."""

    def scan_weighted_edges(self) -> Iterator[tuple[int, int, float]]:
        """Yield ``(src, dst, weight)`` for every directed edge entry."""


class UndirectedGraph:
    """A simple undirected graph with integer node IDs and no self-loops.

    Nodes keep the order in which they were first added. The graph also
    satisfies :class:`DenseAdjacency` and :class:`EdgeScanner`; the dense
    index is built lazily and rebuilt after any change.
    """

    _DEFAULT_WEIGHT = 1.0

    def __init__(self) -> None:
        self._adj: dict[int, dict[int, float]] = {}
        self._dense: tuple[tuple[int, ...], list[tuple[int, ...]]] | None = None

    def __len__(self) -> int:
        return len(self._adj)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._adj

    def __iter__(self) -> Iterator[int]:
        return iter(self._adj)

    def add_node(self, node_id: int) -> None:
        """Add a node; raise ValueError if the ID is already present."""
        if node_id in self._adj:
            raise ValueError(f"node ID collision: {node_id}")
        self._adj[node_id] = {}
        self._dense = None

    def _set_edge(self, u: int, v: int, weight: float) -> None:
        if u == v:
            raise ValueError(f"adding self edge: {u}")
        self._adj.setdefault(u, {})[v] = weight
        self._adj.setdefault(v, {})[u] = weight
        self._dense = None

    def add_edge(self, u: int, v: int) -> None:
        """Connect ``u`` and ``v``, adding either node if it is missing."""
        self._set_edge(u, v, self._DEFAULT_WEIGHT)

    def has_node(self, node_id: int) -> bool:
        return node_id in self._adj

    def has_edge_between(self, u: int, v: int) -> bool:
        return v in self._adj.get(u, {})

    def nodes(self) -> list[int]:
        """Return all node IDs in insertion order."""
        return list(self._adj)

    def neighbors(self, node_id: int) -> list[int]:
        """Return the neighbours of a node; an unknown node has none."""
        return list(self._adj.get(node_id, {}))

    def degree(self, node_id: int) -> int:
        return len(self._adj.get(node_id, {}))

    def number_of_edges(self) -> int:
        return sum(len(nbrs) for nbrs in self._adj.values()) // 2

    def _dense_index(self) -> tuple[tuple[int, ...], list[tuple[int, ...]]]:
        if self._dense is None:
            ids = tuple(self._adj)
            index = {node_id: i for i, node_id in enumerate(ids)}
            neighbours = [
                tuple(index[n] for n in self._adj[node_id]) for node_id in ids
            ]
            self._dense = (ids, neighbours)
        return self._dense

    def node_ids(self) -> tuple[int, ...]:
        return self._dense_index()[0]

    def dense_neighbors(self, i: int) -> tuple[int, ...]:
        return self._dense_index()[1][i]

    def num_nodes(self) -> int:
        return len(self._adj)

    def scan_weighted_edges(self) -> Iterator[tuple[int, int, float]]:
        """Yield every edge in both directions with its weight."""
        for src, nbrs in self._adj.items():
            for dst, weight in nbrs.items():
                yield src, dst, weight


class WeightedUndirectedGraph(UndirectedGraph):
    """An undirected graph whose edges carry float weights.

    ``weight(u, u)`` is ``self_weight`` and the weight between two
    unconnected nodes is ``absent_weight``.
    """

    def __init__(self, self_weight: float = 0.0, absent_weight: float = math.inf) -> None:
        super().__init__()
        self.self_weight = self_weight
        self.absent_weight = absent_weight

    def add_weighted_edge(self, u: int, v: int, weight: float) -> None:
        """Connect ``u`` and ``v`` with the given weight."""
        self._set_edge(u, v, weight)

    def weight(self, u: int, v: int) -> float:
        if u == v:
            return self.self_weight
        return self._adj.get(u, {}).get(v, self.absent_weight)