"""
Undirected simple graph store.

Edges are kept once, under their lower-numbered endpoint::

    adjacency = {
        0: {1, 2},   # edges (0, 1) and (0, 2)
        1: set(),
        2: set(),
    }

so ``(lower, upper)`` and ``(upper, lower)`` always map to the same entry.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterator, Mapping

import networkx as nx

from randgraph.errors import InvalidArgumentError


def canonicalize(v1: int, v2: int) -> tuple[int, int]:
    """Return the pair ``(v1, v2)`` in ascending order."""
    if v1 <= v2:
        return v1, v2
    return v2, v1


def max_edges(vertex_count: int) -> int:
    """Number of edges in the complete graph on *vertex_count* vertices."""
    if vertex_count < 2:
        return 0
    return vertex_count * (vertex_count - 1) // 2


class UndirectedGraph:
    """
    Undirected graph over vertices ``0 .. vertex_count - 1``.

    No self-loops and no multi-edges. The vertex count is fixed at
    construction; the only mutation is :meth:`add_edge`.

    Example
    -------
    >>> g = UndirectedGraph(3)
    >>> g.add_edge(2, 0)
    >>> g.has_edge(0, 2)
    True
    """

    canonicalize = staticmethod(canonicalize)

    def __init__(self, vertex_count: int) -> None:
        if isinstance(vertex_count, bool) or not isinstance(vertex_count, int):
            raise InvalidArgumentError(
                f"Vertex count must be an int, got {type(vertex_count).__name__}"
            )
        if vertex_count < 0:
            raise InvalidArgumentError(f"Invalid number of vertices: {vertex_count}")

        self._vertex_count = vertex_count
        self._adjacency: dict[int, set[int]] = {v: set() for v in range(vertex_count)}

    @property
    def vertex_count(self) -> int:
        return self._vertex_count

    @property
    def adjacency(self) -> Mapping[int, set[int]]:
        """Read-only view of the lower-endpoint adjacency sets."""
        return MappingProxyType(self._adjacency)

    # ------------------------------------------------------------------
    # Edges
    # ------------------------------------------------------------------

    def add_edge(self, v1: int, v2: int) -> None:
        """Insert the undirected edge ``{v1, v2}``. Adding it twice is a no-op."""
        lower, upper = self._checked_pair(v1, v2)
        self._adjacency[lower].add(upper)

    def has_edge(self, v1: int, v2: int) -> bool:
        """Return whether ``{v1, v2}`` is stored, in either argument order."""
        lower, upper = self._checked_pair(v1, v2)
        return upper in self._adjacency[lower]

    def edges(self) -> Iterator[tuple[int, int]]:
        """Yield every stored edge as ``(lower, upper)``. Order is unspecified."""
        for lower, uppers in self._adjacency.items():
            for upper in uppers:
                yield lower, upper

    def number_of_edges(self) -> int:
        return sum(len(uppers) for uppers in self._adjacency.values())

    def to_networkx(self) -> nx.Graph:
        """Copy into a ``networkx.Graph`` holding all vertices and edges."""
        G = nx.Graph()
        G.add_nodes_from(range(self._vertex_count))
        G.add_edges_from(self.edges())
        return G

    # ------------------------------------------------------------------
    # Dunder helpers
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return self._vertex_count

    def __contains__(self, pair: object) -> bool:
        try:
            v1, v2 = pair  # type: ignore[misc]
            return self.has_edge(v1, v2)
        except (TypeError, ValueError):
            return False

    def __repr__(self) -> str:
        return (
            f"<{self.__class__.__name__} vertices={self._vertex_count} "
            f"edges={self.number_of_edges()}>"
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _checked_pair(self, v1: int, v2: int) -> tuple[int, int]:
        for v in (v1, v2):
            if isinstance(v, bool) or not isinstance(v, int):
                raise InvalidArgumentError(
                    f"Vertex ids must be ints, got {v!r} ({type(v).__name__})"
                )
        if v1 == v2:
            raise InvalidArgumentError(f"Can't add self-loops (vertex {v1})")
        for v in (v1, v2):
            if not 0 <= v < self._vertex_count:
                raise InvalidArgumentError(
                    f"Invalid vertex: {v} (graph has {self._vertex_count} vertices)"
                )
        return canonicalize(v1, v2)
