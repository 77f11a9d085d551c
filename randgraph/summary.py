"""Summary statistics for a generated graph."""

from __future__ import annotations

import logging

from randgraph.config import GraphSummary
from randgraph.graph import UndirectedGraph

logger = logging.getLogger(__name__)

PROGRESS_EVERY_EDGES = 5_000_000


def summarize(graph: UndirectedGraph) -> GraphSummary:
    """
    Count the connected vertices and the edges of *graph*.

    A vertex is counted when it is either endpoint of at least one
    stored edge. Each adjacency set is visited once and the graph is
    not modified.
    """
    connected: set[int] = set()
    number_edges = 0

    for source, destinations in graph.adjacency.items():
        if not destinations:
            continue

        connected.add(source)
        connected.update(destinations)

        before = number_edges
        number_edges += len(destinations)
        if number_edges // PROGRESS_EVERY_EDGES > before // PROGRESS_EVERY_EDGES:
            logger.info("Processed %d edges", number_edges)

    return GraphSummary(number_vertices=len(connected), number_edges=number_edges)
