"""Random graph generator with an exact number of distinct edges."""

from __future__ import annotations

import logging
from typing import Any, Optional

from randgraph.config import GenerationConfig, GenerationMode
from randgraph.errors import InvalidArgumentError
from randgraph.generators.base import BaseGenerator
from randgraph.graph import UndirectedGraph, max_edges
from randgraph.random_source import RandomSource, make_rng

logger = logging.getLogger(__name__)

PROGRESS_EVERY_EDGES = 500_000

# Above this share of the complete graph, rejection sampling is replaced
# by a partial shuffle of all candidate pairs.
DENSE_FRACTION = 0.5


def build_random_graph_fixed_num_edges(
    vertex_count: int,
    edge_count: int,
    rng: Optional[RandomSource] = None,
) -> UndirectedGraph:
    """
    Build a graph with exactly *edge_count* distinct random edges.

    Sparse targets use rejection sampling: two vertex ids are drawn with
    ``rng.randrange(vertex_count)`` and redrawn whenever they are equal
    or already connected. Targets above ``DENSE_FRACTION`` of the
    complete graph select edges from the full candidate list instead,
    so the run time stays bounded as the target nears ``N*(N-1)/2``.

    Raises
    ------
    InvalidArgumentError
        If *vertex_count* < 2, *edge_count* < 0, or *edge_count* exceeds
        the number of edges of the complete graph.
    """
    if vertex_count < 2:
        raise InvalidArgumentError(f"Invalid number of vertices: {vertex_count}")
    if edge_count < 0:
        raise InvalidArgumentError(f"Invalid number of edges: {edge_count}")

    limit = max_edges(vertex_count)
    if edge_count > limit:
        raise InvalidArgumentError(
            f"Cannot place {edge_count} edges among {vertex_count} vertices "
            f"(at most {limit})"
        )

    logger.info("Initialising graph with %d vertices", vertex_count)
    g = UndirectedGraph(vertex_count)

    if rng is None:
        rng = make_rng()

    logger.info("Generating random edges ...")
    if edge_count > DENSE_FRACTION * limit:
        _select_from_candidates(g, edge_count, rng)
    else:
        _rejection_sample(g, edge_count, rng)

    return g


def _rejection_sample(g: UndirectedGraph, edge_count: int, rng: RandomSource) -> None:
    n = g.vertex_count
    added = 0
    last_reported = 0

    while added < edge_count:
        if added % PROGRESS_EVERY_EDGES == 0 and added != last_reported:
            logger.info("Number of edges created: %d", added)
            last_reported = added

        v1 = rng.randrange(n)
        v2 = rng.randrange(n)

        if v1 == v2:
            continue
        if g.has_edge(v1, v2):
            continue

        g.add_edge(v1, v2)
        added += 1


def _select_from_candidates(g: UndirectedGraph, edge_count: int, rng: RandomSource) -> None:
    """Partial Fisher-Yates over every ``(i, j)`` pair, keeping the first *edge_count*."""
    n = g.vertex_count
    candidates = [(i, j) for i in range(n - 1) for j in range(i + 1, n)]
    total = len(candidates)

    for k in range(edge_count):
        pick = k + rng.randrange(total - k)
        candidates[k], candidates[pick] = candidates[pick], candidates[k]
        g.add_edge(*candidates[k])

        if (k + 1) % PROGRESS_EVERY_EDGES == 0:
            logger.info("Number of edges created: %d", k + 1)


class FixedEdgeCountGenerator(BaseGenerator):
    """
    Generates random graphs with exactly *m* edges.

    Parameters
    ----------
    m : int, default 1
        Number of distinct edges. Must not exceed ``N*(N-1)/2``.
    seed : int | None
        Random seed for reproducibility.
    rng : RandomSource | None
        Explicit random source; takes precedence over *seed*.
    """

    name = GenerationMode.FIXED_EDGE_COUNT.value

    @staticmethod
    def params_from(config: GenerationConfig) -> dict[str, Any]:
        return {"m": config.edge_count}

    def generate(self, vertex_count: int, **params: Any) -> UndirectedGraph:
        m = params.get("m", 1)
        return build_random_graph_fixed_num_edges(
            vertex_count, m, rng=self._rng_from_params(params),
        )
