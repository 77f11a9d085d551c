"""Uniform G(n, p) random graph generator."""

from __future__ import annotations

import logging
from typing import Any, Optional

from randgraph.config import GenerationConfig, GenerationMode
from randgraph.generators.base import BaseGenerator
from randgraph.graph import UndirectedGraph
from randgraph.random_source import RandomSource, make_rng

logger = logging.getLogger(__name__)

PROGRESS_EVERY_VERTICES = 5000


def build_random_graph(
    vertex_count: int,
    probability: float,
    rng: Optional[RandomSource] = None,
) -> UndirectedGraph:
    """
    Connect every pair of vertices independently with *probability*.

    Pairs ``(i, j)`` with ``i < j`` are visited in ascending order of
    ``i`` then ``j``; one ``rng.random()`` draw is made per pair and the
    edge is kept when the draw is below *probability*. The probability
    is not clamped, so ``<= 0`` yields no edges and ``>= 1`` yields the
    complete graph.

    Cost is O(vertex_count²) draws.
    """
    logger.info("Initialising graph with %d vertices", vertex_count)
    g = UndirectedGraph(vertex_count)

    if rng is None:
        rng = make_rng()

    logger.info("Generating random edges ...")
    for i in range(vertex_count - 1):
        if i % PROGRESS_EVERY_VERTICES == 0:
            logger.info("Building from vertex %d of %d", i, vertex_count)

        for j in range(i + 1, vertex_count):
            if rng.random() < probability:
                g.add_edge(i, j)

    return g


class UniformProbabilityGenerator(BaseGenerator):
    """
    Generates random graphs where each pair is connected with probability *p*.

    Parameters
    ----------
    p : float, default 0.3
        Edge probability. Values outside ``[0, 1]`` are accepted.
    seed : int | None
        Random seed for reproducibility.
    rng : RandomSource | None
        Explicit random source; takes precedence over *seed*.
    """

    name = GenerationMode.UNIFORM_PROBABILITY.value

    @staticmethod
    def params_from(config: GenerationConfig) -> dict[str, Any]:
        return {"p": config.probability}

    def generate(self, vertex_count: int, **params: Any) -> UndirectedGraph:
        p = params.get("p", 0.3)
        return build_random_graph(vertex_count, p, rng=self._rng_from_params(params))
