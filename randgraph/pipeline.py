"""
Build → summarise → write, for one generation run.

This is the flow the CLI drives; it is also usable on its own::

    >>> from randgraph.config import GenerationConfig
    >>> report = build_random_graph_file(
    ...     GenerationConfig(vertex_count=1000, probability=0.01, output_path="g.csv"),
    ... )
"""

from __future__ import annotations

import logging
import time
from typing import Optional

from randgraph.config import GenerationConfig, GenerationReport
from randgraph.errors import InvalidArgumentError
from randgraph.generators import get_generator
from randgraph.graph import UndirectedGraph
from randgraph.random_source import RandomSource, make_rng
from randgraph.serializer import write_graph_to_file
from randgraph.summary import summarize

logger = logging.getLogger(__name__)


def build_graph(config: GenerationConfig, rng: Optional[RandomSource] = None) -> UndirectedGraph:
    """Run the generator selected by ``config.mode``."""
    if config.vertex_count < 0:
        raise InvalidArgumentError(f"Number of vertices is invalid: {config.vertex_count}")

    if rng is None:
        rng = make_rng(config.seed)

    GenClass = get_generator(config.mode)
    return GenClass().generate(config.vertex_count, rng=rng, **GenClass.params_from(config))


def build_random_graph_file(
    config: GenerationConfig,
    rng: Optional[RandomSource] = None,
) -> GenerationReport:
    """
    Generate a graph, summarise it and write it to ``config.output_path``.

    Errors from any stage propagate as :class:`~randgraph.errors.GraphError`
    subclasses; nothing is written if generation fails.
    """
    t0 = time.perf_counter()
    logger.info("Building random graph (%s) ...", config.mode.value)
    graph = build_graph(config, rng=rng)
    build_seconds = time.perf_counter() - t0
    logger.info("Time taken to build graph: %.3fs", build_seconds)

    t1 = time.perf_counter()
    logger.info("Calculating graph summary ...")
    summary = summarize(graph)
    summary_seconds = time.perf_counter() - t1
    logger.info("Number of vertices: %d", summary.number_vertices)
    logger.info("Number of edges:    %d", summary.number_edges)
    logger.info("Time taken to calculate summary: %.3fs", summary_seconds)

    t2 = time.perf_counter()
    logger.info("Writing graph to %s ...", config.output_path)
    write_graph_to_file(graph, config.output_path)
    write_seconds = time.perf_counter() - t2
    logger.info("Time taken to write graph to file: %.3fs", write_seconds)

    total_seconds = time.perf_counter() - t0
    logger.info("Total time taken: %.3fs", total_seconds)

    return GenerationReport(
        mode=config.mode,
        summary=summary,
        output_path=config.output_path,
        build_seconds=round(build_seconds, 6),
        summary_seconds=round(summary_seconds, 6),
        write_seconds=round(write_seconds, 6),
        total_seconds=round(total_seconds, 6),
    )
