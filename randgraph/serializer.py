"""
Edge-list reading and writing.

The file format is one edge per line, ``<lower>,<upper>``, decimal ids,
with no header and no trailer::

    0,2
    1,4
    0,7

Line order follows the adjacency traversal and is not significant.
"""

from __future__ import annotations

import logging
import os
from typing import Optional, TextIO

from randgraph.errors import InvalidArgumentError, IOFailureError
from randgraph.graph import UndirectedGraph

logger = logging.getLogger(__name__)


def write_edge_list(graph: UndirectedGraph, sink: TextIO) -> int:
    """Write every edge of *graph* to *sink*. Returns the number of lines written."""
    written = 0
    for lower, upper in graph.edges():
        sink.write(f"{lower},{upper}\n")
        written += 1
    return written


def write_graph_to_file(graph: UndirectedGraph, path: str) -> int:
    """
    Write *graph* to *path* as an edge list, replacing any existing file.

    If writing fails after the file was opened, the partial file is
    removed so no truncated edge list is left behind.

    Raises
    ------
    IOFailureError
        If the file cannot be opened or written.
    """
    opened = False
    try:
        with open(path, "w", encoding="utf-8") as f:
            opened = True
            written = write_edge_list(graph, f)
    except OSError as exc:
        if opened and os.path.isfile(path):
            os.remove(path)
        raise IOFailureError(f"Unable to write output file {path}: {exc}") from exc

    logger.debug("Wrote %d edges to %s", written, path)
    return written


def read_edge_list(path: str, vertex_count: Optional[int] = None) -> UndirectedGraph:
    """
    Load an edge-list file back into an :class:`UndirectedGraph`.

    Parameters
    ----------
    path : str
        File written by :func:`write_graph_to_file` (or any file in the
        same format).
    vertex_count : int | None
        Size of the graph to build. When omitted, one more than the
        largest id in the file (0 for an empty file).

    Raises
    ------
    IOFailureError
        If the file does not exist or cannot be read.
    InvalidArgumentError
        If a line is not two comma-separated integers, or names an
        invalid edge for the graph.
    """
    if not os.path.exists(path):
        raise IOFailureError(f"Edge list not found: {path}")

    pairs: list[tuple[int, int]] = []
    try:
        with open(path, encoding="utf-8") as f:
            for lineno, line in enumerate(f, start=1):
                line = line.strip()
                if not line:
                    continue
                parts = line.split(",")
                if len(parts) != 2:
                    raise InvalidArgumentError(
                        f"Line {lineno}: expected '<lower>,<upper>', got {line!r}"
                    )
                try:
                    pairs.append((int(parts[0]), int(parts[1])))
                except ValueError:
                    raise InvalidArgumentError(
                        f"Line {lineno}: vertex ids must be integers, got {line!r}"
                    ) from None
    except OSError as exc:
        raise IOFailureError(f"Unable to read edge list {path}: {exc}") from exc

    if vertex_count is None:
        vertex_count = max((max(p) for p in pairs), default=-1) + 1

    g = UndirectedGraph(vertex_count)
    for v1, v2 in pairs:
        g.add_edge(v1, v2)
    return g
