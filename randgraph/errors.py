"""Exception types raised by the graph core."""

from __future__ import annotations


class GraphError(Exception):
    """Base class for every error raised by :mod:`randgraph`."""


class InvalidArgumentError(GraphError, ValueError):
    """
    A caller passed something the graph core cannot accept.

    Raised for negative vertex counts, self-loops, vertex ids outside
    ``[0, vertex_count)``, unachievable edge targets and malformed
    edge-list lines.
    """


class IOFailureError(GraphError, OSError):
    """An edge-list file could not be created, written or read."""
