"""Synthetic undirected graph generation."""

from randgraph.config import GenerationConfig, GenerationMode, GenerationReport, GraphSummary
from randgraph.errors import GraphError, InvalidArgumentError, IOFailureError
from randgraph.generators import build_random_graph, build_random_graph_fixed_num_edges
from randgraph.graph import UndirectedGraph, canonicalize, max_edges
from randgraph.random_source import RandomSource, make_rng
from randgraph.serializer import read_edge_list, write_edge_list, write_graph_to_file
from randgraph.summary import summarize

__all__ = [
    "GenerationConfig",
    "GenerationMode",
    "GenerationReport",
    "GraphSummary",
    "GraphError",
    "InvalidArgumentError",
    "IOFailureError",
    "UndirectedGraph",
    "canonicalize",
    "max_edges",
    "RandomSource",
    "make_rng",
    "build_random_graph",
    "build_random_graph_fixed_num_edges",
    "summarize",
    "read_edge_list",
    "write_edge_list",
    "write_graph_to_file",
]
