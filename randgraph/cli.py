"""
Command-line front end.

Usage
-----
    randgraph -n 1000 -p 0.01 -o graph.csv
    randgraph -n 100000 -e 500000 --seed 7
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Optional, Sequence

from dotenv import load_dotenv
from pydantic import ValidationError

from randgraph.config import GenerationConfig
from randgraph.errors import GraphError
from randgraph.pipeline import build_random_graph_file

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="randgraph",
        description="Random graph generator: writes an undirected edge list.",
    )
    parser.add_argument("-n", "--vertex-count", "--vertexCount", dest="vertex_count", type=int, default=100, help="Number of vertices.")
    parser.add_argument("-p", "--probability", type=float, default=-1.0, help="Probability of a connection between vertices.")
    parser.add_argument("-e", "--edge-count", "--edgeCount", dest="edge_count", type=int, default=-1, help="Number of edges; a positive value overrides --probability.")
    parser.add_argument("-o", "--output", "--outputPath", dest="output_path", type=str, default=os.environ.get("RANDGRAPH_OUTPUT", "results.csv"), help="File of edges.")
    parser.add_argument("--seed", type=int, default=None, help="Random seed (default: wall clock).")
    parser.add_argument("--log-level", type=str.upper, default=os.environ.get("RANDGRAPH_LOG_LEVEL", "INFO").upper(), choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging verbosity.")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)

    # RANDGRAPH_LOG_LEVEL bypasses argparse choices
    level = logging.getLevelName(args.log_level)
    logging.basicConfig(
        level=level if isinstance(level, int) else logging.INFO,
        format="%(levelname)s | %(message)s",
    )
    if not isinstance(level, int):
        logger.warning("Unknown log level %r, using INFO", args.log_level)

    logger.info("Random graph generator")
    try:
        config = GenerationConfig(
            vertex_count=args.vertex_count,
            probability=args.probability,
            edge_count=args.edge_count,
            output_path=args.output_path,
            seed=args.seed,
        )
        build_random_graph_file(config)
    except ValidationError as exc:
        logger.error("Invalid settings: %s", exc)
        return 1
    except GraphError as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
