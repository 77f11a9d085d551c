"""Pydantic models for generation settings and results."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class GenerationMode(str, Enum):
    UNIFORM_PROBABILITY = "uniform_probability"
    FIXED_EDGE_COUNT = "fixed_edge_count"


# ---------------------------------------------------------------------------
# Input
# ---------------------------------------------------------------------------

class GenerationConfig(BaseModel):
    """Everything a single generation run needs."""

    vertex_count: int = Field(default=100, description="Number of vertices")
    probability: float = Field(
        default=-1.0,
        description="Connection probability; -1.0 means unset",
    )
    edge_count: int = Field(
        default=-1,
        description="Exact number of edges; any positive value selects the fixed-edge-count generator",
    )
    output_path: str = Field(default="results.csv", min_length=1, description="Edge-list destination")
    seed: Optional[int] = Field(default=None, description="Random seed; wall clock when unset")

    @property
    def mode(self) -> GenerationMode:
        if self.edge_count > 0:
            return GenerationMode.FIXED_EDGE_COUNT
        return GenerationMode.UNIFORM_PROBABILITY


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------

class GraphSummary(BaseModel):
    """Snapshot of a graph's size, taken on demand."""
    model_config = ConfigDict(frozen=True)

    number_vertices: int = Field(..., ge=0, description="Vertices with at least one incident edge")
    number_edges: int = Field(..., ge=0, description="Total number of edges")


class GenerationReport(BaseModel):
    """Outcome of one build → summarise → write run."""
    mode: GenerationMode
    summary: GraphSummary
    output_path: str
    build_seconds: float = 0.0
    summary_seconds: float = 0.0
    write_seconds: float = 0.0
    total_seconds: float = 0.0
