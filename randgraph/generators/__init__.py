"""Random graph generators."""

from typing import Union

from randgraph.config import GenerationMode
from randgraph.generators.base import BaseGenerator
from randgraph.generators.fixed_edge_count import (
    FixedEdgeCountGenerator,
    build_random_graph_fixed_num_edges,
)
from randgraph.generators.uniform_probability import (
    UniformProbabilityGenerator,
    build_random_graph,
)

# One generator per GenerationMode, keyed by the mode value
GENERATOR_REGISTRY: dict[str, type[BaseGenerator]] = {
    cls.name: cls for cls in (UniformProbabilityGenerator, FixedEdgeCountGenerator)
}


def get_generator(mode: Union[str, GenerationMode]) -> type[BaseGenerator]:
    """
    Return the generator class for *mode*.

    Accepts a :class:`GenerationMode` or its string value, e.g.
    ``"fixed_edge_count"``.
    """
    key = mode.value if isinstance(mode, GenerationMode) else mode
    try:
        return GENERATOR_REGISTRY[key]
    except KeyError:
        modes = ", ".join(m.value for m in GenerationMode)
        raise ValueError(f"No generator for mode {key!r}; expected one of: {modes}") from None


def list_generators() -> list[str]:
    """Names of the registered generators, in ``GenerationMode`` order."""
    return [m.value for m in GenerationMode if m.value in GENERATOR_REGISTRY]


__all__ = [
    "BaseGenerator",
    "GENERATOR_REGISTRY",
    "get_generator",
    "list_generators",
    "build_random_graph",
    "build_random_graph_fixed_num_edges",
    "UniformProbabilityGenerator",
    "FixedEdgeCountGenerator",
]
