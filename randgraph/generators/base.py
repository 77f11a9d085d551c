"""Abstract base class for all graph generators."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from randgraph.config import GenerationConfig
from randgraph.graph import UndirectedGraph
from randgraph.random_source import RandomSource, make_rng


class BaseGenerator(ABC):
    """
    Base class for random graph generators.

    Subclasses set ``name`` to a :class:`GenerationMode` value, implement
    :meth:`generate` (returning a populated
    :class:`~randgraph.graph.UndirectedGraph`) and :meth:`params_from`.
    """

    name: str = "base"

    @abstractmethod
    def generate(self, vertex_count: int, **params: Any) -> UndirectedGraph:
        """
        Generate a graph.

        Parameters
        ----------
        vertex_count : int
            Number of vertices in the generated graph.
        **params
            Generator-specific parameters. Every generator accepts
            ``seed`` (int) or ``rng`` (a :class:`RandomSource`).

        Returns
        -------
        UndirectedGraph
        """

    @staticmethod
    @abstractmethod
    def params_from(config: GenerationConfig) -> dict[str, Any]:
        """Pick this generator's parameters out of a :class:`GenerationConfig`."""

    # ------------------------------------------------------------------
    # Helpers shared by all generators
    # ------------------------------------------------------------------

    @staticmethod
    def _rng_from_params(params: dict[str, Any]) -> RandomSource:
        rng = params.get("rng")
        if rng is not None:
            return rng
        return make_rng(params.get("seed"))

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
