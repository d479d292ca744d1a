"""
Algorithm interfaces for the graph library.

Keeps shortest-path computation separate from node/edge storage.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, Optional

if TYPE_CHECKING:
    from graph import Graph


@dataclass(frozen=True)
class Result:
    """
    Best known distance from a source plus the preceding node on that path.

    Unreachable nodes carry distance math.inf and previous None.
    """
    distance: float
    previous: Optional[str]


class DijkstraEngine(ABC):
    """
    Interface for single-source shortest-path computation.
    """

    @abstractmethod
    def shortest_paths(self, graph: Graph, source: str) -> Dict[str, Result]:
        """
        Compute distances and predecessors from source to every node.

        Returns:
            Mapping key -> Result covering every node of the graph, in node
            insertion order. The source maps to Result(0, None).

        Raises:
            NodeNotFound: if source is not in the graph.
        """
        raise NotImplementedError
