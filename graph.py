"""
Weighted, in-memory graph with shortest-path and traversal queries.

Build a Graph with add_node/add_edge, then query it. Nodes and edges are
append-only and every query is read-only, so repeated queries with the
same arguments give the same answers.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple
import logging
import math

from algorithms import DijkstraEngine, Result
from config import GraphOptions
from dijkstra_engine import LinearScanDijkstraEngine
from edge_table import EdgeTable
from exceptions import NodeNotFound
from nodes import Node
from traversal import breadth_first, depth_first

logger = logging.getLogger(__name__)

Visitor = Callable[[Node], Any]


class Graph:
    """
    Undirected (default) or directed weighted graph over string keys.

    Lookup by key is a linear scan in insertion order and returns the first
    match. Duplicate keys are accepted by add_node, but later duplicates can
    never be addressed.
    """

    def __init__(self, directed: bool = False, engine: Optional[DijkstraEngine] = None) -> None:
        self._directed = directed
        self._nodes: List[Node] = []
        self._edges = EdgeTable(directed=directed)
        self._engine: DijkstraEngine = engine or LinearScanDijkstraEngine()

    @classmethod
    def from_options(cls, options: GraphOptions) -> "Graph":
        return cls(directed=options.directed, engine=options.make_engine())

    @property
    def directed(self) -> bool:
        return self._directed

    @property
    def engine(self) -> DijkstraEngine:
        return self._engine

    # --- Nodes ---------------------------------------------------------------

    def add_node(self, key: str) -> None:
        """Append a node with no neighbours. No uniqueness check."""
        self._nodes.append(Node(key))

    def get_node(self, key: str) -> Node:
        """First node added under key; raises NodeNotFound otherwise."""
        for node in self._nodes:
            if node.key == key:
                return node
        raise NodeNotFound(key)

    def nodes(self) -> List[Node]:
        """All nodes in insertion order."""
        return list(self._nodes)

    def keys(self) -> List[str]:
        """Node keys in insertion order, duplicates included."""
        return [node.key for node in self._nodes]

    def __contains__(self, key: object) -> bool:
        return any(node.key == key for node in self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    # --- Edges ---------------------------------------------------------------

    def add_edge(self, key1: str, key2: str, weight: float) -> None:
        """
        Add an edge key1 -> key2 (both ways when undirected) with weight.

        Both endpoints are resolved before anything is written, so a
        NodeNotFound leaves the graph untouched. Re-adding a pair replaces
        its weight and appends to the adjacency lists again.
        """
        start = self.get_node(key1)
        end = self.get_node(key2)

        self._edges.set(key1, key2, weight)
        start.add_neighbour(end.key)
        if not self._directed:
            end.add_neighbour(start.key)

        logger.debug("Added edge %r -> %r (weight=%s, directed=%s)", key1, key2, weight, self._directed)

    def get_edge(self, key1: str, key2: str) -> Optional[float]:
        """Weight of the edge, or None if it was never added."""
        return self._edges.get(key1, key2)

    def edges(self) -> Iterator[Tuple[str, str, float]]:
        """
        (key1, key2, weight) for every stored edge. Undirected pairs come
        back in sorted key order.
        """
        for (key1, key2), weight in self._edges.items():
            yield key1, key2, weight

    # --- Shortest paths ------------------------------------------------------

    def dijkstra(self, source: str) -> Dict[str, Result]:
        """
        Distance and predecessor of every node from source.

        Unreachable nodes map to Result(math.inf, None).
        """
        return self._engine.shortest_paths(self, source)

    def get_path(self, source: str, destination: str) -> List[str]:
        """
        Shortest path from source to destination, endpoints included.

        Returns [] when destination is unreachable. Raises NodeNotFound if
        either key is missing.
        """
        self.get_node(source)
        self.get_node(destination)
        results = self.dijkstra(source)

        if math.isinf(results[destination].distance):
            return []

        path = [destination]
        previous = results[destination].previous
        while previous is not None:
            path.append(previous)
            previous = results[previous].previous
        path.reverse()
        return path

    def get_distance(self, source: str, destination: str) -> float:
        """Shortest distance from source to destination (inf if unreachable)."""
        self.get_node(source)
        self.get_node(destination)
        return self.dijkstra(source)[destination].distance

    # --- Traversal -----------------------------------------------------------

    def iter_bfs(self, start_key: str) -> Iterator[Node]:
        """Lazy breadth-first order; NodeNotFound is raised here, not on first next()."""
        return breadth_first(self, self.get_node(start_key))

    def iter_dfs(self, start_key: str) -> Iterator[Node]:
        """Lazy pre-order depth-first order."""
        return depth_first(self, self.get_node(start_key))

    def bfs(self, start_key: str, visitor: Visitor) -> None:
        """Call visitor once per reachable node in breadth-first order."""
        for node in self.iter_bfs(start_key):
            visitor(node)

    def dfs(self, start_key: str, visitor: Visitor) -> None:
        """Call visitor once per reachable node in depth-first pre-order."""
        for node in self.iter_dfs(start_key):
            visitor(node)
