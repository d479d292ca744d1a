"""
Node abstraction for the graph library.

A node is a key plus an ordered list of neighbour keys. Neighbours are
stored by key rather than by reference, so undirected edges never create
object cycles between nodes.
"""

from dataclasses import dataclass, field
from typing import List


@dataclass
class Node:
    """Labelled vertex with its adjacency list."""

    key: str
    # Edge-addition order; a key repeats if the same edge was added twice.
    neighbours: List[str] = field(default_factory=list)

    def add_neighbour(self, key: str) -> None:
        self.neighbours.append(key)
