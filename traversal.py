"""
Traversal orders over a Graph, as lazy iterators of Node.

Both iterators resolve neighbour keys through the graph, so a key always
refers to the first node added under it.
"""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, Deque, Iterator, List, Set

from nodes import Node

if TYPE_CHECKING:
    from graph import Graph


def breadth_first(graph: Graph, start: Node) -> Iterator[Node]:
    """
    Yield nodes reachable from start, each exactly once.

    New work enters at the front of the deque and the next node is taken
    from the back. A node is yielded when it is first taken; its unvisited
    neighbours are then queued in adjacency order. A node may sit in the
    work list more than once; later copies are skipped.
    """
    visited: Set[str] = set()
    work: Deque[Node] = deque([start])

    while work:
        node = work.pop()
        if node.key in visited:
            continue

        visited.add(node.key)
        yield node

        for key in node.neighbours:
            if key not in visited:
                work.appendleft(graph.get_node(key))


def depth_first(graph: Graph, start: Node) -> Iterator[Node]:
    """
    Yield nodes reachable from start in pre-order.

    Equivalent to the recursive form (visit, then explore each unvisited
    neighbour in adjacency order) but keeps an explicit stack of neighbour
    iterators, so long chains do not hit the recursion limit.
    """
    visited: Set[str] = {start.key}
    yield start

    stack: List[Iterator[str]] = [iter(start.neighbours)]
    while stack:
        key = next(stack[-1], None)
        if key is None:
            stack.pop()
            continue
        if key in visited:
            continue

        visited.add(key)
        node = graph.get_node(key)
        yield node
        stack.append(iter(node.neighbours))
