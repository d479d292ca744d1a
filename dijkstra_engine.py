"""
DijkstraEngine implementations.

LinearScanDijkstraEngine picks the next node by scanning every unvisited
entry, which is adequate for the small graphs this library targets.
HeapDijkstraEngine uses heapq keyed by (distance, insertion index) and
returns exactly the same result map, ties included.

Both assume non-negative weights.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, List, Optional, Set
import heapq
import logging
import math

from algorithms import DijkstraEngine, Result

if TYPE_CHECKING:
    from graph import Graph

logger = logging.getLogger(__name__)


class _InstrumentedEngine(DijkstraEngine):
    """Shared initialisation, relaxation and per-run counters."""

    def __init__(self) -> None:
        # Instrumentation counters per invocation.
        self.last_expanded = 0
        self.last_edges_examined = 0
        self.last_relaxed = 0

    def _reset_counters(self) -> None:
        self.last_expanded = 0
        self.last_edges_examined = 0
        self.last_relaxed = 0

    def _initial_results(self, graph: Graph, source: str) -> Dict[str, Result]:
        graph.get_node(source)  # raises NodeNotFound before any work
        results: Dict[str, Result] = {
            key: Result(math.inf, None) for key in graph.keys()
        }
        results[source] = Result(0.0, None)
        return results

    def _relax(
        self,
        graph: Graph,
        current: str,
        results: Dict[str, Result],
        visited: Set[str],
    ) -> List[str]:
        """
        Relax every unvisited neighbour of current and return the keys
        whose distance improved.
        """
        improved: List[str] = []
        d_u = results[current].distance
        for neighbour in graph.get_node(current).neighbours:
            if neighbour in visited:
                continue
            self.last_edges_examined += 1

            weight = graph.get_edge(current, neighbour)
            # A missing weight is an infinite one, never a zero one.
            if weight is None:
                continue

            alt = d_u + weight
            if alt < results[neighbour].distance:
                results[neighbour] = Result(alt, current)
                self.last_relaxed += 1
                improved.append(neighbour)
        return improved

    def _log_run(self, source: str, results: Dict[str, Result]) -> None:
        unreachable = sum(1 for r in results.values() if math.isinf(r.distance))
        logger.debug(
            "%s from %r: expanded=%d edges=%d relaxed=%d unreachable=%d",
            type(self).__name__,
            source,
            self.last_expanded,
            self.last_edges_examined,
            self.last_relaxed,
            unreachable,
        )


class LinearScanDijkstraEngine(_InstrumentedEngine):
    """
    Dijkstra with a linear "find minimum unvisited" step.

    Complexity:
        O(V^2 + E). Ties go to the node added to the graph first.
    """

    def shortest_paths(self, graph: Graph, source: str) -> Dict[str, Result]:
        self._reset_counters()
        results = self._initial_results(graph, source)
        visited: Set[str] = set()

        while True:
            current = self._find_lowest(results, visited)
            # Nothing left, or only unreachable nodes: never expand those.
            if current is None:
                break

            visited.add(current)
            self.last_expanded += 1
            self._relax(graph, current, results, visited)

        self._log_run(source, results)
        return results

    @staticmethod
    def _find_lowest(results: Dict[str, Result], visited: Set[str]) -> Optional[str]:
        best_key: Optional[str] = None
        best = math.inf
        for key, result in results.items():
            if key in visited:
                continue
            # Strictly less keeps the earlier entry on ties.
            if result.distance < best:
                best_key = key
                best = result.distance
        return best_key


class HeapDijkstraEngine(_InstrumentedEngine):
    """
    Single-source Dijkstra using a binary heap.

    Heap entries are (distance, insertion index, key) so that equal
    distances pop in node insertion order, matching the linear scan.

    Complexity:
        O(E log V) over the nodes reachable from the source.
    """

    def __init__(self) -> None:
        super().__init__()
        self.last_heap_pops = 0
        self.last_heap_pushes = 0

    def _reset_counters(self) -> None:
        super()._reset_counters()
        self.last_heap_pops = 0
        self.last_heap_pushes = 0

    def shortest_paths(self, graph: Graph, source: str) -> Dict[str, Result]:
        self._reset_counters()
        results = self._initial_results(graph, source)
        order = {key: i for i, key in enumerate(results)}
        visited: Set[str] = set()
        pq = [(0.0, order[source], source)]

        while pq:
            d_u, _, u = heapq.heappop(pq)
            self.last_heap_pops += 1

            # Skip outdated entries
            if u in visited or d_u != results[u].distance:
                continue

            visited.add(u)
            self.last_expanded += 1
            for v in self._relax(graph, u, results, visited):
                heapq.heappush(pq, (results[v].distance, order[v], v))
                self.last_heap_pushes += 1

        self._log_run(source, results)
        return results
