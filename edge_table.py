"""
Edge-weight storage keyed by endpoint pair.

Weights are kept apart from adjacency: node neighbour lists only record
topology, this table is the source of truth for distances.
"""

from typing import Dict, Iterator, Optional, Tuple

EdgeKey = Tuple[str, str]


class EdgeTable:
    """
    Mapping (key1, key2) -> weight with a directed/undirected key policy.

    Undirected tables sort the pair before storage and lookup so that
    edge(a, b) == edge(b, a). Directed tables keep the pair as given.
    """

    def __init__(self, directed: bool = False) -> None:
        self._directed = directed
        self._weights: Dict[EdgeKey, float] = {}

    @property
    def directed(self) -> bool:
        return self._directed

    def normalize(self, key1: str, key2: str) -> EdgeKey:
        """Return the storage key for the pair under this table's policy."""
        if self._directed or key1 <= key2:
            return (key1, key2)
        return (key2, key1)

    def set(self, key1: str, key2: str, weight: float) -> None:
        """Store weight for the pair, overwriting any previous value."""
        self._weights[self.normalize(key1, key2)] = weight

    def get(self, key1: str, key2: str) -> Optional[float]:
        """Weight for the pair, or None if it was never added."""
        return self._weights.get(self.normalize(key1, key2))

    def items(self) -> Iterator[Tuple[EdgeKey, float]]:
        return iter(self._weights.items())

    def __contains__(self, pair: object) -> bool:
        if not isinstance(pair, tuple) or len(pair) != 2:
            return False
        return self.normalize(pair[0], pair[1]) in self._weights

    def __len__(self) -> int:
        return len(self._weights)
