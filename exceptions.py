"""
Exceptions raised by the graph library.
"""


class GraphError(Exception):
    """Base exception for graph errors"""
    pass


class NodeNotFound(GraphError, LookupError):
    """A key was dereferenced but no node carries it."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Could not find node {key}")
        self.key = key


class ConfigError(GraphError):
    """Malformed graph options"""
    pass
