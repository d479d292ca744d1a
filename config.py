"""
Graph options and their YAML loader.

An options file is a flat mapping, for example:

    directed: true
    engine: heap
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict
import logging

import yaml  # type: ignore

from algorithms import DijkstraEngine
from dijkstra_engine import HeapDijkstraEngine, LinearScanDijkstraEngine
from exceptions import ConfigError

logger = logging.getLogger(__name__)

ENGINES: Dict[str, Callable[[], DijkstraEngine]] = {
    "linear": LinearScanDijkstraEngine,
    "heap": HeapDijkstraEngine,
}


@dataclass(frozen=True)
class GraphOptions:
    directed: bool = False
    engine: str = "linear"

    def __post_init__(self) -> None:
        if self.engine not in ENGINES:
            raise ConfigError(
                f"Unknown engine {self.engine!r}; expected one of {sorted(ENGINES)}"
            )

    def make_engine(self) -> DijkstraEngine:
        return ENGINES[self.engine]()


def load_options(path: Path) -> GraphOptions:
    """
    Read GraphOptions from a YAML file. Missing keys take their defaults;
    an empty file gives the default options.
    """
    try:
        data = yaml.safe_load(path.read_text())
    except yaml.YAMLError as exc:
        raise ConfigError(f"Could not parse {path}: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path} must contain a mapping, got {type(data).__name__}")

    unknown = set(data) - {"directed", "engine"}
    if unknown:
        raise ConfigError(f"Unknown option(s) in {path}: {sorted(unknown)}")

    directed = data.get("directed", False)
    if not isinstance(directed, bool):
        raise ConfigError(f"'directed' must be true or false, got {directed!r}")

    options = GraphOptions(directed=directed, engine=str(data.get("engine", "linear")))
    logger.debug("Loaded %s from %s", options, path)
    return options
