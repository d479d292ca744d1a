from pathlib import Path

import pytest

from config import GraphOptions, load_options
from dijkstra_engine import HeapDijkstraEngine, LinearScanDijkstraEngine
from exceptions import ConfigError
from graph import Graph


def test_load_options_reads_yaml(tmp_path: Path):
    cfg = tmp_path / "graph.yml"
    cfg.write_text(
        """
directed: true
engine: heap
"""
    )

    options = load_options(cfg)

    assert options == GraphOptions(directed=True, engine="heap")
    g = Graph.from_options(options)
    assert g.directed
    assert isinstance(g.engine, HeapDijkstraEngine)


def test_empty_file_gives_defaults(tmp_path: Path):
    cfg = tmp_path / "empty.yml"
    cfg.write_text("")

    options = load_options(cfg)

    assert options == GraphOptions()
    g = Graph.from_options(options)
    assert not g.directed
    assert isinstance(g.engine, LinearScanDijkstraEngine)


@pytest.mark.parametrize(
    "text",
    [
        "engine: fibonacci\n",
        "- directed\n",
        "directed: maybe\n",
        "colour: red\n",
        "directed: [unclosed\n",
    ],
)
def test_bad_options_raise_config_error(tmp_path: Path, text: str):
    cfg = tmp_path / "bad.yml"
    cfg.write_text(text)

    with pytest.raises(ConfigError):
        load_options(cfg)


def test_unknown_engine_rejected_directly():
    with pytest.raises(ConfigError, match="Unknown engine"):
        GraphOptions(engine="bogus")
