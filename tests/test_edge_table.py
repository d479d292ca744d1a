"""
Unit tests for EdgeTable key normalisation.
"""

from edge_table import EdgeTable


def test_undirected_lookup_is_symmetric():
    table = EdgeTable()
    table.set("b", "a", 3.0)

    assert table.get("a", "b") == 3.0
    assert table.get("b", "a") == 3.0
    assert table.normalize("b", "a") == ("a", "b")
    assert len(table) == 1


def test_directed_keeps_pair_order():
    table = EdgeTable(directed=True)
    table.set("a", "b", 1.0)
    table.set("b", "a", 5.0)

    assert table.get("a", "b") == 1.0
    assert table.get("b", "a") == 5.0
    assert len(table) == 2


def test_missing_pair_is_none_and_zero_is_kept():
    table = EdgeTable()
    table.set("a", "b", 0)

    assert table.get("a", "b") == 0
    assert table.get("a", "c") is None
    assert ("b", "a") in table
    assert ("a", "c") not in table


def test_set_overwrites_weight():
    table = EdgeTable()
    table.set("a", "b", 4.0)
    table.set("b", "a", 2.0)

    assert table.get("a", "b") == 2.0
    assert list(table.items()) == [(("a", "b"), 2.0)]
