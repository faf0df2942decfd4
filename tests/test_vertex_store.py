"""
Unit tests for VertexStore.
"""

import pytest

from errors import InvalidArgumentError
from vertex_store import VertexStore


def test_add_and_discard():
    store = VertexStore()

    assert store.add("a") is True
    assert store.add("a") is False
    assert "a" in store
    assert len(store) == 1

    assert store.discard("a") is True
    assert store.discard("a") is False
    assert "a" not in store


def test_none_handling():
    store = VertexStore()

    with pytest.raises(InvalidArgumentError):
        store.add(None)
    assert None not in store
    assert store.discard(None) is False


def test_require_names_missing_vertex():
    store = VertexStore()
    store.add(1)

    store.require(1)
    with pytest.raises(InvalidArgumentError, match="2"):
        store.require(1, 2)


def test_snapshot_and_clear():
    store = VertexStore()
    store.add(1)
    store.add(2)

    snap = store.snapshot()
    store.clear()

    assert snap == frozenset({1, 2})
    assert len(store) == 0
    assert list(store) == []
