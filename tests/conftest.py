import itertools

import pytest

from mindtree import TreeStore


@pytest.fixture
def id_factory():
    """Sequential ids so assertions can name nodes."""
    counter = itertools.count(1)
    return lambda: f"n{next(counter)}"


@pytest.fixture
def store(id_factory):
    return TreeStore(id_factory=id_factory)


@pytest.fixture
def abc_store(store):
    """Root with three children n1, n2, n3 (A, B, C)."""
    for text in ("A", "B", "C"):
        store.add_node(store.root_id, text)
    store.select_node(None)
    return store
