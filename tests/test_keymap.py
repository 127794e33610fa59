"""Tests for keyboard intent mapping."""

import pytest

from mindtree import handle_key
from mindtree.interaction import navigate
from mindtree.tree_components import Direction


@pytest.fixture
def selected(abc_store):
    abc_store.select_node("n2")
    return abc_store


def test_keys_without_selection_do_nothing(abc_store):
    before = abc_store.snapshot
    for key in ("Tab", "Enter", "Delete", "ArrowUp", "F2"):
        assert handle_key(abc_store, key) is False
    assert abc_store.snapshot is before


def test_tab_adds_child(selected):
    assert handle_key(selected, "Tab") is True
    assert selected.nodes["n2"].children == ("n4",)
    assert selected.editing_id == "n4"


def test_enter_adds_sibling(selected):
    assert handle_key(selected, "Enter") is True
    assert selected.snapshot.root.children == ("n1", "n2", "n3", "n4")


def test_enter_on_root_adds_child(abc_store):
    abc_store.select_node("root")
    handle_key(abc_store, "Enter")
    assert abc_store.snapshot.root.children[-1] == "n4"


@pytest.mark.parametrize("key", ["Delete", "Backspace"])
def test_delete_keys(selected, key):
    assert handle_key(selected, key) is True
    assert "n2" not in selected.nodes
    assert selected.selected_id == "root"


def test_arrow_navigation(selected):
    assert handle_key(selected, "ArrowUp") is True
    assert selected.selected_id == "n1"
    assert handle_key(selected, "ArrowUp") is False

    handle_key(selected, "ArrowDown")
    handle_key(selected, "ArrowDown")
    assert selected.selected_id == "n3"
    assert handle_key(selected, "ArrowDown") is False

    handle_key(selected, "ArrowLeft")
    assert selected.selected_id == "root"
    handle_key(selected, "ArrowRight")
    assert selected.selected_id == "n2"


def test_right_picks_middle_child_of_expanded_node(abc_store):
    snap = abc_store.snapshot.evolve(selected_id="root")
    assert navigate(snap, Direction.RIGHT) == "n2"

    abc_store.set_expanded("root", False)
    collapsed = abc_store.snapshot.evolve(selected_id="root")
    assert navigate(collapsed, Direction.RIGHT) is None


def test_left_on_root_goes_nowhere(abc_store):
    abc_store.select_node("root")
    assert handle_key(abc_store, "ArrowLeft") is False


@pytest.mark.parametrize("key", [" ", "F2"])
def test_edit_keys(selected, key):
    assert handle_key(selected, key) is True
    assert selected.editing_id == "n2"


def test_editing_swallows_structural_keys(selected):
    selected.set_editing_node("n2")
    before = selected.snapshot
    assert handle_key(selected, "Delete") is False
    assert handle_key(selected, "ArrowUp") is False
    assert selected.snapshot is before


def test_enter_commits_edit(selected):
    selected.set_editing_node("n2")
    assert handle_key(selected, "Enter", shift=True) is False
    assert selected.editing_id == "n2"
    assert handle_key(selected, "Enter") is True
    assert (selected.selected_id, selected.editing_id) == ("n2", None)


def test_escape_commits_edit(selected):
    selected.set_editing_node("n2")
    assert handle_key(selected, "Escape") is True
    assert selected.editing_id is None


def test_tab_while_editing_commits_and_adds_child(selected):
    selected.set_editing_node("n2")
    assert handle_key(selected, "Tab") is True
    assert selected.nodes["n2"].children == ("n4",)
    assert selected.editing_id == "n4"


def test_unbound_key(selected):
    assert handle_key(selected, "q") is False
