"""Tests for TreeStore: changed flags, observers and invariant preservation."""

import logging
import random

import pytest

from mindtree import DropPosition, TreeStore


def test_store_starts_with_root(store):
    assert store.root_id == "root"
    assert list(store.nodes) == ["root"]
    assert store.selected_id is None
    assert store.editing_id is None


def test_custom_root():
    store = TreeStore("Plan", root_id="top")
    assert store.snapshot.root.text == "Plan"
    assert store.root_id == "top"


def test_add_node_returns_new_id(store):
    new_id = store.add_node(store.root_id, "Idea")
    assert new_id == "n1"
    assert store.nodes[new_id].text == "Idea"
    assert store.selected_id == new_id
    assert store.editing_id == new_id


def test_add_node_missing_parent_returns_none(store):
    before = store.snapshot
    assert store.add_node("ghost") is None
    assert store.snapshot is before


def test_rejections_report_false(abc_store):
    before = abc_store.snapshot
    assert abc_store.delete_node("root") is False
    assert abc_store.move_node("n1", "n1", "child") is False
    assert abc_store.move_node("root", "n1", "child") is False
    assert abc_store.select_node("ghost") is False
    assert abc_store.snapshot is before


def test_sibling_reorder_scenario(abc_store):
    assert abc_store.move_node("n1", "root", DropPosition.SIBLING, 2) is True
    assert abc_store.snapshot.root.children == ("n2", "n1", "n3")

    assert abc_store.move_node("n1", "root", DropPosition.SIBLING, 1) is False
    assert abc_store.move_node("n1", "root", DropPosition.SIBLING, 0) is True
    assert abc_store.snapshot.root.children == ("n1", "n2", "n3")

    assert abc_store.move_node("n1", "root", DropPosition.SIBLING, 0) is False
    assert abc_store.snapshot.root.children == ("n1", "n2", "n3")


def test_cycle_rejection_leaves_tree_unchanged(abc_store):
    child = abc_store.add_node("n1", "deep")
    grandchild = abc_store.add_node(child, "deeper")
    before = abc_store.snapshot

    assert abc_store.move_node("n1", grandchild, "child") is False
    assert abc_store.snapshot is before


def test_update_node_size_idempotent(abc_store):
    assert abc_store.update_node_size("n2", 300, 52) is True
    snap = abc_store.snapshot
    assert abc_store.update_node_size("n2", 300, 52) is False
    assert abc_store.snapshot is snap


def test_delete_selected_transitions_to_parent(abc_store):
    child = abc_store.add_node("n2")
    assert abc_store.editing_id == child
    abc_store.delete_node(child)
    assert abc_store.selected_id == "n2"
    assert abc_store.editing_id is None


def test_selection_state_machine(abc_store):
    abc_store.select_node("n1")
    assert (abc_store.selected_id, abc_store.editing_id) == ("n1", None)
    abc_store.set_editing_node("n1")
    assert (abc_store.selected_id, abc_store.editing_id) == ("n1", "n1")
    abc_store.set_editing_node(None)
    assert (abc_store.selected_id, abc_store.editing_id) == ("n1", None)
    abc_store.set_editing_node("n1")
    abc_store.select_node(None)
    assert (abc_store.selected_id, abc_store.editing_id) == (None, None)


def test_observers_receive_previous_and_current(abc_store):
    seen = []
    unsubscribe = abc_store.subscribe(lambda prev, cur: seen.append((prev, cur)))

    before = abc_store.snapshot
    abc_store.update_node_text("n1", "Alpha")
    assert len(seen) == 1
    assert seen[0][0] is before
    assert seen[0][1] is abc_store.snapshot

    abc_store.update_node_text("n1", "Alpha")
    assert len(seen) == 1

    unsubscribe()
    abc_store.update_node_text("n1", "Beta")
    assert len(seen) == 1


def test_observer_can_relayout(abc_store):
    layouts = []
    abc_store.subscribe(lambda prev, cur: layouts.append(abc_store.layout()))
    abc_store.move_node("n3", "root", "sibling", 0)
    laid_out = layouts[-1]
    assert laid_out["n3"].y < laid_out["n1"].y < laid_out["n2"].y


def test_previous_snapshot_is_never_mutated(abc_store):
    before = abc_store.snapshot
    abc_store.move_node("n1", "n2", "child")
    assert before.root.children == ("n1", "n2", "n3")
    assert before.nodes["n1"].parent_id == "root"


def test_debug_logging_summarizes_changes(abc_store, caplog):
    with caplog.at_level(logging.DEBUG, logger="mindtree"):
        abc_store.move_node("n1", "n2", "child")
        abc_store.delete_node("root")
    messages = [record.getMessage() for record in caplog.records]
    assert any(message.startswith("move_node: moved=1") for message in messages)
    assert any("delete_node rejected" in message for message in messages)


def _random_step(store, rng):
    ids = list(store.nodes)
    choice = rng.randrange(6)
    pick = rng.choice
    if choice == 0:
        store.add_node(pick(ids + ["ghost"]))
    elif choice == 1:
        store.delete_node(pick(ids + ["ghost"]))
    elif choice == 2:
        store.move_node(pick(ids), pick(ids), "child")
    elif choice == 3:
        parent = store.nodes[pick(ids)]
        store.move_node(pick(ids), parent.id, "sibling", rng.randint(-1, len(parent.children) + 1))
    elif choice == 4:
        store.select_node(pick(ids + [None]))
        if store.selected_id is not None and rng.random() < 0.5:
            store.set_editing_node(store.selected_id)
    else:
        store.toggle_expanded(pick(ids))


@pytest.mark.parametrize("seed", range(5))
def test_random_edits_preserve_invariants(seed):
    rng = random.Random(seed)
    counter = iter(range(10_000))
    store = TreeStore(id_factory=lambda: f"id{next(counter)}")
    for _ in range(300):
        _random_step(store, rng)
        store.snapshot.validate()
        assert store.nodes[store.root_id].parent_id is None
