from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from .snapshot import TreeSnapshot


@dataclass
class DiffResult:
    added_nodes: List[str]
    removed_nodes: List[str]
    changed_text: List[Tuple[str, str, str]]
    moved_nodes: List[Tuple[str, Optional[str], Optional[str]]]
    reordered_parents: List[str]
    resized_nodes: List[str]
    toggled_nodes: List[str]
    selection_changed: bool = False

    def has_changes(self) -> bool:
        return any(
            [
                self.added_nodes,
                self.removed_nodes,
                self.changed_text,
                self.moved_nodes,
                self.reordered_parents,
                self.resized_nodes,
                self.toggled_nodes,
                self.selection_changed,
            ]
        )

    def summary(self) -> str:
        parts = []
        for label, items in (
            ("added", self.added_nodes),
            ("removed", self.removed_nodes),
            ("text", self.changed_text),
            ("moved", self.moved_nodes),
            ("reordered", self.reordered_parents),
            ("resized", self.resized_nodes),
            ("toggled", self.toggled_nodes),
        ):
            if items:
                parts.append(f"{label}={len(items)}")
        if self.selection_changed:
            parts.append("selection")
        return ", ".join(parts) or "no changes"


def diff(before: TreeSnapshot, after: TreeSnapshot) -> DiffResult:
    if before is after:
        return DiffResult([], [], [], [], [], [], [])

    added_nodes = sorted(set(after.nodes) - set(before.nodes))
    removed_nodes = sorted(set(before.nodes) - set(after.nodes))

    changed_text: List[Tuple[str, str, str]] = []
    moved_nodes: List[Tuple[str, Optional[str], Optional[str]]] = []
    reordered_parents: List[str] = []
    resized_nodes: List[str] = []
    toggled_nodes: List[str] = []

    for node_id in sorted(set(before.nodes) & set(after.nodes)):
        node_a = before.nodes[node_id]
        node_b = after.nodes[node_id]
        if node_a is node_b:
            continue
        if node_a.text != node_b.text:
            changed_text.append((node_id, node_a.text, node_b.text))
        if node_a.parent_id != node_b.parent_id:
            moved_nodes.append((node_id, node_a.parent_id, node_b.parent_id))
        if node_a.width != node_b.width or node_a.height != node_b.height:
            resized_nodes.append(node_id)
        if node_a.is_expanded != node_b.is_expanded:
            toggled_nodes.append(node_id)

        kept_a = [child for child in node_a.children if child in node_b.children]
        kept_b = [child for child in node_b.children if child in node_a.children]
        if kept_a != kept_b:
            reordered_parents.append(node_id)

    selection_changed = (
        before.selected_id != after.selected_id or before.editing_id != after.editing_id
    )

    return DiffResult(
        added_nodes=added_nodes,
        removed_nodes=removed_nodes,
        changed_text=changed_text,
        moved_nodes=moved_nodes,
        reordered_parents=reordered_parents,
        resized_nodes=resized_nodes,
        toggled_nodes=toggled_nodes,
        selection_changed=selection_changed,
    )
