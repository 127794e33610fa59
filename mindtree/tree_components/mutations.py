"""Pure tree edits: every function takes a snapshot and returns the next one.

A rejected request returns the very same snapshot object, so callers can
detect a no-op with ``result is snapshot``.
"""

import logging
import uuid
from typing import Callable, Dict, List, Optional, Union

from .core import DEFAULT_NODE_TEXT, DropPosition
from .node import Node
from .snapshot import TreeSnapshot

logger = logging.getLogger(__name__)

IdFactory = Callable[[], str]


def new_node_id() -> str:
    return str(uuid.uuid4())


def _reject(operation: str, reason: str, snapshot: TreeSnapshot) -> TreeSnapshot:
    logger.debug("%s rejected: %s", operation, reason)
    return snapshot


def add_node(
    snapshot: TreeSnapshot,
    parent_id: str,
    text: str = DEFAULT_NODE_TEXT,
    *,
    node_id: Optional[str] = None,
    id_factory: IdFactory = new_node_id,
) -> TreeSnapshot:
    parent = snapshot.node(parent_id)
    if parent is None:
        return _reject("add_node", f"parent '{parent_id}' does not exist", snapshot)

    new_id = node_id if node_id is not None else id_factory()
    if new_id in snapshot:
        return _reject("add_node", f"id '{new_id}' is already taken", snapshot)

    nodes = dict(snapshot.nodes)
    nodes[new_id] = Node(id=new_id, parent_id=parent_id, text=text)
    nodes[parent_id] = parent.evolve(children=parent.children + (new_id,), is_expanded=True)
    return snapshot.evolve(nodes, selected_id=new_id, editing_id=new_id)


def delete_node(snapshot: TreeSnapshot, node_id: str) -> TreeSnapshot:
    if node_id == snapshot.root_id:
        return _reject("delete_node", "the root cannot be deleted", snapshot)
    node = snapshot.node(node_id)
    if node is None:
        return _reject("delete_node", f"node '{node_id}' does not exist", snapshot)
    parent = snapshot.node(node.parent_id)
    if parent is None:
        return _reject("delete_node", f"node '{node_id}' has no parent", snapshot)

    doomed = [node_id] + snapshot.descendants(node_id)

    nodes = dict(snapshot.nodes)
    for doomed_id in doomed:
        nodes.pop(doomed_id, None)
    nodes[parent.id] = parent.evolve(children=[c for c in parent.children if c != node_id])

    editing_id = snapshot.editing_id if snapshot.editing_id == parent.id else None
    return snapshot.evolve(nodes, selected_id=parent.id, editing_id=editing_id)


def update_node_text(snapshot: TreeSnapshot, node_id: str, text: str) -> TreeSnapshot:
    node = snapshot.node(node_id)
    if node is None:
        return _reject("update_node_text", f"node '{node_id}' does not exist", snapshot)
    if node.text == text:
        return snapshot

    nodes = dict(snapshot.nodes)
    nodes[node_id] = node.evolve(text=text)
    return snapshot.evolve(nodes)


def select_node(snapshot: TreeSnapshot, node_id: Optional[str]) -> TreeSnapshot:
    if node_id is not None and node_id not in snapshot:
        return _reject("select_node", f"node '{node_id}' does not exist", snapshot)
    if snapshot.selected_id == node_id and snapshot.editing_id is None:
        return snapshot
    return snapshot.evolve(selected_id=node_id, editing_id=None)


def set_editing_node(snapshot: TreeSnapshot, node_id: Optional[str]) -> TreeSnapshot:
    if snapshot.editing_id == node_id:
        return snapshot
    if node_id is not None:
        if node_id not in snapshot:
            return _reject("set_editing_node", f"node '{node_id}' does not exist", snapshot)
        if node_id != snapshot.selected_id:
            return _reject("set_editing_node", f"node '{node_id}' is not selected", snapshot)
    return snapshot.evolve(editing_id=node_id)


def _coerce_position(value: Union[DropPosition, str]) -> Optional[DropPosition]:
    if isinstance(value, DropPosition):
        return value
    try:
        return DropPosition(str(value).lower())
    except ValueError:
        return None


def _creates_cycle(snapshot: TreeSnapshot, dragged_id: str, target_id: str) -> bool:
    current = snapshot.node(target_id)
    steps = 0
    while current is not None:
        if current.id == dragged_id:
            return True
        steps += 1
        if steps > len(snapshot):
            return True
        current = snapshot.node(current.parent_id)
    return False


def move_node(
    snapshot: TreeSnapshot,
    dragged_id: str,
    target_id: str,
    position: Union[DropPosition, str] = DropPosition.CHILD,
    index: Optional[int] = None,
) -> TreeSnapshot:
    """Reparent or reorder ``dragged_id``.

    With ``DropPosition.CHILD`` the node becomes the last child of
    ``target_id``. With ``DropPosition.SIBLING``, ``target_id`` is the parent
    to insert under and ``index`` is an insertion gap into that parent's
    children as they were before the move (0 is before the first child,
    ``len(children)`` after the last).
    """
    mode = _coerce_position(position)
    if mode is None:
        return _reject("move_node", f"unknown position {position!r}", snapshot)
    if dragged_id == target_id:
        return _reject("move_node", "a node cannot be dropped onto itself", snapshot)
    if dragged_id == snapshot.root_id:
        return _reject("move_node", "the root cannot be moved", snapshot)

    dragged = snapshot.node(dragged_id)
    new_parent = snapshot.node(target_id)
    if dragged is None or new_parent is None:
        return _reject("move_node", f"unknown node in move '{dragged_id}' -> '{target_id}'", snapshot)
    if _creates_cycle(snapshot, dragged_id, target_id):
        return _reject("move_node", f"'{target_id}' is inside the subtree of '{dragged_id}'", snapshot)

    nodes: Dict[str, Node] = dict(snapshot.nodes)
    old_parent = snapshot.node(dragged.parent_id)
    if old_parent is not None:
        nodes[old_parent.id] = old_parent.evolve(
            children=[c for c in old_parent.children if c != dragged_id]
        )

    children: List[str] = list(nodes[target_id].children)
    if mode is DropPosition.SIBLING and isinstance(index, int):
        insert_index = index
        if dragged.parent_id == target_id:
            # Gap indices refer to the list before removal.
            old_index = new_parent.children.index(dragged_id)
            if old_index < insert_index:
                insert_index -= 1
        if 0 <= insert_index <= len(children):
            children.insert(insert_index, dragged_id)
        else:
            children.append(dragged_id)
    else:
        children.append(dragged_id)

    if (
        dragged.parent_id == target_id
        and tuple(children) == new_parent.children
        and new_parent.is_expanded
    ):
        return snapshot

    nodes[target_id] = nodes[target_id].evolve(children=children, is_expanded=True)
    nodes[dragged_id] = dragged.evolve(parent_id=target_id)
    return snapshot.evolve(nodes)


def update_node_size(snapshot: TreeSnapshot, node_id: str, width: float, height: float) -> TreeSnapshot:
    node = snapshot.node(node_id)
    if node is None:
        return _reject("update_node_size", f"node '{node_id}' does not exist", snapshot)
    if node.width == width and node.height == height:
        return snapshot

    nodes = dict(snapshot.nodes)
    nodes[node_id] = node.evolve(width=width, height=height)
    return snapshot.evolve(nodes)


def set_expanded(snapshot: TreeSnapshot, node_id: str, expanded: bool) -> TreeSnapshot:
    node = snapshot.node(node_id)
    if node is None:
        return _reject("set_expanded", f"node '{node_id}' does not exist", snapshot)
    if node.is_expanded == expanded:
        return snapshot

    nodes = dict(snapshot.nodes)
    nodes[node_id] = node.evolve(is_expanded=expanded)
    return snapshot.evolve(nodes)


def toggle_expanded(snapshot: TreeSnapshot, node_id: str) -> TreeSnapshot:
    node = snapshot.node(node_id)
    if node is None:
        return _reject("toggle_expanded", f"node '{node_id}' does not exist", snapshot)
    return set_expanded(snapshot, node_id, not node.is_expanded)
