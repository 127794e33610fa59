import logging
from typing import Optional

from ..tree_components.core import Direction
from ..tree_components.snapshot import TreeSnapshot
from ..tree_components.store import TreeStore

logger = logging.getLogger(__name__)

_ARROWS = {
    "ArrowLeft": Direction.LEFT,
    "ArrowRight": Direction.RIGHT,
    "ArrowUp": Direction.UP,
    "ArrowDown": Direction.DOWN,
}


def navigate(snapshot: TreeSnapshot, direction: Direction) -> Optional[str]:
    current = snapshot.node(snapshot.selected_id)
    if current is None:
        return None

    if direction is Direction.LEFT:
        return current.parent_id
    if direction is Direction.RIGHT:
        if not current.children or not current.is_expanded:
            return None
        return current.children[len(current.children) // 2]

    parent = snapshot.parent_of(current.id)
    if parent is None:
        return None
    index = parent.children.index(current.id)
    if direction is Direction.UP and index > 0:
        return parent.children[index - 1]
    if direction is Direction.DOWN and index < len(parent.children) - 1:
        return parent.children[index + 1]
    return None


def _handle_editing_key(store: TreeStore, key: str, shift: bool) -> bool:
    editing_id = store.editing_id
    if key == "Enter" and not shift:
        return store.set_editing_node(None)
    if key == "Escape":
        return store.set_editing_node(None)
    if key == "Tab":
        store.set_editing_node(None)
        return store.add_node(editing_id) is not None
    return False


def handle_key(store: TreeStore, key: str, *, shift: bool = False) -> bool:
    """Translate one key press into a store mutation.

    Returns whether the store changed. Keys typed while a node is being
    edited belong to the text editor, except the commit keys.
    """
    if store.editing_id is not None:
        return _handle_editing_key(store, key, shift)

    snapshot = store.snapshot
    selected_id = snapshot.selected_id
    if selected_id is None:
        return False

    if key == "Tab":
        return store.add_node(selected_id) is not None
    if key == "Enter":
        node = snapshot.node(selected_id)
        if selected_id == snapshot.root_id or node is None or node.parent_id is None:
            return store.add_node(selected_id) is not None
        return store.add_node(node.parent_id) is not None
    if key in ("Delete", "Backspace"):
        return store.delete_node(selected_id)
    if key in _ARROWS:
        target = navigate(snapshot, _ARROWS[key])
        if target is None:
            return False
        return store.select_node(target)
    if key in (" ", "F2"):
        return store.set_editing_node(selected_id)

    logger.debug("handle_key: unbound key %r", key)
    return False
