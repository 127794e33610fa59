import logging
from dataclasses import dataclass
from typing import List, Mapping, Optional

from ..errors import DropTargetError
from ..tree_components.core import NODE_GAP_Y, DropPosition
from ..tree_components.node import Node
from ..tree_components.store import TreeStore

logger = logging.getLogger(__name__)

SIBLING_PREFIX = "DROP_SIB"
SEPARATOR = "|"


@dataclass(frozen=True)
class DropTarget:
    target_id: str
    position: DropPosition
    index: Optional[int] = None


@dataclass(frozen=True)
class DropZone:
    parent_id: str
    index: int
    x: float
    y: float

    @property
    def token(self) -> str:
        return encode_drop_target(self.parent_id, self.index)


def encode_drop_target(parent_id: str, index: int) -> str:
    return f"{SIBLING_PREFIX}{SEPARATOR}{parent_id}{SEPARATOR}{index}"


def decode_drop_target(token: str) -> DropTarget:
    if not isinstance(token, str) or not token:
        raise DropTargetError("Drop target token must be a non-empty string.")

    if not token.startswith(SIBLING_PREFIX + SEPARATOR):
        return DropTarget(target_id=token, position=DropPosition.CHILD)

    payload = token[len(SIBLING_PREFIX) + 1 :]
    parent_id, sep, raw_index = payload.rpartition(SEPARATOR)
    if not sep or not parent_id:
        raise DropTargetError(f"Malformed sibling drop target: {token!r}")
    try:
        index = int(raw_index, 10)
    except ValueError as exc:
        raise DropTargetError(f"Sibling drop target has a non-numeric index: {token!r}") from exc
    return DropTarget(target_id=parent_id, position=DropPosition.SIBLING, index=index)


def drop_zones(nodes: Mapping[str, Node], root_id: str, gap: float = NODE_GAP_Y) -> List[DropZone]:
    """Insertion gaps for every visible parent of a laid-out node map."""
    zones: List[DropZone] = []
    root = nodes.get(root_id)
    if root is None:
        return zones

    stack = [root]
    while stack:
        parent = stack.pop()
        if not parent.is_expanded:
            continue
        children = [nodes[child_id] for child_id in parent.children if child_id in nodes]
        if not children:
            continue

        ordered = sorted(children, key=lambda child: child.y)
        for index, child in enumerate(ordered):
            if index == 0:
                y = child.y - gap / 2
            else:
                y = (ordered[index - 1].y + child.y) / 2
            zones.append(DropZone(parent.id, index, child.x, y))

        last = ordered[-1]
        zones.append(DropZone(parent.id, len(ordered), last.x, last.y + gap / 2))
        stack.extend(reversed(children))
    return zones


def apply_drop(store: TreeStore, dragged_id: str, token: str) -> bool:
    target = decode_drop_target(token)
    if target.position is DropPosition.CHILD and target.target_id == dragged_id:
        logger.debug("apply_drop: '%s' dropped onto itself", dragged_id)
        return False
    return store.move_node(dragged_id, target.target_id, target.position, target.index)
