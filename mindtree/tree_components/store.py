import logging
from typing import Callable, Dict, List, Mapping, Optional, Union

from . import mutations
from .core import DEFAULT_NODE_TEXT, ROOT_ID, ROOT_TEXT, DropPosition
from .diff import diff
from .layout import LayoutEngine, compute_layout
from .node import Node
from .snapshot import TreeSnapshot

logger = logging.getLogger(__name__)

Observer = Callable[[TreeSnapshot, TreeSnapshot], None]


class TreeStore:
    """Single-writer handle around the current :class:`TreeSnapshot`.

    Every method delegates to the matching pure function in
    :mod:`mindtree.tree_components.mutations`, swaps in the returned snapshot
    and tells observers about it. Rejected requests leave the store untouched
    and report ``False`` (``None`` for :meth:`add_node`).
    """

    def __init__(
        self,
        root_text: str = ROOT_TEXT,
        root_id: str = ROOT_ID,
        *,
        id_factory: mutations.IdFactory = mutations.new_node_id,
        snapshot: Optional[TreeSnapshot] = None,
    ):
        self._snapshot = snapshot if snapshot is not None else TreeSnapshot.initial(root_text, root_id)
        self._id_factory = id_factory
        self._observers: List[Observer] = []

    @property
    def snapshot(self) -> TreeSnapshot:
        return self._snapshot

    @property
    def nodes(self) -> Mapping[str, Node]:
        return self._snapshot.nodes

    @property
    def root_id(self) -> str:
        return self._snapshot.root_id

    @property
    def selected_id(self) -> Optional[str]:
        return self._snapshot.selected_id

    @property
    def editing_id(self) -> Optional[str]:
        return self._snapshot.editing_id

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def _commit(self, operation: str, result: TreeSnapshot) -> bool:
        previous = self._snapshot
        if result is previous:
            return False
        self._snapshot = result
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("%s: %s", operation, diff(previous, result).summary())
        for observer in list(self._observers):
            observer(previous, result)
        return True

    def add_node(self, parent_id: str, text: str = DEFAULT_NODE_TEXT) -> Optional[str]:
        result = mutations.add_node(self._snapshot, parent_id, text, id_factory=self._id_factory)
        if not self._commit("add_node", result):
            return None
        return result.selected_id

    def delete_node(self, node_id: str) -> bool:
        return self._commit("delete_node", mutations.delete_node(self._snapshot, node_id))

    def update_node_text(self, node_id: str, text: str) -> bool:
        return self._commit("update_node_text", mutations.update_node_text(self._snapshot, node_id, text))

    def select_node(self, node_id: Optional[str]) -> bool:
        return self._commit("select_node", mutations.select_node(self._snapshot, node_id))

    def set_editing_node(self, node_id: Optional[str]) -> bool:
        return self._commit("set_editing_node", mutations.set_editing_node(self._snapshot, node_id))

    def move_node(
        self,
        dragged_id: str,
        target_id: str,
        position: Union[DropPosition, str] = DropPosition.CHILD,
        index: Optional[int] = None,
    ) -> bool:
        return self._commit(
            "move_node",
            mutations.move_node(self._snapshot, dragged_id, target_id, position, index),
        )

    def update_node_size(self, node_id: str, width: float, height: float) -> bool:
        return self._commit(
            "update_node_size",
            mutations.update_node_size(self._snapshot, node_id, width, height),
        )

    def set_expanded(self, node_id: str, expanded: bool) -> bool:
        return self._commit("set_expanded", mutations.set_expanded(self._snapshot, node_id, expanded))

    def toggle_expanded(self, node_id: str) -> bool:
        return self._commit("toggle_expanded", mutations.toggle_expanded(self._snapshot, node_id))

    def layout(self, engine: Optional[LayoutEngine] = None) -> Dict[str, Node]:
        return compute_layout(self._snapshot.root_id, self._snapshot.nodes, engine=engine)
