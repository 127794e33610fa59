import logging
from typing import Dict, List, Mapping, Optional, Tuple

from ..errors import ConfigurationError
from .core import NODE_GAP_X, NODE_GAP_Y, NODE_HEIGHT
from .node import Node

logger = logging.getLogger(__name__)


class LayoutEngine:
    """Two-pass horizontal tree layout.

    Pass one measures how tall every visible subtree is; pass two walks down
    from the root and stacks each node's children as a block centered on the
    parent's ``y``, one ``horizontal_spacing`` column to the right.
    """

    def __init__(
        self,
        node_height: float = NODE_HEIGHT,
        horizontal_spacing: float = NODE_GAP_X,
        vertical_spacing: float = NODE_GAP_Y,
    ):
        for name, value in (
            ("node_height", node_height),
            ("horizontal_spacing", horizontal_spacing),
            ("vertical_spacing", vertical_spacing),
        ):
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigurationError(f"{name} must be a number.")

        if node_height <= 0:
            raise ConfigurationError("node_height must be positive.")
        if vertical_spacing < 0:
            raise ConfigurationError("vertical_spacing must not be negative.")

        self.node_height = node_height
        self.h_spacing = horizontal_spacing
        self.v_spacing = vertical_spacing

    def _visible_children(self, node: Node, nodes: Mapping[str, Node]) -> List[str]:
        if not node.is_expanded:
            return []
        return [child_id for child_id in node.children if child_id in nodes]

    def _block_height(self, child_ids: List[str], extents: Mapping[str, float]) -> float:
        total = sum(extents[child_id] for child_id in child_ids)
        return total + (len(child_ids) - 1) * self.v_spacing

    def subtree_extents(self, root_id: str, nodes: Mapping[str, Node]) -> Dict[str, float]:
        extents: Dict[str, float] = {}
        if root_id not in nodes:
            return extents

        stack: List[Tuple[str, bool]] = [(root_id, False)]
        while stack:
            node_id, children_done = stack.pop()
            if node_id in extents:
                continue
            node = nodes[node_id]
            child_ids = self._visible_children(node, nodes)
            own = node.own_height(self.node_height)

            if not child_ids:
                extents[node_id] = own
                continue
            if not children_done:
                stack.append((node_id, True))
                for child_id in reversed(child_ids):
                    if child_id not in extents:
                        stack.append((child_id, False))
                continue

            extents[node_id] = max(own, self._block_height(child_ids, extents))
        return extents

    def compute_layout(
        self,
        root_id: str,
        nodes: Mapping[str, Node],
        origin: Tuple[float, float] = (0.0, 0.0),
    ) -> Dict[str, Node]:
        laid_out: Dict[str, Node] = dict(nodes)
        if root_id not in nodes:
            logger.debug("compute_layout: root '%s' is not in the node map", root_id)
            return laid_out

        extents = self.subtree_extents(root_id, nodes)

        stack: List[Tuple[str, float, float]] = [(root_id, float(origin[0]), float(origin[1]))]
        while stack:
            node_id, x, y = stack.pop()
            node = nodes[node_id]
            if node.x != x or node.y != y:
                laid_out[node_id] = node.evolve(x=x, y=y)

            child_ids = self._visible_children(node, nodes)
            if not child_ids:
                continue

            cursor = y - self._block_height(child_ids, extents) / 2
            placements: List[Tuple[str, float, float]] = []
            for child_id in child_ids:
                extent = extents[child_id]
                placements.append((child_id, x + self.h_spacing, cursor + extent / 2))
                cursor += extent + self.v_spacing
            stack.extend(reversed(placements))

        return laid_out


_DEFAULT_ENGINE = LayoutEngine()


def compute_layout(
    root_id: str,
    nodes: Mapping[str, Node],
    origin: Tuple[float, float] = (0.0, 0.0),
    engine: Optional[LayoutEngine] = None,
) -> Dict[str, Node]:
    return (engine or _DEFAULT_ENGINE).compute_layout(root_id, nodes, origin)
