from .core import (
    DEFAULT_NODE_TEXT,
    NODE_GAP_X,
    NODE_GAP_Y,
    NODE_HEIGHT,
    ROOT_ID,
    ROOT_TEXT,
    Direction,
    DropPosition,
)
from .node import Node
from .snapshot import TreeSnapshot
from .store import TreeStore
from .layout import LayoutEngine, compute_layout
from .diff import diff, DiffResult
from .measure import estimate_node_size, text_extent, wrap_text
from .outline import build_outline, render_outline

__all__ = [
    "DEFAULT_NODE_TEXT",
    "NODE_GAP_X",
    "NODE_GAP_Y",
    "NODE_HEIGHT",
    "ROOT_ID",
    "ROOT_TEXT",
    "Direction",
    "DropPosition",
    "Node",
    "TreeSnapshot",
    "TreeStore",
    "LayoutEngine",
    "compute_layout",
    "diff",
    "DiffResult",
    "estimate_node_size",
    "text_extent",
    "wrap_text",
    "build_outline",
    "render_outline",
]
