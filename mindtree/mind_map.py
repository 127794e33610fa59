from .interaction import apply_drop, decode_drop_target, drop_zones, encode_drop_target, handle_key
from .tree_components import (
    DropPosition,
    LayoutEngine,
    Node,
    TreeSnapshot,
    TreeStore,
    compute_layout,
    diff,
    estimate_node_size,
    render_outline,
)

__all__ = [
    "TreeStore",
    "TreeSnapshot",
    "Node",
    "DropPosition",
    "LayoutEngine",
    "compute_layout",
    "diff",
    "estimate_node_size",
    "render_outline",
    "apply_drop",
    "decode_drop_target",
    "drop_zones",
    "encode_drop_target",
    "handle_key",
]
