from .mind_map import *
from .errors import *

__version__ = "0.1.0"
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
    "MindTreeError",
    "ConfigurationError",
    "InvariantError",
    "DropTargetError",
]
