from .drop_targets import (
    DropTarget,
    DropZone,
    apply_drop,
    decode_drop_target,
    drop_zones,
    encode_drop_target,
)
from .keymap import handle_key, navigate

__all__ = [
    "DropTarget",
    "DropZone",
    "apply_drop",
    "decode_drop_target",
    "drop_zones",
    "encode_drop_target",
    "handle_key",
    "navigate",
]
