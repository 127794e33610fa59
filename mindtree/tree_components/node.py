from dataclasses import dataclass, replace
from typing import Optional, Tuple

from .core import NODE_HEIGHT


@dataclass(frozen=True)
class Node:
    id: str
    parent_id: Optional[str]
    text: str
    children: Tuple[str, ...] = ()
    is_expanded: bool = True

    x: float = 0.0
    y: float = 0.0
    width: Optional[float] = None
    height: Optional[float] = None

    @property
    def is_root(self) -> bool:
        return self.parent_id is None

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def own_height(self, default: float = NODE_HEIGHT) -> float:
        if self.height is not None and self.height > 0:
            return self.height
        return default

    def evolve(self, **changes) -> "Node":
        if "children" in changes:
            changes["children"] = tuple(changes["children"])
        return replace(self, **changes)
