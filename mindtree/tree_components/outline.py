from io import StringIO
from typing import List, Mapping, Optional, Tuple

from rich.console import Console
from rich.text import Text
from rich.tree import Tree

from .node import Node
from .snapshot import TreeSnapshot


def _format_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.1f}"


def _label(snapshot: TreeSnapshot, node: Node, positioned: Optional[Mapping[str, Node]]) -> Text:
    label = Text(node.text or " ")
    if node.id == snapshot.editing_id:
        label.stylize("bold underline")
        label.append(" [editing]", style="yellow")
    elif node.id == snapshot.selected_id:
        label.stylize("bold")
        label.append(" [selected]", style="cyan")

    if not node.is_expanded and node.children:
        hidden = len(snapshot.descendants(node.id))
        label.append(f" (+{hidden} hidden)", style="dim")

    if positioned is not None and node.id in positioned:
        placed = positioned[node.id]
        label.append(f" @({_format_number(placed.x)}, {_format_number(placed.y)})", style="dim")
    return label


def build_outline(snapshot: TreeSnapshot, nodes: Optional[Mapping[str, Node]] = None) -> Tree:
    """Build a rich tree of the visible outline.

    ``nodes`` may be a laid-out node map; coordinates are then shown next to
    every visible node.
    """
    tree = Tree(_label(snapshot, snapshot.root, nodes), guide_style="dim")
    stack: List[Tuple[Tree, Node]] = [(tree, snapshot.root)]
    while stack:
        branch, node = stack.pop()
        if not node.is_expanded:
            continue
        pending: List[Tuple[Tree, Node]] = []
        for child_id in node.children:
            child = snapshot.node(child_id)
            if child is None:
                continue
            pending.append((branch.add(_label(snapshot, child, nodes)), child))
        stack.extend(reversed(pending))
    return tree


def render_outline(
    snapshot: TreeSnapshot,
    nodes: Optional[Mapping[str, Node]] = None,
    width: int = 80,
) -> str:
    buffer = StringIO()
    console = Console(file=buffer, width=width, color_system=None, force_terminal=False)
    console.print(build_outline(snapshot, nodes))
    return buffer.getvalue()
