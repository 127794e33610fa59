from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional, Set

from ..errors import InvariantError
from .core import ROOT_ID, ROOT_TEXT
from .node import Node


@dataclass(frozen=True)
class TreeSnapshot:
    """Immutable view of the whole tree plus the selection/edit cursors.

    Mutations never touch a snapshot in place; they build a new node map and
    wrap it in a new snapshot, sharing every ``Node`` they did not change.
    """

    nodes: Mapping[str, Node]
    root_id: str = ROOT_ID
    selected_id: Optional[str] = None
    editing_id: Optional[str] = None

    def __post_init__(self) -> None:
        if not isinstance(self.nodes, MappingProxyType):
            object.__setattr__(self, "nodes", MappingProxyType(dict(self.nodes)))

    @classmethod
    def initial(cls, root_text: str = ROOT_TEXT, root_id: str = ROOT_ID) -> "TreeSnapshot":
        root = Node(id=root_id, parent_id=None, text=root_text)
        return cls(nodes={root_id: root}, root_id=root_id)

    def evolve(self, nodes: Optional[Dict[str, Node]] = None, **changes) -> "TreeSnapshot":
        if nodes is not None:
            changes["nodes"] = nodes
        return replace(self, **changes)

    @property
    def root(self) -> Node:
        return self.nodes[self.root_id]

    def node(self, node_id: Optional[str]) -> Optional[Node]:
        if node_id is None:
            return None
        return self.nodes.get(node_id)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self.nodes

    def __len__(self) -> int:
        return len(self.nodes)

    def parent_of(self, node_id: str) -> Optional[Node]:
        node = self.nodes.get(node_id)
        if node is None or node.parent_id is None:
            return None
        return self.nodes.get(node.parent_id)

    def ancestors(self, node_id: str) -> List[str]:
        chain: List[str] = []
        seen: Set[str] = {node_id}
        node = self.nodes.get(node_id)
        while node is not None and node.parent_id is not None:
            if node.parent_id in seen:
                raise InvariantError(f"Cycle detected above node '{node_id}'.")
            seen.add(node.parent_id)
            chain.append(node.parent_id)
            node = self.nodes.get(node.parent_id)
        return chain

    def is_ancestor(self, ancestor_id: str, node_id: str) -> bool:
        return ancestor_id in self.ancestors(node_id)

    def depth(self, node_id: str) -> int:
        return len(self.ancestors(node_id))

    def descendants(self, node_id: str) -> List[str]:
        collected: List[str] = []
        node = self.nodes.get(node_id)
        if node is None:
            return collected
        stack = list(reversed(node.children))
        while stack:
            current_id = stack.pop()
            collected.append(current_id)
            current = self.nodes.get(current_id)
            if current is not None:
                stack.extend(reversed(current.children))
        return collected

    def iter_preorder(self) -> Iterator[Node]:
        yield self.root
        for node_id in self.descendants(self.root_id):
            node = self.nodes.get(node_id)
            if node is not None:
                yield node

    def validate(self) -> None:
        roots = [node.id for node in self.nodes.values() if node.parent_id is None]
        if roots != [self.root_id]:
            raise InvariantError(f"Expected single root '{self.root_id}', found {roots}.")

        for node in self.nodes.values():
            if len(set(node.children)) != len(node.children):
                raise InvariantError(f"Node '{node.id}' lists a child more than once.")
            for child_id in node.children:
                child = self.nodes.get(child_id)
                if child is None:
                    raise InvariantError(f"Node '{node.id}' references missing child '{child_id}'.")
                if child.parent_id != node.id:
                    raise InvariantError(
                        f"Child '{child_id}' points at parent '{child.parent_id}', expected '{node.id}'."
                    )
            if node.parent_id is not None:
                parent = self.nodes.get(node.parent_id)
                if parent is None or node.id not in parent.children:
                    raise InvariantError(f"Node '{node.id}' is not listed by its parent '{node.parent_id}'.")
                if self.ancestors(node.id)[-1] != self.root_id:
                    raise InvariantError(f"Node '{node.id}' does not reach the root.")

        if self.selected_id is not None and self.selected_id not in self.nodes:
            raise InvariantError(f"Selected node '{self.selected_id}' does not exist.")
        if self.editing_id is not None and self.editing_id != self.selected_id:
            raise InvariantError("Editing node must be the selected node.")
