"""
Read-only queries over a forest.

Every function here walks the nesting (the authoritative structure) and never
consults parent_id.
"""

from typing import Iterator, List, Optional, Set, Tuple

from uiforge.schemas import Forest, Node


def iter_nodes(forest: Forest) -> Iterator[Node]:
    """Traverse the forest depth-first, pre-order."""
    for node in forest:
        yield node
        yield from iter_nodes(node.children)


def iter_with_parent(forest: Forest, parent: Optional[Node] = None) -> Iterator[Tuple[Node, Optional[Node]]]:
    """Depth-first (node, structural parent) pairs."""
    for node in forest:
        yield node, parent
        yield from iter_with_parent(node.children, node)


def find_node(forest: Forest, node_id: str) -> Optional[Node]:
    for node in iter_nodes(forest):
        if node.id == node_id:
            return node
    return None


def find_parent(forest: Forest, node_id: str) -> Optional[Node]:
    """
    Return the structural parent of a node.

    Returns None both for root-level nodes and for absent ids; use locate()
    when the distinction matters.
    """
    for node, parent in iter_with_parent(forest):
        if node.id == node_id:
            return parent
    return None


def locate(forest: Forest, node_id: str) -> Optional[Tuple[Optional[Node], int]]:
    """
    Find where a node sits.

    Returns:
        (parent or None for root level, index among siblings), or None if absent
    """
    for index, node in enumerate(forest):
        if node.id == node_id:
            return None, index
    for node, _ in iter_with_parent(forest):
        for index, child in enumerate(node.children):
            if child.id == node_id:
                return node, index
    return None


def siblings_of(forest: Forest, node_id: str) -> List[Node]:
    """Sibling list containing the node (root list for root-level nodes)."""
    parent = find_parent(forest, node_id)
    return parent.children if parent is not None else forest


def is_descendant(node: Node, target_id: str) -> bool:
    """True if target_id is strictly inside the subtree rooted at node."""
    for child in node.children:
        if child.id == target_id or is_descendant(child, target_id):
            return True
    return False


def collect_ids(forest: Forest) -> Set[str]:
    return {node.id for node in iter_nodes(forest)}


def count_nodes(forest: Forest) -> int:
    return sum(1 for _ in iter_nodes(forest))


def depth_of(forest: Forest, node_id: str) -> Optional[int]:
    """Nesting depth of a node (root level is 0), or None if absent."""
    def _walk(nodes: Forest, depth: int) -> Optional[int]:
        for node in nodes:
            if node.id == node_id:
                return depth
            found = _walk(node.children, depth + 1)
            if found is not None:
                return found
        return None

    return _walk(forest, 0)
