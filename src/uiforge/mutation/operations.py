"""
Pure tree-rewrite operations.

Every operation takes a forest and returns a forest; the input is never
modified. Only the path from the changed node to the root is rebuilt, every
other subtree is reused by reference. An operation that has no effect returns
the very same list object it was given, so callers can detect non-effect with
an identity check.
"""

from typing import Any, Callable, Dict, List, Optional, Tuple

from uiforge.exceptions import InvalidRelocation, InvalidStyleGroup, TargetNotFound
from uiforge.logging_config import logger
from uiforge.schemas import BREAKPOINTS, STYLE_BUCKETS, Forest, Node, Position
from uiforge.tree import (
    collect_ids,
    find_node,
    generate_id,
    is_descendant,
    iter_nodes,
    locate,
    reassign_ids,
    with_parent,
)

POSITIONS = ("before", "after", "inside")

IdFactory = Callable[[], str]


# ============================================================================
# PATH REBUILDING HELPERS
# ============================================================================

def _map_node(nodes: Forest, node_id: str, fn: Callable[[Node], Node]) -> Tuple[Forest, bool]:
    """
    Replace the node with node_id by fn(node), rebuilding its ancestors.

    Returns:
        (new sibling list, found). The original list is returned when not found
        or when fn leaves the node equal to what it was.
    """
    for index, node in enumerate(nodes):
        if node.id == node_id:
            replaced = fn(node)
            if replaced == node:
                return nodes, True
            rebuilt = list(nodes)
            rebuilt[index] = replaced
            return rebuilt, True
        children, found = _map_node(node.children, node_id, fn)
        if found:
            if children is node.children:
                return nodes, True
            rebuilt = list(nodes)
            rebuilt[index] = node.model_copy(update={"children": children})
            return rebuilt, True
    return nodes, False


def _detach(nodes: Forest, node_id: str) -> Tuple[Forest, Optional[Node]]:
    """
    Remove the node with node_id (and its subtree).

    Returns:
        (new sibling list, removed node or None)
    """
    for index, node in enumerate(nodes):
        if node.id == node_id:
            return nodes[:index] + nodes[index + 1:], node
        children, removed = _detach(node.children, node_id)
        if removed is not None:
            rebuilt = list(nodes)
            rebuilt[index] = node.model_copy(update={"children": children})
            return rebuilt, removed
    return nodes, None


def _splice(siblings: List[Node], node: Node, index: Optional[int]) -> List[Node]:
    """Insert node into a copy of siblings; None appends, out-of-range clamps."""
    if index is None:
        return list(siblings) + [node]
    index = max(0, min(index, len(siblings)))
    return list(siblings[:index]) + [node] + list(siblings[index:])


def _attach(forest: Forest, node: Node, parent_id: Optional[str], index: Optional[int]) -> Forest:
    """Place an already-prepared node under parent_id (root when None)."""
    if parent_id is None:
        return _splice(forest, with_parent(node, None), index)

    def _add_child(parent: Node) -> Node:
        return parent.model_copy(
            update={"children": _splice(parent.children, with_parent(node, parent.id), index)}
        )

    rebuilt, found = _map_node(forest, parent_id, _add_child)
    if not found:
        raise TargetNotFound(parent_id, "insert")
    return rebuilt


def _prepare_incoming(forest: Forest, node: Node, parent_id: Optional[str], id_factory: IdFactory) -> Node:
    """
    Give an incoming subtree ids that cannot collide with the forest.

    A missing root id is filled in. If any id in the subtree is empty,
    repeated, or already used in the forest, the whole subtree is re-identified.
    """
    if not node.id:
        node = node.model_copy(update={"id": id_factory()})

    incoming = [n.id for n in iter_nodes([node])]
    clashes = (
        any(not node_id for node_id in incoming)
        or len(set(incoming)) != len(incoming)
        or bool(set(incoming) & collect_ids(forest))
    )
    if clashes:
        logger.debug(f"Incoming subtree '{node.id}' clashes with existing ids, assigning fresh ids")
        return reassign_ids(node, parent_id, id_factory)
    return node


# ============================================================================
# OPERATIONS
# ============================================================================

def insert_node(
    forest: Forest,
    node: Node,
    parent_id: Optional[str] = None,
    index: Optional[int] = None,
    id_factory: IdFactory = generate_id,
) -> Forest:
    """
    Insert a node (and its subtree) under parent_id, or at root level.

    Container capability is not checked here; the placement resolver owns
    that decision.

    Args:
        forest: Current forest
        node: Node to insert; an empty id is replaced with a fresh one
        parent_id: Parent node id, None for root level
        index: Position among the new siblings, None appends

    Returns:
        New forest

    Raises:
        TargetNotFound: parent_id is given but not present
    """
    if parent_id is not None and find_node(forest, parent_id) is None:
        raise TargetNotFound(parent_id, "insert")

    prepared = _prepare_incoming(forest, node, parent_id, id_factory)
    return _attach(forest, prepared, parent_id, index)


def remove_node(forest: Forest, node_id: str) -> Forest:
    """
    Delete a node and its entire subtree.

    Removing an absent id is a no-op (the same forest is returned).
    """
    rebuilt, removed = _detach(forest, node_id)
    if removed is None:
        return forest
    return rebuilt


def validate_style_groups(styles: Dict[str, List[str]]) -> None:
    for group in styles:
        if group not in STYLE_BUCKETS and group not in BREAKPOINTS:
            raise InvalidStyleGroup(group)


def update_node(
    forest: Forest,
    node_id: str,
    attributes: Optional[Dict[str, Any]] = None,
    styles: Optional[Dict[str, List[str]]] = None,
    display_name: Optional[str] = None,
) -> Forest:
    """
    Shallow-merge attributes and replace style buckets of one node.

    Args:
        forest: Current forest
        node_id: Node to update
        attributes: Keys merged into the node's attributes
        styles: Bucket or breakpoint name -> token list; each named group is
            replaced wholesale, unnamed groups are kept
        display_name: New human label

    Returns:
        New forest

    Raises:
        TargetNotFound: node_id is not present
        InvalidStyleGroup: a style key is neither a bucket nor a breakpoint
    """
    if styles:
        validate_style_groups(styles)

    def _apply(node: Node) -> Node:
        update: Dict[str, Any] = {}
        if attributes:
            update["attributes"] = {**node.attributes, **attributes}
        if styles:
            merged = node.styles
            for group, tokens in styles.items():
                merged = merged.with_tokens(group, tokens)
            update["styles"] = merged
        if display_name is not None:
            update["display_name"] = display_name
        return node.model_copy(update=update)

    rebuilt, found = _map_node(forest, node_id, _apply)
    if not found:
        raise TargetNotFound(node_id, "update")
    return rebuilt


def validate_move(forest: Forest, active_id: str, over_id: str, position: str) -> Node:
    """
    Check move preconditions before anything is touched.

    Returns:
        The node that would be moved

    Raises:
        InvalidRelocation: self-move, cycle, unknown position or absent ids
    """
    if position not in POSITIONS:
        raise InvalidRelocation(active_id, over_id, f"unknown position '{position}'")
    if active_id == over_id:
        raise InvalidRelocation(active_id, over_id, "a node cannot be moved relative to itself")

    active = find_node(forest, active_id)
    if active is None:
        raise InvalidRelocation(active_id, over_id, "active node does not exist")
    if find_node(forest, over_id) is None:
        raise InvalidRelocation(active_id, over_id, "target node does not exist")
    if is_descendant(active, over_id):
        raise InvalidRelocation(active_id, over_id, "target is inside the moved subtree")
    return active


def move_node(forest: Forest, active_id: str, over_id: str, position: Position) -> Forest:
    """
    Relocate a subtree before/after a sibling target, or as its last child.

    Preconditions are validated first; any violation makes the call a no-op.
    A move that lands the node exactly where it already was is also a no-op.
    """
    try:
        validate_move(forest, active_id, over_id, position)
    except InvalidRelocation as e:
        logger.debug(f"Move ignored: {e}")
        return forest

    detached, active = _detach(forest, active_id)

    if position == "inside":
        relocated = _attach(detached, active, over_id, None)
    else:
        parent, target_index = locate(detached, over_id)
        insert_at = target_index + 1 if position == "after" else target_index
        relocated = _attach(detached, active, parent.id if parent else None, insert_at)

    if relocated == forest:
        return forest
    return relocated


def duplicate_node(forest: Forest, node_id: str, id_factory: IdFactory = generate_id) -> Forest:
    """
    Deep-clone a subtree with fresh ids and insert it as the next sibling.

    Duplicating an absent id is a no-op.
    """
    location = locate(forest, node_id)
    if location is None:
        return forest

    parent, index = location
    parent_id = parent.id if parent else None
    original = parent.children[index] if parent else forest[index]
    clone = reassign_ids(original.model_copy(deep=True), parent_id, id_factory)
    return _attach(forest, clone, parent_id, index + 1)
