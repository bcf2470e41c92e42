"""
Tree-wide invariant checks and repair.

Invariants that must hold after every completed mutation:
1. node ids are unique across the forest
2. no node is its own descendant
3. every child's parent_id equals its structural parent's id; roots have None
4. child order is a plain sequence (guaranteed by the List type)
"""

import copy
from typing import Callable, List, Optional, Set

from uiforge.logging_config import logger
from uiforge.schemas import Forest, Node
from .ids import generate_id


def check_invariants(forest: Forest) -> List[str]:
    """
    Validate a forest.

    Returns:
        Human-readable violations (empty list when the forest is well-formed)
    """
    violations: List[str] = []
    seen: Set[str] = set()

    def _walk(nodes: Forest, parent_id: Optional[str], path: List[str]) -> None:
        for node in nodes:
            if not node.id:
                violations.append(f"node of variant '{node.variant}' has an empty id")
            if node.id in path:
                violations.append(f"cycle: '{node.id}' appears inside itself")
                continue
            if node.id in seen:
                violations.append(f"duplicate id '{node.id}'")
            seen.add(node.id)
            if node.parent_id != parent_id:
                violations.append(
                    f"'{node.id}' has parent_id={node.parent_id!r}, expected {parent_id!r}"
                )
            _walk(node.children, node.id, path + [node.id])

    _walk(forest, None, [])
    return violations


def is_well_formed(forest: Forest) -> bool:
    return not check_invariants(forest)


def with_parent(node: Node, parent_id: Optional[str]) -> Node:
    """
    Return the node with parent_id set and every descendant's parent_id fixed.

    Subtrees that are already consistent are reused by reference.
    """
    children = [with_parent(child, node.id) for child in node.children]
    unchanged = node.parent_id == parent_id and all(
        new is old for new, old in zip(children, node.children)
    )
    if unchanged:
        return node
    return node.model_copy(update={"parent_id": parent_id, "children": children})


def reassign_ids(node: Node, parent_id: Optional[str] = None,
                 id_factory: Callable[[], str] = generate_id) -> Node:
    """
    Deep clone of a subtree where every node receives a fresh id.

    Attributes and styles are deep-copied so the clone shares no mutable state
    with the original.
    """
    new_id = id_factory()
    return node.model_copy(
        update={
            "id": new_id,
            "parent_id": parent_id,
            "attributes": copy.deepcopy(node.attributes),
            "styles": node.styles.model_copy(deep=True),
            "children": [reassign_ids(child, new_id, id_factory) for child in node.children],
        }
    )


def normalize_forest(forest: Forest, id_factory: Callable[[], str] = generate_id) -> Forest:
    """
    Repair a forest loaded from outside the engine.

    parent_id is recomputed from the nesting, empty or duplicate ids are
    replaced with fresh ones.
    """
    seen: Set[str] = set()
    repaired = 0

    def _fix(node: Node, parent_id: Optional[str]) -> Node:
        nonlocal repaired
        node_id = node.id
        if not node_id or node_id in seen:
            node_id = id_factory()
            repaired += 1
        seen.add(node_id)
        children = [_fix(child, node_id) for child in node.children]
        return node.model_copy(update={"id": node_id, "parent_id": parent_id, "children": children})

    result = [_fix(node, None) for node in forest]
    if repaired:
        logger.warning(f"Repaired {repaired} missing or duplicate node id(s) while normalising forest")
    return result

