"""
Element tree model: traversal, id generation and invariant checks.

The node shape itself lives in uiforge.schemas.
"""

from .ids import generate_id
from .traversal import (
    iter_nodes,
    iter_with_parent,
    find_node,
    find_parent,
    locate,
    siblings_of,
    is_descendant,
    collect_ids,
    count_nodes,
    depth_of,
)
from .invariants import (
    check_invariants,
    is_well_formed,
    with_parent,
    reassign_ids,
    normalize_forest,
)

__all__ = [
    "generate_id",
    "iter_nodes",
    "iter_with_parent",
    "find_node",
    "find_parent",
    "locate",
    "siblings_of",
    "is_descendant",
    "collect_ids",
    "count_nodes",
    "depth_of",
    "check_invariants",
    "is_well_formed",
    "with_parent",
    "reassign_ids",
    "normalize_forest",
]
