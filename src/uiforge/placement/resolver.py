"""
Placement resolver: turn a drag signal into one unambiguous tree edit.

Pure functions only. The same inputs always give the same intent, so the
resolver can be consulted on every pointer-over tick and again on release.
"""

from typing import Optional

from uiforge.logging_config import logger
from uiforge.schemas import (
    ActiveDescriptor,
    DropIndicator,
    Forest,
    HoverDescriptor,
    InsertIntent,
    MoveIntent,
    PlacementIntent,
)
from uiforge.tree import find_node, is_descendant, locate

from .config import CONTAINER_VARIANTS, DROP_PREFIX, ROOT_SENTINEL


def is_container_variant(variant: str) -> bool:
    return variant in CONTAINER_VARIANTS


def normalize_target_id(target_id: Optional[str]) -> Optional[str]:
    """Strip the droppable prefix; the root sentinel is returned unchanged."""
    if target_id is None or target_id == ROOT_SENTINEL:
        return target_id
    if target_id.startswith(DROP_PREFIX):
        return target_id[len(DROP_PREFIX):]
    return target_id


def resolve(active: ActiveDescriptor, hover: Optional[HoverDescriptor], forest: Forest) -> Optional[PlacementIntent]:
    """
    Decide the structural edit for a drop.

    Rules, in order:
    1. Root sentinel: append at root end (insert for new items, move for existing).
    2. Existing node hovering itself or one of its descendants: rejected.
    3. Hovered container variant: inside that container.
    4. Anything else: after the hovered node, within its current parent.

    A hover target that is not in the forest sends new items to the root
    and rejects existing ones.

    Args:
        active: Dragged item
        hover: Droppable under the pointer (None when over nothing)
        forest: Current committed forest

    Returns:
        InsertIntent, MoveIntent, or None when the drop is rejected
    """
    if hover is None or hover.target_id is None:
        return None

    target_id = normalize_target_id(hover.target_id)

    if active.is_new:
        if target_id == ROOT_SENTINEL:
            return InsertIntent(parent_id=None, index=None)
        target = find_node(forest, target_id)
        if target is None:
            logger.debug(f"Hover target '{target_id}' not in tree, new item falls back to root")
            return InsertIntent(parent_id=None, index=None)
        if is_container_variant(target.variant):
            return InsertIntent(parent_id=target.id, index=None)
        parent, index = locate(forest, target.id)
        return InsertIntent(parent_id=parent.id if parent else None, index=index + 1)

    moving = find_node(forest, active.id)
    if moving is None:
        logger.debug(f"Dragged node '{active.id}' is no longer in the tree")
        return None

    if target_id == ROOT_SENTINEL:
        return MoveIntent(over_id=None, position="after")
    if target_id == moving.id or is_descendant(moving, target_id):
        return None

    target = find_node(forest, target_id)
    if target is None:
        return None
    if is_container_variant(target.variant):
        return MoveIntent(over_id=target.id, position="inside")
    return MoveIntent(over_id=target.id, position="after")


def drop_indicator(active: ActiveDescriptor, hover: Optional[HoverDescriptor], forest: Forest) -> Optional[DropIndicator]:
    """
    What the canvas should highlight for the current hover.

    Returns:
        DropIndicator, or None when the drop would be rejected
    """
    intent = resolve(active, hover, forest)
    if intent is None:
        return None

    target_id = normalize_target_id(hover.target_id)
    if target_id == ROOT_SENTINEL:
        return DropIndicator(target_id=ROOT_SENTINEL, position="inside")
    if isinstance(intent, MoveIntent):
        return DropIndicator(target_id=intent.over_id, position=intent.position)
    if find_node(forest, target_id) is None:
        return DropIndicator(target_id=ROOT_SENTINEL, position="inside")
    position = "inside" if intent.parent_id == target_id else "after"
    return DropIndicator(target_id=target_id, position=position)
