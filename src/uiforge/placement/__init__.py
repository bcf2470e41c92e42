"""
Placement package: drag-and-drop resolution.

Translates (active item, hovered target) pairs into insert or move intents
and drives the engine at the end of a gesture.
"""

from .resolver import resolve, drop_indicator, is_container_variant, normalize_target_id
from .session import DragSession, DragState
from .config import CONTAINER_VARIANTS, ROOT_SENTINEL, DROP_PREFIX

__all__ = [
    "resolve",
    "drop_indicator",
    "is_container_variant",
    "normalize_target_id",
    "DragSession",
    "DragState",
    "CONTAINER_VARIANTS",
    "ROOT_SENTINEL",
    "DROP_PREFIX",
]
