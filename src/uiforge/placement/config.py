"""
Configuration for drag-and-drop placement resolution.
"""

# Droppable id of the canvas itself
ROOT_SENTINEL = "canvas-root"

# Prefix the input layer puts in front of node ids on droppables
DROP_PREFIX = "drop-"

# Closed list of variants that accept children when hovered
CONTAINER_VARIANTS = frozenset({
    "container",
    "grid-2-col",
    "grid-3-col",
    "grid-4-col",
    "flex-row",
    "flex-column",
    "button-group",
})
