"""
Mutation package: the document engine.

Pure tree-rewrite operations, the bounded undo/redo log, and the facade
that owns the forest and is its single writer.
"""

from .facade import MutationFacade
from .history import HistoryManager
from .operations import (
    POSITIONS,
    insert_node,
    remove_node,
    update_node,
    move_node,
    validate_move,
    duplicate_node,
    validate_style_groups,
)
from .config import MUTATION_CONFIG, get_mutation_config

__all__ = [
    # Main facade
    "MutationFacade",

    # Components
    "HistoryManager",

    # Operations
    "POSITIONS",
    "insert_node",
    "remove_node",
    "update_node",
    "move_node",
    "validate_move",
    "duplicate_node",
    "validate_style_groups",

    # Configuration
    "MUTATION_CONFIG",
    "get_mutation_config",
]
