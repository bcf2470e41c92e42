"""
uiforge - Visual Tailwind component builder engine

Element tree editing with undo/redo, drag-and-drop placement and
deterministic React/Tailwind code generation.
"""

__version__ = "0.3.0"

# Core exports
from uiforge.schemas import Node, StyleGroups, GeneratedCode, ExportOptions
from uiforge.mutation import MutationFacade, HistoryManager
from uiforge.placement import DragSession, resolve
from uiforge.codegen import generate_code, serialize
from uiforge.catalog import materialize
from uiforge.storage import SnapshotStore, AutoSaver

__all__ = [
    "__version__",
    "Node",
    "StyleGroups",
    "GeneratedCode",
    "ExportOptions",
    "MutationFacade",
    "HistoryManager",
    "DragSession",
    "resolve",
    "generate_code",
    "serialize",
    "materialize",
    "SnapshotStore",
    "AutoSaver",
]
