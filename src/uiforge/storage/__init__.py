"""
Storage package: snapshot persistence and background autosave.
"""

from .snapshot_store import SnapshotStore, DOCUMENT_FORMAT_VERSION
from .autosave import AutoSaver
from .config import get_storage_config

__all__ = [
    "SnapshotStore",
    "AutoSaver",
    "DOCUMENT_FORMAT_VERSION",
    "get_storage_config",
]
