"""
HistoryManager: bounded linear undo/redo log.

Snapshots the whole forest after every accepted mutation. Recording after an
undo truncates the redoable branch; exceeding capacity evicts the oldest entry.
"""

import time
from typing import List, Optional

from uiforge.logging_config import logger
from uiforge.schemas import Forest, HistoryLog, Snapshot
from .config import MUTATION_CONFIG


def _deep_copy_forest(forest: Forest) -> Forest:
    return [node.model_copy(deep=True) for node in forest]


class HistoryManager:
    """
    Linear undo/redo over forest snapshots.

    State is one cursor into a bounded list of snapshots. Undo and redo at
    the log's boundary are no-ops and return None.
    """

    def __init__(self, capacity: Optional[int] = None):
        """
        Initialize history.

        Args:
            capacity: Maximum number of snapshots kept (default from config)
        """
        self.capacity = max(1, capacity or MUTATION_CONFIG["history_capacity"])
        self._entries: List[Snapshot] = []
        self._index = -1
        logger.debug(f"HistoryManager initialized (capacity={self.capacity})")

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def index(self) -> int:
        return self._index

    @property
    def entries(self) -> List[Snapshot]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def can_undo(self) -> bool:
        return self._index > 0

    @property
    def can_redo(self) -> bool:
        return self._index < len(self._entries) - 1

    @property
    def position(self) -> int:
        """Current position, 1-indexed for display (0 when empty)."""
        return self._index + 1

    def current(self) -> Optional[Forest]:
        """Forest at the cursor, or None for an empty log."""
        if self._index < 0:
            return None
        return _deep_copy_forest(self._entries[self._index].elements)

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def record(self, forest: Forest) -> Snapshot:
        """
        Append a snapshot of forest after the cursor.

        Entries beyond the cursor are discarded first; when the log is over
        capacity the oldest entry is evicted and the cursor shifts with it.

        Returns:
            The recorded snapshot
        """
        snapshot = Snapshot(elements=_deep_copy_forest(forest), timestamp=time.time())

        dropped = len(self._entries) - (self._index + 1)
        self._entries = self._entries[: self._index + 1]
        self._entries.append(snapshot)
        self._index = len(self._entries) - 1

        if len(self._entries) > self.capacity:
            evicted = len(self._entries) - self.capacity
            self._entries = self._entries[evicted:]
            self._index -= evicted

        if dropped:
            logger.debug(f"History branch truncated ({dropped} redo entr{'y' if dropped == 1 else 'ies'} dropped)")
        return snapshot

    def undo(self) -> Optional[Forest]:
        """
        Step back one entry.

        Returns:
            Restored forest (deep copy), or None when there is nothing to undo
        """
        if not self.can_undo:
            return None
        self._index -= 1
        logger.debug(f"Undo -> history position {self.position}/{len(self._entries)}")
        return self.current()

    def redo(self) -> Optional[Forest]:
        """
        Step forward one entry.

        Returns:
            Restored forest (deep copy), or None when there is nothing to redo
        """
        if not self.can_redo:
            return None
        self._index += 1
        logger.debug(f"Redo -> history position {self.position}/{len(self._entries)}")
        return self.current()

    def reset(self, forest: Optional[Forest] = None) -> None:
        """Drop every entry; optionally seed the log with one snapshot."""
        self._entries = []
        self._index = -1
        if forest is not None:
            self.record(forest)

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def to_log(self) -> HistoryLog:
        return HistoryLog(entries=list(self._entries), index=self._index, capacity=self.capacity)

    @classmethod
    def from_log(cls, log: HistoryLog, capacity: Optional[int] = None) -> "HistoryManager":
        """
        Rebuild a manager from a persisted log.

        A log longer than the capacity keeps its newest entries; an
        out-of-range cursor is clamped.
        """
        manager = cls(capacity or log.capacity)
        entries = list(log.entries)
        index = log.index
        if len(entries) > manager.capacity:
            evicted = len(entries) - manager.capacity
            entries = entries[evicted:]
            index -= evicted
        manager._entries = entries
        manager._index = max(-1, min(index, len(entries) - 1)) if entries else -1
        if entries and manager._index < 0:
            manager._index = 0
        return manager
