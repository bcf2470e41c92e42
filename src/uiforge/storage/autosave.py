"""
AutoSaver: periodic background persistence of the committed forest.
"""

import threading
from pathlib import Path
from typing import Optional

from uiforge.exceptions import StorageError
from uiforge.logging_config import logger
from uiforge.schemas import Forest

from .config import MIN_AUTOSAVE_INTERVAL, get_storage_config
from .snapshot_store import SnapshotStore


class AutoSaver:
    """
    Saves the engine's committed forest on a fixed interval.

    Each tick reads engine.committed_state(), which takes the forest and the
    history log under the engine lock in one step. Unchanged forests are not
    rewritten.
    """

    def __init__(self, engine, store: SnapshotStore, interval: Optional[float] = None,
                 save_history: bool = False):
        """
        Initialize autosaver (not started).

        Args:
            engine: MutationFacade to read from
            store: Destination store
            interval: Seconds between ticks (default from config)
            save_history: Also persist the history log on each save
        """
        if interval is None:
            interval = get_storage_config()["autosave_interval"]
        self.engine = engine
        self.store = store
        self.interval = max(MIN_AUTOSAVE_INTERVAL, float(interval))
        self.save_history = save_history
        self.saves = 0

        self._last_saved: Optional[Forest] = None
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @classmethod
    def for_project(cls, engine, project_root: Optional[Path] = None, save_history: bool = True) -> "AutoSaver":
        """Autosaver writing to the project's .uiforge/ files at the configured interval."""
        interval = get_storage_config(project_root)["autosave_interval"]
        return cls(engine, SnapshotStore.for_project(project_root), interval, save_history)

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self.running:
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self._loop, name="uiforge-autosave", daemon=True)
        self._thread.start()
        logger.info(f"Autosave started (interval={self.interval}s)")

    def stop(self, flush: bool = True) -> None:
        """Stop the loop; by default perform one last save."""
        self._stop.set()
        if self._thread is not None and self._thread.is_alive():
            self._thread.join(timeout=max(2.0, self.interval * 2))
        self._thread = None
        if flush:
            self.save_now()
        logger.info("Autosave stopped")

    def save_now(self) -> bool:
        """
        Save if the committed forest changed since the last save.

        Returns:
            True when a file was written
        """
        forest, log = self.engine.committed_state()
        if self._last_saved is not None and forest == self._last_saved:
            return False

        self.store.save_snapshot(forest)
        if self.save_history:
            self.store.save_history(log)
        self._last_saved = forest
        self.saves += 1
        return True

    def _loop(self) -> None:
        while not self._stop.wait(self.interval):
            try:
                self.save_now()
            except StorageError as e:
                logger.error(f"Autosave failed: {e}")
