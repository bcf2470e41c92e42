"""
SnapshotStore: JSON persistence for the forest and its history.

Writes are atomic (temp file in the target directory, then rename), so a
reader never observes a half-written document.
"""

import json
import os
import shutil
import tempfile
import time
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError

from uiforge.exceptions import StorageError
from uiforge.logging_config import logger
from uiforge.paths import UIForgePaths
from uiforge.schemas import Forest, HistoryLog, Node

DOCUMENT_FORMAT_VERSION = 1


class SnapshotStore:
    """
    Loads and saves the committed forest (and optionally the undo log).

    A missing file loads as an empty forest. A corrupt file is logged and
    also loads as an empty forest, so a damaged document never blocks startup.
    """

    def __init__(self, document_path: Path, history_path: Optional[Path] = None):
        """
        Initialize store.

        Args:
            document_path: JSON file holding the forest
            history_path: JSON file holding the history log (optional)
        """
        self.document_path = Path(document_path)
        self.history_path = Path(history_path) if history_path else None

    @classmethod
    def for_project(cls, project_root: Optional[Path] = None) -> "SnapshotStore":
        paths = UIForgePaths(project_root)
        return cls(paths.document_file, paths.history_file)

    # ------------------------------------------------------------------
    # Forest
    # ------------------------------------------------------------------

    def load_snapshot(self) -> Forest:
        """Read the saved forest; empty when missing or unreadable."""
        data = self._read_json(self.document_path)
        if data is None:
            return []

        elements = data.get("elements", []) if isinstance(data, dict) else data
        if not isinstance(elements, list):
            logger.error(f"Document {self.document_path} has no element list, starting empty")
            return []

        try:
            forest = [Node.model_validate(item) for item in elements]
        except ValidationError as e:
            logger.error(f"Invalid document {self.document_path}: {e.error_count()} validation error(s)")
            return []

        logger.debug(f"Loaded {len(forest)} root node(s) from {self.document_path}")
        return forest

    def save_snapshot(self, forest: Forest) -> None:
        """
        Write the forest.

        Raises:
            StorageError: the file could not be written
        """
        payload = {
            "version": DOCUMENT_FORMAT_VERSION,
            "saved_at": time.time(),
            "elements": [node.model_dump(mode="json") for node in forest],
        }
        self._write_json(self.document_path, payload)
        logger.debug(f"Saved {len(forest)} root node(s) to {self.document_path}")

    # ------------------------------------------------------------------
    # History
    # ------------------------------------------------------------------

    def load_history(self) -> Optional[HistoryLog]:
        """Read the saved history log; None when absent or unreadable."""
        if self.history_path is None:
            return None
        data = self._read_json(self.history_path)
        if data is None:
            return None
        try:
            return HistoryLog.model_validate(data)
        except ValidationError as e:
            logger.error(f"Invalid history {self.history_path}: {e.error_count()} validation error(s)")
            return None

    def save_history(self, log: HistoryLog) -> None:
        """
        Write the history log.

        Raises:
            StorageError: the file could not be written
        """
        if self.history_path is None:
            return
        self._write_json(self.history_path, log.model_dump(mode="json"))

    def clear(self) -> None:
        """Delete the saved document and history."""
        for path in (self.document_path, self.history_path):
            if path is not None and path.exists():
                path.unlink()

    # ------------------------------------------------------------------
    # File helpers
    # ------------------------------------------------------------------

    def _read_json(self, path: Path) -> Optional[Any]:
        if not path.exists():
            return None
        try:
            with open(path, 'r', encoding='utf-8') as f:
                return json.load(f)
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON in {path}: {e}")
            return None
        except OSError as e:
            logger.error(f"Error reading {path}: {e}")
            return None

    def _write_json(self, path: Path, data: Any) -> None:
        """Write JSON atomically (temp file, then rename)."""
        try:
            json_str = json.dumps(data, indent=2, ensure_ascii=False)
            path.parent.mkdir(parents=True, exist_ok=True)

            fd, temp_path = tempfile.mkstemp(dir=path.parent, prefix='.tmp_', suffix='.json')
            try:
                with os.fdopen(fd, 'w', encoding='utf-8') as f:
                    f.write(json_str)
                shutil.move(temp_path, path)
            except Exception:
                if os.path.exists(temp_path):
                    os.unlink(temp_path)
                raise
        except (OSError, TypeError, ValueError) as e:
            raise StorageError(str(path), str(e)) from e
