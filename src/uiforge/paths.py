"""
uiforge Path Configuration

Centralized path management for all uiforge data files.
All paths are relative to the project root (current working directory).

Directory Structure:
.uiforge/
├── document.json        # Last committed forest (storage snapshot)
├── history.json         # Undo/redo log
├── config.json          # Local config overrides
├── exports/             # Default export destination
└── logs/                # Log files
"""

from pathlib import Path
from typing import Optional


class UIForgePaths:
    """
    Centralized path configuration for uiforge.

    All paths are lazily resolved relative to project_root.
    Default project_root is current working directory.
    """

    # Directory name for all uiforge data
    UIFORGE_DIR = ".uiforge"
    GLOBAL_DIR = Path.home() / ".uiforge"

    # File names (without paths)
    DOCUMENT_NAME = "document.json"
    HISTORY_NAME = "history.json"
    CONFIG_NAME = "config.json"

    # Subdirectory names
    EXPORTS_DIR = "exports"
    LOGS_DIR = "logs"

    def __init__(self, project_root: Optional[Path] = None):
        """
        Initialize paths configuration.

        Args:
            project_root: Root directory for the project. Defaults to CWD.
        """
        self._project_root = project_root

    @property
    def project_root(self) -> Path:
        """Get the project root directory."""
        if self._project_root is None:
            return Path.cwd()
        return self._project_root

    @property
    def uiforge_dir(self) -> Path:
        """Get the .uiforge directory path."""
        return self.project_root / self.UIFORGE_DIR

    @property
    def document_file(self) -> Path:
        """Get the persisted document (forest snapshot) path."""
        return self.uiforge_dir / self.DOCUMENT_NAME

    @property
    def history_file(self) -> Path:
        """Get the persisted history log path."""
        return self.uiforge_dir / self.HISTORY_NAME

    @property
    def config_file(self) -> Path:
        """Get the local config path."""
        return self.uiforge_dir / self.CONFIG_NAME

    @property
    def global_config_file(self) -> Path:
        """Get the global config path."""
        return self.GLOBAL_DIR / self.CONFIG_NAME

    @property
    def exports_dir(self) -> Path:
        """Get the exports directory path."""
        return self.uiforge_dir / self.EXPORTS_DIR

    @property
    def logs_dir(self) -> Path:
        """Get the logs directory path."""
        return self.uiforge_dir / self.LOGS_DIR

    def ensure_dirs(self) -> None:
        """Create all necessary directories if they don't exist."""
        self.uiforge_dir.mkdir(parents=True, exist_ok=True)
        self.exports_dir.mkdir(exist_ok=True)
        self.logs_dir.mkdir(exist_ok=True)

    def has_document(self) -> bool:
        """Check whether a document has been saved for this project."""
        return self.document_file.exists()


# Global instance for convenience
_default_paths: Optional[UIForgePaths] = None


def get_paths(project_root: Optional[Path] = None) -> UIForgePaths:
    """
    Get the paths configuration.

    Args:
        project_root: Optional project root override

    Returns:
        UIForgePaths instance
    """
    global _default_paths
    if project_root is not None:
        return UIForgePaths(project_root)
    if _default_paths is None:
        _default_paths = UIForgePaths()
    return _default_paths


def reset_paths() -> None:
    """Reset the global paths instance (useful for testing)."""
    global _default_paths
    _default_paths = None
