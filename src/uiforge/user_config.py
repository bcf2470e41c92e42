"""
uiforge User Configuration

Hierarchical config system with global defaults + local overrides:
- Global: ~/.uiforge/config.json (cross-project settings)
- Local: .uiforge/config.json (project-specific overrides)

Config structure:
{
  "history": {
    "capacity": 50              // Max undo/redo snapshots kept
  },
  "codegen": {
    "component_name": "GeneratedComponent",
    "flavor": "loose"           // loose (JSX) or typed (TSX)
  },
  "storage": {
    "autosave_interval": 5.0    // Seconds between autosave ticks
  }
}
"""

import copy
import json
from pathlib import Path
from typing import Any, Dict, Optional

from uiforge.logging_config import logger
from uiforge.paths import UIForgePaths


# Default configuration
DEFAULT_CONFIG = {
    "history": {
        "capacity": 50,
    },
    "codegen": {
        "component_name": "GeneratedComponent",
        "flavor": "loose",
    },
    "storage": {
        "autosave_interval": 5.0,
    },
}


class UserConfig:
    """
    Manages hierarchical user configuration.

    Load order (with override):
    1. Default config (hardcoded)
    2. Global config (~/.uiforge/config.json)
    3. Local config (.uiforge/config.json)
    """

    def __init__(self, project_root: Optional[Path] = None, global_config_path: Optional[Path] = None):
        """
        Initialize config manager.

        Args:
            project_root: Project root directory (defaults to CWD)
            global_config_path: Override for the global config file (tests)
        """
        paths = UIForgePaths(project_root or Path.cwd())
        self.project_root = paths.project_root
        self.global_config_path = global_config_path or paths.global_config_file
        self.local_config_path = paths.config_file

        self._config = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """
        Load configuration with hierarchical override.

        Returns:
            Merged configuration dictionary
        """
        config = copy.deepcopy(DEFAULT_CONFIG)

        for label, path in (("global", self.global_config_path), ("local", self.local_config_path)):
            if not path.exists():
                continue
            try:
                with open(path, 'r', encoding='utf-8') as f:
                    config = self._deep_merge(config, json.load(f))
                logger.debug(f"Loaded {label} config from {path}")
            except Exception as e:
                logger.warning(f"Failed to load {label} config: {e}")

        return config

    def _deep_merge(self, base: Dict, override: Dict) -> Dict:
        """
        Deep merge two dictionaries, with override taking precedence.

        Args:
            base: Base dictionary
            override: Override dictionary

        Returns:
            Merged dictionary
        """
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a config value by dot-separated key.

        Args:
            key: Dot-separated key (e.g., "history.capacity")
            default: Default value if key not found

        Returns:
            Config value

        Examples:
            config.get("history.capacity")  # 50
            config.get("codegen.flavor")  # "loose"
        """
        value = self._config

        for k in key.split("."):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value


def get_user_config(project_root: Optional[Path] = None) -> UserConfig:
    """
    Get the configuration for a project.

    Args:
        project_root: Optional project root override

    Returns:
        UserConfig instance
    """
    return UserConfig(project_root)
