"""
Configuration for document persistence.
"""

from uiforge.user_config import get_user_config

DEFAULT_AUTOSAVE_INTERVAL = 5.0

# Shortest accepted tick, in seconds
MIN_AUTOSAVE_INTERVAL = 0.01


def get_storage_config(project_root=None):
    """Storage settings merged with user config."""
    user_config = get_user_config(project_root)
    return {
        "autosave_interval": float(user_config.get("storage.autosave_interval", DEFAULT_AUTOSAVE_INTERVAL)),
    }
