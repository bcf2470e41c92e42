"""
Configuration for the document engine (mutation + history).
"""

from uiforge.user_config import get_user_config


def get_mutation_config(project_root=None):
    """
    Get mutation configuration merged with user config.

    Args:
        project_root: Project whose `.uiforge/config.json` applies (CWD when None)
    """
    user_config = get_user_config(project_root)
    return {
        "history_capacity": int(user_config.get("history.capacity", 50)),
        "select_on_insert": True,
        "clear_selection_on_undo": True,
    }


MUTATION_CONFIG = get_mutation_config()
