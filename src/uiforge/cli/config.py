"""
CLI Configuration

Centralized configuration for the uiforge CLI subsystem.
"""

import os
from typing import Optional


class CLIConfig:
    """Configuration for CLI commands"""

    # Tree depth shown by `show` in human mode before collapsing
    DEFAULT_SHOW_DEPTH = 12

    # Machine mode (plain/JSON output)
    _machine_mode: Optional[bool] = None

    @classmethod
    def set_machine_mode(cls, enabled: bool) -> None:
        """Set machine mode (pure data output, no presentation)"""
        cls._machine_mode = enabled

    @classmethod
    def is_machine_mode(cls) -> bool:
        """
        Check if machine mode is active.

        Machine mode is the default; it is off only when human mode is
        requested via --human or UIFORGE_HUMAN_MODE.
        """
        if cls._machine_mode is not None:
            return cls._machine_mode
        if os.getenv("UIFORGE_HUMAN_MODE", "").lower() in ("1", "true", "yes"):
            return False
        return True

    @classmethod
    def reset(cls) -> None:
        """Forget any explicit mode (tests)."""
        cls._machine_mode = None
