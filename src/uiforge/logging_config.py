"""
Logging setup for uiforge.

One loguru logger, two sinks:
- stderr for humans (dropped in machine mode so stdout/stderr stay parseable)
- .uiforge/logs/uiforge.log, only when UIFORGE_FILE_LOGGING is set
"""

import os
import sys

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
)

LOG_FILE_NAME = "uiforge.log"

_configured = False


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").lower() in ("1", "true", "yes")


def setup_logging(level="INFO", suppress_console=None, enable_file_logging=None, force=False):
    """
    Configure the shared logger. Later calls are ignored unless force is set.

    Args:
        level: Console level
        suppress_console: Drop the stderr sink; None reads UIFORGE_MACHINE_MODE
        enable_file_logging: Add the rotating file sink; None reads UIFORGE_FILE_LOGGING
        force: Replace an existing configuration (CLI flags, tests)
    """
    global _configured

    if _configured and not force:
        return
    _configured = True

    logger.remove()

    if suppress_console is None:
        suppress_console = _env_flag("UIFORGE_MACHINE_MODE")
    if enable_file_logging is None:
        enable_file_logging = _env_flag("UIFORGE_FILE_LOGGING")

    if not suppress_console:
        logger.add(sys.stderr, level=level, format=CONSOLE_FORMAT, colorize=True)

    if enable_file_logging:
        from uiforge.paths import get_paths
        paths = get_paths()
        paths.ensure_dirs()
        logger.add(
            paths.logs_dir / LOG_FILE_NAME,
            level="INFO",
            rotation="5 MB",
            retention=3,
            compression="gz",
            catch=True,
        )


setup_logging()
