"""
Common CLI helpers shared by the command modules.

Every command works on the document persisted under <project>/.uiforge/:
load it into an engine, run one operation, save it back.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import typer

from uiforge.exceptions import ConfigError, InvalidStyleGroup, StorageError, TargetNotFound, UIForgeError
from uiforge.logging_config import logger
from uiforge.mutation import HistoryManager, MutationFacade, get_mutation_config
from uiforge.schemas import BREAKPOINTS, STYLE_BUCKETS, MutationResult
from uiforge.storage import SnapshotStore
from .config import CLIConfig
from .output import get_console, print_error, print_json

console = get_console()

PROJECT_OPTION = typer.Option(
    None,
    "--project",
    help="Project root holding the .uiforge/ document. Defaults to CWD.",
    file_okay=False,
)
JSON_OPTION = typer.Option(False, "--json", help="Output as JSON")


# ============================================================================
# DOCUMENT LIFECYCLE
# ============================================================================

def load_engine(project: Optional[Path] = None) -> Tuple[MutationFacade, SnapshotStore]:
    """
    Build an engine from the persisted document and history.

    The history log is reused only when its current entry matches the saved
    document; otherwise the document wins and history starts fresh. History
    capacity comes from the project config.

    Returns:
        (engine, store)
    """
    store = SnapshotStore.for_project(project)
    capacity = get_mutation_config(project)["history_capacity"]
    forest = store.load_snapshot()
    log = store.load_history()

    if log is not None and log.entries:
        history = HistoryManager.from_log(log, capacity)
        if history.current() == forest:
            return MutationFacade(history=history), store
        logger.warning("Saved history does not match the document, starting a new history")

    return MutationFacade(forest=forest, capacity=capacity), store


def save_engine(engine: MutationFacade, store: SnapshotStore) -> None:
    """
    Persist document and history.

    Raises:
        StorageError: a file could not be written
    """
    forest, log = engine.committed_state()
    store.save_snapshot(forest)
    store.save_history(log)


# ============================================================================
# ERRORS
# ============================================================================

ERROR_CODES = (
    (TargetNotFound, "NODE_NOT_FOUND"),
    (InvalidStyleGroup, "INVALID_STYLE_GROUP"),
    (StorageError, "STORAGE_ERROR"),
    (ConfigError, "CONFIG_ERROR"),
)


def error_code(exc: UIForgeError) -> str:
    for exc_type, code in ERROR_CODES:
        if isinstance(exc, exc_type):
            return code
    return "UIFORGE_ERROR"


def fail(exc: UIForgeError, json_output: bool = False, input_value: Optional[str] = None) -> None:
    """
    Report a domain error and exit with code 1.

    Raises:
        typer.Exit: always
    """
    if isinstance(exc, TargetNotFound):
        logger.warning(str(exc))
        input_value = input_value or exc.node_id
    else:
        logger.error(str(exc))

    suggestions = None
    actionable_fix = None
    if isinstance(exc, TargetNotFound):
        actionable_fix = "uiforge show --json"
    elif isinstance(exc, InvalidStyleGroup):
        suggestions = list(STYLE_BUCKETS + BREAKPOINTS)

    print_error(error_code(exc), str(exc), json_output, input_value, suggestions, actionable_fix)
    raise typer.Exit(code=1)


def usage_error(code: str, message: str, json_output: bool = False, input_value: Optional[str] = None,
                suggestions: Optional[list] = None) -> None:
    """
    Report invalid command input and exit with code 1.

    Raises:
        typer.Exit: always
    """
    print_error(code, message, json_output, input_value, suggestions)
    raise typer.Exit(code=1)


# ============================================================================
# ARGUMENT PARSING
# ============================================================================

def parse_assignments(pairs: Optional[List[str]]) -> Dict[str, Any]:
    """
    Parse key=value pairs.

    Values are read as JSON when they parse (numbers, booleans, lists,
    objects); anything else is kept as a plain string.

    Raises:
        typer.BadParameter: a pair has no '=' or an empty key
    """
    result: Dict[str, Any] = {}
    for pair in pairs or []:
        key, sep, raw = pair.partition("=")
        key = key.strip()
        if not sep or not key:
            raise typer.BadParameter(f"Expected key=value, got '{pair}'")
        try:
            result[key] = json.loads(raw)
        except json.JSONDecodeError:
            result[key] = raw
    return result


def parse_styles(pairs: Optional[List[str]]) -> Dict[str, List[str]]:
    """
    Parse group=tok,tok pairs. An empty right-hand side clears the group.

    Raises:
        typer.BadParameter: a pair has no '=' or an empty group name
    """
    result: Dict[str, List[str]] = {}
    for pair in pairs or []:
        group, sep, raw = pair.partition("=")
        group = group.strip()
        if not sep or not group:
            raise typer.BadParameter(f"Expected group=token,token, got '{pair}'")
        result[group] = [token for token in raw.replace(",", " ").split() if token]
    return result


# ============================================================================
# RESULT OUTPUT
# ============================================================================

def report_result(result: MutationResult, json_output: bool = False, **extra: Any) -> None:
    """Print one engine result (JSON in machine mode or with --json)."""
    if CLIConfig.is_machine_mode() or json_output:
        print_json({"status": "ok", **result.model_dump(), **extra})
        return

    target = f" [cyan]{result.node_id}[/cyan]" if result.node_id else ""
    if result.changed:
        console.print(f"[green]✓ {result.operation}[/green]{target}")
    else:
        reason = f" ({result.message})" if result.message else ""
        console.print(f"[yellow]• {result.operation}: no change[/yellow]{target}{reason}")
    for key, value in extra.items():
        console.print(f"[dim]{key}: {value}[/dim]")
