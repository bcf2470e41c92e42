"""
CLI History Commands

undo, redo, history
"""

import time
from pathlib import Path
from typing import Optional

import typer
from rich.table import Table

from uiforge.exceptions import UIForgeError
from uiforge.tree import count_nodes
from .common import JSON_OPTION, PROJECT_OPTION, console, fail, load_engine, report_result, save_engine
from .config import CLIConfig
from .output import print_json


def _status(engine) -> dict:
    return {
        "position": engine.history_position,
        "length": engine.history_length,
        "can_undo": engine.can_undo,
        "can_redo": engine.can_redo,
    }


def undo_cmd(
    project: Optional[Path] = PROJECT_OPTION,
    json_output: bool = JSON_OPTION,
):
    """
    Step back one edit.
    """
    try:
        engine, store = load_engine(project)
        result = engine.undo()
        save_engine(engine, store)
    except UIForgeError as e:
        fail(e, json_output)
    report_result(result, json_output, **_status(engine))


def redo_cmd(
    project: Optional[Path] = PROJECT_OPTION,
    json_output: bool = JSON_OPTION,
):
    """
    Re-apply the last undone edit.
    """
    try:
        engine, store = load_engine(project)
        result = engine.redo()
        save_engine(engine, store)
    except UIForgeError as e:
        fail(e, json_output)
    report_result(result, json_output, **_status(engine))


def history_cmd(
    project: Optional[Path] = PROJECT_OPTION,
    json_output: bool = JSON_OPTION,
):
    """
    List the undo/redo log. The current entry is marked.
    """
    engine, _ = load_engine(project)
    entries = engine.history.entries
    current = engine.history.index

    rows = [
        {
            "index": i,
            "timestamp": snapshot.timestamp,
            "elements": count_nodes(snapshot.elements),
            "current": i == current,
        }
        for i, snapshot in enumerate(entries)
    ]

    if CLIConfig.is_machine_mode() or json_output:
        print_json({"status": "ok", **_status(engine), "entries": rows})
        return

    table = Table(title=f"History ({engine.history_position}/{engine.history_length})")
    table.add_column("#", justify="right")
    table.add_column("Saved", style="dim")
    table.add_column("Elements", justify="right")
    table.add_column("", style="bold green")
    for row in rows:
        table.add_row(
            str(row["index"]),
            time.strftime("%Y-%m-%d %H:%M:%S", time.localtime(row["timestamp"])),
            str(row["elements"]),
            "◀ current" if row["current"] else "",
        )
    console.print(table)
