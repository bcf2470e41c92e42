"""
CLI Output Utilities

Machine-aware output functions that adapt based on machine mode.
"""

import json
import re
from typing import Any, Optional

import typer
from rich.console import Console as RichConsole

from uiforge.cli.config import CLIConfig

_MARKUP = re.compile(r'\[/?[a-z][a-z0-9 _#]*\]')


class MachineAwareConsole:
    """
    A Console wrapper that automatically adapts output based on machine mode.
    Acts as a drop-in replacement for rich.console.Console.
    """

    def __init__(self):
        self._rich_console = RichConsole()

    def print(self, *args, **kwargs):
        """Print that respects machine mode."""
        if CLIConfig.is_machine_mode():
            for arg in args:
                if isinstance(arg, str):
                    plain = _MARKUP.sub('', arg).strip()
                    if plain:
                        typer.echo(plain)
                elif hasattr(arg, '__rich__') or hasattr(arg, '__rich_console__'):
                    # Tables and trees are human-only; machine callers use JSON
                    pass
                elif arg:
                    typer.echo(arg)
        else:
            self._rich_console.print(*args, **kwargs)

    def __getattr__(self, name):
        """Delegate all other attributes to the rich console."""
        return getattr(self._rich_console, name)


_console = MachineAwareConsole()


def echo(message: str = "", **kwargs) -> None:
    typer.echo(message, **kwargs)


def print_json(data: Any, minified: Optional[bool] = None) -> None:
    """
    Print JSON data respecting machine mode.
    In machine mode, always minifies. In human mode, pretty prints.
    """
    if minified is None:
        minified = CLIConfig.is_machine_mode()

    if minified:
        echo(json.dumps(data, separators=(',', ':'), ensure_ascii=False))
    else:
        echo(json.dumps(data, indent=2, ensure_ascii=False))


def structured_error(code: str, message: str, input_value: Optional[str] = None,
                     suggestions: Optional[list] = None, actionable_fix: Optional[str] = None) -> dict:
    """
    Create a structured error object for machine mode.

    Args:
        code: Error code (e.g., "NODE_NOT_FOUND", "INVALID_STYLE_GROUP")
        message: Human-readable error message
        input_value: The input that caused the error
        suggestions: List of alternative suggestions
        actionable_fix: Command to fix the issue

    Returns:
        Structured error dictionary
    """
    error_obj = {
        "status": "error",
        "code": code,
        "message": message
    }
    if input_value:
        error_obj["input"] = input_value
    if suggestions:
        error_obj["suggestions"] = suggestions
    if actionable_fix:
        error_obj["actionable_fix"] = actionable_fix
    return error_obj


def print_error(code: str, message: str, json_output: bool = False, input_value: Optional[str] = None,
                suggestions: Optional[list] = None, actionable_fix: Optional[str] = None) -> None:
    """
    Print an error respecting machine mode.

    Machine mode (or --json) emits a structured JSON error on stdout; human
    mode prints a red message.
    """
    if CLIConfig.is_machine_mode() or json_output:
        error = structured_error(code, message, input_value, suggestions, actionable_fix)
        echo(json.dumps(error, separators=(',', ':'), ensure_ascii=False))
    else:
        from rich.markup import escape
        _console.print(f"[red]Error: {escape(message)}[/red]")
        if suggestions:
            _console.print(f"[dim]Suggestions: {escape(', '.join(suggestions))}[/dim]")
        if actionable_fix:
            _console.print(f"[dim]Try: {escape(actionable_fix)}[/dim]")


def get_console() -> MachineAwareConsole:
    """
    Get the console instance for advanced usage.
    Note: Direct console usage should check machine mode.
    """
    return _console
