"""
CLI Code Generation Commands

generate, export
"""

from pathlib import Path
from typing import Optional

import typer
from rich.syntax import Syntax

from uiforge.codegen import get_codegen_config, sanitize_component_name, serialize
from uiforge.exceptions import UIForgeError
from uiforge.export import export_document
from uiforge.schemas import ExportOptions
from .common import JSON_OPTION, PROJECT_OPTION, console, fail, load_engine, usage_error
from .config import CLIConfig
from .output import echo, print_json

FLAVORS = ("loose", "typed")
EXPORT_FORMATS = ("jsx", "tsx", "project")


def generate_cmd(
    flavor: Optional[str] = typer.Option(None, "--flavor", "-f", help="loose (JSX) or typed (TSX); default from config"),
    name: Optional[str] = typer.Option(None, "--name", "-n", help="Component name; default from config"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write to this file instead of stdout", dir_okay=False),
    no_imports: bool = typer.Option(False, "--no-imports", help="Omit the React import line"),
    project: Optional[Path] = PROJECT_OPTION,
    json_output: bool = JSON_OPTION,
):
    """
    Generate component source for the current document.
    """
    config = get_codegen_config(project)
    flavor = flavor or config["flavor"]
    if flavor not in FLAVORS:
        usage_error("INVALID_FLAVOR", f"Unknown flavor '{flavor}'", json_output,
                    input_value=flavor, suggestions=list(FLAVORS))
    component_name = sanitize_component_name(name or config["component_name"])

    engine, _ = load_engine(project)
    code = serialize(engine.forest, flavor=flavor, component_name=component_name,
                     include_imports=not no_imports)

    if output is not None:
        options = ExportOptions(
            format="tsx" if flavor == "typed" else "jsx",
            include_imports=not no_imports,
            component_name=component_name,
        )
        try:
            written = export_document(engine.forest, options, output, code=code)
        except UIForgeError as e:
            fail(e, json_output)
        if CLIConfig.is_machine_mode() or json_output:
            print_json({"status": "ok", "path": str(written), "flavor": flavor, "component": component_name})
        else:
            console.print(f"[green]✓ Wrote {written}[/green]")
        return

    if json_output:
        print_json({"status": "ok", "flavor": flavor, "component": component_name, "code": code})
    elif CLIConfig.is_machine_mode():
        echo(code)
    else:
        console.print(Syntax(code, "tsx" if flavor == "typed" else "jsx", line_numbers=False))


def export_cmd(
    output: Path = typer.Argument(..., help="Destination file or directory"),
    format: str = typer.Option("tsx", "--format", help="jsx, tsx or project (zip)"),
    name: Optional[str] = typer.Option(None, "--name", "-n", help="Component name; default from config"),
    no_imports: bool = typer.Option(False, "--no-imports", help="Omit the React import line"),
    project: Optional[Path] = PROJECT_OPTION,
    json_output: bool = JSON_OPTION,
):
    """
    Export the document as a component file or a zipped starter project.
    """
    if format not in EXPORT_FORMATS:
        usage_error("INVALID_FORMAT", f"Unknown export format '{format}'", json_output,
                    input_value=format, suggestions=list(EXPORT_FORMATS))

    options = ExportOptions(
        format=format,
        include_imports=not no_imports,
        component_name=sanitize_component_name(name or get_codegen_config(project)["component_name"]),
    )
    engine, _ = load_engine(project)
    try:
        written = export_document(engine.forest, options, output)
    except UIForgeError as e:
        fail(e, json_output)

    if CLIConfig.is_machine_mode() or json_output:
        print_json({"status": "ok", "path": str(written), "format": format})
    else:
        console.print(f"[green]✓ Exported {format} to {written}[/green]")
