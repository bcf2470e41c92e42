"""
CLI Catalog Command
"""

from typing import Optional

import typer
from rich.table import Table

from uiforge.catalog import CATEGORIES, CATEGORY_METADATA, list_components, search_components
from .common import JSON_OPTION, console, usage_error
from .config import CLIConfig
from .output import print_json


def catalog_cmd(
    category: Optional[str] = typer.Option(None, "--category", "-c", help="Only list one category"),
    search: Optional[str] = typer.Option(None, "--search", "-s", help="Filter by name or variant"),
    json_output: bool = JSON_OPTION,
):
    """
    List the components that can be added to the canvas.
    """
    if category is not None and category not in CATEGORIES:
        usage_error("UNKNOWN_CATEGORY", f"Unknown category '{category}'", json_output,
                    input_value=category, suggestions=list(CATEGORIES))

    components = search_components(search) if search else list_components()
    if category is not None:
        components = [d for d in components if d.category == category]

    if CLIConfig.is_machine_mode() or json_output:
        print_json({
            "status": "ok",
            "count": len(components),
            "components": [
                {
                    "variant": d.variant,
                    "name": d.name,
                    "category": d.category,
                    "container": d.is_container,
                }
                for d in components
            ],
        })
        return

    table = Table(title=f"Components ({len(components)})")
    table.add_column("Variant", style="cyan")
    table.add_column("Name")
    table.add_column("Category", style="dim")
    table.add_column("Container", justify="center")
    for d in components:
        label = CATEGORY_METADATA.get(d.category, {}).get("label", d.category)
        table.add_row(d.variant, d.name, label, "✓" if d.is_container else "")
    console.print(table)
