"""
CLI Document Commands

add, remove, update, move, drop, duplicate, clear, show, load
"""

from pathlib import Path
from typing import List, Optional

import typer
from rich.markup import escape
from rich.tree import Tree

from uiforge.catalog import is_known_variant, materialize, search_components
from uiforge.exceptions import UIForgeError
from uiforge.placement import DragSession
from uiforge.schemas import ActiveDescriptor, HoverDescriptor, Node
from uiforge.storage import SnapshotStore
from uiforge.tree import count_nodes
from .common import (
    JSON_OPTION,
    PROJECT_OPTION,
    console,
    fail,
    load_engine,
    parse_assignments,
    parse_styles,
    report_result,
    save_engine,
    usage_error,
)
from .config import CLIConfig
from .output import print_json


def _require_variant(variant: str, json_output: bool) -> None:
    if is_known_variant(variant):
        return
    suggestions = [d.variant for d in search_components(variant)[:5]]
    usage_error("UNKNOWN_VARIANT", f"Unknown component variant '{variant}'", json_output,
                input_value=variant, suggestions=suggestions or None)


def add_cmd(
    variant: str = typer.Argument(..., help="Catalog variant to add (see `uiforge catalog`)"),
    parent: Optional[str] = typer.Option(None, "--parent", help="Parent node id (root level when omitted)"),
    index: Optional[int] = typer.Option(None, "--index", help="Position among siblings (appends when omitted)"),
    name: Optional[str] = typer.Option(None, "--name", help="Display name override"),
    project: Optional[Path] = PROJECT_OPTION,
    json_output: bool = JSON_OPTION,
):
    """
    Add a catalog component with its default attributes and styles.
    """
    _require_variant(variant, json_output)
    try:
        engine, store = load_engine(project)
        result = engine.insert(materialize(variant, name), parent, index)
        save_engine(engine, store)
    except UIForgeError as e:
        fail(e, json_output)
    report_result(result, json_output)


def remove_cmd(
    node_id: str = typer.Argument(..., help="Node id to remove (with its subtree)"),
    project: Optional[Path] = PROJECT_OPTION,
    json_output: bool = JSON_OPTION,
):
    """
    Remove a node and everything inside it.
    """
    try:
        engine, store = load_engine(project)
        result = engine.remove(node_id)
        save_engine(engine, store)
    except UIForgeError as e:
        fail(e, json_output)
    report_result(result, json_output)


def update_cmd(
    node_id: str = typer.Argument(..., help="Node id to update"),
    set_values: Optional[List[str]] = typer.Option(None, "--set", help="Attribute key=value (repeatable; JSON values allowed)"),
    style: Optional[List[str]] = typer.Option(None, "--style", help="Style group=tok,tok (repeatable; bucket or sm/md/lg)"),
    name: Optional[str] = typer.Option(None, "--name", help="New display name"),
    project: Optional[Path] = PROJECT_OPTION,
    json_output: bool = JSON_OPTION,
):
    """
    Merge attributes into a node and replace whole style groups.
    """
    attributes = parse_assignments(set_values)
    styles = parse_styles(style)
    if not attributes and not styles and name is None:
        usage_error("MISSING_ARGUMENT", "Nothing to update", json_output,
                    suggestions=["--set text=Hello", "--style spacing=p-4,m-2", "--name Hero"])
    try:
        engine, store = load_engine(project)
        result = engine.update(node_id, attributes or None, styles or None, name)
        save_engine(engine, store)
    except UIForgeError as e:
        fail(e, json_output, input_value=node_id)
    report_result(result, json_output)


def move_cmd(
    active_id: str = typer.Argument(..., help="Node id to move"),
    over_id: str = typer.Argument(..., help="Target node id"),
    position: str = typer.Option("after", "--position", help="before, after or inside"),
    project: Optional[Path] = PROJECT_OPTION,
    json_output: bool = JSON_OPTION,
):
    """
    Move a subtree before/after a target, or inside it as the last child.

    Self-moves and moves into the node's own subtree leave the document unchanged.
    """
    if position not in ("before", "after", "inside"):
        usage_error("INVALID_POSITION", f"Unknown position '{position}'", json_output,
                    input_value=position, suggestions=["before", "after", "inside"])
    try:
        engine, store = load_engine(project)
        result = engine.move(active_id, over_id, position)
        save_engine(engine, store)
    except UIForgeError as e:
        fail(e, json_output)
    report_result(result, json_output)


def drop_cmd(
    ids: List[str] = typer.Argument(..., help="ACTIVE_ID OVER_ID, or just OVER_ID with --new ('canvas-root' for the canvas)"),
    new: Optional[str] = typer.Option(None, "--new", help="Catalog variant being dragged in"),
    project: Optional[Path] = PROJECT_OPTION,
    json_output: bool = JSON_OPTION,
):
    """
    Simulate a drag-and-drop gesture ending over a target.

    Uses the same placement rules as the canvas: containers receive the item
    inside, other elements receive it as their next sibling.
    """
    expected = 1 if new is not None else 2
    if len(ids) != expected:
        usage_error("MISSING_ARGUMENT", "Expected ACTIVE_ID OVER_ID, or OVER_ID with --new VARIANT", json_output,
                    suggestions=["uiforge drop --new container canvas-root", "uiforge drop <active-id> <over-id>"])
    over_id = ids[-1]
    if new is not None:
        _require_variant(new, json_output)
        active = ActiveDescriptor(id=f"catalog-{new}", is_new=True, variant=new, node=materialize(new))
    else:
        active = ActiveDescriptor(id=ids[0])

    try:
        engine, store = load_engine(project)
        session = DragSession(engine)
        session.start(active)
        indicator = session.over(HoverDescriptor(target_id=over_id))
        result = session.end()
        save_engine(engine, store)
    except UIForgeError as e:
        fail(e, json_output)

    extra = {"indicator": indicator.model_dump() if indicator else None}
    report_result(result, json_output, **extra)


def duplicate_cmd(
    node_id: str = typer.Argument(..., help="Node id to duplicate"),
    project: Optional[Path] = PROJECT_OPTION,
    json_output: bool = JSON_OPTION,
):
    """
    Clone a subtree with fresh ids right after the original.
    """
    try:
        engine, store = load_engine(project)
        result = engine.duplicate(node_id)
        save_engine(engine, store)
    except UIForgeError as e:
        fail(e, json_output)
    report_result(result, json_output)


def clear_cmd(
    project: Optional[Path] = PROJECT_OPTION,
    json_output: bool = JSON_OPTION,
):
    """
    Remove every element from the canvas (undoable).
    """
    try:
        engine, store = load_engine(project)
        result = engine.clear()
        save_engine(engine, store)
    except UIForgeError as e:
        fail(e, json_output)
    report_result(result, json_output)


def _add_branch(tree: Tree, node: Node) -> None:
    label = f"[bold]{escape(node.variant)}[/bold] [dim]{escape(node.id)}[/dim]"
    if node.display_name:
        label += f"  {escape(node.display_name)}"
    branch = tree.add(label)
    for child in node.children:
        _add_branch(branch, child)


def show_cmd(
    project: Optional[Path] = PROJECT_OPTION,
    json_output: bool = JSON_OPTION,
):
    """
    Show the element tree.
    """
    engine, _ = load_engine(project)
    forest = engine.forest

    if CLIConfig.is_machine_mode() or json_output:
        print_json({
            "status": "ok",
            "count": count_nodes(forest),
            "elements": [node.model_dump(mode="json") for node in forest],
        })
        return

    if not forest:
        console.print("[dim]Canvas is empty. Add one with `uiforge add <variant>`.[/dim]")
        return

    tree = Tree(f"[bold magenta]canvas[/bold magenta] [dim]({count_nodes(forest)} elements)[/dim]")
    for node in forest:
        _add_branch(tree, node)
    console.print(tree)


def load_cmd(
    source: Path = typer.Argument(..., help="JSON file with an element list (or a saved document)", exists=True, dir_okay=False),
    project: Optional[Path] = PROJECT_OPTION,
    json_output: bool = JSON_OPTION,
):
    """
    Replace the document with elements read from a JSON file (undoable).

    Ids are repaired and parent links recomputed on the way in.
    """
    forest = SnapshotStore(source).load_snapshot()
    try:
        engine, store = load_engine(project)
        result = engine.load(forest)
        save_engine(engine, store)
    except UIForgeError as e:
        fail(e, json_output)
    report_result(result, json_output, elements=count_nodes(engine.forest))
