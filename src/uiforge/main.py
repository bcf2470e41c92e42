import typer

from uiforge import __version__
from uiforge.logging_config import logger, setup_logging
from uiforge.cli import catalog, codegen, document, history
from uiforge.cli.config import CLIConfig

app = typer.Typer(no_args_is_help=True)


# Global CLI callback for flags that apply to all commands
@app.callback()
def global_options(
    human: bool = typer.Option(
        False,
        "--human",
        "-H",
        help="Enable human mode: pretty output with tables, trees and colors (also via UIFORGE_HUMAN_MODE env var)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr"),
):
    """
    uiforge: build Tailwind UI component trees and generate React code.

    Machine mode is DEFAULT (plain JSON data, no formatting).
    Use --human/-H for pretty output.
    """
    if human:
        CLIConfig.set_machine_mode(False)

    if verbose:
        setup_logging(level="DEBUG", suppress_console=False, force=True)
    elif CLIConfig.is_machine_mode():
        # Machine mode keeps stderr clean
        setup_logging(suppress_console=True, force=True)


# Document commands
app.command(name="add")(document.add_cmd)
app.command(name="remove")(document.remove_cmd)
app.command(name="update")(document.update_cmd)
app.command(name="move")(document.move_cmd)
app.command(name="drop")(document.drop_cmd)
app.command(name="duplicate")(document.duplicate_cmd)
app.command(name="clear")(document.clear_cmd)
app.command(name="show")(document.show_cmd)
app.command(name="load")(document.load_cmd)

# History commands
app.command(name="undo")(history.undo_cmd)
app.command(name="redo")(history.redo_cmd)
app.command(name="history")(history.history_cmd)

# Catalog and code generation
app.command(name="catalog")(catalog.catalog_cmd)
app.command(name="generate")(codegen.generate_cmd)
app.command(name="export")(codegen.export_cmd)


@app.command()
def version():
    """
    Prints the current version of uiforge.
    """
    logger.debug("version requested")
    typer.echo(f"uiforge v{__version__}")


if __name__ == "__main__":
    app()
