"""CLI commands using Typer."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

if TYPE_CHECKING:
    from tree_fs.models import TreeConfig

import typer
from rich.logging import RichHandler

from tree_fs import __version__
from tree_fs.console import TreeConsole
from tree_fs.context import create_context
from tree_fs.errors import DecodeError, TreeFsError
from tree_fs.loader import load_config_file
from tree_fs.validation import check_config

app = typer.Typer(
    name="tree-fs",
    help="Create file trees from YAML documents",
    no_args_is_help=True,
)

tui = TreeConsole()


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        tui.console.print(f"tree-fs v{__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Route library logging through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=tui.console, show_path=False)],
        force=True,
    )


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", help="Log every created entry")
    ] = False,
) -> None:
    """Create file trees from YAML documents."""
    configure_logging(verbose)


def _load_config(file: Path) -> TreeConfig:
    """Load a tree document, exiting with status 1 on failure.

    Args:
        file: Path to the YAML document.

    Returns:
        Decoded configuration.

    Raises:
        typer.Exit: If the file cannot be read or decoded.
    """
    try:
        return load_config_file(file)
    except DecodeError as e:
        tui.show_error(str(e))
        raise typer.Exit(1) from e
    except OSError as e:
        tui.show_error(f"Cannot read {file}: {e}")
        raise typer.Exit(1) from e


def _apply_overrides(
    config: TreeConfig,
    root: Path | None,
    keep: bool,
    override: bool,
    strict: bool,
) -> TreeConfig:
    """Apply command line options on top of the document."""
    update: dict[str, object] = {"auto_delete": not keep}
    if root is not None:
        update["root"] = root
    if override:
        update["override_existing"] = True
    if strict:
        update["strict"] = True
    return config.model_copy(update=update)


@app.command()
def create(
    file: Annotated[Path, typer.Argument(help="YAML tree document")],
    root: Annotated[
        Path | None, typer.Option("--root", "-r", help="Override the document root")
    ] = None,
    keep: Annotated[
        bool,
        typer.Option(
            "--keep/--no-keep",
            help="Keep the tree after exiting (--no-keep builds and removes it)",
        ),
    ] = True,
    override: Annotated[
        bool, typer.Option("--override", help="Rewrite entries that already exist")
    ] = False,
    strict: Annotated[
        bool, typer.Option("--strict", help="Fail on duplicate or existing entries")
    ] = False,
    _context=None,
) -> None:
    """Materialize a tree document."""
    ctx = _context or create_context()
    config = _apply_overrides(_load_config(file), root, keep, override, strict)

    try:
        tree = ctx.materializer.materialize(config)
    except TreeFsError as e:
        tui.show_error(str(e))
        raise typer.Exit(1) from e

    with tree:
        tui.show_success(f"Created {len(config.entries)} entries in {tree.root}")
    if not keep:
        tui.show_info(f"Removed {tree.root}")


@app.command()
def check(
    file: Annotated[Path, typer.Argument(help="YAML tree document")],
) -> None:
    """Validate a tree document without creating anything."""
    config = _load_config(file)
    tui.show_entries(config)

    result = check_config(config)
    for warning in result.warnings:
        tui.show_warning(warning)
    if not result.success:
        for error in result.errors:
            tui.show_error(error)
        raise typer.Exit(1)

    tui.show_success(f"{file} is a valid tree document")


if __name__ == "__main__":
    app()
