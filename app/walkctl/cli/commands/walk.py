"""Walk command implementation.

Walks a directory tree and lists, deletes or archives the files that
pass the extension, size and name-length filters.
"""

import contextlib
import sys
from pathlib import Path
from typing import Annotated, TextIO

import typer
from rich.markup import escape

from walkctl.core.paths import ensure_dir
from walkctl.core.settings import SettingsError, WalkSettings, check_extension, load_settings
from walkctl.utils.formatting import print_error, print_info, print_warning
from walkctl.walk.errors import WalkError
from walkctl.walk.models import WalkConfig, WalkSummary
from walkctl.walk.runner import run

app = typer.Typer(
    help="Walk a directory tree and act on matching files.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def walk_tree_command(
    ctx: typer.Context,
    root: Annotated[
        str,
        typer.Option("--root", "-r", help="Root directory to start from."),
    ] = ".",
    list_only: Annotated[
        bool,
        typer.Option("--list", help="List files only, ignoring delete and archive."),
    ] = False,
    delete: Annotated[
        bool,
        typer.Option("--del", "--delete", help="Delete matching files."),
    ] = False,
    archive: Annotated[
        str | None,
        typer.Option("--archive", "-a", help="Archive matching files into this directory."),
    ] = None,
    extensions: Annotated[
        list[str] | None,
        typer.Option(
            "--ext",
            "-e",
            help="File extension to keep, e.g. .log (repeatable).",
        ),
    ] = None,
    size: Annotated[
        int | None,
        typer.Option("--size", "-s", min=0, help="Minimum file size in bytes."),
    ] = None,
    name_length: Annotated[
        int | None,
        typer.Option("--name-length", "-n", min=0, help="Minimum characters in file name."),
    ] = None,
    log_file: Annotated[
        Path | None,
        typer.Option("--log", "-l", help="Append deletion records to this file."),
    ] = None,
) -> None:
    """Walk a directory tree and list, delete or archive matching files."""
    obj = ctx.obj or {}
    quiet = obj.get("quiet", False)
    verbose = obj.get("verbose", False)

    try:
        settings = load_settings()
    except SettingsError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e

    ext_filter = _resolve_extensions(extensions, settings)
    log_path = log_file if log_file is not None else settings.log_file

    if list_only and (delete or archive) and not quiet:
        print_warning("--list given: delete and archive are ignored.")

    try:
        with _open_delete_log(log_path) as delete_log:
            config = WalkConfig(
                out=sys.stdout,
                delete_log=delete_log,
                extensions=ext_filter,
                min_size=size if size is not None else settings.min_size,
                name_length=name_length if name_length is not None else settings.name_length,
                list_only=list_only,
                delete=delete,
                archive_dir=archive or None,
            )
            summary = run(root, config)
    except (WalkError, OSError, RuntimeError) as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e

    if verbose and not quiet:
        _print_summary(summary)


def _resolve_extensions(extensions: list[str] | None, settings: WalkSettings) -> tuple[str, ...]:
    """Pick the extension filter from the command line or settings."""
    if extensions:
        try:
            return tuple(check_extension(ext) for ext in extensions)
        except ValueError as e:
            raise typer.BadParameter(str(e), param_hint="--ext") from e
    return tuple(settings.extensions)


def _open_delete_log(log_path: Path | None) -> contextlib.AbstractContextManager[TextIO]:
    """Open the delete log for appending, or fall back to standard output.

    Raises:
        OSError: If the log file cannot be opened.
        RuntimeError: If its parent directory cannot be created.
    """
    if log_path is None:
        return contextlib.nullcontext(sys.stdout)
    ensure_dir(log_path.expanduser().parent, "delete log")
    return open(log_path.expanduser(), "a", encoding="utf-8")


def _print_summary(summary: WalkSummary) -> None:
    """Display run counters."""
    print_info(
        f"Visited {summary.visited} entries ({summary.skipped} skipped): "
        f"{summary.listed} listed, {summary.archived} archived, {summary.deleted} deleted"
    )
