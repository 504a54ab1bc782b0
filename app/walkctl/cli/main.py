"""walkctl command line.

The root application only owns the options shared by every command
(version, verbosity) and routes diagnostics through Rich before the
``walk`` or ``config`` command runs.
"""

from typing import Annotated

import typer

from walkctl import __version__
from walkctl.cli.commands import config, walk
from walkctl.utils.formatting import configure_logging

app = typer.Typer(
    name="walkctl",
    help="List, delete or gzip-archive files found under a directory tree.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)
app.add_typer(walk.app, name="walk")
app.add_typer(config.app, name="config")


def _show_version(value: bool) -> None:
    if value:
        typer.echo(f"walkctl version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=_show_version,
            is_eager=True,
            help="Print the walkctl version.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log each action and print a run summary."),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Hide warnings about ignored options."),
    ] = False,
) -> None:
    """Filter files by extension, size and name length, then act on them.

    Matching files are listed by default; --del removes them and
    --archive writes gzip copies into a tree mirroring the root.
    """
    configure_logging(verbose)
    ctx.obj = {"verbose": verbose, "quiet": quiet}
