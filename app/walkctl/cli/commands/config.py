"""Settings commands.

Provides commands to show the effective walk settings and to write a
default settings file.
"""

from typing import Annotated

import tomli_w
import typer
from rich.markup import escape

from walkctl.core.paths import get_default_delete_log_path, get_settings_path
from walkctl.core.settings import (
    SettingsError,
    WalkSettings,
    load_settings,
    save_settings,
    settings_to_dict,
)
from walkctl.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Show or initialize walk settings.",
    no_args_is_help=True,
)


@app.command()
def show() -> None:
    """Show the effective settings as TOML."""
    try:
        settings = load_settings()
    except SettingsError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e

    settings_path = get_settings_path()
    if not settings_path.exists():
        print_info(f"No settings file at {settings_path}, showing defaults.")

    console.print(tomli_w.dumps(settings_to_dict(settings)), markup=False, highlight=False)


@app.command()
def init(
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite an existing settings file."),
    ] = False,
) -> None:
    """Write a settings file with default values."""
    settings_path = get_settings_path()
    if settings_path.exists() and not force:
        print_error(f"Settings file already exists: {settings_path} (use --force to overwrite)")
        raise typer.Exit(code=1)

    settings = WalkSettings(log_file=get_default_delete_log_path())
    try:
        saved = save_settings(settings, settings_path)
    except SettingsError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e

    print_success(f"Settings written to {saved}")
