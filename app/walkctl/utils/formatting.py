"""Rich console formatting utilities.

Provides consistent formatting for CLI messages using Rich. Listed
paths are not routed through these consoles; they are written to the
raw output stream so they stay one plain line per path.
"""

import logging
import sys

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

WALKCTL_THEME = Theme(
    {
        "success": "#03b971",
        "warning": "#f5b332",
        "error": "bold #f53263",
        "info": "#0ec1c8",
        "muted": "#b2bec3",
    }
)


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances
console = Console(theme=WALKCTL_THEME, color_system=_detect_color_system())
err_console = Console(
    theme=WALKCTL_THEME,
    stderr=True,
    soft_wrap=True,
    color_system=_detect_color_system(),
)


def configure_logging(verbose: bool = False) -> None:
    """Route walkctl diagnostics to stderr through Rich.

    Verbose runs show DEBUG records; otherwise only warnings and errors
    reach the handlers of the root logger.
    """
    app_logger = logging.getLogger("walkctl")
    app_logger.handlers.clear()

    if not verbose:
        app_logger.setLevel(logging.WARNING)
        return

    handler = RichHandler(console=err_console, show_path=False, rich_tracebacks=True)
    app_logger.addHandler(handler)
    app_logger.setLevel(logging.DEBUG)


def print_info(message: str) -> None:
    """Print an info message."""
    err_console.print(f"[info]{message}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/]")
