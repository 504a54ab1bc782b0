"""CLI commands for walkctl.

This package contains all subcommand implementations.
"""

from walkctl.cli.commands import config, walk

__all__ = ["config", "walk"]
