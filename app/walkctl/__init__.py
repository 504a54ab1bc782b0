"""walkctl - Walk a directory tree and list, delete or archive matching files."""

__version__ = "0.1.0"
