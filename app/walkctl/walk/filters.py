"""Entry filtering.

Decides whether a visited entry is excluded from further processing.
"""

import os
from collections.abc import Collection

from walkctl.walk.models import WalkEntry


def extension_of(path: str) -> str:
    """Return the suffix of the base name from its last dot, or "".

    Unlike os.path.splitext, a leading dot counts: ``d/.bashrc`` has
    extension ``.bashrc``.
    """
    name = os.path.basename(path)
    dot = name.rfind(".")
    return name[dot:] if dot >= 0 else ""


def should_skip(
    path: str,
    extensions: Collection[str],
    min_size: int,
    entry: WalkEntry,
    name_length: int = 0,
) -> bool:
    """Check whether an entry should be skipped.

    Directories are always skipped. Files smaller than min_size are
    skipped; a file of exactly min_size passes. When extensions is
    non-empty, the path's extension (with its leading dot) must equal
    one of them, compared case-sensitively.

    Args:
        path: Entry path.
        extensions: Extensions to keep (e.g. ".log"). Empty keeps all.
        min_size: Minimum size in bytes.
        entry: The visited entry.
        name_length: Minimum characters in the base name, 0 to disable.

    Returns:
        True if the entry should not be acted upon.
    """
    if entry.is_dir or entry.size < min_size:
        return True

    if extensions and extension_of(path) not in extensions:
        return True

    return name_length > 0 and len(os.path.basename(path)) < name_length
