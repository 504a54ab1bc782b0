"""Tree walking module.

This module provides traversal, entry filtering, action dispatch and
the list, delete and archive actions applied to matching files.
"""

from walkctl.walk.actions import archive_file, archive_target_path, delete_file, list_file
from walkctl.walk.deletelog import DELETE_LOG_PREFIX, create_delete_logger
from walkctl.walk.errors import (
    ArchiveDestinationNotDirectoryError,
    ArchiveDestinationNotFoundError,
    ArchiveError,
    TraversalError,
    WalkActionError,
    WalkError,
)
from walkctl.walk.filters import extension_of, should_skip
from walkctl.walk.models import ActionKind, WalkConfig, WalkEntry, WalkSummary
from walkctl.walk.runner import dispatch, run
from walkctl.walk.traversal import walk_tree

__all__ = [
    "DELETE_LOG_PREFIX",
    "ActionKind",
    "ArchiveDestinationNotDirectoryError",
    "ArchiveDestinationNotFoundError",
    "ArchiveError",
    "TraversalError",
    "WalkActionError",
    "WalkConfig",
    "WalkEntry",
    "WalkError",
    "WalkSummary",
    "archive_file",
    "archive_target_path",
    "create_delete_logger",
    "delete_file",
    "dispatch",
    "extension_of",
    "list_file",
    "run",
    "should_skip",
    "walk_tree",
]
