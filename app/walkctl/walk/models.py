"""Walk domain models.

This module defines the data structures shared by the traversal,
filter, dispatch and action layers: the immutable run configuration,
one visited filesystem entry, and the per-run summary counters.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import TextIO


class ActionKind(str, Enum):
    """Action selected for a non-skipped entry.

    Attributes:
        LIST: Path was written to the output sink.
        DELETE: File was removed.
        ARCHIVE: File was compressed into the archive directory.
        ARCHIVE_DELETE: File was archived, then removed.
    """

    LIST = "list"
    DELETE = "delete"
    ARCHIVE = "archive"
    ARCHIVE_DELETE = "archive_delete"


@dataclass(frozen=True, slots=True)
class WalkEntry:
    """One filesystem node visited during traversal.

    Attributes:
        path: Path as produced by joining the traversal root with child
            names (relative when the root is relative).
        is_dir: Whether the node is a directory (symlinks are not followed).
        size: Size in bytes from lstat, 0 if the node could not be reached.
        error: Error raised while reaching the node, None otherwise.
    """

    path: str
    is_dir: bool = False
    size: int = 0
    error: OSError | None = None


@dataclass(frozen=True, slots=True)
class WalkConfig:
    """Configuration for a single traversal run.

    Attributes:
        out: Text sink receiving one line per listed path.
        delete_log: Text sink receiving one line per deleted file.
        extensions: Extensions to keep, including the leading dot.
            Empty means no extension filter.
        min_size: Minimum file size in bytes (inclusive).
        name_length: Minimum number of characters in the file name.
            0 disables the filter.
        list_only: List matching files and do nothing else.
        delete: Delete matching files (after archiving, if enabled).
        archive_dir: Destination root for compressed copies, None to disable.
    """

    out: TextIO
    delete_log: TextIO
    extensions: tuple[str, ...] = ()
    min_size: int = 0
    name_length: int = 0
    list_only: bool = False
    delete: bool = False
    archive_dir: str | None = None

    def __post_init__(self) -> None:
        """Validate numeric limits after initialization."""
        if self.min_size < 0:
            msg = f"Minimum size cannot be negative, got {self.min_size}"
            raise ValueError(msg)
        if self.name_length < 0:
            msg = f"Name length cannot be negative, got {self.name_length}"
            raise ValueError(msg)


@dataclass(slots=True)
class WalkSummary:
    """Counters accumulated during one traversal run."""

    visited: int = 0
    skipped: int = 0
    actions: dict[ActionKind, int] = field(default_factory=dict)

    def record(self, kind: ActionKind) -> None:
        """Count one completed action."""
        self.actions[kind] = self.actions.get(kind, 0) + 1

    @property
    def listed(self) -> int:
        """Number of paths written to the output sink."""
        return self.actions.get(ActionKind.LIST, 0) + self.actions.get(ActionKind.ARCHIVE, 0)

    @property
    def archived(self) -> int:
        """Number of files compressed into the archive directory."""
        return self.actions.get(ActionKind.ARCHIVE, 0) + self.actions.get(
            ActionKind.ARCHIVE_DELETE, 0
        )

    @property
    def deleted(self) -> int:
        """Number of files removed."""
        return self.actions.get(ActionKind.DELETE, 0) + self.actions.get(
            ActionKind.ARCHIVE_DELETE, 0
        )
