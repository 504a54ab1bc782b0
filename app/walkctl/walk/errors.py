"""Exceptions raised while walking a tree.

Every failure during a run is fatal: the first error stops the
traversal and surfaces to the caller as a single WalkError.
"""


class WalkError(Exception):
    """Base exception for walk errors."""


class TraversalError(WalkError):
    """Raised when the traversal cannot reach an entry."""


class WalkActionError(WalkError):
    """Raised when listing, deleting or logging a deletion fails."""


class ArchiveError(WalkError):
    """Raised when archiving a file fails."""


class ArchiveDestinationNotFoundError(ArchiveError):
    """Raised when the archive destination cannot be stat'ed."""


class ArchiveDestinationNotDirectoryError(ArchiveError):
    """Raised when the archive destination exists but is not a directory."""
