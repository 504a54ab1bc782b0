"""File actions applied to matching entries.

Provides the three independent effects a run can have on a file:
listing its path, deleting it, and writing a gzip copy into a
destination tree that mirrors the traversal root.
"""

import gzip
import logging
import os
import shutil
import stat
from typing import TextIO

from walkctl.walk.errors import (
    ArchiveDestinationNotDirectoryError,
    ArchiveDestinationNotFoundError,
    ArchiveError,
    WalkActionError,
)

logger = logging.getLogger(__name__)

ARCHIVE_SUFFIX = ".gz"
_DIR_MODE = 0o755


def list_file(path: str, out: TextIO) -> None:
    """Write path to the output sink, one line per path.

    Raises:
        WalkActionError: If the sink cannot be written.
    """
    try:
        out.write(f"{path}\n")
    except OSError as e:
        raise WalkActionError(f"Cannot list {path}: {e}") from e


def delete_file(path: str, delete_logger: logging.Logger) -> None:
    """Remove a file and record the deletion.

    Args:
        path: File to remove.
        delete_logger: Logger receiving one record per deletion.

    Raises:
        WalkActionError: If the file cannot be removed or the record
            cannot be written.
    """
    try:
        os.remove(path)
    except OSError as e:
        raise WalkActionError(f"Cannot delete {path}: {e}") from e

    logger.debug("Deleted %s", path)
    try:
        delete_logger.info(path)
    except (OSError, ValueError) as e:
        raise WalkActionError(f"Cannot log deletion of {path}: {e}") from e


def validate_destination(dest_dir: str) -> None:
    """Check that the archive destination is an existing directory.

    Raises:
        ArchiveDestinationNotFoundError: If dest_dir cannot be stat'ed.
        ArchiveDestinationNotDirectoryError: If dest_dir is not a directory.
    """
    try:
        st = os.stat(dest_dir)
    except OSError as e:
        raise ArchiveDestinationNotFoundError(
            f"Archive destination {dest_dir} is not accessible: {e}"
        ) from e

    if not stat.S_ISDIR(st.st_mode):
        raise ArchiveDestinationNotDirectoryError(f"{dest_dir} is not a directory")


def archive_target_path(dest_dir: str, root: str, path: str) -> str:
    """Compute where the compressed copy of path is written.

    The directory of path relative to root is recreated under dest_dir,
    and ``.gz`` is appended to the full file name: ``root/sub/a.log``
    maps to ``dest_dir/sub/a.log.gz``.

    Raises:
        ArchiveError: If path cannot be expressed relative to root.
    """
    try:
        rel_dir = os.path.relpath(os.path.dirname(path) or os.curdir, root)
    except ValueError as e:
        raise ArchiveError(f"Cannot compute path of {path} relative to {root}: {e}") from e

    name = os.path.basename(path) + ARCHIVE_SUFFIX
    return os.path.normpath(os.path.join(dest_dir, rel_dir, name))


def archive_file(dest_dir: str, root: str, path: str) -> str:
    """Write a gzip copy of path into the mirrored tree under dest_dir.

    Missing intermediate directories are created. An existing target
    is overwritten. The gzip header carries the source base name and
    modification time.

    Args:
        dest_dir: Archive destination root.
        root: Traversal root that path lives under.
        path: Source file.

    Returns:
        Path of the compressed file.

    Raises:
        ArchiveError: If the destination is invalid, the base name cannot
            be stored in a gzip header, or any I/O step fails.
    """
    validate_destination(dest_dir)
    target = archive_target_path(dest_dir, root, path)
    header_name = _header_name(path)

    try:
        os.makedirs(os.path.dirname(target), mode=_DIR_MODE, exist_ok=True)
        _write_compressed(target, path, header_name)
    except OSError as e:
        raise ArchiveError(f"Cannot archive {path} to {target}: {e}") from e

    logger.debug("Archived %s to %s", path, target)
    return target


def _header_name(path: str) -> str:
    """Return the name GzipFile must be given to embed the base name of path.

    GzipFile drops a trailing ``.gz`` from the name it writes, so the
    suffix is added here and the header keeps the exact base name.

    Raises:
        ArchiveError: If the base name is not representable in Latin-1.
    """
    name = os.path.basename(path)
    try:
        name.encode("latin-1")
    except UnicodeEncodeError as e:
        raise ArchiveError(f"Cannot store name of {path} in gzip header: {e}") from e
    return name + ARCHIVE_SUFFIX


def _write_compressed(target: str, source: str, header_name: str) -> None:
    """Stream-compress source into target as a single gzip member."""
    with open(target, "wb") as out_file, open(source, "rb") as in_file:
        mtime = os.fstat(in_file.fileno()).st_mtime
        with gzip.GzipFile(
            filename=header_name,
            mode="wb",
            fileobj=out_file,
            mtime=mtime,
        ) as zw:
            shutil.copyfileobj(in_file, zw)
