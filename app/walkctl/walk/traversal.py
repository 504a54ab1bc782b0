"""Directory tree traversal.

Yields one WalkEntry per filesystem node under a root, depth-first in
lexical order, starting with the root itself. Symlinks are reported
as the link (lstat) and never followed, so link cycles cannot occur.
"""

import logging
import os
import stat
from collections.abc import Iterator

from walkctl.walk.models import WalkEntry

logger = logging.getLogger(__name__)


def walk_tree(root: str) -> Iterator[WalkEntry]:
    """Walk the tree rooted at root.

    Nodes that cannot be reached are yielded as entries carrying the
    OSError instead of raising, so the caller decides whether to stop.
    A directory whose listing fails is yielded twice: once with its
    metadata and once with the listing error.

    Args:
        root: Directory (or file) to start from.

    Yields:
        WalkEntry for every node, in visitation order.
    """
    try:
        st = os.lstat(root)
    except OSError as e:
        yield WalkEntry(path=root, error=e)
        return

    yield from _walk(root, st)


def _walk(root: str, root_st: os.stat_result) -> Iterator[WalkEntry]:
    """Yield root and everything below it in lexical pre-order.

    Pending directories are kept on an explicit stack of
    ``(path, remaining names)`` frames so depth is bounded only by memory.
    """
    stack: list[tuple[str, Iterator[str]]] = []

    yield from _enter(root, root_st, stack)

    while stack:
        path, names = stack[-1]
        name = next(names, None)
        if name is None:
            stack.pop()
            continue

        child = os.path.join(path, name)
        try:
            child_st = os.lstat(child)
        except OSError as e:
            yield WalkEntry(path=child, error=e)
            continue
        yield from _enter(child, child_st, stack)


def _enter(
    path: str, st: os.stat_result, stack: list[tuple[str, Iterator[str]]]
) -> list[WalkEntry]:
    """Build the entries for path and push its listing when it is a directory."""
    is_dir = stat.S_ISDIR(st.st_mode)
    entries = [WalkEntry(path=path, is_dir=is_dir, size=st.st_size)]

    if not is_dir:
        return entries

    try:
        names = sorted(os.listdir(path))
    except OSError as e:
        logger.debug("Cannot list directory %s: %s", path, e)
        entries.append(WalkEntry(path=path, is_dir=True, size=st.st_size, error=e))
        return entries

    stack.append((path, iter(names)))
    return entries
