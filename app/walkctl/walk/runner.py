"""Traversal run loop.

Walks a tree once, filters every visited entry and dispatches each
remaining file to exactly one action. The first error stops the run.
"""

import logging

from walkctl.walk.actions import archive_file, delete_file, list_file, validate_destination
from walkctl.walk.deletelog import create_delete_logger
from walkctl.walk.errors import TraversalError
from walkctl.walk.filters import should_skip
from walkctl.walk.models import ActionKind, WalkConfig, WalkSummary
from walkctl.walk.traversal import walk_tree

logger = logging.getLogger(__name__)


def run(root: str, config: WalkConfig) -> WalkSummary:
    """Walk root and apply the configured action to every matching file.

    Action precedence, first match wins:
    1. list_only: list the path and do nothing else.
    2. archive_dir: archive, then delete if requested, otherwise list.
    3. delete: delete the file.
    4. Nothing requested: list the path.

    Args:
        root: Traversal root.
        config: Filters, actions and sinks for this run.

    Returns:
        Summary of what the run did.

    Raises:
        TraversalError: If an entry cannot be reached.
        WalkError: If any action fails. Entries after the failing one
            are left untouched.
    """
    if config.archive_dir and not config.list_only:
        validate_destination(config.archive_dir)

    delete_logger = create_delete_logger(config.delete_log)
    summary = WalkSummary()

    for entry in walk_tree(root):
        if entry.error is not None:
            raise TraversalError(f"Cannot walk {entry.path}: {entry.error}") from entry.error

        summary.visited += 1
        if should_skip(entry.path, config.extensions, config.min_size, entry, config.name_length):
            summary.skipped += 1
            continue

        kind = dispatch(root, entry.path, config, delete_logger)
        summary.record(kind)

    logger.debug(
        "Walked %s: %d visited, %d skipped", root, summary.visited, summary.skipped
    )
    return summary


def dispatch(
    root: str,
    path: str,
    config: WalkConfig,
    delete_logger: logging.Logger,
) -> ActionKind:
    """Perform the single action selected for a non-skipped file.

    Returns:
        The action that was performed.
    """
    if config.list_only:
        list_file(path, config.out)
        return ActionKind.LIST

    if config.archive_dir:
        archive_file(config.archive_dir, root, path)
        if config.delete:
            delete_file(path, delete_logger)
            return ActionKind.ARCHIVE_DELETE
        list_file(path, config.out)
        return ActionKind.ARCHIVE

    if config.delete:
        delete_file(path, delete_logger)
        return ActionKind.DELETE

    list_file(path, config.out)
    return ActionKind.LIST
