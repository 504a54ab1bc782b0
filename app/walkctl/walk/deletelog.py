"""Delete log.

Each successful deletion is recorded as one line on the delete-log
sink, rendered as ``DELETED FILE: YYYY/MM/DD HH:MM:SS <path>``.
"""

import logging
from typing import TextIO

DELETE_LOG_PREFIX = "DELETED FILE: "
DELETE_LOG_DATEFMT = "%Y/%m/%d %H:%M:%S"


class _StrictStreamHandler(logging.StreamHandler):
    """Stream handler that re-raises write failures instead of reporting them."""

    def handleError(self, record: logging.LogRecord) -> None:  # noqa: N802
        raise  # noqa: PLE0704


def create_delete_logger(sink: TextIO, prefix: str = DELETE_LOG_PREFIX) -> logging.Logger:
    """Build a logger that writes deletion records to sink.

    The logger is not registered with the logging manager and does not
    propagate, so records never reach the application's diagnostic
    handlers and a new logger is built for every run.

    Args:
        sink: Writable text stream for deletion records.
        prefix: Text placed before the timestamp on every line.

    Returns:
        Logger emitting one line per ``info`` call.
    """
    delete_logger = logging.Logger("walkctl.deletions", level=logging.INFO)
    delete_logger.propagate = False

    handler = _StrictStreamHandler(sink)
    handler.setFormatter(
        logging.Formatter(f"{prefix}%(asctime)s %(message)s", datefmt=DELETE_LOG_DATEFMT)
    )
    delete_logger.addHandler(handler)
    return delete_logger
