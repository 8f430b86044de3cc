"""Diagnostic logging to standard error.

Lines look like ``Oct/19;14:05 wrote 120 bytes to README.md``.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

LOG_FORMAT = "%(asctime)s %(message)s"
LOGGER_NAME = "te_render"

# English abbreviations regardless of LC_TIME.
MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)  # fmt: skip


class TimestampFormatter(logging.Formatter):
    """Formats ``asctime`` as ``Mon/DD;HH:MM`` in local time."""

    def __init__(self) -> None:
        super().__init__(LOG_FORMAT)

    def formatTime(  # noqa: N802
        self, record: logging.LogRecord, datefmt: str | None = None
    ) -> str:
        ct = self.converter(record.created)
        return (
            f"{MONTHS[ct.tm_mon - 1]}/{ct.tm_mday:02d};"
            f"{ct.tm_hour:02d}:{ct.tm_min:02d}"
        )


def configure_logging(verbose: bool = False, stream: TextIO | None = None) -> None:
    """Attach a single stderr handler to the package logger."""
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(TimestampFormatter())
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    logger.propagate = False
