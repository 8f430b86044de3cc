"""Write rendered output to a file only when its content changed."""

from __future__ import annotations

import logging
import os

from pydantic import BaseModel

logger = logging.getLogger(__name__)


class WriteOutcome(BaseModel):
    """Result of a write-if-changed attempt."""

    path: str
    written: bool
    bytes_written: int = 0


def write_if_changed(path: str, data: bytes, mode: int = 0o644) -> WriteOutcome:
    """Replace the contents of ``path`` with ``data`` unless they already match.

    A new file is created with permission bits ``mode`` (subject to umask);
    an existing file keeps its permissions.

    Raises:
        OSError: If the file cannot be written.
    """
    try:
        with open(path, "rb") as f:
            current = f.read()
    except OSError:
        current = None

    if current == data:
        return WriteOutcome(path=path, written=False)

    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, mode)
    with os.fdopen(fd, "wb") as f:
        f.write(data)

    logger.info("wrote %d bytes to %s", len(data), path)
    return WriteOutcome(path=path, written=True, bytes_written=len(data))
