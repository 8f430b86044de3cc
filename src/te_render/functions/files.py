"""Working-directory and file-content helpers exposed to templates.

Both helpers hand templates an empty string when the underlying call fails.
The failure is kept in a ``SwallowedResult`` until the template-facing
boundary so it can still be logged.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

# Error handler that round-trips bytes the text encoding cannot decode.
UNDECODABLE = "surrogateescape"


@dataclass(frozen=True)
class SwallowedResult:
    """A string value, or the error that replaced it."""

    value: str = ""
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap_or_empty(self, what: str) -> str:
        """Return the value, logging and dropping any error."""
        if self.error is not None:
            logger.debug("%s failed, using empty string: %s", what, self.error)
            return ""
        return self.value


def current_dir_name() -> SwallowedResult:
    """Base name of the current working directory."""
    try:
        cwd = os.getcwd()
    except OSError as e:
        return SwallowedResult(error=e)
    return SwallowedResult(value=os.path.basename(cwd) or cwd)


def read_text(path: str, encoding: str = "utf-8") -> SwallowedResult:
    """Whole contents of a file as text.

    Bytes that are not valid in ``encoding`` are kept as surrogate escapes,
    so encoding the text again with ``UNDECODABLE`` gives back the file bytes.
    """
    try:
        data = Path(path).read_bytes()
    except OSError as e:
        return SwallowedResult(error=e)
    return SwallowedResult(value=data.decode(encoding, errors=UNDECODABLE))


def dir_name() -> str:
    """Base name of the working directory, or "" if it cannot be determined."""
    return current_dir_name().unwrap_or_empty("getcwd")


def read_file_with(encoding: str) -> Callable[[str], str]:
    """Build a ``ReadFile`` that decodes with ``encoding``."""

    def read_file(path: str) -> str:
        """Contents of a file, or "" if it cannot be read."""
        return read_text(path, encoding).unwrap_or_empty(f"read {path}")

    return read_file


read_file = read_file_with("utf-8")
