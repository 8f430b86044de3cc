"""Directory listing helpers exposed to templates.

Listings are non-recursive, skip hidden names, and never follow symlinks.
Names come back sorted, the way the directory reader of the original tool
returns them.
"""

from __future__ import annotations

import os
import stat
from collections.abc import Callable


def _list_entries(path: str, keep: Callable[[os.DirEntry[str]], bool]) -> list[str]:
    """List visible entries of ``path`` accepted by ``keep``.

    Raises:
        OSError: If ``path`` cannot be stat-ed or read.
    """
    info = os.lstat(path)
    if not stat.S_ISDIR(info.st_mode):
        return []

    with os.scandir(path) as entries:
        names = [
            entry.name
            for entry in entries
            if not entry.name.startswith(".") and keep(entry)
        ]
    return sorted(names)


def _is_regular_file(entry: os.DirEntry[str]) -> bool:
    return entry.is_file(follow_symlinks=False)


def _is_directory(entry: os.DirEntry[str]) -> bool:
    return entry.is_dir(follow_symlinks=False)


def files(path: str) -> list[str]:
    """Regular files directly inside a directory."""
    return _list_entries(path, _is_regular_file)


def dirs(path: str) -> list[str]:
    """Subdirectories directly inside a directory."""
    return _list_entries(path, _is_directory)


def files_dirs(path: str) -> list[str]:
    """Files of a directory followed by its subdirectories."""
    return files(path) + dirs(path)


def dirs_files(path: str) -> list[str]:
    """Subdirectories of a directory followed by its files."""
    return dirs(path) + files(path)
