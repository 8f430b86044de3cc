"""Template function library.

Maps every template-visible name to its implementation. The renderer
installs a copy of this table as Jinja2 globals, so templates call the
helpers directly::

    {{ Join(Files("."), ",") }}
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

from te_render.functions import files, listing, sequences, strings

FUNCTIONS: dict[str, Callable[..., Any]] = {
    "Files": listing.files,
    "Dirs": listing.dirs,
    "FilesDirs": listing.files_dirs,
    "DirsFiles": listing.dirs_files,
    "DirName": files.dir_name,
    "ReadFile": files.read_file,
    "UserHomeDir": strings.user_home_dir,
    "HasPrefix": strings.has_prefix,
    "HasSuffix": strings.has_suffix,
    "TrimPrefix": strings.trim_prefix,
    "TrimSuffix": strings.trim_suffix,
    "TrimSpace": strings.trim_space,
    "Contains": strings.contains,
    "Join": strings.join,
    "Split": strings.split,
    "Index": sequences.index,
    "Append": sequences.append,
    "MapNew": sequences.map_new,
    "MapAppend": sequences.map_append,
}


def function_table(encoding: str = "utf-8") -> dict[str, Callable[..., Any]]:
    """Fresh copy of the function table, safe to extend.

    ``ReadFile`` in the copy decodes files with ``encoding``.
    """
    table = dict(FUNCTIONS)
    table["ReadFile"] = files.read_file_with(encoding)
    return table


def _summary(func: Callable[..., Any]) -> str:
    doc = func.__doc__ or ""
    return doc.strip().splitlines()[0] if doc.strip() else ""


def describe_functions(
    table: dict[str, Callable[..., Any]] | None = None,
) -> Iterator[tuple[str, str]]:
    """Yield ``(name, summary)`` for each function, in table order."""
    for name, func in (table if table is not None else FUNCTIONS).items():
        yield name, _summary(func)
