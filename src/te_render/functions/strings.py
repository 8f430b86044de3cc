"""String and environment helpers exposed to templates.

Argument order follows the template-facing names: the subject string comes
first, e.g. ``HasPrefix(name, "test_")`` or ``Join(items, ", ")``.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path


def user_home_dir() -> str:
    """Home directory of the current user.

    Raises:
        RuntimeError: If the home directory cannot be resolved.
    """
    return str(Path.home())


def has_prefix(s: str, prefix: str) -> bool:
    """Whether ``s`` starts with ``prefix``."""
    return s.startswith(prefix)


def has_suffix(s: str, suffix: str) -> bool:
    """Whether ``s`` ends with ``suffix``."""
    return s.endswith(suffix)


def trim_prefix(s: str, prefix: str) -> str:
    """``s`` without one leading ``prefix``."""
    return s.removeprefix(prefix)


def trim_suffix(s: str, suffix: str) -> str:
    """``s`` without one trailing ``suffix``."""
    return s.removesuffix(suffix)


def trim_space(s: str) -> str:
    """``s`` without leading and trailing whitespace."""
    return s.strip()


def contains(s: str, substr: str) -> bool:
    """Whether ``substr`` occurs in ``s``."""
    return substr in s


def join(elems: Iterable[str], sep: str) -> str:
    """Elements joined with ``sep``."""
    return sep.join(elems)


def split(s: str, sep: str) -> list[str]:
    """Substrings of ``s`` between each ``sep``; an empty ``sep`` splits characters."""
    if sep == "":
        return list(s)
    return s.split(sep)
