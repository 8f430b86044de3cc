"""te - render text templates against filesystem helper functions."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("te-render")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "unknown"
