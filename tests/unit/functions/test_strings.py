"""Tests for string and environment helpers."""

from pathlib import Path

import pytest

from te_render.functions.strings import (
    contains,
    has_prefix,
    has_suffix,
    join,
    split,
    trim_prefix,
    trim_space,
    trim_suffix,
    user_home_dir,
)


class TestPrefixSuffix:
    """Test prefix and suffix helpers."""

    def test_has_prefix(self) -> None:
        """Test that prefix matching is exact."""
        assert has_prefix("test_cli.py", "test_") is True
        assert has_prefix("cli.py", "test_") is False

    def test_has_suffix(self) -> None:
        """Test that suffix matching is exact."""
        assert has_suffix("cli.py", ".py") is True
        assert has_suffix("cli.pyc", ".py") is False

    def test_trim_prefix_once(self) -> None:
        """Test that only one leading prefix is removed."""
        assert trim_prefix("aab", "a") == "ab"
        assert trim_prefix("b", "a") == "b"

    def test_trim_suffix_once(self) -> None:
        """Test that only one trailing suffix is removed."""
        assert trim_suffix("notes.md.md", ".md") == "notes.md"
        assert trim_suffix("notes", ".md") == "notes"


class TestStringHelpers:
    """Test remaining pass-through helpers."""

    def test_trim_space(self) -> None:
        """Test that surrounding whitespace is stripped."""
        assert trim_space("  \tvalue\n") == "value"

    def test_contains(self) -> None:
        """Test substring containment."""
        assert contains("README.md", "ME") is True
        assert contains("README.md", "txt") is False

    def test_join(self) -> None:
        """Test that elements are joined with the separator."""
        assert join(["a.txt", "b.txt"], ",") == "a.txt,b.txt"
        assert join([], ",") == ""

    def test_split(self) -> None:
        """Test that empty fields are kept when splitting."""
        assert split("a,b,,c", ",") == ["a", "b", "", "c"]
        assert split("", ",") == [""]

    def test_split_empty_separator(self) -> None:
        """Test that an empty separator splits into characters."""
        assert split("abc", "") == ["a", "b", "c"]

    def test_user_home_dir(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test that the home directory follows HOME."""
        monkeypatch.setenv("HOME", str(tmp_path))
        assert user_home_dir() == str(tmp_path)
