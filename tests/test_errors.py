"""Tests for the error hierarchy."""

from __future__ import annotations

import pytest

from inmemfs._errors import FileSystemError, InvalidPath, NotADirectory, NotFound


class TestBaseError:
    """FileSystemError carries an optional path."""

    def test_default_attributes(self) -> None:
        e = FileSystemError("boom")
        assert e.path is None
        assert str(e) == "boom"

    def test_with_path(self) -> None:
        e = FileSystemError("boom", path="a\\b.txt")
        assert e.path == "a\\b.txt"
        assert str(e) == "boom | path='a\\\\b.txt'"

    def test_repr(self) -> None:
        assert repr(FileSystemError("boom")) == "FileSystemError('boom')"
        assert repr(NotFound("gone", path="x")) == "NotFound('gone', path='x')"


class TestSubclasses:
    """Every concrete error derives from FileSystemError."""

    @pytest.mark.parametrize("cls", [NotFound, NotADirectory, InvalidPath])
    def test_is_filesystem_error(self, cls: type[FileSystemError]) -> None:
        assert issubclass(cls, FileSystemError)

    def test_catchable_via_base(self) -> None:
        with pytest.raises(FileSystemError):
            raise NotADirectory("not a dir", path="f.txt\\x")

    def test_not_found_path(self) -> None:
        e = NotFound("missing", path="data\\file.txt")
        assert e.path == "data\\file.txt"
