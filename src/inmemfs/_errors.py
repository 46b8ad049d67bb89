"""Normalized error hierarchy for inmemfs."""

from __future__ import annotations

from typing import Optional


class FileSystemError(Exception):
    """Base class for all inmemfs errors.

    :param message: Human-readable error description.
    :param path: The path involved in the error, if any.
    """

    def __init__(self, message: str = "", *, path: Optional[str] = None) -> None:
        self.path = path
        super().__init__(message)

    def __str__(self) -> str:
        base = super().__str__()
        if self.path is None:
            return base
        return f"{base} | path={self.path!r}"

    def __repr__(self) -> str:
        cls = type(self).__name__
        args = [repr(super().__str__())]
        if self.path is not None:
            args.append(f"path={self.path!r}")
        return f"{cls}({', '.join(args)})"


class NotFound(FileSystemError):
    """Raised when a file or directory does not exist."""


class NotADirectory(FileSystemError):
    """Raised when a non-terminal path segment names an existing file."""


class InvalidPath(FileSystemError):
    """Raised for paths that are not strings or contain a null byte."""
