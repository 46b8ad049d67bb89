"""Immutable metadata snapshots of tree nodes."""

from __future__ import annotations

import dataclasses


@dataclasses.dataclass(frozen=True, eq=False)
class FileInfo:
    """Immutable snapshot of file metadata.

    :param path: Path the file was looked up by.
    :param name: File name (terminal path segment).
    :param size: File size in bytes.
    :param created_at: Monotonic creation timestamp.
    :param modified_at: Monotonic last-modified timestamp.
    """

    path: str
    name: str
    size: int
    created_at: float
    modified_at: float

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FileInfo):
            return self.path == other.path
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.path)


@dataclasses.dataclass(frozen=True, eq=False)
class FolderInfo:
    """Aggregated directory metadata.

    :param path: Path the directory was looked up by, or ``None`` for the root.
    :param name: Directory name.
    :param file_count: Number of files anywhere below the directory.
    :param total_size: Total size of those files in bytes.
    :param created_at: Monotonic creation timestamp.
    :param modified_at: Monotonic last-modified timestamp.
    """

    path: str | None
    name: str
    file_count: int
    total_size: int
    created_at: float
    modified_at: float

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FolderInfo):
            return self.path == other.path
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.path)
