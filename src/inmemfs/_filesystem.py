"""FileSystem — the primary user-facing abstraction."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, TextIO

from inmemfs._config import FileSystemConfig
from inmemfs._errors import NotADirectory, NotFound
from inmemfs._models import FileInfo, FolderInfo
from inmemfs._nodes import Directory, File

if TYPE_CHECKING:
    from types import TracebackType

    from inmemfs._nodes import Node
    from inmemfs._types import Clock, WritableContent

log = logging.getLogger(__name__)

# Process-wide instance handed out by get_instance(); lives until reset or exit.
_INSTANCE: FileSystem | None = None


class FileSystem:
    """An in-memory tree of directories and files rooted at a single directory.

    Every path argument is split on the configured separator and resolved
    relative to the root. The root itself is never reachable by a path
    operation, so it cannot be replaced or deleted.

    :param config: Optional configuration. Validates immediately.
    :param clock: Zero-argument callable returning a monotonic timestamp.
        Defaults to :func:`time.monotonic`.
    :raises ValueError: If config is invalid.
    """

    def __init__(self, config: FileSystemConfig | None = None, *, clock: Clock | None = None) -> None:
        self._config = config or FileSystemConfig()
        self._config.validate()
        self._clock = clock or time.monotonic
        self._root = self._new_root()

    def _new_root(self) -> Directory:
        return Directory(
            self._config.root_name,
            separator=self._config.separator,
            clock=self._clock,
            sorted_listing=self._config.sorted_listing,
        )

    def __repr__(self) -> str:
        return f"FileSystem(separator={self._config.separator!r}, total_size={self.total_size()})"

    @property
    def config(self) -> FileSystemConfig:
        return self._config

    @property
    def root(self) -> Directory:
        """The root directory. Path operations never replace or remove it."""
        return self._root

    def close(self) -> None:
        """Drop the whole tree and start over with an empty root."""
        log.debug("Releasing tree rooted at %r", self._root.name)
        self._root = self._new_root()

    def __enter__(self) -> FileSystem:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    @staticmethod
    def _read_content(content: WritableContent) -> bytes | bytearray | memoryview:
        if isinstance(content, (bytes, bytearray, memoryview)):
            return content
        if hasattr(content, "read"):
            data = content.read()
            if not isinstance(data, (bytes, bytearray)):
                raise TypeError(f"Stream must yield bytes, got {type(data).__name__}")
            return data
        raise TypeError(f"Content must be bytes-like or a binary stream, got {type(content).__name__}")

    # region: tree mutation
    def add(self, path: str, content: WritableContent, size: int | None = None) -> None:
        """Insert a file at ``path``, creating missing directories on the way.

        The payload is copied, so the caller may reuse its buffer right away.
        Anything already at ``path`` is replaced together with its subtree.

        :param content: Bytes-like payload or a binary stream, read fully.
        :param size: Number of leading bytes to keep. Defaults to all of them.
        :raises NotADirectory: If a non-terminal segment names an existing file.
        :raises ValueError: If ``size`` is negative or larger than the payload.
        """
        data = self._read_content(content)
        if size is None:
            size = memoryview(data).nbytes
        self._root.add(path, data, size)

    def delete(self, path: str, *, missing_ok: bool = True) -> None:
        """Delete the file or directory at ``path``, recursively.

        Empty ancestor directories are left in place.

        :raises NotFound: If nothing is at ``path`` and ``missing_ok`` is ``False``.
        """
        self._root.delete(path, missing_ok=missing_ok)

    # endregion

    # region: listing and size
    def list(self, *, file: TextIO | None = None) -> None:
        """Write the listing of the whole tree to ``file`` (default stdout)."""
        self._root.list(0, file=file)

    def listing(self) -> str:
        """Return the listing of the whole tree as one string."""
        return "".join(line + "\n" for line in self._root.iter_lines(0))

    def total_size(self) -> int:
        """Sum of the sizes of every file in the tree."""
        return self._root.size()

    # endregion

    # region: lookups
    def _find(self, path: str) -> Node | None:
        try:
            return self._root.lookup(path)
        except (NotFound, NotADirectory):
            return None

    def exists(self, path: str) -> bool:
        """Check if a file or directory exists. Never raises ``NotFound``."""
        return self._find(path) is not None

    def is_file(self, path: str) -> bool:
        """Check if path is an existing file."""
        node = self._find(path)
        return node is not None and node.is_file()

    def is_folder(self, path: str) -> bool:
        """Check if path is an existing directory."""
        node = self._find(path)
        return node is not None and not node.is_file()

    def _get_file(self, path: str) -> File:
        node = self._root.lookup(path)
        if not isinstance(node, File):
            raise NotFound(f"File not found: {path}", path=path)
        return node

    def read_bytes(self, path: str) -> bytes:
        """Return the contents of the file at ``path``.

        :raises NotFound: If no file is at ``path``.
        :raises NotADirectory: If a non-terminal segment names a file.
        """
        return self._get_file(path).contents

    def get_file_info(self, path: str) -> FileInfo:
        """Get file metadata.

        :raises NotFound: If no file is at ``path``.
        """
        node = self._get_file(path)
        return FileInfo(
            path=path,
            name=node.name,
            size=node.size(),
            created_at=node.creation_time,
            modified_at=node.last_modified_time,
        )

    def get_folder_info(self, path: str | None = None) -> FolderInfo:
        """Get directory metadata. ``None`` selects the root.

        :raises NotFound: If no directory is at ``path``.
        """
        node = self._root if path is None else self._root.lookup(path)
        if not isinstance(node, Directory):
            raise NotFound(f"Folder not found: {path}", path=path)
        return FolderInfo(
            path=path,
            name=node.name,
            file_count=node.file_count(),
            total_size=node.size(),
            created_at=node.creation_time,
            modified_at=node.last_modified_time,
        )

    # endregion


def get_instance() -> FileSystem:
    """Return the process-wide filesystem, creating it on first use.

    The instance uses the default configuration and lives until
    :func:`reset_instance` is called or the process exits.
    """
    global _INSTANCE  # noqa: PLW0603
    if _INSTANCE is None:
        _INSTANCE = FileSystem()
        log.debug("Created shared filesystem instance")
    return _INSTANCE


def reset_instance() -> None:
    """Drop the process-wide filesystem and its whole tree."""
    global _INSTANCE  # noqa: PLW0603
    _INSTANCE = None
