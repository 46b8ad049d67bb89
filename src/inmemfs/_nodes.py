"""Tree nodes — the file/directory contract and the path-addressed directory."""

from __future__ import annotations

import abc
import logging
import sys
import time
from typing import TYPE_CHECKING, TextIO

from inmemfs._config import DEFAULT_SEPARATOR
from inmemfs._errors import NotADirectory, NotFound
from inmemfs._path import iter_segments

if TYPE_CHECKING:
    from collections.abc import Iterator

    from inmemfs._types import Clock

log = logging.getLogger(__name__)


class Node(abc.ABC):
    """Abstract base class for every element of the tree.

    A node owns its name and two monotonic timestamps. Subclasses decide
    whether they are files, how big they are and how they render.

    :param name: Path segment naming this node within its parent.
    :param clock: Zero-argument callable returning a monotonic timestamp.
    """

    name: str
    creation_time: float
    last_modified_time: float

    def __init__(self, name: str, *, clock: Clock | None = None) -> None:
        self._clock = clock or time.monotonic
        self.initialize(name)

    def initialize(self, name: str) -> None:
        """Set the name and stamp both timestamps from a single clock read."""
        self.name = name
        self.creation_time = self._clock()
        self.last_modified_time = self.creation_time

    @abc.abstractmethod
    def is_file(self) -> bool:
        """Return ``True`` for files, ``False`` for directories."""

    @abc.abstractmethod
    def size(self) -> int:
        """Size in bytes. Directories sum their children on every call."""

    @abc.abstractmethod
    def iter_lines(self, indent: int = 0) -> Iterator[str]:
        """Yield the listing lines for this node, without line endings."""

    def list(self, indent: int = 0, *, file: TextIO | None = None) -> None:
        """Write the listing rooted at this node to ``file`` (default stdout)."""
        out = file if file is not None else sys.stdout
        for line in self.iter_lines(indent):
            out.write(line + "\n")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, size={self.size()})"


class File(Node):
    """Leaf node owning an immutable copy of its contents."""

    def __init__(self, name: str, *, clock: Clock | None = None) -> None:
        super().__init__(name, clock=clock)
        self.contents = b""
        self._size = 0

    def is_file(self) -> bool:
        return True

    def size(self) -> int:
        return self._size

    def fill(self, data: bytes | bytearray | memoryview, size: int) -> None:
        """Replace the contents with a copy of the first ``size`` bytes of ``data``.

        :raises ValueError: If ``size`` is negative or exceeds ``len(data)``.
        """
        payload = memoryview(data).tobytes()
        if size < 0:
            raise ValueError(f"Size must be non-negative, got {size}")
        if size > len(payload):
            raise ValueError(f"Size {size} exceeds the {len(payload)} bytes provided")
        self.contents = payload if size == len(payload) else payload[:size]
        self._size = size

    def iter_lines(self, indent: int = 0) -> Iterator[str]:
        yield f"{' ' * indent}- {self.name} ({self._size} bytes)"


class Directory(Node):
    """Interior node owning a name-to-child mapping.

    Insertion, deletion and lookup walk the path one segment per level
    without recursing, so path depth is bounded only by memory. Removing an
    entry from ``children`` drops the whole subtree under it.

    :param name: Path segment naming this directory.
    :param separator: Reserved character splitting path segments.
    :param clock: Zero-argument callable returning a monotonic timestamp.
    :param sorted_listing: List children lexicographically rather than in
        insertion order.
    """

    def __init__(
        self,
        name: str,
        *,
        separator: str = DEFAULT_SEPARATOR,
        clock: Clock | None = None,
        sorted_listing: bool = True,
    ) -> None:
        super().__init__(name, clock=clock)
        self.children: dict[str, Node] = {}
        self._separator = separator
        self._sorted_listing = sorted_listing

    def is_file(self) -> bool:
        return False

    def size(self) -> int:
        total = 0
        pending: list[Directory] = [self]
        while pending:
            for child in pending.pop().children.values():
                if isinstance(child, Directory):
                    pending.append(child)
                else:
                    total += child.size()
        return total

    def _ordered_children(self) -> list[Node]:
        if self._sorted_listing:
            return [self.children[key] for key in sorted(self.children)]
        return [*self.children.values()]

    def _walk(self, indent: int) -> Iterator[tuple[Node, int]]:
        # Explicit stack; children pushed in reverse to pop in listing order.
        stack: list[tuple[Node, int]] = [(child, indent) for child in reversed(self._ordered_children())]
        while stack:
            node, depth = stack.pop()
            yield node, depth
            if isinstance(node, Directory):
                stack.extend((child, depth + 2) for child in reversed(node._ordered_children()))

    def iter_lines(self, indent: int = 0) -> Iterator[str]:
        yield f"{' ' * indent}+ {self.name}/"
        for node, depth in self._walk(indent + 2):
            if isinstance(node, Directory):
                yield f"{' ' * depth}+ {node.name}/"
            else:
                yield from node.iter_lines(depth)

    def iter_nodes(self) -> Iterator[Node]:
        """Yield every descendant depth-first, excluding this directory."""
        for node, _ in self._walk(0):
            yield node

    def file_count(self) -> int:
        """Number of files anywhere below this directory."""
        return sum(1 for node in self.iter_nodes() if node.is_file())

    def _new_directory(self, name: str) -> Directory:
        return Directory(
            name,
            separator=self._separator,
            clock=self._clock,
            sorted_listing=self._sorted_listing,
        )

    def _split(self, path: str) -> tuple[list[str], str]:
        segments = [*iter_segments(path, self._separator)]
        return segments[:-1], segments[-1]

    def add(self, path: str, data: bytes | bytearray | memoryview, size: int) -> File:
        """Insert a file at ``path``, creating missing directories on the way.

        A file or directory already at the terminal segment is replaced.
        Directories created before a failure are kept.

        :returns: The newly installed file.
        :raises NotADirectory: If a non-terminal segment names an existing file.
        :raises ValueError: If ``size`` is negative or exceeds ``len(data)``.
        """
        parents, name = self._split(path)
        current = self
        for segment in parents:
            child = current.children.get(segment)
            if child is None:
                child = current._new_directory(segment)
                current.children[segment] = child
                log.debug("Created directory %r under %r", segment, current.name)
            elif not isinstance(child, Directory):
                raise NotADirectory(f"Not a directory: {segment}", path=path)
            current = child

        new_file = File(name, clock=self._clock)
        new_file.fill(data, size)
        previous = current.children.get(name)
        current.children[name] = new_file
        if previous is None:
            log.debug("Created file %r (%d bytes)", path, size)
        else:
            log.debug("Replaced %s %r with %d bytes", "file" if previous.is_file() else "directory", path, size)
        return new_file

    def _find_parent(self, parents: list[str]) -> Directory | None:
        current = self
        for segment in parents:
            child = current.children.get(segment)
            if not isinstance(child, Directory):
                return None
            current = child
        return current

    def delete(self, path: str, *, missing_ok: bool = True) -> None:
        """Remove the node at ``path`` together with its whole subtree.

        Intermediate directories are never pruned. Descending through a file
        counts as a missing path.

        :raises NotFound: If nothing is at ``path`` and ``missing_ok`` is ``False``.
        """
        parents, name = self._split(path)
        parent = self._find_parent(parents)
        removed = None if parent is None else parent.children.pop(name, None)
        if removed is not None:
            log.debug("Deleted %s %r", "file" if removed.is_file() else "directory", path)
            return
        if not missing_ok:
            raise NotFound(f"Path not found: {path}", path=path)
        log.debug("Nothing to delete at %r", path)

    def lookup(self, path: str) -> Node:
        """Return the node at ``path`` relative to this directory.

        :raises NotFound: If any segment is absent.
        :raises NotADirectory: If a non-terminal segment names a file.
        """
        parents, name = self._split(path)
        current = self
        for segment in parents:
            child = current.children.get(segment)
            if child is None:
                raise NotFound(f"Path not found: {path}", path=path)
            if not isinstance(child, Directory):
                raise NotADirectory(f"Not a directory: {segment}", path=path)
            current = child
        node = current.children.get(name)
        if node is None:
            raise NotFound(f"Path not found: {path}", path=path)
        return node
