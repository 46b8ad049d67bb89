"""Path splitting over a single reserved separator character."""

from __future__ import annotations

from typing import TYPE_CHECKING

from inmemfs._errors import InvalidPath

if TYPE_CHECKING:
    from collections.abc import Iterator


def _check(path: object) -> str:
    if not isinstance(path, str):
        raise InvalidPath(f"Path must be a str, got {type(path).__name__}", path=repr(path))
    if "\0" in path:
        raise InvalidPath("Path contains null byte", path=path)
    return path


def split_path(path: str, separator: str) -> tuple[str, str | None]:
    """Split ``path`` at its first separator.

    Returns ``(head, tail)`` where ``tail`` is ``None`` when the path holds
    no separator. Either part may be the empty string; no normalization is
    applied, so a trailing separator yields an empty tail.

    :raises InvalidPath: If ``path`` is not a string or contains a null byte.
    """
    path = _check(path)
    head, sep, tail = path.partition(separator)
    if not sep:
        return head, None
    return head, tail


def iter_segments(path: str, separator: str) -> Iterator[str]:
    """Yield every segment of ``path`` in order, empty ones included."""
    yield from _check(path).split(separator)
