"""Configuration model — immutable settings for a FileSystem."""

from __future__ import annotations

import dataclasses

DEFAULT_SEPARATOR = "\\"
DEFAULT_ROOT_NAME = "."


@dataclasses.dataclass(frozen=True)
class FileSystemConfig:
    """Describes how a filesystem parses paths and renders listings.

    :param separator: Single reserved character splitting path segments.
    :param root_name: Name given to the root directory.
    :param sorted_listing: List children in lexicographic order instead of
        insertion order.
    """

    separator: str = DEFAULT_SEPARATOR
    root_name: str = DEFAULT_ROOT_NAME
    sorted_listing: bool = True

    def validate(self) -> None:
        """Validate the settings.

        :raises ValueError: If the separator is not a single character or the
            root name is empty.
        """
        if not isinstance(self.separator, str) or len(self.separator) != 1:
            raise ValueError(f"Separator must be a single character, got {self.separator!r}")
        if self.separator == "\0":
            raise ValueError("Separator must not be the null character")
        if not self.root_name:
            raise ValueError("Root name must not be empty")

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> FileSystemConfig:
        """Construct from a plain dict (e.g. parsed TOML/JSON).

        :param data: Dict with any of ``separator``, ``root_name`` and
            ``sorted_listing`` keys.
        :raises TypeError: If ``data`` holds unknown keys or a non-bool
            ``sorted_listing``.
        """
        known = {f.name for f in dataclasses.fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            msg = f"Unknown config keys {unknown}. Expected a subset of {sorted(known)}"
            raise TypeError(msg)
        sorted_listing = data.get("sorted_listing", True)
        if not isinstance(sorted_listing, bool):
            msg = f"'sorted_listing' must be a bool, got {type(sorted_listing).__name__}"
            raise TypeError(msg)
        return cls(
            separator=str(data.get("separator", DEFAULT_SEPARATOR)),
            root_name=str(data.get("root_name", DEFAULT_ROOT_NAME)),
            sorted_listing=sorted_listing,
        )
