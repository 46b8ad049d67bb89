"""Type aliases used throughout inmemfs."""

from __future__ import annotations

from typing import BinaryIO, Callable, Union

WritableContent = Union[bytes, bytearray, memoryview, BinaryIO]
Clock = Callable[[], float]
