"""Shared test fixtures."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from inmemfs import FileSystem, reset_instance

if TYPE_CHECKING:
    from collections.abc import Iterator


class FakeClock:
    """Deterministic monotonic clock that advances by one on every read."""

    def __init__(self, start: float = 100.0) -> None:
        self.now = start
        self.calls = 0

    def __call__(self) -> float:
        self.calls += 1
        self.now += 1.0
        return self.now


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def fs(clock: FakeClock) -> FileSystem:
    return FileSystem(clock=clock)


@pytest.fixture
def shared_instance() -> Iterator[None]:
    reset_instance()
    yield
    reset_instance()
