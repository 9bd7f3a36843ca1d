"""Shared fixtures for grid tests."""

from typing import Any

import pytest

from griddy import Griddy, UndoHistory


class RecordingHook:
    """History hook that keeps every call and what the grid looked like then."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple[Any, ...]]] = []
        self.snapshots: list[Any] = []
        self.grid: Griddy | None = None

    def register(self, operation: str, args: tuple[Any, ...]) -> None:
        self.calls.append((operation, args))
        if self.grid is None:
            return
        if operation == "select":
            self.snapshots.append(self.grid.current())
        else:
            _, row, col = args
            self.snapshots.append(self.grid.is_empty(row, col))


@pytest.fixture
def grid() -> Griddy:
    """A 3x3 grid with no history."""
    return Griddy(3, 3)


@pytest.fixture
def wide_grid() -> Griddy:
    """A 3x4 grid with no history."""
    return Griddy(3, 4)


@pytest.fixture
def hook() -> RecordingHook:
    return RecordingHook()


@pytest.fixture
def hooked_grid(hook: RecordingHook) -> Griddy:
    """A 3x3 grid reporting to a RecordingHook."""
    g = Griddy(3, 3, history=hook)
    hook.grid = g
    return g


@pytest.fixture
def history() -> UndoHistory:
    return UndoHistory()


@pytest.fixture
def undoable_grid(history: UndoHistory) -> Griddy:
    """A 3x3 grid attached to an UndoHistory."""
    return Griddy(3, 3, history=history)
