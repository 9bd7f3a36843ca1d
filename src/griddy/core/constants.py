"""Shared constants for grid navigation and rendering."""

from __future__ import annotations

from enum import Enum


class _Empty:
    """Marker type for a cell that holds no payload."""

    _instance: _Empty | None = None

    def __new__(cls) -> _Empty:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "EMPTY"

    def __reduce__(self) -> str:
        return "EMPTY"

    def __copy__(self) -> _Empty:
        return self

    def __deepcopy__(self, memo: dict) -> _Empty:
        return self


# The "no payload" value. Distinct from None, which is a valid payload.
EMPTY = _Empty()


class Direction(str, Enum):
    """Cursor movement directions accepted by ``Griddy.move``."""
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def delta(self) -> tuple[int, int]:
        """Unit (row, col) offset for one step in this direction."""
        return _DELTAS[self]


_DELTAS = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}

# Text rendering defaults
DEFAULT_CONTENT = "x"
DEFAULT_EMPTY = "-"
DEFAULT_SEPARATOR = " "
DEFAULT_WRAPPER = "[]"
