"""Cursor - current selection and the clamp/wrap coordinate arithmetic."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from griddy.core.errors import UndefinedAxisError


@dataclass(frozen=True, slots=True)
class Position:
    """A (row, col) coordinate."""
    row: int
    col: int

    def __iter__(self) -> Iterator[int]:
        yield self.row
        yield self.col


@dataclass(frozen=True, slots=True)
class Size:
    """Grid dimensions."""
    rows: int
    cols: int

    def __iter__(self) -> Iterator[int]:
        yield self.rows
        yield self.cols


def clamp(value: int, dimension: int) -> int:
    """Saturate value into [0, dimension - 1]."""
    if value >= dimension:
        value = dimension - 1
    if value < 0:
        value = 0
    return value


def wrap(row: int, col: int, rows: int, cols: int) -> tuple[int, int]:
    """Resolve (row, col) on a toroidal grid.

    The grid is read as one row-major sequence of ``rows * cols`` cells
    joined end to end. Running off the right edge continues at the left
    edge of the next row, running off the left edge continues at the
    right edge of the previous row, and the last cell is followed by the
    first one.

    Args:
        row: Raw row, may be any integer
        col: Raw column, may be any integer
        rows: Number of rows (must be > 0)
        cols: Number of columns (must be > 0)

    Returns:
        In-bounds (row, col) tuple
    """
    flat = (row * cols + col) % (rows * cols)
    return flat // cols, flat % cols


class Cursor:
    """
    The single current selection of a grid.

    The cursor only knows how to resolve coordinates against the
    dimensions it is given; the grid owns the dimensions and asks the
    cursor to reclamp itself whenever they change.
    """

    def __init__(self, row: int = 0, col: int = 0) -> None:
        self.row = row
        self.col = col

    @property
    def position(self) -> Position:
        return Position(self.row, self.col)

    def resolve(
        self,
        row: int | None,
        col: int | None,
        rows: int,
        cols: int,
        wrap_around: bool = False,
    ) -> Position:
        """Compute where a selection would land without moving.

        ``None`` for an axis keeps the current value.

        Raises:
            UndefinedAxisError: If either dimension is zero
        """
        if rows <= 0 or cols <= 0:
            raise UndefinedAxisError(
                f"cannot resolve a cell on a {rows}x{cols} grid"
            )

        r = self.row if row is None else row
        c = self.col if col is None else col

        if wrap_around:
            r, c = wrap(r, c, rows, cols)
        else:
            r = clamp(r, rows)
            c = clamp(c, cols)
        return Position(r, c)

    def move_to(self, position: Position) -> None:
        """Jump to an already resolved position."""
        self.row, self.col = position

    def reclamp(self, rows: int, cols: int) -> None:
        """Pull the cursor back inside new bounds (parks at 0,0 when empty)."""
        if rows <= 0 or cols <= 0:
            self.row = 0
            self.col = 0
            return
        self.row = clamp(self.row, rows)
        self.col = clamp(self.col, cols)

    def __repr__(self) -> str:
        return f"Cursor(row={self.row}, col={self.col})"
