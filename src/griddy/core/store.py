"""GridStore - rectangular backing storage for a grid."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterator

from griddy.core.constants import EMPTY
from griddy.core.errors import StructuralMisuseError

logger = logging.getLogger(__name__)


@dataclass
class GridStore:
    """
    A rows x cols buffer of payloads.

    Every position always holds either a payload or ``EMPTY``. Access
    outside the current bounds is an ``IndexError``; resolving arbitrary
    coordinates into range is the cursor's job, not the store's.
    """
    rows: int = 1
    cols: int = 1
    _buffer: list[list[Any]] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        """Initialize the buffer."""
        self._check_dimensions(self.rows, self.cols)
        if not self._buffer:
            self._buffer = [[EMPTY] * self.cols for _ in range(self.rows)]

    @staticmethod
    def _check_dimensions(rows: int, cols: int) -> None:
        if rows < 0:
            raise StructuralMisuseError(f"rows={rows} must be >= 0")
        if cols < 0:
            raise StructuralMisuseError(f"cols={cols} must be >= 0")

    def _check_bounds(self, row: int, col: int) -> None:
        if row < 0 or row >= self.rows:
            raise IndexError(f"row={row} out of bounds (rows={self.rows})")
        if col < 0 or col >= self.cols:
            raise IndexError(f"col={col} out of bounds (cols={self.cols})")

    def get(self, row: int, col: int) -> Any:
        """Get the payload at (row, col), or EMPTY."""
        self._check_bounds(row, col)
        return self._buffer[row][col]

    def set(self, row: int, col: int, payload: Any) -> None:
        """Store a payload at (row, col)."""
        self._check_bounds(row, col)
        self._buffer[row][col] = payload

    def __getitem__(self, pos: tuple[int, int]) -> Any:
        """Get payload using indexing: store[row, col]."""
        row, col = pos
        return self.get(row, col)

    def __setitem__(self, pos: tuple[int, int], payload: Any) -> None:
        """Set payload using indexing: store[row, col] = payload."""
        row, col = pos
        self.set(row, col, payload)

    @property
    def is_degenerate(self) -> bool:
        """True when the store has no cells at all."""
        return self.rows == 0 or self.cols == 0

    def resize(self, rows: int, cols: int) -> bool:
        """
        Resize in place, preserving every cell that stays in bounds.

        Shrinking keeps the leading rows and columns and drops indices
        ``[new, old)``. Growing appends EMPTY cells. Rows are handled first
        (new rows get the old column count), then every row is fitted to
        the new column count.

        Returns:
            True if the dimensions changed, False for a same-size no-op.
        """
        self._check_dimensions(rows, cols)
        if rows == self.rows and cols == self.cols:
            return False

        if rows < self.rows:
            del self._buffer[rows:]
        else:
            for _ in range(self.rows, rows):
                self._buffer.append([EMPTY] * self.cols)

        if cols < self.cols:
            for line in self._buffer:
                del line[cols:]
        elif cols > self.cols:
            for line in self._buffer:
                line.extend([EMPTY] * (cols - self.cols))

        logger.debug("resized store %dx%d -> %dx%d", self.rows, self.cols, rows, cols)
        self.rows = rows
        self.cols = cols
        return True

    def iter_rows(self) -> Iterator[list[Any]]:
        """Iterate over rows (copies, so callers cannot break the shape)."""
        for line in self._buffer:
            yield list(line)

    def cells(self) -> Iterator[tuple[int, int, Any]]:
        """Iterate over all cells as (row, col, payload) tuples."""
        for row, line in enumerate(self._buffer):
            for col, payload in enumerate(line):
                yield row, col, payload

    def copy(self) -> GridStore:
        """Create a shallow copy (payloads are shared, rows are not)."""
        return GridStore(
            rows=self.rows,
            cols=self.cols,
            _buffer=[list(line) for line in self._buffer],
        )
