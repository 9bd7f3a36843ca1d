"""Griddy - a two-dimensional grid with a stateful cursor."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Generic, Mapping, TypeVar

from griddy.core.constants import EMPTY, Direction
from griddy.core.cursor import Cursor, Position, Size
from griddy.core.errors import UnknownDirectionError
from griddy.core.store import GridStore

if TYPE_CHECKING:
    from griddy.history.hook import HistoryHook
    from griddy.render.sinks import Sink
    from griddy.render.text import RenderOptions

T = TypeVar("T")


def _parse_direction(direction: Direction | str) -> Direction:
    if isinstance(direction, Direction):
        return direction
    if isinstance(direction, str):
        try:
            return Direction(direction.lower())
        except ValueError:
            pass
    raise UnknownDirectionError(f"unknown direction: {direction!r}")


class Griddy(Generic[T]):
    """A two-dimensional grid of opaque payloads with a cursor.

    Every call that takes an optional row/column resolves it against the
    cursor: omitted axes keep the cursor's value, out-of-range values are
    clamped (or wrapped, for navigation with ``wrap=True``) and the
    cursor ends up on the resolved cell. Reads that must not navigate
    (``is_empty``, ``get_row``, ``get_col``, rendering) put the cursor
    back where it was.

    When a history hook is attached, ``select`` and ``set`` report how to
    reverse themselves just before they take effect.

    Attributes:
        _store: Backing cell storage
        _cursor: Current selection
        _history: Optional collaborator receiving inversion records
        _wrapping: Wrap mode used by navigation calls that pass wrap=None

    Example:
        grid = Griddy(3, 3)
        grid.set("A", 0, 0).right().set("B")
        grid.left(1, wrap=True)   # (0, 0) -> (2, 2) on a 3x3 grid
    """

    def __init__(
        self,
        rows: int = 1,
        cols: int = 1,
        *,
        history: HistoryHook | None = None,
        wrapping: bool = False,
    ) -> None:
        """Create a grid with every cell EMPTY and the cursor at (0, 0).

        Args:
            rows: Number of rows (0 falls back to 1)
            cols: Number of columns (0 falls back to 1)
            history: Optional hook that receives inversion records
            wrapping: Default wrap mode for navigation calls
        """
        self._store = GridStore(rows=0, cols=0)
        self._cursor = Cursor()
        self._history = history
        self._wrapping = wrapping
        self.resize(rows or 1, cols or 1)

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def rows(self) -> int:
        return self._store.rows

    @property
    def cols(self) -> int:
        return self._store.cols

    @property
    def history(self) -> HistoryHook | None:
        """The attached history hook, if any."""
        return self._history

    @property
    def wrapping(self) -> bool:
        """Wrap mode applied when a navigation call leaves ``wrap`` unset."""
        return self._wrapping

    @wrapping.setter
    def wrapping(self, value: bool) -> None:
        self._wrapping = bool(value)

    # -------------------------------------------------------------------------
    # Structure
    # -------------------------------------------------------------------------

    def size(self) -> Size:
        """Current dimensions."""
        return Size(self._store.rows, self._store.cols)

    def resize(self, rows: int, cols: int) -> Griddy[T]:
        """Resize the grid, preserving cells that stay in bounds.

        Shrinking drops trailing rows/columns; growing adds EMPTY cells.
        The cursor is pulled back inside the new bounds. Resizing is not
        reported to the history hook.

        Raises:
            StructuralMisuseError: If either dimension is negative
        """
        if self._store.resize(rows, cols):
            self._cursor.reclamp(rows, cols)
        return self

    # -------------------------------------------------------------------------
    # Cursor
    # -------------------------------------------------------------------------

    def current(self) -> Position:
        """The cursor position."""
        return self._cursor.position

    def selected(self, row: int, col: int) -> bool:
        """Whether (row, col) is the cursor position."""
        return row == self._cursor.row and col == self._cursor.col

    def select(
        self,
        row: int | None = None,
        col: int | None = None,
        wrap: bool | None = None,
    ) -> Griddy[T]:
        """Move the cursor.

        Args:
            row: Target row, None to keep the current one
            col: Target column, None to keep the current one
            wrap: Wrap around the edges instead of clamping; None uses
                the grid's ``wrapping`` default

        Raises:
            UndefinedAxisError: If the grid has zero rows or columns
        """
        if wrap is None:
            wrap = self._wrapping
        target = self._resolve(row, col, wrap)
        previous = self._cursor.position
        self._register("select", (previous.row, previous.col))
        self._cursor.move_to(target)
        return self

    def move(
        self,
        direction: Direction | str,
        steps: int | None = 1,
        wrap: bool | None = None,
    ) -> Griddy[T]:
        """Move the cursor in a direction.

        Raises:
            UnknownDirectionError: If direction is not up/down/left/right
        """
        d_row, d_col = _parse_direction(direction).delta
        if not steps:
            steps = 1
        row = self._cursor.row + d_row * steps if d_row else None
        col = self._cursor.col + d_col * steps if d_col else None
        return self.select(row, col, wrap)

    def up(self, steps: int | None = 1, wrap: bool | None = None) -> Griddy[T]:
        return self.move(Direction.UP, steps, wrap)

    def down(self, steps: int | None = 1, wrap: bool | None = None) -> Griddy[T]:
        return self.move(Direction.DOWN, steps, wrap)

    def left(self, steps: int | None = 1, wrap: bool | None = None) -> Griddy[T]:
        return self.move(Direction.LEFT, steps, wrap)

    def right(self, steps: int | None = 1, wrap: bool | None = None) -> Griddy[T]:
        return self.move(Direction.RIGHT, steps, wrap)

    def _resolve(self, row: int | None, col: int | None, wrap: bool = False) -> Position:
        return self._cursor.resolve(
            row, col, self._store.rows, self._store.cols, wrap_around=wrap
        )

    # -------------------------------------------------------------------------
    # Cell access
    # -------------------------------------------------------------------------

    def get(self, row: int | None = None, col: int | None = None) -> Any:
        """Select (row, col), clamped, and return its payload or EMPTY."""
        target = self._resolve(row, col)
        self._cursor.move_to(target)
        return self._store.get(target.row, target.col)

    def set(self, payload: T, row: int | None = None, col: int | None = None) -> Griddy[T]:
        """Select (row, col), clamped, and store payload there."""
        target = self._resolve(row, col)
        self._cursor.move_to(target)
        previous = self._store.get(target.row, target.col)
        self._register("set", (previous, target.row, target.col))
        self._store.set(target.row, target.col, payload)
        return self

    def is_empty(self, row: int | None = None, col: int | None = None) -> bool | None:
        """Whether a cell is EMPTY, without moving the cursor.

        Returns:
            True/False, or None if the grid has no cells
        """
        if self._store.is_degenerate:
            return None
        target = self._resolve(row, col)
        return self._store.get(target.row, target.col) is EMPTY

    def get_row(
        self,
        n: int | None = None,
        predicate: Callable[[Any], bool] | None = None,
    ) -> list[Any]:
        """Payloads of row n (clamped) in column order, optionally filtered.

        Args:
            n: Row number, None for the cursor's row
            predicate: Keep only payloads for which this returns true

        Returns:
            List of payloads (EMPTY included unless filtered out)
        """
        n = self._resolve(n, None).row
        return self._collect(((n, c) for c in range(self._store.cols)), predicate)

    def get_col(
        self,
        n: int | None = None,
        predicate: Callable[[Any], bool] | None = None,
    ) -> list[Any]:
        """Payloads of column n (clamped) in row order, optionally filtered."""
        n = self._resolve(None, n).col
        return self._collect(((r, n) for r in range(self._store.rows)), predicate)

    def _collect(self, coords, predicate: Callable[[Any], bool] | None) -> list[Any]:
        saved = self._cursor.position
        try:
            items = [self.get(r, c) for r, c in coords]
        finally:
            self._cursor.move_to(saved)
        if predicate is None:
            return items
        return [item for item in items if predicate(item)]

    def _register(self, operation: str, args: tuple[Any, ...]) -> None:
        if self._history is not None:
            self._history.register(operation, args)

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def render(self, options: RenderOptions | Mapping[str, Any] | None = None) -> str:
        """Render the grid as marker text (see ``TextRenderer``)."""
        from griddy.render.text import TextRenderer
        return TextRenderer(options).render(self)

    def print(
        self,
        options: RenderOptions | Mapping[str, Any] | None = None,
        sink: Sink | str | None = None,
    ) -> Griddy[T]:
        """Render the grid and hand the text to a sink.

        Args:
            options: Render options
            sink: Callable taking the text, "console" for stdout, or None
                to discard
        """
        from griddy.render.sinks import resolve_sink
        resolve_sink(sink)(self.render(options))
        return self

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (
            f"Griddy(rows={self.rows}, cols={self.cols}, "
            f"cursor=({self._cursor.row}, {self._cursor.col}), "
            f"history={'attached' if self._history is not None else 'none'})"
        )
