"""
griddy: a two-dimensional grid with a stateful cursor

Quick Start:
    >>> from griddy import Griddy, UndoHistory
    >>> history = UndoHistory()
    >>> grid = Griddy(3, 3, history=history)
    >>> grid.set("A", 0, 0).left(1, wrap=True).current()
    Position(row=2, col=2)
    >>> _ = history.undo(grid)
    >>> grid.current()
    Position(row=0, col=0)

Features:
    - Clamped and toroidal (row-major wrap-around) cursor navigation
    - Cell read/write with an EMPTY sentinel distinct from None
    - Row/column extraction with filtering
    - Resizing that preserves surviving cells
    - Undo integration through a pluggable history hook
    - Plain text and JSON rendering
"""

__version__ = "0.1.0"

# Core types
from griddy.core.constants import EMPTY, Direction
from griddy.core.cursor import Position, Size
from griddy.core.grid import Griddy

# Errors
from griddy.core.errors import (
    GriddyError,
    HistoryError,
    StructuralMisuseError,
    UndefinedAxisError,
    UnknownDirectionError,
)

# History
from griddy.history.hook import HistoryHook, InversionRecord
from griddy.history.stack import UndoHistory

# Rendering
from griddy.render.text import RenderOptions, TextRenderer
from griddy.render.json_format import JsonRenderer


def create(rows: int = 1, cols: int = 1, undoable: bool = False) -> Griddy:
    """Create a grid, optionally with a fresh UndoHistory attached."""
    return Griddy(rows, cols, history=UndoHistory() if undoable else None)


__all__ = [
    # Version
    "__version__",
    # Core types
    "EMPTY",
    "Direction",
    "Position",
    "Size",
    "Griddy",
    "create",
    # Errors
    "GriddyError",
    "HistoryError",
    "StructuralMisuseError",
    "UndefinedAxisError",
    "UnknownDirectionError",
    # History
    "HistoryHook",
    "InversionRecord",
    "UndoHistory",
    # Rendering
    "RenderOptions",
    "TextRenderer",
    "JsonRenderer",
]
