"""Core data structures: storage, cursor and the grid itself."""

from griddy.core.constants import EMPTY, Direction
from griddy.core.cursor import Cursor, Position, Size
from griddy.core.store import GridStore
from griddy.core.grid import Griddy

__all__ = ["EMPTY", "Direction", "Cursor", "Position", "Size", "GridStore", "Griddy"]
