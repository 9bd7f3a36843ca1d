"""Render a grid snapshot to JSON.

Example output:
{
  "rows": 2,
  "cols": 2,
  "cursor": {"row": 0, "col": 0},
  "cells": [["A", null], [null, "B"]]
}

EMPTY cells become null. Payloads that JSON cannot represent are
written as their repr().
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from griddy.core.constants import EMPTY

if TYPE_CHECKING:
    from griddy.core.grid import Griddy


class JsonRenderer:
    """Render a grid's dimensions, cursor and payloads to JSON."""

    def __init__(self, indent: int | None = 2, include_cursor: bool = True):
        """
        Args:
            indent: JSON indentation (None for compact)
            include_cursor: Include the cursor position
        """
        self.indent = indent
        self.include_cursor = include_cursor

    def render(self, grid: Griddy) -> str:
        """Render grid to a JSON string."""
        return json.dumps(self.to_dict(grid), indent=self.indent, ensure_ascii=False, default=repr)

    def to_dict(self, grid: Griddy) -> dict[str, Any]:
        """Convert grid to a dictionary without moving its cursor."""
        rows, cols = grid.size()
        result: dict[str, Any] = {"rows": rows, "cols": cols}

        if self.include_cursor:
            cursor = grid.current()
            result["cursor"] = {"row": cursor.row, "col": cursor.col}

        cells: list[list[Any]] = []
        if rows and cols:
            for n in range(rows):
                cells.append([None if item is EMPTY else item for item in grid.get_row(n)])
        else:
            cells = [[] for _ in range(rows)]
        result["cells"] = cells
        return result
