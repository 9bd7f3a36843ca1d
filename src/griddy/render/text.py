"""Render a grid as plain marker text."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import TYPE_CHECKING, Any, Mapping

from griddy.core.constants import (
    DEFAULT_CONTENT,
    DEFAULT_EMPTY,
    DEFAULT_SEPARATOR,
    DEFAULT_WRAPPER,
)

if TYPE_CHECKING:
    from griddy.core.grid import Griddy


@dataclass
class RenderOptions:
    """Markers used when rendering a grid.

    Empty strings fall back to the defaults, so a partially filled
    mapping (as from a CLI or a config dict) is always renderable.

    Attributes:
        content: Marker for a cell holding a payload
        empty: Marker for an EMPTY cell
        separator: Padding on both sides of an unselected marker,
            repeated once per character of ``content``
        wrapper: Two characters placed around the selected cell's marker
    """
    content: str = DEFAULT_CONTENT
    empty: str = DEFAULT_EMPTY
    separator: str = DEFAULT_SEPARATOR
    wrapper: str = DEFAULT_WRAPPER

    def __post_init__(self) -> None:
        self.content = self.content or DEFAULT_CONTENT
        self.empty = self.empty or DEFAULT_EMPTY
        self.separator = self.separator or DEFAULT_SEPARATOR
        self.wrapper = self.wrapper or DEFAULT_WRAPPER

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any] | None) -> RenderOptions:
        """Build options from a mapping, ignoring unknown keys."""
        if not options:
            return cls()
        names = {f.name for f in fields(cls)}
        return cls(**{k: str(v) for k, v in options.items() if k in names and v is not None})

    @classmethod
    def coerce(cls, options: RenderOptions | Mapping[str, Any] | None) -> RenderOptions:
        if isinstance(options, cls):
            return options
        return cls.from_mapping(options)

    @classmethod
    def ascii_blocks(cls) -> RenderOptions:
        """Options drawing content as '#' and empty cells as '.'."""
        return cls(content="#", empty=".", separator=" ", wrapper="<>")

    @property
    def open_close(self) -> tuple[str, str]:
        """The (opening, closing) selection characters."""
        if len(self.wrapper) == 1:
            return self.wrapper, self.wrapper
        return self.wrapper[0], self.wrapper[1]


class TextRenderer:
    """Render a grid to one line of markers per row.

    Only the grid's public read API is used (``size``, ``is_empty``,
    ``selected``), so rendering never moves the cursor.
    """

    def __init__(self, options: RenderOptions | Mapping[str, Any] | None = None):
        self.options = RenderOptions.coerce(options)

    def render(self, grid: Griddy) -> str:
        """Render grid to text; every row ends with a newline."""
        opts = self.options
        pad = opts.separator * len(opts.content)
        open_mark, close_mark = opts.open_close

        lines: list[str] = []
        rows, cols = grid.size()
        for row in range(rows):
            parts: list[str] = []
            for col in range(cols):
                marker = opts.empty if grid.is_empty(row, col) else opts.content
                if grid.selected(row, col):
                    parts.append(f"{open_mark}{marker}{close_mark}")
                else:
                    parts.append(f"{pad}{marker}{pad}")
            lines.append("".join(parts) + "\n")

        return "".join(lines)
