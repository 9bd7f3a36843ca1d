"""Typer CLI application for building, walking and printing grids."""

import logging
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from griddy.core.errors import GriddyError
from griddy.core.grid import Griddy
from griddy.history.stack import UndoHistory
from griddy.render.json_format import JsonRenderer
from griddy.render.text import RenderOptions


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


def _parse_coords(text: str) -> tuple[int, int]:
    """Parse "R,C" into integers."""
    parts = text.split(",")
    if len(parts) != 2:
        raise typer.BadParameter(f"expected ROW,COL, got {text!r}")
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        raise typer.BadParameter(f"expected integer ROW,COL, got {text!r}") from None


def _parse_cell(text: str) -> tuple[int, int, str]:
    """Parse "R,C,VALUE"; VALUE may itself contain commas."""
    parts = text.split(",", 2)
    if len(parts) != 3:
        raise typer.BadParameter(f"expected ROW,COL,VALUE, got {text!r}")
    row, col = _parse_coords(f"{parts[0]},{parts[1]}")
    return row, col, parts[2]


def _parse_move(text: str) -> tuple[str, int]:
    """Parse "direction[:steps]"."""
    direction, _, steps = text.partition(":")
    if not steps:
        return direction, 1
    try:
        return direction, int(steps)
    except ValueError:
        raise typer.BadParameter(f"steps must be an integer in {text!r}") from None


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="griddy",
        help="Build, navigate and print two-dimensional grids.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()

    @app.command()
    def show(
        rows: Annotated[int, typer.Argument(help="Number of rows")],
        cols: Annotated[int, typer.Argument(help="Number of columns")],
        cell: Annotated[Optional[list[str]], typer.Option("--cell", "-c", help="Write a cell: ROW,COL,VALUE (repeatable)")] = None,
        select: Annotated[Optional[str], typer.Option("--select", "-s", help="Cursor position after writing: ROW,COL")] = None,
        content: Annotated[str, typer.Option(help="Marker for filled cells")] = "x",
        empty: Annotated[str, typer.Option(help="Marker for empty cells")] = "-",
        separator: Annotated[str, typer.Option(help="Padding around unselected markers")] = " ",
        wrapper: Annotated[str, typer.Option(help="Two characters around the selected cell")] = "[]",
        json_output: Annotated[bool, typer.Option("--json", "-j", help="Output a JSON snapshot")] = False,
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
    ) -> None:
        """Build a grid, write cells and print it."""
        _configure_logging(verbose)
        writes = [_parse_cell(c) for c in cell or []]
        target = _parse_coords(select) if select else None

        try:
            grid: Griddy[str] = Griddy(rows, cols)
            for row, col, value in writes:
                grid.set(value, row, col)
            if target is not None:
                grid.select(*target)
        except GriddyError as e:
            console.print(f"[red]{e}[/]")
            raise typer.Exit(1)

        if json_output:
            print(JsonRenderer().render(grid))
            return

        options = RenderOptions(content=content, empty=empty, separator=separator, wrapper=wrapper)
        grid.print(options, sink="console")

    @app.command()
    def walk(
        rows: Annotated[int, typer.Argument(help="Number of rows")],
        cols: Annotated[int, typer.Argument(help="Number of columns")],
        moves: Annotated[list[str], typer.Argument(help="Moves as DIRECTION[:STEPS], e.g. left right:3")],
        wrap: Annotated[bool, typer.Option("--wrap", "-w", help="Wrap around the edges instead of clamping")] = False,
        start: Annotated[Optional[str], typer.Option("--start", help="Starting position: ROW,COL")] = None,
        undo: Annotated[int, typer.Option("--undo", "-u", help="Undo this many moves at the end")] = 0,
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
    ) -> None:
        """Walk the cursor, marking each visited cell with its step number.

        Every move and its mark form one undo step.
        """
        _configure_logging(verbose)
        steps = [_parse_move(m) for m in moves]
        origin = _parse_coords(start) if start else (0, 0)

        history = UndoHistory(limit=max(len(steps), 1))
        table = Table(title=f"Walk on {rows}x{cols}{' (wrapping)' if wrap else ''}")
        table.add_column("#", justify="right")
        table.add_column("Move")
        table.add_column("Row", justify="right")
        table.add_column("Col", justify="right")

        try:
            grid: Griddy[int] = Griddy(rows, cols, history=history)
            grid.select(*origin).set(0)
            history.clear()
            table.add_row("0", "start", str(grid.current().row), str(grid.current().col))

            for number, (direction, count) in enumerate(steps, start=1):
                with history.group():
                    grid.move(direction, count, wrap=wrap).set(number)
                pos = grid.current()
                table.add_row(str(number), f"{direction}:{count}", str(pos.row), str(pos.col))

            undone = 0
            while undone < undo and history.can_undo:
                history.undo(grid)
                undone += 1
        except GriddyError as e:
            console.print(f"[red]{e}[/]")
            raise typer.Exit(1)

        console.print(table)
        if undone:
            console.print(f"[yellow]Undid {undone} move(s)[/]")
        pos = grid.current()
        console.print(f"[bold]Cursor:[/] ({pos.row}, {pos.col})")
        grid.print(RenderOptions.ascii_blocks(), sink="console")

    return app
