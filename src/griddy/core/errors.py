"""Exceptions raised by the grid core and its collaborators."""


class GriddyError(Exception):
    """Base class for all griddy errors."""


class StructuralMisuseError(GriddyError, ValueError):
    """A structural change was requested that the grid cannot represent.

    Raised for negative resize targets.
    """


class UndefinedAxisError(GriddyError, IndexError):
    """The grid has zero rows or columns, so no cell can be resolved."""


class UnknownDirectionError(GriddyError, ValueError):
    """``move`` was given a direction tag it does not recognise."""


class HistoryError(GriddyError):
    """Undo or redo could not be performed."""
