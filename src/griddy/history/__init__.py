"""History module - inversion records and an undo/redo stack."""

from griddy.history.hook import HistoryHook, InversionRecord
from griddy.history.stack import UndoHistory

__all__ = ["HistoryHook", "InversionRecord", "UndoHistory"]
