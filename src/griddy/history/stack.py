"""UndoHistory - a bounded undo/redo stack built on inversion records."""

from __future__ import annotations

import logging
from collections import deque
from contextlib import contextmanager
from typing import Any, Iterator

from griddy.core.errors import HistoryError
from griddy.history.hook import InversionRecord

logger = logging.getLogger(__name__)


class UndoHistory:
    """
    Linear undo/redo history for anything that reports inversion records.

    Each entry is a list of records that are undone together. Undoing an
    entry replays its records newest-first against the target; whatever
    the target reports while replaying becomes the redo entry, so redo
    needs no extra bookkeeping.

    Example:
        history = UndoHistory()
        grid = Griddy(3, 3, history=history)
        grid.set("A", 1, 1)
        history.undo(grid)   # cell (1, 1) is EMPTY again
        history.redo(grid)   # and back to "A"
    """

    def __init__(self, limit: int = 100) -> None:
        if limit < 1:
            raise ValueError(f"limit={limit} must be >= 1")
        self.limit = limit
        self._undo: deque[list[InversionRecord]] = deque(maxlen=limit)
        self._redo: list[list[InversionRecord]] = []
        self._group: list[InversionRecord] | None = None
        self._group_depth = 0
        self._capture: list[InversionRecord] | None = None

    def register(self, operation: str, args: tuple[Any, ...]) -> None:
        """Record how to reverse one call."""
        record = InversionRecord(operation, tuple(args))

        if self._capture is not None:
            self._capture.append(record)
            return

        logger.debug("register %s", record)
        if self._group is not None:
            self._group.append(record)
        else:
            self._undo.append([record])
        self._redo.clear()

    @contextmanager
    def group(self) -> Iterator[UndoHistory]:
        """Collect every record registered inside the block into one entry.

        Nested groups merge into the outermost one. An empty group leaves
        no entry behind.
        """
        if self._group_depth == 0:
            self._group = []
        self._group_depth += 1
        try:
            yield self
        finally:
            self._group_depth -= 1
            if self._group_depth == 0:
                entry, self._group = self._group, None
                if entry:
                    self._undo.append(entry)

    def undo(self, target: Any) -> list[InversionRecord]:
        """Reverse the latest entry on target.

        Returns:
            The records that were replayed

        Raises:
            HistoryError: If there is nothing to undo
        """
        if not self._undo:
            raise HistoryError("nothing to undo")
        entry = self._undo.pop()
        try:
            inverse = self._replay(entry, target)
        except Exception:
            self._undo.append(entry)
            raise
        self._redo.append(inverse)
        logger.debug("undo %d record(s)", len(entry))
        return entry

    def redo(self, target: Any) -> list[InversionRecord]:
        """Re-apply the latest undone entry on target.

        Raises:
            HistoryError: If there is nothing to redo
        """
        if not self._redo:
            raise HistoryError("nothing to redo")
        entry = self._redo.pop()
        try:
            inverse = self._replay(entry, target)
        except Exception:
            self._redo.append(entry)
            raise
        self._undo.append(inverse)
        logger.debug("redo %d record(s)", len(entry))
        return entry

    def _replay(self, entry: list[InversionRecord], target: Any) -> list[InversionRecord]:
        if self._capture is not None:
            raise HistoryError("cannot undo or redo while a replay is running")
        self._capture = []
        try:
            for record in reversed(entry):
                record.apply(target)
            return self._capture
        finally:
            self._capture = None

    @property
    def can_undo(self) -> bool:
        return len(self._undo) > 0

    @property
    def can_redo(self) -> bool:
        return len(self._redo) > 0

    @property
    def records(self) -> tuple[tuple[InversionRecord, ...], ...]:
        """Undo entries, oldest first."""
        return tuple(tuple(entry) for entry in self._undo)

    def clear(self) -> None:
        """Forget all undo and redo entries."""
        self._undo.clear()
        self._redo.clear()

    def __len__(self) -> int:
        return len(self._undo)

    def __repr__(self) -> str:
        return f"UndoHistory(undo={len(self._undo)}, redo={len(self._redo)}, limit={self.limit})"
