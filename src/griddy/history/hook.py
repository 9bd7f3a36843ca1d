"""HistoryHook - the interface a grid reports its inversion records to."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from griddy.core.errors import HistoryError


@runtime_checkable
class HistoryHook(Protocol):
    """Receives one inversion record per undoable call.

    ``register`` is called synchronously, immediately before the grid
    applies the mutation. Re-invoking ``operation`` on the same grid with
    ``args`` reverses that single call. Ordering, grouping and redo are
    entirely up to the implementation.
    """

    def register(self, operation: str, args: tuple[Any, ...]) -> None:
        ...


@dataclass(frozen=True, slots=True)
class InversionRecord:
    """The minimal data needed to reverse one mutating call.

    Attributes:
        operation: Name of the grid method to call ("select" or "set")
        args: Positional arguments for that call
    """
    operation: str
    args: tuple[Any, ...]

    def apply(self, target: Any) -> Any:
        """Re-invoke the recorded operation on target.

        Raises:
            HistoryError: If target has no such operation
        """
        method = getattr(target, self.operation, None)
        if not callable(method):
            raise HistoryError(
                f"{type(target).__name__} has no operation {self.operation!r}"
            )
        return method(*self.args)

    def __str__(self) -> str:
        return f"{self.operation}{self.args!r}"
