"""Tests for the history hook contract and UndoHistory."""

import pytest

from griddy import (
    EMPTY,
    Griddy,
    HistoryError,
    HistoryHook,
    InversionRecord,
    Position,
    UndefinedAxisError,
    UndoHistory,
    UnknownDirectionError,
)


class TestHookContract:
    """What the grid reports, and when."""

    def test_select_reports_previous_position(self, hooked_grid: Griddy, hook) -> None:
        hooked_grid.select(2, 1)
        assert hook.calls == [("select", (0, 0))]

    def test_set_reports_previous_payload(self, hooked_grid: Griddy, hook) -> None:
        hooked_grid.set("A", 1, 1).set("B", 1, 1)
        assert hook.calls == [("set", (EMPTY, 1, 1)), ("set", ("A", 1, 1))]

    def test_set_reports_resolved_coordinates(self, hooked_grid: Griddy, hook) -> None:
        hooked_grid.set("A", 50, -50)
        assert hook.calls == [("set", (EMPTY, 2, 0))]

    def test_reported_before_select_applies(self, hooked_grid: Griddy, hook) -> None:
        hooked_grid.select(1, 1)
        hooked_grid.select(2, 2)
        assert hook.snapshots == [Position(0, 0), Position(1, 1)]

    def test_reported_before_set_applies(self, hooked_grid: Griddy, hook) -> None:
        hooked_grid.set("A", 0, 1)
        assert hook.snapshots == [True]

    def test_directions_report_select(self, hooked_grid: Griddy, hook) -> None:
        hooked_grid.right().down(wrap=True).move("left")
        assert [op for op, _ in hook.calls] == ["select", "select", "select"]
        assert hook.calls[-1] == ("select", (1, 1))

    def test_reads_and_resize_report_nothing(self, hooked_grid: Griddy, hook) -> None:
        hooked_grid.get(1, 1)
        hooked_grid.is_empty(2, 2)
        hooked_grid.get_row(0)
        hooked_grid.get_col(2, bool)
        hooked_grid.render()
        hooked_grid.resize(4, 4)
        hooked_grid.resize(4, 4)
        assert hook.calls == []

    def test_failed_call_reports_nothing(self, hooked_grid: Griddy, hook) -> None:
        hooked_grid.resize(0, 3)
        with pytest.raises(UndefinedAxisError):
            hooked_grid.select(1, 1)
        with pytest.raises(UnknownDirectionError):
            hooked_grid.move("nowhere")
        assert hook.calls == []

    def test_replaying_set_record_restores_payload(self, hooked_grid: Griddy, hook) -> None:
        hooked_grid.set("v1", 2, 2)
        hooked_grid.set("v2", 2, 2)
        operation, args = hook.calls[-1]
        getattr(hooked_grid, operation)(*args)
        assert hooked_grid.get(2, 2) == "v1"

    def test_replaying_select_record_restores_position(self, hooked_grid: Griddy, hook) -> None:
        hooked_grid.select(1, 2)
        hooked_grid.left(4, wrap=True)
        InversionRecord(*hook.calls[-1]).apply(hooked_grid)
        assert hooked_grid.current() == Position(1, 2)

    def test_works_without_hook(self, grid: Griddy) -> None:
        assert grid.history is None
        grid.set("A").right().set("B")
        assert grid.get_row(0) == ["A", "B", EMPTY]

    def test_protocol(self, history: UndoHistory, hook) -> None:
        assert isinstance(history, HistoryHook)
        assert isinstance(hook, HistoryHook)
        assert not isinstance(object(), HistoryHook)


class TestInversionRecord:

    def test_apply_unknown_operation(self, grid: Griddy) -> None:
        with pytest.raises(HistoryError):
            InversionRecord("explode", ()).apply(grid)

    def test_str(self) -> None:
        assert str(InversionRecord("select", (1, 2))) == "select(1, 2)"


class TestUndoHistory:

    def test_undo_set(self, undoable_grid: Griddy, history: UndoHistory) -> None:
        undoable_grid.set("A", 1, 1)
        history.undo(undoable_grid)
        assert undoable_grid.get(1, 1) is EMPTY

    def test_undo_select(self, undoable_grid: Griddy, history: UndoHistory) -> None:
        undoable_grid.select(2, 2).left(1, wrap=True)
        history.undo(undoable_grid)
        assert undoable_grid.current() == Position(2, 2)
        history.undo(undoable_grid)
        assert undoable_grid.current() == Position(0, 0)

    def test_redo(self, undoable_grid: Griddy, history: UndoHistory) -> None:
        undoable_grid.set("A", 0, 0).set("B", 0, 0)
        history.undo(undoable_grid)
        history.undo(undoable_grid)
        assert undoable_grid.get(0, 0) is EMPTY
        history.redo(undoable_grid)
        assert undoable_grid.get(0, 0) == "A"
        history.redo(undoable_grid)
        assert undoable_grid.get(0, 0) == "B"
        assert not history.can_redo

    def test_replay_is_not_recorded_as_new_history(self, undoable_grid: Griddy, history: UndoHistory) -> None:
        undoable_grid.set("A", 0, 0)
        history.undo(undoable_grid)
        assert len(history) == 0
        assert history.can_redo

    def test_new_record_clears_redo(self, undoable_grid: Griddy, history: UndoHistory) -> None:
        undoable_grid.set("A", 0, 0)
        history.undo(undoable_grid)
        undoable_grid.set("B", 1, 1)
        assert not history.can_redo
        with pytest.raises(HistoryError):
            history.redo(undoable_grid)

    def test_empty_undo_raises(self, undoable_grid: Griddy, history: UndoHistory) -> None:
        assert not history.can_undo
        with pytest.raises(HistoryError):
            history.undo(undoable_grid)

    def test_group_undoes_together(self, undoable_grid: Griddy, history: UndoHistory) -> None:
        undoable_grid.select(1, 1)
        with history.group():
            undoable_grid.right().set("X")
            with history.group():
                undoable_grid.down().set("Y")
        assert len(history) == 2

        history.undo(undoable_grid)
        assert undoable_grid.get_row(1) == [EMPTY, EMPTY, EMPTY]
        assert undoable_grid.is_empty(2, 2) is True
        assert undoable_grid.current() == Position(1, 1)

        history.redo(undoable_grid)
        assert undoable_grid.get(1, 2) == "X"
        assert undoable_grid.get(2, 2) == "Y"
        assert undoable_grid.current() == Position(2, 2)

    def test_empty_group_leaves_no_entry(self, history: UndoHistory) -> None:
        with history.group():
            pass
        assert len(history) == 0

    def test_limit_drops_oldest(self) -> None:
        history = UndoHistory(limit=2)
        grid = Griddy(1, 3, history=history)
        grid.set("a", 0, 0).set("b", 0, 1).set("c", 0, 2)
        assert len(history) == 2
        history.undo(grid)
        history.undo(grid)
        assert grid.get_row(0) == ["a", EMPTY, EMPTY]
        assert not history.can_undo

    def test_invalid_limit(self) -> None:
        with pytest.raises(ValueError):
            UndoHistory(limit=0)

    def test_records_and_clear(self, undoable_grid: Griddy, history: UndoHistory) -> None:
        undoable_grid.set("A", 0, 1)
        undoable_grid.select(2, 2)
        assert history.records == (
            (InversionRecord("set", (EMPTY, 0, 1)),),
            (InversionRecord("select", (0, 1)),),
        )
        history.clear()
        assert len(history) == 0
        assert not history.can_redo

    def test_failed_replay_keeps_entry(self, undoable_grid: Griddy, history: UndoHistory) -> None:
        undoable_grid.set("A", 0, 0)
        with pytest.raises(HistoryError):
            history.undo(object())
        assert len(history) == 1
        history.undo(undoable_grid)
        assert undoable_grid.get(0, 0) is EMPTY
