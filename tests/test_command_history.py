import pytest

from opendaw.command_history import Command, HistoryError, HistoryManager, MoveClipCommand


class _Recorder(Command):
    name = "Record"

    def __init__(self, log, label, fail_on=None):
        self.log = log
        self.label = label
        self.fail_on = fail_on

    def execute(self):
        if self.fail_on == "execute":
            raise HistoryError("execute failed")
        self.log.append(("do", self.label))

    def undo(self):
        if self.fail_on == "undo":
            raise HistoryError("undo failed")
        self.log.append(("undo", self.label))


def test_history_manager():
    history = HistoryManager()
    cmd1 = MoveClipCommand(1, 0.0, 1.0)
    cmd2 = MoveClipCommand(1, 1.0, 2.0)

    assert not history.can_undo()
    assert not history.can_redo()

    history.execute_command(cmd1)
    assert history.can_undo()

    history.execute_command(cmd2)

    history.undo()
    assert history.can_redo()

    history.redo()
    assert history.can_undo()


def test_undo_redo_order():
    log = []
    history = HistoryManager()
    history.execute_command(_Recorder(log, "a"))
    history.execute_command(_Recorder(log, "b"))
    history.undo()
    history.undo()
    history.redo()
    assert log == [("do", "a"), ("do", "b"), ("undo", "b"), ("undo", "a"), ("do", "a")]


def test_empty_undo_and_redo_raise():
    history = HistoryManager()
    with pytest.raises(HistoryError, match="Nothing to undo"):
        history.undo()
    with pytest.raises(HistoryError, match="Nothing to redo"):
        history.redo()


def test_new_command_clears_redo():
    log = []
    history = HistoryManager()
    history.execute_command(_Recorder(log, "a"))
    history.undo()
    assert history.can_redo()
    history.execute_command(_Recorder(log, "b"))
    assert not history.can_redo()


def test_failed_execute_is_not_recorded():
    history = HistoryManager()
    with pytest.raises(HistoryError, match="execute failed"):
        history.execute_command(_Recorder([], "x", fail_on="execute"))
    assert not history.can_undo()


def test_limit_drops_oldest():
    log = []
    history = HistoryManager(max_history=2)
    for label in "abc":
        history.execute_command(_Recorder(log, label))
    history.undo()
    history.undo()
    assert not history.can_undo()
    assert log[-2:] == [("undo", "c"), ("undo", "b")]


def test_clear():
    history = HistoryManager()
    history.execute_command(_Recorder([], "a"))
    history.execute_command(_Recorder([], "b"))
    history.undo()
    history.clear()
    assert not history.can_undo()
    assert not history.can_redo()


def test_move_clip_command_output(capsys):
    cmd = MoveClipCommand(7, 0.0, 1.0)
    assert cmd.name == "Move Clip"
    cmd.execute()
    cmd.undo()
    out = capsys.readouterr().out
    assert "Executing MoveClipCommand: moving clip 7" in out
    assert "Undoing MoveClipCommand: moving clip 7" in out