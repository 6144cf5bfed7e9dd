"""Undo/redo stack of executable commands."""

from __future__ import annotations

from abc import ABC, abstractmethod


class HistoryError(Exception):
    """Raised when an undo or redo cannot be carried out."""


class Command(ABC):
    """An operation that can be executed and undone.

    ``name`` is shown in the UI (for example "Move Clip").
    """

    name: str = ""

    @abstractmethod
    def execute(self) -> None:
        """Carry out the command."""

    @abstractmethod
    def undo(self) -> None:
        """Reverse the command."""


class HistoryManager:
    """Keeps executed commands to provide undo and redo."""

    def __init__(self, max_history: int | None = None) -> None:
        self._undo_stack: list[Command] = []
        self._redo_stack: list[Command] = []
        self.max_history = max_history

    def execute_command(self, command: Command) -> None:
        """Execute a command, record it and discard the redo history."""
        command.execute()
        self._undo_stack.append(command)
        self._redo_stack.clear()
        if self.max_history is not None:
            excess = len(self._undo_stack) - self.max_history
            if excess > 0:
                del self._undo_stack[:excess]

    def undo(self) -> None:
        """Undo the last command and move it to the redo stack."""
        if not self._undo_stack:
            raise HistoryError("Nothing to undo")
        command = self._undo_stack.pop()
        command.undo()
        self._redo_stack.append(command)

    def redo(self) -> None:
        """Re-execute the last undone command and move it back to the undo stack."""
        if not self._redo_stack:
            raise HistoryError("Nothing to redo")
        command = self._redo_stack.pop()
        command.execute()
        self._undo_stack.append(command)

    def can_undo(self) -> bool:
        return bool(self._undo_stack)

    def can_redo(self) -> bool:
        return bool(self._redo_stack)

    def clear(self) -> None:
        """Forget all history."""
        self._undo_stack.clear()
        self._redo_stack.clear()


class MoveClipCommand(Command):
    """Moves a clip from one position to another.

    ``position`` holds where the clip currently sits.
    """

    name = "Move Clip"

    def __init__(self, clip_id: int, old_position: float, new_position: float) -> None:
        self.clip_id = clip_id
        self.old_position = old_position
        self.new_position = new_position
        self.position = old_position

    def __repr__(self) -> str:
        return (
            f"MoveClipCommand(clip_id={self.clip_id}, "
            f"old_position={self.old_position}, new_position={self.new_position})"
        )

    def execute(self) -> None:
        """Place the clip at its new position."""
        print(
            f"Executing MoveClipCommand: moving clip {self.clip_id} "
            f"from {self.old_position} to {self.new_position}"
        )
        self.position = self.new_position

    def undo(self) -> None:
        """Put the clip back at its old position."""
        print(f"Undoing MoveClipCommand: moving clip {self.clip_id} back to {self.old_position}")
        self.position = self.old_position