"""Snapshot-based undo/redo for the whole project state."""

from __future__ import annotations

import copy
from collections import deque

from opendaw.project import ProjectState

DEFAULT_MAX_HISTORY = 50


class ProjectHistory:
    """Keeps copies of earlier project states for undo and redo."""

    def __init__(self, max_history: int = DEFAULT_MAX_HISTORY) -> None:
        self._undo_stack: deque[ProjectState] = deque()
        self._redo_stack: deque[ProjectState] = deque()
        self.max_history = max_history

    def __repr__(self) -> str:
        return (
            f"ProjectHistory(undo={len(self._undo_stack)}, "
            f"redo={len(self._redo_stack)}, max_history={self.max_history})"
        )

    def save_snapshot(self, state: ProjectState) -> None:
        """Record a copy of ``state``; a repeat of the last snapshot is ignored."""
        if self._undo_stack and self._undo_stack[-1].to_json() == state.to_json():
            return
        if len(self._undo_stack) >= self.max_history:
            self._undo_stack.popleft()
        self._undo_stack.append(copy.deepcopy(state))
        self._redo_stack.clear()

    def undo(self, current_state: ProjectState) -> ProjectState | None:
        """Return the previous state, keeping ``current_state`` for redo; None if empty."""
        if not self._undo_stack:
            return None
        previous = self._undo_stack.pop()
        self._redo_stack.append(copy.deepcopy(current_state))
        return previous

    def redo(self, current_state: ProjectState) -> ProjectState | None:
        """Return the next state, keeping ``current_state`` for undo; None if empty."""
        if not self._redo_stack:
            return None
        following = self._redo_stack.pop()
        self._undo_stack.append(copy.deepcopy(current_state))
        return following

    def clear(self) -> None:
        """Forget all snapshots."""
        self._undo_stack.clear()
        self._redo_stack.clear()