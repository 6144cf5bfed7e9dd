"""Application commands for undo/redo, grid settings and project files."""

from __future__ import annotations

import dataclasses
import logging
import os
from pathlib import Path

from opendaw.app_state import AppState, CommandError
from opendaw.engine import EngineHandle
from opendaw.project import ProjectState

logger = logging.getLogger(__name__)


def _apply_to_engine(engine: EngineHandle, project: ProjectState) -> None:
    engine.set_bpm(project.bpm)
    engine.set_master_volume(project.master_volume)
    if project.is_playing:
        engine.play()
    else:
        engine.pause()


def undo(state: AppState) -> None:
    """Restore the previous project state, if there is one."""
    logger.info("Project: Undo")
    engine = state.engine
    with engine.lock:
        previous = engine.history.undo(engine.project_state)
        if previous is not None:
            engine.project_state = previous
            _apply_to_engine(engine, previous)


def redo(state: AppState) -> None:
    """Restore the most recently undone project state, if there is one."""
    logger.info("Project: Redo")
    engine = state.engine
    with engine.lock:
        following = engine.history.redo(engine.project_state)
        if following is not None:
            engine.project_state = following
            _apply_to_engine(engine, following)


def set_grid_settings(state: AppState, is_enabled: bool, resolution: int) -> None:
    """Update grid snapping."""
    logger.info("Project: Set Grid Settings: enabled=%s, resolution=%s", is_enabled, resolution)
    engine = state.engine
    with engine.lock:
        engine.project_state.grid_settings.is_enabled = is_enabled
        engine.project_state.grid_settings.resolution = resolution


def _current_project(engine: EngineHandle) -> ProjectState:
    with engine.lock:
        return dataclasses.replace(
            engine.project_state,
            is_playing=engine.is_playing,
            bpm=engine.bpm,
            master_volume=engine.master_volume,
        )


def get_project_state(state: AppState) -> str:
    """Return the project as JSON, with transport values taken from the engine."""
    return _current_project(state.engine).to_json()


def save_project(state: AppState, path: str | os.PathLike[str]) -> None:
    """Write the project to ``path`` as indented JSON."""
    logger.info("Project: Save project to %s", path)
    text = _current_project(state.engine).to_json(indent=2)
    try:
        Path(path).write_text(text, encoding="utf-8")
    except OSError as exc:
        raise CommandError(f"File write error: {exc}") from exc


def load_project(state: AppState, path: str | os.PathLike[str]) -> None:
    """Replace the project with the one stored at ``path``."""
    logger.info("Project: Load project from %s", path)
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise CommandError(f"File read error: {exc}") from exc
    try:
        project = ProjectState.from_json(text)
    except ValueError as exc:
        raise CommandError(f"Deserialization error: {exc}") from exc

    engine = state.engine
    with engine.lock:
        engine.project_state = project
        _apply_to_engine(engine, project)