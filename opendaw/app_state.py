"""State shared by the application's commands."""

from __future__ import annotations

from dataclasses import dataclass, field

from opendaw.engine import EngineHandle


class CommandError(Exception):
    """Raised when an application command cannot be carried out."""


@dataclass
class AppState:
    """Holds the engine handle that every command works on."""

    engine: EngineHandle = field(default_factory=EngineHandle)