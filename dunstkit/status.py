"""The daemon's global window status."""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace

__all__ = ["StatusField", "DunstStatus", "StatusTracker", "version_message"]


class StatusField(enum.Enum):
    """A field of the status that can be changed."""

    FULLSCREEN = 0
    IDLE = 1
    RUNNING = 2


@dataclass(frozen=True)
class DunstStatus:
    """Whether a fullscreen window is focused, dunst is running, the user is idle."""

    fullscreen: bool = False
    running: bool = False
    idle: bool = False


_ATTRIBUTES = {
    StatusField.FULLSCREEN: "fullscreen",
    StatusField.IDLE: "idle",
    StatusField.RUNNING: "running",
}


class StatusTracker:
    """Holds the current status and changes it one field at a time."""

    def __init__(self) -> None:
        self._status = DunstStatus()

    def set(self, field: StatusField, value: bool) -> None:
        """Set one field of the status."""
        try:
            attribute = _ATTRIBUTES[field]
        except (KeyError, TypeError):
            raise ValueError(f"Invalid dunst_status enum value: {field!r}") from None
        self._status = replace(self._status, **{attribute: bool(value)})

    def get(self) -> DunstStatus:
        """Return a snapshot of the current status."""
        return self._status


def version_message(version: str) -> str:
    """Return the line printed for the version option."""
    return f"Dunst - A customizable and lightweight notification-daemon {version}"