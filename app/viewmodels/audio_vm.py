"""ViewModels for the audio browser list."""

from __future__ import annotations

from dataclasses import dataclass

from core.services.selection_service import PlaybackToggleService

PLAY_ICON = "▶"
STOP_ICON = "■"


@dataclass(frozen=True)
class AudioRowVM:
    """Display state of one list row."""

    name: str
    is_active: bool

    @property
    def icon_text(self) -> str:
        return STOP_ICON if self.is_active else PLAY_ICON

    @property
    def is_dimmed(self) -> bool:
        """Active rows are drawn gray, the rest in the normal text color."""
        return self.is_active


class AudioBrowserVM:
    """Expose the file list and forward taps to the toggle service."""

    def __init__(self, toggle: PlaybackToggleService) -> None:
        self._toggle = toggle

    @property
    def files(self) -> tuple[str, ...]:
        return self._toggle.files

    @property
    def active(self) -> str | None:
        return self._toggle.active

    def rows(self) -> list[AudioRowVM]:
        return [AudioRowVM(name=f, is_active=self._toggle.is_active(f)) for f in self._toggle.files]

    def tap(self, name: str) -> str | None:
        """Handle a tap on the row for `name`; returns the new active entry."""
        return self._toggle.activate(name)
