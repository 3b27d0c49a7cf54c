"""Single-selection playback toggle decoupled from any UI toolkit.

The service talks to a `PlaybackEngine` so that views can supply a Qt
multimedia engine while tests supply a recording fake.
"""

from __future__ import annotations

from collections.abc import Iterable

from loguru import logger

from core.services.interfaces import PlaybackEngine


class PlaybackToggleService:
    """Track which entry of an ordered file list is active and drive playback.

    Tapping the active entry stops it and clears the selection. Tapping any
    other entry plays it and makes it active. With the default settings the
    previously active entry is not stopped on a switch, so two sounds can be
    audible at once; pass `stop_previous_on_switch=True` to stop it first.
    """

    def __init__(
        self,
        files: Iterable[str],
        engine: PlaybackEngine,
        stop_previous_on_switch: bool = False,
    ) -> None:
        self._files: tuple[str, ...] = tuple(files)
        self._engine = engine
        self._stop_previous = bool(stop_previous_on_switch)
        self._active: str | None = None

    @property
    def files(self) -> tuple[str, ...]:
        return self._files

    @property
    def active(self) -> str | None:
        """Entry currently marked as playing, if any."""
        return self._active

    def is_active(self, name: str) -> bool:
        return self._active is not None and self._active == name

    def activate(self, name: str) -> str | None:
        """Handle a tap on `name` and return the new active entry.

        Raises:
            ValueError: `name` is not part of the file list.
        """
        if name not in self._files:
            raise ValueError(f"Unknown entry: {name!r}")

        if self._active == name:
            self._engine.stop(name)
            self._active = None
            logger.info("Stopped {}", name)
            return None

        previous = self._active
        if previous is not None and self._stop_previous:
            self._engine.stop(previous)
        elif previous is not None:
            logger.debug("Switching from {} to {} without stopping it", previous, name)
        self._engine.play(name)
        self._active = name
        logger.info("Playing {}", name)
        return name
