"""QtMultimedia-backed playback engine keyed by file name."""

from __future__ import annotations

from pathlib import Path

from PySide6.QtCore import QObject, QUrl
from PySide6.QtMultimedia import QAudioOutput, QMediaPlayer
from loguru import logger


class QtAudioEngine:
    """Play and stop bundled sounds by their name relative to `resources_dir`.

    Each name gets its own `QMediaPlayer`, created on first use, so sounds
    are independent of each other.
    """

    def __init__(
        self, resources_dir: str | Path, volume: float = 0.5, parent: QObject | None = None
    ) -> None:
        self._root = Path(resources_dir)
        self._volume = min(1.0, max(0.0, float(volume)))
        self._parent = parent
        self._players: dict[str, tuple[QMediaPlayer, QAudioOutput]] = {}

    def _player_for(self, name: str) -> QMediaPlayer | None:
        entry = self._players.get(name)
        if entry is not None:
            return entry[0]
        path = self._root / name
        if not path.is_file():
            logger.error("Sound file not found: {}", path)
            return None
        player = QMediaPlayer(self._parent)
        output = QAudioOutput(self._parent)
        output.setVolume(self._volume)
        player.setAudioOutput(output)
        player.setSource(QUrl.fromLocalFile(str(path)))
        player.errorOccurred.connect(
            lambda _err, msg, _name=name: logger.error("Playback error for {}: {}", _name, msg)
        )
        self._players[name] = (player, output)
        return player

    def play(self, name: str) -> None:
        """Play `name` from the beginning."""
        player = self._player_for(name)
        if player is None:
            return
        try:
            player.stop()
            player.play()
        except RuntimeError as ex:
            logger.error("Failed to play {}: {}", name, ex)

    def stop(self, name: str) -> None:
        entry = self._players.get(name)
        if entry is None:
            return
        try:
            entry[0].stop()
        except RuntimeError as ex:
            logger.error("Failed to stop {}: {}", name, ex)

    def cleanup(self) -> None:
        """Stop all players and release their resources."""
        for player, output in self._players.values():
            try:
                player.stop()
                player.setSource(QUrl())
                player.deleteLater()
                output.deleteLater()
            except RuntimeError as ex:
                logger.debug("Player teardown failed: {}", ex)
        self._players.clear()
