"""Bundled MP3 browser: list the sound files and toggle playback per row."""

from __future__ import annotations

import sys
from pathlib import Path

from PySide6.QtWidgets import QApplication
from loguru import logger

from app.viewmodels.audio_vm import AudioBrowserVM
from app.views.audio_browser_window import AudioBrowserWindow
from core.services.selection_service import PlaybackToggleService
from infrastructure.audio_engine import QtAudioEngine
from infrastructure.audio_library import DEFAULT_SUFFIX, discover_audio_files
from infrastructure.logging import init_logging
from infrastructure.settings import JsonSettings


BASE_DIR = Path(__file__).parent


def main() -> int:
    settings = JsonSettings(BASE_DIR / "settings.json")
    log_dir = init_logging(settings.get("logging.dir"), prefix="audio_player")
    logger.info("Audio player starting; logs in {}", log_dir)

    # File discovery happens once, before any widget exists
    resources_dir = settings.resolve_path("audio.resources_dir", "resources")
    files = discover_audio_files(resources_dir, str(settings.get("audio.suffix", DEFAULT_SUFFIX)))

    app = QApplication(sys.argv)

    engine = QtAudioEngine(resources_dir, volume=settings.get_float("audio.volume", 0.5))
    app.aboutToQuit.connect(engine.cleanup)
    toggle = PlaybackToggleService(
        files,
        engine,
        stop_previous_on_switch=settings.get_bool("audio.stop_previous_on_switch", False),
    )
    win = AudioBrowserWindow(AudioBrowserVM(toggle))
    win.resize(420, 600)
    win.show()

    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
