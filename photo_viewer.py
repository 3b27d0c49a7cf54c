"""Photo metadata viewer: pick a photo, show its EXIF tags and GPS location."""

from __future__ import annotations

import sys
from pathlib import Path

from PySide6.QtWidgets import QApplication
from loguru import logger

from app.viewmodels.photo_vm import PhotoViewerVM
from app.views.photo_viewer_window import PhotoViewerWindow
from infrastructure.image_service import ImageService
from infrastructure.logging import init_logging
from infrastructure.metadata_service import MetadataService
from infrastructure.settings import JsonSettings
from infrastructure.utils import DEFAULT_MAP_URL_TEMPLATE, DEFAULT_REGION_METERS


BASE_DIR = Path(__file__).parent


def main() -> int:
    settings = JsonSettings(BASE_DIR / "settings.json")
    log_dir = init_logging(settings.get("logging.dir"), prefix="photo_viewer")
    logger.info("Photo viewer starting; logs in {}", log_dir)

    app = QApplication(sys.argv)

    vm = PhotoViewerVM(
        loader=ImageService(settings),
        extractor=MetadataService(apply_gps_ref=settings.get_bool("photo.apply_gps_ref", False)),
        map_url_template=str(settings.get("map.url_template", DEFAULT_MAP_URL_TEMPLATE)),
        region_meters=settings.get_float("map.region_meters", DEFAULT_REGION_METERS),
    )
    win = PhotoViewerWindow(vm=vm, start_dir=str(settings.get("photo.start_dir", "") or ""))
    win.resize(600, 900)
    win.statusBar().showMessage("Ready", 2000)
    win.show()

    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
