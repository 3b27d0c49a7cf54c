"""Decode picked photos into `QImage` for display.

Qt's `QImageReader` handles the common formats; HEIC/HEIF (and anything Qt
cannot read) goes through Pillow with pillow-heif registered.
"""

from __future__ import annotations

from pathlib import Path

from PIL import Image, ImageOps
from PySide6.QtCore import QSize, Qt
from PySide6.QtGui import QImage, QImageReader
from pillow_heif import register_heif_opener
from loguru import logger

register_heif_opener()

HEIF_EXTENSIONS = {".heic", ".heif"}

# Extensions offered by the picker dialog
IMAGE_EXTENSIONS = (
    ".jpg", ".jpeg", ".png", ".tif", ".tiff", ".webp", ".bmp", ".gif", ".heic", ".heif",
)


def _pil_to_qimage(pil_img: Image.Image) -> QImage | None:
    """Copy a Pillow image into a detached QImage."""
    if pil_img.mode not in ("RGBA", "RGB"):
        pil_img = pil_img.convert("RGBA")
    if pil_img.mode == "RGB":
        data = pil_img.tobytes("raw", "RGB")
        qimg = QImage(data, pil_img.width, pil_img.height, pil_img.width * 3, QImage.Format_RGB888)
    else:
        data = pil_img.tobytes("raw", "RGBA")
        qimg = QImage(
            data, pil_img.width, pil_img.height, pil_img.width * 4, QImage.Format_RGBA8888
        )
    if qimg.isNull():
        return None
    # Detach from Python buffer
    return qimg.copy()


def _bounded_size(width: int, height: int, max_side: int) -> QSize:
    if width >= height:
        nw = min(max_side, width)
        nh = int(height * (nw / max(1, width)))
    else:
        nh = min(max_side, height)
        nw = int(width * (nh / max(1, height)))
    return QSize(max(1, nw), max(1, nh))


class ImageService:
    """Load a display bitmap for a picked file."""

    def __init__(self, settings: object | None = None) -> None:
        self._max_side = 0
        if settings is not None:
            try:
                self._max_side = int(settings.get("photo.preview_max_side", 0) or 0)
            except (ValueError, TypeError):
                self._max_side = 0

    def load(self, path: str) -> QImage | None:
        """Return a QImage for `path`, or None when it cannot be decoded."""
        ext = Path(path).suffix.lower()
        if ext not in HEIF_EXTENSIONS:
            img = self._load_via_qt(path)
            if img is not None:
                return img
        return self._load_via_pillow(path)

    def _load_via_qt(self, path: str) -> QImage | None:
        reader = QImageReader(path)
        reader.setAutoTransform(True)
        if self._max_side > 0 and reader.size().isValid():
            orig = reader.size()
            reader.setScaledSize(_bounded_size(orig.width(), orig.height(), self._max_side))
        img = reader.read()
        if img is None or img.isNull():
            logger.debug("Qt read failed for {}: {}", path, reader.errorString() or "null image")
            return None
        if self._max_side > 0 and max(img.width(), img.height()) > self._max_side:
            img = img.scaled(
                self._max_side, self._max_side, Qt.KeepAspectRatio, Qt.SmoothTransformation
            )
        return img

    def _load_via_pillow(self, path: str) -> QImage | None:
        try:
            with Image.open(path) as im:
                im = ImageOps.exif_transpose(im)
                if self._max_side > 0:
                    im.thumbnail((self._max_side, self._max_side), Image.Resampling.LANCZOS)
                return _pil_to_qimage(im)
        except (OSError, ValueError, SyntaxError, Image.DecompressionBombError) as ex:
            logger.debug("Pillow load failed for {}: {}", path, ex)
            return None
