"""Core service interfaces shared by the infrastructure and UI layers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from PySide6.QtGui import QImage

    from core.models import ImageMetadata


class PlaybackEngine(Protocol):
    """Starts and stops playback of a named sound.

    Implementations resolve the name to a playable source themselves.
    """

    def play(self, name: str) -> None:
        """Start playback of `name`."""
        ...

    def stop(self, name: str) -> None:
        """Stop playback of `name`."""
        ...


class MetadataExtractor(Protocol):
    """Reads the property groups (EXIF, GPS) of an image file."""

    def extract(self, path: str) -> ImageMetadata:
        """Return an `ImageMetadata` for `path`; never raises."""
        ...


class ImageLoader(Protocol):
    """Decodes an image file into a displayable bitmap."""

    def load(self, path: str) -> QImage | None:
        """Return a bitmap for `path`, or None when it cannot be decoded."""
        ...
