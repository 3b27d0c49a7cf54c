"""ViewModel holding the display state of the photo metadata viewer."""

from __future__ import annotations

from typing import Any

from loguru import logger

from core.models import GeoLocation
from core.services.interfaces import ImageLoader, MetadataExtractor
from infrastructure.utils import DEFAULT_MAP_URL_TEMPLATE, DEFAULT_REGION_METERS, build_map_url

NO_IMAGE_TEXT = "No image selected"
NO_LOCATION_TEXT = "No location information available"


class PhotoViewerVM:
    """Selected image, its metadata text and its optional location.

    Every pick replaces all three wholesale; nothing from a previous pick
    survives a new one.
    """

    def __init__(
        self,
        loader: ImageLoader,
        extractor: MetadataExtractor,
        map_url_template: str = DEFAULT_MAP_URL_TEMPLATE,
        region_meters: float = DEFAULT_REGION_METERS,
    ) -> None:
        self._loader = loader
        self._extractor = extractor
        self._map_url_template = map_url_template
        self._region_meters = region_meters
        self.image: Any | None = None
        self.metadata_text: str = ""
        self.location: GeoLocation | None = None
        self.is_picker_shown: bool = False

    def request_pick(self) -> None:
        self.is_picker_shown = True

    def cancel_pick(self) -> None:
        self.is_picker_shown = False

    def apply_pick(self, path: str) -> None:
        """Replace the display state with the image at `path`."""
        self.image = None
        self.metadata_text = ""
        self.location = None

        try:
            self.image = self._loader.load(path)
        except Exception as ex:  # pylint: disable=broad-exception-caught
            logger.error("Image load failed for {}: {}", path, ex)
            self.image = None

        result = self._extractor.extract(path)
        self.metadata_text = result.metadata_text
        self.location = result.location
        self.is_picker_shown = False
        logger.info(
            "Picked {} | image={} | tags={} | location={}",
            path,
            self.image is not None,
            len(result.metadata) if result.metadata else 0,
            self.location,
        )

    @property
    def has_image(self) -> bool:
        return self.image is not None

    @property
    def image_placeholder(self) -> str:
        return "" if self.has_image else NO_IMAGE_TEXT

    @property
    def location_text(self) -> str:
        return str(self.location) if self.location is not None else NO_LOCATION_TEXT

    def map_url(self) -> str | None:
        """URL of an external map centred on the location, or None."""
        if self.location is None:
            return None
        return build_map_url(self.location, self._map_url_template, self._region_meters)
