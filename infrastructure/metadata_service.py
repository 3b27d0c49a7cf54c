"""EXIF and GPS extraction for picked photos.

Reads the Exif and GPS sub-IFDs with Pillow (pillow-heif registered so HEIC
files from phones open the same way) and turns them into typed
`ImageMetadata`. Extraction is best-effort and will not raise; callers get an
`ImageMetadata` with no metadata and no location when the file cannot be read.
"""

from __future__ import annotations

import math
from typing import Any

from PIL import ExifTags, Image
from pillow_heif import register_heif_opener
from loguru import logger

from core.models import GeoLocation, ImageMetadata, MetadataRecord

register_heif_opener()

# GPS IFD tag ids (see PIL.ExifTags.GPSTAGS)
GPS_LATITUDE_REF = 1
GPS_LATITUDE = 2
GPS_LONGITUDE_REF = 3
GPS_LONGITUDE = 4

# Binary tag values longer than this are summarized instead of printed
MAX_BYTES_SHOWN = 64


def rational_to_float(value: Any) -> float:
    """Convert an EXIF rational (IFDRational, (num, den) pair or number) to float.

    Raises:
        ValueError: value is not numeric or has a zero denominator.
    """
    if isinstance(value, tuple) and len(value) == 2:
        num, den = value
        if not den:
            raise ValueError(f"zero denominator in {value!r}")
        return float(num) / float(den)
    num = getattr(value, "numerator", None)
    den = getattr(value, "denominator", None)
    if num is not None and den is not None:
        if not den:
            raise ValueError(f"zero denominator in {value!r}")
        return float(num) / float(den)
    try:
        result = float(value)
    except (TypeError, ValueError) as ex:
        raise ValueError(f"not a rational: {value!r}") from ex
    if math.isnan(result) or math.isinf(result):
        raise ValueError(f"not a finite rational: {value!r}")
    return result


def dms_to_degrees(value: Any, ref: Any = None) -> float:
    """Convert degrees/minutes/seconds to signed decimal degrees.

    `value` is usually three rationals; a single number is taken as decimal
    degrees. A reference of "S" or "W" makes the result negative.

    Raises:
        ValueError: value is missing or malformed.
    """
    if value is None:
        raise ValueError("missing coordinate")
    if isinstance(value, (list, tuple)):
        if not 1 <= len(value) <= 3:
            raise ValueError(f"unexpected coordinate shape: {value!r}")
        parts = [rational_to_float(v) for v in value]
    else:
        parts = [rational_to_float(value)]
    degrees = 0.0
    for i, part in enumerate(parts):
        degrees += part / (60.0**i)

    if isinstance(ref, bytes):
        ref = ref.decode("ascii", errors="ignore")
    if isinstance(ref, str) and ref.strip("\x00 ").upper() in ("S", "W"):
        degrees = -degrees
    return degrees


def format_tag_value(value: Any) -> str:
    """Render a raw EXIF value for display."""
    if isinstance(value, bytes):
        if len(value) > MAX_BYTES_SHOWN:
            return f"<{len(value)} bytes>"
        text = value.decode("ascii", errors="replace").strip("\x00 ")
        if text.isprintable():
            return text
        return value.hex(" ")
    if isinstance(value, str):
        return value.strip("\x00 ")
    if isinstance(value, (tuple, list)):
        return ", ".join(format_tag_value(v) for v in value)
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float) or hasattr(value, "denominator"):
        try:
            return f"{rational_to_float(value):g}"
        except ValueError:
            return str(value)
    return str(value)


def _tag_name(tag: int) -> str:
    return ExifTags.TAGS.get(tag, f"0x{tag:04X}")


class MetadataService:
    """Extract the EXIF tag group and GPS coordinate of an image file.

    GPS latitude/longitude are reported unsigned, as stored in the file. With
    `apply_gps_ref=True` the hemisphere reference tags make southern and
    western coordinates negative.
    """

    def __init__(self, apply_gps_ref: bool = False) -> None:
        self._apply_gps_ref = bool(apply_gps_ref)

    def extract(self, path: str) -> ImageMetadata:
        """Return `ImageMetadata` for `path`; never raises."""
        result = ImageMetadata(path=path)
        try:
            with Image.open(path) as im:
                exif = im.getexif()
                exif_ifd = dict(exif.get_ifd(ExifTags.IFD.Exif) or {})
                gps_ifd = dict(exif.get_ifd(ExifTags.IFD.GPSInfo) or {})
        except (
            OSError,
            ValueError,
            TypeError,
            SyntaxError,
            Image.DecompressionBombError,
        ) as ex:
            logger.debug("Property read failed for {}: {}", path, ex)
            return result

        if exif_ifd:
            result.metadata = self._build_record(exif_ifd)
        if gps_ifd:
            self.apply_gps(result, gps_ifd)
        return result

    def _build_record(self, exif_ifd: dict[int, Any]) -> MetadataRecord:
        tags: list[tuple[str, str]] = []
        for tag, value in exif_ifd.items():
            # Nested IFDs (e.g. Interop) are pointers, not displayable values
            if isinstance(value, dict):
                continue
            tags.append((_tag_name(tag), format_tag_value(value)))
        return MetadataRecord(tags=tuple(tags))

    def apply_gps(self, result: ImageMetadata, gps_ifd: dict[int, Any]) -> None:
        """Fill the GPS fields of `result` from a raw GPS IFD mapping."""
        lat_ref = gps_ifd.get(GPS_LATITUDE_REF) if self._apply_gps_ref else None
        lon_ref = gps_ifd.get(GPS_LONGITUDE_REF) if self._apply_gps_ref else None
        result.gps_latitude = self._coordinate(
            result, "latitude", gps_ifd.get(GPS_LATITUDE), lat_ref
        )
        result.gps_longitude = self._coordinate(
            result, "longitude", gps_ifd.get(GPS_LONGITUDE), lon_ref
        )
        # A GPS group always yields a location; missing parts become 0.0
        result.location = GeoLocation(
            latitude=result.gps_latitude if result.gps_latitude is not None else 0.0,
            longitude=result.gps_longitude if result.gps_longitude is not None else 0.0,
        )

    @staticmethod
    def _coordinate(result: ImageMetadata, label: str, value: Any, ref: Any) -> float | None:
        try:
            return dms_to_degrees(value, ref)
        except ValueError as ex:
            msg = f"GPS {label} unusable, defaulting to 0.0: {ex}"
            logger.warning("{} ({})", msg, result.path)
            result.warnings.append(msg)
            return None
