"""Map URL helpers for showing a photo location in an external map.

Rendering is left to the user's browser; this module only computes the URL.
"""

from __future__ import annotations

import math

from core.models import GeoLocation

DEFAULT_MAP_URL_TEMPLATE = (
    "https://www.openstreetmap.org/?mlat={lat:.6f}&mlon={lon:.6f}#map={zoom}/{lat:.6f}/{lon:.6f}"
)
DEFAULT_REGION_METERS = 1000

# Metres per pixel at zoom 0 on the equator for 256px web-mercator tiles
_EQUATOR_M_PER_PX = 156543.03392
_VIEW_WIDTH_PX = 400
MIN_ZOOM = 1
MAX_ZOOM = 19


def zoom_for_region(
    latitude: float, region_meters: float, view_width_px: int = _VIEW_WIDTH_PX
) -> int:
    """Web map zoom level that shows about `region_meters` across the view."""
    if region_meters <= 0:
        return MAX_ZOOM
    cos_lat = max(0.01, abs(math.cos(math.radians(latitude))))
    m_per_px = region_meters / max(1, view_width_px)
    zoom = math.log2(_EQUATOR_M_PER_PX * cos_lat / m_per_px)
    return int(min(MAX_ZOOM, max(MIN_ZOOM, math.floor(zoom))))


def build_map_url(
    location: GeoLocation,
    template: str = DEFAULT_MAP_URL_TEMPLATE,
    region_meters: float = DEFAULT_REGION_METERS,
) -> str:
    """Format `template` with `lat`, `lon` and `zoom` for `location`."""
    zoom = zoom_for_region(location.latitude, region_meters)
    return template.format(lat=location.latitude, lon=location.longitude, zoom=zoom)
