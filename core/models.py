"""Core domain models for picked photos and their embedded metadata."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class GeoLocation:
    """A (latitude, longitude) pair in decimal degrees."""

    latitude: float
    longitude: float

    def __str__(self) -> str:
        return f"{self.latitude:.6f}, {self.longitude:.6f}"


@dataclass(frozen=True)
class MetadataRecord:
    """Ordered EXIF tags of a single image, rendered to text values."""

    tags: tuple[tuple[str, str], ...] = ()

    @property
    def display_text(self) -> str:
        """One `Name: value` line per tag; empty when there are no tags."""
        return "\n".join(f"{name}: {value}" for name, value in self.tags)

    def get(self, name: str) -> str | None:
        for tag_name, value in self.tags:
            if tag_name == name:
                return value
        return None

    def __len__(self) -> int:
        return len(self.tags)


@dataclass
class ImageMetadata:
    """Result of reading the property groups of one image file.

    `gps_latitude`/`gps_longitude` hold what the GPS group actually carried
    (None when the individual tag was missing or malformed), while `location`
    is the coordinate shown to the user, with missing parts defaulted to 0.0.
    """

    path: str
    metadata: MetadataRecord | None = None
    location: GeoLocation | None = None
    gps_latitude: float | None = None
    gps_longitude: float | None = None
    warnings: list[str] = field(default_factory=list)

    @property
    def metadata_text(self) -> str:
        return self.metadata.display_text if self.metadata else ""

    @property
    def has_location(self) -> bool:
        return self.location is not None
