"""Shared fixtures: small JPEG files with crafted EXIF and GPS groups."""

from __future__ import annotations

from pathlib import Path
import struct
import zlib

import pytest
from PIL import Image
from PIL.TiffImagePlugin import IFDRational


def dms(degrees: int, minutes: int, seconds: int) -> tuple[IFDRational, IFDRational, IFDRational]:
    return (IFDRational(degrees, 1), IFDRational(minutes, 1), IFDRational(seconds, 1))


def write_jpeg(
    path: Path,
    exif_tags: dict | None = None,
    gps_tags: dict | None = None,
    ifd0_tags: dict | None = None,
    size: tuple[int, int] = (32, 16),
) -> Path:
    """Save a solid-color JPEG carrying the given tag groups."""
    exif = Image.Exif()
    for tag, value in (ifd0_tags or {}).items():
        exif[tag] = value
    if exif_tags:
        exif[0x8769] = dict(exif_tags)
    if gps_tags:
        exif[0x8825] = dict(gps_tags)
    Image.new("RGB", size, (200, 30, 30)).save(path, "JPEG", exif=exif)
    return path


@pytest.fixture
def jpeg_factory(tmp_path: Path):
    counter = {"n": 0}

    def _make(**kwargs) -> Path:
        counter["n"] += 1
        return write_jpeg(tmp_path / f"photo_{counter['n']}.jpg", **kwargs)

    return _make


TOKYO_GPS = {
    1: "N",
    2: dms(35, 30, 0),
    3: "E",
    4: dms(139, 45, 36),
}

CAMERA_EXIF = {
    0x829A: IFDRational(1, 125),  # ExposureTime
    0x9003: "2023:05:01 12:34:56",  # DateTimeOriginal
}


@pytest.fixture
def tokyo_gps() -> dict:
    return dict(TOKYO_GPS)


@pytest.fixture
def camera_exif() -> dict:
    return dict(CAMERA_EXIF)


def _png_chunk(kind: bytes, data: bytes) -> bytes:
    return (
        struct.pack(">I", len(data))
        + kind
        + data
        + struct.pack(">I", zlib.crc32(kind + data) & 0xFFFFFFFF)
    )


def write_png_header(path: Path, width: int, height: int) -> Path:
    """Write a PNG that declares `width`x`height` but carries no pixel data."""
    ihdr = struct.pack(">IIBBBBB", width, height, 8, 2, 0, 0, 0)
    path.write_bytes(
        b"\x89PNG\r\n\x1a\n"
        + _png_chunk(b"IHDR", ihdr)
        + _png_chunk(b"IDAT", b"")
        + _png_chunk(b"IEND", b"")
    )
    return path


@pytest.fixture
def oversized_png(tmp_path: Path) -> Path:
    # 400 Mpx, above Pillow's decompression bomb error threshold
    return write_png_header(tmp_path / "panorama.png", 20000, 20000)
