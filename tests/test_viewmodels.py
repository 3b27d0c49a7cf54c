"""
Unit tests for the photo viewer and audio browser view-models.

Loaders and engines are fakes, so no QApplication is needed.
"""

import pytest

from app.viewmodels.audio_vm import PLAY_ICON, STOP_ICON, AudioBrowserVM
from app.viewmodels.photo_vm import NO_IMAGE_TEXT, NO_LOCATION_TEXT, PhotoViewerVM
from core.models import GeoLocation, ImageMetadata, MetadataRecord
from core.services.selection_service import PlaybackToggleService
from infrastructure.metadata_service import MetadataService


class FakeLoader:
    def __init__(self, images: dict):
        self._images = images

    def load(self, path):
        return self._images.get(path)


class FakeExtractor:
    def __init__(self, results: dict):
        self._results = results

    def extract(self, path):
        return self._results.get(path, ImageMetadata(path=path))


class NullEngine:
    def play(self, name):
        pass

    def stop(self, name):
        pass


class TestPhotoViewerVM:
    """Display state transitions on picks."""

    def test_initial_state_shows_placeholders(self):
        vm = PhotoViewerVM(FakeLoader({}), FakeExtractor({}))

        assert vm.image is None
        assert vm.image_placeholder == NO_IMAGE_TEXT
        assert vm.metadata_text == ""
        assert vm.location_text == NO_LOCATION_TEXT
        assert vm.map_url() is None

    def test_pick_populates_all_outputs(self):
        result = ImageMetadata(
            path="p.jpg",
            metadata=MetadataRecord(tags=(("ISOSpeedRatings", "100"),)),
            location=GeoLocation(48.8584, 2.2945),
        )
        vm = PhotoViewerVM(FakeLoader({"p.jpg": "bitmap"}), FakeExtractor({"p.jpg": result}))

        vm.request_pick()
        vm.apply_pick("p.jpg")

        assert vm.image == "bitmap"
        assert vm.image_placeholder == ""
        assert vm.metadata_text == "ISOSpeedRatings: 100"
        assert vm.location == GeoLocation(48.8584, 2.2945)
        assert vm.location_text == "48.858400, 2.294500"
        assert not vm.is_picker_shown

    def test_new_pick_replaces_previous_state(self):
        first = ImageMetadata(
            path="a.jpg",
            metadata=MetadataRecord(tags=(("FNumber", "2.8"),)),
            location=GeoLocation(1.0, 2.0),
        )
        vm = PhotoViewerVM(
            FakeLoader({"a.jpg": "A", "b.jpg": "B"}), FakeExtractor({"a.jpg": first})
        )

        vm.apply_pick("a.jpg")
        vm.apply_pick("b.jpg")

        assert vm.image == "B"
        assert vm.metadata_text == ""
        assert vm.location is None

    def test_undecodable_image_still_gets_metadata(self):
        result = ImageMetadata(path="x.heic", location=GeoLocation(0.0, 0.0))
        vm = PhotoViewerVM(FakeLoader({}), FakeExtractor({"x.heic": result}))

        vm.apply_pick("x.heic")

        assert vm.image is None
        assert vm.location == GeoLocation(0.0, 0.0)

    def test_loader_exception_is_swallowed(self):
        class Exploding:
            def load(self, path):
                raise RuntimeError("decoder crashed")

        vm = PhotoViewerVM(Exploding(), FakeExtractor({}))

        vm.apply_pick("broken.jpg")

        assert vm.image is None
        assert vm.image_placeholder == NO_IMAGE_TEXT

    def test_cancel_pick_keeps_state(self):
        vm = PhotoViewerVM(FakeLoader({"a.jpg": "A"}), FakeExtractor({}))
        vm.apply_pick("a.jpg")

        vm.request_pick()
        assert vm.is_picker_shown
        vm.cancel_pick()

        assert not vm.is_picker_shown
        assert vm.image == "A"

    def test_map_url_uses_template(self):
        result = ImageMetadata(path="p.jpg", location=GeoLocation(10.0, -20.0))
        vm = PhotoViewerVM(
            FakeLoader({}),
            FakeExtractor({"p.jpg": result}),
            map_url_template="geo:{lat:.1f},{lon:.1f}?z={zoom}",
        )

        vm.apply_pick("p.jpg")

        assert vm.map_url().startswith("geo:10.0,-20.0?z=")

    def test_with_real_extractor(self, jpeg_factory, camera_exif, tokyo_gps):
        path = str(jpeg_factory(exif_tags=camera_exif, gps_tags=tokyo_gps))
        vm = PhotoViewerVM(FakeLoader({path: "bitmap"}), MetadataService())

        vm.apply_pick(path)

        assert "DateTimeOriginal: 2023:05:01 12:34:56" in vm.metadata_text
        assert vm.location.latitude == pytest.approx(35.5)

    def test_oversized_image_falls_back_to_placeholders(self, oversized_png):
        vm = PhotoViewerVM(FakeLoader({}), MetadataService())

        vm.apply_pick(str(oversized_png))

        assert vm.image_placeholder == NO_IMAGE_TEXT
        assert vm.metadata_text == ""
        assert vm.location_text == NO_LOCATION_TEXT


class TestAudioBrowserVM:
    """Row styling follows the active entry."""

    def _vm(self, files=("a.mp3", "b.mp3")):
        return AudioBrowserVM(PlaybackToggleService(files, NullEngine()))

    def test_rows_start_idle(self):
        vm = self._vm()

        rows = vm.rows()

        assert [r.name for r in rows] == ["a.mp3", "b.mp3"]
        assert all(r.icon_text == PLAY_ICON and not r.is_dimmed for r in rows)

    def test_tap_marks_row_active(self):
        vm = self._vm()

        vm.tap("b.mp3")
        rows = {r.name: r for r in vm.rows()}

        assert rows["b.mp3"].icon_text == STOP_ICON
        assert rows["b.mp3"].is_dimmed
        assert rows["a.mp3"].icon_text == PLAY_ICON
        assert vm.active == "b.mp3"

    def test_second_tap_resets_row(self):
        vm = self._vm()

        vm.tap("a.mp3")
        assert vm.tap("a.mp3") is None

        assert all(not r.is_active for r in vm.rows())

    def test_empty_list(self):
        vm = self._vm(files=())

        assert vm.rows() == []
        assert vm.files == ()
