"""Tests for image discovery, dimension reading and thumbnails."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from PIL import Image

import hybrid_collage.image_io as hc_image_io
from hybrid_collage.constants import EXIF_ORIENTATION_TAG

pytestmark = pytest.mark.visual


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("collage.jpg", True),
        ("Collage.PNG", True),
        ("collage.final.jpeg", True),
        ("my_collage.jpg", False),
        ("collages.jpg", False),
        ("photo.jpg", False),
    ],
)
def test_is_collage_output(name: str, expected: bool) -> None:  # noqa: FBT001
    assert hc_image_io.is_collage_output(Path(name)) is expected


class TestCollectImagePaths:
    def test_directory_filters_and_sorts(self, write_image, tmp_path) -> None:
        folder = tmp_path / "in"
        write_image("b.png", (10, 10), directory=folder)
        write_image("a.jpg", (10, 10), directory=folder)
        write_image("collage.jpg", (10, 10), directory=folder)
        (folder / "notes.txt").write_text("hi", encoding="utf-8")

        paths = hc_image_io.collect_image_paths([folder])
        assert [p.name for p in paths] == ["a.jpg", "b.png"]

    def test_recursive(self, write_image, tmp_path) -> None:
        folder = tmp_path / "in"
        write_image("top.jpg", (10, 10), directory=folder)
        write_image("deep.jpg", (10, 10), directory=folder / "sub")

        flat = hc_image_io.collect_image_paths([folder])
        deep = hc_image_io.collect_image_paths([folder], recursive=True)
        assert [p.name for p in flat] == ["top.jpg"]
        assert sorted(p.name for p in deep) == ["deep.jpg", "top.jpg"]

    def test_explicit_files_keep_order_and_dedupe(
        self, write_image, tmp_path,
    ) -> None:
        a = write_image("a.jpg", (10, 10))
        b = write_image("b.jpg", (10, 10))
        out = write_image("COLLAGE.jpg", (10, 10))

        paths = hc_image_io.collect_image_paths([b, a, out, b, tmp_path / "a.jpg"])
        assert paths == [b, a]

    def test_missing_path_raises(self, tmp_path) -> None:
        with pytest.raises(FileNotFoundError, match="Input path not found"):
            hc_image_io.collect_image_paths([tmp_path / "nope.jpg"])


class TestReadDescriptor:
    def test_reads_size_with_path_handle(self, write_image) -> None:
        path = write_image("wide.png", (40, 30))
        descriptor = hc_image_io.read_descriptor(path)
        assert descriptor.size == (40, 30)
        assert descriptor.handle == path
        assert descriptor.orientation == "landscape"

    def test_exif_rotation_swaps_dimensions(self, tmp_path: Path) -> None:
        path = tmp_path / "rotated.jpg"
        exif = Image.Exif()
        exif[EXIF_ORIENTATION_TAG] = 6
        Image.new("RGB", (40, 30), "red").save(path, exif=exif)

        descriptor = hc_image_io.read_descriptor(path)
        assert descriptor.size == (30, 40)
        assert descriptor.orientation == "portrait"

        with hc_image_io.open_oriented(path) as img:
            assert img.size == (30, 40)
            assert img.mode == "RGB"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError, match="Image file not found"):
            hc_image_io.read_descriptor(tmp_path / "missing.jpg")

    def test_unreadable_file(self, tmp_path: Path) -> None:
        bad = tmp_path / "bad.jpg"
        bad.write_bytes(b"not an image")
        with pytest.raises(OSError, match="Error loading image"):
            hc_image_io.read_descriptor(bad)


class TestLoadDescriptors:
    def test_sorted_by_mtime(self, write_image) -> None:
        late = write_image("late.jpg", (10, 10), mtime=3_000)
        early = write_image("early.jpg", (10, 10), mtime=1_000)
        mid = write_image("mid.jpg", (10, 10), mtime=2_000)

        loaded = hc_image_io.load_descriptors([late, early, mid])
        assert [d.handle for d in loaded] == [early, mid, late]

    def test_unsorted_keeps_input_order(self, write_image) -> None:
        late = write_image("late.jpg", (10, 10), mtime=3_000)
        early = write_image("early.jpg", (10, 10), mtime=1_000)

        loaded = hc_image_io.load_descriptors(
            [late, early], sort_by_mtime=False,
        )
        assert [d.handle for d in loaded] == [late, early]

    def test_equal_mtimes_keep_input_order(self, write_image) -> None:
        b = write_image("b.jpg", (10, 10), mtime=5_000)
        a = write_image("a.jpg", (10, 10), mtime=5_000)
        loaded = hc_image_io.load_descriptors([b, a])
        assert [d.handle for d in loaded] == [b, a]

    def test_skips_unreadable_with_warning(
        self,
        write_image,
        tmp_path: Path,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        caplog.set_level(logging.WARNING)
        good = write_image("good.jpg", (10, 10))
        bad = tmp_path / "bad.jpg"
        bad.write_bytes(b"garbage")

        loaded = hc_image_io.load_descriptors([bad, good])
        assert [d.handle for d in loaded] == [good]
        assert "Skipping" in caplog.text
        assert "bad.jpg" in caplog.text


def test_make_thumbnail_fits_box() -> None:
    thumb = hc_image_io.make_thumbnail(Image.new("RGB", (400, 200)), 120)
    assert thumb.size == (120, 60)
    tall = hc_image_io.make_thumbnail(Image.new("L", (100, 300)), 120)
    assert tall.size == (40, 120)
    assert tall.mode == "RGB"


def test_save_thumbnails_numbered(write_image, tmp_path: Path) -> None:
    paths = [
        write_image("first shot.jpg", (400, 200)),
        write_image("second.jpg", (200, 400)),
    ]
    descriptors = hc_image_io.load_descriptors(paths, sort_by_mtime=False)

    written = hc_image_io.save_thumbnails(
        descriptors, tmp_path / "thumbs", size=50, quality=70,
    )
    assert [p.name for p in written] == [
        "thumb_001_first_shot.jpg",
        "thumb_002_second.jpg",
    ]
    with Image.open(written[0]) as img:
        assert img.size == (50, 25)
