from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from PIL import ExifTags, Image

if TYPE_CHECKING:
    from pathlib import Path

DATE_TIME_ORIGINAL = 0x9003
CREATE_DATE = 0x9004
MAKE = 0x010F


def create_image(
    path: Path,
    exif_ifd: dict[int, str] | None = None,
    ifd0: dict[int, str] | None = None,
    image_format: str = "JPEG",
) -> Path:
    """Creates a small image, optionally with IFD0 and Exif sub-IFD entries."""
    img = Image.new("RGB", (8, 8), color="red")
    if exif_ifd is None and ifd0 is None:
        img.save(path, image_format)
        return path

    exif = Image.Exif()
    for tag, value in (ifd0 or {}).items():
        exif[tag] = value
    if exif_ifd:
        exif[ExifTags.IFD.Exif] = exif_ifd
    img.save(path, image_format, exif=exif)
    return path


@pytest.fixture
def dated_image(tmp_path: Path):
    """Factory for JPEGs carrying a DateTimeOriginal entry."""

    def _make(name: str, taken: str = "2023:11:07 09:15:00") -> Path:
        return create_image(tmp_path / name, exif_ifd={DATE_TIME_ORIGINAL: taken})

    return _make
