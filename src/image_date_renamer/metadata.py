from __future__ import annotations

# ruff: noqa: DTZ007 Naive datetime constructed using `datetime.datetime.strptime()` without %z
import struct
import warnings
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any

from PIL import ExifTags, Image, UnidentifiedImageError

from image_date_renamer.errors import MetadataReadError

_EXIF_DATETIME_FORMAT = "%Y:%m:%d %H:%M:%S"


class TimeKind(Enum):
    """EXIF tags that record when an image was captured, keyed by tag id."""

    DATE_TIME_ORIGINAL = 0x9003
    CREATE_DATE = 0x9004


@dataclass(frozen=True)
class MetadataField:
    kind: TimeKind
    timestamp: datetime


@dataclass(frozen=True)
class NotAnImage:
    """The file content is not a format Pillow recognizes."""


@dataclass(frozen=True)
class NoEmbeddedMetadata:
    """The file is an image without any EXIF entries."""


@dataclass(frozen=True)
class Fields:
    """Capture-time entries of an image, in the order they were found."""

    entries: tuple[MetadataField, ...]


MetadataOutcome = NotAnImage | NoEmbeddedMetadata | Fields

_TIME_TAGS = {kind.value: kind for kind in TimeKind}


def parse_exif_timestamp(value: Any) -> datetime | None:
    """
    Parses an EXIF 'YYYY:MM:DD HH:MM:SS' value.

    Returns None for anything that is not a well formed timestamp, e.g. the
    all-zero placeholder some cameras write when the clock was never set.
    """
    if isinstance(value, bytes):
        value = value.decode("ascii", errors="replace")
    if not isinstance(value, str):
        return None

    try:
        return datetime.strptime(value.strip("\x00 "), _EXIF_DATETIME_FORMAT)
    except ValueError:
        return None


def _time_fields(entries: Iterable[tuple[int, Any]]) -> Iterator[MetadataField]:
    for tag, value in entries:
        kind = _TIME_TAGS.get(tag)
        if kind is None:
            continue

        timestamp = parse_exif_timestamp(value)
        if timestamp is not None:
            yield MetadataField(kind, timestamp)


def _load_exif(image: Image.Image) -> Image.Exif:
    exif = image.getexif()
    exif_bytes = image.info.get("exif")
    if exif_bytes:
        # The copy cached while opening was parsed leniently.
        exif = Image.Exif()
        exif.load(exif_bytes)
    return exif


def read_metadata(path: Path | str) -> MetadataOutcome:
    """
    Reads the capture-time metadata of a file.

    The format is detected from the file content, never from its extension.

    Args:
        path: The file to inspect.

    Returns:
        NotAnImage if Pillow does not recognize the file, NoEmbeddedMetadata if
        the image has no EXIF entries, otherwise the capture-time entries of
        IFD0 followed by those of the Exif sub-IFD.

    Raises:
        MetadataReadError: The image was recognized but its EXIF data is corrupt.
    """
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", UserWarning)
        try:
            image = Image.open(path)
        except UnidentifiedImageError:
            return NotAnImage()

    with image, warnings.catch_warnings():
        # Pillow only warns about truncated EXIF data.
        warnings.simplefilter("error", UserWarning)
        try:
            exif = _load_exif(image)
            if not exif:
                return NoEmbeddedMetadata()

            entries = list(exif.items())
            entries.extend(exif.get_ifd(ExifTags.IFD.Exif).items())
        except (UserWarning, OSError, SyntaxError, ValueError, struct.error) as err:
            raise MetadataReadError(path) from err

    return Fields(tuple(_time_fields(entries)))
