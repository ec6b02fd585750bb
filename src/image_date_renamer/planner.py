from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from image_date_renamer.errors import MissingDateFieldError
from image_date_renamer.metadata import (
    MetadataField,
    MetadataOutcome,
    NoEmbeddedMetadata,
    NotAnImage,
    TimeKind,
    read_metadata,
)

# Highest priority first.
TIME_KIND_PRIORITY = (TimeKind.DATE_TIME_ORIGINAL, TimeKind.CREATE_DATE)

PREFIX_SEPARATOR = "_"


@dataclass(frozen=True)
class NoMetadata:
    filename: str


@dataclass(frozen=True)
class UnrecognizedFormat:
    filename: str


@dataclass(frozen=True)
class AlreadyNamed:
    filename: str


@dataclass(frozen=True)
class Rename:
    source: str
    target: str


RenameDecision = NoMetadata | UnrecognizedFormat | AlreadyNamed | Rename


def select_field(fields: Sequence[MetadataField]) -> MetadataField | None:
    """
    Picks the field with the highest priority kind. Among fields of the same
    kind the first one found wins.
    """
    for kind in TIME_KIND_PRIORITY:
        for field in fields:
            if field.kind is kind:
                return field
    return None


def format_date_prefix(timestamp: datetime) -> str:
    """Formats the calendar date of a timestamp as YYYYMMDD, as embedded."""
    return f"{timestamp.year:04d}{timestamp.month:02d}{timestamp.day:02d}"


def plan(current_filename: str, outcome: MetadataOutcome) -> RenameDecision:
    """
    Decides what should happen to a file given its metadata.

    Args:
        current_filename: The base name of the file.
        outcome: The result of reading the file's metadata.

    Returns:
        The rename decision. Applying it is left to the caller.

    Raises:
        MissingDateFieldError: The file has metadata but no capture time.
    """
    if isinstance(outcome, NotAnImage):
        return UnrecognizedFormat(current_filename)
    if isinstance(outcome, NoEmbeddedMetadata):
        return NoMetadata(current_filename)

    field = select_field([entry for entry in outcome.entries if entry.kind in TIME_KIND_PRIORITY])
    if field is None:
        raise MissingDateFieldError(current_filename)

    desired_prefix = format_date_prefix(field.timestamp) + PREFIX_SEPARATOR
    if current_filename.startswith(desired_prefix):
        return AlreadyNamed(current_filename)

    return Rename(source=current_filename, target=desired_prefix + current_filename)


def classify(path: Path | str, current_filename: str | None = None) -> RenameDecision:
    """Reads the metadata of a single file and plans its rename."""
    if current_filename is None:
        current_filename = Path(path).name
    return plan(current_filename, read_metadata(path))
