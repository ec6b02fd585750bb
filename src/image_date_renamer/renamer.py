from __future__ import annotations

# ruff: noqa: T201 `print` found
import os
import sys
from collections import Counter
from pathlib import Path

from image_date_renamer.config import DEFAULT_MESSAGES
from image_date_renamer.errors import FilenameError, RenamerError
from image_date_renamer.planner import (
    AlreadyNamed,
    NoMetadata,
    Rename,
    RenameDecision,
    UnrecognizedFormat,
    classify,
)

_OUTCOME_KEYS = {
    NoMetadata: "no_metadata",
    UnrecognizedFormat: "unrecognized",
    AlreadyNamed: "already_named",
    Rename: "renamed",
}


def _entry_name(path: Path) -> str:
    """Returns the file name, rejecting names that only survive as surrogate escapes."""
    name = path.name
    try:
        name.encode(sys.getfilesystemencoding())
    except UnicodeEncodeError as err:
        raise FilenameError(name) from err
    return name


def _candidate_files(input_path: Path) -> list[Path]:
    return sorted(path for path in input_path.iterdir() if path.is_file() and not path.is_symlink())


def _describe(decision: RenameDecision, input_path: Path, messages: dict[str, str]) -> str:
    if isinstance(decision, Rename):
        return messages["renaming"].format(
            name=str(input_path / decision.source),
            target=str(input_path / decision.target),
        )
    return messages[_OUTCOME_KEYS[type(decision)]].format(name=decision.filename)


def rename_files(
    input_dir: str,
    *,
    dry_run: bool = False,
    silent: bool = False,
    keep_going: bool = False,
    messages: dict[str, str] | None = None,
) -> Counter[str]:
    """
    Prefixes every image in a directory with the date it was taken.

    Args:
        input_dir: The directory containing the files to rename. Subdirectories are not visited.
        dry_run: If True, print the changes without renaming files.
        silent: If True, print nothing except errors.
        keep_going: If True, report files that fail and continue with the next one instead of aborting.
        messages: Console message templates, see config.DEFAULT_MESSAGES.

    Returns:
        The number of files per outcome.
    """
    if messages is None:
        messages = DEFAULT_MESSAGES

    input_path = Path(input_dir)
    counts: Counter[str] = Counter()

    if not silent:
        print(messages["scanning"].format(directory=str(input_path)))

    for path in _candidate_files(input_path):
        try:
            name = _entry_name(path)
            decision = classify(path, name)

            if not silent:
                print(_describe(decision, input_path, messages))

            if isinstance(decision, Rename) and not dry_run:
                os.rename(path, input_path / decision.target)
        except (RenamerError, OSError) as err:
            if not keep_going:
                raise
            print(messages["error"].format(name=path.name, error=str(err)), file=sys.stderr)
            counts["failed"] += 1
            continue

        counts[_OUTCOME_KEYS[type(decision)]] += 1

    return counts
