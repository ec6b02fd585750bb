from __future__ import annotations

# ruff: noqa: T201 `print` found
import argparse
import sys

from image_date_renamer.config import load_messages
from image_date_renamer.errors import RenamerError
from image_date_renamer.renamer import rename_files


def main(argv: list[str] | None = None) -> int:
    """
    Main function to parse arguments and run the renamer.
    """
    parser = argparse.ArgumentParser(
        description="Prefix image files with the date they were taken (YYYYMMDD_) so they sort chronologically.",
    )
    parser.add_argument(
        "dir",
        nargs="?",
        default=".",
        help="The directory containing the images. Defaults to the current directory.",
    )
    parser.add_argument("-c", "--config", help="Path to a JSON file overriding the console messages.")
    parser.add_argument(
        "-s",
        "--silent",
        action="store_true",
        help="Only print errors.",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the changes without renaming files.",
    )
    parser.add_argument(
        "--keep-going",
        action="store_true",
        help="Report files that cannot be processed and continue instead of aborting.",
    )

    args = parser.parse_args(argv)

    try:
        messages = load_messages(args.config)
    except (OSError, ValueError) as err:
        parser.error(f"invalid config: {err}")

    try:
        counts = rename_files(
            args.dir,
            dry_run=args.dry_run,
            silent=args.silent,
            keep_going=args.keep_going,
            messages=messages,
        )
    except (RenamerError, OSError) as err:
        print(f"Error: {err}", file=sys.stderr)
        return 1

    if counts["failed"]:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
