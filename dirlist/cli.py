import argparse
import logging
import sys

from rich.console import Console
from rich.text import Text

from dirlist.api import filter_by_type, free, read_all_entries, read_directory
from dirlist.config.settings import get_settings
from dirlist.entities.entry_collection import DirectoryEntryCollection
from dirlist.entities.entry_type import EntryType, parse_entry_type
from dirlist.exceptions import DirlistError


def _entry_type_arg(value: str) -> EntryType:
    try:
        return parse_entry_type(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dirlist",
        description="List the directories, files and a type-filtered subset of a directory.",
    )
    parser.add_argument("path", help="Directory to list")
    parser.add_argument(
        "--type",
        dest="entry_type",
        type=_entry_type_arg,
        default=EntryType.DIRECTORY,
        metavar="TYPE",
        help=(
            "Entry type for the filtered section (default: directory). One of: "
            + ", ".join(t.option_name for t in EntryType)
        ),
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: DIRLIST_LOG_LEVEL or WARNING)",
    )
    return parser


def _print_section(
    console: Console, title: str, collection: DirectoryEntryCollection
) -> None:
    console.print(Text(f"{title} ({collection.count})", style="bold"))
    collection.for_each(
        lambda entry: console.print(Text(entry.to_display()), highlight=False)
    )


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = get_settings()
    except DirlistError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    level = (args.log_level or settings.log_level).upper()
    if not isinstance(logging.getLevelName(level), int):
        parser.error(f"unknown log level: {args.log_level}")

    # Configure logging on stderr so stdout only carries the listing
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    console = Console(soft_wrap=True)
    listing = dirs = files = filtered = None
    try:
        listing = read_all_entries(args.path)
        dirs = filter_by_type(listing, EntryType.DIRECTORY)
        files = filter_by_type(listing, EntryType.REGULAR_FILE)
        filtered = read_directory(args.path, args.entry_type)

        _print_section(console, "Directories", dirs)
        console.print()
        _print_section(console, "Files", files)
        console.print()
        _print_section(console, "Filtered", filtered)
    except DirlistError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    finally:
        for collection in (listing, dirs, files, filtered):
            free(collection)

    return 0


if __name__ == "__main__":
    sys.exit(main())
