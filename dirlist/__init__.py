"""dirlist package: enumerate directory entries, filter them by type and describe them."""

from dirlist.api import (
    describe_type,
    describe_type_long,
    entry_to_string,
    filter_by_type,
    for_each,
    free,
    new_collection,
    print_entry,
    read_all_entries,
    read_directory,
    resize,
)
from dirlist.entities.directory_entry import DirectoryEntry
from dirlist.entities.entry_collection import DirectoryEntryCollection
from dirlist.entities.entry_type import EntryType

__all__ = [
    "DirectoryEntry",
    "DirectoryEntryCollection",
    "EntryType",
    "describe_type",
    "describe_type_long",
    "entry_to_string",
    "filter_by_type",
    "for_each",
    "free",
    "new_collection",
    "print_entry",
    "read_all_entries",
    "read_directory",
    "resize",
]
