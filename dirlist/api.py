"""
Functional interface over the directory listing use cases.

Every collection returned here is owned by the caller and should be released
with ``free`` (or used as a context manager) once it is no longer needed.
"""

import os
import sys
from collections.abc import Callable
from typing import Optional, TextIO, Union

from dirlist.container import container
from dirlist.entities.directory_entry import DirectoryEntry
from dirlist.entities.entry_collection import DirectoryEntryCollection
from dirlist.entities.entry_type import EntryType, describe_type, describe_type_long
from dirlist.exceptions import PreconditionError

__all__ = [
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


def _require_collection(collection: Optional[DirectoryEntryCollection]) -> None:
    if not isinstance(collection, DirectoryEntryCollection):
        raise PreconditionError(
            f"A DirectoryEntryCollection is required, got {type(collection).__name__}"
        )


def read_directory(
    path: Union[str, os.PathLike], entry_type: Optional[EntryType] = None
) -> DirectoryEntryCollection:
    """
    Read the entries of ``path``, keeping only ``entry_type`` entries when given.

    Raises:
        DirectoryReadError: If the directory cannot be opened
        PreconditionError: If path is missing
    """
    return container.get_read_directory_use_case().execute(path, entry_type)


def read_all_entries(path: Union[str, os.PathLike]) -> DirectoryEntryCollection:
    """Read every entry of ``path``."""
    return read_directory(path)


def filter_by_type(
    collection: DirectoryEntryCollection, entry_type: EntryType
) -> DirectoryEntryCollection:
    """Copy the entries of ``collection`` that have ``entry_type`` into a new collection."""
    _require_collection(collection)
    return container.get_filter_entries_use_case().execute(collection, entry_type)


def new_collection(capacity: int) -> DirectoryEntryCollection:
    """Create an empty collection with ``capacity`` allocated slots."""
    return DirectoryEntryCollection(
        capacity=capacity,
        growth_increment=container.get_settings().growth_increment,
    )


def resize(
    collection: DirectoryEntryCollection, new_capacity: int
) -> DirectoryEntryCollection:
    """Grow or shrink the capacity of ``collection``; entries that no longer fit are released."""
    _require_collection(collection)
    return collection.resize(new_capacity)


def free(collection: Optional[DirectoryEntryCollection]) -> None:
    """Release a collection and all of its entries. ``None`` is ignored."""
    if collection is None:
        return
    _require_collection(collection)
    collection.release()


def for_each(
    collection: DirectoryEntryCollection,
    visit: Callable[[DirectoryEntry], object],
) -> None:
    """Call ``visit`` once per entry of ``collection``, in order."""
    _require_collection(collection)
    collection.for_each(visit)


def entry_to_string(entry: DirectoryEntry) -> str:
    """Format an entry as ``<name> [<short name>/<long description>]``."""
    if not isinstance(entry, DirectoryEntry):
        raise PreconditionError(
            f"A DirectoryEntry is required, got {type(entry).__name__}"
        )
    return str(entry)


def print_entry(entry: DirectoryEntry, file: Optional[TextIO] = None) -> None:
    """Write the display form of ``entry`` and a newline to ``file`` (default: stdout)."""
    if not isinstance(entry, DirectoryEntry):
        raise PreconditionError(
            f"A DirectoryEntry is required, got {type(entry).__name__}"
        )
    print(entry.to_display(), file=file or sys.stdout)
