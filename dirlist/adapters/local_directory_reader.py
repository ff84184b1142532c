"""
Local file system adapter implementation for reading directories.
"""

import logging
import os
from typing import Optional, Union

from typing_extensions import override

from dirlist.config.settings import Settings, get_settings
from dirlist.entities.directory_entry import DirectoryEntry
from dirlist.entities.entry_collection import DirectoryEntryCollection
from dirlist.entities.entry_type import EntryType
from dirlist.exceptions import (
    AllocationError,
    DirectoryReadError,
    DirlistError,
    PreconditionError,
)
from dirlist.ports.directory_reader_port import DirectoryReaderPort

_SKIPPED_NAMES = (".", "..")


def entry_type_of(entry: os.DirEntry) -> EntryType:
    """
    Determine the type of a scandir entry without following symlinks.

    The ``d_type`` cached by ``os.scandir`` answers the common cases; device
    nodes, pipes and sockets fall back to ``lstat`` mode bits.

    Args:
        entry: Entry yielded by ``os.scandir``

    Returns:
        The entry's type, UNKNOWN if it cannot be determined
    """
    try:
        if entry.is_symlink():
            return EntryType.SYMLINK
        if entry.is_dir(follow_symlinks=False):
            return EntryType.DIRECTORY
        if entry.is_file(follow_symlinks=False):
            return EntryType.REGULAR_FILE
        return EntryType.from_mode(entry.stat(follow_symlinks=False).st_mode)
    except OSError:
        # Entry vanished between readdir and stat
        return EntryType.UNKNOWN


class LocalDirectoryReader(DirectoryReaderPort):
    """Local file system implementation of the directory reader port."""

    def __init__(
        self,
        logger: Optional[logging.Logger] = None,
        settings: Optional[Settings] = None,
    ):
        """
        Initialize the adapter.

        Args:
            logger: Logger instance to use for logging. If None, a default logger will be created.
            settings: Capacity settings. If None, the process-wide settings are used.
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)
        self._settings: Settings = settings or get_settings()

    def _validate_path(self, path: Union[str, os.PathLike]) -> str:
        """
        Validate the directory path argument.

        Args:
            path: Path to validate

        Returns:
            The path as a string

        Raises:
            PreconditionError: If path is missing or not path-like
        """
        if path is None:
            raise PreconditionError("Directory path is required")
        if not isinstance(path, (str, os.PathLike)):
            raise PreconditionError(
                f"Directory path must be a string or path-like, got {type(path).__name__}"
            )
        path = os.fspath(path)
        if not isinstance(path, str) or not path:
            raise PreconditionError("Directory path must be a non-empty string")
        return path

    def _new_collection(self) -> DirectoryEntryCollection:
        return DirectoryEntryCollection(
            capacity=self._settings.initial_capacity,
            growth_increment=self._settings.growth_increment,
            logger=self._logger,
        )

    @override
    def read_directory(
        self,
        path: Union[str, os.PathLike],
        entry_type: Optional[EntryType] = None,
    ) -> DirectoryEntryCollection:
        """
        Read the entries of a directory into a new collection.

        Args:
            path: Path to the directory to read
            entry_type: Only keep entries of this type; None keeps every entry

        Returns:
            A new collection owned by the caller, sized to its entry count

        Raises:
            DirectoryReadError: If the directory cannot be opened or enumerated
            AllocationError: If the collection cannot grow
            PreconditionError: If the arguments are invalid
        """
        directory = self._validate_path(path)
        if entry_type is not None and not isinstance(entry_type, EntryType):
            raise PreconditionError(
                f"entry_type must be an EntryType or None, got {type(entry_type).__name__}"
            )

        collection = self._new_collection()
        try:
            with os.scandir(directory) as entries:
                for item in entries:
                    if item.name in _SKIPPED_NAMES:
                        continue

                    item_type = entry_type_of(item)
                    if entry_type is not None and item_type != entry_type:
                        continue

                    collection.append(DirectoryEntry(name=item.name, entry_type=item_type))

            return collection.shrink_to_fit()

        except DirlistError:
            collection.release()
            raise
        except MemoryError as e:
            collection.release()
            raise AllocationError(f"Out of memory while reading {directory}") from e
        except OSError as e:
            collection.release()
            self._logger.debug(f"Cannot open directory {directory}: {e}")
            raise DirectoryReadError(
                f"Cannot read directory {directory}: {e.strerror or e}", path=directory
            ) from e
