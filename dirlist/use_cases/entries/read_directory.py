"""
Use case for reading the entries of a directory.
"""

import logging
import os
from typing import Optional, Union

from dirlist.entities.entry_collection import DirectoryEntryCollection
from dirlist.entities.entry_type import EntryType
from dirlist.exceptions import DirectoryReadError, DirlistError
from dirlist.ports.directory_reader_port import DirectoryReaderPort


class ReadDirectoryUseCase:
    """Use case for reading the entries of a directory."""

    def __init__(
        self,
        directory_reader: DirectoryReaderPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            directory_reader: Reader for directory operations
            logger: Logger instance to use for logging
        """
        self._directory_reader = directory_reader
        self._logger = logger or logging.getLogger(__name__)

    def execute(
        self,
        path: Union[str, os.PathLike],
        entry_type: Optional[EntryType] = None,
    ) -> DirectoryEntryCollection:
        """
        Read a directory, optionally keeping only one entry type.

        Args:
            path: Path to the directory to read
            entry_type: Only keep entries of this type; None keeps every entry

        Returns:
            A new collection owned by the caller

        Raises:
            DirlistError: If reading fails
        """
        try:
            if entry_type is None:
                self._logger.info(f"Reading directory: {path}")
            else:
                self._logger.info(
                    f"Reading directory: {path} "
                    f"(type: {getattr(entry_type, 'option_name', entry_type)})"
                )
            collection = self._directory_reader.read_directory(path, entry_type)
            self._logger.info(f"Found {collection.count} entries")
            return collection
        except DirlistError:
            raise
        except Exception as e:
            self._logger.error(f"Error reading directory: {e}")
            raise DirectoryReadError(
                f"Failed to read directory {path}: {str(e)}", path=str(path)
            ) from e
