"""
Directory reader port interface defining the contract for directory enumeration.
"""

import os
from abc import ABC, abstractmethod
from typing import Optional, Union

from dirlist.entities.entry_collection import DirectoryEntryCollection
from dirlist.entities.entry_type import EntryType


class DirectoryReaderPort(ABC):
    """Port interface for reading directory entries."""

    @abstractmethod
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
            A new collection owned by the caller

        Raises:
            DirectoryReadError: If the directory cannot be read
            PreconditionError: If the arguments are invalid
        """
        pass
