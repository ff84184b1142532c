"""
Use case for filtering a collection of directory entries by type.
"""

import logging
from typing import Optional

from dirlist.entities.entry_collection import DirectoryEntryCollection
from dirlist.entities.entry_type import EntryType
from dirlist.exceptions import PreconditionError


class FilterEntriesUseCase:
    """Use case for narrowing a collection to one entry type."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger(__name__)

    def execute(
        self, collection: DirectoryEntryCollection, entry_type: EntryType
    ) -> DirectoryEntryCollection:
        """
        Copy the entries of one type into a new collection.

        Args:
            collection: Source collection, left untouched
            entry_type: Concrete entry type to keep

        Returns:
            A new, independently owned collection

        Raises:
            PreconditionError: If collection is missing or entry_type is not concrete
        """
        if collection is None:
            raise PreconditionError("A collection is required to filter")

        self._logger.debug(
            f"Filtering {collection.count} entries by type: {getattr(entry_type, 'option_name', entry_type)}"
        )
        result = collection.filter_by_type(entry_type)
        self._logger.debug(f"Matched {result.count} entries")
        return result
