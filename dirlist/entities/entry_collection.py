"""
Directory entry collection entity.
"""

import logging
from collections.abc import Callable, Iterator
from typing import Optional

from dirlist.entities.directory_entry import DirectoryEntry
from dirlist.entities.entry_type import EntryType
from dirlist.exceptions import (
    AllocationError,
    CollectionReleasedError,
    PreconditionError,
)

INITIAL_CAPACITY = 10
GROWTH_INCREMENT = 10


def validate_capacity(value: int, name: str = "capacity") -> int:
    """
    Check that a capacity argument is a non-negative integer.

    Args:
        value: Capacity to validate
        name: Argument name used in the error message

    Returns:
        The validated capacity

    Raises:
        PreconditionError: If the value is not a non-negative integer
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise PreconditionError(f"{name} must be an integer, got {type(value).__name__}")
    if value < 0:
        raise PreconditionError(f"{name} must be non-negative, got {value}")
    return value


class DirectoryEntryCollection:
    """
    Ordered collection that exclusively owns its directory entries.

    Storage is a list of ``allocated`` slots of which the first ``count``
    hold entries. Entries are appended during reads and filters, capacity is
    adjusted with ``resize``/``shrink_to_fit``, and ``release`` drops every
    entry together with the storage. The collection is also a context manager
    that releases itself on exit.
    """

    def __init__(
        self,
        capacity: int = INITIAL_CAPACITY,
        growth_increment: int = GROWTH_INCREMENT,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize an empty collection.

        Args:
            capacity: Number of slots to allocate up front
            growth_increment: Number of slots added whenever an append needs room
            logger: Logger instance to use for logging

        Raises:
            PreconditionError: If capacity or growth increment is invalid
        """
        validate_capacity(capacity)
        validate_capacity(growth_increment, "growth_increment")
        if growth_increment == 0:
            raise PreconditionError("growth_increment must be at least 1")

        self._logger = logger or logging.getLogger(__name__)
        self._growth_increment = growth_increment
        self._slots: list[Optional[DirectoryEntry]] = self._allocate(capacity)
        self._count = 0
        self._released = False

    @staticmethod
    def _allocate(size: int) -> list[Optional[DirectoryEntry]]:
        try:
            return [None] * size
        except MemoryError as e:
            raise AllocationError(f"Cannot allocate {size} entry slots") from e

    def _ensure_live(self) -> None:
        if self._released:
            raise CollectionReleasedError("Collection has already been released")

    @property
    def count(self) -> int:
        """Number of valid entries."""
        return self._count

    @property
    def allocated(self) -> int:
        """Number of allocated slots; always at least ``count``."""
        return len(self._slots)

    @property
    def released(self) -> bool:
        """Whether ``release`` has been called."""
        return self._released

    def append(self, entry: DirectoryEntry) -> None:
        """
        Append an entry, growing capacity by the growth increment when full.

        Args:
            entry: Entry to take ownership of

        Raises:
            PreconditionError: If entry is not a DirectoryEntry
            CollectionReleasedError: If the collection was released
        """
        self._ensure_live()
        if not isinstance(entry, DirectoryEntry):
            raise PreconditionError(
                f"Only DirectoryEntry values can be stored, got {type(entry).__name__}"
            )

        if self._count == len(self._slots):
            self._slots.extend(self._allocate(self._growth_increment))

        self._slots[self._count] = entry
        self._count += 1

    def resize(self, new_capacity: int) -> "DirectoryEntryCollection":
        """
        Adjust capacity.

        Growing keeps every entry and the count. Shrinking releases the
        entries that no longer fit, highest index first, and clamps the count
        to the new capacity.

        Args:
            new_capacity: Number of slots to keep

        Returns:
            This collection
        """
        self._ensure_live()
        validate_capacity(new_capacity, "new_capacity")

        old_capacity = len(self._slots)
        if new_capacity >= old_capacity:
            self._slots.extend(self._allocate(new_capacity - old_capacity))
            return self

        for index in range(old_capacity - 1, new_capacity - 1, -1):
            entry = self._slots[index]
            if entry is not None:
                self._logger.debug(f"Removing {entry.name}")
                self._slots[index] = None

        del self._slots[new_capacity:]
        self._count = min(self._count, new_capacity)
        return self

    def shrink_to_fit(self) -> "DirectoryEntryCollection":
        """Drop unused trailing capacity so that ``allocated == count``."""
        return self.resize(self._count)

    def release(self) -> None:
        """Release every entry and the backing storage. Safe to call twice."""
        if self._released:
            return
        for index in range(self._count):
            self._slots[index] = None
        self._slots = []
        self._count = 0
        self._released = True

    def for_each(self, visit: Callable[[DirectoryEntry], object]) -> None:
        """
        Call ``visit`` once per entry, in collection order.

        The collection must not be modified while it is being visited.
        """
        self._ensure_live()
        if not callable(visit):
            raise PreconditionError("visit must be callable")
        for entry in self:
            visit(entry)

    def filter_by_type(self, entry_type: EntryType) -> "DirectoryEntryCollection":
        """
        Build a new collection with copies of the entries of one type.

        Args:
            entry_type: Concrete entry type to keep

        Returns:
            A new, independently owned collection sized to the match count

        Raises:
            PreconditionError: If entry_type is not an EntryType
        """
        self._ensure_live()
        if not isinstance(entry_type, EntryType):
            raise PreconditionError(
                "Filtering requires a concrete EntryType; "
                "read the directory without a filter to keep every entry"
            )

        result = DirectoryEntryCollection(
            capacity=self._count,
            growth_increment=self._growth_increment,
            logger=self._logger,
        )
        for entry in self:
            if entry.is_type(entry_type):
                result.append(entry.copy())
        return result.shrink_to_fit()

    def names(self) -> list[str]:
        """Return the entry names in collection order."""
        return [entry.name for entry in self]

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[DirectoryEntry]:
        self._ensure_live()
        for index in range(self._count):
            yield self._slots[index]

    def __getitem__(self, index: int) -> DirectoryEntry:
        self._ensure_live()
        if index < 0:
            index += self._count
        if not 0 <= index < self._count:
            raise IndexError("collection index out of range")
        return self._slots[index]

    def __enter__(self) -> "DirectoryEntryCollection":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.release()

    def __repr__(self) -> str:
        return (
            f"DirectoryEntryCollection(count={self._count}, "
            f"allocated={len(self._slots)}, released={self._released})"
        )
