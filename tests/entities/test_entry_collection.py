"""
Tests for the DirectoryEntryCollection entity.
"""

from unittest.mock import MagicMock

import pytest

from dirlist.entities.directory_entry import DirectoryEntry
from dirlist.entities.entry_collection import (
    GROWTH_INCREMENT,
    INITIAL_CAPACITY,
    DirectoryEntryCollection,
)
from dirlist.entities.entry_type import EntryType
from dirlist.exceptions import CollectionReleasedError, PreconditionError


def make_collection(*specs, **kwargs) -> DirectoryEntryCollection:
    collection = DirectoryEntryCollection(**kwargs)
    for name, entry_type in specs:
        collection.append(DirectoryEntry(name, entry_type))
    return collection


@pytest.fixture
def mixed_collection():
    return make_collection(
        ("a", EntryType.DIRECTORY),
        ("b", EntryType.REGULAR_FILE),
        ("c", EntryType.SYMLINK),
        ("d", EntryType.REGULAR_FILE),
    )


class TestCollectionBasics:
    """Test cases for construction, appending and access."""

    def test_new_collection_is_empty(self):
        """Test an empty collection with the default capacity."""
        collection = DirectoryEntryCollection()
        assert collection.count == 0
        assert collection.allocated == INITIAL_CAPACITY
        assert len(collection) == 0
        assert list(collection) == []

    def test_explicit_capacity(self):
        """Test an empty collection with a given capacity."""
        collection = DirectoryEntryCollection(capacity=3)
        assert collection.count == 0
        assert collection.allocated == 3

    def test_zero_capacity_grows_on_append(self):
        """Test appending to a collection without slots."""
        collection = DirectoryEntryCollection(capacity=0)
        collection.append(DirectoryEntry("a", EntryType.DIRECTORY))
        assert collection.count == 1
        assert collection.allocated == GROWTH_INCREMENT

    @pytest.mark.parametrize("capacity", [-1, 1.5, "10", True, None])
    def test_invalid_capacity(self, capacity):
        """Test that invalid capacities are rejected."""
        with pytest.raises(PreconditionError):
            DirectoryEntryCollection(capacity=capacity)

    def test_zero_growth_increment_rejected(self):
        """Test that a collection must be able to grow."""
        with pytest.raises(PreconditionError, match="growth_increment"):
            DirectoryEntryCollection(growth_increment=0)

    def test_append_rejects_non_entries(self):
        """Test that only DirectoryEntry values can be stored."""
        collection = DirectoryEntryCollection()
        with pytest.raises(PreconditionError, match="Only DirectoryEntry"):
            collection.append("a")  # type: ignore

    def test_growth_by_increment(self):
        """Test that capacity grows in fixed increments."""
        collection = DirectoryEntryCollection()
        for i in range(INITIAL_CAPACITY):
            collection.append(DirectoryEntry(f"e{i}", EntryType.REGULAR_FILE))
        assert collection.allocated == INITIAL_CAPACITY

        collection.append(DirectoryEntry("extra", EntryType.REGULAR_FILE))
        assert collection.allocated == INITIAL_CAPACITY + GROWTH_INCREMENT
        assert collection.count == INITIAL_CAPACITY + 1

    def test_growth_then_shrink_to_fit(self):
        """Test that 25 appends shrink to exactly 25 slots."""
        collection = DirectoryEntryCollection()
        for i in range(25):
            collection.append(DirectoryEntry(f"e{i}", EntryType.REGULAR_FILE))
        assert collection.allocated == 30

        collection.shrink_to_fit()
        assert collection.count == 25
        assert collection.allocated == 25
        assert collection.names() == [f"e{i}" for i in range(25)]

    def test_indexing(self, mixed_collection):
        """Test index access within and outside the valid range."""
        assert mixed_collection[0].name == "a"
        assert mixed_collection[-1].name == "d"
        with pytest.raises(IndexError):
            mixed_collection[4]

    def test_indexing_ignores_spare_capacity(self):
        """Test that unused slots are not reachable."""
        collection = make_collection(("a", EntryType.DIRECTORY), capacity=5)
        with pytest.raises(IndexError):
            collection[1]

    def test_for_each_visits_in_order(self, mixed_collection):
        """Test that the visitor sees every entry once, in order."""
        visited = []
        mixed_collection.for_each(lambda entry: visited.append(entry.name))
        assert visited == ["a", "b", "c", "d"]

    def test_for_each_requires_callable(self, mixed_collection):
        """Test that a non-callable visitor is rejected."""
        with pytest.raises(PreconditionError, match="callable"):
            mixed_collection.for_each(None)  # type: ignore

    def test_repr(self):
        """Test the debug representation."""
        assert repr(DirectoryEntryCollection(capacity=2)) == (
            "DirectoryEntryCollection(count=0, allocated=2, released=False)"
        )


class TestCollectionResize:
    """Test cases for resizing."""

    def test_grow_keeps_entries(self, mixed_collection):
        """Test that growing preserves entries and count."""
        mixed_collection.resize(40)
        assert mixed_collection.allocated == 40
        assert mixed_collection.count == 4
        assert mixed_collection.names() == ["a", "b", "c", "d"]

    def test_resize_returns_collection(self, mixed_collection):
        """Test that resize returns the collection itself."""
        assert mixed_collection.resize(12) is mixed_collection

    def test_shrink_drops_trailing_entries(self, mixed_collection):
        """Test that shrinking releases entries beyond the new capacity."""
        dropped = [mixed_collection[2], mixed_collection[3]]
        mixed_collection.resize(2)

        assert mixed_collection.allocated == 2
        assert mixed_collection.count == 2
        assert mixed_collection.names() == ["a", "b"]
        assert all(entry not in list(mixed_collection) for entry in dropped)

    def test_shrink_logs_removed_entries(self):
        """Test that dropped entries are logged highest index first."""
        logger = MagicMock()
        collection = make_collection(
            ("a", EntryType.DIRECTORY),
            ("b", EntryType.REGULAR_FILE),
            ("c", EntryType.SYMLINK),
            logger=logger,
        )
        collection.resize(1)

        assert [c.args[0] for c in logger.debug.call_args_list] == [
            "Removing c",
            "Removing b",
        ]

    def test_shrink_within_spare_capacity(self, mixed_collection):
        """Test shrinking that only drops unused slots."""
        mixed_collection.resize(6)
        assert mixed_collection.allocated == 6
        assert mixed_collection.count == 4

    def test_shrink_to_zero(self, mixed_collection):
        """Test shrinking to an empty collection."""
        mixed_collection.resize(0)
        assert mixed_collection.allocated == 0
        assert mixed_collection.count == 0
        assert list(mixed_collection) == []

    def test_invalid_resize(self, mixed_collection):
        """Test that negative capacities are rejected."""
        with pytest.raises(PreconditionError, match="new_capacity"):
            mixed_collection.resize(-3)
        assert mixed_collection.count == 4


class TestCollectionFilter:
    """Test cases for filtering by type."""

    def test_filter_keeps_matching_types(self, mixed_collection):
        """Test that only entries of the requested type are kept."""
        files = mixed_collection.filter_by_type(EntryType.REGULAR_FILE)

        assert files.names() == ["b", "d"]
        assert all(e.entry_type is EntryType.REGULAR_FILE for e in files)
        assert files.count == 2
        assert files.allocated == 2

    def test_filter_no_matches(self, mixed_collection):
        """Test that filtering without matches returns an empty collection."""
        sockets = mixed_collection.filter_by_type(EntryType.SOCKET)

        assert sockets is not None
        assert sockets.count == 0
        assert sockets.allocated == 0

    def test_filter_empty_source(self):
        """Test filtering an empty collection."""
        result = DirectoryEntryCollection().filter_by_type(EntryType.DIRECTORY)
        assert result.count == 0

    def test_filter_does_not_mutate_source(self, mixed_collection):
        """Test that the source collection is unchanged."""
        mixed_collection.filter_by_type(EntryType.DIRECTORY)
        assert mixed_collection.names() == ["a", "b", "c", "d"]
        assert mixed_collection.allocated == INITIAL_CAPACITY

    def test_filter_copies_entries(self, mixed_collection):
        """Test that filtered entries are copies, not aliases."""
        dirs = mixed_collection.filter_by_type(EntryType.DIRECTORY)

        assert dirs[0] == mixed_collection[0]
        assert dirs[0] is not mixed_collection[0]

        dirs[0].name = "renamed"
        assert mixed_collection[0].name == "a"

        mixed_collection[0].entry_type = EntryType.SOCKET
        assert dirs[0].entry_type is EntryType.DIRECTORY

    def test_filter_result_outlives_source(self, mixed_collection):
        """Test that releasing either collection leaves the other intact."""
        files = mixed_collection.filter_by_type(EntryType.REGULAR_FILE)
        mixed_collection.release()
        assert files.names() == ["b", "d"]

        dirs = DirectoryEntryCollection()
        dirs.append(DirectoryEntry("x", EntryType.DIRECTORY))
        copied = dirs.filter_by_type(EntryType.DIRECTORY)
        copied.release()
        assert dirs.names() == ["x"]

    @pytest.mark.parametrize("entry_type", [None, 4, "directory"])
    def test_filter_requires_entry_type(self, mixed_collection, entry_type):
        """Test that filtering needs a concrete EntryType."""
        with pytest.raises(PreconditionError, match="concrete EntryType"):
            mixed_collection.filter_by_type(entry_type)  # type: ignore


class TestCollectionRelease:
    """Test cases for releasing collections."""

    def test_release_drops_every_entry(self, mixed_collection):
        """Test that all entries, including the first, are released."""
        slots = mixed_collection._slots
        mixed_collection.release()

        assert mixed_collection.released is True
        assert mixed_collection.count == 0
        assert mixed_collection.allocated == 0
        assert slots[:4] == [None, None, None, None]

    def test_release_empty_collection(self):
        """Test releasing a collection without entries."""
        collection = DirectoryEntryCollection()
        collection.release()
        assert collection.released is True
        assert collection.allocated == 0

    def test_release_twice(self, mixed_collection):
        """Test that releasing twice is harmless."""
        mixed_collection.release()
        mixed_collection.release()
        assert mixed_collection.released is True

    def test_use_after_release(self, mixed_collection):
        """Test that released collections reject further use."""
        mixed_collection.release()

        with pytest.raises(CollectionReleasedError):
            mixed_collection.append(DirectoryEntry("z", EntryType.DIRECTORY))
        with pytest.raises(CollectionReleasedError):
            list(mixed_collection)
        with pytest.raises(CollectionReleasedError):
            mixed_collection.resize(5)
        with pytest.raises(CollectionReleasedError):
            mixed_collection.filter_by_type(EntryType.DIRECTORY)
        with pytest.raises(CollectionReleasedError):
            mixed_collection.for_each(print)

    def test_context_manager_releases(self):
        """Test that leaving a with block releases the collection."""
        with make_collection(("a", EntryType.DIRECTORY)) as collection:
            assert collection.count == 1
        assert collection.released is True

    def test_context_manager_releases_on_error(self):
        """Test that the collection is released when the block raises."""
        with pytest.raises(RuntimeError):
            with make_collection(("a", EntryType.DIRECTORY)) as collection:
                raise RuntimeError("boom")
        assert collection.released is True
