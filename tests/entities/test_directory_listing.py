"""
Tests for the DirectoryListing entity.
"""

import pytest

from catserver.entities.directory_listing import DirectoryListing
from catserver.exceptions import EmptyInputError


@pytest.fixture
def listing(entry_factory):
    """Listing with files, a directory and a hidden file, in enumeration order."""
    entries = [
        entry_factory("b.txt", size=300, minutes=5),
        entry_factory("a.txt", size=100, minutes=10),
        entry_factory(".hidden", size=50, minutes=1),
        entry_factory("docs", size=4096, is_dir=True, minutes=7),
    ]
    return DirectoryListing.create("project", entries)


class TestDirectoryListing:
    """Test cases for the DirectoryListing entity."""

    def test_create(self, listing):
        """Test creating a listing."""
        assert listing.path == "project"
        assert listing.total_count == 4
        assert not listing.is_empty()
        assert listing.scanned_at.tzinfo is not None

    def test_create_empty_entries_is_valid(self):
        """Test that an empty directory is a valid listing."""
        listing = DirectoryListing.create("empty", [])

        assert listing.is_empty()
        assert listing.total_count == 0

    def test_create_without_path(self):
        """Test that a path is required."""
        with pytest.raises(EmptyInputError, match="directory path cannot be empty"):
            DirectoryListing.create("", [])

    def test_create_without_entries(self):
        """Test that None entries are rejected."""
        with pytest.raises(EmptyInputError, match="entries cannot be nil"):
            DirectoryListing.create("x", None)

    def test_entries_returns_copy(self, listing):
        """Test that mutating the returned list leaves the listing intact."""
        entries = listing.entries
        entries.clear()

        assert listing.total_count == 4
        assert len(listing.entries) == 4

    def test_sort_by_name_and_filter_hidden(self, entry_factory):
        """Test name sorting and hidden filtering together."""
        listing = DirectoryListing.create(
            ".", [entry_factory("b.txt"), entry_factory("a.txt"), entry_factory(".hidden")]
        )

        assert [e.name for e in listing.sort_by_name()] == [".hidden", "a.txt", "b.txt"]
        assert [e.name for e in listing.filter_hidden()] == ["b.txt", "a.txt"]

    def test_sort_by_size(self, listing):
        """Test ascending size order."""
        sizes = [e.size for e in listing.sort_by_size()]

        assert sizes == sorted(sizes)
        assert len(sizes) == 4

    def test_sort_by_mod_time_newest_first(self, listing):
        """Test that modification time sorts newest first."""
        names = [e.name for e in listing.sort_by_mod_time()]

        assert names == ["a.txt", "docs", "b.txt", ".hidden"]

    def test_sort_by_mod_time_ties_keep_order(self, entry_factory):
        """Test that equal timestamps keep enumeration order."""
        listing = DirectoryListing.create(
            ".", [entry_factory("x"), entry_factory("y"), entry_factory("z")]
        )

        assert [e.name for e in listing.sort_by_mod_time()] == ["x", "y", "z"]

    def test_sorting_does_not_reorder_snapshot(self, listing):
        """Test that sorting returns a new list."""
        listing.sort_by_name()

        assert [e.name for e in listing.entries] == ["b.txt", "a.txt", ".hidden", "docs"]

    def test_filter_by_type(self, listing):
        """Test filtering files and directories."""
        assert [e.name for e in listing.filter_by_type(True)] == ["docs"]
        assert [e.name for e in listing.filter_by_type(False)] == ["b.txt", "a.txt", ".hidden"]

    def test_filter_by_pattern(self, listing):
        """Test exact-name and wildcard matching."""
        assert [e.name for e in listing.filter_by_pattern("a.txt")] == ["a.txt"]
        assert len(listing.filter_by_pattern("*")) == 4
        assert listing.filter_by_pattern("*.txt") == []

    def test_aggregates(self, listing):
        """Test counts and total size, which skip directories."""
        assert listing.get_file_count() == 3
        assert listing.get_directory_count() == 1
        assert listing.get_total_size() == 450

    def test_repr(self, listing):
        """Test representation."""
        assert repr(listing) == "DirectoryListing(path='project', entries=4)"
