"""
DirectoryListing domain entity.
"""

from datetime import datetime, timezone
from typing import Iterable, Optional

from catserver.entities.filesystem_entry import FileSystemEntry
from catserver.exceptions import EmptyInputError


class DirectoryListing:
    """
    Ordered snapshot of the entries of one directory.

    Filters and sorts return new lists; the snapshot itself never changes.
    """

    __slots__ = ("_path", "_entries", "_total_count", "_scanned_at")

    def __init__(
        self,
        path: str,
        entries: tuple[FileSystemEntry, ...],
        scanned_at: datetime,
    ):
        self._path = path
        self._entries = entries
        self._total_count = len(entries)
        self._scanned_at = scanned_at

    @classmethod
    def create(
        cls, path: str, entries: Optional[Iterable[FileSystemEntry]]
    ) -> "DirectoryListing":
        """
        Build a listing.

        Raises:
            EmptyInputError: If path is empty or entries is None. An empty
                sequence of entries is valid.
        """
        if not path:
            raise EmptyInputError("directory path cannot be empty")
        if entries is None:
            raise EmptyInputError("entries cannot be nil")

        return cls(path, tuple(entries), datetime.now(timezone.utc))

    @property
    def path(self) -> str:
        return self._path

    @property
    def entries(self) -> list[FileSystemEntry]:
        return list(self._entries)

    @property
    def total_count(self) -> int:
        return self._total_count

    @property
    def scanned_at(self) -> datetime:
        return self._scanned_at

    def filter_by_type(self, is_dir: bool) -> list[FileSystemEntry]:
        return [entry for entry in self._entries if entry.is_dir == is_dir]

    def filter_by_pattern(self, pattern: str) -> list[FileSystemEntry]:
        """Exact name match; ``*`` keeps everything."""
        return [
            entry
            for entry in self._entries
            if pattern == "*" or entry.name == pattern
        ]

    def filter_hidden(self) -> list[FileSystemEntry]:
        return [entry for entry in self._entries if not entry.is_hidden()]

    def sort_by_name(self) -> list[FileSystemEntry]:
        return sorted(self._entries, key=lambda entry: entry.name)

    def sort_by_size(self) -> list[FileSystemEntry]:
        return sorted(self._entries, key=lambda entry: entry.size)

    def sort_by_mod_time(self) -> list[FileSystemEntry]:
        """Newest first; ties keep enumeration order."""
        return sorted(self._entries, key=lambda entry: entry.mod_time, reverse=True)

    def get_file_count(self) -> int:
        return sum(1 for entry in self._entries if not entry.is_dir)

    def get_directory_count(self) -> int:
        return sum(1 for entry in self._entries if entry.is_dir)

    def get_total_size(self) -> int:
        return sum(entry.size for entry in self._entries if not entry.is_dir)

    def is_empty(self) -> bool:
        return self._total_count == 0

    def __repr__(self) -> str:
        return f"DirectoryListing(path='{self._path}', entries={self._total_count})"
