"""
Filesystem repository port interface defining the contract for read-only file access.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from catserver.entities.directory_listing import DirectoryListing
from catserver.entities.file_content import FileContent
from catserver.entities.filesystem_entry import FileSystemEntry
from catserver.value_objects.file_path import FilePath


@dataclass(frozen=True)
class DirectoryStats:
    """Aggregate facts about the regular files of one directory."""

    total_files: int
    total_directories: int
    total_size: int
    largest_file: Optional[FileSystemEntry] = None
    newest_file: Optional[FileSystemEntry] = None
    oldest_file: Optional[FileSystemEntry] = None

    @classmethod
    def from_listing(cls, listing: DirectoryListing) -> "DirectoryStats":
        """Reduce a listing over its files; ties go to the first entry seen."""
        largest = newest = oldest = None
        for entry in listing.filter_by_type(False):
            if largest is None or entry.size > largest.size:
                largest = entry
            if newest is None or entry.mod_time > newest.mod_time:
                newest = entry
            if oldest is None or entry.mod_time < oldest.mod_time:
                oldest = entry

        return cls(
            total_files=listing.get_file_count(),
            total_directories=listing.get_directory_count(),
            total_size=listing.get_total_size(),
            largest_file=largest,
            newest_file=newest,
            oldest_file=oldest,
        )


class FileSystemRepositoryPort(ABC):
    """Port interface for read-only filesystem operations confined to one root."""

    @abstractmethod
    def list_directory(self, path: FilePath) -> DirectoryListing:
        """
        List the entries of a directory.

        Args:
            path: Directory path relative to the root

        Returns:
            DirectoryListing snapshot

        Raises:
            FileSystemError: If the path is invalid, missing or not a directory
        """
        pass

    @abstractmethod
    def read_file(self, path: FilePath) -> FileContent:
        """
        Read a regular file fully.

        Args:
            path: File path relative to the root

        Returns:
            FileContent snapshot

        Raises:
            FileSystemError: INVALID_PATH, NOT_FOUND, IS_DIRECTORY,
                PERMISSION_DENIED, TOO_LARGE or UNKNOWN
        """
        pass

    @abstractmethod
    def exists(self, path: FilePath) -> bool:
        pass

    @abstractmethod
    def is_readable(self, path: FilePath) -> bool:
        pass

    @abstractmethod
    def is_directory(self, path: FilePath) -> bool:
        pass

    @abstractmethod
    def get_file_info(self, path: FilePath) -> FileSystemEntry:
        """
        Stat a file or directory.

        Raises:
            FileSystemError: If the path is invalid or missing
        """
        pass

    @abstractmethod
    def validate_path(self, path: FilePath) -> None:
        """
        Confirm that the path resolves inside the root.

        Raises:
            FileSystemError: INVALID_PATH if the path escapes the root
        """
        pass

    @abstractmethod
    def get_directory_stats(self, path: FilePath) -> DirectoryStats:
        """
        Reduce one listing of the directory to DirectoryStats.

        Raises:
            FileSystemError: Same as list_directory
        """
        pass
