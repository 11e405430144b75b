"""
Use case for listing a directory under the served root.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional

from catserver.entities.directory_listing import DirectoryListing
from catserver.entities.filesystem_entry import FileSystemEntry
from catserver.exceptions import (
    DomainError,
    ErrorCode,
    FileRepositoryError,
    FileSystemError,
)
from catserver.ports.files.filesystem_repository_port import (
    DirectoryStats,
    FileSystemRepositoryPort,
)
from catserver.value_objects.file_path import FilePath


class SortBy(str, Enum):
    NAME = "name"
    SIZE = "size"
    MODTIME = "modtime"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


class FilterType(str, Enum):
    ALL = "all"
    FILES = "files"
    DIRECTORIES = "directories"


_SORT_KEYS = {
    SortBy.NAME: lambda entry: entry.name,
    SortBy.SIZE: lambda entry: entry.size,
    SortBy.MODTIME: lambda entry: entry.mod_time,
}


@dataclass(frozen=True)
class ListDirectoryRequest:
    """
    Listing options.

    ``sort_order`` of None keeps the natural order of the criterion:
    ascending for name and size, newest first for modtime.
    """

    path: str = "."
    include_hidden: bool = False
    sort_by: SortBy = SortBy.NAME
    sort_order: Optional[SortOrder] = None
    filter_type: FilterType = FilterType.ALL


@dataclass(frozen=True)
class ListDirectoryResult:
    path: str
    entries: list[FileSystemEntry]
    total_count: int
    file_count: int
    dir_count: int
    total_size: int
    scanned_at: datetime
    statistics: DirectoryStats


class ListDirectoryUseCase:
    """Use case for listing a directory with filtering and sorting applied."""

    def __init__(
        self,
        filesystem_repository: FileSystemRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            filesystem_repository: Repository for filesystem operations
            logger: Logger instance to use for logging
        """
        self._filesystem_repository = filesystem_repository
        self._logger = logger or logging.getLogger(__name__)

    def _to_path(self, raw: str) -> FilePath:
        try:
            return FilePath.create(raw)
        except DomainError as e:
            self._logger.warning(f"Rejected directory path {raw!r}: {e}")
            raise

    def _sort(
        self, listing: DirectoryListing, sort_by: SortBy, sort_order: Optional[SortOrder]
    ) -> list[FileSystemEntry]:
        natural_desc = sort_by == SortBy.MODTIME
        want_desc = natural_desc if sort_order is None else sort_order == SortOrder.DESC

        if want_desc != natural_desc:
            return sorted(listing.entries, key=_SORT_KEYS[sort_by], reverse=want_desc)
        if sort_by == SortBy.SIZE:
            return listing.sort_by_size()
        if sort_by == SortBy.MODTIME:
            return listing.sort_by_mod_time()
        return listing.sort_by_name()

    def execute(self, request: ListDirectoryRequest) -> ListDirectoryResult:
        """
        List a directory.

        Args:
            request: Path and listing options

        Returns:
            ListDirectoryResult with the filtered, sorted entries

        Raises:
            InvalidPathError: If the path is malformed or a traversal attempt
            FileSystemError: If the repository rejects or fails the listing
        """
        file_path = self._to_path(request.path)

        try:
            self._logger.info(f"Listing directory: {file_path}")
            listing = self._filesystem_repository.list_directory(file_path)

            entries = listing.entries
            if not request.include_hidden:
                entries = listing.filter_hidden()

            view = DirectoryListing.create(listing.path, entries)
            if request.filter_type == FilterType.FILES:
                view = DirectoryListing.create(listing.path, view.filter_by_type(False))
            elif request.filter_type == FilterType.DIRECTORIES:
                view = DirectoryListing.create(listing.path, view.filter_by_type(True))

            sorted_entries = self._sort(view, request.sort_by, request.sort_order)

            result = ListDirectoryResult(
                path=listing.path,
                entries=sorted_entries,
                total_count=view.total_count,
                file_count=view.get_file_count(),
                dir_count=view.get_directory_count(),
                total_size=view.get_total_size(),
                scanned_at=listing.scanned_at,
                statistics=DirectoryStats.from_listing(
                    DirectoryListing.create(listing.path, entries)
                ),
            )
            self._logger.info(f"Found {result.total_count} entries")
            return result
        except FileSystemError as e:
            if e.code == ErrorCode.INVALID_PATH:
                self._logger.warning(f"Blocked directory access {request.path!r}: {e.reason}")
            raise
        except (FileRepositoryError, DomainError):
            raise
        except Exception as e:
            self._logger.error(f"Error listing directory: {e}")
            raise FileRepositoryError(
                f"Failed to list directory {request.path}: {str(e)}"
            )

    def get_statistics(self, path: str, include_hidden: bool = True) -> DirectoryStats:
        """
        Compute statistics for one directory.

        Hidden files only count, and only compete for largest, newest and
        oldest, when include_hidden is set.

        Raises:
            InvalidPathError: If the path is malformed or a traversal attempt
            FileSystemError: If the repository rejects or fails the listing
        """
        file_path = self._to_path(path)
        self._logger.info(f"Computing statistics for directory: {file_path}")
        if include_hidden:
            return self._filesystem_repository.get_directory_stats(file_path)

        listing = self._filesystem_repository.list_directory(file_path)
        return DirectoryStats.from_listing(
            DirectoryListing.create(listing.path, listing.filter_hidden())
        )
