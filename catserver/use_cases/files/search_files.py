"""
Use case for finding entries of a directory by name.
"""

import logging
from typing import Optional

from catserver.entities.directory_listing import DirectoryListing
from catserver.entities.filesystem_entry import FileSystemEntry
from catserver.exceptions import DomainError, EmptyInputError, FileRepositoryError
from catserver.ports.files.filesystem_repository_port import FileSystemRepositoryPort
from catserver.value_objects.file_path import FilePath


class SearchFilesUseCase:
    """Use case for searching the entries of one directory."""

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

    def execute(
        self, directory: str, pattern: str, include_hidden: bool = False
    ) -> list[FileSystemEntry]:
        """
        Search for entries named exactly ``pattern`` in a directory.

        Args:
            directory: Directory to search in, relative to the root
            pattern: Entry name to match, or "*" for every entry
            include_hidden: Whether dot-prefixed entries may match

        Returns:
            Matching entries in enumeration order

        Raises:
            EmptyInputError: If pattern is empty
            InvalidPathError: If the directory is malformed or a traversal attempt
            FileSystemError: If the repository rejects or fails the listing
        """
        if not pattern:
            raise EmptyInputError("search pattern cannot be empty")

        file_path = FilePath.create(directory)
        try:
            self._logger.info(
                f"Searching for entries with pattern '{pattern}' in directory: {file_path}"
            )
            listing = self._filesystem_repository.list_directory(file_path)
            if not include_hidden:
                listing = DirectoryListing.create(listing.path, listing.filter_hidden())

            matches = listing.filter_by_pattern(pattern)
            self._logger.info(f"Found {len(matches)} entries matching pattern '{pattern}'")
            return matches
        except (FileRepositoryError, DomainError):
            raise
        except Exception as e:
            self._logger.error(f"Error searching files: {e}")
            raise FileRepositoryError(
                f"Failed to search files in {directory} with pattern {pattern}: {str(e)}"
            )
