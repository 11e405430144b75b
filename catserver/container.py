"""
Dependency injection container for managing application dependencies.
"""

import logging

from catserver.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from catserver.config.settings import settings
from catserver.ports.files.filesystem_repository_port import FileSystemRepositoryPort
from catserver.use_cases.files.file_info import GetFileInfoUseCase
from catserver.use_cases.files.list_directory import ListDirectoryUseCase
from catserver.use_cases.files.read_file import ReadFileUseCase
from catserver.use_cases.files.search_files import SearchFilesUseCase


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.
    """

    def __init__(self):
        self._instances = {}
        self._logger = logging.getLogger(__name__)

    def get_filesystem_repository(self) -> FileSystemRepositoryPort:
        """
        Get filesystem repository adapter instance.

        The adapter is rooted at ``settings.base_directory`` and refuses files
        larger than ``settings.max_file_size``.

        Returns:
            FileSystemRepositoryPort implementation
        """
        if "filesystem_repository" not in self._instances:
            self._instances["filesystem_repository"] = LocalFileSystemAdapter(
                settings.base_directory, settings.max_file_size, self._logger
            )
        return self._instances["filesystem_repository"]

    def get_list_directory_use_case(self) -> ListDirectoryUseCase:
        """
        Get list directory use case with injected dependencies.

        Returns:
            Configured ListDirectoryUseCase
        """
        if "list_directory_use_case" not in self._instances:
            repository = self.get_filesystem_repository()
            self._instances["list_directory_use_case"] = ListDirectoryUseCase(
                repository, self._logger
            )
        return self._instances["list_directory_use_case"]

    def get_read_file_use_case(self) -> ReadFileUseCase:
        """
        Get read file use case with injected dependencies.

        Returns:
            Configured ReadFileUseCase
        """
        if "read_file_use_case" not in self._instances:
            repository = self.get_filesystem_repository()
            self._instances["read_file_use_case"] = ReadFileUseCase(
                repository, self._logger
            )
        return self._instances["read_file_use_case"]

    def get_file_info_use_case(self) -> GetFileInfoUseCase:
        if "file_info_use_case" not in self._instances:
            repository = self.get_filesystem_repository()
            self._instances["file_info_use_case"] = GetFileInfoUseCase(
                repository, self._logger
            )
        return self._instances["file_info_use_case"]

    def get_search_files_use_case(self) -> SearchFilesUseCase:
        """
        Get search files use case with injected dependencies.

        Returns:
            Configured SearchFilesUseCase
        """
        if "search_files_use_case" not in self._instances:
            repository = self.get_filesystem_repository()
            self._instances["search_files_use_case"] = SearchFilesUseCase(
                repository, self._logger
            )
        return self._instances["search_files_use_case"]

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()


# Global container instance
container = DependencyContainer()
