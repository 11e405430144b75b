"""
FastAPI dependency functions for retrieving use cases from the container.
"""

from catserver.container import container
from catserver.use_cases.files.file_info import GetFileInfoUseCase
from catserver.use_cases.files.list_directory import ListDirectoryUseCase
from catserver.use_cases.files.read_file import ReadFileUseCase
from catserver.use_cases.files.search_files import SearchFilesUseCase


def get_list_directory_uc() -> ListDirectoryUseCase:
    """
    Get the list directory use case from the container.

    Returns:
        ListDirectoryUseCase: The list directory use case instance
    """
    return container.get_list_directory_use_case()


def get_read_file_uc() -> ReadFileUseCase:
    """
    Get the read file use case from the container.

    Returns:
        ReadFileUseCase: The read file use case instance
    """
    return container.get_read_file_use_case()


def get_file_info_uc() -> GetFileInfoUseCase:
    return container.get_file_info_use_case()


def get_search_files_uc() -> SearchFilesUseCase:
    """
    Get the search files use case from the container.

    Returns:
        SearchFilesUseCase: The search files use case instance
    """
    return container.get_search_files_use_case()
