"""
Pytest configuration and shared fixtures.
"""

import os
import tempfile
from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

import pytest

from catserver.container import DependencyContainer
from catserver.entities.directory_listing import DirectoryListing
from catserver.entities.file_content import FileContent
from catserver.entities.filesystem_entry import FileSystemEntry
from catserver.exceptions import ErrorCode, FileSystemError
from catserver.ports.files.filesystem_repository_port import (
    DirectoryStats,
    FileSystemRepositoryPort,
)

BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)


def make_entry(name, size=0, is_dir=False, minutes=0, path=None, permissions=0o100644):
    """Build a FileSystemEntry with sensible defaults."""
    if is_dir and permissions == 0o100644:
        permissions = 0o040755
    return FileSystemEntry.create(
        name=name,
        path=path or name,
        size=size,
        mod_time=BASE_TIME + timedelta(minutes=minutes),
        is_dir=is_dir,
        permissions=permissions,
    )


class InMemoryFileSystemRepository(FileSystemRepositoryPort):
    """
    Repository fake backed by dicts.

    ``files`` maps a cleaned path to its bytes, ``directories`` maps a cleaned
    path to the names it contains. Paths listed in ``outside`` fail
    validation as if they escaped the root.
    """

    def __init__(self):
        self.files: dict[str, bytes] = {}
        self.directories: dict[str, list[str]] = {".": []}
        self.outside: set[str] = set()

    def add_file(self, path: str, content: bytes, directory: str = ".") -> None:
        self.files[path] = content
        self.directories.setdefault(directory, []).append(path.split("/")[-1])

    def add_directory(self, path: str, parent: str = ".") -> None:
        self.directories.setdefault(path, [])
        self.directories.setdefault(parent, []).append(path.split("/")[-1])

    def _check(self, path, operation):
        if path.value in self.outside:
            raise FileSystemError(
                operation, str(path), "path outside allowed directory", ErrorCode.INVALID_PATH
            )

    def _entry(self, path_value: str) -> FileSystemEntry:
        name = path_value.split("/")[-1]
        if path_value in self.directories:
            return make_entry(name, is_dir=True, path=path_value)
        return make_entry(name, size=len(self.files[path_value]), path=path_value)

    def list_directory(self, path):
        self._check(path, "list_directory")
        if path.value in self.files:
            raise FileSystemError(
                "list_directory", str(path), "path is not a directory", ErrorCode.NOT_A_DIRECTORY
            )
        if path.value not in self.directories:
            raise FileSystemError(
                "list_directory", str(path), "directory not found", ErrorCode.NOT_FOUND
            )
        prefix = "" if path.value == "." else path.value + "/"
        entries = [
            self._entry(prefix + name) for name in self.directories[path.value]
        ]
        return DirectoryListing.create(path.value, entries)

    def read_file(self, path):
        self._check(path, "read_file")
        if path.value in self.directories:
            raise FileSystemError(
                "read_file", str(path), "path is a directory", ErrorCode.IS_DIRECTORY
            )
        if path.value not in self.files:
            raise FileSystemError("read_file", str(path), "file not found", ErrorCode.NOT_FOUND)
        return FileContent.create(self._entry(path.value), self.files[path.value])

    def exists(self, path):
        return path.value in self.files or path.value in self.directories

    def is_readable(self, path):
        return self.exists(path)

    def is_directory(self, path):
        return path.value in self.directories

    def get_file_info(self, path):
        self._check(path, "get_file_info")
        if not self.exists(path):
            raise FileSystemError(
                "get_file_info", str(path), "file not found", ErrorCode.NOT_FOUND
            )
        return self._entry(path.value)

    def validate_path(self, path):
        self._check(path, "validate_path")

    def get_directory_stats(self, path):
        return DirectoryStats.from_listing(self.list_directory(path))


@pytest.fixture
def temp_directory():
    """
    Create a temporary directory tree for testing file operations.

    Layout::

        test1.txt        "This is a test file."
        test2.py         "print('Hello, world!')"
        .hidden          "secret"
        subdir/test3.md  "# Test Markdown\\n\\nThis is a test."

    Returns:
        Path to the temporary directory
    """
    with tempfile.TemporaryDirectory() as temp_dir:
        with open(os.path.join(temp_dir, "test1.txt"), "w") as f:
            f.write("This is a test file.")

        with open(os.path.join(temp_dir, "test2.py"), "w") as f:
            f.write("print('Hello, world!')")

        with open(os.path.join(temp_dir, ".hidden"), "w") as f:
            f.write("secret")

        # Create a subdirectory with a file
        subdir = os.path.join(temp_dir, "subdir")
        os.makedirs(subdir)

        with open(os.path.join(subdir, "test3.md"), "w") as f:
            f.write("# Test Markdown\n\nThis is a test.")

        yield temp_dir


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def entry_factory():
    """
    Factory for FileSystemEntry objects with sensible defaults.

    Returns:
        Callable taking (name, size=0, is_dir=False, minutes=0, path=None, permissions=...)
    """
    return make_entry


@pytest.fixture
def memory_repository():
    """
    In-memory repository with a small tree.

    Returns:
        InMemoryFileSystemRepository holding a.txt, b.log, .env and docs/
    """
    repository = InMemoryFileSystemRepository()
    repository.add_file("a.txt", b"alpha\nbeta\n")
    repository.add_file("b.log", b"x" * 2048)
    repository.add_file(".env", b"TOKEN=1")
    repository.add_directory("docs")
    repository.add_file("docs/readme.md", b"# docs", directory="docs")
    return repository


@pytest.fixture
def dependency_container(mock_logger):
    """
    Create a dependency container with mocked dependencies for testing.

    Returns:
        DependencyContainer instance with mocked logger
    """
    container = DependencyContainer()
    # Replace the logger with our mock
    container._logger = mock_logger
    return container
