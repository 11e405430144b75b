"""
Local file system adapter implementation for read-only file operations.
"""

import logging
import os
import posixpath
import stat
from datetime import datetime, timezone

from typing_extensions import override

from catserver.entities.directory_listing import DirectoryListing
from catserver.entities.file_content import FileContent
from catserver.entities.filesystem_entry import FileSystemEntry
from catserver.exceptions import DomainError, ErrorCode, FileSystemError
from catserver.ports.files.filesystem_repository_port import (
    DirectoryStats,
    FileSystemRepositoryPort,
)
from catserver.value_objects.file_path import FilePath


class LocalFileSystemAdapter(FileSystemRepositoryPort):
    """Local file system implementation confined to one base directory."""

    def __init__(
        self,
        base_path: str,
        max_file_size: int = 0,
        logger: logging.Logger | None = None,
    ):
        """
        Initialize the adapter.

        Args:
            base_path: Directory outside of which nothing is read or reported
            max_file_size: Largest readable file in bytes; 0 or less disables the limit
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self._base_path: str = os.path.abspath(os.path.expanduser(base_path))
        self._max_file_size: int = max_file_size
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    @property
    def base_path(self) -> str:
        return self._base_path

    @property
    def max_file_size(self) -> int:
        return self._max_file_size

    def _resolve(self, path: FilePath, operation: str) -> str:
        """
        Validate the path and return its canonical absolute location.

        Raises:
            FileSystemError: INVALID_PATH if the path escapes the base directory
        """
        if not path.is_secure():
            raise FileSystemError(
                operation, str(path), "insecure path detected", ErrorCode.INVALID_PATH
            )

        # Canonicalized on every call: the root itself may be a symlink that changed.
        root = os.path.realpath(self._base_path)
        # A leading separator means "relative to the root", never the host root.
        candidate = os.path.realpath(os.path.join(root, path.value.lstrip("/")))

        try:
            relative = os.path.relpath(candidate, root)
        except ValueError:
            relative = candidate

        if (
            os.path.isabs(relative)
            or relative == os.pardir
            or relative.startswith(os.pardir + os.sep)
        ):
            raise FileSystemError(
                operation,
                str(path),
                "path outside allowed directory",
                ErrorCode.INVALID_PATH,
            )
        return candidate

    def _build_entry(
        self, name: str, relative_path: str, info: os.stat_result
    ) -> FileSystemEntry:
        return FileSystemEntry.create(
            name=name,
            path=relative_path,
            size=info.st_size,
            mod_time=datetime.fromtimestamp(info.st_mtime, tz=timezone.utc),
            is_dir=stat.S_ISDIR(info.st_mode),
            permissions=info.st_mode,
        )

    @override
    def validate_path(self, path: FilePath) -> None:
        """
        Check that the path resolves inside the base directory.

        Independent of the string checks done by FilePath: this one runs on the
        canonical filesystem path, so symlinks and redundant segments are
        already resolved.

        Raises:
            FileSystemError: INVALID_PATH if the path escapes the base directory
        """
        self._resolve(path, "validate_path")

    @override
    def list_directory(self, path: FilePath) -> DirectoryListing:
        """
        List the entries of a directory.

        Entries whose metadata cannot be read are skipped, not fatal.

        Raises:
            FileSystemError: If the path is invalid, missing or not a directory
        """
        full_path = self._resolve(path, "list_directory")

        if not os.path.exists(full_path):
            raise FileSystemError(
                "list_directory", str(path), "directory not found", ErrorCode.NOT_FOUND
            )
        if not os.path.isdir(full_path):
            raise FileSystemError(
                "list_directory",
                str(path),
                "path is not a directory",
                ErrorCode.NOT_A_DIRECTORY,
            )

        try:
            with os.scandir(full_path) as iterator:
                items = sorted(iterator, key=lambda item: item.name)
        except PermissionError:
            raise FileSystemError(
                "list_directory",
                str(path),
                "permission denied",
                ErrorCode.PERMISSION_DENIED,
            )
        except OSError as e:
            raise FileSystemError(
                "list_directory", str(path), e.strerror or "read failed", ErrorCode.UNKNOWN
            )

        entries: list[FileSystemEntry] = []
        for item in items:
            try:
                # Symlinks are reported as themselves, never followed out of the root.
                info = item.stat(follow_symlinks=False)
                entries.append(
                    self._build_entry(
                        item.name, posixpath.join(path.value, item.name), info
                    )
                )
            except (OSError, DomainError) as e:
                # Log the error but continue with other entries
                self._logger.warning(f"Could not process entry {item.name}: {e}")
                continue

        try:
            return DirectoryListing.create(path.value, entries)
        except DomainError as e:
            raise FileSystemError("list_directory", str(path), str(e), ErrorCode.UNKNOWN)

    @override
    def read_file(self, path: FilePath) -> FileContent:
        """
        Read a regular file fully.

        The size limit is enforced from stat before any byte is read, and again
        on the read itself in case the file grew in between.

        Raises:
            FileSystemError: INVALID_PATH, NOT_FOUND, IS_DIRECTORY, NOT_REGULAR_FILE,
                PERMISSION_DENIED, TOO_LARGE or UNKNOWN
        """
        full_path = self._resolve(path, "read_file")

        try:
            info = os.stat(full_path)
        except FileNotFoundError:
            raise FileSystemError(
                "read_file", str(path), "file not found", ErrorCode.NOT_FOUND
            )
        except PermissionError:
            raise FileSystemError(
                "read_file", str(path), "permission denied", ErrorCode.PERMISSION_DENIED
            )
        except OSError as e:
            raise FileSystemError(
                "read_file", str(path), e.strerror or "stat failed", ErrorCode.UNKNOWN
            )

        if stat.S_ISDIR(info.st_mode):
            raise FileSystemError(
                "read_file", str(path), "path is a directory", ErrorCode.IS_DIRECTORY
            )

        # FIFOs and devices can block on open or never reach EOF.
        if not stat.S_ISREG(info.st_mode):
            raise FileSystemError(
                "read_file",
                str(path),
                "path is not a regular file",
                ErrorCode.NOT_REGULAR_FILE,
            )

        if self._max_file_size > 0 and info.st_size > self._max_file_size:
            raise FileSystemError(
                "read_file", str(path), "file too large", ErrorCode.TOO_LARGE
            )

        try:
            with open(full_path, "rb") as handle:
                if self._max_file_size > 0:
                    content = handle.read(self._max_file_size + 1)
                else:
                    content = handle.read()
        except FileNotFoundError:
            raise FileSystemError(
                "read_file", str(path), "file not found", ErrorCode.NOT_FOUND
            )
        except PermissionError:
            raise FileSystemError(
                "read_file", str(path), "file not readable", ErrorCode.PERMISSION_DENIED
            )
        except OSError as e:
            raise FileSystemError(
                "read_file", str(path), e.strerror or "read failed", ErrorCode.UNKNOWN
            )

        if self._max_file_size > 0 and len(content) > self._max_file_size:
            raise FileSystemError(
                "read_file", str(path), "file too large", ErrorCode.TOO_LARGE
            )

        try:
            entry = FileSystemEntry.create(
                name=path.base(),
                path=path.value,
                size=len(content),
                mod_time=datetime.fromtimestamp(info.st_mtime, tz=timezone.utc),
                is_dir=False,
                permissions=info.st_mode,
            )
            return FileContent.create(entry, content, "utf-8")
        except DomainError as e:
            raise FileSystemError("read_file", str(path), str(e), ErrorCode.UNKNOWN)

    @override
    def exists(self, path: FilePath) -> bool:
        try:
            full_path = self._resolve(path, "exists")
        except FileSystemError:
            return False
        return os.path.exists(full_path)

    @override
    def is_readable(self, path: FilePath) -> bool:
        """
        Open and close the path; permission bits alone miss ACLs.

        The open is non-blocking so a FIFO without a writer does not hang.
        """
        try:
            full_path = self._resolve(path, "is_readable")
        except FileSystemError:
            return False
        try:
            fd = os.open(full_path, os.O_RDONLY | getattr(os, "O_NONBLOCK", 0))
        except OSError:
            return False
        os.close(fd)
        return True

    @override
    def is_directory(self, path: FilePath) -> bool:
        try:
            full_path = self._resolve(path, "is_directory")
        except FileSystemError:
            return False
        return os.path.isdir(full_path)

    @override
    def get_file_info(self, path: FilePath) -> FileSystemEntry:
        full_path = self._resolve(path, "get_file_info")

        try:
            info = os.stat(full_path)
        except FileNotFoundError:
            raise FileSystemError(
                "get_file_info", str(path), "file not found", ErrorCode.NOT_FOUND
            )
        except PermissionError:
            raise FileSystemError(
                "get_file_info",
                str(path),
                "permission denied",
                ErrorCode.PERMISSION_DENIED,
            )
        except OSError as e:
            raise FileSystemError(
                "get_file_info", str(path), e.strerror or "stat failed", ErrorCode.UNKNOWN
            )

        try:
            return self._build_entry(path.base(), path.value, info)
        except DomainError as e:
            raise FileSystemError("get_file_info", str(path), str(e), ErrorCode.UNKNOWN)

    @override
    def get_directory_stats(self, path: FilePath) -> DirectoryStats:
        listing = self.list_directory(path)
        return DirectoryStats.from_listing(listing)
