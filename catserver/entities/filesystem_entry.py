"""
FileSystemEntry domain entity.
"""

import stat
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from catserver.exceptions import EmptyInputError, NegativeSizeError
from catserver.value_objects.file_path import clean_path, has_traversal
from catserver.value_objects.file_size import FileSize


@dataclass(frozen=True)
class FileSystemEntry:
    """
    Snapshot of one file or directory, taken at enumeration or stat time.
    """

    name: str
    path: str
    raw_path: str
    size: int
    mod_time: datetime
    is_dir: bool
    permissions: int

    @classmethod
    def create(
        cls,
        name: str,
        path: str,
        size: int,
        mod_time: datetime,
        is_dir: bool,
        permissions: int,
    ) -> "FileSystemEntry":
        """
        Build an entry from raw filesystem data.

        Args:
            name: Entry name (last path component)
            path: Path relative to the served root
            size: Size in bytes
            mod_time: Last modification time
            is_dir: Whether the entry is a directory
            permissions: ``st_mode`` bits

        Raises:
            EmptyInputError: If name is empty
            NegativeSizeError: If size is negative
        """
        if not name:
            raise EmptyInputError("filename cannot be empty")
        if size < 0:
            raise NegativeSizeError("file size cannot be negative")

        return cls(
            name=name,
            path=clean_path(path),
            raw_path=path,
            size=size,
            mod_time=mod_time,
            is_dir=is_dir,
            permissions=permissions,
        )

    def is_secure(self) -> bool:
        """
        Re-validate the stored paths.

        Entries may be built straight from OS data, so neither the raw nor the
        cleaned path is trusted.
        """
        for candidate in (self.raw_path, self.path):
            if has_traversal(candidate) or "\x00" in candidate:
                return False
        return True

    def is_hidden(self) -> bool:
        return self.name.startswith(".")

    def is_executable(self) -> bool:
        return bool(self.permissions & stat.S_IXUSR)

    def is_readable(self) -> bool:
        return bool(self.permissions & stat.S_IRUSR)

    def is_writable(self) -> bool:
        return bool(self.permissions & stat.S_IWUSR)

    def permissions_string(self) -> str:
        """``ls -l`` style mode string, e.g. ``-rw-r--r--``."""
        return stat.filemode(self.permissions)

    def human_readable_size(self) -> str:
        if self.is_dir:
            return "-"
        return FileSize.create(self.size).human_readable()

    def get_details(self) -> dict[str, Any]:
        """
        Get the entry as a flat dictionary.

        Returns:
            Dictionary with entry information and derived flags
        """
        return {
            "name": self.name,
            "path": self.path,
            "size": self.size,
            "size_human": self.human_readable_size(),
            "mod_time": self.mod_time,
            "is_dir": self.is_dir,
            "permissions": self.permissions_string(),
            "is_hidden": self.is_hidden(),
            "is_executable": self.is_executable(),
            "is_readable": self.is_readable(),
            "is_writable": self.is_writable(),
        }

    def __str__(self) -> str:
        kind = "dir" if self.is_dir else "file"
        return f"FileSystemEntry(name='{self.name}', size={self.size}, type='{kind}')"
