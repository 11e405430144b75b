"""
Use case for describing a single file or directory.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from catserver.exceptions import (
    DomainError,
    ErrorCode,
    FileRepositoryError,
    FileSystemError,
)
from catserver.ports.files.filesystem_repository_port import FileSystemRepositoryPort
from catserver.value_objects.file_path import FilePath


@dataclass(frozen=True)
class FileInfoResult:
    path: str
    exists: bool
    name: Optional[str] = None
    size: int = 0
    size_human: str = "-"
    is_dir: bool = False
    is_hidden: bool = False
    is_readable: bool = False
    is_executable: bool = False
    permissions: Optional[str] = None
    mod_time: Optional[datetime] = None


class GetFileInfoUseCase:
    def __init__(
        self,
        filesystem_repository: FileSystemRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._filesystem_repository = filesystem_repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, filename: str) -> FileInfoResult:
        """
        Describe a path under the root.

        A missing path is not an error: the result has ``exists=False``.

        Raises:
            InvalidPathError: If the path is malformed or a traversal attempt
            FileSystemError: INVALID_PATH if it resolves outside the root
        """
        try:
            file_path = FilePath.create(filename)
        except DomainError as e:
            self._logger.warning(f"Rejected path {filename!r}: {e}")
            raise

        try:
            self._logger.debug(f"Getting file info: {file_path}")
            entry = self._filesystem_repository.get_file_info(file_path)
        except FileSystemError as e:
            if e.code == ErrorCode.NOT_FOUND:
                return FileInfoResult(path=file_path.value, exists=False)
            if e.code == ErrorCode.INVALID_PATH:
                self._logger.warning(f"Blocked info access {filename!r}: {e.reason}")
            raise
        except (FileRepositoryError, DomainError):
            raise
        except Exception as e:
            self._logger.error(f"Error getting file info: {e}")
            raise FileRepositoryError(f"Failed to get info for {filename}: {str(e)}")

        return FileInfoResult(
            path=entry.path,
            exists=True,
            name=entry.name,
            size=entry.size,
            size_human=entry.human_readable_size(),
            is_dir=entry.is_dir,
            is_hidden=entry.is_hidden(),
            is_readable=self._filesystem_repository.is_readable(file_path),
            is_executable=entry.is_executable(),
            permissions=entry.permissions_string(),
            mod_time=entry.mod_time,
        )
