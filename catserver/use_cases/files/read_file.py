"""
Use case for reading a file under the served root.
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
from catserver.value_objects.file_size import FileSize

# Executable and script formats that are never served
RESTRICTED_EXTENSIONS = (
    ".exe", ".bat", ".cmd", ".com", ".scr", ".pif",
    ".vbs", ".vbe", ".js", ".jse", ".wsf", ".wsh",
    ".msi", ".reg", ".ps1", ".psm1",
)


@dataclass(frozen=True)
class ReadFileRequest:
    filename: str
    max_size: int = 0
    preview_only: bool = False
    preview_size: int = 0


@dataclass(frozen=True)
class ReadFileResult:
    filename: str
    content: str
    size: int
    size_human: str
    content_type: str
    encoding: str
    is_text: bool
    line_count: int
    mod_time: datetime
    read_at: datetime
    is_preview: bool
    hash: int


class ReadFileUseCase:
    """Use case for reading one file and describing its content."""

    def __init__(
        self,
        filesystem_repository: FileSystemRepositoryPort,
        logger: Optional[logging.Logger] = None,
        restricted_extensions: tuple[str, ...] = RESTRICTED_EXTENSIONS,
    ):
        """
        Initialize the use case.

        Args:
            filesystem_repository: Repository for filesystem operations
            logger: Logger instance to use for logging
            restricted_extensions: Lowercase extensions that are refused
        """
        self._filesystem_repository = filesystem_repository
        self._logger = logger or logging.getLogger(__name__)
        self._restricted_extensions = restricted_extensions

    def is_restricted(self, filename: str) -> bool:
        return filename.lower().endswith(self._restricted_extensions)

    def validate_access(self, filename: str) -> FilePath:
        """
        Run every access check that does not read the file.

        Returns:
            The validated FilePath

        Raises:
            InvalidPathError: If the filename is malformed or a traversal attempt
            FileSystemError: INVALID_PATH if it resolves outside the root,
                RESTRICTED for executable/script types
        """
        try:
            file_path = FilePath.create(filename)
        except DomainError as e:
            self._logger.warning(f"Rejected filename {filename!r}: {e}")
            raise

        try:
            self._filesystem_repository.validate_path(file_path)
        except FileSystemError as e:
            self._logger.warning(f"Blocked file access {filename!r}: {e.reason}")
            raise

        if self.is_restricted(file_path.value):
            self._logger.warning(f"Blocked restricted file type {filename!r}")
            raise FileSystemError(
                "read_file",
                str(file_path),
                "access to this file type is restricted",
                ErrorCode.RESTRICTED,
            )
        return file_path

    def execute(self, request: ReadFileRequest) -> ReadFileResult:
        """
        Read a file.

        Args:
            request: Filename plus optional size limit and preview settings

        Returns:
            ReadFileResult; binary files carry a placeholder instead of content

        Raises:
            InvalidPathError: If the filename is malformed or a traversal attempt
            SizeLimitExceededError: If the file is above request.max_size
            FileSystemError: If the repository rejects or fails the read
        """
        file_path = self.validate_access(request.filename)

        try:
            self._logger.info(f"Reading file: {file_path}")

            if request.max_size > 0:
                info = self._filesystem_repository.get_file_info(file_path)
                if not info.is_dir:
                    FileSize.create(info.size).validate(request.max_size)

            file_content = self._filesystem_repository.read_file(file_path)
            is_text = file_content.is_text_content()

            is_preview = request.preview_only and request.preview_size > 0
            if is_preview or not is_text:
                content = file_content.get_preview(request.preview_size)
            else:
                content = file_content.content_as_string()

            result = ReadFileResult(
                filename=request.filename,
                content=content,
                size=file_content.size,
                size_human=FileSize.create(file_content.size).human_readable(),
                content_type=file_content.get_content_type(),
                encoding=file_content.encoding,
                is_text=is_text,
                line_count=file_content.get_line_count(),
                mod_time=file_content.entry.mod_time,
                read_at=file_content.read_at,
                is_preview=is_preview,
                hash=file_content.get_content_hash(),
            )
            self._logger.info(f"Read {result.size} bytes from {file_path}")
            return result
        except (FileRepositoryError, DomainError):
            raise
        except Exception as e:
            self._logger.error(f"Error reading file: {e}")
            raise FileRepositoryError(
                f"Failed to read file {request.filename}: {str(e)}"
            )
