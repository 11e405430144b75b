"""
Custom exceptions for the application.
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Coarse, machine-checkable error categories."""

    INVALID_PATH = "invalid_path"
    NOT_FOUND = "not_found"
    PERMISSION_DENIED = "permission_denied"
    IS_DIRECTORY = "is_directory"
    NOT_A_DIRECTORY = "not_a_directory"
    NOT_REGULAR_FILE = "not_regular_file"
    TOO_LARGE = "too_large"
    OVERFLOW = "overflow"
    NEGATIVE = "negative"
    EMPTY_INPUT = "empty_input"
    RESTRICTED = "restricted"
    UNKNOWN = "unknown"


class BaseAppError(Exception):
    """Base exception class for application errors."""

    code: ErrorCode = ErrorCode.UNKNOWN


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass


class DomainError(BaseAppError):
    """Exception raised when a value object or entity rejects its input."""

    code = ErrorCode.UNKNOWN

    def __init__(self, message: str, code: ErrorCode | None = None):
        super().__init__(message)
        if code is not None:
            self.code = code


class InvalidPathError(DomainError):
    """Malformed path, traversal attempt or NUL byte."""

    code = ErrorCode.INVALID_PATH


class NegativeSizeError(DomainError):
    """A size would be, or became, negative."""

    code = ErrorCode.NEGATIVE


class SizeOverflowError(DomainError):
    """A size exceeds the largest representable byte count."""

    code = ErrorCode.OVERFLOW


class SizeLimitExceededError(DomainError):
    """A size exceeds a configured limit."""

    code = ErrorCode.TOO_LARGE


class ContentTooLargeError(DomainError):
    """File content exceeds a configured limit."""

    code = ErrorCode.TOO_LARGE


class EmptyInputError(DomainError):
    """A required name, path or collection was empty or missing."""

    code = ErrorCode.EMPTY_INPUT


class DirectoryContentError(DomainError):
    """File content was requested for a directory entry."""

    code = ErrorCode.IS_DIRECTORY


class FileRepositoryError(BaseAppError):
    """Exception raised for file repository errors."""

    pass


class FileSystemError(FileRepositoryError):
    """
    Error raised at the filesystem boundary.

    ``path`` is always the caller-supplied relative path, never the resolved
    absolute path on disk.
    """

    def __init__(self, operation: str, path: str, reason: str, code: ErrorCode):
        self.operation = operation
        self.path = path
        self.reason = reason
        self.code = code
        super().__init__(
            f"filesystem error in {operation} for path '{path}': {reason}"
        )
