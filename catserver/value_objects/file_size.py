"""
FileSize value object.
"""

from dataclasses import dataclass
from typing import Optional

from catserver.exceptions import (
    NegativeSizeError,
    SizeLimitExceededError,
    SizeOverflowError,
)

BYTE = 1
KB = 1024 * BYTE
MB = 1024 * KB
GB = 1024 * MB
TB = 1024 * GB

# Largest byte count a 64-bit signed file offset can express
MAX_FILE_SIZE_BYTES = 2**63 - 1


@dataclass(frozen=True, order=True)
class FileSize:
    """Immutable, non-negative byte count."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise NegativeSizeError("file size cannot be negative")
        if self.value > MAX_FILE_SIZE_BYTES:
            raise SizeOverflowError("file size overflow")

    @classmethod
    def create(cls, size_bytes: int) -> "FileSize":
        """
        Build a FileSize.

        Raises:
            NegativeSizeError: If size_bytes is below zero
            SizeOverflowError: If size_bytes exceeds MAX_FILE_SIZE_BYTES
        """
        return cls(int(size_bytes))

    def is_empty(self) -> bool:
        return self.value == 0

    def is_large(self, threshold: int) -> bool:
        return self.value > threshold

    def human_readable(self) -> str:
        """
        Format with binary units.

        Sizes below 1 KB are printed exactly, larger ones with one decimal:
        1023 -> "1023 B", 1024 -> "1.0 KB", 1536 -> "1.5 KB".
        """
        if self.value == 0:
            return "0 B"
        if self.value < KB:
            return f"{self.value} B"
        if self.value < MB:
            return f"{self.value / KB:.1f} KB"
        if self.value < GB:
            return f"{self.value / MB:.1f} MB"
        if self.value < TB:
            return f"{self.value / GB:.1f} GB"
        return f"{self.value / TB:.1f} TB"

    def add(self, other: Optional["FileSize"]) -> "FileSize":
        if other is None:
            return self
        total = self.value + other.value
        if total > MAX_FILE_SIZE_BYTES:
            raise SizeOverflowError("file size overflow")
        return FileSize(total)

    def subtract(self, other: Optional["FileSize"]) -> "FileSize":
        if other is None:
            return self
        difference = self.value - other.value
        if difference < 0:
            raise NegativeSizeError("file size cannot be negative")
        return FileSize(difference)

    def compare(self, other: Optional["FileSize"]) -> int:
        """Return -1, 0 or 1. Any size compares greater than None."""
        if other is None:
            return 1
        if self.value < other.value:
            return -1
        if self.value > other.value:
            return 1
        return 0

    def equals(self, other: Optional["FileSize"]) -> bool:
        return self.compare(other) == 0

    def is_greater_than(self, other: Optional["FileSize"]) -> bool:
        return self.compare(other) > 0

    def is_less_than(self, other: Optional["FileSize"]) -> bool:
        return self.compare(other) < 0

    def to_kb(self) -> float:
        return self.value / KB

    def to_mb(self) -> float:
        return self.value / MB

    def to_gb(self) -> float:
        return self.value / GB

    def is_within_limit(self, limit: int) -> bool:
        return self.value <= limit

    def exceeds_limit(self, limit: int) -> bool:
        return self.value > limit

    def percentage(self, total: Optional["FileSize"]) -> float:
        if total is None or total.value == 0:
            return 0.0
        return self.value / total.value * 100.0

    def validate(self, max_size: int) -> None:
        """
        Check against a limit; ``max_size <= 0`` means unlimited.

        Raises:
            SizeLimitExceededError: If the size is above a positive max_size
        """
        if max_size > 0 and self.value > max_size:
            raise SizeLimitExceededError(
                f"file size {self.human_readable()} exceeds maximum allowed size"
            )

    def __str__(self) -> str:
        return self.human_readable()
