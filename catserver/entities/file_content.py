"""
FileContent domain entity.
"""

import mimetypes
from datetime import datetime, timezone
from typing import Optional

from catserver.entities.filesystem_entry import FileSystemEntry
from catserver.exceptions import (
    ContentTooLargeError,
    DirectoryContentError,
    EmptyInputError,
)

BINARY_PREVIEW = "[Binary content]"

FNV_OFFSET_BASIS = 2166136261
FNV_PRIME = 16777619


class FileContent:
    """
    Content of one regular file plus the entry it was read from.
    """

    __slots__ = ("_entry", "_content", "_encoding", "_read_at")

    def __init__(
        self,
        entry: FileSystemEntry,
        content: bytes,
        encoding: str,
        read_at: datetime,
    ):
        self._entry = entry
        self._content = bytes(content)
        self._encoding = encoding
        self._read_at = read_at

    @classmethod
    def create(
        cls,
        entry: Optional[FileSystemEntry],
        content: bytes,
        encoding: str = "utf-8",
    ) -> "FileContent":
        """
        Wrap bytes read from disk.

        Args:
            entry: Entry the bytes belong to
            content: Raw bytes; mutable buffers are copied
            encoding: Character encoding, "utf-8" when empty

        Raises:
            EmptyInputError: If entry is None
            DirectoryContentError: If entry is a directory
        """
        if entry is None:
            raise EmptyInputError("file entry cannot be nil")
        if entry.is_dir:
            raise DirectoryContentError("cannot create file content for directory")

        return cls(
            entry=entry,
            content=content or b"",
            encoding=encoding or "utf-8",
            read_at=datetime.now(timezone.utc),
        )

    @property
    def entry(self) -> FileSystemEntry:
        return self._entry

    @property
    def content(self) -> bytes:
        return self._content

    @property
    def encoding(self) -> str:
        return self._encoding

    @property
    def read_at(self) -> datetime:
        return self._read_at

    @property
    def size(self) -> int:
        return len(self._content)

    def is_empty(self) -> bool:
        return not self._content

    def content_as_string(self) -> str:
        return self._content.decode(self._encoding, errors="replace")

    def is_text_content(self) -> bool:
        """
        Classify the content as text or binary.

        Empty content is text, anything holding a NUL byte is binary, the rest
        is text iff it decodes as UTF-8. The NUL scan runs first because it is
        much cheaper than decoding.
        """
        if not self._content:
            return True
        if b"\x00" in self._content:
            return False
        try:
            self._content.decode("utf-8")
        except UnicodeDecodeError:
            return False
        return True

    def get_content_type(self) -> str:
        """
        Resolve the MIME type from the extension, falling back to sniffing.
        """
        mime_type, _ = mimetypes.guess_type(self._entry.name)
        if mime_type:
            return mime_type

        if self.is_text_content():
            text = self._content.decode("utf-8").lstrip()
            if text.startswith(("{", "[")):
                return "application/json"
            if text.startswith("<") and ">" in text:
                return "text/html"
            return "text/plain"

        return "application/octet-stream"

    def get_lines(self) -> Optional[list[str]]:
        if not self.is_text_content():
            return None
        text = self._content.decode("utf-8")
        text = text.replace("\r\n", "\n").replace("\r", "\n")
        return text.split("\n")

    def get_line_count(self) -> int:
        lines = self.get_lines()
        if lines is None:
            return 0
        return len(lines)

    def get_preview(self, max_chars: int) -> str:
        """
        Return at most max_chars characters, with "..." appended when cut.

        Binary content is never decoded; a placeholder is returned instead.
        """
        if not self.is_text_content():
            return BINARY_PREVIEW
        text = self._content.decode("utf-8")
        if len(text) <= max_chars:
            return text
        return text[:max_chars] + "..."

    def get_content_hash(self) -> int:
        """32-bit FNV-1a over the raw bytes. A change signal, not a digest."""
        digest = FNV_OFFSET_BASIS
        for byte in self._content:
            digest ^= byte
            digest = (digest * FNV_PRIME) & 0xFFFFFFFF
        return digest

    def validate_size(self, max_size: int) -> None:
        if self.size > max_size:
            raise ContentTooLargeError("file content exceeds maximum allowed size")

    def __repr__(self) -> str:
        return f"FileContent(path='{self._entry.path}', size={self.size})"
