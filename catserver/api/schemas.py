"""
Pydantic models for API requests and responses.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class EntryInfo(BaseModel):
    """Schema for one directory entry."""

    name: str = Field(..., description="Entry name")
    path: str = Field(..., description="Path relative to the served root")
    size: int = Field(..., description="Size in bytes")
    size_human: str = Field(..., description="Human-readable size, '-' for directories")
    mod_time: datetime = Field(..., description="Last modification time (UTC)")
    is_dir: bool = Field(..., description="Whether the entry is a directory")
    permissions: str = Field(..., description="ls-style permission string")
    is_hidden: bool = Field(..., description="Whether the name starts with a dot")

    @classmethod
    def from_entity(cls, entry):
        """Create an EntryInfo schema from a FileSystemEntry entity."""
        details = entry.get_details()
        return cls(
            name=details["name"],
            path=details["path"],
            size=details["size"],
            size_human=details["size_human"],
            mod_time=details["mod_time"],
            is_dir=details["is_dir"],
            permissions=details["permissions"],
            is_hidden=details["is_hidden"],
        )


class StatisticsInfo(BaseModel):
    """Schema for directory statistics."""

    total_files: int = Field(..., description="Number of regular files")
    total_directories: int = Field(..., description="Number of subdirectories")
    total_size: int = Field(..., description="Sum of file sizes in bytes")
    largest_file: Optional[str] = Field(None, description="Name of the largest file")
    newest_file: Optional[str] = Field(None, description="Name of the newest file")
    oldest_file: Optional[str] = Field(None, description="Name of the oldest file")

    @classmethod
    def from_stats(cls, stats):
        """Create a StatisticsInfo schema from DirectoryStats."""
        return cls(
            total_files=stats.total_files,
            total_directories=stats.total_directories,
            total_size=stats.total_size,
            largest_file=stats.largest_file.name if stats.largest_file else None,
            newest_file=stats.newest_file.name if stats.newest_file else None,
            oldest_file=stats.oldest_file.name if stats.oldest_file else None,
        )


class ListDirectoryResponse(BaseModel):
    """Schema for directory listing response."""

    path: str = Field(..., description="Listed directory")
    entries: List[EntryInfo] = Field(..., description="Filtered, sorted entries")
    total_count: int = Field(..., description="Number of returned entries")
    file_count: int = Field(..., description="Number of returned files")
    dir_count: int = Field(..., description="Number of returned directories")
    total_size: int = Field(..., description="Sum of returned file sizes in bytes")
    scanned_at: datetime = Field(..., description="Snapshot time (UTC)")
    statistics: StatisticsInfo = Field(..., description="Statistics of the whole directory")


class DirectoryStatsResponse(BaseModel):
    """Schema for directory statistics response."""

    path: str = Field(..., description="Directory the statistics describe")
    statistics: StatisticsInfo = Field(..., description="Directory statistics")


class ReadFileResponse(BaseModel):
    """Schema for file read response."""

    filename: str = Field(..., description="Requested file")
    content: str = Field(..., description="Text content, preview or binary placeholder")
    size: int = Field(..., description="Size in bytes")
    size_human: str = Field(..., description="Human-readable size")
    content_type: str = Field(..., description="Detected MIME type")
    encoding: str = Field(..., description="Declared encoding")
    is_text: bool = Field(..., description="Whether the content is valid text")
    line_count: int = Field(..., description="Number of lines, 0 for binary")
    mod_time: datetime = Field(..., description="Last modification time (UTC)")
    read_at: datetime = Field(..., description="Read time (UTC)")
    is_preview: bool = Field(..., description="Whether content was truncated to a preview")
    hash: int = Field(..., description="32-bit FNV-1a hash of the content")


class FileInfoResponse(BaseModel):
    """Schema for file information response."""

    path: str = Field(..., description="Path relative to the served root")
    exists: bool = Field(..., description="Whether the path exists")
    name: Optional[str] = Field(None, description="Entry name")
    size: int = Field(0, description="Size in bytes")
    size_human: str = Field("-", description="Human-readable size")
    is_dir: bool = Field(False, description="Whether the path is a directory")
    is_hidden: bool = Field(False, description="Whether the name starts with a dot")
    is_readable: bool = Field(False, description="Whether the server can open it")
    is_executable: bool = Field(False, description="Whether the owner execute bit is set")
    permissions: Optional[str] = Field(None, description="ls-style permission string")
    mod_time: Optional[datetime] = Field(None, description="Last modification time (UTC)")


class ErrorResponse(BaseModel):
    """Schema for error responses."""

    detail: str = Field(..., description="Error message")
