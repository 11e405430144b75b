"""
FastAPI router definitions for the API endpoints.
"""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from catserver.api.dependencies import (
    get_file_info_uc,
    get_list_directory_uc,
    get_read_file_uc,
    get_search_files_uc,
)
from catserver.api.schemas import (
    DirectoryStatsResponse,
    EntryInfo,
    ErrorResponse,
    FileInfoResponse,
    ListDirectoryResponse,
    ReadFileResponse,
    StatisticsInfo,
)
from catserver.config.settings import settings
from catserver.exceptions import BaseAppError, ErrorCode
from catserver.use_cases.files.list_directory import (
    FilterType,
    ListDirectoryRequest,
    SortBy,
    SortOrder,
)
from catserver.use_cases.files.read_file import ReadFileRequest

router = APIRouter()

STATUS_BY_CODE = {
    ErrorCode.INVALID_PATH: 400,
    ErrorCode.NOT_A_DIRECTORY: 400,
    ErrorCode.IS_DIRECTORY: 400,
    ErrorCode.NOT_REGULAR_FILE: 400,
    ErrorCode.EMPTY_INPUT: 400,
    ErrorCode.RESTRICTED: 403,
    ErrorCode.PERMISSION_DENIED: 403,
    ErrorCode.NOT_FOUND: 404,
    ErrorCode.TOO_LARGE: 413,
}

ERROR_RESPONSES = {
    status: {"model": ErrorResponse} for status in (400, 403, 404, 413, 500)
}


def to_http_exception(error: Exception) -> HTTPException:
    """
    Translate an application error into an HTTPException.

    The error code travels in the ``X-Error-Code`` header; anything that is
    not an application error becomes a 500 with a generic message.
    """
    if isinstance(error, BaseAppError):
        return HTTPException(
            status_code=STATUS_BY_CODE.get(error.code, 500),
            detail=str(error),
            headers={"X-Error-Code": error.code.value},
        )
    return HTTPException(
        status_code=500,
        detail="internal server error",
        headers={"X-Error-Code": ErrorCode.UNKNOWN.value},
    )


@router.get("/ls", response_model=ListDirectoryResponse, responses=ERROR_RESPONSES)
def list_directory(
    path: str = Query(".", description="Directory to list, relative to the root"),
    include_hidden: bool = Query(False, alias="all", description="Include hidden entries"),
    sort: SortBy = Query(SortBy.NAME, description="Sort criterion"),
    order: Optional[SortOrder] = Query(
        None, description="Sort order; defaults to the criterion's natural order"
    ),
    filter_type: FilterType = Query(
        FilterType.ALL, alias="filter", description="Entry type filter"
    ),
):
    """
    List a directory.

    Hidden entries are only returned when both the request asks for them and
    the server allows them.

    Raises:
        HTTPException: If listing the directory fails
    """
    request = ListDirectoryRequest(
        path=path,
        include_hidden=include_hidden and settings.allow_hidden,
        sort_by=sort,
        sort_order=order,
        filter_type=filter_type,
    )
    try:
        result = get_list_directory_uc().execute(request)
    except Exception as e:
        raise to_http_exception(e)

    return ListDirectoryResponse(
        path=result.path,
        entries=[EntryInfo.from_entity(entry) for entry in result.entries],
        total_count=result.total_count,
        file_count=result.file_count,
        dir_count=result.dir_count,
        total_size=result.total_size,
        scanned_at=result.scanned_at,
        statistics=StatisticsInfo.from_stats(result.statistics),
    )


@router.get(
    "/cat/{filename:path}", response_model=ReadFileResponse, responses=ERROR_RESPONSES
)
def read_file(
    filename: str,
    preview: bool = Query(False, description="Return only a preview of the content"),
    preview_size: Optional[int] = Query(
        None, ge=1, description="Preview length in characters"
    ),
    max_size: int = Query(0, ge=0, description="Reject files above this many bytes"),
):
    """
    Read a file.

    Raises:
        HTTPException: If reading the file fails
    """
    request = ReadFileRequest(
        filename=filename,
        max_size=max_size,
        preview_only=preview,
        preview_size=preview_size or settings.preview_size,
    )
    try:
        result = get_read_file_uc().execute(request)
    except Exception as e:
        raise to_http_exception(e)

    return ReadFileResponse(
        filename=result.filename,
        content=result.content,
        size=result.size,
        size_human=result.size_human,
        content_type=result.content_type,
        encoding=result.encoding,
        is_text=result.is_text,
        line_count=result.line_count,
        mod_time=result.mod_time,
        read_at=result.read_at,
        is_preview=result.is_preview,
        hash=result.hash,
    )


@router.get(
    "/info/{filename:path}", response_model=FileInfoResponse, responses=ERROR_RESPONSES
)
def file_info(filename: str):
    """Describe a file or directory; absent paths report ``exists: false``."""
    try:
        result = get_file_info_uc().execute(filename)
    except Exception as e:
        raise to_http_exception(e)

    return FileInfoResponse(
        path=result.path,
        exists=result.exists,
        name=result.name,
        size=result.size,
        size_human=result.size_human,
        is_dir=result.is_dir,
        is_hidden=result.is_hidden,
        is_readable=result.is_readable,
        is_executable=result.is_executable,
        permissions=result.permissions,
        mod_time=result.mod_time,
    )


@router.get("/stats", response_model=DirectoryStatsResponse, responses=ERROR_RESPONSES)
def directory_stats(
    path: str = Query(".", description="Directory to describe, relative to the root"),
):
    try:
        stats = get_list_directory_uc().get_statistics(
            path, include_hidden=settings.allow_hidden
        )
    except Exception as e:
        raise to_http_exception(e)

    return DirectoryStatsResponse(path=path, statistics=StatisticsInfo.from_stats(stats))


@router.get(
    "/files/search", response_model=list[EntryInfo], responses=ERROR_RESPONSES
)
def search_files(
    pattern: str = Query(..., description="Entry name to match, or '*' for all"),
    directory: str = Query(".", description="Directory to search in"),
):
    """
    Search the entries of one directory by exact name.

    Raises:
        HTTPException: If searching fails
    """
    try:
        entries = get_search_files_uc().execute(
            directory, pattern, include_hidden=settings.allow_hidden
        )
    except Exception as e:
        raise to_http_exception(e)

    return [EntryInfo.from_entity(entry) for entry in entries]
