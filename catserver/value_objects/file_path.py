"""
FilePath value object.
"""

import posixpath
from dataclasses import dataclass, field

from catserver.exceptions import InvalidPathError

_TRAVERSAL_PATTERNS = ("../", "..\\")
_POST_CLEAN_PATTERNS = ("/..", "\\..")


def clean_path(path: str) -> str:
    """
    Lexically clean a slash-separated path.

    Duplicate separators and ``.`` segments are dropped, ``name/..`` pairs are
    resolved, trailing separators are removed and an empty result becomes ``.``.
    The filesystem is never consulted.
    """
    if not path:
        return "."
    cleaned = posixpath.normpath(path)
    # normpath keeps a leading "//" (POSIX implementation-defined root)
    if cleaned.startswith("//"):
        cleaned = "/" + cleaned.lstrip("/")
    return cleaned


def has_traversal(path: str) -> bool:
    return any(pattern in path for pattern in _TRAVERSAL_PATTERNS)


@dataclass(frozen=True)
class FilePath:
    """
    Immutable, validated path relative to the served root.

    ``raw`` keeps the input exactly as received so that audits can still see
    what was asked for; ``value`` is the lexically cleaned form used for every
    filesystem operation.
    """

    raw: str
    value: str = field(init=False)

    def __post_init__(self) -> None:
        if not isinstance(self.raw, str) or not self.raw:
            raise InvalidPathError("file path cannot be empty")

        if "\x00" in self.raw:
            raise InvalidPathError("file path cannot contain null bytes")

        # Must run before cleaning: "a/../../b" cleans to "../b" but
        # "x/../etc" cleans to the harmless looking "etc".
        if has_traversal(self.raw):
            raise InvalidPathError("insecure file path detected")

        object.__setattr__(self, "value", clean_path(self.raw))

        if self.value == ".." or not self.is_secure():
            raise InvalidPathError("insecure file path detected")

    @classmethod
    def create(cls, raw: str) -> "FilePath":
        """
        Validate and build a FilePath.

        Args:
            raw: Untrusted path string (usually straight from a request)

        Returns:
            FilePath holding both the raw and cleaned path

        Raises:
            InvalidPathError: If the path is empty, contains a NUL byte or a
                traversal sequence
        """
        return cls(raw)

    def __str__(self) -> str:
        return self.value

    def is_secure(self) -> bool:
        """Re-check the cleaned value for traversal patterns and NUL bytes."""
        if has_traversal(self.value):
            return False
        if any(pattern in self.value for pattern in _POST_CLEAN_PATTERNS):
            return False
        if "\x00" in self.value:
            return False
        return True

    def validate(self) -> None:
        if not self.is_secure():
            raise InvalidPathError("path failed security validation")

    def join(self, relative: str) -> "FilePath":
        """
        Join a relative segment onto this path.

        The segment is checked on its own before joining, then the joined
        result goes through full validation again.
        """
        if not relative:
            return self
        if has_traversal(relative):
            raise InvalidPathError("relative path contains path traversal attempt")
        return FilePath(clean_path(f"{self.value}/{relative}"))

    def base(self) -> str:
        name = posixpath.basename(self.value)
        if not name:
            return "/" if self.value.startswith("/") else "."
        return name

    def dir(self) -> str:
        return clean_path(posixpath.dirname(self.value))

    def ext(self) -> str:
        return posixpath.splitext(self.value)[1]

    def split(self) -> tuple[str, str]:
        return posixpath.split(self.value)

    def is_absolute(self) -> bool:
        return posixpath.isabs(self.value)

    def is_root(self) -> bool:
        return self.value in ("/", "\\")

    def contains(self, subpath: str) -> bool:
        return subpath in self.value

    def has_prefix(self, prefix: str) -> bool:
        return self.value.startswith(prefix)

    def has_suffix(self, suffix: str) -> bool:
        return self.value.endswith(suffix)

    def equals(self, other: "FilePath | None") -> bool:
        if other is None:
            return False
        return self.value == other.value

    def normalize(self) -> "FilePath":
        return FilePath(self.value)

    def is_within_directory(self, directory: str) -> bool:
        """Prefix containment check against a lexically cleaned directory."""
        clean_dir = clean_path(directory)
        if clean_dir == ".":
            return not self.is_absolute() and self.value != "."
        if not clean_dir.endswith(("/", "\\")):
            clean_dir += "/"
        return self.value.startswith(clean_dir)
