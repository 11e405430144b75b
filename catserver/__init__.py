"""catserver package: read-only file browsing over a confined root directory.

Subpackages are imported directly; keep __all__ empty.
"""

__all__: list[str] = []
