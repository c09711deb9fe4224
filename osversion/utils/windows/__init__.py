from .edition import resolve_edition
from .main import get_windows_version
from .winapi import query_secondary_info, query_version_info

__all__ = (
    "get_windows_version",
    "query_secondary_info",
    "query_version_info",
    "resolve_edition",
)
