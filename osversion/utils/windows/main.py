from __future__ import annotations

from ...models import Windows
from .edition import resolve_edition
from .winapi import query_secondary_info, query_version_info


def get_windows_version() -> Windows:
    """
    Get the Windows edition of the running host.

    Raises:
        SystemCallError: If RtlGetVersion cannot be called.
    """
    record = query_version_info()
    return Windows(edition=resolve_edition(record, query_secondary_info))
