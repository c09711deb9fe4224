"""
Windows edition resolution.

Maps the version record returned by RtlGetVersion to the marketing name
of the edition, following the OSVERSIONINFOEX remarks at
https://learn.microsoft.com/en-us/windows/win32/api/winnt/ns-winnt-osversioninfoexa
"""
from __future__ import annotations

import logging
from typing import Callable

from ...errors import SystemCallError
from ..main import (
    ProcessorArchitecture,
    ProductType,
    RawVersionRecord,
    SecondaryInfo,
    SuiteMask,
)

logger = logging.getLogger(__name__)


# (major, minor) -> (workstation edition, server edition)
_NT_EDITIONS = {
    (10, 0): ("10", "server 2016"),
    (6, 3): ("8.1", "server 2012 r2"),
    (6, 2): ("8", "server 2012"),
    (6, 1): ("7", "server 2008 r2"),
    (6, 0): ("vista", "server 2008"),
}

# Editions that do not depend on the product type
_LEGACY_EDITIONS = {
    (5, 1): "xp",
    (5, 0): "2000",
}

# Windows Home Server, Server 2003, Server 2003 R2 and XP Professional x64
_AMBIGUOUS_VERSION = (5, 2)

HOME_SERVER = "home server"
XP_PROFESSIONAL_X64 = "xp professional x64 edition"
SERVER_2003 = "server 2003"


def format_version(major: int, minor: int) -> str:
    return f"{major}.{minor}"


def resolve_edition(
    record: RawVersionRecord,
    get_secondary_info: Callable[[], SecondaryInfo],
) -> str:
    """
    Resolve the edition label for a Windows version record.

    Args:
        record: The record returned by the raw version query
        get_secondary_info: Called only for 5.2, where the version pair
            alone does not identify the edition

    Returns:
        The edition label, or "<major>.<minor>" for unknown versions
    """
    version = (record.major, record.minor)
    is_workstation = record.product_type == ProductType.WORKSTATION

    if version in _NT_EDITIONS:
        workstation, server = _NT_EDITIONS[version]
        return workstation if is_workstation else server

    if version in _LEGACY_EDITIONS:
        return _LEGACY_EDITIONS[version]

    if version == _AMBIGUOUS_VERSION:
        try:
            secondary = get_secondary_info()
        except SystemCallError:
            logger.warning(
                "Unable to disambiguate Windows %s edition", format_version(*version),
                exc_info=True,
            )
            return format_version(*version)

        logger.debug("Secondary system info: %s", secondary)

        # Server 2003 R2 has no dedicated label
        if not secondary.is_server_r2:
            return _resolve_5_2_edition(record, secondary)

    return format_version(*version)


def _resolve_5_2_edition(record: RawVersionRecord, secondary: SecondaryInfo) -> str:
    if record.suite_mask & SuiteMask.WH_SERVER:
        return HOME_SERVER

    if (
        record.product_type == ProductType.WORKSTATION
        and secondary.processor_architecture == ProcessorArchitecture.AMD64
    ):
        return XP_PROFESSIONAL_X64

    return SERVER_2003
