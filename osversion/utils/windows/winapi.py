"""
Foreign-function boundary for the Win32 version queries.

Structures are declared with fixed-width ctypes so this module imports on
any platform; the libraries themselves are only loaded when a query runs.
"""
from __future__ import annotations

import ctypes
import logging

from ...constants import (
    GET_SYSTEM_INFO,
    GET_SYSTEM_METRICS,
    KERNEL32,
    NTDLL,
    RTL_GET_VERSION,
    SM_SERVERR2,
    STATUS_SUCCESS,
    USER32,
)
from ...errors import SystemCallError
from ..main import (
    ProcessorArchitecture,
    ProductType,
    RawVersionRecord,
    SecondaryInfo,
    SuiteMask,
)

logger = logging.getLogger(__name__)


class OSVERSIONINFOEXW(ctypes.Structure):
    _fields_ = [
        ("dwOSVersionInfoSize", ctypes.c_uint32),
        ("dwMajorVersion", ctypes.c_uint32),
        ("dwMinorVersion", ctypes.c_uint32),
        ("dwBuildNumber", ctypes.c_uint32),
        ("dwPlatformId", ctypes.c_uint32),
        ("szCSDVersion", ctypes.c_uint16 * 128),  # WCHAR[128]
        ("wServicePackMajor", ctypes.c_uint16),
        ("wServicePackMinor", ctypes.c_uint16),
        ("wSuiteMask", ctypes.c_uint16),
        ("wProductType", ctypes.c_uint8),
        ("wReserved", ctypes.c_uint8),
    ]


class SYSTEM_INFO(ctypes.Structure):
    _fields_ = [
        ("wProcessorArchitecture", ctypes.c_uint16),
        ("wReserved", ctypes.c_uint16),
        ("dwPageSize", ctypes.c_uint32),
        ("lpMinimumApplicationAddress", ctypes.c_void_p),
        ("lpMaximumApplicationAddress", ctypes.c_void_p),
        ("dwActiveProcessorMask", ctypes.c_size_t),  # DWORD_PTR
        ("dwNumberOfProcessors", ctypes.c_uint32),
        ("dwProcessorType", ctypes.c_uint32),
        ("dwAllocationGranularity", ctypes.c_uint32),
        ("wProcessorLevel", ctypes.c_uint16),
        ("wProcessorRevision", ctypes.c_uint16),
    ]


def get_proc_address(library: str, routine: str):
    """
    Resolve an exported routine by name.

    Raises:
        SystemCallError: If the library cannot be loaded or does not
            export the routine.
    """
    try:
        dll = ctypes.WinDLL(library)
    except (AttributeError, OSError) as exc:
        raise SystemCallError(routine=routine, reason=f"unable to load {library}") from exc

    try:
        return getattr(dll, routine)
    except AttributeError as exc:
        raise SystemCallError(routine=routine, reason=f"not exported by {library}") from exc


def query_version_info() -> RawVersionRecord:
    """
    Call RtlGetVersion, which unlike GetVersionEx is not subject to
    application manifest compatibility shims.

    Returns:
        RawVersionRecord built from the returned OSVERSIONINFOEXW

    Raises:
        SystemCallError: If the routine cannot be resolved or returns a
            non-success status.
    """
    rtl_get_version = get_proc_address(NTDLL, RTL_GET_VERSION)
    rtl_get_version.argtypes = [ctypes.POINTER(OSVERSIONINFOEXW)]
    rtl_get_version.restype = ctypes.c_int32  # NTSTATUS

    info = OSVERSIONINFOEXW()
    info.dwOSVersionInfoSize = ctypes.sizeof(OSVERSIONINFOEXW)

    status = rtl_get_version(ctypes.byref(info))
    if status != STATUS_SUCCESS:
        raise SystemCallError(
            routine=RTL_GET_VERSION,
            reason=f"status 0x{status & 0xFFFFFFFF:08X}",
        )

    record = RawVersionRecord(
        major=info.dwMajorVersion,
        minor=info.dwMinorVersion,
        product_type=ProductType.from_raw(info.wProductType),
        suite_mask=SuiteMask(info.wSuiteMask),
    )
    logger.debug("RtlGetVersion: %s", record)

    return record


def query_secondary_info() -> SecondaryInfo:
    """
    Read the Server 2003 R2 flag and the processor architecture.

    Raises:
        SystemCallError: If either routine cannot be resolved.
    """
    get_system_metrics = get_proc_address(USER32, GET_SYSTEM_METRICS)
    get_system_metrics.argtypes = [ctypes.c_int]
    get_system_metrics.restype = ctypes.c_int

    get_system_info = get_proc_address(KERNEL32, GET_SYSTEM_INFO)
    get_system_info.argtypes = [ctypes.POINTER(SYSTEM_INFO)]
    get_system_info.restype = None

    is_server_r2 = get_system_metrics(SM_SERVERR2) != 0

    info = SYSTEM_INFO()
    get_system_info(ctypes.byref(info))

    return SecondaryInfo(
        is_server_r2=is_server_r2,
        processor_architecture=ProcessorArchitecture.from_raw(
            info.wProcessorArchitecture
        ),
    )
