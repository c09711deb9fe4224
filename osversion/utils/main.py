from __future__ import annotations

from enum import IntEnum, IntFlag
from typing import NamedTuple


class ProductType(IntEnum):
    """
    OSVERSIONINFOEX.wProductType values.
    """

    UNKNOWN = 0
    WORKSTATION = 1  # VER_NT_WORKSTATION
    DOMAIN_CONTROLLER = 2  # VER_NT_DOMAIN_CONTROLLER
    SERVER = 3  # VER_NT_SERVER

    @classmethod
    def from_raw(cls, value: int) -> ProductType:
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN


class SuiteMask(IntFlag):
    """
    OSVERSIONINFOEX.wSuiteMask bits.
    """

    SMALLBUSINESS = 0x0001
    ENTERPRISE = 0x0002
    BACKOFFICE = 0x0004
    COMMUNICATIONS = 0x0008
    TERMINAL = 0x0010
    SMALLBUSINESS_RESTRICTED = 0x0020
    EMBEDDEDNT = 0x0040
    DATACENTER = 0x0080
    SINGLEUSERTS = 0x0100
    PERSONAL = 0x0200
    BLADE = 0x0400
    EMBEDDED_RESTRICTED = 0x0800
    SECURITY_APPLIANCE = 0x1000
    STORAGE_SERVER = 0x2000
    COMPUTE_SERVER = 0x4000
    WH_SERVER = 0x8000


class ProcessorArchitecture(IntEnum):
    """
    SYSTEM_INFO.wProcessorArchitecture values.
    """

    INTEL = 0
    ARM = 5
    IA64 = 6
    AMD64 = 9
    ARM64 = 12
    UNKNOWN = 0xFFFF

    @classmethod
    def from_raw(cls, value: int) -> ProcessorArchitecture:
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN


class RawVersionRecord(NamedTuple):
    major: int  # 10
    minor: int  # 0
    product_type: ProductType
    suite_mask: SuiteMask


class SecondaryInfo(NamedTuple):
    is_server_r2: bool
    processor_architecture: ProcessorArchitecture
