from __future__ import annotations

from enum import Enum
from typing import ClassVar, Optional, Union

from pydantic.dataclasses import dataclass

from osversion.constants import MACOS_NAME, OPENBSD_NAME, WINDOWS_NAME


class OsFamily(Enum):
    LINUX = "linux"
    MACOS = "macos"
    WINDOWS = "windows"
    OPENBSD = "openbsd"
    ANDROID = "android"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Linux:
    """
    A Linux distribution as described by its os-release file.
    """

    distro: str  # ubuntu, debian, alpine
    version: Optional[str] = None  # 18.04
    version_name: Optional[str] = None  # bionic
    family: ClassVar[OsFamily] = OsFamily.LINUX

    def __str__(self) -> str:
        if self.version is not None:
            return f"{self.distro} {self.version}"
        return self.distro


@dataclass(frozen=True)
class MacOS:
    version: str  # 10.13.6
    name: str = MACOS_NAME
    family: ClassVar[OsFamily] = OsFamily.MACOS

    def __str__(self) -> str:
        return f"{self.name} {self.version}"


@dataclass(frozen=True)
class Windows:
    edition: str  # "10", "server 2012 r2", "6.4"
    family: ClassVar[OsFamily] = OsFamily.WINDOWS

    def __str__(self) -> str:
        return f"{WINDOWS_NAME} {self.edition}"


@dataclass(frozen=True)
class OpenBSD:
    version: str  # kernel release, e.g. 7.4
    name: str = OPENBSD_NAME
    family: ClassVar[OsFamily] = OsFamily.OPENBSD

    def __str__(self) -> str:
        return f"{self.name} {self.version}"


class OsMarker(str, Enum):
    """
    Identities that carry no data.
    """

    ANDROID = "android"
    UNKNOWN = "unknown"

    @property
    def family(self) -> OsFamily:
        return OsFamily(self.value)

    def __str__(self) -> str:
        return self.value


OsVersion = Union[Linux, MacOS, Windows, OpenBSD, OsMarker]
