from __future__ import annotations

import logging
import sys
from enum import Enum
from typing import Callable, Dict, Optional

from .models import OsMarker, OsVersion
from .utils import (
    get_android_version,
    get_linux_version,
    get_macos_version,
    get_openbsd_version,
    get_windows_version,
)

logger = logging.getLogger(__name__)


class HostPlatform(Enum):
    LINUX = "linux"
    MACOS = "macos"
    WINDOWS = "windows"
    ANDROID = "android"
    OPENBSD = "openbsd"
    OTHER = "other"


DETECTORS: Dict[HostPlatform, Callable[[], OsVersion]] = {
    HostPlatform.LINUX: get_linux_version,
    HostPlatform.MACOS: get_macos_version,
    HostPlatform.WINDOWS: get_windows_version,
    HostPlatform.ANDROID: get_android_version,
    HostPlatform.OPENBSD: get_openbsd_version,
}


def get_host_platform(system: Optional[str] = None) -> HostPlatform:
    """
    Map a sys.platform value to the platform whose detector should run.

    Args:
        system: A sys.platform style string, defaults to the running
            interpreter's

    Returns:
        HostPlatform, OTHER when no detector applies
    """
    if system is None:
        system = sys.platform
        # Android builds before 3.13 report "linux"
        if hasattr(sys, "getandroidapilevel"):
            system = "android"

    if system == "android":
        return HostPlatform.ANDROID
    if system.startswith("linux"):
        return HostPlatform.LINUX
    if system == "darwin":
        return HostPlatform.MACOS
    if system == "win32":
        return HostPlatform.WINDOWS
    if system.startswith("openbsd"):
        return HostPlatform.OPENBSD

    return HostPlatform.OTHER


HOST_PLATFORM = get_host_platform()


def detect(host_platform: Optional[HostPlatform] = None) -> OsVersion:
    """
    Detect the operating system of the running host.

    Args:
        host_platform: Overrides the platform selected at import time

    Returns:
        The OS identity; OsMarker.UNKNOWN when the platform has no
        detector

    Raises:
        OsVersionError: Propagated unchanged from the platform detector.
    """
    if host_platform is None:
        host_platform = HOST_PLATFORM

    try:
        detector = DETECTORS[host_platform]
    except KeyError:
        logger.debug("No OS detector for platform %s", host_platform.value)
        return OsMarker.UNKNOWN

    logger.debug("Detecting OS version for platform %s", host_platform.value)
    return detector()
