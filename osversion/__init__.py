# -*- coding: utf-8 -*-

__author__ = """osversion developers"""

import os

ROOT = os.path.dirname(os.path.abspath(__file__))

with open(os.path.join(ROOT, 'VERSION')) as version_file:
    VERSION = version_file.read().strip()

from osversion.main import HOST_PLATFORM, HostPlatform, detect, get_host_platform  # noqa: E402
from osversion.models import (  # noqa: E402
    Linux,
    MacOS,
    OpenBSD,
    OsFamily,
    OsMarker,
    OsVersion,
    Windows,
)

__all__ = (
    "VERSION",
    "HOST_PLATFORM",
    "HostPlatform",
    "detect",
    "get_host_platform",
    "Linux",
    "MacOS",
    "OpenBSD",
    "OsFamily",
    "OsMarker",
    "OsVersion",
    "Windows",
)
