from __future__ import annotations

import logging
import plistlib
from xml.parsers.expat import ExpatError

from ...constants import PLIST_PRODUCT_VERSION, SYSTEM_VERSION_PLIST
from ...errors import (
    MalformedReleaseFileError,
    MissingFieldError,
    ReleaseFileReadError,
    TypeMismatchError,
)
from ...models import MacOS

logger = logging.getLogger(__name__)


def get_macos_version(path: str = SYSTEM_VERSION_PLIST) -> MacOS:
    """
    Get the macOS version from SystemVersion.plist.

    Args:
        path: Location of the property list

    Returns:
        MacOS with the ProductVersion string, taken verbatim

    Raises:
        ReleaseFileReadError: If the file cannot be read.
        MalformedReleaseFileError: If the file is not a property list.
        MissingFieldError: If ProductVersion is absent.
        TypeMismatchError: If the root is not a dictionary or
            ProductVersion is not a string.
    """
    try:
        with open(path, "rb") as f:
            content = f.read()
    except OSError as exc:
        raise ReleaseFileReadError(path=path, reason=exc.strerror) from exc

    logger.debug("Parsing %s", path)
    return parse_system_version(content, source=path)


def parse_system_version(content: bytes, source: str = SYSTEM_VERSION_PLIST) -> MacOS:
    """
    Extract ProductVersion from an XML or binary property list.
    """
    try:
        plist = plistlib.loads(content)
    # plistlib raises AttributeError on a malformed <date>
    except (plistlib.InvalidFileException, ExpatError, ValueError, AttributeError) as exc:
        raise MalformedReleaseFileError(path=source, reason=str(exc)) from exc

    if not isinstance(plist, dict):
        raise TypeMismatchError(
            field="root", expected="dictionary", source=source,
            actual=type(plist).__name__,
        )

    if PLIST_PRODUCT_VERSION not in plist:
        raise MissingFieldError(field=PLIST_PRODUCT_VERSION, source=source)

    version = plist[PLIST_PRODUCT_VERSION]
    if not isinstance(version, str):
        raise TypeMismatchError(
            field=PLIST_PRODUCT_VERSION, expected="string", source=source,
            actual=type(version).__name__,
        )

    return MacOS(version=version)
