import logging
from typing import Tuple

from ...constants import (
    OS_RELEASE_ID,
    OS_RELEASE_PATHS,
    OS_RELEASE_VERSION_CODENAME,
    OS_RELEASE_VERSION_ID,
)
from ...errors import (
    MalformedReleaseFileError,
    MissingFieldError,
    ReleaseFileReadError,
)
from ...models import Linux

logger = logging.getLogger(__name__)


_QUOTES = ('"', "'")


def get_linux_version(root: str = "") -> Linux:
    """
    Get the Linux distribution from the os-release file.

    Args:
        root: Optional filesystem root prefix (e.g., "/mnt/target")

    Returns:
        Linux with distro, version and version_name

    Raises:
        ReleaseFileReadError: If no os-release file can be read.
        MissingFieldError: If the file has no ID field.
    """
    path, content = _read_os_release(root)
    logger.debug("Parsing %s", path)

    return parse_os_release(content, source=path)


def parse_os_release(content: str, source: str = OS_RELEASE_PATHS[0]) -> Linux:
    """
    Parse KEY=value or KEY="value" lines into a Linux identity.

    Only ID, VERSION_ID and VERSION_CODENAME are kept; a repeated key
    takes its last value. A matching pair of double or single quotes
    around a value is removed, as os-release(5) allows both.
    """
    fields = {
        OS_RELEASE_ID: None,
        OS_RELEASE_VERSION_ID: None,
        OS_RELEASE_VERSION_CODENAME: None,
    }

    for line in content.splitlines():
        line = line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue

        key, value = line.split("=", 1)
        if key in fields:
            fields[key] = _unquote(value)

    if fields[OS_RELEASE_ID] is None:
        raise MissingFieldError(field=OS_RELEASE_ID, source=source)

    return Linux(
        distro=fields[OS_RELEASE_ID],
        version=fields[OS_RELEASE_VERSION_ID],
        version_name=fields[OS_RELEASE_VERSION_CODENAME],
    )


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in _QUOTES:
        return value[1:-1]
    return value


def _read_os_release(root: str = "") -> Tuple[str, str]:
    """
    Read the first existing os-release file.

    Returns:
        (path, content) of the file that was read
    """
    error = None

    for path in OS_RELEASE_PATHS:
        full_path = f"{root}{path}" if root else path
        try:
            with open(full_path, encoding="utf-8") as f:
                return full_path, f.read()
        except FileNotFoundError as exc:
            logger.debug("%s not found", full_path)
            if error is None:
                error = (full_path, exc)
        except OSError as exc:
            raise ReleaseFileReadError(path=full_path, reason=exc.strerror) from exc
        except UnicodeDecodeError as exc:
            raise MalformedReleaseFileError(path=full_path, reason=str(exc)) from exc

    full_path, exc = error
    raise ReleaseFileReadError(path=full_path, reason=exc.strerror) from exc
