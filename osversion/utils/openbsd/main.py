import logging
import os

from ...errors import SystemCallError
from ...models import OpenBSD

logger = logging.getLogger(__name__)


def get_openbsd_version() -> OpenBSD:
    """
    Get the OpenBSD release from the kernel, used verbatim.

    Raises:
        SystemCallError: If uname fails.
    """
    try:
        release = os.uname().release
    except OSError as exc:
        raise SystemCallError(routine="uname", reason=exc.strerror) from exc

    logger.debug("Kernel release: %s", release)
    return OpenBSD(version=release)
