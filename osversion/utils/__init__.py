from .linux import get_linux_version
from .macos import get_macos_version
from .openbsd import get_openbsd_version
from .android import get_android_version
from .windows import get_windows_version

__all__ = (
    "get_linux_version",
    "get_macos_version",
    "get_openbsd_version",
    "get_android_version",
    "get_windows_version",
)
