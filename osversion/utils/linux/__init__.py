from .os_release import get_linux_version, parse_os_release

__all__ = (
    "get_linux_version",
    "parse_os_release",
)
