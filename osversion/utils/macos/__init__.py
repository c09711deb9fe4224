from .main import get_macos_version, parse_system_version

__all__ = (
    "get_macos_version",
    "parse_system_version",
)
