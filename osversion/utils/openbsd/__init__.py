from .main import get_openbsd_version

__all__ = ("get_openbsd_version",)
