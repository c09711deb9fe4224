from .main import get_android_version

__all__ = ("get_android_version",)
