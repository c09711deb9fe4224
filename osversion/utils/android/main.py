from ...models import OsMarker


def get_android_version() -> OsMarker:
    return OsMarker.ANDROID
