import sys

from osversion import VERSION
from osversion.main import HOST_PLATFORM


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests with all system access mocked")
    config.addinivalue_line("markers", "integration: tests that read the real host")
    config.addinivalue_line("markers", "linux: Linux-only tests")
    config.addinivalue_line("markers", "macos: macOS-only tests")
    config.addinivalue_line("markers", "windows: Windows-only tests")


def pytest_report_header(config):
    return f"osversion {VERSION}, host platform: {HOST_PLATFORM.value} ({sys.platform})"
