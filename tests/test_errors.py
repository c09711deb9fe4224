from __future__ import annotations

import pytest

from osversion.errors import (
    MalformedReleaseFileError,
    MissingFieldError,
    OsVersionError,
    ReleaseFileReadError,
    SystemCallError,
    TypeMismatchError,
)


@pytest.mark.unit
class TestErrorMessages:
    """Test that every error carries enough context to diagnose it."""

    def test_base(self):
        error = OsVersionError()

        assert str(error) == "Unable to detect the host operating system."

    def test_missing_field(self):
        error = MissingFieldError(field="ID", source="/etc/os-release")

        assert str(error) == "Mandatory field ID is missing from /etc/os-release"

    def test_type_mismatch(self):
        error = TypeMismatchError(
            field="ProductVersion", expected="string", source="SystemVersion.plist",
            actual="int",
        )

        assert str(error) == "ProductVersion in SystemVersion.plist is not a string (found int)"

    def test_release_file_read(self):
        error = ReleaseFileReadError(path="/etc/os-release", reason="Permission denied")

        assert str(error) == "Unable to read release file /etc/os-release: Permission denied"

    def test_malformed_release_file(self):
        error = MalformedReleaseFileError(path="SystemVersion.plist")

        assert str(error) == "Release file SystemVersion.plist appears to be malformed or corrupted"

    def test_system_call(self):
        error = SystemCallError(routine="RtlGetVersion", reason="status 0xC0000001")

        assert str(error) == "System call RtlGetVersion failed: status 0xC0000001"

    @pytest.mark.parametrize(
        "error",
        [
            MissingFieldError(field="ID", source="f"),
            TypeMismatchError(field="f", expected="string", source="s"),
            ReleaseFileReadError(path="p"),
            MalformedReleaseFileError(path="p"),
            SystemCallError(routine="r"),
        ],
    )
    def test_common_base(self, error):
        assert isinstance(error, OsVersionError)
        assert error.message == str(error)
