from __future__ import annotations

import dataclasses

import pytest
from pydantic import ValidationError

from osversion.models import (
    Linux,
    MacOS,
    OpenBSD,
    OsFamily,
    OsMarker,
    Windows,
)


@pytest.mark.unit
class TestDisplay:
    """Test the single-line display form of every identity."""

    @pytest.mark.parametrize(
        "identity, expected",
        [
            (Linux(distro="ubuntu", version="18.04", version_name="bionic"), "ubuntu 18.04"),
            (Linux(distro="arch"), "arch"),
            (Linux(distro="debian", version_name="buster"), "debian"),
            (Linux(distro="alpine", version=""), "alpine "),
            (MacOS(version="10.13.6"), "macOS 10.13.6"),
            (MacOS(version="10.13.6", name="osx"), "osx 10.13.6"),
            (Windows(edition="8.1"), "windows 8.1"),
            (Windows(edition="server 2012 r2"), "windows server 2012 r2"),
            (Windows(edition="7.0"), "windows 7.0"),
            (OpenBSD(version="7.4"), "openbsd 7.4"),
            (OsMarker.ANDROID, "android"),
            (OsMarker.UNKNOWN, "unknown"),
        ],
    )
    def test_str(self, identity, expected):
        assert str(identity) == expected


@pytest.mark.unit
class TestFamily:
    """Test that each identity reports its family."""

    @pytest.mark.parametrize(
        "identity, family",
        [
            (Linux(distro="ubuntu"), OsFamily.LINUX),
            (MacOS(version="14.0"), OsFamily.MACOS),
            (Windows(edition="10"), OsFamily.WINDOWS),
            (OpenBSD(version="7.4"), OsFamily.OPENBSD),
            (OsMarker.ANDROID, OsFamily.ANDROID),
            (OsMarker.UNKNOWN, OsFamily.UNKNOWN),
        ],
    )
    def test_family(self, identity, family):
        assert identity.family is family

    def test_family_is_not_a_field(self):
        """Test that family stays out of equality and the constructor."""
        assert [f.name for f in dataclasses.fields(Linux)] == [
            "distro", "version", "version_name"
        ]


@pytest.mark.unit
class TestImmutability:
    """Test that identities cannot be changed once built."""

    @pytest.mark.parametrize(
        "identity, attribute",
        [
            (Linux(distro="ubuntu"), "distro"),
            (MacOS(version="14.0"), "version"),
            (Windows(edition="10"), "edition"),
            (OpenBSD(version="7.4"), "version"),
        ],
    )
    def test_frozen(self, identity, attribute):
        with pytest.raises(dataclasses.FrozenInstanceError):
            setattr(identity, attribute, "changed")

    def test_equality_and_hash(self):
        assert Linux(distro="ubuntu", version="18.04") == Linux(distro="ubuntu", version="18.04")
        assert hash(Windows(edition="10")) == hash(Windows(edition="10"))
        assert Windows(edition="10") != Windows(edition="8.1")


@pytest.mark.unit
class TestValidation:
    """Test that field types are enforced at construction."""

    def test_missing_distro(self):
        with pytest.raises(ValidationError):
            Linux()

    def test_distro_must_be_a_string(self):
        with pytest.raises(ValidationError):
            Linux(distro=None)

    def test_version_must_be_a_string(self):
        with pytest.raises(ValidationError):
            MacOS(version=["14.0"])


@pytest.mark.unit
class TestOsMarker:
    """Test the data-less identities."""

    def test_members_are_singletons(self):
        assert OsMarker("android") is OsMarker.ANDROID
        assert OsMarker("unknown") is OsMarker.UNKNOWN

    def test_markers_compare_as_strings(self):
        assert OsMarker.UNKNOWN == "unknown"
