"""
Tests for DotNetInstallation and DotNetSdk.
"""

import dataclasses

import pytest
from pathlib import Path
from unittest.mock import patch

import semver

from dotnetkit.installation.models import DotNetInstallation, DotNetSdk


class TestDotNetInstallation:
    """Tests for DotNetInstallation."""

    def test_from_string(self, tmp_path):
        installation = DotNetInstallation(str(tmp_path))

        assert installation.location == tmp_path
        assert isinstance(installation.location, Path)

    def test_empty_location_rejected(self):
        with pytest.raises(ValueError):
            DotNetInstallation("")

    def test_none_location_rejected(self):
        with pytest.raises(ValueError):
            DotNetInstallation(None)

    def test_is_immutable(self, tmp_path):
        installation = DotNetInstallation(tmp_path)

        with pytest.raises(dataclasses.FrozenInstanceError):
            installation.location = tmp_path / "other"

    def test_construction_does_not_validate(self, tmp_path):
        """Arbitrary paths are accepted; validity is checked on demand."""
        installation = DotNetInstallation(tmp_path / "nonexistent")

        assert installation.is_valid() is False

    def test_is_valid(self, dotnet_root, linux_platform, windows_platform):
        installation = DotNetInstallation(dotnet_root)

        assert installation.is_valid(linux_platform) is True
        assert installation.is_valid(windows_platform) is False

    def test_equality(self, tmp_path):
        assert DotNetInstallation(tmp_path) == DotNetInstallation(str(tmp_path))

    def test_sdk_directory(self, tmp_path):
        assert DotNetInstallation(tmp_path).sdk_directory == tmp_path / "sdk"

    def test_executable_path(self, tmp_path, linux_platform, windows_platform):
        installation = DotNetInstallation(tmp_path)

        assert installation.executable_path(linux_platform) == tmp_path / "dotnet"
        assert installation.executable_path(windows_platform) == tmp_path / "dotnet.exe"

    def test_enumerate_sdks(self, dotnet_root):
        sdks = list(DotNetInstallation(dotnet_root).enumerate_sdks())

        assert [sdk.version for sdk in sdks] == [semver.Version.parse("6.0.416")]

    def test_current_uses_process_wide_installation(self, tmp_path):
        expected = DotNetInstallation(tmp_path)

        with patch(
            "dotnetkit.installation.locator.resolve_current", return_value=expected
        ):
            assert DotNetInstallation.current() is expected

    def test_str(self, tmp_path):
        assert str(DotNetInstallation(tmp_path)) == str(tmp_path)


class TestDotNetSdk:
    """Tests for DotNetSdk."""

    def test_name_is_directory_name(self, tmp_path):
        sdk = DotNetSdk(
            tmp_path / "7.0.203-preview.1", semver.Version.parse("7.0.203-preview.1")
        )

        assert sdk.name == "7.0.203-preview.1"

    def test_to_dict_keeps_directory_spelling(self, tmp_path):
        path = tmp_path / "7.0.203-preview.1"
        sdk = DotNetSdk(path, semver.Version.parse("7.0.203-preview.1"))

        assert sdk.to_dict() == {"version": "7.0.203-preview.1", "path": str(path)}

    def test_str(self, tmp_path):
        sdk = DotNetSdk(tmp_path / "8.0.100", semver.Version.parse("8.0.100"))

        assert "8.0.100" in str(sdk)
