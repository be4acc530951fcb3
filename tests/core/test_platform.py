"""
Unit tests for the platform detection module.
"""

from unittest.mock import patch

from dotnetkit.core.platform import (
    PlatformInfo,
    detect_platform,
    clear_platform_cache,
    _detect_os,
    _detect_architecture,
)


class TestPlatformInfo:
    """Tests for PlatformInfo dataclass."""

    def test_platform_string(self):
        """Test platform string generation."""
        assert PlatformInfo("linux", "x64").platform_string() == "linux-x64"
        assert PlatformInfo("macos", "arm64").platform_string() == "macos-arm64"

    def test_defaults_to_64bit(self):
        """Test that descriptors default to a 64-bit process."""
        assert PlatformInfo("windows", "x64").is_64bit is True

    def test_str_includes_bitness(self):
        """Test string representation."""
        assert str(PlatformInfo("windows", "x86", False)) == "windows-x86 (32-bit)"

    def test_is_hashable(self):
        """Test that descriptors can be used as dict keys."""
        info = PlatformInfo("linux", "x64")
        assert {info: 1}[PlatformInfo("linux", "x64")] == 1


class TestDetectOs:
    """Tests for OS family detection."""

    def test_windows(self):
        with patch("platform.system", return_value="Windows"):
            assert _detect_os() == "windows"

    def test_linux(self):
        with patch("platform.system", return_value="Linux"):
            assert _detect_os() == "linux"

    def test_darwin_is_macos(self):
        with patch("platform.system", return_value="Darwin"):
            assert _detect_os() == "macos"

    def test_unknown_family_is_reported_as_is(self):
        """Test that unrecognized systems are not rejected at detection time."""
        with patch("platform.system", return_value="FreeBSD"):
            assert _detect_os() == "freebsd"

    def test_empty_system_name(self):
        with patch("platform.system", return_value=""):
            assert _detect_os() == "unknown"


class TestDetectArchitecture:
    """Tests for architecture normalization."""

    def test_x64_aliases(self):
        for machine in ("x86_64", "AMD64", "x64"):
            with patch("platform.machine", return_value=machine):
                assert _detect_architecture() == "x64"

    def test_arm64_aliases(self):
        for machine in ("aarch64", "arm64"):
            with patch("platform.machine", return_value=machine):
                assert _detect_architecture() == "arm64"

    def test_x86(self):
        with patch("platform.machine", return_value="i686"):
            assert _detect_architecture() == "x86"

    def test_unknown_machine_passthrough(self):
        with patch("platform.machine", return_value="s390x"):
            assert _detect_architecture() == "s390x"


class TestDetectPlatformCache:
    """Tests for detection caching."""

    def test_detect_platform_is_cached(self):
        """Test that detection runs once until the cache is cleared."""
        with patch("dotnetkit.core.platform._detect_os", return_value="linux") as mock_os:
            first = detect_platform()
            second = detect_platform()

            assert first is second
            assert mock_os.call_count == 1

            clear_platform_cache()
            detect_platform()
            assert mock_os.call_count == 2
