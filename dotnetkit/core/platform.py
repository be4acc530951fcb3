"""
Platform detection for DotNetKit.

This module detects the current platform (OS family, CPU architecture and
process bitness) so that installation discovery can pick the right executable
name, registry lookup and default installation directory.

Features:
- Operating system detection (Windows, Linux, macOS, anything else by name)
- CPU architecture detection (x64, ARM64, x86, ARM)
- Process bitness detection (64-bit vs 32-bit interpreter)
- Canonical platform string generation (e.g., 'linux-x64', 'macos-arm64')
- Detection is cached once per process

Usage:
    from dotnetkit.core.platform import detect_platform

    platform_info = detect_platform()
    print(f"OS: {platform_info.os}")
    print(f"Platform string: {platform_info.platform_string()}")
"""

import functools
import platform
import sys
from dataclasses import dataclass


@dataclass(frozen=True)
class PlatformInfo:
    """
    Platform descriptor used to gate discovery strategies.

    Attributes:
        os: Operating system ('windows', 'linux', 'macos', or the raw lowercase
            system name for anything unrecognized, e.g. 'freebsd')
        arch: CPU architecture ('x64', 'arm64', 'x86', 'arm', or raw machine name)
        is_64bit: Whether the running process is 64-bit
    """

    os: str
    arch: str
    is_64bit: bool = True

    def platform_string(self) -> str:
        """
        Get canonical platform string (e.g., 'linux-x64', 'macos-arm64').

        Example:
            >>> PlatformInfo('linux', 'x64').platform_string()
            'linux-x64'
        """
        return f"{self.os}-{self.arch}"

    def __str__(self) -> str:
        bitness = "64-bit" if self.is_64bit else "32-bit"
        return f"{self.platform_string()} ({bitness})"


@functools.lru_cache(maxsize=1)
def detect_platform() -> PlatformInfo:
    """
    Detect current platform information.

    This function is cached - it only runs detection once per process.

    Returns:
        PlatformInfo instance with detected platform information
    """
    return PlatformInfo(
        os=_detect_os(),
        arch=_detect_architecture(),
        is_64bit=_detect_is_64bit(),
    )


def _detect_os() -> str:
    """
    Detect operating system family.

    Returns:
        Normalized OS name: 'windows', 'linux', 'macos', or the lowercase
        system name when the family is not one DotNetKit knows about
    """
    system = platform.system().lower()

    if system == "windows":
        return "windows"
    elif system == "linux":
        return "linux"
    elif system == "darwin":
        return "macos"
    else:
        # Unrecognized families are reported as-is; the locator decides
        # whether it can do anything useful with them.
        return system or "unknown"


def _detect_architecture() -> str:
    """
    Detect CPU architecture.

    Returns:
        Normalized architecture: 'x64', 'arm64', 'x86', 'arm'
    """
    machine = platform.machine().lower()

    if machine in ("x86_64", "amd64", "x64"):
        return "x64"
    elif machine in ("aarch64", "arm64"):
        return "arm64"
    elif machine in ("i386", "i686", "x86"):
        return "x86"
    elif machine.startswith("arm"):
        return "arm"
    else:
        return machine


def _detect_is_64bit() -> bool:
    """Check whether the running interpreter is a 64-bit process."""
    return sys.maxsize > 2**32


def clear_platform_cache():
    """
    Clear the platform detection cache.

    This forces the next call to detect_platform() to re-detect.
    Useful for testing.
    """
    detect_platform.cache_clear()


__all__ = [
    "PlatformInfo",
    "detect_platform",
    "clear_platform_cache",
]
