"""Platform capability matrix and helper functions.

This module provides a centralized database of the platform features that
.NET installation discovery depends on, keyed by OS family.

Capabilities:
- executable_extension: Suffix appended to the host executable name
- supports_registry: Whether the platform has a native registry to query
- default_root_family: Which well-known default installation directory applies
"""

from enum import Enum
from typing import Any, Dict, List

DOTNET_EXECUTABLE_STEM = "dotnet"


class DefaultRootFamily(Enum):
    """Families of well-known default installation directories."""

    PROGRAM_FILES = "program_files"  # %ProgramFiles%\dotnet, 64-bit only
    UNIX_SHARE = "unix_share"  # /usr/local/share/dotnet
    NONE = "none"  # No known default


# Platform capability database
PLATFORM_CAPABILITIES: Dict[str, Dict[str, Any]] = {
    "windows": {
        "executable_extension": ".exe",
        "supports_registry": True,
        "default_root_family": DefaultRootFamily.PROGRAM_FILES,
    },
    "linux": {
        "executable_extension": "",
        "supports_registry": False,
        "default_root_family": DefaultRootFamily.UNIX_SHARE,
    },
    "macos": {
        "executable_extension": "",
        "supports_registry": False,
        "default_root_family": DefaultRootFamily.UNIX_SHARE,
    },
}


def get_capability(os_name: str, capability: str) -> Any:
    """
    Get specific capability value for an OS family.

    Args:
        os_name: OS family (e.g., 'linux', 'windows')
        capability: Capability name (any key in the family's capability dict)

    Returns:
        Capability value if found, None otherwise.

    Example:
        >>> get_capability('windows', 'executable_extension')
        '.exe'
        >>> get_capability('freebsd', 'executable_extension') is None
        True
    """
    capabilities = PLATFORM_CAPABILITIES.get(os_name, {})
    return capabilities.get(capability)


def supports_feature(os_name: str, feature: str) -> bool:
    """
    Check if an OS family supports a specific feature.

    Returns False for unknown families or features.

    Example:
        >>> supports_feature('windows', 'supports_registry')
        True
        >>> supports_feature('linux', 'supports_registry')
        False
    """
    return bool(get_capability(os_name, feature))


def get_default_root_family(os_name: str) -> DefaultRootFamily:
    """Get the default installation directory family for an OS family."""
    return get_capability(os_name, "default_root_family") or DefaultRootFamily.NONE


def get_executable_name(os_name: str) -> str:
    """
    Get the .NET host executable file name for an OS family.

    Unknown families get the bare name, matching the Unix convention.

    Example:
        >>> get_executable_name('windows')
        'dotnet.exe'
        >>> get_executable_name('linux')
        'dotnet'
    """
    extension = get_capability(os_name, "executable_extension") or ""
    return f"{DOTNET_EXECUTABLE_STEM}{extension}"


def get_known_platforms() -> List[str]:
    """Get list of OS families present in the capability matrix."""
    return list(PLATFORM_CAPABILITIES.keys())


__all__ = [
    "DOTNET_EXECUTABLE_STEM",
    "DefaultRootFamily",
    "PLATFORM_CAPABILITIES",
    "get_capability",
    "supports_feature",
    "get_default_root_family",
    "get_executable_name",
    "get_known_platforms",
]
