"""
.NET installation discovery and SDK enumeration.

Usage:
    from dotnetkit.installation import resolve_current

    installation = resolve_current()
    for sdk in installation.enumerate_sdks():
        print(sdk.version, sdk.path)
"""

from .models import DotNetInstallation, DotNetSdk
from .validation import SDK_DIRECTORY_NAME, is_valid_root
from .sdks import enumerate_sdks, parse_sdk_version
from .locator import (
    InstallationLocator,
    DiscoveryStrategy,
    EnvironmentStrategy,
    PathSearchStrategy,
    RegistryStrategy,
    DefaultLocationStrategy,
    default_installation_location,
    resolve_current,
    set_current_installation,
    reset_current_installation,
)

__all__ = [
    "DotNetInstallation",
    "DotNetSdk",
    "SDK_DIRECTORY_NAME",
    "is_valid_root",
    "enumerate_sdks",
    "parse_sdk_version",
    "InstallationLocator",
    "DiscoveryStrategy",
    "EnvironmentStrategy",
    "PathSearchStrategy",
    "RegistryStrategy",
    "DefaultLocationStrategy",
    "default_installation_location",
    "resolve_current",
    "set_current_installation",
    "reset_current_installation",
]
