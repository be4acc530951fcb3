"""
Core functionality for DotNetKit.

This package contains the foundational modules that installation discovery
depends on.
"""

from .platform import (
    PlatformInfo,
    detect_platform,
    clear_platform_cache,
)

from .platform_capabilities import (
    DefaultRootFamily,
    get_executable_name,
    get_default_root_family,
    supports_feature,
)

from .config import (
    DotNetKitSettings,
    load_settings,
)

from .exceptions import (
    DotNetKitError,
    InstallationError,
    PlatformUnsupportedError,
    DirectoryUnavailableError,
    ConfigurationError,
)

__all__ = [
    "PlatformInfo",
    "detect_platform",
    "clear_platform_cache",
    "DefaultRootFamily",
    "get_executable_name",
    "get_default_root_family",
    "supports_feature",
    "DotNetKitSettings",
    "load_settings",
    "DotNetKitError",
    "InstallationError",
    "PlatformUnsupportedError",
    "DirectoryUnavailableError",
    "ConfigurationError",
]
