"""
DotNetKit - locate the active .NET installation and enumerate its SDKs.
"""

__version__ = "0.1.0"

from .core.exceptions import (
    DotNetKitError,
    PlatformUnsupportedError,
    DirectoryUnavailableError,
)
from .installation import (
    DotNetInstallation,
    DotNetSdk,
    enumerate_sdks,
    is_valid_root,
    resolve_current,
)

__all__ = [
    "__version__",
    "DotNetKitError",
    "PlatformUnsupportedError",
    "DirectoryUnavailableError",
    "DotNetInstallation",
    "DotNetSdk",
    "enumerate_sdks",
    "is_valid_root",
    "resolve_current",
]
