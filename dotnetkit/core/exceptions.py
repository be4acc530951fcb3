"""
Centralized exception hierarchy for DotNetKit.

This module defines all custom exceptions used across the codebase
to provide clear exception semantics for callers.
"""

from pathlib import Path
from typing import Optional


# ============================================================================
# Base Exceptions
# ============================================================================


class DotNetKitError(Exception):
    """Base exception for all DotNetKit errors."""

    pass


# ============================================================================
# Installation Exceptions
# ============================================================================


class InstallationError(DotNetKitError):
    """Base exception for .NET installation discovery errors."""

    pass


class PlatformUnsupportedError(InstallationError):
    """
    Raised when no valid .NET installation can be resolved.

    Covers both exhaustion of every discovery strategy and a platform family
    that has no known default installation location.
    """

    def __init__(self, message: str, platform: Optional[str] = None):
        self.platform = platform
        super().__init__(message)


class DirectoryUnavailableError(InstallationError):
    """Raised when the SDK directory of an installation cannot be listed."""

    def __init__(self, path: Path, reason: str = ""):
        self.path = path
        msg = f"SDK directory is unavailable: {path}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


# ============================================================================
# Configuration Exceptions
# ============================================================================


class ConfigurationError(DotNetKitError):
    """Raised when the settings file cannot be parsed."""

    pass
