"""
Shared utilities for CLI commands.

Provides common functionality used across CLI commands to ensure
consistent behavior.
"""

import logging
import sys

from dotnetkit.core.config import DotNetKitSettings, load_settings
from dotnetkit.installation import (
    DotNetInstallation,
    InstallationLocator,
    resolve_current,
    set_current_installation,
)

logger = logging.getLogger(__name__)


# ============================================================================
# Installation Resolution
# ============================================================================


def get_settings(args) -> DotNetKitSettings:
    """
    Load settings for a command.

    Args:
        args: Parsed arguments with optional config field

    Returns:
        Settings from --config, DOTNETKIT_CONFIG, or defaults
    """
    return load_settings(getattr(args, "config", None))


def get_installation(args) -> DotNetInstallation:
    """
    Resolve the installation a command should work with.

    An explicit dotnet_root setting replaces discovery; otherwise the
    process-wide installation is resolved with the configured variable names.

    Args:
        args: Parsed arguments

    Returns:
        The installation to use

    Raises:
        PlatformUnsupportedError: If discovery finds no valid installation
        ConfigurationError: If the settings file is malformed
    """
    settings = get_settings(args)

    if settings.dotnet_root is not None:
        logger.debug(f"Using configured .NET root: {settings.dotnet_root}")
        installation = DotNetInstallation(settings.dotnet_root)
        set_current_installation(installation)
        return installation

    return resolve_current(InstallationLocator(settings=settings))


# ============================================================================
# Output Helpers
# ============================================================================


def safe_print(message: str, file=None):
    """
    Print message with safe encoding handling for Windows console.

    Falls back to replacing unencodable characters when the console encoding
    cannot represent the message (e.g. non-ASCII install paths).

    Args:
        message: Message to print
        file: Output file (default: stdout)
    """
    stream = file if file is not None else sys.stdout
    try:
        print(message, file=stream)
    except UnicodeEncodeError:
        encoding = getattr(stream, "encoding", None) or "ascii"
        print(message.encode(encoding, "replace").decode(encoding), file=stream)
