"""
Info command - show the resolved .NET installation.
"""

import logging

from dotnetkit.cli.utils import get_installation, safe_print
from dotnetkit.core.platform import detect_platform

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Print the installation root, host executable and validity.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 when the installation is valid, 1 otherwise)
    """
    platform = detect_platform()
    installation = get_installation(args)
    valid = installation.is_valid(platform)

    safe_print(f"Platform:     {platform}")
    safe_print(f"Location:     {installation.location}")
    safe_print(f"Executable:   {installation.executable_path(platform)}")
    safe_print(f"SDK folder:   {installation.sdk_directory}")
    safe_print(f"Valid:        {'yes' if valid else 'no'}")

    if not valid:
        logger.warning(
            f"{installation.location} is missing the dotnet executable or sdk folder"
        )
        return 1

    return 0
