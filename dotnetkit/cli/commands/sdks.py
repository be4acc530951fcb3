"""
SDKs command - list the SDKs of the resolved .NET installation.
"""

import json
import logging

from dotnetkit.cli.utils import get_installation, safe_print

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    List installed SDKs in filesystem order.

    Args:
        args: Parsed command-line arguments (json flag selects JSON output)

    Returns:
        Exit code (0 for success)
    """
    installation = get_installation(args)
    sdks = list(installation.enumerate_sdks())

    logger.debug(f"Found {len(sdks)} SDKs under {installation.location}")

    if getattr(args, "json", False):
        safe_print(json.dumps([sdk.to_dict() for sdk in sdks], indent=2))
        return 0

    if not sdks:
        safe_print(f"No SDKs found in {installation.sdk_directory}")
        return 0

    width = max(len(sdk.name) for sdk in sdks)
    for sdk in sdks:
        safe_print(f"{sdk.name.ljust(width)}  [{sdk.path}]")

    return 0
