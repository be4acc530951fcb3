"""
Installation root validity predicate.

A directory is a .NET installation root when it directly contains the host
executable and an ``sdk`` directory.
"""

import os
from pathlib import Path
from typing import Optional, Union

SDK_DIRECTORY_NAME = "sdk"


def is_valid_root(location: Optional[Union[str, Path]], executable_name: str) -> bool:
    """
    Check whether a directory is a usable .NET installation root.

    Pure filesystem existence check; nothing is created or modified and
    I/O errors while probing count as "not a root".

    Args:
        location: Candidate root directory (None or empty is never valid)
        executable_name: Host executable file name ('dotnet' or 'dotnet.exe')

    Returns:
        True if ``location/executable_name`` is a file and ``location/sdk``
        is a directory
    """
    if location is None or not os.fspath(location):
        return False

    root = Path(location)
    try:
        return (root / executable_name).is_file() and (
            root / SDK_DIRECTORY_NAME
        ).is_dir()
    except OSError:
        return False


__all__ = ["SDK_DIRECTORY_NAME", "is_valid_root"]
