"""
dotnetkit/installation/models.py

Data model for discovered .NET installations and their SDKs.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterator, Optional, Union

import semver

from ..core.platform import PlatformInfo, detect_platform
from ..core.platform_capabilities import get_executable_name
from .validation import SDK_DIRECTORY_NAME, is_valid_root


@dataclass(frozen=True)
class DotNetSdk:
    """
    One versioned SDK directory under an installation's ``sdk`` folder.

    Attributes:
        path: Absolute path to the SDK directory
        version: Version parsed from the directory name
    """

    path: Path
    version: semver.Version

    @property
    def name(self) -> str:
        """Directory name as found on disk (e.g. '8.0.100')."""
        return self.path.name

    def __str__(self) -> str:
        return f"{self.name} [{self.path}]"

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to dictionary for JSON output.

        The version is reported exactly as the directory is named on disk.
        """
        return {
            "version": self.name,
            "path": str(self.path),
        }


@dataclass(frozen=True)
class DotNetInstallation:
    """
    A .NET installation root.

    Construction does not validate the directory; discovery does that before
    handing out an instance. Building one from an arbitrary path is allowed,
    for example to point the tool at a specific root or in tests.

    Attributes:
        location: Installation root directory
    """

    location: Union[str, Path]

    def __post_init__(self):
        if self.location is None or not str(self.location):
            raise ValueError("Installation location must be a non-empty path")
        object.__setattr__(self, "location", Path(self.location))

    @property
    def sdk_directory(self) -> Path:
        """Directory holding one subdirectory per installed SDK."""
        return self.location / SDK_DIRECTORY_NAME

    def executable_path(self, platform: Optional[PlatformInfo] = None) -> Path:
        """Path of the host executable for the given (or current) platform."""
        platform = platform or detect_platform()
        return self.location / get_executable_name(platform.os)

    def is_valid(self, platform: Optional[PlatformInfo] = None) -> bool:
        """Check this root against the installation validity predicate."""
        platform = platform or detect_platform()
        return is_valid_root(self.location, get_executable_name(platform.os))

    def enumerate_sdks(self) -> Iterator[DotNetSdk]:
        """
        Iterate the SDKs installed under this root.

        Each call re-reads the ``sdk`` directory.

        Raises:
            DirectoryUnavailableError: If the ``sdk`` directory cannot be listed
        """
        from .sdks import enumerate_sdks

        return enumerate_sdks(self)

    @classmethod
    def current(cls) -> "DotNetInstallation":
        """
        Get the process-wide installation, resolving it on first use.

        Raises:
            PlatformUnsupportedError: If no valid installation can be found
        """
        from .locator import resolve_current

        return resolve_current()

    def __str__(self) -> str:
        return str(self.location)


__all__ = ["DotNetSdk", "DotNetInstallation"]
