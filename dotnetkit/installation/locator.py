"""
dotnetkit/installation/locator.py

.NET installation discovery - finds the root directory of the active .NET
installation without any user configuration.

Strategies are tried in order and the first one producing a valid root wins:
- DOTNET_ROOT environment variable
- PATH search for the dotnet host executable
- Registry lookup (Windows only)
- Platform default location

Every candidate is checked with the same validity predicate (host executable
plus an ``sdk`` directory). The resolved installation is memoized for the
lifetime of the process.
"""

import logging
import os
import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Mapping, Optional

from ..core.config import DotNetKitSettings
from ..core.exceptions import PlatformUnsupportedError
from ..core.platform import PlatformInfo, detect_platform
from ..core.platform_capabilities import (
    DefaultRootFamily,
    get_default_root_family,
    get_executable_name,
    supports_feature,
)
from .models import DotNetInstallation
from .validation import is_valid_root

logger = logging.getLogger(__name__)

REGISTRY_KEY = r"SOFTWARE\dotnet\Setup\InstalledVersions\x64"
REGISTRY_VALUE = "InstallLocation"
UNIX_DEFAULT_ROOT = "/usr/local/share/dotnet"
WINDOWS_PROGRAM_FILES_FALLBACK = "C:\\Program Files"

RegistryReader = Callable[[], Optional[str]]


@dataclass
class LocatorContext:
    """
    Inputs shared by all discovery strategies during one resolution.

    Attributes:
        platform: Platform descriptor gating the strategies
        environ: Environment variables to read
        settings: Environment variable names and other settings
        executable_name: Host executable file name for the platform
    """

    platform: PlatformInfo
    environ: Mapping[str, str]
    settings: DotNetKitSettings = field(default_factory=DotNetKitSettings)
    executable_name: str = ""

    def __post_init__(self):
        if not self.executable_name:
            self.executable_name = get_executable_name(self.platform.os)

    def is_valid_root(self, location: Optional[Path]) -> bool:
        """Apply the validity predicate with this platform's executable name."""
        return is_valid_root(location, self.executable_name)


class DiscoveryStrategy(ABC):
    """
    One way of finding a candidate installation root.

    A strategy returns a candidate path or None. It does not need to validate
    the candidate; the locator does that for every strategy.
    """

    name = "strategy"

    def applies_to(self, platform: PlatformInfo) -> bool:
        """Whether this strategy should run on the given platform."""
        return True

    @abstractmethod
    def find(self, context: LocatorContext) -> Optional[Path]:
        """
        Produce a candidate installation root.

        Args:
            context: Shared resolution inputs

        Returns:
            Candidate root directory, or None if the strategy found nothing
        """
        pass


class EnvironmentStrategy(DiscoveryStrategy):
    """Use the directory named by the DOTNET_ROOT environment variable."""

    name = "environment"

    def find(self, context: LocatorContext) -> Optional[Path]:
        value = context.environ.get(context.settings.root_env_var)
        if not value:
            logger.debug(f"{context.settings.root_env_var} is not set")
            return None
        return Path(value)


class PathSearchStrategy(DiscoveryStrategy):
    """
    Search PATH components, in order, for the dotnet host executable.

    The first component whose executable exists and whose directory is a valid
    root wins. When the executable is a symbolic link (e.g. /usr/bin/dotnet
    pointing into /usr/share/dotnet), the link target's directory is tried too.
    """

    name = "path"

    def find(self, context: LocatorContext) -> Optional[Path]:
        search_path = context.environ.get(context.settings.path_env_var, "")

        for component in search_path.split(os.pathsep):
            component = component.strip().strip('"')
            if not component:
                continue

            try:
                root = self._check_component(Path(component), context)
            except OSError as e:
                logger.debug(f"Error probing PATH entry {component}: {e}")
                continue

            if root is not None:
                return root

        return None

    def _check_component(
        self, directory: Path, context: LocatorContext
    ) -> Optional[Path]:
        """
        Check one PATH directory for a usable host executable.

        Returns:
            Installation root for this entry, or None
        """
        candidate = directory / context.executable_name
        if not candidate.is_file():
            return None

        if context.is_valid_root(candidate.parent):
            return candidate.parent

        if candidate.is_symlink():
            target_dir = candidate.resolve().parent
            if context.is_valid_root(target_dir):
                logger.debug(f"Following {candidate} to {target_dir}")
                return target_dir

        logger.debug(f"Found {candidate} but {directory} is not a .NET root")
        return None


def read_registry_install_location() -> Optional[str]:
    """
    Read the x64 install location written by the .NET installer.

    The installer records it in the 32-bit registry view, so the key is opened
    with KEY_WOW64_32KEY regardless of the interpreter's bitness.

    Returns:
        Install location, or None if the key or value is missing or unreadable
    """
    import winreg

    try:
        with winreg.OpenKey(
            winreg.HKEY_LOCAL_MACHINE,
            REGISTRY_KEY,
            0,
            winreg.KEY_READ | winreg.KEY_WOW64_32KEY,
        ) as key:
            value, value_type = winreg.QueryValueEx(key, REGISTRY_VALUE)
    except OSError as e:
        logger.debug(f"Registry value {REGISTRY_KEY}\\{REGISTRY_VALUE} unavailable: {e}")
        return None

    if value_type == winreg.REG_EXPAND_SZ:
        value = winreg.ExpandEnvironmentStrings(value)
    elif value_type != winreg.REG_SZ:
        logger.debug(f"Unexpected registry value type {value_type} for {REGISTRY_VALUE}")
        return None

    return value or None


class RegistryStrategy(DiscoveryStrategy):
    """Read the install location from the Windows registry."""

    name = "registry"

    def __init__(self, reader: Optional[RegistryReader] = None):
        """
        Initialize strategy.

        Args:
            reader: Callable returning the registered install location; defaults
                to reading the real registry
        """
        self.reader = reader or read_registry_install_location

    def applies_to(self, platform: PlatformInfo) -> bool:
        return supports_feature(platform.os, "supports_registry")

    def find(self, context: LocatorContext) -> Optional[Path]:
        value = self.reader()
        return Path(value) if value else None


def default_installation_location(
    platform: PlatformInfo, environ: Optional[Mapping[str, str]] = None
) -> Path:
    """
    Get the well-known default installation root for a platform.

    The result depends on the platform family and process bitness only; the
    filesystem is never consulted.

    Args:
        platform: Platform descriptor
        environ: Environment used to find Program Files on Windows

    Returns:
        Default root directory

    Raises:
        PlatformUnsupportedError: If the platform has no known default
    """
    if environ is None:
        environ = os.environ

    family = get_default_root_family(platform.os)

    if family is DefaultRootFamily.PROGRAM_FILES and platform.is_64bit:
        program_files = environ.get("ProgramFiles") or WINDOWS_PROGRAM_FILES_FALLBACK
        return Path(program_files) / "dotnet"

    if family is DefaultRootFamily.UNIX_SHARE:
        return Path(UNIX_DEFAULT_ROOT)

    raise PlatformUnsupportedError(
        f"No default .NET installation location for platform {platform}",
        platform=platform.platform_string(),
    )


class DefaultLocationStrategy(DiscoveryStrategy):
    """Fall back to the platform's well-known installation directory."""

    name = "default"

    def find(self, context: LocatorContext) -> Optional[Path]:
        return default_installation_location(context.platform, context.environ)


def default_strategies(
    registry_reader: Optional[RegistryReader] = None,
) -> List[DiscoveryStrategy]:
    """Build the standard strategy chain in resolution order."""
    return [
        EnvironmentStrategy(),
        PathSearchStrategy(),
        RegistryStrategy(registry_reader),
        DefaultLocationStrategy(),
    ]


class InstallationLocator:
    """
    Resolves the active .NET installation root.

    Runs the strategy chain once per locate() call; callers wanting the
    memoized process-wide result should use resolve_current().
    """

    def __init__(
        self,
        platform: Optional[PlatformInfo] = None,
        environ: Optional[Mapping[str, str]] = None,
        settings: Optional[DotNetKitSettings] = None,
        strategies: Optional[List[DiscoveryStrategy]] = None,
        registry_reader: Optional[RegistryReader] = None,
    ):
        """
        Initialize locator.

        Args:
            platform: Platform descriptor (detected when omitted)
            environ: Environment mapping (os.environ when omitted)
            settings: Environment variable names
            strategies: Strategy chain (default_strategies() when omitted)
            registry_reader: Registry reader for the default chain
        """
        self.platform = platform or detect_platform()
        self.environ = environ if environ is not None else os.environ
        self.settings = settings or DotNetKitSettings()
        if strategies is None:
            strategies = default_strategies(registry_reader)
        self.strategies = strategies

    def locate(self) -> DotNetInstallation:
        """
        Run the strategy chain.

        Returns:
            The first installation that passes validation

        Raises:
            PlatformUnsupportedError: If no strategy yields a valid root, or
                the platform has no default location to fall back to
        """
        context = LocatorContext(
            platform=self.platform, environ=self.environ, settings=self.settings
        )

        for strategy in self.strategies:
            if not strategy.applies_to(self.platform):
                logger.debug(f"Skipping {strategy.name} strategy on {self.platform.os}")
                continue

            logger.debug(f"Trying {strategy.name} strategy")
            try:
                candidate = strategy.find(context)
            except OSError as e:
                logger.debug(f"{strategy.name} strategy failed: {e}")
                continue

            if candidate is None:
                continue

            if not context.is_valid_root(candidate):
                logger.debug(
                    f"{strategy.name} strategy candidate is not a valid .NET root: {candidate}"
                )
                continue

            logger.info(f"Found .NET installation via {strategy.name}: {candidate}")
            return DotNetInstallation(os.path.abspath(candidate))

        raise PlatformUnsupportedError(
            "Could not find a valid .NET installation.",
            platform=self.platform.platform_string(),
        )


# ============================================================================
# Process-wide installation
# ============================================================================

_current_installation: Optional[DotNetInstallation] = None
_current_lock = threading.Lock()


def resolve_current(
    locator: Optional[InstallationLocator] = None,
) -> DotNetInstallation:
    """
    Get the process-wide installation, resolving it on first use.

    Resolution runs at most once even when several threads ask at the same
    time. A failed resolution is not cached.

    Args:
        locator: Locator used if resolution is still pending; ignored once
            the installation is known

    Raises:
        PlatformUnsupportedError: If no valid installation can be found
    """
    global _current_installation

    installation = _current_installation
    if installation is None:
        with _current_lock:
            if _current_installation is None:
                _current_installation = (locator or InstallationLocator()).locate()
            installation = _current_installation
    return installation


def set_current_installation(installation: DotNetInstallation) -> None:
    """Use an explicit installation as the process-wide one."""
    global _current_installation

    with _current_lock:
        _current_installation = installation
    logger.debug(f"Current .NET installation set to {installation.location}")


def reset_current_installation() -> None:
    """Forget the process-wide installation so the next access resolves again."""
    global _current_installation

    with _current_lock:
        _current_installation = None


__all__ = [
    "LocatorContext",
    "DiscoveryStrategy",
    "EnvironmentStrategy",
    "PathSearchStrategy",
    "RegistryStrategy",
    "DefaultLocationStrategy",
    "read_registry_install_location",
    "default_installation_location",
    "default_strategies",
    "InstallationLocator",
    "resolve_current",
    "set_current_installation",
    "reset_current_installation",
]
