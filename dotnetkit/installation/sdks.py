"""
SDK enumeration for a .NET installation.

Lists the immediate subdirectories of ``<root>/sdk`` and keeps the ones whose
name is a semantic version. Other entries that live alongside the SDKs
(e.g. ``NuGetFallbackFolder`` or workload manifest caches) are skipped.
"""

import logging
import os
from pathlib import Path
from typing import Iterator, Optional

import semver

from ..core.exceptions import DirectoryUnavailableError
from .models import DotNetInstallation, DotNetSdk

logger = logging.getLogger(__name__)


def parse_sdk_version(name: str) -> Optional[semver.Version]:
    """
    Parse an SDK directory name as a SemVer 2.0 version.

    Accepts MAJOR.MINOR.PATCH with an optional pre-release and build suffix,
    e.g. '8.0.100', '9.0.100-rc.2.24474.11', '6.0.416+abc'. PEP 440 spellings such
    as '1.0.0a1' or '1.0.0.post1' are not semantic versions and are rejected.

    Args:
        name: Directory base name

    Returns:
        Parsed version, or None if the name is not a semantic version
    """
    # Surrounding whitespace is never part of a version
    if name != name.strip():
        return None

    try:
        return semver.Version.parse(name)
    except ValueError:
        return None


def enumerate_sdks(installation: DotNetInstallation) -> Iterator[DotNetSdk]:
    """
    Iterate the versioned SDK directories of an installation.

    Entries are yielded lazily in filesystem order. Names that do not parse as
    a version are skipped silently. Every call re-reads the directory.

    Args:
        installation: Installation whose ``sdk`` directory is scanned

    Yields:
        DotNetSdk for each version-named subdirectory

    Raises:
        DirectoryUnavailableError: If the ``sdk`` directory is missing or
            cannot be listed
    """
    sdk_dir = installation.sdk_directory

    try:
        entries = list(os.scandir(sdk_dir))
    except OSError as e:
        raise DirectoryUnavailableError(sdk_dir, e.strerror or str(e)) from e

    logger.debug(f"Scanning {len(entries)} entries in {sdk_dir}")

    for entry in entries:
        try:
            is_dir = entry.is_dir()
        except OSError as e:
            logger.debug(f"Skipping unreadable entry {entry.path}: {e}")
            continue
        if not is_dir:
            continue

        version = parse_sdk_version(entry.name)
        if version is None:
            logger.debug(f"Skipping non-version directory: {entry.name}")
            continue

        yield DotNetSdk(path=Path(os.path.abspath(entry.path)), version=version)


__all__ = ["parse_sdk_version", "enumerate_sdks"]
