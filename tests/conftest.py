"""
Pytest configuration and shared fixtures for DotNetKit tests.
"""

import pytest

# Import test fixtures to make them available to all tests
# ruff: noqa: F401
from tests.fixtures.installations import (
    linux_platform,
    macos_platform,
    windows_platform,
    windows32_platform,
    unknown_platform,
    dotnet_root,
)

from dotnetkit.core.platform import clear_platform_cache
from dotnetkit.installation.locator import reset_current_installation


@pytest.fixture(autouse=True)
def reset_discovery_state():
    """Start and finish every test without a memoized installation or platform."""
    reset_current_installation()
    clear_platform_cache()
    yield
    reset_current_installation()
    clear_platform_cache()
