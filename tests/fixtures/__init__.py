"""Test fixtures for DotNetKit tests.

- installations: Synthetic .NET installation roots and platform descriptors

Import fixtures in your tests using:
    from tests.fixtures.installations import make_dotnet_root
"""

__all__ = [
    "installations",
]
