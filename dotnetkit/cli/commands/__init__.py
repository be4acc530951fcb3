"""DotNetKit CLI command implementations."""
