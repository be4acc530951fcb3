"""
Entry point for running DotNetKit CLI as a module.

Usage: python -m dotnetkit [command] [options]
"""

from dotnetkit.cli.parser import main

if __name__ == "__main__":
    main()
