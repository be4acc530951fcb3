"""
Argument parsing and command dispatch for the dotnetkit executable.
"""

import argparse
import importlib
import logging
import sys
from pathlib import Path
from typing import List, Optional

from dotnetkit.core.exceptions import DotNetKitError

try:
    from importlib.metadata import version

    __version__ = version("dotnetkit")
except Exception:
    from dotnetkit import __version__

logger = logging.getLogger(__name__)


class CLI:
    """Entry object for the dotnetkit command."""

    def __init__(self):
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            prog="dotnetkit",
            description="DotNetKit - locate the .NET installation and its SDKs",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        parser.add_argument(
            "--version", action="version", version=f"DotNetKit {__version__}"
        )
        parser.add_argument(
            "--verbose",
            "-v",
            action="store_true",
            help="Show debug logging from discovery",
        )
        parser.add_argument(
            "--quiet",
            "-q",
            action="store_true",
            help="Only report errors",
        )
        parser.add_argument(
            "--config",
            type=Path,
            metavar="PATH",
            help="Path to settings file (default: $DOTNETKIT_CONFIG if set)",
        )

        subparsers = parser.add_subparsers(
            dest="command", metavar="COMMAND"
        )

        self._add_info_command(subparsers)
        self._add_sdks_command(subparsers)

        return parser

    def _add_info_command(self, subparsers):
        subparsers.add_parser(
            "info",
            help="Show the resolved .NET installation",
            description="Resolve the active .NET installation and report its location",
        )

    def _add_sdks_command(self, subparsers):
        parser = subparsers.add_parser(
            "sdks",
            help="List installed SDKs",
            description="List the versioned SDK directories of the active installation",
        )
        parser.add_argument(
            "--json", action="store_true", help="Print SDKs as a JSON array"
        )

    def parse_args(self, args: Optional[List[str]] = None):
        return self.parser.parse_args(args)

    def run(self, args: Optional[List[str]] = None) -> int:
        """
        Parse arguments, set up logging and run the selected command.

        Returns:
            0 on success, 1 when no command is given or a DotNetKitError is
            raised, 130 on Ctrl+C
        """
        parsed_args = self.parse_args(args)

        self._configure_logging(parsed_args)

        if not parsed_args.command:
            self.parser.print_help()
            return 1

        try:
            return self._dispatch_command(parsed_args)
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            return 130
        except DotNetKitError as e:
            logger.error(f"Error: {e}")
            return 1

    def _configure_logging(self, args):
        """Root logging: debug with logger names for -v, errors only for -q."""
        if args.verbose:
            level = logging.DEBUG
            format_str = "%(levelname)s [%(name)s] %(message)s"
        elif args.quiet:
            level = logging.ERROR
            format_str = "%(levelname)s: %(message)s"
        else:
            level = logging.INFO
            format_str = "%(message)s"

        logging.basicConfig(
            level=level,
            format=format_str,
            force=True,
        )

    def _dispatch_command(self, args) -> int:
        """Import the command module lazily and return its run() result."""
        command_map = {
            "info": "dotnetkit.cli.commands.info",
            "sdks": "dotnetkit.cli.commands.sdks",
        }

        module_name = command_map.get(args.command)
        if not module_name:
            logger.error(f"Unknown command: {args.command}")
            return 1

        module = importlib.import_module(module_name)
        return module.run(args)


def main():
    sys.exit(CLI().run())


if __name__ == "__main__":
    main()
