"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import Final, final

from vimtab import __version__
from vimtab.config.config import Config
from vimtab.platform.logging import DEFAULT_LOG_FILE, setup_logger
from vimtab.ui.cli.args.options import LaunchArgs

KNOWN_FLAGS: Final[frozenset[str]] = frozenset(
    {"-h", "--help", "--verbose", "--quiet", "--version"}
)


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="vimtab",
            description=(
                "Open files in a single shared gvim instance, as new tabs when one "
                "is already running. Directories are expanded recursively."
            ),
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        _ = parser.add_argument(
            "paths",
            nargs="*",
            metavar="PATH",
            help="File or directory to open",
        )
        verbosity = parser.add_mutually_exclusive_group()
        _ = verbosity.add_argument(
            "--verbose",
            action="store_true",
            help="Show probe and dispatch details",
        )
        _ = verbosity.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )
        _ = parser.add_argument(
            "--version",
            action="version",
            version=f"%(prog)s {__version__}",
        )
        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> LaunchArgs:
        """Process command line arguments and configure logging.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            LaunchArgs: Processed command line arguments.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(ArgumentParser.separate_paths(args_list))

        if parsed_args.quiet:
            log_level = logging.ERROR
        elif parsed_args.verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        configuration = Config.load()
        log_file_path = configuration.log_file or DEFAULT_LOG_FILE
        _ = setup_logger(log_file=log_file_path, console_level=log_level)

        return LaunchArgs(
            paths=list(parsed_args.paths),
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )

    @staticmethod
    def separate_paths(args_list: Sequence[str] | None = None) -> list[str]:
        """Move every token that is not a known flag behind ``--``.

        File managers pass names such as ``-notes.txt`` verbatim, so only the
        flags this program defines are parsed as options. An explicit ``--``
        still ends flag handling.

        Args:
            args_list: Raw arguments; defaults to ``sys.argv[1:]``.

        Returns:
            list[str]: Flags first, then ``--`` and the paths in their original order.
        """
        raw = list(sys.argv[1:] if args_list is None else args_list)
        flags: list[str] = []
        paths: list[str] = []
        for index, token in enumerate(raw):
            if token == "--":
                paths.extend(raw[index + 1:])
                break
            if token in KNOWN_FLAGS:
                flags.append(token)
            else:
                paths.append(token)
        if not paths:
            return flags
        return [*flags, "--", *paths]
