"""Command line interface for vimtab."""

import sys
from typing import final

from vimtab.application.services import LaunchAborted, LaunchRequest, LaunchService
from vimtab.platform.logging import logger
from vimtab.ui.cli.args import ArgumentParser


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments and launch the editor.

        Per-file failures are reported but leave the exit status at 0.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args = ArgumentParser.process_args(args_list)
            _ = LaunchService().run(LaunchRequest(paths=args.paths))
            return

        except LaunchAborted as e:
            message = str(e)
            if message:
                logger.error("Error: %s", message)
            sys.exit(e.exit_code)
        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Fatal failures call
        ``sys.exit(...)`` from ``CommandProcessor``, so this return is only
        reached when every file was dispatched or skipped.
    """
    CommandProcessor.process_command()
    return 0
