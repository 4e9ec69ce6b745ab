"""Command line argument handling package."""

from vimtab.ui.cli.args.options import LaunchArgs
from vimtab.ui.cli.args.parser import ArgumentParser

__all__ = ["ArgumentParser", "LaunchArgs"]
