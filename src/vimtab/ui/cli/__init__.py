"""Command line interface package."""

from vimtab.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
