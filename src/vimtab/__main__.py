"""Module entry point so ``python -m vimtab`` behaves like the console script."""

import sys

from vimtab.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
