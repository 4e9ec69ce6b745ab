"""vimtab - open files as tabs in a single shared gvim instance."""

__version__ = "0.1.0"
