"""CLI utility modules."""

from dictlookup.cli.utils.console import error_console

__all__ = ["error_console"]
