"""Utility modules for findr.

This module exports commonly used utility functions.
"""

from findr.utils.formatting import err_console, print_diagnostic, print_error

__all__ = [
    "err_console",
    "print_diagnostic",
    "print_error",
]
