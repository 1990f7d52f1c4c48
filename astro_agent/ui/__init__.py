"""Terminal output helpers."""

from .console import console, format_size, print_error, print_success, print_warning

__all__ = [
    "console",
    "format_size",
    "print_error",
    "print_success",
    "print_warning",
]
