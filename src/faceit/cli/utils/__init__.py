"""CLI utility modules."""

from faceit.cli.utils.output import (
    console,
    print_error,
    print_json,
    print_success,
    print_warning,
)

__all__ = [
    "console",
    "print_error",
    "print_json",
    "print_success",
    "print_warning",
]
