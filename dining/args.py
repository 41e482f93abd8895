"""Command-line argument checks, number parsing and the wall clock."""

from __future__ import annotations

import time
from collections.abc import Sequence

_LEADING_WHITESPACE = " \t\n\v\f\r"
_NUMERIC_CHARS = frozenset("0123456789 ")


class ArgumentError(ValueError):
    """Raised when the command-line arguments cannot be used."""


def current_millis() -> int:
    """Return the wall-clock time in whole milliseconds."""
    return time.time_ns() // 1_000_000


def parse_number(text: str) -> int:
    """Convert validated argument text to an integer.

    Leading whitespace is skipped and a single sign is consumed but not
    applied; negative input is rejected beforehand by ``validate_args``.
    Every remaining character contributes its offset from ``'0'``.
    """
    body = text.lstrip(_LEADING_WHITESPACE)
    if body[:1] in ("+", "-"):
        body = body[1:]
    result = 0
    for char in body:
        result = result * 10 + ord(char) - ord("0")
    return result


def _check_number(arg: str) -> None:
    negative = arg.startswith("-")
    body = arg[1:] if arg[0] in "+-" else arg
    if any(char not in _NUMERIC_CHARS for char in body):
        raise ArgumentError("Arguments must be numeric.")
    if negative:
        raise ArgumentError("Arguments must be positive numbers.")


def validate_args(args: Sequence[str]) -> None:
    """Check the program arguments (without the program name).

    Raises ArgumentError when there are fewer than four arguments, when one
    is empty, when one holds anything but digits and spaces after an
    optional sign, or when one is negative.
    """
    if len(args) < 4:
        raise ArgumentError("Invalid number of arguments.")
    for arg in args:
        if not arg:
            raise ArgumentError("Arguments must not be empty.")
        _check_number(arg)