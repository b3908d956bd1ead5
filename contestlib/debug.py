"""Readable formatting of nested values for debug output."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Mapping
from typing import Any


def format_value(value: Any) -> str:
    """Format strings quoted, booleans as true/false, tuples in parentheses
    and other collections in braces with a trailing separator."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return f'"{value}"'
    if isinstance(value, float):
        return f"{value:f}"
    if isinstance(value, tuple):
        return "(" + ", ".join(format_value(item) for item in value) + ")"
    if isinstance(value, Mapping):
        value = value.items()
    if isinstance(value, Iterable):
        return "{" + "".join(f"{format_value(item)}, " for item in value) + "}"
    return str(value)


def debug(*args: Any) -> None:
    """Write the formatted arguments to standard error on one line."""
    print("".join(" " + format_value(arg) for arg in args), file=sys.stderr)