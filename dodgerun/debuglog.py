"""Debug output of single values."""

from __future__ import annotations

import sys
from typing import Union

Loggable = Union[int, float, str]


def format_value(value: Loggable, line_feed: bool = False) -> str:
    """Integers as ``%d``, floats as ``%f``, strings unchanged; optional newline."""
    if isinstance(value, int):
        text = "%d" % value
    elif isinstance(value, float):
        text = "%f" % value
    elif isinstance(value, str):
        text = value
    else:
        raise TypeError(f"cannot log a value of type {type(value).__name__}")
    return text + "\n" if line_feed else text


def log(value: Loggable, line_feed: bool = False) -> None:
    """Write the formatted value to the debug stream (standard error)."""
    sys.stderr.write(format_value(value, line_feed))
    sys.stderr.flush()