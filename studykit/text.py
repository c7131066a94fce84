"""Small string formatting helpers."""

from __future__ import annotations

import struct


def _as_single_precision(number: float) -> float:
    return struct.unpack("f", struct.pack("f", number))[0]


def format_fixed(number: float, places: int) -> str:
    """Format a number as a single-precision float with a fixed count of decimals."""
    if places < 0:
        raise ValueError("places must not be negative")
    return f"{_as_single_precision(number):.{places}f}"


def interleave_commas(text: str) -> str:
    """Return text with a comma after every character."""
    return "".join(f"{char}," for char in text)