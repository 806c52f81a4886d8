"""Hex color strings.

Accepted forms, with or without a leading ``#``:

- ``RGB``       – each digit doubled, opaque
- ``ARGB``      – as above, alpha first
- ``RRGGBB``    – opaque
- ``AARRGGBB``  – alpha first
"""
import string
from typing import Sequence, Tuple


def parse_hex(hex_str: str) -> Tuple[int, int, int, int]:
    """
    Parse a hex color string.

    Returns:
        (r, g, b, a) integers in 0-255

    Raises:
        ValueError: if the string is not one of the accepted forms
    """
    raw = (hex_str or "").strip().lstrip("#")
    if len(raw) not in (3, 4, 6, 8) or not all(c in string.hexdigits for c in raw):
        raise ValueError(f"hex must be 3, 4, 6 or 8 hex digits, got {hex_str!r}")
    if len(raw) in (3, 4):
        raw = "".join(ch * 2 for ch in raw)
    if len(raw) == 6:
        raw = "ff" + raw
    a, r, g, b = (int(raw[i:i + 2], 16) for i in (0, 2, 4, 6))
    return r, g, b, a


def format_hex(channels: Sequence[int]) -> str:
    """Format integer channels as ``#`` followed by two lowercase digits per channel."""
    return "#" + "".join(f"{int(c):02x}" for c in channels)
