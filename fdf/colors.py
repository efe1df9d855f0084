"""Parse the ``z[,0xRRGGBB]`` cells of an FDF map."""

from __future__ import annotations

import string
from typing import Tuple

from fdf.chars import atoi
from fdf.textutil import split

DEFAULT_COLOR = 0xFFFFFFFF
INVALID_HEX = 0xFFFFFFFF
ALPHA_MASK = 0xFF000000
RGB_MAX = 0xFFFFFF
_SIGN_BIT = 0x80000000
_HEX_DIGITS = frozenset(string.hexdigits)


def hex_to_int(text: str) -> int:
    """Parse hexadecimal text with an optional 0x prefix as a 32-bit value.

    Any character that is not a hex digit makes the result ``0xFFFFFFFF``.
    """
    digits = text[2:] if text[:2] in ("0x", "0X") else text
    result = 0
    for ch in digits:
        if ch not in _HEX_DIGITS:
            return INVALID_HEX
        result = (result * 16 + int(ch, 16)) & 0xFFFFFFFF
    return result


def parse_color(text: str) -> int:
    """Colour of a cell as 0xAARRGGBB; opaque white when none is given.

    A colour that fits in 24 bits, or whose top bit is set, is made opaque.
    """
    parts = split(text, ",")
    if len(parts) < 2:
        return DEFAULT_COLOR
    color = hex_to_int(parts[1])
    if color <= RGB_MAX or color & _SIGN_BIT:
        color |= ALPHA_MASK
    return color


def parse_z(text: str) -> int:
    """Height of a cell: the integer before the first comma, 0 if none."""
    parts = split(text, ",")
    if not parts:
        return 0
    return atoi(parts[0])


def parse_cell(text: str) -> Tuple[int, int]:
    """Return the height and colour of a cell."""
    return parse_z(text), parse_color(text)