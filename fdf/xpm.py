"""Read XPM images, from a list of strings or from a file, into an Image."""

from __future__ import annotations

import os
import re
from typing import Dict, Iterable, Iterator, List, Optional, Union

from fdf.colornames import lookup_color
from fdf.image import Image

TRANSPARENT = 0xFF000000
_NAME_BUFFER = 64
_WORD_SEPARATORS = re.compile(r"[ \t]+")
_HEX = "0123456789abcdefABCDEF"


class XpmError(Exception):
    """Raised when XPM data cannot be read or is malformed."""


def str_to_wordtab(text: str) -> List[str]:
    """Split *text* on spaces and tabs, dropping empty words."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]


def _find_unquoted(text: str, token: str) -> int:
    inside = False
    for index, ch in enumerate(text):
        if ch == '"':
            inside = not inside
        if not inside and text.startswith(token, index):
            return index
    return -1


def strip_comments(text: str) -> str:
    """Blank out C comments lying outside double quotes, keeping the length.

    A line comment is blanked together with the newline that ends it.
    """
    while (start := _find_unquoted(text, "/*")) >= 0:
        end = text.find("*/", start + 2)
        stop = len(text) if end < 0 else end + 2
        text = text[:start] + " " * (stop - start) + text[stop:]
    while (start := _find_unquoted(text, "//")) >= 0:
        end = text.find("\n", start + 2)
        stop = len(text) if end < 0 else end + 1
        text = text[:start] + " " * (stop - start) + text[stop:]
    return text


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 2**32 if value >= 2**31 else value


def _strtol_hex(text: str) -> int:
    text = text.lstrip(" \t\n\v\f\r")
    sign = 1
    if text[:1] in ("+", "-"):
        sign = -1 if text[0] == "-" else 1
        text = text[1:]
    if text[:2] in ("0x", "0X") and text[2:3] and text[2] in _HEX:
        text = text[2:]
    digits = ""
    for ch in text:
        if ch not in _HEX:
            break
        digits += ch
    return sign * int(digits, 16) if digits else 0


def text_to_rgb(name: str, end: Optional[str]) -> int:
    """Colour of an XPM colour spec: ``#RRGGBB`` or a colour name.

    *end* is the following word, joined to *name* for two-word names.
    Unknown names give 0; ``None`` gives -1.
    """
    if name.startswith("#"):
        return _to_int32(_strtol_hex(name[1:]))
    if end is not None:
        name = f"{name} {end}"[: _NAME_BUFFER - 1]
    color = lookup_color(name)
    return 0 if color is None else color


def _next(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"missing {what}") from None


def _header(line: str) -> List[int]:
    words = str_to_wordtab(line)
    if len(words) < 4:
        raise XpmError(f"bad XPM header: {line!r}")
    values = [_atoi(word) for word in words[:4]]
    if 0 in values:
        raise XpmError(f"bad XPM header: {line!r}")
    return values


def _atoi(word: str) -> int:
    match = re.match(r"[ \t\n\v\f\r]*([+-]?\d+)", word)
    return int(match.group(1)) if match else 0


def parse_xpm(lines: Iterable[str]) -> Image:
    """Build an image from the strings of an XPM: header, colours, pixel rows.

    Pixels whose colour is ``None`` become 0xFF000000; pixels with an
    undefined key become 0.
    """
    source = iter(lines)
    width, height, ncolors, cpp = _header(_next(source, "header"))
    first_wins = cpp > 2
    table: Dict[str, int] = {}
    for _ in range(ncolors):
        line = _next(source, "colour definition")
        words = str_to_wordtab(line[cpp:])
        try:
            index = words.index("c") + 1
        except ValueError:
            index = len(words)
        if index >= len(words):
            raise XpmError(f"colour definition without a colour: {line!r}")
        end = words[index + 1] if index + 1 < len(words) else None
        rgb = text_to_rgb(words[index], end)
        key = line[:cpp]
        if first_wins:
            table.setdefault(key, rgb)
        else:
            table[key] = rgb
    try:
        image = Image(width, height)
    except ValueError as exc:
        raise XpmError(str(exc)) from exc
    for y in range(height):
        line = _next(source, "pixel row")
        if len(line) < width * cpp:
            raise XpmError(f"pixel row {y} is too short")
        for x in range(width):
            color = table.get(line[x * cpp:(x + 1) * cpp], 0)
            if color == -1:
                color = TRANSPARENT
            image.put_pixel(x, y, color)
    return image


def xpm_from_data(data: Iterable[str]) -> Image:
    """Build an image from XPM strings given without their quotes."""
    return parse_xpm(data)


def _quoted_strings(text: str) -> Iterator[str]:
    pos = 0
    while True:
        start = text.find('"', pos)
        if start < 0:
            return
        end = text.find('"', start + 1)
        if end < 0:
            return
        yield text[start + 1:end]
        pos = end + 1


def xpm_from_file(path: Union[str, os.PathLike]) -> Image:
    """Read an XPM file and build its image."""
    try:
        with open(path, encoding="latin-1") as stream:
            text = stream.read()
    except OSError as exc:
        raise XpmError(f"cannot read {os.fspath(path)}: {exc}") from exc
    return parse_xpm(_quoted_strings(strip_comments(text)))