"""String helpers: splitting, searching, joining, bounded copies and trimming."""

from __future__ import annotations

from typing import Callable, Optional, Tuple, Union

CharLike = Union[int, str]


def _char(ch: CharLike) -> str:
    """Return *ch* as a one-character string; an int is truncated to a byte."""
    if isinstance(ch, str):
        if len(ch) != 1:
            raise ValueError(f"expected a single character, got {ch!r}")
        return ch
    if isinstance(ch, bool) or not isinstance(ch, int):
        raise TypeError(f"expected int or str, got {type(ch).__name__}")
    return chr(ch & 0xFF)


def _check_size(size: int) -> None:
    if size < 0:
        raise ValueError(f"size must not be negative: {size}")


def split(text: str, sep: CharLike) -> list[str]:
    """Split *text* on the character *sep*, dropping empty words."""
    separator = _char(sep)
    return [word for word in text.split(separator) if word]


def strchr(text: str, ch: CharLike) -> Optional[int]:
    """Index of the first *ch* in *text*, or None.

    Searching for the NUL character gives the end of the text.
    """
    target = _char(ch)
    if target == "\0":
        index = text.find(target)
        return len(text) if index < 0 else index
    index = text.find(target)
    return None if index < 0 else index


def strrchr(text: str, ch: CharLike) -> Optional[int]:
    """Index of the last *ch* in *text*, or None.

    Searching for the NUL character gives the end of the text.
    """
    target = _char(ch)
    if target == "\0":
        return len(text)
    index = text.rfind(target)
    return None if index < 0 else index


def strjoin(first: str, second: str) -> str:
    """Concatenate two strings."""
    if not isinstance(first, str) or not isinstance(second, str):
        raise TypeError("both arguments must be strings")
    return first + second


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy at most ``size - 1`` characters of *src*.

    Returns the copy and the full length of *src*, so a result length not
    below *size* signals truncation. With a size of 0 nothing is copied.
    """
    _check_size(size)
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Append *src* to *dest* within a total buffer of *size* characters.

    Returns the new string and the length it tried to create. If *dest*
    already fills the buffer, it is returned unchanged with ``size + len(src)``.
    """
    _check_size(size)
    dlen = len(dest)
    slen = len(src)
    if dlen >= size:
        return dest, size + slen
    room = size - 1 - dlen
    return dest + src[:room], dlen + slen


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for every character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(text: str, func: Callable[[int, str], Optional[str]]) -> str:
    """Call ``func(index, char)`` on every character in order.

    A character is replaced by what *func* returns, or kept when it
    returns None. The resulting string is returned.
    """
    result = []
    for index, ch in enumerate(text):
        replacement = func(index, ch)
        result.append(ch if replacement is None else replacement)
    return "".join(result)


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most *n* characters; return the difference at the first mismatch."""
    _check_size(n)
    for index in range(n):
        left = ord(first[index]) if index < len(first) else 0
        right = ord(second[index]) if index < len(second) else 0
        if left != right or left == 0:
            return left - right
    return 0


def strnstr(haystack: str, needle: str, size: int) -> Optional[int]:
    """Index of *needle* within the first *size* characters of *haystack*, or None."""
    _check_size(size)
    if not needle:
        return 0
    index = haystack[:size].find(needle)
    return None if index < 0 else index


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in *charset* from both ends of *text*."""
    if not isinstance(text, str) or not isinstance(charset, str):
        raise TypeError("both arguments must be strings")
    return text.strip(charset) if charset else text


def substr(text: str, start: int, length: int) -> str:
    """Up to *length* characters of *text* starting at *start*."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]