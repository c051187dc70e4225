"""String helpers with NUL-terminated-string semantics carried over to ``str``."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Union

CharLike = Union[int, str]


def _as_char(c: CharLike) -> str:
    """Normalise a search character given as a code or a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        return c
    if isinstance(c, int):
        return chr(c & 0xFF)
    raise TypeError(f"expected an int or a character, not {type(c).__name__}")


def _code_at(s: str, index: int) -> int:
    """Code of ``s[index]``, or 0 where a terminating NUL would sit."""
    return ord(s[index]) if index < len(s) else 0


def strlen(s: str) -> int:
    """Number of characters in ``s``."""
    return len(s)


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy at most ``size - 1`` characters of ``src``.

    Returns the copied text and the full length of ``src``, which a caller
    compares with ``size`` to detect truncation.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    return src[: max(size - 1, 0)], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` so the result fits a buffer of ``size``.

    Returns the resulting text and the length the full concatenation would
    have had. When ``size`` is not larger than ``dst``, ``dst`` is returned
    unchanged together with ``len(src) + size``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    dst_len = len(dst)
    if size <= dst_len:
        return dst, len(src) + size
    room = size - 1 - dst_len
    return dst + src[:room], len(src) + dst_len


def strchr(s: str, c: CharLike) -> int | None:
    """Index of the first occurrence of ``c`` in ``s``, or None.

    Searching for NUL finds the terminator position, ``len(s)``.
    """
    char = _as_char(c)
    if char == "\0" and "\0" not in s:
        return len(s)
    index = s.find(char)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> int | None:
    """Index of the last occurrence of ``c`` in ``s``, or None.

    Searching for NUL finds the terminator position, ``len(s)``.
    """
    char = _as_char(c)
    if char == "\0":
        return len(s)
    index = s.rfind(char)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; the sign tells the ordering."""
    if n <= 0:
        return 0
    for index, (left, right) in enumerate(zip(s1, s2)):
        if left != right or index >= n - 1:
            return ord(left) - ord(right)
    end = min(len(s1), len(s2))
    return _code_at(s1, end) - _code_at(s2, end)


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Index of ``needle`` lying wholly within the first ``length`` characters."""
    if not needle:
        return 0
    if length < 0:
        raise ValueError("length must not be negative")
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strdup(s: str) -> str:
    """A copy of ``s``."""
    if not isinstance(s, str):
        raise TypeError(f"expected a string, not {type(s).__name__}")
    return str(s)


def substr(s: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` from ``start``; empty past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if len(s) < start:
        return ""
    return s[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """Concatenation of ``s1`` and ``s2``."""
    if s1 is None or s2 is None:
        raise TypeError("both strings are required")
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """``s`` without leading and trailing characters found in ``charset``."""
    if s is None or charset is None:
        raise TypeError("both the string and the character set are required")
    return s.strip(charset)


def split(s: str, sep: CharLike) -> list[str]:
    """Non-empty pieces of ``s`` separated by the character ``sep``."""
    if s is None:
        raise TypeError("a string is required")
    char = _as_char(sep)
    if char == "\0":
        return [s] if s else []
    return [word for word in s.split(char) if word]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """New string made of ``func(index, char)`` for each character of ``s``."""
    if s is None or func is None:
        raise TypeError("both the string and the function are required")
    return "".join(func(index, char) for index, char in enumerate(s))


def striteri(
    s: MutableSequence[str], func: Callable[[int, str], str | None]
) -> None:
    """Call ``func(index, char)`` for each item of ``s``, storing what it returns.

    A return value of None leaves the item as it was.
    """
    if s is None or func is None:
        raise TypeError("both the sequence and the function are required")
    for index, char in enumerate(s):
        replacement = func(index, char)
        if replacement is not None:
            s[index] = replacement