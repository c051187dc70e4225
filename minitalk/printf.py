"""A small printf-style formatter supporting c, s, p, d, i, u, x, X and %%."""

from __future__ import annotations

import sys
from dataclasses import dataclass, replace
from typing import Any, Iterator

_SPEC_CHARS = "0123456789# +-."
_FLAG_CHARS = "# +0-."
_DIGITS = "0123456789"
_MISSING = object()


@dataclass
class FormatOptions:
    """Flags, widths and precision parsed from one conversion specification."""

    sharp: bool = False
    space: bool = False
    plus: bool = False
    min_width: int = 0
    minus: bool = False
    dot: bool = False
    precision: int = 0
    offset: int = 0
    zero: bool = False
    zero_offset: int = 0

    @property
    def pad_char(self) -> str:
        """Character used to fill the field up to its width."""
        if not self.zero:
            return " "
        if self.dot and self.zero_offset > self.precision:
            return " "
        return "0"

    @property
    def field_width(self) -> int:
        """Width the numeric field is filled to."""
        width = self.zero_offset if self.zero else self.min_width
        return max(width, self.precision)


def _read_number(fmt: str, pos: int) -> tuple[int, int]:
    start = pos
    while pos < len(fmt) and fmt[pos] in _DIGITS:
        pos += 1
    return (int(fmt[start:pos]) if pos > start else 0), pos


def _parse_spec(fmt: str, pos: int) -> tuple[FormatOptions, str, int]:
    """Parse the specification starting just after a '%'."""
    opts = FormatOptions()
    while pos < len(fmt) and fmt[pos] in _SPEC_CHARS:
        flag = fmt[pos]
        if flag in _FLAG_CHARS:
            pos += 1
            if flag == "#":
                opts.sharp = True
            elif flag == " ":
                opts.space = True
            elif flag == "+":
                opts.plus = True
            elif flag == "0":
                opts.zero = True
                opts.zero_offset, pos = _read_number(fmt, pos)
            elif flag == "-":
                opts.minus = True
                opts.offset, pos = _read_number(fmt, pos)
            else:
                opts.dot = True
                opts.precision, pos = _read_number(fmt, pos)
        else:
            opts.min_width, pos = _read_number(fmt, pos)
    conversion = fmt[pos] if pos < len(fmt) else ""
    return opts, conversion, pos + 1


def _number_text(value: int, text: str, length: int, width: int, opts: FormatOptions) -> str:
    empty_precision = value == 0 and opts.dot and not opts.precision
    if value == 0 and width and width < length:
        return " "
    if empty_precision and width >= length:
        return " "
    if empty_precision:
        return ""
    return text


def _format_char(char: str, opts: FormatOptions) -> str:
    return (" " * (opts.min_width - 1) + char).ljust(opts.offset)


def _format_str(value: str | None, opts: FormatOptions) -> str:
    text = "(null)" if value is None else value
    shown = text[: opts.precision] if opts.dot else text
    return (" " * (opts.min_width - len(text)) + shown).ljust(opts.offset)


def _format_pointer(address: int, opts: FormatOptions) -> str:
    digits = format(address, "x")
    padding = " " * (opts.min_width - len(digits) - 2)
    return (padding + "0x" + digits).ljust(opts.offset)


def _format_signed(value: int, opts: FormatOptions) -> str:
    length = len(str(value))
    len_prec = max(length, opts.precision)
    if value < 0 and opts.zero_offset > length and opts.precision > length:
        len_prec += 1
    if value < 0 and opts.dot and opts.precision < opts.zero_offset:
        length += 1
    width = opts.field_width
    out = ""
    if opts.pad_char == " ":
        out += " " * (width - len_prec)
    if value < 0:
        out += "-"
        value = -value
        length -= 2 if opts.dot else 1
    elif opts.space and not opts.plus and not opts.dot:
        out += " "
    elif opts.plus and not opts.dot:
        out += "+"
    out += "0" * (width - length - len(out))
    out += _number_text(value, str(value), length, width, opts)
    return out.ljust(opts.offset)


def _format_unsigned(value: int, digits: str, opts: FormatOptions, prefix: str = "") -> str:
    length = len(digits)
    len_prec = max(length, opts.precision)
    width = opts.field_width
    out = opts.pad_char * (width - len_prec)
    out += "0" * (width - length - len(out))
    if prefix and value != 0:
        out += prefix
    out += _number_text(value, digits, length, width, opts)
    return out.ljust(opts.offset)


def _next_arg(args: Iterator[Any]) -> Any:
    value = next(args, _MISSING)
    if value is _MISSING:
        raise TypeError("not enough arguments for format string")
    return value


def _int_arg(args: Iterator[Any], conversion: str) -> int:
    value = _next_arg(args)
    if not isinstance(value, int):
        raise TypeError(f"%{conversion} requires an integer, not {type(value).__name__}")
    return value


def _to_int32(value: int) -> int:
    return ((value + 2**31) % 2**32) - 2**31


def _convert(conversion: str, opts: FormatOptions, args: Iterator[Any]) -> str:
    if conversion == "c":
        value = _next_arg(args)
        if isinstance(value, int):
            value = chr(value & 0xFF)
        elif not (isinstance(value, str) and len(value) == 1):
            raise TypeError("%c requires an integer or a single character")
        return _format_char(value, opts)
    if conversion == "s":
        value = _next_arg(args)
        if value is not None and not isinstance(value, str):
            raise TypeError(f"%s requires a string, not {type(value).__name__}")
        return _format_str(value, opts)
    if conversion == "p":
        value = _next_arg(args)
        if value is None:
            value = 0
        elif not isinstance(value, int):
            raise TypeError("%p requires an integer address or None")
        return _format_pointer(value & 0xFFFFFFFFFFFFFFFF, opts)
    if conversion in ("d", "i"):
        return _format_signed(_to_int32(_int_arg(args, conversion)), replace(opts))
    if conversion == "u":
        value = _int_arg(args, conversion) & 0xFFFFFFFF
        return _format_unsigned(value, str(value), opts)
    if conversion in ("x", "X"):
        value = _int_arg(args, conversion) & 0xFFFFFFFF
        upper = conversion == "X"
        digits = format(value, "X" if upper else "x")
        prefix = ("0X" if upper else "0x") if opts.sharp else ""
        return _format_unsigned(value, digits, opts, prefix)
    if conversion == "%":
        return "%"
    return ""


def sprintf(fmt: str, *args: Any) -> str:
    """Format ``args`` according to ``fmt`` and return the result."""
    remaining = iter(args)
    pieces: list[str] = []
    pos = 0
    while pos < len(fmt):
        marker = fmt.find("%", pos)
        if marker < 0:
            pieces.append(fmt[pos:])
            break
        pieces.append(fmt[pos:marker])
        opts, conversion, pos = _parse_spec(fmt, marker + 1)
        pieces.append(_convert(conversion, opts, remaining))
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = sprintf(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)