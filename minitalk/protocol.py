"""Bit-level message encoding over the two user signals."""

from __future__ import annotations

import signal
from typing import Optional, Union

from minitalk.chars import atoi

BITS_PER_CHAR = 8
ONE_SIGNAL = signal.SIGUSR1
ZERO_SIGNAL = signal.SIGUSR2
ACK_SIGNAL = signal.SIGUSR1
DONE_SIGNAL = signal.SIGUSR2
# Indexed by bit value.
BIT_SIGNALS = (ZERO_SIGNAL, ONE_SIGNAL)


class Decoder:
    """Rebuilds bytes from bits received most significant first."""

    def __init__(self) -> None:
        self._value = 0
        self._count = 0
        self._last = 0

    @property
    def at_message_start(self) -> bool:
        """True when no bits are pending and the last byte ended a message."""
        return self._count == 0 and self._last == 0

    def feed(self, bit: Union[int, bool]) -> Optional[int]:
        """Take one bit; return the byte it completes, otherwise None."""
        self._value = (self._value << 1) | (1 if bit else 0)
        self._count += 1
        if self._count < BITS_PER_CHAR:
            return None
        byte = self._value
        self._value = 0
        self._count = 0
        self._last = byte
        return byte


def parse_pid(text: str) -> int:
    """Process id written in ``text``; text that reads as 0 is rejected."""
    pid = atoi(text)
    if not pid:
        raise ValueError(f"{text} is an invalid pid")
    return pid


def encode_char(char: Union[int, str]) -> list[int]:
    """The eight bits of one byte, most significant first."""
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError("expected a single character")
        char = ord(char)
    if not isinstance(char, int):
        raise TypeError(f"expected an int or a character, not {type(char).__name__}")
    if not 0 <= char <= 0xFF:
        raise ValueError(f"{char} does not fit in one byte")
    return [(char >> shift) & 1 for shift in range(BITS_PER_CHAR - 1, -1, -1)]


def encode_message(text: Union[str, bytes]) -> list[int]:
    """Bits of every byte of ``text`` followed by a terminating NUL byte."""
    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    if b"\0" in data:
        raise ValueError("message must not contain NUL characters")
    bits: list[int] = []
    for byte in data + b"\0":
        bits.extend(encode_char(byte))
    return bits