"""Sending a message to a server as a stream of user signals."""

from __future__ import annotations

import os
import signal
import sys
import time
from collections.abc import Callable
from typing import Optional, TextIO, Union

from minitalk.printf import printf
from minitalk.protocol import (
    ACK_SIGNAL,
    BIT_SIGNALS,
    DONE_SIGNAL,
    encode_message,
    parse_pid,
)

USAGE = "Usage : client [--quiet] <pid> <string to send>\n"


class Client:
    """Sends one bit at a time, waiting for the server to acknowledge each."""

    def __init__(
        self,
        pid: int,
        *,
        kill: Callable[[int, int], None] = os.kill,
        announce: bool = False,
        out: Optional[TextIO] = None,
        interval: float = 0.00001,
    ) -> None:
        self.pid = pid
        self.announce = announce
        self.out = out
        self.interval = interval
        self.delivered = False
        self._kill = kill
        self._acked = False

    def handle_signal(self, signum: int) -> None:
        """React to an acknowledgement or to the end-of-message signal."""
        if signum == ACK_SIGNAL:
            self._acked = True
        elif signum == DONE_SIGNAL:
            self.delivered = True
            if self.announce:
                out = self.out if self.out is not None else sys.stdout
                out.write("Message received !\n")
                out.flush()

    def send_message(self, text: Union[str, bytes]) -> None:
        """Send ``text`` and return once the server confirms it.

        Raises ConnectionError when the server cannot be signalled.
        """
        self.delivered = False
        for bit in encode_message(text):
            if self.delivered:
                break
            try:
                self._kill(self.pid, 0)
            except OSError as exc:
                raise ConnectionError(f"cant send sig to pid : {self.pid}") from exc
            self._acked = False
            self._kill(self.pid, BIT_SIGNALS[bit])
            while not self._acked and not self.delivered:
                time.sleep(self.interval)
        while not self.delivered:
            time.sleep(self.interval)


def main(argv: Optional[list[str]] = None) -> int:
    """Send the message given on the command line to the server's pid."""
    args = list(sys.argv[1:] if argv is None else argv)
    announce = True
    if args and args[0] == "--quiet":
        announce = False
        args = args[1:]
    if len(args) != 2:
        printf(USAGE)
        return 1
    try:
        pid = parse_pid(args[0])
    except ValueError:
        printf("%s is an invalid pid\n", args[0])
        return 1
    client = Client(pid, announce=announce)

    def _on_signal(signum: int, _frame: object) -> None:
        client.handle_signal(signum)

    previous = {
        signum: signal.signal(signum, _on_signal) for signum in (ACK_SIGNAL, DONE_SIGNAL)
    }
    try:
        client.send_message(args[1])
    except ConnectionError:
        printf("ERROR : cant send sig to pid : %d\n", pid)
        return 1
    finally:
        for signum, handler in previous.items():
            signal.signal(signum, handler)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())