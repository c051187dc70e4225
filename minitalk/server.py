"""Receiving messages sent bit by bit as user signals."""

from __future__ import annotations

import os
import signal
import sys
from collections.abc import Callable
from typing import BinaryIO, Optional

from minitalk.printf import printf
from minitalk.protocol import ACK_SIGNAL, DONE_SIGNAL, ONE_SIGNAL, ZERO_SIGNAL, Decoder

HEADER = b"\nClient say : "


class Server:
    """Decodes incoming bits and acknowledges each one to its sender."""

    def __init__(
        self,
        out: Optional[BinaryIO] = None,
        kill: Callable[[int, int], None] = os.kill,
    ) -> None:
        self.out = out if out is not None else sys.stdout.buffer
        self._kill = kill
        self._decoder = Decoder()

    def handle_signal(self, signum: int, sender: int) -> None:
        """Process one bit signal from ``sender``.

        Raises ConnectionError when the sender can no longer be signalled.
        """
        try:
            self._kill(sender, 0)
        except OSError as exc:
            raise ConnectionError(f"cant send sig to pid : {sender}") from exc
        if self._decoder.at_message_start:
            self.out.write(HEADER)
        byte = self._decoder.feed(signum == ONE_SIGNAL)
        if byte:
            self.out.write(bytes([byte]))
        elif byte == 0:
            self._kill(sender, DONE_SIGNAL)
        self.out.flush()
        self._kill(sender, ACK_SIGNAL)

    def run(self) -> None:
        """Announce the process id, then handle signals until interrupted."""
        printf("pid: %d", os.getpid())
        wanted = {ONE_SIGNAL, ZERO_SIGNAL}
        signal.pthread_sigmask(signal.SIG_BLOCK, wanted)
        try:
            while True:
                info = signal.sigwaitinfo(wanted)
                self.handle_signal(info.si_signo, info.si_pid)
        finally:
            signal.pthread_sigmask(signal.SIG_UNBLOCK, wanted)


def main(argv: Optional[list[str]] = None) -> int:
    """Run the server; it takes no arguments."""
    server = Server()
    try:
        server.run()
    except KeyboardInterrupt:
        return 0
    except ConnectionError as exc:
        printf("ERROR : %s\n", str(exc))
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())