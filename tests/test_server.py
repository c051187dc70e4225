import io

import pytest

from minitalk.protocol import ACK_SIGNAL, BIT_SIGNALS, DONE_SIGNAL, encode_message
from minitalk.server import HEADER, Server

SENDER = 4242


class Recorder:
    def __init__(self, alive=True):
        self.calls = []
        self.alive = alive

    def __call__(self, pid, sig):
        if sig == 0 and not self.alive:
            raise ProcessLookupError(pid)
        self.calls.append((pid, sig))


def _send(server, text):
    for bit in encode_message(text):
        server.handle_signal(BIT_SIGNALS[bit], SENDER)


def test_message_written_after_header():
    out = io.BytesIO()
    server = Server(out=out, kill=Recorder())
    _send(server, "Hi")
    assert out.getvalue() == HEADER + b"Hi"
    assert HEADER == b"\nClient say : "


def test_every_bit_acknowledged_and_end_signalled():
    recorder = Recorder()
    server = Server(out=io.BytesIO(), kill=recorder)
    bits = encode_message("ok")
    _send(server, "ok")
    acks = [call for call in recorder.calls if call == (SENDER, ACK_SIGNAL)]
    done = [call for call in recorder.calls if call == (SENDER, DONE_SIGNAL)]
    probes = [call for call in recorder.calls if call == (SENDER, 0)]
    assert len(acks) == len(bits)
    assert len(probes) == len(bits)
    assert len(done) == 1
    assert recorder.calls[-2:] == [(SENDER, DONE_SIGNAL), (SENDER, ACK_SIGNAL)]


def test_each_message_gets_its_own_header():
    out = io.BytesIO()
    server = Server(out=out, kill=Recorder())
    _send(server, "one")
    _send(server, "two")
    assert out.getvalue() == HEADER + b"one" + HEADER + b"two"


def test_utf8_bytes_pass_through():
    out = io.BytesIO()
    server = Server(out=out, kill=Recorder())
    _send(server, "héhé")
    assert out.getvalue()[len(HEADER):].decode("utf-8") == "héhé"


def test_unreachable_sender_raises():
    out = io.BytesIO()
    server = Server(out=out, kill=Recorder(alive=False))
    with pytest.raises(ConnectionError, match=str(SENDER)):
        server.handle_signal(BIT_SIGNALS[1], SENDER)
    assert out.getvalue() == b""