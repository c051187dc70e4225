import io

import pytest

from minitalk.client import Client, main
from minitalk.protocol import ACK_SIGNAL, DONE_SIGNAL
from minitalk.server import HEADER, Server

SERVER_PID = 4242
CLIENT_PID = 2424


def _pair(announce=False, server_alive=True):
    received = io.BytesIO()
    notes = io.StringIO()
    peers = {}

    def server_kill(pid, sig):
        if sig:
            peers["client"].handle_signal(sig)

    server = Server(out=received, kill=server_kill)

    def client_kill(pid, sig):
        if sig == 0:
            if not server_alive:
                raise ProcessLookupError(pid)
            return
        server.handle_signal(sig, CLIENT_PID)

    client = Client(SERVER_PID, kill=client_kill, announce=announce, out=notes)
    peers["client"] = client
    return client, received, notes


def test_message_reaches_server():
    client, received, _ = _pair()
    client.send_message("hello")
    assert received.getvalue() == HEADER + b"hello"
    assert client.delivered


def test_two_messages_in_a_row():
    client, received, _ = _pair()
    client.send_message("ab")
    client.send_message("cd")
    assert received.getvalue() == HEADER + b"ab" + HEADER + b"cd"


def test_unicode_message():
    client, received, _ = _pair()
    client.send_message("ça marche")
    assert received.getvalue()[len(HEADER):].decode("utf-8") == "ça marche"


def test_announce_on_delivery():
    client, _, notes = _pair(announce=True)
    client.send_message("x")
    assert notes.getvalue() == "Message received !\n"


def test_quiet_client_says_nothing():
    client, _, notes = _pair(announce=False)
    client.send_message("x")
    assert notes.getvalue() == ""


def test_unreachable_server_raises():
    client, received, _ = _pair(server_alive=False)
    with pytest.raises(ConnectionError, match=str(SERVER_PID)):
        client.send_message("x")
    assert received.getvalue() == b""


def test_handle_signal_flags():
    client = Client(SERVER_PID, kill=lambda pid, sig: None)
    client.handle_signal(ACK_SIGNAL)
    assert not client.delivered
    client.handle_signal(DONE_SIGNAL)
    assert client.delivered


def test_main_usage(capsys):
    assert main(["only-one"]) == 1
    assert capsys.readouterr().out.startswith("Usage : ")


def test_main_invalid_pid(capsys):
    assert main(["abc", "hello"]) == 1
    assert capsys.readouterr().out == "abc is an invalid pid\n"


def test_main_missing_process(capsys):
    assert main(["--quiet", "2147483000", "hello"]) == 1
    assert capsys.readouterr().out == "ERROR : cant send sig to pid : 2147483000\n"