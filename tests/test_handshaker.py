import io

import pytest

from datagramtls.handshaker import HandshakeState, peer_role, write_key_log


def test_write_key_log_format():
    buf = io.BytesIO()
    write_key_log(buf, "LABEL", b"\xaa\xbb\xcc", b"\xdd\xee\xff")
    assert buf.getvalue() == b"LABEL aabbcc ddeeff\n"


def test_write_key_log_appends_lines():
    buf = io.BytesIO()
    write_key_log(buf, "A", b"\x01", b"\x02")
    write_key_log(buf, "B", b"\x0a", b"\x0b")
    assert buf.getvalue().splitlines() == [b"A 01 02", b"B 0a 0b"]


def test_write_key_log_swallows_write_errors():
    class FailingWriter:
        def __init__(self):
            self.calls = 0

        def write(self, data):
            self.calls += 1
            raise OSError("disk full")

    writer = FailingWriter()
    write_key_log(writer, "LABEL", b"\x00", b"\x01")
    assert writer.calls == 1


@pytest.mark.parametrize(
    "state,name",
    [
        (HandshakeState.ERRORED, "Errored"),
        (HandshakeState.PREPARING, "Preparing"),
        (HandshakeState.SENDING, "Sending"),
        (HandshakeState.WAITING, "Waiting"),
        (HandshakeState.FINISHED, "Finished"),
    ],
)
def test_state_names(state, name):
    assert str(state) == name


def test_peer_role():
    assert peer_role(True) == "client"
    assert peer_role(False) == "server"