import threading
import time

import pytest

from datagramtls.dpipe import PipeAddr, pipe

TEST_DATA = b"\x01\x02"


@pytest.mark.parametrize("direction", ["AtoB", "BtoA"])
def test_pipe_transfers_datagram(direction):
    ca, cb = pipe()
    sender, receiver = (ca, cb) if direction == "AtoB" else (cb, ca)
    assert sender.write(TEST_DATA) == len(TEST_DATA)
    assert receiver.read(4) == TEST_DATA


def test_pipe_close_semantics():
    ca, cb = pipe()
    ca.close()
    with pytest.raises(BrokenPipeError):
        ca.write(TEST_DATA)

    # The other side stays writable.
    assert cb.write(TEST_DATA) == len(TEST_DATA)

    with pytest.raises(EOFError):
        ca.read(4)

    # The other side stays readable and blocks.
    outcome = []

    def reader():
        try:
            outcome.append(cb.read(4))
        except EOFError as exc:
            outcome.append(exc)

    thread = threading.Thread(target=reader)
    thread.start()
    thread.join(0.01)
    assert thread.is_alive()
    assert outcome == []

    cb.close()
    thread.join(2)
    assert not thread.is_alive()
    assert len(outcome) == 1
    assert isinstance(outcome[0], EOFError)


def test_datagram_boundaries_are_kept():
    ca, cb = pipe()
    ca.write(b"abc")
    ca.write(b"de")
    assert cb.read() == b"abc"
    assert cb.read() == b"de"


def test_read_truncates_to_size():
    ca, cb = pipe()
    ca.write(b"abcdef")
    assert cb.read(3) == b"abc"


def test_read_deadline_exceeded():
    _, cb = pipe()
    cb.set_read_deadline(time.monotonic() + 0.02)
    with pytest.raises(TimeoutError):
        cb.read()


def test_read_deadline_cleared():
    ca, cb = pipe()
    cb.set_read_deadline(time.monotonic() - 1)
    with pytest.raises(TimeoutError):
        cb.read()
    cb.set_read_deadline(None)
    ca.write(b"x")
    assert cb.read() == b"x"


def test_write_deadline_discards_pending_data():
    ca, cb = pipe()
    ca.write(b"queued")
    ca.set_write_deadline(time.monotonic() - 1)
    with pytest.raises(TimeoutError):
        ca.write(b"late")
    cb.set_read_deadline(time.monotonic() + 0.02)
    with pytest.raises(TimeoutError):
        cb.read()


def test_set_deadline_applies_to_both():
    ca, _ = pipe()
    ca.set_deadline(time.monotonic() - 1)
    with pytest.raises(TimeoutError):
        ca.read()
    with pytest.raises(TimeoutError):
        ca.write(b"x")


def test_write_copies_data():
    ca, cb = pipe()
    buf = bytearray(b"abc")
    ca.write(buf)
    buf[0] = ord("z")
    assert cb.read() == b"abc"


def test_addresses():
    ca, _ = pipe()
    assert ca.local_addr == PipeAddr()
    assert ca.remote_addr.network == "pipe"
    assert str(ca.local_addr) == ":1"


def test_context_manager_closes():
    ca, cb = pipe()
    with ca:
        ca.write(b"x")
    with pytest.raises(BrokenPipeError):
        ca.write(b"y")
    assert cb.read() == b"x"