"""An in-memory pipe that carries whole datagrams between two endpoints."""

from __future__ import annotations

import threading
import time
from collections import deque
from dataclasses import dataclass

_CHANNEL_CAPACITY = 1000


@dataclass(frozen=True)
class PipeAddr:
    """Address of either end of an in-memory pipe."""

    network: str = "pipe"

    def __str__(self) -> str:
        return ":1"


class DatagramConn:
    """One end of an in-memory datagram pipe.

    Closing one end does not affect the other. Deadlines are absolute
    ``time.monotonic()`` timestamps, or ``None`` for no deadline.
    """

    def __init__(self, cond: threading.Condition, inbox: deque, outbox: deque) -> None:
        self._cond = cond
        self._inbox = inbox
        self._outbox = outbox
        self._closed = False
        self._read_deadline: float | None = None
        self._write_deadline: float | None = None

    @property
    def local_addr(self) -> PipeAddr:
        return PipeAddr()

    @property
    def remote_addr(self) -> PipeAddr:
        return PipeAddr()

    @staticmethod
    def _remaining(deadline: float | None) -> float | None:
        if deadline is None:
            return None
        return deadline - time.monotonic()

    def read(self, size: int = 65536) -> bytes:
        """Receive one datagram, truncated to ``size`` bytes.

        Raises EOFError when this end is closed and TimeoutError when the
        read deadline passes.
        """
        with self._cond:
            while True:
                if self._closed:
                    raise EOFError("pipe closed")
                remaining = self._remaining(self._read_deadline)
                if remaining is not None and remaining <= 0:
                    raise TimeoutError("read deadline exceeded")
                if self._inbox:
                    datagram = self._inbox.popleft()
                    self._cond.notify_all()
                    return datagram[:size]
                self._cond.wait(remaining)

    def write(self, data: bytes) -> int:
        """Send ``data`` as one datagram and return its length.

        Raises BrokenPipeError when this end is closed and TimeoutError when
        the write deadline passes, in which case unsent data is discarded.
        """
        payload = bytes(data)
        with self._cond:
            while True:
                if self._closed:
                    raise BrokenPipeError("pipe closed")
                remaining = self._remaining(self._write_deadline)
                if remaining is not None and remaining <= 0:
                    self._outbox.clear()
                    self._cond.notify_all()
                    raise TimeoutError("write deadline exceeded")
                if len(self._outbox) < _CHANNEL_CAPACITY:
                    self._outbox.append(payload)
                    self._cond.notify_all()
                    return len(payload)
                self._cond.wait(remaining)

    def close(self) -> None:
        """Close this end; further reads and writes on it fail."""
        with self._cond:
            self._closed = True
            self._cond.notify_all()

    def set_deadline(self, deadline: float | None) -> None:
        """Set both the read and the write deadline."""
        with self._cond:
            self._read_deadline = deadline
            self._write_deadline = deadline
            self._cond.notify_all()

    def set_read_deadline(self, deadline: float | None) -> None:
        with self._cond:
            self._read_deadline = deadline
            self._cond.notify_all()

    def set_write_deadline(self, deadline: float | None) -> None:
        with self._cond:
            self._write_deadline = deadline
            self._cond.notify_all()

    def __enter__(self) -> DatagramConn:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def pipe() -> tuple[DatagramConn, DatagramConn]:
    """Create a connected pair of in-memory datagram endpoints."""
    cond = threading.Condition()
    a_to_b: deque = deque()
    b_to_a: deque = deque()
    return DatagramConn(cond, b_to_a, a_to_b), DatagramConn(cond, a_to_b, b_to_a)