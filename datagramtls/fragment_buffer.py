"""Reassembly of fragmented DTLS handshake messages."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass

from datagramtls.util import big_endian_uint24, pack_uint24

RECORD_HEADER_SIZE = 13
HANDSHAKE_HEADER_SIZE = 12
CONTENT_TYPE_HANDSHAKE = 22


class FragmentBufferError(ValueError):
    """Raised when a datagram cannot be parsed into handshake fragments."""


@dataclass(frozen=True)
class _RecordHeader:
    content_type: int
    epoch: int

    @classmethod
    def parse(cls, buf: bytes) -> _RecordHeader:
        if len(buf) < RECORD_HEADER_SIZE:
            raise FragmentBufferError("buffer is too small for a record header")
        return cls(content_type=buf[0], epoch=int.from_bytes(buf[3:5], "big"))


@dataclass(frozen=True)
class _HandshakeHeader:
    type: int
    length: int
    message_sequence: int
    fragment_offset: int
    fragment_length: int

    @classmethod
    def parse(cls, buf: bytes) -> _HandshakeHeader:
        if len(buf) < HANDSHAKE_HEADER_SIZE:
            raise FragmentBufferError("buffer is too small for a handshake header")
        return cls(
            type=buf[0],
            length=big_endian_uint24(buf[1:4]),
            message_sequence=int.from_bytes(buf[4:6], "big"),
            fragment_offset=big_endian_uint24(buf[6:9]),
            fragment_length=big_endian_uint24(buf[9:12]),
        )

    def to_bytes(self) -> bytes:
        return (
            bytes([self.type])
            + pack_uint24(self.length)
            + (self.message_sequence & 0xFFFF).to_bytes(2, "big")
            + pack_uint24(self.fragment_offset)
            + pack_uint24(self.fragment_length)
        )


@dataclass(frozen=True)
class _Fragment:
    record_header: _RecordHeader
    handshake_header: _HandshakeHeader
    data: bytes


class FragmentBuffer:
    """Collects handshake fragments and hands back whole messages in sequence order."""

    def __init__(self) -> None:
        self._cache: dict[int, list[_Fragment]] = defaultdict(list)
        self.current_message_sequence = 0

    def push(self, buf: bytes) -> bool:
        """Store the handshake fragments of one record.

        Returns False when the record is not a handshake and must be handled
        elsewhere. Raises FragmentBufferError when the record is malformed.
        """
        buf = bytes(buf)
        record_header = _RecordHeader.parse(buf)
        if record_header.content_type != CONTENT_TYPE_HANDSHAKE:
            return False

        rest = buf[RECORD_HEADER_SIZE:]
        while rest:
            header = _HandshakeHeader.parse(rest)
            end = min(HANDSHAKE_HEADER_SIZE + header.length, len(rest))
            self._cache[header.message_sequence].append(
                _Fragment(record_header, header, rest[HANDSHAKE_HEADER_SIZE:end])
            )
            rest = rest[end:]
        return True

    def _assemble(self, frags: list[_Fragment]) -> bytes | None:
        parts = []
        offset = 0
        while True:
            frag = next(
                (f for f in frags if f.handshake_header.fragment_offset == offset), None
            )
            if frag is None:
                return None
            parts.append(frag.data)
            end = offset + frag.handshake_header.fragment_length
            if end == frag.handshake_header.length:
                return b"".join(parts)
            if end <= offset:
                return None
            offset = end

    def pop(self) -> tuple[bytes | None, int]:
        """Return the next complete message with its epoch, or (None, 0)."""
        frags = self._cache.get(self.current_message_sequence)
        if not frags:
            return None, 0

        body = self._assemble(frags)
        if body is None:
            return None, 0

        first = frags[0].handshake_header
        header = _HandshakeHeader(
            type=first.type,
            length=first.length,
            message_sequence=first.message_sequence,
            fragment_offset=0,
            fragment_length=first.length,
        )
        epoch = frags[0].record_header.epoch

        del self._cache[self.current_message_sequence]
        self.current_message_sequence = (self.current_message_sequence + 1) & 0xFFFF
        return header.to_bytes() + body, epoch