"""Storage of handshake messages for transcript hashing."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Optional


class HandshakeType(IntEnum):
    """Handshake message types."""

    HELLO_REQUEST = 0
    CLIENT_HELLO = 1
    SERVER_HELLO = 2
    HELLO_VERIFY_REQUEST = 3
    CERTIFICATE = 11
    SERVER_KEY_EXCHANGE = 12
    CERTIFICATE_REQUEST = 13
    SERVER_HELLO_DONE = 14
    CERTIFICATE_VERIFY = 15
    CLIENT_KEY_EXCHANGE = 16
    FINISHED = 20


@dataclass(frozen=True)
class PullRule:
    """Selects cached messages by type, epoch and sender."""

    typ: int
    epoch: int
    is_client: bool
    optional: bool = False


@dataclass(frozen=True)
class CacheItem:
    """One cached handshake message."""

    typ: int
    is_client: bool
    epoch: int
    message_sequence: int
    data: bytes


def _transcript_rules(epoch: int) -> tuple[PullRule, ...]:
    return (
        PullRule(HandshakeType.CLIENT_HELLO, epoch, True),
        PullRule(HandshakeType.SERVER_HELLO, epoch, False),
        PullRule(HandshakeType.CERTIFICATE, epoch, False),
        PullRule(HandshakeType.SERVER_KEY_EXCHANGE, epoch, False),
        PullRule(HandshakeType.CERTIFICATE_REQUEST, epoch, False),
        PullRule(HandshakeType.SERVER_HELLO_DONE, epoch, False),
        PullRule(HandshakeType.CERTIFICATE, epoch, True),
        PullRule(HandshakeType.CLIENT_KEY_EXCHANGE, epoch, True),
    )


class HandshakeCache:
    """Thread-safe cache of handshake messages sent and received."""

    def __init__(self) -> None:
        self._items: list[CacheItem] = []
        self._lock = threading.Lock()

    def push(self, data: bytes, epoch: int, message_sequence: int, typ: int, is_client: bool) -> bool:
        """Store a message; return False if one from the same side and sequence exists."""
        with self._lock:
            if any(
                item.message_sequence == message_sequence and item.is_client == is_client
                for item in self._items
            ):
                return False
            self._items.append(CacheItem(typ, is_client, epoch, message_sequence, bytes(data)))
            return True

    def _match(self, rule: PullRule) -> Optional[CacheItem]:
        found: Optional[CacheItem] = None
        for item in self._items:
            if item.typ == rule.typ and item.is_client == rule.is_client and item.epoch == rule.epoch:
                if found is None or found.message_sequence < item.message_sequence:
                    found = item
        return found

    def pull(self, *rules: PullRule) -> list[Optional[CacheItem]]:
        """Return, for each rule, the matching message with the highest sequence, or None."""
        with self._lock:
            return [self._match(rule) for rule in rules]

    def pull_and_merge(self, *rules: PullRule) -> bytes:
        """Concatenate the data of every message the rules select."""
        return b"".join(item.data for item in self.pull(*rules) if item is not None)

    def session_hash(self, hash_func: Callable, epoch: int, *additional: bytes) -> bytes:
        """Hash the handshake transcript up to ClientKeyExchange plus ``additional``."""
        merged = self.pull_and_merge(*_transcript_rules(epoch)) + b"".join(additional)
        digest = hash_func()
        digest.update(merged)
        return digest.digest()