"""Handshake state names and key-log helpers."""

from __future__ import annotations

import logging
import threading
from enum import IntEnum
from typing import BinaryIO, Dict, Optional

_log = logging.getLogger(__name__)
_key_log_lock = threading.Lock()

_ROLE_NAMES: Dict[bool, str] = {True: "client", False: "server"}


class HandshakeState(IntEnum):
    """States of the handshake retransmission state machine."""

    ERRORED = 0
    PREPARING = 1
    SENDING = 2
    WAITING = 3
    FINISHED = 4

    def __str__(self) -> str:
        return self.name.capitalize()


def peer_role(is_client: bool) -> str:
    """Return "client" or "server" for log messages."""
    return _ROLE_NAMES[bool(is_client)]


def write_key_log(
    writer: Optional[BinaryIO], label: str, client_random: bytes, secret: bytes
) -> None:
    """Append one NSS key-log line to ``writer``; do nothing without a writer.

    Write failures are logged and otherwise ignored.
    """
    if writer is None:
        return
    line = f"{label} {bytes(client_random).hex()} {bytes(secret).hex()}\n".encode()
    with _key_log_lock:
        try:
            writer.write(line)
        except OSError as exc:
            _log.debug("failed to write key log file: %s", exc)