"""Small byte-packing helpers shared across the package."""

from __future__ import annotations

_UINT24_MASK = (1 << 24) - 1
_UINT48_MASK = (1 << 48) - 1


def big_endian_uint24(raw: bytes) -> int:
    """Decode the first three bytes of ``raw`` as a big-endian integer.

    Returns 0 when fewer than three bytes are given.
    """
    if len(raw) < 3:
        return 0
    return int.from_bytes(raw[:3], "big")


def pack_uint24(value: int) -> bytes:
    """Encode the low 24 bits of ``value`` as three big-endian bytes."""
    return (value & _UINT24_MASK).to_bytes(3, "big")


def pack_uint48(value: int) -> bytes:
    """Encode the low 48 bits of ``value`` as six big-endian bytes."""
    return (value & _UINT48_MASK).to_bytes(6, "big")