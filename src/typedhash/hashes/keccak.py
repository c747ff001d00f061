"""
Keccak-256 (original Keccak multirate padding, 256-bit output). Pure Python.

This is the pre-standard Keccak used by Ethereum, not hashlib's sha3_256: the
two differ only in the domain padding byte (0x01 here, 0x06 for SHA-3).
"""

from __future__ import annotations

_RATE = 136  # 1088-bit rate, 512-bit capacity
_LANE_MASK = 0xFFFFFFFFFFFFFFFF

_ROUND_CONSTANTS = (
    0x0000000000000001,
    0x0000000000008082,
    0x800000000000808A,
    0x8000000080008000,
    0x000000000000808B,
    0x0000000080000001,
    0x8000000080008081,
    0x8000000000008009,
    0x000000000000008A,
    0x0000000000000088,
    0x0000000080008009,
    0x000000008000000A,
    0x000000008000808B,
    0x800000000000008B,
    0x8000000000008089,
    0x8000000000008003,
    0x8000000000008002,
    0x8000000000000080,
    0x000000000000800A,
    0x800000008000000A,
    0x8000000080008081,
    0x8000000000008080,
    0x0000000080000001,
    0x8000000080008008,
)

# Rotation offset for lane (x, y), stored at index x + 5 * y.
_ROTATIONS = (
    0, 1, 62, 28, 27,
    36, 44, 6, 55, 20,
    3, 10, 43, 25, 39,
    41, 45, 15, 21, 8,
    18, 2, 61, 56, 14,
)  # fmt: skip

# rho+pi destination for lane (x, y): (y, 2x + 3y mod 5).
_PI_TARGETS = tuple(
    y + 5 * ((2 * x + 3 * y) % 5) for y in range(5) for x in range(5)
)
_PI_SOURCES = tuple(x + 5 * y for y in range(5) for x in range(5))


def _rol(v: int, n: int) -> int:
    if n == 0:
        return v
    return ((v << n) | (v >> (64 - n))) & _LANE_MASK


def _permute(a: list[int]) -> None:
    """Keccak-f[1600] over a flat 25-lane state, in place."""
    b = [0] * 25
    for rc in _ROUND_CONSTANTS:
        # theta
        c = [a[x] ^ a[x + 5] ^ a[x + 10] ^ a[x + 15] ^ a[x + 20] for x in range(5)]
        for x in range(5):
            d = c[(x - 1) % 5] ^ _rol(c[(x + 1) % 5], 1)
            for y in range(0, 25, 5):
                a[x + y] ^= d
        # rho + pi
        for src, dst in zip(_PI_SOURCES, _PI_TARGETS):
            b[dst] = _rol(a[src], _ROTATIONS[src])
        # chi
        for y in range(0, 25, 5):
            row = b[y : y + 5]
            for x in range(5):
                a[x + y] = row[x] ^ ((~row[(x + 1) % 5]) & row[(x + 2) % 5])
        # iota
        a[0] ^= rc


def _pad(data: bytes) -> bytes:
    padlen = _RATE - len(data) % _RATE
    if padlen == 1:
        return data + b"\x81"
    return data + b"\x01" + b"\x00" * (padlen - 2) + b"\x80"


def keccak256(data: bytes) -> bytes:
    """
    Keccak-256 hash.

    Args:
        data: Input bytes (any length).

    Returns:
        32-byte digest.
    """
    padded = _pad(bytes(data))
    state = [0] * 25
    for start in range(0, len(padded), _RATE):
        for i in range(_RATE // 8):
            off = start + 8 * i
            state[i] ^= int.from_bytes(padded[off : off + 8], "little")
        _permute(state)
    # 32 bytes is less than one rate block: the first four lanes.
    return b"".join(lane.to_bytes(8, "little") for lane in state[:4])


KECCAK256_EMPTY = keccak256(b"")

__all__: tuple[str, ...] = ("KECCAK256_EMPTY", "keccak256")
