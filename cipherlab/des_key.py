"""DES key schedule: PC-1, the rotation schedule and PC-2 round keys."""

from __future__ import annotations

import string
from typing import Sequence

PC1 = (
    57, 49, 41, 33, 25, 17, 9,
    1, 58, 50, 42, 34, 26, 18,
    10, 2, 59, 51, 43, 35, 27,
    19, 11, 3, 60, 52, 44, 36,
    63, 55, 47, 39, 31, 23, 15,
    7, 62, 54, 46, 38, 30, 22,
    14, 6, 61, 53, 45, 37, 29,
    21, 13, 5, 28, 20, 12, 4,
)

PC2 = (
    14, 17, 11, 24, 1, 5,
    3, 28, 15, 6, 21, 10,
    23, 19, 12, 4, 26, 8,
    16, 7, 27, 20, 13, 2,
    41, 52, 31, 37, 47, 55,
    30, 40, 51, 45, 33, 48,
    44, 49, 39, 56, 34, 53,
    46, 42, 50, 36, 29, 32,
)

SHIFTS = (1, 1, 2, 2, 2, 2, 2, 2, 1, 2, 2, 2, 2, 2, 2, 1)

_HALF_BITS = 28


def hex_to_bits(text: str) -> str:
    """Return the bit string for the hex digits of text; other characters are skipped."""
    return "".join(f"{int(ch, 16):04b}" for ch in text if ch in string.hexdigits)


def bits_to_hex(bits: str) -> str:
    """Return the upper-case hex digits for a bit string whose length is a multiple of 4."""
    if len(bits) % 4:
        raise ValueError(f"bit string length must be a multiple of 4, got {len(bits)}")
    if set(bits) - {"0", "1"}:
        raise ValueError(f"invalid bit string: {bits!r}")
    return "".join(f"{int(bits[i : i + 4], 2):X}" for i in range(0, len(bits), 4))


def permute(bits: str, table: Sequence[int]) -> str:
    """Pick bits of `bits` in the order of the 1-based positions in `table`."""
    try:
        return "".join(bits[position - 1] for position in table)
    except IndexError:
        raise ValueError("permutation table refers past the end of the input") from None


def key_halves(key_hex: str) -> tuple[str, str]:
    """Apply PC-1 to a 64-bit hex key and return the halves (C0, D0)."""
    key = hex_to_bits(key_hex)
    if len(key) != 64:
        raise ValueError(f"key must be 64 bits, got {len(key)}")
    permuted = permute(key, PC1)
    return permuted[:_HALF_BITS], permuted[_HALF_BITS:]


def left_rotate(bits: str, amount: int) -> str:
    """Rotate a bit string left by `amount` places."""
    if not bits:
        raise ValueError("cannot rotate an empty bit string")
    amount %= len(bits)
    return bits[amount:] + bits[:amount]


def shift_schedule(c0: str, d0: str) -> list[tuple[str, str]]:
    """Return (Ci, Di) for rounds 1 to 16."""
    if len(c0) != _HALF_BITS or len(d0) != _HALF_BITS:
        raise ValueError("C0 and D0 must be 28 bits each")
    schedule: list[tuple[str, str]] = []
    c, d = c0, d0
    for shift in SHIFTS:
        c, d = left_rotate(c, shift), left_rotate(d, shift)
        schedule.append((c, d))
    return schedule


def round_keys(c0: str, d0: str) -> list[str]:
    """Return the 16 round keys K1..K16 as 12-digit hex strings."""
    return [bits_to_hex(permute(c + d, PC2)) for c, d in shift_schedule(c0, d0)]