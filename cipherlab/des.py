"""DES round building blocks: IP, expansion, S-boxes, P-box, the Feistel step and IP^-1.

Bit strings are ``str`` values made of the characters ``"0"`` and ``"1"``.
"""

from __future__ import annotations

from cipherlab.des_key import bits_to_hex, hex_to_bits, permute

IP = (
    58, 50, 42, 34, 26, 18, 10, 2,
    60, 52, 44, 36, 28, 20, 12, 4,
    62, 54, 46, 38, 30, 22, 14, 6,
    64, 56, 48, 40, 32, 24, 16, 8,
    57, 49, 41, 33, 25, 17, 9, 1,
    59, 51, 43, 35, 27, 19, 11, 3,
    61, 53, 45, 37, 29, 21, 13, 5,
    63, 55, 47, 39, 31, 23, 15, 7,
)

IP_INV = (
    40, 8, 48, 16, 56, 24, 64, 32,
    39, 7, 47, 15, 55, 23, 63, 31,
    38, 6, 46, 14, 54, 22, 62, 30,
    37, 5, 45, 13, 53, 21, 61, 29,
    36, 4, 44, 12, 52, 20, 60, 28,
    35, 3, 43, 11, 51, 19, 59, 27,
    34, 2, 42, 10, 50, 18, 58, 26,
    33, 1, 41, 9, 49, 17, 57, 25,
)

E = (
    32, 1, 2, 3, 4, 5,
    4, 5, 6, 7, 8, 9,
    8, 9, 10, 11, 12, 13,
    12, 13, 14, 15, 16, 17,
    16, 17, 18, 19, 20, 21,
    20, 21, 22, 23, 24, 25,
    24, 25, 26, 27, 28, 29,
    28, 29, 30, 31, 32, 1,
)

P = (
    16, 7, 20, 21, 29, 12, 28, 17,
    1, 15, 23, 26, 5, 18, 31, 10,
    2, 8, 24, 14, 32, 27, 3, 9,
    19, 13, 30, 6, 22, 11, 4, 25,
)

SBOXES = (
    (
        (14, 4, 13, 1, 2, 15, 11, 8, 3, 10, 6, 12, 5, 9, 0, 7),
        (0, 15, 7, 4, 14, 2, 13, 1, 10, 6, 12, 11, 9, 5, 3, 8),
        (4, 1, 14, 8, 13, 6, 2, 11, 15, 12, 9, 7, 3, 10, 5, 0),
        (15, 12, 8, 2, 4, 9, 1, 7, 5, 11, 3, 14, 10, 0, 6, 13),
    ),
    (
        (15, 1, 8, 14, 6, 11, 3, 4, 9, 7, 2, 13, 12, 0, 5, 10),
        (3, 13, 4, 7, 15, 2, 8, 14, 12, 0, 1, 10, 6, 9, 11, 5),
        (0, 14, 7, 11, 10, 4, 13, 1, 5, 8, 12, 6, 9, 3, 2, 15),
        (13, 8, 10, 1, 3, 15, 4, 2, 11, 6, 7, 12, 0, 5, 14, 9),
    ),
    (
        (10, 0, 9, 14, 6, 3, 15, 5, 1, 13, 12, 7, 11, 4, 2, 8),
        (13, 7, 0, 9, 3, 4, 6, 10, 2, 8, 5, 14, 12, 11, 15, 1),
        (13, 6, 4, 9, 8, 15, 3, 0, 11, 1, 2, 12, 5, 10, 14, 7),
        (1, 10, 13, 0, 6, 9, 8, 7, 4, 15, 14, 3, 11, 5, 2, 12),
    ),
    (
        (7, 13, 14, 3, 0, 6, 9, 10, 1, 2, 8, 5, 11, 12, 4, 15),
        (13, 8, 11, 5, 6, 15, 0, 3, 4, 7, 2, 12, 1, 10, 14, 9),
        (10, 6, 9, 0, 12, 11, 7, 13, 15, 1, 3, 14, 5, 2, 8, 4),
        (3, 15, 0, 6, 10, 1, 13, 8, 9, 4, 5, 11, 12, 7, 2, 14),
    ),
    (
        (2, 12, 4, 1, 7, 10, 11, 6, 8, 5, 3, 15, 13, 0, 14, 9),
        (14, 11, 2, 12, 4, 7, 13, 1, 5, 0, 15, 10, 3, 9, 8, 6),
        (4, 2, 1, 11, 10, 13, 7, 8, 15, 9, 12, 5, 6, 3, 0, 14),
        (11, 8, 12, 7, 1, 14, 2, 13, 6, 15, 0, 9, 10, 4, 5, 3),
    ),
    (
        (12, 1, 10, 15, 9, 2, 6, 8, 0, 13, 3, 4, 14, 7, 5, 11),
        (10, 15, 4, 2, 7, 12, 9, 5, 6, 1, 13, 14, 0, 11, 3, 8),
        (9, 14, 15, 5, 2, 8, 12, 3, 7, 0, 4, 10, 1, 13, 11, 6),
        (4, 3, 2, 12, 9, 5, 15, 10, 11, 14, 1, 7, 6, 0, 8, 13),
    ),
    (
        (4, 11, 2, 14, 15, 0, 8, 13, 3, 12, 9, 7, 5, 10, 6, 1),
        (13, 0, 11, 7, 4, 9, 1, 10, 14, 3, 5, 12, 2, 15, 8, 6),
        (1, 4, 11, 13, 12, 3, 7, 14, 10, 15, 6, 8, 0, 5, 9, 2),
        (6, 11, 13, 8, 1, 4, 10, 7, 9, 5, 0, 15, 14, 2, 3, 12),
    ),
    (
        (13, 2, 8, 4, 6, 15, 11, 1, 10, 9, 3, 14, 5, 0, 12, 7),
        (1, 15, 13, 8, 10, 3, 7, 4, 12, 5, 6, 11, 0, 14, 9, 2),
        (7, 11, 4, 1, 9, 12, 14, 2, 0, 6, 10, 13, 15, 3, 5, 8),
        (2, 1, 14, 7, 4, 10, 8, 13, 15, 12, 9, 0, 3, 5, 6, 11),
    ),
)

_BLOCK_BITS = 64
_HALF_BITS = 32
_EXPANDED_BITS = 48


def _check_bits(bits: str, length: int | None = None, name: str = "bit string") -> None:
    if set(bits) - {"0", "1"}:
        raise ValueError(f"invalid {name}: {bits!r}")
    if length is not None and len(bits) != length:
        raise ValueError(f"{name} must be {length} bits, got {len(bits)}")


def _fit(bits: str, length: int) -> str:
    """Left-pad with zeros or keep the rightmost bits so that `bits` has `length` bits."""
    if len(bits) < length:
        return bits.rjust(length, "0")
    return bits[len(bits) - length :]


def initial_permutation(bits: str) -> tuple[str, str]:
    """Apply IP to a 64-bit block and return the halves (L0, R0)."""
    _check_bits(bits, _BLOCK_BITS, "block")
    permuted = permute(bits, IP)
    return permuted[:_HALF_BITS], permuted[_HALF_BITS:]


def expand(bits: str) -> str:
    """Expand a 32-bit half block to 48 bits with the E table."""
    _check_bits(bits, _HALF_BITS, "half block")
    return permute(bits, E)


def xor_bits(a: str, b: str) -> str:
    """XOR two bit strings of equal length."""
    _check_bits(a)
    _check_bits(b)
    if len(a) != len(b):
        raise ValueError(f"bit strings differ in length: {len(a)} and {len(b)}")
    return "".join("0" if x == y else "1" for x, y in zip(a, b))


def xor_hex(a: str, b: str) -> str:
    """XOR two hex strings, padding the shorter one with leading zeros."""
    left, right = hex_to_bits(a), hex_to_bits(b)
    width = max(len(left), len(right))
    return bits_to_hex(xor_bits(left.rjust(width, "0"), right.rjust(width, "0")))


def sbox_lookup(box_index: int, six_bits: str) -> int:
    """Look up six bits in S-box `box_index` (1 to 8); outer bits pick the row."""
    if not 1 <= box_index <= len(SBOXES):
        raise ValueError(f"S-box index must be between 1 and {len(SBOXES)}, got {box_index}")
    _check_bits(six_bits, 6, "S-box input")
    row = int(six_bits[0] + six_bits[5], 2)
    column = int(six_bits[1:5], 2)
    return SBOXES[box_index - 1][row][column]


def substitute(bits: str) -> str:
    """Pass 48 bits through the eight S-boxes, giving 32 bits.

    Input of another length is first left-padded with zeros or cut to its
    rightmost 48 bits.
    """
    _check_bits(bits)
    bits = _fit(bits, _EXPANDED_BITS)
    return "".join(
        f"{sbox_lookup(box + 1, bits[box * 6 : box * 6 + 6]):04b}"
        for box in range(len(SBOXES))
    )


def p_permutation(bits: str) -> str:
    """Apply the P permutation to 32 bits.

    Input of another length is first left-padded with zeros or cut to its
    rightmost 32 bits.
    """
    _check_bits(bits)
    return permute(_fit(bits, _HALF_BITS), P)


def f_function(right: str, subkey: str) -> str:
    """Return the DES round function f(R, K) as a 32-bit string."""
    _check_bits(subkey, _EXPANDED_BITS, "subkey")
    return p_permutation(substitute(xor_bits(expand(right), subkey)))


def feistel_step(left: str, right: str, subkey: str) -> tuple[str, str]:
    """Return (L', R') = (R, L XOR f(R, K)) for one round."""
    _check_bits(left, _HALF_BITS, "left half")
    return right, xor_bits(left, f_function(right, subkey))


def final_permutation(left: str, right: str) -> str:
    """Apply IP^-1 to the concatenation left || right and return the 64-bit result."""
    _check_bits(left, _HALF_BITS, "left half")
    _check_bits(right, _HALF_BITS, "right half")
    return permute(left + right, IP_INV)