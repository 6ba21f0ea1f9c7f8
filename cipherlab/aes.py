"""AES-128 round transformations and single-block encryption.

A state is 16 bytes in column-major order: byte ``4 * column + row``.
"""

from __future__ import annotations

from cipherlab.aes_key import SBOX, key_words, next_round_words, rot_word, sub_word, xor_rcon

BLOCK_SIZE = 16
ROUNDS = 10
_KEY_WORDS = 4
_REDUCTION = 0x1B


def _as_block(data, name: str) -> bytes:
    block = bytes(data)
    if len(block) != BLOCK_SIZE:
        raise ValueError(f"{name} must be {BLOCK_SIZE} bytes, got {len(block)}")
    return block


def add_round_key(state, round_key) -> bytes:
    """XOR the state with a round key of the same length."""
    state = bytes(state)
    round_key = bytes(round_key)
    if len(state) != len(round_key):
        raise ValueError(
            f"state and round key differ in length: {len(state)} and {len(round_key)}"
        )
    return bytes(s ^ k for s, k in zip(state, round_key))


def sub_bytes(state) -> bytes:
    """Substitute every byte of the state through the AES S-box."""
    return bytes(SBOX[b] for b in bytes(state))


def shift_rows(state) -> bytes:
    """Rotate row r of the state left by r positions."""
    block = _as_block(state, "state")
    return bytes(
        block[((column + row) % 4) * 4 + row]
        for column in range(4)
        for row in range(4)
    )


def gmul(a: int, b: int) -> int:
    """Multiply two bytes in GF(2^8) modulo x^8 + x^4 + x^3 + x + 1."""
    if not (0 <= a <= 0xFF and 0 <= b <= 0xFF):
        raise ValueError(f"operands must be bytes, got {a!r} and {b!r}")
    product = 0
    for _ in range(8):
        if b & 1:
            product ^= a
        carry = a & 0x80
        a = (a << 1) & 0xFF
        if carry:
            a ^= _REDUCTION
        b >>= 1
    return product


def _mix_column(s0: int, s1: int, s2: int, s3: int) -> tuple[int, int, int, int]:
    return (
        gmul(2, s0) ^ gmul(3, s1) ^ s2 ^ s3,
        s0 ^ gmul(2, s1) ^ gmul(3, s2) ^ s3,
        s0 ^ s1 ^ gmul(2, s2) ^ gmul(3, s3),
        gmul(3, s0) ^ s1 ^ s2 ^ gmul(2, s3),
    )


def mix_columns(state) -> bytes:
    """Apply the MixColumns matrix to each column of the state."""
    block = _as_block(state, "state")
    return b"".join(
        bytes(_mix_column(*block[i : i + 4])) for i in range(0, BLOCK_SIZE, 4)
    )


def expand_key(key) -> bytes:
    """Expand a 16-byte key into the 176-byte AES-128 key schedule."""
    words = key_words(_as_block(key, "key"))
    for round_index in range(1, ROUNDS + 1):
        temp = xor_rcon(sub_word(rot_word(words[-1])), round_index)
        words.extend(next_round_words(words[-_KEY_WORDS:], temp))
    return b"".join(word.to_bytes(4, "big") for word in words)


def encrypt_block(plaintext, key) -> bytes:
    """Encrypt one 16-byte block with a 16-byte key using AES-128."""
    state = _as_block(plaintext, "plaintext")
    schedule = expand_key(key)
    round_keys = [schedule[i : i + BLOCK_SIZE] for i in range(0, len(schedule), BLOCK_SIZE)]

    state = add_round_key(state, round_keys[0])
    for round_key in round_keys[1:ROUNDS]:
        state = add_round_key(mix_columns(shift_rows(sub_bytes(state))), round_key)
    return add_round_key(shift_rows(sub_bytes(state)), round_keys[ROUNDS])