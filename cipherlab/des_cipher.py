"""Full DES: the sixteen Feistel rounds and single-block encryption."""

from __future__ import annotations

from typing import Iterable

from cipherlab.des import feistel_step, final_permutation, initial_permutation
from cipherlab.des_key import bits_to_hex, hex_to_bits, key_halves, round_keys

_BLOCK_BITS = 64


def run_rounds(left: str, right: str, subkeys: Iterable[str]) -> list[tuple[str, str]]:
    """Apply one Feistel round per subkey; return (L, R) after each round.

    Halves are 32-bit strings and subkeys 48-bit strings of "0" and "1".
    """
    rounds: list[tuple[str, str]] = []
    for subkey in subkeys:
        left, right = feistel_step(left, right, subkey)
        rounds.append((left, right))
    return rounds


def encrypt_block(block_hex: str, key_hex: str) -> str:
    """Encrypt one 64-bit block given as hex with a 64-bit hex key; return upper-case hex."""
    block = hex_to_bits(block_hex)
    if len(block) != _BLOCK_BITS:
        raise ValueError(f"block must be {_BLOCK_BITS} bits, got {len(block)}")
    subkeys = [hex_to_bits(k) for k in round_keys(*key_halves(key_hex))]
    left, right = initial_permutation(block)
    last_left, last_right = run_rounds(left, right, subkeys)[-1]
    return bits_to_hex(final_permutation(last_right, last_left))