"""Classical ciphers: Caesar, Vigenère, autokey, substitution, Playfair, transposition."""

from __future__ import annotations

import string
from itertools import chain, cycle
from typing import Iterator

_UPPER = string.ascii_uppercase
_LOWER = string.ascii_lowercase
_PLAYFAIR_ALPHABET = _UPPER.replace("J", "")
_PAD = "X"


def _shift_letter(ch: str, shift: int) -> str:
    if ch in _LOWER:
        base = ord("a")
    elif ch in _UPPER:
        base = ord("A")
    else:
        return ch
    return chr(base + (ord(ch) - base + shift) % 26)


def _letter_index(ch: str) -> int:
    upper = ch.upper()
    if len(upper) != 1 or upper not in _UPPER:
        raise ValueError(f"expected a letter A-Z, got {ch!r}")
    return ord(upper) - ord("A")


def caesar_encrypt(text: str, shift: int) -> str:
    """Shift every ASCII letter by `shift` places, keeping its case."""
    return "".join(_shift_letter(ch, shift) for ch in text)


def vigenere_encrypt(text: str, key: str) -> str:
    """Encrypt with a repeating key; the key position advances on every character."""
    if not key:
        raise ValueError("key must not be empty")
    shifts = [_letter_index(ch) for ch in key]
    return "".join(_shift_letter(ch, shift) for ch, shift in zip(text, cycle(shifts)))


def autokey_encrypt(text: str, key: str) -> str:
    """Encrypt with a keystream of the key followed by the plaintext itself."""
    plain = [_letter_index(ch) for ch in text]
    stream = [_letter_index(ch) for ch in key] + plain
    return "".join(_UPPER[(p + k) % 26] for p, k in zip(plain, stream))


def substitution_encrypt(text: str, key: str) -> str:
    """Replace each letter by the key character at its alphabet position."""
    if len(key) != 26:
        raise ValueError(f"substitution key must have 26 characters, got {len(key)}")
    table = str.maketrans(_LOWER + _UPPER, key + key)
    return text.translate(table)


def _playfair_letters(text: str) -> Iterator[str]:
    for ch in text:
        upper = ch.upper()
        if upper in _UPPER and len(upper) == 1:
            yield "I" if upper == "J" else upper


def playfair_square(key: str) -> tuple[str, ...]:
    """Return the five rows of the Playfair square built from `key`."""
    letters = "".join(dict.fromkeys(chain(_playfair_letters(key), _PLAYFAIR_ALPHABET)))
    return tuple(letters[row : row + 5] for row in range(0, 25, 5))


def playfair_encrypt(plaintext: str, key: str) -> str:
    """Encrypt letters of `plaintext` with the Playfair cipher; X pads and splits pairs."""
    rows = playfair_square(key)
    position = {ch: (r, c) for r, row in enumerate(rows) for c, ch in enumerate(row)}
    letters = "".join(_playfair_letters(plaintext))

    result: list[str] = []
    i = 0
    while i < len(letters):
        first = letters[i]
        second = letters[i + 1] if i + 1 < len(letters) else _PAD
        if first == second:
            second = _PAD
            i += 1
        else:
            i += 2
        (r1, c1), (r2, c2) = position[first], position[second]
        if r1 == r2:
            result += [rows[r1][(c1 + 1) % 5], rows[r2][(c2 + 1) % 5]]
        elif c1 == c2:
            result += [rows[(r1 + 1) % 5][c1], rows[(r2 + 1) % 5][c2]]
        else:
            result += [rows[r1][c2], rows[r2][c1]]
    return "".join(result)


def transposition_encrypt(plaintext: str, key: str) -> str:
    """Write the text in rows under the key and read columns in key order; '_' pads."""
    if not key:
        raise ValueError("key must not be empty")
    cols = len(key)
    rows = -(-len(plaintext) // cols)
    padded = plaintext.ljust(rows * cols, "_")
    order = sorted(range(cols), key=lambda j: (key[j], j))
    return "".join(padded[j::cols] for j in order)