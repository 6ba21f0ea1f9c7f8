"""AES-128 key schedule building blocks: words, RotWord, SubWord and Rcon."""

from __future__ import annotations

import string
from typing import Iterable

_WORD_MASK = 0xFFFFFFFF

SBOX = bytes(
    [
        0x63, 0x7C, 0x77, 0x7B, 0xF2, 0x6B, 0x6F, 0xC5, 0x30, 0x01, 0x67, 0x2B, 0xFE, 0xD7, 0xAB, 0x76,
        0xCA, 0x82, 0xC9, 0x7D, 0xFA, 0x59, 0x47, 0xF0, 0xAD, 0xD4, 0xA2, 0xAF, 0x9C, 0xA4, 0x72, 0xC0,
        0xB7, 0xFD, 0x93, 0x26, 0x36, 0x3F, 0xF7, 0xCC, 0x34, 0xA5, 0xE5, 0xF1, 0x71, 0xD8, 0x31, 0x15,
        0x04, 0xC7, 0x23, 0xC3, 0x18, 0x96, 0x05, 0x9A, 0x07, 0x12, 0x80, 0xE2, 0xEB, 0x27, 0xB2, 0x75,
        0x09, 0x83, 0x2C, 0x1A, 0x1B, 0x6E, 0x5A, 0xA0, 0x52, 0x3B, 0xD6, 0xB3, 0x29, 0xE3, 0x2F, 0x84,
        0x53, 0xD1, 0x00, 0xED, 0x20, 0xFC, 0xB1, 0x5B, 0x6A, 0xCB, 0xBE, 0x39, 0x4A, 0x4C, 0x58, 0xCF,
        0xD0, 0xEF, 0xAA, 0xFB, 0x43, 0x4D, 0x33, 0x85, 0x45, 0xF9, 0x02, 0x7F, 0x50, 0x3C, 0x9F, 0xA8,
        0x51, 0xA3, 0x40, 0x8F, 0x92, 0x9D, 0x38, 0xF5, 0xBC, 0xB6, 0xDA, 0x21, 0x10, 0xFF, 0xF3, 0xD2,
        0xCD, 0x0C, 0x13, 0xEC, 0x5F, 0x97, 0x44, 0x17, 0xC4, 0xA7, 0x7E, 0x3D, 0x64, 0x5D, 0x19, 0x73,
        0x60, 0x81, 0x4F, 0xDC, 0x22, 0x2A, 0x90, 0x88, 0x46, 0xEE, 0xB8, 0x14, 0xDE, 0x5E, 0x0B, 0xDB,
        0xE0, 0x32, 0x3A, 0x0A, 0x49, 0x06, 0x24, 0x5C, 0xC2, 0xD3, 0xAC, 0x62, 0x91, 0x95, 0xE4, 0x79,
        0xE7, 0xC8, 0x37, 0x6D, 0x8D, 0xD5, 0x4E, 0xA9, 0x6C, 0x56, 0xF4, 0xEA, 0x65, 0x7A, 0xAE, 0x08,
        0xBA, 0x78, 0x25, 0x2E, 0x1C, 0xA6, 0xB4, 0xC6, 0xE8, 0xDD, 0x74, 0x1F, 0x4B, 0xBD, 0x8B, 0x8A,
        0x70, 0x3E, 0xB5, 0x66, 0x48, 0x03, 0xF6, 0x0E, 0x61, 0x35, 0x57, 0xB9, 0x86, 0xC1, 0x1D, 0x9E,
        0xE1, 0xF8, 0x98, 0x11, 0x69, 0xD9, 0x8E, 0x94, 0x9B, 0x1E, 0x87, 0xE9, 0xCE, 0x55, 0x28, 0xDF,
        0x8C, 0xA1, 0x89, 0x0D, 0xBF, 0xE6, 0x42, 0x68, 0x41, 0x99, 0x2D, 0x0F, 0xB0, 0x54, 0xBB, 0x16,
    ]
)

RCON = (0x00, 0x01, 0x02, 0x04, 0x08, 0x10, 0x20, 0x40, 0x80, 0x1B, 0x36)


def _check_word(word: int) -> None:
    if not 0 <= word <= _WORD_MASK:
        raise ValueError(f"not a 32-bit word: {word!r}")


def hex_to_bytes(text: str) -> bytes:
    """Decode a string of hex digit pairs into bytes."""
    if len(text) % 2:
        raise ValueError("hex string must have an even number of characters")
    if any(ch not in string.hexdigits for ch in text):
        raise ValueError(f"invalid hex string: {text!r}")
    return bytes.fromhex(text)


def bytes_to_hex(data: bytes, upper: bool = False) -> str:
    """Encode bytes as two hex digits each."""
    text = bytes(data).hex()
    return text.upper() if upper else text


def key_words(key: bytes) -> list[int]:
    """Split a key into big-endian 32-bit words."""
    key = bytes(key)
    if len(key) % 4:
        raise ValueError(f"key length must be a multiple of 4 bytes, got {len(key)}")
    return [int.from_bytes(key[i : i + 4], "big") for i in range(0, len(key), 4)]


def rot_word(word: int) -> int:
    """Rotate a word left by one byte."""
    _check_word(word)
    return ((word << 8) | (word >> 24)) & _WORD_MASK


def sub_byte(value: int) -> int:
    """Substitute one byte through the AES S-box."""
    if not 0 <= value <= 0xFF:
        raise ValueError(f"not a byte: {value!r}")
    return SBOX[value]


def sub_word(word: int) -> int:
    """Substitute every byte of a word through the AES S-box."""
    _check_word(word)
    substituted = bytes(SBOX[b] for b in word.to_bytes(4, "big"))
    return int.from_bytes(substituted, "big")


def xor_rcon(word: int, round_index: int) -> int:
    """XOR the round constant for rounds 1-10 into the top byte of a word."""
    _check_word(word)
    if not 1 <= round_index < len(RCON):
        raise ValueError(f"round index must be between 1 and {len(RCON) - 1}, got {round_index}")
    return word ^ (RCON[round_index] << 24)


def next_round_words(previous: Iterable[int], temp: int) -> list[int]:
    """Derive the next four key words from the previous four and the transformed word."""
    words = list(previous)
    if len(words) != 4:
        raise ValueError(f"expected 4 previous words, got {len(words)}")
    _check_word(temp)
    result: list[int] = []
    current = temp
    for word in words:
        _check_word(word)
        current ^= word
        result.append(current)
    return result