import pytest

from cipherlab.aes import (
    add_round_key,
    encrypt_block,
    expand_key,
    gmul,
    mix_columns,
    shift_rows,
    sub_bytes,
)
from cipherlab.aes_key import SBOX, hex_to_bytes

MESSAGE = hex_to_bytes("4AEB5D62EC3B55DBF5D5A87708E2FF1E")
KEY = hex_to_bytes("6704C20E086B3F537AE5721F486DC559")
SUB_INPUT = hex_to_bytes("2DEF9F6CE4506A888F30DA68408F3A47")
SHIFT_INPUT = hex_to_bytes("D8DFDB50695302C473045745097380A0")
MIX_INPUT = hex_to_bytes("D85357A0690480507373DBC409DF0245")
ROUND_STATE = hex_to_bytes("A927DE2C0EAA869F6C27FAAE2FEF1D4C")
ROUND_KEY = hex_to_bytes("5AA2095C52C9360F282C441060418149")


def test_add_round_key_is_an_involution():
    once = add_round_key(MESSAGE, KEY)
    assert add_round_key(once, KEY) == MESSAGE


def test_add_round_key_with_itself_is_zero():
    assert add_round_key(ROUND_STATE, ROUND_STATE) == bytes(16)


def test_add_round_key_with_zero_key_keeps_state():
    assert add_round_key(ROUND_KEY, bytes(16)) == ROUND_KEY


def test_add_round_key_length_mismatch():
    with pytest.raises(ValueError):
        add_round_key(MESSAGE, KEY[:15])


def test_sub_bytes_uses_sbox():
    assert sub_bytes(bytes(range(16))) == SBOX[:16]
    assert sub_bytes(bytes([0xFF])) == SBOX[255:]


def test_sub_bytes_keeps_length():
    assert len(sub_bytes(SUB_INPUT)) == 16


def test_shift_rows_is_a_permutation_keeping_row_zero():
    result = shift_rows(SHIFT_INPUT)
    assert sorted(result) == sorted(SHIFT_INPUT)
    assert result[0::4] == SHIFT_INPUT[0::4]


def test_shift_rows_four_times_is_identity():
    state = SHIFT_INPUT
    for _ in range(4):
        state = shift_rows(state)
    assert state == SHIFT_INPUT


def test_shift_rows_rejects_short_state():
    with pytest.raises(ValueError):
        shift_rows(bytes(15))


def test_gmul_known_product():
    assert gmul(0x57, 0x83) == 0xC1


@pytest.mark.parametrize("value", [0x00, 0x01, 0x57, 0x80, 0xFF])
def test_gmul_identity_and_zero(value):
    assert gmul(1, value) == value
    assert gmul(value, 1) == value
    assert gmul(0, value) == 0


@pytest.mark.parametrize("a,b,c", [(0x57, 0x13, 0x83), (0xFF, 0x02, 0x80), (0x03, 0xA5, 0x5A)])
def test_gmul_commutative_and_distributive(a, b, c):
    assert gmul(a, b) == gmul(b, a)
    assert gmul(a, b ^ c) == gmul(a, b) ^ gmul(a, c)


def test_gmul_rejects_non_byte():
    with pytest.raises(ValueError):
        gmul(256, 1)


def test_mix_columns_four_times_is_identity():
    state = MIX_INPUT
    for _ in range(4):
        state = mix_columns(state)
    assert state == MIX_INPUT


def test_mix_columns_is_linear():
    left = mix_columns(add_round_key(MIX_INPUT, ROUND_KEY))
    right = add_round_key(mix_columns(MIX_INPUT), mix_columns(ROUND_KEY))
    assert left == right


def test_mix_columns_rejects_wrong_length():
    with pytest.raises(ValueError):
        mix_columns(bytes(17))


def test_expand_key_starts_with_key_and_has_eleven_round_keys():
    schedule = expand_key(KEY)
    assert len(schedule) == 176
    assert schedule[:16] == KEY


def test_expand_key_standard_last_word():
    schedule = expand_key(hex_to_bytes("2b7e151628aed2a6abf7158809cf4f3c"))
    assert schedule[-4:] == hex_to_bytes("b6630ca6")


def test_expand_key_rejects_wrong_length():
    with pytest.raises(ValueError):
        expand_key(bytes(24))


def test_encrypt_block_standard_vector():
    plaintext = hex_to_bytes("00112233445566778899aabbccddeeff")
    key = bytes(range(16))
    assert encrypt_block(plaintext, key) == hex_to_bytes("69c4e0d86a7b0430d8cdb78070b4c55a")


def test_encrypt_block_is_deterministic_and_key_dependent():
    first = encrypt_block(MESSAGE, KEY)
    assert encrypt_block(MESSAGE, KEY) == first
    assert len(first) == 16
    assert encrypt_block(MESSAGE, ROUND_KEY) != first
    assert first != MESSAGE


def test_encrypt_block_rejects_bad_sizes():
    with pytest.raises(ValueError):
        encrypt_block(MESSAGE[:8], KEY)
    with pytest.raises(ValueError):
        encrypt_block(MESSAGE, KEY + b"\x00")