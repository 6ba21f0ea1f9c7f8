# cipherlab

A small, dependency-free toolkit for working through the building blocks of
cryptography by hand: modular arithmetic, classical ciphers, textbook
public-key schemes, and AES-128 and DES broken down into their individual
steps.

It is meant for study and for checking worked exercises. None of it is
hardened for protecting real data.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `cipherlab.numtheory` | `power_mod`, `extended_gcd`, `modular_inverse`, `euler_phi`, `power_mod_euler`, `power_mod_crt`, `chinese_remainder`, `prime_factorization`, `distinct_prime_factors`, `is_prime`, `is_primitive_root`, `discrete_log`, `baby_step_giant_step`, and `modular_arithmetic` returning a `ModularResults` |
| `cipherlab.classical` | `caesar_encrypt`, `vigenere_encrypt` (repeating key), `autokey_encrypt`, `substitution_encrypt`, `playfair_square`, `playfair_encrypt`, `transposition_encrypt` |
| `cipherlab.publickey` | Diffie–Hellman (`dh_public_key`, `dh_shared_key`), RSA (`rsa_generate` returning an `RSAKey`, `rsa_encrypt`, `rsa_decrypt`), ElGamal (`elgamal_public_key`, `elgamal_encrypt`, `elgamal_decrypt`), DSA (`dsa_generator`, `dsa_sign` returning a `DSASignature`, `dsa_verify`) |
| `cipherlab.aes_key` | hex/bytes helpers, `key_words`, `rot_word`, `sub_byte`, `sub_word`, `xor_rcon`, `next_round_words` |
| `cipherlab.aes` | `add_round_key`, `sub_bytes`, `shift_rows`, `gmul`, `mix_columns`, `expand_key`, `encrypt_block` (AES-128) |
| `cipherlab.des_key` | `hex_to_bits`, `bits_to_hex`, `permute`, `key_halves` (PC-1), `left_rotate`, `shift_schedule`, `round_keys` (PC-2) |
| `cipherlab.des` | `initial_permutation`, `expand`, `xor_bits`, `xor_hex`, `sbox_lookup`, `substitute`, `p_permutation`, `f_function`, `feistel_step`, `final_permutation` |
| `cipherlab.des_cipher` | `run_rounds` (the Feistel rounds) and `encrypt_block` (a whole DES block) |

The AES functions take and return `bytes`; an AES state is 16 bytes in
column-major order. The DES functions work on bit strings, `str` values of
`"0"` and `"1"`, and on hex strings; hex output is upper case.

## Examples

Number theory:

```python
from cipherlab.numtheory import power_mod, modular_inverse, euler_phi, discrete_log

power_mod(5, 3, 13)       # 8
modular_inverse(3, 11)    # 4
euler_phi(10)             # 4
discrete_log(3, 5, 19)    # least k with 3**k mod 19 == 5, or None
```

Classical ciphers:

```python
from cipherlab.classical import caesar_encrypt

caesar_encrypt("HELLO", 3)   # 'KHOOR'
```

Public-key schemes:

```python
from cipherlab.publickey import rsa_generate, rsa_encrypt, rsa_decrypt

key = rsa_generate(43, 47, 67)
ciphertext = rsa_encrypt(59, key.e, key.n)
rsa_decrypt(ciphertext, key.d, key.n)   # 59
```

AES and DES, step by step or as a whole block:

```python
from cipherlab.aes_key import hex_to_bytes, bytes_to_hex
from cipherlab import aes, des_cipher

block = aes.encrypt_block(
    hex_to_bytes("4AEB5D62EC3B55DBF5D5A87708E2FF1E"),
    hex_to_bytes("6704C20E086B3F537AE5721F486DC559"),
)
print(bytes_to_hex(block, True))

print(des_cipher.encrypt_block("32D604E6C4504149", "B35F59255E3BCB54"))
```

Functions that cannot produce a result, such as asking for the inverse of a
number that shares a factor with the modulus or encrypting an AES block whose
length is not 16 bytes, raise `ValueError`. The discrete logarithm functions
return `None` when no logarithm exists.

## Command line

The package installs a `cipherlab` command with two subcommands:

```
cipherlab caesar HELLO 3      # prints KHOOR
cipherlab powmod 5 3 13       # prints 8
```

To list what it can do:

```
cipherlab --help
```

## What it does not do

- The classical ciphers, AES and DES are encryption only; there are no
  decryption functions for them.
- AES and DES encrypt a single block. There are no modes of operation and no
  padding for longer messages.
- Keys, primes and nonces are supplied by the caller; nothing is generated at
  random.