"""Diffie-Hellman, RSA, ElGamal and DSA over small integers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

from cipherlab.numtheory import modular_inverse, power_mod


def dh_public_key(q: int, a: int, x: int) -> int:
    """Return the Diffie-Hellman public value a**x mod q."""
    return power_mod(a, x, q)


def dh_shared_key(peer_public: int, x: int, q: int) -> int:
    """Return the session key peer_public**x mod q."""
    return power_mod(peer_public, x, q)


@dataclass(frozen=True)
class RSAKey:
    """An RSA key pair with its modulus and totient."""

    e: int
    d: int
    n: int
    phi: int

    @property
    def public_key(self) -> tuple[int, int]:
        return self.e, self.n

    @property
    def private_key(self) -> tuple[int, int]:
        return self.d, self.n


def rsa_generate(p: int, q: int, e: int) -> RSAKey:
    """Build an RSA key from primes p, q and public exponent e."""
    n = p * q
    phi = (p - 1) * (q - 1)
    try:
        d = modular_inverse(e, phi)
    except ValueError:
        raise ValueError(f"e={e} is not coprime with phi(n)={phi}") from None
    return RSAKey(e=e, d=d, n=n, phi=phi)


def rsa_encrypt(m: int, e: int, n: int) -> int:
    """Return m**e mod n."""
    return power_mod(m, e, n)


def rsa_decrypt(c: int, d: int, n: int) -> int:
    """Return c**d mod n."""
    return power_mod(c, d, n)


def elgamal_public_key(q: int, a: int, xa: int) -> int:
    """Return the ElGamal public key a**xa mod q."""
    return power_mod(a, xa, q)


def elgamal_encrypt(m: int, q: int, a: int, ya: int, k: int) -> tuple[int, int]:
    """Encrypt m with ephemeral k, returning (C1, C2)."""
    c1 = power_mod(a, k, q)
    c2 = (m * power_mod(ya, k, q)) % q
    return c1, c2


def elgamal_decrypt(c1: int, c2: int, q: int, xa: int) -> int:
    """Recover the message from (C1, C2) with private key xa."""
    shared = power_mod(c1, xa, q)
    return (c2 * modular_inverse(shared, q)) % q


class DSASignature(NamedTuple):
    """A DSA signature pair."""

    r: int
    s: int


def dsa_generator(p: int, q: int, h: int) -> int:
    """Return g = h**((p-1)/q) mod p; q must divide p - 1."""
    if (p - 1) % q:
        raise ValueError(f"q={q} does not divide p-1={p - 1}")
    return power_mod(h, (p - 1) // q, p)


def dsa_sign(hm: int, p: int, q: int, g: int, x: int, k: int) -> DSASignature:
    """Sign the hash value hm with private key x and nonce k."""
    r = power_mod(g, k, p) % q
    s = (modular_inverse(k, q) * (hm + x * r)) % q
    return DSASignature(r, s)


def dsa_verify(hm: int, signature, p: int, q: int, g: int, y: int) -> bool:
    """Return True if the signature is valid for hash hm and public key y."""
    r, s = signature
    try:
        w = modular_inverse(s, q)
    except ValueError:
        return False
    u1 = (hm * w) % q
    u2 = (r * w) % q
    v = (power_mod(g, u1, p) * power_mod(y, u2, p)) % p % q
    return v == r