"""Modular arithmetic and elementary number theory."""

from __future__ import annotations

import math
from dataclasses import dataclass


def _require_modulus(n: int) -> None:
    if n <= 0:
        raise ValueError(f"modulus must be positive, got {n}")


def power_mod(a: int, m: int, n: int) -> int:
    """Return a**m mod n; a zero exponent always gives 1."""
    _require_modulus(n)
    if m < 0:
        raise ValueError(f"exponent must be non-negative, got {m}")
    if m == 0:
        return 1
    return pow(a, m, n)


def extended_gcd(a: int, b: int) -> tuple[int, int, int]:
    """Return (g, x, y) with g = gcd(a, b) and a*x + b*y == g."""
    x, x1 = 1, 0
    y, y1 = 0, 1
    while b:
        q = a // b
        x, x1 = x1, x - q * x1
        y, y1 = y1, y - q * y1
        a, b = b, a - q * b
    return a, x, y


def modular_inverse(a: int, n: int) -> int:
    """Return the inverse of a modulo n; raise ValueError if there is none."""
    _require_modulus(n)
    g, x, _ = extended_gcd(a, n)
    if abs(g) != 1:
        raise ValueError(f"{a} has no inverse modulo {n}")
    return (x * g) % n


def euler_phi(n: int) -> int:
    """Return Euler's totient of n."""
    if n < 1:
        raise ValueError(f"totient is defined for positive integers, got {n}")
    result = n
    i = 2
    while i * i <= n:
        if n % i == 0:
            while n % i == 0:
                n //= i
            result -= result // i
        i += 1
    if n > 1:
        result -= result // n
    return result


def power_mod_euler(a: int, m: int, n: int) -> int:
    """Return a**m mod n, reducing the exponent by phi(n) when gcd(a, n) == 1."""
    _require_modulus(n)
    if math.gcd(a, n) == 1:
        return power_mod(a, m % euler_phi(n), n)
    return power_mod(a, m, n)


def prime_factorization(n: int) -> list[tuple[int, int]]:
    """Return the prime factors of n with their exponents, smallest first."""
    if n < 1:
        raise ValueError(f"cannot factor {n}")
    factors: list[tuple[int, int]] = []
    count = 0
    while n % 2 == 0:
        n //= 2
        count += 1
    if count:
        factors.append((2, count))
    i = 3
    while i * i <= n:
        if n % i == 0:
            count = 0
            while n % i == 0:
                n //= i
                count += 1
            factors.append((i, count))
        i += 2
    if n > 1:
        factors.append((n, 1))
    return factors


def distinct_prime_factors(n: int) -> list[int]:
    """Return the distinct prime factors of n, smallest first."""
    return [p for p, _ in prime_factorization(n)]


def _prime_power_residue(a: int, k: int, p: int, e: int) -> int:
    modulus = p**e
    if a % p == 0:
        return 0 if k >= e else power_mod(a, k, modulus)
    return power_mod(a, k % (modulus - modulus // p), modulus)


def power_mod_crt(a: int, k: int, n: int) -> int:
    """Return a**k mod n, computed per prime power of n and joined by the CRT."""
    _require_modulus(n)
    if k < 0:
        raise ValueError(f"exponent must be non-negative, got {k}")
    if n == 1:
        return 0
    if k == 0:
        return 1
    factors = prime_factorization(n)
    moduli = [p**e for p, e in factors]
    residues = [_prime_power_residue(a, k, p, e) for p, e in factors]
    if len(factors) == 1:
        return residues[0]
    return chinese_remainder(moduli, residues)


def chinese_remainder(moduli, remainders) -> int:
    """Return the least x >= 0 with x % m == r for each modulus and remainder."""
    moduli = list(moduli)
    remainders = list(remainders)
    if len(moduli) != len(remainders):
        raise ValueError("moduli and remainders differ in length")
    for m in moduli:
        _require_modulus(m)
    total = math.prod(moduli)
    result = 0
    for m, r in zip(moduli, remainders):
        partial = total // m
        try:
            inverse = modular_inverse(partial, m)
        except ValueError:
            raise ValueError("moduli must be pairwise coprime") from None
        result = (result + r * partial * inverse) % total
    return result


def is_prime(n: int) -> bool:
    """Return True if n is prime."""
    if n <= 1:
        return False
    if n <= 3:
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False
    i = 5
    while i * i <= n:
        if n % i == 0 or n % (i + 2) == 0:
            return False
        i += 6
    return True


def _smallest_odd_factor(n: int) -> int:
    i = 3
    while i * i <= n:
        if n % i == 0:
            return i
        i += 2
    return 0


def is_primitive_root(a: int, n: int) -> bool:
    """Return True if a generates the multiplicative group modulo n."""
    if n < 2:
        raise ValueError(f"modulus must be at least 2, got {n}")
    if math.gcd(a, n) != 1:
        return False
    if not is_prime(n):
        if n == 4:
            return a == 3
        if n % 2 == 0:
            half = n // 2
            p = _smallest_odd_factor(half)
            if p == 0 and half > 1:
                p = half
            if p == 0 or half % (p * p) == 0:
                return False
        else:
            p = _smallest_odd_factor(n) or n
            rest = n
            while rest % p == 0:
                rest //= p
            if rest != 1:
                return False
    phi_n = euler_phi(n)
    return all(
        power_mod(a, phi_n // factor, n) != 1
        for factor in distinct_prime_factors(phi_n)
    )


def discrete_log(a: int, b: int, n: int) -> int | None:
    """Return the least k in [0, n) with a**k mod n == b, or None if none exists."""
    _require_modulus(n)
    return next((k for k in range(n) if power_mod(a, k, n) == b), None)


def baby_step_giant_step(a: int, b: int, n: int) -> int | None:
    """Return some k with a**k mod n == b mod n, or None if none exists.

    a must be invertible modulo n.
    """
    _require_modulus(n)
    a %= n
    b %= n
    if b == 1 % n:
        return 0
    step = math.isqrt(n - 1) + 1 if n > 1 else 1
    table: dict[int, int] = {}
    value = 1 % n
    for j in range(step):
        table.setdefault(value, j)
        value = (value * a) % n
    giant = pow(modular_inverse(a, n), step, n)
    current = b
    for i in range(step + 1):
        if current in table:
            return i * step + table[current]
        current = (current * giant) % n
    return None


@dataclass(frozen=True)
class ModularResults:
    """Results of combining ax and by modulo n."""

    ax: int
    by: int
    addition: int
    subtraction: int
    multiplication: int
    inverse: int | None
    division: int | None


def modular_arithmetic(a: int, b: int, x: int, y: int, n: int) -> ModularResults:
    """Compute sum, difference, product, inverse and quotient of ax and by mod n."""
    _require_modulus(n)
    ax = (a * x) % n
    by = (b * y) % n
    try:
        inverse: int | None = modular_inverse(by, n)
    except ValueError:
        inverse = None
    division = None if inverse is None else (ax * inverse) % n
    return ModularResults(
        ax=ax,
        by=by,
        addition=(ax + by) % n,
        subtraction=(ax - by) % n,
        multiplication=(ax * by) % n,
        inverse=inverse,
        division=division,
    )