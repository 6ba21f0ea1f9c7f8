import math

import pytest

from cipherlab.numtheory import (
    ModularResults,
    baby_step_giant_step,
    chinese_remainder,
    discrete_log,
    distinct_prime_factors,
    euler_phi,
    extended_gcd,
    is_prime,
    is_primitive_root,
    modular_arithmetic,
    modular_inverse,
    power_mod,
    power_mod_crt,
    power_mod_euler,
    prime_factorization,
)


@pytest.mark.parametrize("a,m,n", [(2, 10, 1000), (7, 560, 561), (123456, 789, 1009), (5, 395, 6947)])
def test_power_mod_matches_pow(a, m, n):
    assert power_mod(a, m, n) == pow(a, m, n)


def test_power_mod_zero_exponent_is_one():
    assert power_mod(5, 0, 1) == 1


def test_power_mod_rejects_bad_input():
    with pytest.raises(ValueError):
        power_mod(2, -1, 7)
    with pytest.raises(ValueError):
        power_mod(2, 3, 0)


@pytest.mark.parametrize("a,b", [(240, 46), (17, 5), (0, 9), (35, 64), (1071, 462)])
def test_extended_gcd_bezout(a, b):
    g, x, y = extended_gcd(a, b)
    assert g == math.gcd(a, b)
    assert a * x + b * y == g


@pytest.mark.parametrize("a,n", [(3, 11), (67, 1932), (10, 17), (1, 2)])
def test_modular_inverse(a, n):
    inv = modular_inverse(a, n)
    assert 0 <= inv < n
    assert (a * inv) % n == 1


def test_modular_inverse_missing():
    with pytest.raises(ValueError):
        modular_inverse(6, 9)


def test_euler_phi_of_one():
    assert euler_phi(1) == 1


@pytest.mark.parametrize("p", [2, 3, 5, 7, 11, 13, 463, 6947])
def test_euler_phi_prime(p):
    assert euler_phi(p) == p - 1


@pytest.mark.parametrize("m,n", [(4, 9), (7, 10), (8, 15), (11, 12)])
def test_euler_phi_multiplicative(m, n):
    assert euler_phi(m * n) == euler_phi(m) * euler_phi(n)


@pytest.mark.parametrize("p,k", [(2, 5), (3, 4), (7, 2)])
def test_euler_phi_prime_power(p, k):
    assert euler_phi(p**k) == p**k - p ** (k - 1)


def test_euler_phi_rejects_zero():
    with pytest.raises(ValueError):
        euler_phi(0)


@pytest.mark.parametrize("a,m,n", [(7, 1000, 13), (2, 99, 45), (6, 50, 9), (10, 123, 21)])
def test_power_mod_euler_matches_pow(a, m, n):
    assert power_mod_euler(a, m, n) == pow(a, m, n)


@pytest.mark.parametrize("n", list(range(1, 200)) + [6947, 1932, 2**10 * 3**3])
def test_prime_factorization_rebuilds_n(n):
    factors = prime_factorization(n)
    assert math.prod(p**e for p, e in factors) == n
    assert all(is_prime(p) and e >= 1 for p, e in factors)
    primes = [p for p, _ in factors]
    assert primes == sorted(set(primes))
    assert distinct_prime_factors(n) == primes


def test_power_mod_crt_matches_pow():
    for n in range(2, 61):
        for a in range(0, 25):
            for k in range(0, 15):
                assert power_mod_crt(a, k, n) == pow(a, k, n), (a, k, n)


def test_power_mod_crt_modulus_one():
    assert power_mod_crt(9, 4, 1) == 0


def test_chinese_remainder_source_example():
    moduli = [17, 19, 11]
    remainders = [5, 16, 3]
    x = chinese_remainder(moduli, remainders)
    assert 0 <= x < 17 * 19 * 11
    assert [x % m for m in moduli] == remainders


def test_chinese_remainder_errors():
    with pytest.raises(ValueError):
        chinese_remainder([3, 5], [1])
    with pytest.raises(ValueError):
        chinese_remainder([4, 6], [1, 3])


def test_is_prime_small_values():
    assert is_prime(0) is False
    assert is_prime(1) is False


def test_is_prime_agrees_with_factorization():
    for n in range(2, 600):
        assert is_prime(n) == (prime_factorization(n) == [(n, 1)]), n


@pytest.mark.parametrize("p", [3, 5, 7, 11, 13, 17, 19, 23, 463])
def test_number_of_primitive_roots(p):
    roots = [a for a in range(1, p) if is_primitive_root(a, p)]
    assert len(roots) == euler_phi(p - 1)


def test_primitive_root_order_is_full():
    for a in range(1, 463):
        if is_primitive_root(a, 463):
            powers = {pow(a, k, 463) for k in range(1, 463)}
            assert len(powers) == 462


def test_primitive_root_requires_coprime():
    assert is_primitive_root(6, 9) is False
    with pytest.raises(ValueError):
        is_primitive_root(1, 1)


def test_discrete_log_source_example():
    k = discrete_log(3, 5, 19)
    assert pow(3, k, 19) == 5
    assert all(pow(3, i, 19) != 5 for i in range(k))


def test_discrete_log_missing():
    assert discrete_log(2, 3, 7) is None


@pytest.mark.parametrize("a,b,n", [(3, 5, 19), (5, 1234, 6947), (2, 11, 13), (5, 100, 463)])
def test_baby_step_giant_step(a, b, n):
    k = baby_step_giant_step(a, b, n)
    assert pow(a, k, n) == b % n


def test_baby_step_giant_step_missing():
    assert baby_step_giant_step(2, 3, 7) is None


def test_modular_arithmetic_source_example():
    res = modular_arithmetic(37, 97, 581, 364, 127)
    assert isinstance(res, ModularResults)
    assert res.ax == (37 * 581) % 127
    assert res.by == (97 * 364) % 127
    assert res.addition == (res.ax + res.by) % 127
    assert 0 <= res.subtraction < 127
    assert (res.subtraction + res.by) % 127 == res.ax
    assert res.multiplication == (res.ax * res.by) % 127
    assert (res.inverse * res.by) % 127 == 1
    assert (res.division * res.by) % 127 == res.ax


def test_modular_arithmetic_without_inverse():
    res = modular_arithmetic(3, 2, 1, 1, 10)
    assert res.by == 2
    assert res.inverse is None
    assert res.division is None