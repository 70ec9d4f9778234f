from functools import reduce

import pytest

from codingdrills.number_theory import (
    cocktail_ratios,
    count_almost_primes,
    count_square_free,
    euler_phi,
    extended_euclid,
    gcd,
    gcd_repunit,
    lcm,
    primes_between,
    smallest_prime_palindrome,
    solve_linear_diophantine,
)


def _prime_by_definition(number):
    return number >= 2 and all(number % divisor for divisor in range(2, number))


def test_primes_between_are_prime_and_in_range():
    primes = primes_between(10, 60)
    assert primes == sorted(primes)
    assert all(10 <= p <= 60 for p in primes)
    assert all(_prime_by_definition(p) for p in primes)


def test_primes_between_agrees_with_wider_range():
    wide = primes_between(1, 100)
    assert primes_between(30, 70) == [p for p in wide if 30 <= p <= 70]


def test_primes_between_below_two_is_empty():
    assert primes_between(0, 1) == []


def test_almost_primes_example():
    assert count_almost_primes(1, 10) == 3


def test_almost_primes_are_additive_over_ranges():
    whole = count_almost_primes(1, 5000)
    assert whole == count_almost_primes(1, 2500) + count_almost_primes(2501, 5000)


def test_prime_power_counts_itself():
    assert count_almost_primes(49, 49) == count_almost_primes(4, 4)


@pytest.mark.parametrize("start", [1, 31, 100, 1000, 5000])
def test_smallest_prime_palindrome_properties(start):
    found = smallest_prime_palindrome(start)
    assert found >= start
    assert str(found) == str(found)[::-1]
    assert _prime_by_definition(found)
    assert smallest_prime_palindrome(found) == found


def test_square_free_example():
    assert count_square_free(1, 10) == 7


def test_square_free_is_additive_over_ranges():
    assert count_square_free(1, 1000) == count_square_free(1, 400) + count_square_free(401, 1000)


def test_short_square_free_span_counts_all():
    assert count_square_free(1, 3) == 3


def test_square_free_rejects_reversed_range():
    with pytest.raises(ValueError):
        count_square_free(10, 1)


@pytest.mark.parametrize("prime", [2, 3, 13, 97])
def test_phi_of_prime(prime):
    assert euler_phi(prime) == prime - 1


def test_phi_is_multiplicative_for_coprimes():
    assert euler_phi(4 * 9) == euler_phi(4) * euler_phi(9)
    assert euler_phi(1) == 1


def test_phi_rejects_zero():
    with pytest.raises(ValueError):
        euler_phi(0)


@pytest.mark.parametrize("a,b", [(12, 18), (7, 5), (100, 75), (1, 9)])
def test_gcd_and_lcm_relation(a, b):
    divisor = gcd(a, b)
    assert a % divisor == 0 and b % divisor == 0
    assert divisor * lcm(a, b) == a * b
    assert lcm(a, b) % a == 0 and lcm(a, b) % b == 0


def test_gcd_repunit_length_is_gcd():
    digits = gcd_repunit(12, 18)
    assert len(digits) == gcd(12, 18)
    assert set(digits) == {"1"}


def test_gcd_repunit_rejects_zero():
    with pytest.raises(ValueError):
        gcd_repunit(0, 3)


def test_cocktail_ratios_hold_and_are_minimal():
    ratios = [(0, 1, 3, 5), (1, 2, 2, 3), (1, 3, 4, 1)]
    amounts = cocktail_ratios(4, ratios)
    for a, b, p, q in ratios:
        assert amounts[a] * q == amounts[b] * p
    assert reduce(gcd, amounts) == 1
    assert all(amount > 0 for amount in amounts)


@pytest.mark.parametrize("a,b", [(3, 5), (240, 46), (17, 0), (9, 27)])
def test_extended_euclid_identity(a, b):
    x, y = extended_euclid(a, b)
    assert a * x + b * y == gcd(a, b)


def test_diophantine_solution_satisfies_equation():
    x, y = solve_linear_diophantine(3, 5, 7)
    assert 3 * x + 5 * y == 7


def test_diophantine_without_solution():
    assert solve_linear_diophantine(4, 6, 3) is None