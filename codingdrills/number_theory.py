"""Number-theory drills: sieves, Euler's totient, GCD and the extended Euclid algorithm."""

from functools import reduce
from math import isqrt
from typing import Iterable


def _sieve(limit: int) -> bytearray:
    """Flags for ``0..limit``: 1 where the index is prime."""
    flags = bytearray([1]) * (limit + 1)
    for small in range(min(2, limit + 1)):
        flags[small] = 0
    for factor in range(2, isqrt(limit) + 1):
        if flags[factor]:
            start = factor * factor
            flags[start::factor] = bytes(len(range(start, limit + 1, factor)))
    return flags


def _is_prime(number: int) -> bool:
    if number < 2:
        return False
    return all(number % divisor for divisor in range(2, isqrt(number) + 1))


def primes_between(low: int, high: int) -> list[int]:
    """All primes in ``low..high`` inclusive, ascending."""
    if high < 2:
        return []
    flags = _sieve(high)
    return [number for number in range(max(low, 2), high + 1) if flags[number]]


def count_almost_primes(low: int, high: int) -> int:
    """Count numbers in ``low..high`` that are a prime raised to a power of at least two."""
    if high < 4:
        return 0
    flags = _sieve(isqrt(high))
    count = 0
    for prime in range(2, len(flags)):
        if not flags[prime]:
            continue
        power = prime * prime
        while power <= high:
            if power >= low:
                count += 1
            power *= prime
    return count


def smallest_prime_palindrome(n: int) -> int:
    """Smallest number at least ``n`` that is both prime and a decimal palindrome."""
    candidate = max(n, 2)
    while True:
        text = str(candidate)
        if text == text[::-1] and _is_prime(candidate):
            return candidate
        candidate += 1


def count_square_free(low: int, high: int) -> int:
    """Count numbers in ``low..high`` not divisible by any square greater than one."""
    if low > high:
        raise ValueError("low must not exceed high")
    marked = bytearray(high - low + 1)
    root = 2
    while root * root <= high:
        square = root * root
        first = -(-low // square) * square
        offset = first - low
        marked[offset::square] = b"\x01" * len(range(offset, len(marked), square))
        root += 1
    return marked.count(0)


def euler_phi(n: int) -> int:
    """Euler's totient: how many of ``1..n`` are coprime to ``n``."""
    if n < 1:
        raise ValueError("n must be positive")
    result = n
    prime = 2
    while prime * prime <= n:
        if n % prime == 0:
            result -= result // prime
            while n % prime == 0:
                n //= prime
        prime += 1
    if n > 1:
        result -= result // n
    return result


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm."""
    while b:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    """Least common multiple."""
    return a * b // gcd(a, b)


def gcd_repunit(a: int, b: int) -> str:
    """GCD of the numbers written with ``a`` ones and with ``b`` ones, as digits."""
    if a < 1 or b < 1:
        raise ValueError("lengths must be positive")
    return "1" * gcd(a, b)


def cocktail_ratios(n: int, ratios: Iterable[tuple[int, int, int, int]]) -> list[int]:
    """Smallest positive amounts of ``n`` ingredients meeting every ``a:b = p:q`` ratio."""
    if n < 1:
        raise ValueError("at least one ingredient is required")
    graph: list[list[tuple[int, int, int]]] = [[] for _ in range(n)]
    scale = 1
    for a, b, p, q in ratios:
        graph[a].append((b, p, q))
        graph[b].append((a, q, p))
        scale *= lcm(p, q)

    amounts = [0] * n
    amounts[0] = scale
    seen = [False] * n
    seen[0] = True
    stack = [0]
    while stack:
        node = stack.pop()
        for neighbour, mine, theirs in graph[node]:
            if not seen[neighbour]:
                seen[neighbour] = True
                amounts[neighbour] = amounts[node] * theirs // mine
                stack.append(neighbour)

    common = reduce(gcd, amounts)
    return [amount // common for amount in amounts]


def extended_euclid(a: int, b: int) -> tuple[int, int]:
    """Coefficients ``(x, y)`` with ``a * x + b * y == gcd(a, b)``."""
    if b == 0:
        return 1, 0
    x, y = extended_euclid(b, a % b)
    return y, x - y * (a // b)


def solve_linear_diophantine(a: int, b: int, c: int) -> tuple[int, int] | None:
    """An integer solution of ``a * x + b * y == c``, or ``None`` when none exists."""
    divisor = gcd(a, b)
    if divisor == 0:
        raise ValueError("a and b must not both be zero")
    if c % divisor:
        return None
    factor = c // divisor
    x, y = extended_euclid(a, b)
    return x * factor, y * factor