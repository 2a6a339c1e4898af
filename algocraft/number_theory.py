"""Primes, roots, greatest common divisors and least common multiples."""

from __future__ import annotations


def is_prime(n: int) -> bool:
    """Return True if n is prime, by trial division."""
    if n < 2:
        return False
    divisor = 2
    while divisor * divisor <= n:
        if n % divisor == 0:
            return False
        divisor += 1
    return True


def sieve(n: int) -> list[int]:
    """Return every prime up to and including n, by the sieve of Eratosthenes."""
    if n < 2:
        return []
    composite = bytearray(n + 1)
    candidate = 2
    while candidate * candidate <= n:
        if not composite[candidate]:
            composite[candidate * 2 :: candidate] = b"\x01" * len(
                range(candidate * 2, n + 1, candidate)
            )
        candidate += 1
    return [number for number in range(2, n + 1) if not composite[number]]


def square_root(n: int, precision: int) -> float:
    """Return the square root of n truncated to precision decimal places.

    The integer part is found by binary search and each further digit by
    counting up in steps of that digit's place value.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    if precision < 0:
        raise ValueError("precision must not be negative")
    low, high = 0, n
    root = 0.0
    while low <= high:
        mid = (low + high) // 2
        square = mid * mid
        if square == n:
            return float(mid)
        if square > n:
            high = mid - 1
        else:
            low = mid + 1
            root = float(mid)
    step = 0.1
    for _ in range(precision):
        while root * root <= n:
            root += step
        root -= step
        step /= 10
    return root


def newton_raphson(n: float, tolerance: float) -> float:
    """Return the square root of n by Newton's method, stopping once a step is below tolerance."""
    if n <= 0:
        raise ValueError("n must be positive")
    if tolerance <= 0:
        raise ValueError("tolerance must be positive")
    x = float(n)
    while True:
        root = 0.5 * (x + n / x)
        if abs(root - x) < tolerance:
            return root
        x = root


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor of a and b by Euclid's algorithm."""
    while a:
        a, b = b % a, a
    return b


def extended_gcd(a: int, b: int) -> tuple[int, int, int]:
    """Return (g, x, y) with g = gcd(a, b) and a*x + b*y == g."""
    if a == 0:
        return b, 0, 1
    g, x1, y1 = extended_gcd(b % a, a)
    return g, y1 - (b // a) * x1, x1


def lcm(a: int, b: int) -> int:
    """Return the least common multiple of a and b (0 if either is 0)."""
    if a == 0 or b == 0:
        return 0
    return a * b // gcd(a, b)