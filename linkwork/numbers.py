"""Primality test and factorials."""

from __future__ import annotations

from math import isqrt


def is_prime(n: int) -> bool:
    """Tell whether ``n`` is a prime number."""
    if n <= 1:
        return False
    if n == 2:
        return True
    if n % 2 == 0:
        return False
    return all(n % divisor for divisor in range(3, isqrt(n) + 1, 2))


def factorial(n: int) -> int:
    """Return n! computed iteratively."""
    if n < 0:
        raise ValueError("factorial does not exist for negative numbers")
    result = 1
    for factor in range(2, n + 1):
        result *= factor
    return result


def factorial_recursive(n: int) -> int:
    """Return n! computed recursively."""
    if n in (0, 1):
        return 1
    if n < 0:
        raise ValueError("factorial does not exist for negative numbers")
    return n * factorial_recursive(n - 1)