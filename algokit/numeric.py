"""Number-theoretic helpers and the 0/1 knapsack."""

from __future__ import annotations

from collections.abc import Sequence


def factorial(n: int) -> int:
    """Return n! for a non-negative integer."""
    if n < 0:
        raise ValueError("factorial is undefined for negative numbers")
    result = 1
    for i in range(2, n + 1):
        result *= i
    return result


def ncr(n: int, r: int) -> int:
    """Number of ways to choose r items out of n; 0 when r is outside 0..n."""
    if n < 0:
        raise ValueError("n must be non-negative")
    if not 0 <= r <= n:
        return 0
    return factorial(n) // (factorial(r) * factorial(n - r))


def is_prime(number: int) -> bool:
    """Trial-division primality test."""
    if number <= 1:
        return False
    divisor = 2
    while divisor * divisor <= number:
        if number % divisor == 0:
            return False
        divisor += 1
    return True


def next_prime(n: int) -> int:
    """Smallest prime strictly greater than n."""
    candidate = n + 1
    while not is_prime(candidate):
        candidate += 1
    return candidate


def knapsack(capacity: int, weights: Sequence[int], values: Sequence[int]) -> int:
    """Maximum total value of items whose total weight fits in ``capacity``."""
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    if capacity < 0:
        raise ValueError("capacity must be non-negative")
    if any(weight < 0 for weight in weights):
        raise ValueError("weights must be non-negative")
    best = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        for room in range(capacity, weight - 1, -1):
            best[room] = max(best[room], value + best[room - weight])
    return best[capacity]