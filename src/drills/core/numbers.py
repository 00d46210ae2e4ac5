"""Integer drills."""

from __future__ import annotations


def factorial(n: int) -> int:
    """Return the product ``1 * 2 * ... * n``.

    Any ``n <= 0`` yields ``1`` (the empty product).
    """
    result = 1
    for i in range(1, n + 1):
        result *= i
    return result
