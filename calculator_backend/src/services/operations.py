"""Arithmetic operations backing the calculation endpoints.

All functions are pure. `calculate_factorial` keeps the legacy sentinel
contract: negative input returns -1 instead of raising.
"""
from __future__ import annotations

from typing import Callable, Dict, Union

Number = Union[int, float]


# PUBLIC_INTERFACE
def calculate_sum(a: Number, b: Number) -> Number:
    """Return the sum of a and b."""
    return a + b


# PUBLIC_INTERFACE
def calculate_product(a: Number, b: Number) -> Number:
    """Return the product of a and b."""
    return a * b


# PUBLIC_INTERFACE
def calculate_factorial(n: Number) -> Number:
    """Return n! for n >= 0.

    Args:
        n: Value to compute the factorial of.

    Returns:
        -1 if n is negative, 1 for n in (0, 1), otherwise n * (n - 1)!.
    """
    if n < 0:
        return -1
    if n == 0 or n == 1:
        return 1
    return n * calculate_factorial(n - 1)


OPERATIONS: Dict[str, Callable[[Number, Number], Number]] = {
    "sum": calculate_sum,
    "product": calculate_product,
}
