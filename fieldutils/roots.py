"""Roots of unity for FFT-friendly fields."""

import galois

from .field import Field
from .utils import is_power_of_two, log2


def get_root_of_unity(field: Field, n: int) -> galois.FieldArray:
    """Return a primitive n-th root of unity.

    Starts from the field's primitive 2^s-th root and squares it s - log2(n)
    times; each squaring halves the order.

    Args:
        field: Field with two_adicity s
        n: Power of two with log2(n) <= s

    Returns:
        Element omega with omega^n == 1 and omega^(n/2) != 1 for n > 1

    Raises:
        ValueError: If n is not a power of two or exceeds 2^two_adicity
    """
    if not is_power_of_two(n):
        raise ValueError(f"n must be a power of 2, got {n}")
    logn = log2(n)
    if logn > field.two_adicity:
        raise ValueError(
            f"{field.name} has no root of unity of order 2^{logn} (two_adicity={field.two_adicity})"
        )

    omega = field.root_of_unity
    for _ in range(field.two_adicity - logn):
        omega = omega * omega
    return omega


def get_roots_of_unity(field: Field, n: int) -> galois.FieldArray:
    """Evaluation domain of size n: [omega^0, omega^1, ..., omega^(n-1)]."""
    omega = get_root_of_unity(field, n)
    roots = field.GF.Zeros(n)
    roots[0] = field.one
    for i in range(1, n):
        roots[i] = roots[i - 1] * omega
    return roots
