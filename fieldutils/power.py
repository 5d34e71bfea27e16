"""Square-and-multiply exponentiation."""

from typing import Union

import numpy as np

from .bigint import BigInt


def power(base, exponent: Union[BigInt, int]):
    """Compute base^exponent.

    Scans exponent bits from the most significant down. Leading zero bits are
    skipped, so the first squaring happens only after the first set bit.

    Args:
        base: Field element (any type with * whose type(base)(1) is the identity)
        exponent: BigInt, or non-negative int (wrapped in the fewest 64-bit limbs)

    Returns:
        base^exponent; the multiplicative identity for exponent 0

    Raises:
        ValueError: If exponent is a negative int
    """
    if isinstance(exponent, (int, np.integer)):
        exponent = BigInt.from_int(int(exponent))

    result = type(base)(1)
    found_one = False

    for i in range(exponent.max_bits() - 1, -1, -1):
        if found_one:
            result = result * result
        if exponent.test_bit(i):
            found_one = True
            result = result * base

    return result
