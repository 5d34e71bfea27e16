"""Integer and bit-list helpers shared by the field utilities."""

from typing import List, Sequence

import numpy as np


def log2(n: int) -> int:
    """Return the smallest k such that 2^k >= n (0 for n <= 1)."""
    if n <= 1:
        return 0
    return (n - 1).bit_length()


def is_power_of_two(n: int) -> bool:
    """Check whether n is a positive power of two."""
    return n > 0 and (n & (n - 1)) == 0


def div_ceil(x: int, y: int) -> int:
    """Integer division rounding up."""
    assert y > 0
    return (x + y - 1) // y


def int_list_to_bits(words: Sequence[int], wordsize: int) -> np.ndarray:
    """Expand words into a flat bit array, most significant bit of each word first.

    Args:
        words: Non-negative integers, each assumed to fit in wordsize bits
        wordsize: Number of bits taken from every word

    Returns:
        Boolean array of length len(words) * wordsize
    """
    bits: List[bool] = []
    for word in words:
        for j in range(wordsize):
            bits.append(bool((word >> (wordsize - 1 - j)) & 1))
    return np.array(bits, dtype=bool)
