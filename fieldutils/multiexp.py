"""Naive multi-scalar multiplication, kept as a reference baseline."""

from typing import Sequence


def naive_plain_exp(neutral, elements: Sequence, scalars: Sequence):
    """Compute neutral + sum(elements[i] * scalars[i]).

    One group multiplication-by-scalar per term. Windowed and multi-exponentiation
    algorithms are checked against this.

    Args:
        neutral: Identity of the group
        elements: Group elements supporting + and * scalar
        scalars: Field elements, index-aligned with elements

    Raises:
        ValueError: If elements and scalars differ in length
    """
    if len(elements) != len(scalars):
        raise ValueError(f"length mismatch: {len(elements)} elements, {len(scalars)} scalars")

    result = neutral
    for i in range(len(elements)):
        result = result + elements[i] * scalars[i]
    return result
