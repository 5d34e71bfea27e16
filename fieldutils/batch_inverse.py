"""Montgomery batch inversion.

Converts N field inversions into 3N multiplications + 1 inversion:
1. Forward pass: prefix products prod[i] = a[0] * a[1] * ... * a[i-1]
2. Single inversion of the total product
3. Backward pass: a[i]^(-1) = acc_inv * prod[i], then peel a[i] off acc_inv
"""

import numpy as np


def batch_invert(values) -> None:
    """Invert every element of values in place.

    Works with a galois FieldArray or a list of galois scalars.

    Args:
        values: Mutable sequence of field elements (must all be non-zero)

    Raises:
        ZeroDivisionError: If any element is zero; values is left untouched
    """
    n = len(values)
    if n == 0:
        return
    for i in range(n):
        if values[i] == 0:
            raise ZeroDivisionError(f"cannot batch invert: element {i} is zero")

    field_type = type(values[0])

    # Forward pass: prefix products
    prod = field_type.Zeros(n)
    acc = field_type(1)
    for i in range(n):
        prod[i] = acc
        acc = acc * values[i]

    # Single inversion of the total product (only 1 expensive inversion)
    acc_inv = acc ** -1

    # Backward pass: extract individual inverses
    for i in range(n - 1, -1, -1):
        old = values[i]
        inv = acc_inv * prod[i]
        acc_inv = acc_inv * old
        values[i] = inv


def batch_inverse(values):
    """Return the elementwise inverses of values, leaving values unchanged.

    Array input gives an array of the same field type, list input a list.
    """
    if isinstance(values, np.ndarray):
        result = values.copy()
    else:
        result = list(values)
    batch_invert(result)
    return result
