"""
Finite-field utilities for proof systems.

This package provides:
- Prime field definitions with their FFT constants (via galois)
- Fixed-limb big integers
- Roots of unity
- Bit/word packing into field elements and unpacking
- Montgomery batch inversion
- Square-and-multiply exponentiation
- Naive multi-scalar multiplication (reference baseline)

Usage:
    from fieldutils import BN254_FR, batch_invert, get_root_of_unity, power

    omega = get_root_of_unity(BN254_FR, 1 << 10)
    assert power(omega, 1 << 10) == BN254_FR.one

    values = BN254_FR.GF([2, 3, 4])
    batch_invert(values)
"""

# Field definitions (via galois)
from .field import (
    Field,
    define_field,
    BN254_FR,
    BN254_FR_MODULUS,
    GOLDILOCKS,
    GOLDILOCKS_PRIME,
)

# Big integers
from .bigint import (
    BigInt,
    LIMB_BITS,
)

# Helpers
from .utils import (
    log2,
    is_power_of_two,
    div_ceil,
    int_list_to_bits,
)

# Roots of unity
from .roots import (
    get_root_of_unity,
    get_roots_of_unity,
)

# Packing
from .packing import (
    pack_int_vector_into_field_element_vector,
    pack_bit_vector_into_field_element_vector,
    convert_bit_vector_to_field_element_vector,
    convert_field_element_vector_to_bit_vector,
    convert_field_element_to_bit_vector,
    convert_bit_vector_to_field_element,
)

# Aggregate numeric operations
from .batch_inverse import batch_invert, batch_inverse
from .power import power
from .multiexp import naive_plain_exp

__version__ = "0.1.0"
__all__ = [
    # Field
    "Field",
    "define_field",
    "BN254_FR",
    "BN254_FR_MODULUS",
    "GOLDILOCKS",
    "GOLDILOCKS_PRIME",
    # Big integers
    "BigInt",
    "LIMB_BITS",
    # Helpers
    "log2",
    "is_power_of_two",
    "div_ceil",
    "int_list_to_bits",
    # Roots of unity
    "get_root_of_unity",
    "get_roots_of_unity",
    # Packing
    "pack_int_vector_into_field_element_vector",
    "pack_bit_vector_into_field_element_vector",
    "convert_bit_vector_to_field_element_vector",
    "convert_field_element_vector_to_bit_vector",
    "convert_field_element_to_bit_vector",
    "convert_bit_vector_to_field_element",
    # Aggregate operations
    "batch_invert",
    "batch_inverse",
    "power",
    "naive_plain_exp",
]
