"""Prime fields and their constants, backed by the galois library.

A Field bundles a galois FieldArray class (the element type) with the
constants the utilities need: bit width, limb count, 2-adicity, a primitive
2^s-th root of unity and a multiplicative generator. Records are immutable
and built once per field with define_field(). Elements are 0-D galois
arrays for scalars and 1-D arrays for vectors.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Union

import galois

from .bigint import LIMB_BITS, BigInt
from .utils import div_ceil

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class Field:
    """Immutable parameter record for a prime field.

    Attributes:
        name: Human-readable field name
        GF: galois FieldArray subclass; GF(x) builds elements, GF.Zeros(n) vectors
        modulus: Field characteristic p
        num_bits: Bit width of p
        num_limbs: Number of LIMB_BITS-wide words needed to hold p
        two_adicity: Largest s such that 2^s divides p - 1
        multiplicative_generator: Primitive root mod p (generates the multiplicative group)
        root_of_unity: Primitive 2^two_adicity-th root of unity
    """

    name: str
    GF: type
    modulus: int
    num_bits: int
    num_limbs: int
    two_adicity: int
    multiplicative_generator: galois.FieldArray
    root_of_unity: galois.FieldArray

    @property
    def capacity(self) -> int:
        """Number of bits that always fit strictly below the modulus."""
        return self.num_bits - 1

    def size_in_bits(self) -> int:
        return self.num_bits

    @property
    def zero(self) -> galois.FieldArray:
        return self.GF(0)

    @property
    def one(self) -> galois.FieldArray:
        return self.GF(1)

    def element(self, value: Union[int, BigInt]) -> galois.FieldArray:
        """Build a field element from an int or BigInt (reduced mod p)."""
        return self.GF(int(value) % self.modulus)

    def as_bigint(self, element: galois.FieldArray) -> BigInt:
        """Canonical representative of element as a num_limbs BigInt."""
        return BigInt.from_int(int(element), self.num_limbs)

    def is_zero(self, element: galois.FieldArray) -> bool:
        return bool(element == 0)

    def __repr__(self) -> str:
        return f"Field({self.name}, num_bits={self.num_bits}, two_adicity={self.two_adicity})"


# --- Field Construction ---

def _two_adicity(modulus: int) -> int:
    """Largest s such that 2^s divides modulus - 1."""
    m = modulus - 1
    s = 0
    while m % 2 == 0:
        m //= 2
        s += 1
    return s


# Fields up to this width have p - 1 small enough for galois to factor quickly
_VERIFY_GENERATOR_MAX_BITS = 64


def define_field(modulus: int, generator: int, name: Optional[str] = None) -> Field:
    """Define a prime field and derive its constants.

    The generator must be a primitive root mod p. It is always checked to be a
    quadratic non-residue, which is what gives the derived root of unity its
    full 2^s order. For fields up to 64 bits it is also checked to generate the
    whole group; wider fields trust the caller, since that check would factor
    p - 1. All checks run before the galois class is created, and the class is
    built with verify=False on the strength of them.

    Args:
        modulus: Odd prime p
        generator: Primitive root mod p
        name: Optional display name

    Returns:
        Field record

    Raises:
        ValueError: If modulus is not an odd prime or generator is not a primitive root
    """
    if modulus <= 2 or not galois.is_prime(modulus):
        raise ValueError(f"modulus must be an odd prime, got {modulus}")
    if not 0 < generator < modulus:
        raise ValueError(f"generator must be in [1, {modulus - 1}], got {generator}")

    s = _two_adicity(modulus)
    root_int = pow(generator, (modulus - 1) >> s, modulus)
    # root has order exactly 2^s iff its 2^(s-1)-th power is -1, not 1
    if pow(root_int, 1 << (s - 1), modulus) == 1:
        raise ValueError(f"generator {generator} is a quadratic residue mod {modulus}")
    if modulus.bit_length() <= _VERIFY_GENERATOR_MAX_BITS and not galois.is_primitive_root(generator, modulus):
        raise ValueError(f"generator {generator} is not a primitive root mod {modulus}")

    GF = galois.GF(modulus, primitive_element=generator, verify=False)
    num_bits = modulus.bit_length()

    field = Field(
        name=name or f"GF({modulus})",
        GF=GF,
        modulus=modulus,
        num_bits=num_bits,
        num_limbs=div_ceil(num_bits, LIMB_BITS),
        two_adicity=s,
        multiplicative_generator=GF(generator),
        root_of_unity=GF(root_int),
    )
    logger.debug(
        "Defined field %s: num_bits=%d num_limbs=%d two_adicity=%d",
        field.name, field.num_bits, field.num_limbs, field.two_adicity,
    )
    return field


# --- Predefined Fields ---

# alt_bn128 scalar field r
BN254_FR_MODULUS = 21888242871839275222246405745257275088548364400416034343698204186575808495617

# Goldilocks prime: p = 2^64 - 2^32 + 1
GOLDILOCKS_PRIME = 0xFFFFFFFF00000001

BN254_FR = define_field(BN254_FR_MODULUS, 5, name="bn254_fr")
"""BN254 scalar field: 254 bits, 2-adicity 28."""

GOLDILOCKS = define_field(GOLDILOCKS_PRIME, 7, name="goldilocks")
"""Goldilocks field: 64 bits, 2-adicity 32."""
