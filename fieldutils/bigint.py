"""Fixed-limb unsigned big integers.

A BigInt is the canonical-representative view of a field element: a fixed
number of little-endian machine words. Exponentiation scans its bits and the
packers assemble chunk values limb by limb.
"""

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from .utils import div_ceil

# Machine word width of a single limb
LIMB_BITS = 64
LIMB_MASK = (1 << LIMB_BITS) - 1


@dataclass(frozen=True)
class BigInt:
    """Unsigned integer stored as little-endian 64-bit limbs."""

    limbs: Tuple[int, ...]

    @classmethod
    def from_limbs(cls, limbs: Sequence[int]) -> "BigInt":
        """Build from a limb array, least significant limb first."""
        for limb in limbs:
            if limb < 0 or limb > LIMB_MASK:
                raise ValueError(f"limb out of range [0, 2^{LIMB_BITS}): {limb}")
        return cls(tuple(int(limb) for limb in limbs))

    @classmethod
    def from_int(cls, value: int, num_limbs: Optional[int] = None) -> "BigInt":
        """Split a non-negative int into limbs.

        Args:
            value: Integer to convert
            num_limbs: Fixed limb count; defaults to the fewest limbs that hold value
                (at least one)

        Raises:
            ValueError: If value is negative or does not fit in num_limbs limbs
        """
        if value < 0:
            raise ValueError(f"BigInt must be non-negative, got {value}")
        if num_limbs is None:
            num_limbs = max(1, div_ceil(value.bit_length(), LIMB_BITS))
        if value.bit_length() > num_limbs * LIMB_BITS:
            raise ValueError(f"value needs {value.bit_length()} bits, only {num_limbs} limbs available")
        return cls(tuple((value >> (LIMB_BITS * i)) & LIMB_MASK for i in range(num_limbs)))

    @property
    def num_limbs(self) -> int:
        return len(self.limbs)

    def max_bits(self) -> int:
        """Bit capacity of the representation."""
        return self.num_limbs * LIMB_BITS

    def num_bits(self) -> int:
        """Minimal bit length of the stored value (0 for zero)."""
        for i in range(self.num_limbs - 1, -1, -1):
            if self.limbs[i]:
                return i * LIMB_BITS + self.limbs[i].bit_length()
        return 0

    def test_bit(self, i: int) -> bool:
        if i < 0 or i >= self.max_bits():
            return False
        return bool((self.limbs[i // LIMB_BITS] >> (i % LIMB_BITS)) & 1)

    def is_zero(self) -> bool:
        return not any(self.limbs)

    def __int__(self) -> int:
        value = 0
        for i, limb in enumerate(self.limbs):
            value |= limb << (LIMB_BITS * i)
        return value
