"""Tests for fixed-limb big integers."""

import pytest

from fieldutils import LIMB_BITS, BigInt


class TestBigInt:
    """Construction and bit queries."""

    def test_from_int_single_limb(self) -> None:
        b = BigInt.from_int(0b1011)
        assert b.limbs == (11,)
        assert b.num_limbs == 1
        assert b.max_bits() == LIMB_BITS

    def test_from_int_multi_limb(self) -> None:
        value = (3 << 64) | 5
        b = BigInt.from_int(value)
        assert b.limbs == (5, 3)
        assert int(b) == value

    def test_from_int_fixed_limbs_pads(self) -> None:
        b = BigInt.from_int(1, num_limbs=4)
        assert b.limbs == (1, 0, 0, 0)
        assert b.max_bits() == 4 * LIMB_BITS
        assert b.num_bits() == 1

    def test_zero(self) -> None:
        b = BigInt.from_int(0)
        assert b.limbs == (0,)
        assert b.is_zero()
        assert b.num_bits() == 0

    def test_from_limbs(self) -> None:
        b = BigInt.from_limbs([0, 1])
        assert int(b) == 1 << 64
        assert b.num_bits() == 65

    def test_test_bit(self) -> None:
        b = BigInt.from_int((1 << 70) | 0b101)
        assert b.test_bit(0)
        assert not b.test_bit(1)
        assert b.test_bit(2)
        assert b.test_bit(70)
        assert not b.test_bit(69)
        assert not b.test_bit(b.max_bits())
        assert not b.test_bit(-1)

    def test_rejects_negative(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            BigInt.from_int(-1)

    def test_rejects_overflow(self) -> None:
        with pytest.raises(ValueError, match="limbs"):
            BigInt.from_int(1 << 64, num_limbs=1)

    def test_rejects_bad_limb(self) -> None:
        with pytest.raises(ValueError, match="limb out of range"):
            BigInt.from_limbs([1 << 64])
