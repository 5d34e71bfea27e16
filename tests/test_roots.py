"""Tests for root-of-unity derivation."""

import numpy as np
import pytest

from fieldutils import BN254_FR, GOLDILOCKS, get_root_of_unity, get_roots_of_unity, power


class TestGetRootOfUnity:

    @pytest.mark.parametrize("log_n", [0, 1, 2, 5, 10, 28])
    def test_bn254_order_is_exact(self, log_n: int) -> None:
        """omega^n == 1 and omega^(n/2) != 1 for n > 1."""
        n = 1 << log_n
        omega = get_root_of_unity(BN254_FR, n)
        assert power(omega, n) == BN254_FR.one
        if n > 1:
            assert power(omega, n // 2) != BN254_FR.one

    @pytest.mark.parametrize("log_n", [1, 8, 16, 32])
    def test_goldilocks_order_is_exact(self, log_n: int) -> None:
        n = 1 << log_n
        omega = get_root_of_unity(GOLDILOCKS, n)
        assert power(omega, n) == GOLDILOCKS.one
        assert power(omega, n // 2) != GOLDILOCKS.one

    def test_order_one_root_is_one(self) -> None:
        assert get_root_of_unity(BN254_FR, 1) == BN254_FR.one

    def test_order_two_root_is_minus_one(self) -> None:
        assert get_root_of_unity(GOLDILOCKS, 2) == GOLDILOCKS.GF(GOLDILOCKS.modulus - 1)

    def test_squaring_halves_order(self) -> None:
        omega_8 = get_root_of_unity(BN254_FR, 8)
        assert omega_8 * omega_8 == get_root_of_unity(BN254_FR, 4)

    def test_full_order_is_field_root(self) -> None:
        assert get_root_of_unity(BN254_FR, 1 << 28) == BN254_FR.root_of_unity

    def test_254_bit_field_with_two_adicity_two(self, f254_s2) -> None:
        omega = get_root_of_unity(f254_s2, 4)
        assert power(omega, 4) == f254_s2.one
        assert power(omega, 2) != f254_s2.one

    def test_254_bit_field_rejects_order_eight(self, f254_s2) -> None:
        with pytest.raises(ValueError, match="two_adicity=2"):
            get_root_of_unity(f254_s2, 8)

    @pytest.mark.parametrize("n", [0, 3, 6, 12])
    def test_rejects_non_power_of_two(self, n: int) -> None:
        with pytest.raises(ValueError, match="power of 2"):
            get_root_of_unity(BN254_FR, n)

    def test_rejects_order_above_two_adicity(self) -> None:
        with pytest.raises(ValueError, match="no root of unity"):
            get_root_of_unity(BN254_FR, 1 << 29)


class TestGetRootsOfUnity:

    def test_domain_powers(self, f97) -> None:
        roots = get_roots_of_unity(f97, 8)
        omega = get_root_of_unity(f97, 8)
        assert len(roots) == 8
        for k in range(8):
            assert roots[k] == power(omega, k)

    def test_domain_elements_are_distinct(self) -> None:
        roots = get_roots_of_unity(BN254_FR, 16)
        assert len({int(r) for r in roots}) == 16

    def test_domain_of_size_one(self) -> None:
        assert np.array_equal(get_roots_of_unity(GOLDILOCKS, 1), GOLDILOCKS.GF([1]))
