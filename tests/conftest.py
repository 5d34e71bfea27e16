"""Pytest configuration and shared field fixtures."""

import sys
from pathlib import Path

import galois
import pytest

# Add the repository root to the path so the package imports without installation
repo_dir = Path(__file__).parent.parent
if str(repo_dir) not in sys.path:
    sys.path.insert(0, str(repo_dir))

from fieldutils import define_field  # noqa: E402


@pytest.fixture(scope="session")
def f7():
    """GF(7): 3 bits, 2-adicity 1."""
    return define_field(7, 3, name="f7")


@pytest.fixture(scope="session")
def f97():
    """GF(97): 7 bits, 2-adicity 5."""
    return define_field(97, 5, name="f97")


@pytest.fixture(scope="session")
def f254_s2():
    """A 254-bit prime field with 2-adicity 2.

    p = 4q + 1 with q an odd prime, so p = 5 (mod 8) and 2 is a quadratic
    non-residue of order 4q: a primitive root.
    """
    q = 2**251 + 1
    while not (galois.is_prime(q) and galois.is_prime(4 * q + 1)):
        q += 2
    p = 4 * q + 1
    return define_field(p, 2, name="f254_s2")
