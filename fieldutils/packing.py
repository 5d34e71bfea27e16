"""Conversions between bit vectors, machine words and field elements.

Packing treats its input as a little-endian bitstream and cuts it into chunks
of at most field.capacity (num_bits - 1) bits. A chunk therefore always
encodes an integer strictly below the modulus, whatever the modulus looks
like, and unpacking recovers the exact bits.

Bit vectors are returned as numpy bool arrays with index 0 the least
significant bit.
"""

from typing import Optional, Sequence

import galois
import numpy as np

from .field import Field
from .utils import div_ceil


# --- Packing ---

def _pack_bitstream(field: Field, bits: np.ndarray, chunk_bits: int) -> galois.FieldArray:
    """Cut a bitstream into chunk_bits-wide little-endian integers, zero-padding the tail."""
    assert 0 < chunk_bits <= field.capacity
    n_chunks = div_ceil(len(bits), chunk_bits)

    padded = np.zeros(n_chunks * chunk_bits, dtype=bool)
    padded[:len(bits)] = bits
    chunks = padded.reshape(n_chunks, chunk_bits)

    result = field.GF.Zeros(n_chunks)
    for i in range(n_chunks):
        value = int.from_bytes(np.packbits(chunks[i], bitorder="little").tobytes(), "little")
        result[i] = value
    return result


def pack_int_vector_into_field_element_vector(
    field: Field,
    words: Sequence[int],
    w: int,
) -> galois.FieldArray:
    """Pack the low w bits of each word into field elements.

    Bit j of words[i] is bitstream position i*w + j. The stream is repacked
    capacity bits per element.

    Args:
        field: Target field
        words: Non-negative integers, each assumed to fit in w bits
        w: Bits taken from every word

    Returns:
        Vector of length ceil(len(words) * w / capacity)
    """
    if w <= 0:
        raise ValueError(f"word width must be positive, got {w}")
    bits = np.array([(int(word) >> j) & 1 for word in words for j in range(w)], dtype=bool)
    return _pack_bitstream(field, bits, field.capacity)


def pack_bit_vector_into_field_element_vector(
    field: Field,
    bits: Sequence[bool],
    chunk_bits: Optional[int] = None,
) -> galois.FieldArray:
    """Pack consecutive bits into field elements, chunk_bits per element.

    Args:
        field: Target field
        bits: Bit vector, least significant first within each chunk
        chunk_bits: Bits per element; defaults to field.capacity

    Returns:
        Vector of length ceil(len(bits) / chunk_bits)

    Raises:
        ValueError: If chunk_bits is not in [1, field.capacity]
    """
    if chunk_bits is None:
        chunk_bits = field.capacity
    if not 0 < chunk_bits <= field.capacity:
        raise ValueError(f"chunk_bits must be in [1, {field.capacity}], got {chunk_bits}")
    return _pack_bitstream(field, np.asarray(bits, dtype=bool), chunk_bits)


# --- One Bit Per Element ---

def convert_bit_vector_to_field_element_vector(field: Field, bits: Sequence[bool]) -> galois.FieldArray:
    """Map every bit to one or zero, one element per bit."""
    result = field.GF.Zeros(len(bits))
    for i, bit in enumerate(bits):
        if bit:
            result[i] = field.one
    return result


def convert_field_element_vector_to_bit_vector(field: Field, elements) -> np.ndarray:
    """Inverse of convert_bit_vector_to_field_element_vector.

    Raises:
        ValueError: If any element is neither zero nor one
    """
    bits = np.zeros(len(elements), dtype=bool)
    for i in range(len(elements)):
        el = elements[i]
        if el == field.one:
            bits[i] = True
        elif el != field.zero:
            raise ValueError(f"element {i} is not boolean: {int(el)}")
    return bits


# --- Single Element ---

def convert_field_element_to_bit_vector(
    field: Field,
    element: galois.FieldArray,
    bitcount: Optional[int] = None,
) -> np.ndarray:
    """Decompose an element's canonical representative into bits, LSB first.

    Args:
        field: Field of element
        element: Element to decompose
        bitcount: If given, keep only the first bitcount bits (zero-padded if
            larger than size_in_bits())

    Returns:
        Bool array of length size_in_bits(), or bitcount
    """
    b = field.as_bigint(element)
    bits = np.array([b.test_bit(i) for i in range(field.size_in_bits())], dtype=bool)
    if bitcount is None:
        return bits

    result = np.zeros(bitcount, dtype=bool)
    n = min(bitcount, len(bits))
    result[:n] = bits[:n]
    return result


def convert_bit_vector_to_field_element(field: Field, bits: Sequence[bool]) -> galois.FieldArray:
    """Compute sum(bits[i] * 2^i) in the field.

    Raises:
        ValueError: If len(bits) > num_bits
    """
    if len(bits) > field.size_in_bits():
        raise ValueError(f"bit vector of length {len(bits)} exceeds field size {field.size_in_bits()}")

    res = field.zero
    c = field.one
    for bit in bits:
        if bit:
            res = res + c
        c = c + c
    return res
