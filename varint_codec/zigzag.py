# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
ZigZag mapping between signed and unsigned integers.

Signed values are interleaved by magnitude so that small negative
numbers stay small once varint-encoded:

    0 -> 0, -1 -> 1, 1 -> 2, -2 -> 3, 2 -> 4, ...

Without it, -1 would be an all-ones bit pattern and need the longest
possible encoding.
"""

from .varint import ACCUMULATOR_BITS, ACCUMULATOR_MASK


def to_signed(value: int, width: int) -> int:
    """
    Reinterpret the low `width` bits of value as a two's-complement integer.

    Args:
        value: Integer to narrow (any sign, any size)
        width: Target width in bits

    Returns:
        Signed integer in range -2**(width-1) .. 2**(width-1) - 1
    """
    value &= (1 << width) - 1
    if value >> (width - 1):
        value -= 1 << width
    return value


def zigzag_encode(value: int) -> int:
    """
    Map a signed integer to its zigzag unsigned form.

    Args:
        value: Signed integer (narrowed to the 128-bit accumulator)

    Returns:
        Unsigned zigzag value
    """
    value = to_signed(value, ACCUMULATOR_BITS)
    return ((value << 1) ^ (value >> (ACCUMULATOR_BITS - 1))) & ACCUMULATOR_MASK


def zigzag_decode(value: int) -> int:
    """
    Map a zigzag unsigned value back to the signed integer.

    Args:
        value: Unsigned zigzag value (narrowed to the 128-bit accumulator)

    Returns:
        Signed integer in the 128-bit accumulator range
    """
    # Logical shift keeps the top accumulator value in range
    value &= ACCUMULATOR_MASK
    return (value >> 1) ^ -(value & 1)
