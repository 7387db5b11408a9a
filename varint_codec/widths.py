# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Typed varint entry points for fixed-width integers.

Unsigned types are varint-encoded directly. Signed types go through the
zigzag mapping first.

Warning: narrowing a decoded value to the target width is not checked.
A value too large for the type wraps around the same way a C cast would.
"""

from enum import Enum

from .varint import BytesLike, encode_varint, decode_varint
from .zigzag import to_signed, zigzag_encode, zigzag_decode


class IntType(Enum):
    """Supported integer types as (width in bits, signed)."""
    U16 = (16, False)
    U32 = (32, False)
    U64 = (64, False)
    I16 = (16, True)
    I32 = (32, True)
    I64 = (64, True)

    def __str__(self) -> str:
        return self.name.lower()

    @classmethod
    def from_name(cls, name: str) -> "IntType":
        """Look up a type by its short name (e.g. "u16", "I64")."""
        try:
            return cls[name.upper()]
        except KeyError:
            choices = ", ".join(str(t) for t in cls)
            raise ValueError(f"Unknown integer type: {name!r} (expected one of {choices})")

    @property
    def width(self) -> int:
        return self.value[0]

    @property
    def signed(self) -> bool:
        return self.value[1]

    @property
    def min_value(self) -> int:
        return -(1 << (self.width - 1)) if self.signed else 0

    @property
    def max_value(self) -> int:
        if self.signed:
            return (1 << (self.width - 1)) - 1
        return (1 << self.width) - 1

    def narrow(self, value: int) -> int:
        """Truncate value to this type's width, wrapping on overflow."""
        if self.signed:
            return to_signed(value, self.width)
        return value & ((1 << self.width) - 1)

    def to_varint(self, value: int) -> bytes:
        """Encode value as this type."""
        return encode(value, self)

    def from_varint(self, data: BytesLike) -> int:
        """Decode data as this type."""
        return decode(data, self)


def encode(value: int, int_type: IntType) -> bytes:
    """
    Encode an integer of the given type as a varint.

    Args:
        value: Integer to encode; cast to int_type first
        int_type: Target integer type

    Returns:
        Varint-encoded bytes
    """
    value = int_type.narrow(value)
    if int_type.signed:
        value = zigzag_encode(value)
    return encode_varint(value)


def decode(data: BytesLike, int_type: IntType) -> int:
    """
    Decode a varint as an integer of the given type.

    Args:
        data: Bytes starting with the varint
        int_type: Target integer type

    Returns:
        Decoded value, truncated to int_type (no overflow check)
    """
    value = decode_varint(data)
    if int_type.signed:
        value = zigzag_decode(value)
    return int_type.narrow(value)


def encode_u16(value: int) -> bytes:
    """Encode a u16 as a varint."""
    return encode(value, IntType.U16)


def decode_u16(data: BytesLike) -> int:
    """Decode a varint as a u16."""
    return decode(data, IntType.U16)


def encode_u32(value: int) -> bytes:
    """Encode a u32 as a varint."""
    return encode(value, IntType.U32)


def decode_u32(data: BytesLike) -> int:
    """Decode a varint as a u32."""
    return decode(data, IntType.U32)


def encode_u64(value: int) -> bytes:
    """Encode a u64 as a varint."""
    return encode(value, IntType.U64)


def decode_u64(data: BytesLike) -> int:
    """Decode a varint as a u64."""
    return decode(data, IntType.U64)


def encode_i16(value: int) -> bytes:
    """Encode an i16 as a varint."""
    return encode(value, IntType.I16)


def decode_i16(data: BytesLike) -> int:
    """Decode a varint as an i16."""
    return decode(data, IntType.I16)


def encode_i32(value: int) -> bytes:
    """Encode an i32 as a varint."""
    return encode(value, IntType.I32)


def decode_i32(data: BytesLike) -> int:
    """Decode a varint as an i32."""
    return decode(data, IntType.I32)


def encode_i64(value: int) -> bytes:
    """Encode an i64 as a varint."""
    return encode(value, IntType.I64)


def decode_i64(data: BytesLike) -> int:
    """Decode a varint as an i64."""
    return decode(data, IntType.I64)
