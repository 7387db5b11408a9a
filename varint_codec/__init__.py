# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Variable-length integer codec for fixed-width integers.

Unsigned values use LEB128-style varints; signed values are zigzag
mapped first so that small negative numbers stay short.

Example usage:
    from varint_codec import IntType, encode_i32, decode_i32

    data = encode_i32(-300)          # b"\\xd7\\x04"
    value = decode_i32(data)         # -300

    data = IntType.U16.to_varint(0xCAFE)   # b"\\xfe\\x95\\x03"
    value = IntType.U16.from_varint(data)  # 0xCAFE

Decoding never raises: overflow of the target type wraps silently and
an unterminated varint decodes to its partial value.
"""

from .varint import (
    ACCUMULATOR_BITS,
    encode_varint,
    decode_varint,
)
from .zigzag import zigzag_encode, zigzag_decode
from .widths import (
    IntType,
    encode,
    decode,
    encode_u16,
    decode_u16,
    encode_u32,
    decode_u32,
    encode_u64,
    decode_u64,
    encode_i16,
    decode_i16,
    encode_i32,
    decode_i32,
    encode_i64,
    decode_i64,
)

__version__ = "0.1.0"

__all__ = [
    # Unsigned codec
    "ACCUMULATOR_BITS",
    "encode_varint",
    "decode_varint",
    # ZigZag
    "zigzag_encode",
    "zigzag_decode",
    # Typed dispatch
    "IntType",
    "encode",
    "decode",
    "encode_u16",
    "decode_u16",
    "encode_u32",
    "decode_u32",
    "encode_u64",
    "decode_u64",
    "encode_i16",
    "decode_i16",
    "encode_i32",
    "decode_i32",
    "encode_i64",
    "decode_i64",
]
