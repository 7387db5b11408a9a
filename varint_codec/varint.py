# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Unsigned varint encoding/decoding (LEB128-style).

Each byte carries 7 bits of payload, least significant group first.
The high bit (0x80) is set on every byte except the last.

Values are handled in a 128-bit accumulator, wider than any supported
target type. Decoding never fails:

- bytes after the terminating byte are ignored;
- input without a terminating byte decodes to the partial value
  accumulated from the bytes present (empty input decodes to 0).

Callers that need a strict decode must pass exactly one terminated varint.
"""

from typing import Iterable, Union

CONTINUATION_BIT = 0x80
PAYLOAD_MASK = 0x7F

ACCUMULATOR_BITS = 128
ACCUMULATOR_MASK = (1 << ACCUMULATOR_BITS) - 1

BytesLike = Union[bytes, bytearray, memoryview, Iterable[int]]


def encode_varint(value: int) -> bytes:
    """
    Encode an unsigned integer as a varint.

    Args:
        value: Integer to encode. It is cast to the unsigned 128-bit
            accumulator first, so a negative value encodes as its
            two's-complement bit pattern.

    Returns:
        Varint-encoded bytes (at least one byte)
    """
    value &= ACCUMULATOR_MASK

    result = []
    while value > PAYLOAD_MASK:
        result.append((value & PAYLOAD_MASK) | CONTINUATION_BIT)
        value >>= 7
    result.append(value)
    return bytes(result)


def decode_varint(data: BytesLike) -> int:
    """
    Decode a varint from bytes.

    Args:
        data: Bytes starting with the varint

    Returns:
        Decoded unsigned value, confined to the 128-bit accumulator

    Warning:
        Decoding stops at the first byte without the continuation bit.
        If no such byte exists the partial value is returned.
    """
    value = 0
    shift = 0

    for byte in data:
        value |= (byte & PAYLOAD_MASK) << shift
        if not (byte & CONTINUATION_BIT):
            break

        shift += 7
        # Later groups land past the accumulator and cannot change the value
        if shift >= ACCUMULATOR_BITS:
            break

    return value & ACCUMULATOR_MASK
