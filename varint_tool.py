#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Command-line tool for encoding and decoding varints.

Usage:
    python varint_tool.py encode --type i32 -- -300 1 0xCAFE
    python varint_tool.py decode --type u16 "fe 95 03"
    python varint_tool.py info --type i64
"""

import argparse
import sys
from typing import List, Optional

from varint_codec import IntType, encode, decode


def format_hex(data: bytes) -> str:
    """Format bytes as space-separated lowercase hex pairs."""
    return " ".join(f"{b:02x}" for b in data)


def _plural(count: int, word: str) -> str:
    return f"{count} {word}" if count == 1 else f"{count} {word}s"


def parse_int(text: str) -> int:
    """Parse a decimal or 0x-prefixed integer argument."""
    try:
        return int(text, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {text!r}")


def parse_type(text: str) -> IntType:
    """Parse an integer type argument (u16, i32, ...)."""
    try:
        return IntType.from_name(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def cmd_encode(int_type: IntType, values: List[int]):
    """Encode values and print their varint bytes."""
    for value in values:
        narrowed = int_type.narrow(value)
        if narrowed != value:
            print(f"Warning: {value} does not fit in {int_type}, encoding {narrowed}",
                  file=sys.stderr)
        print(f"{value} -> {format_hex(encode(value, int_type))}")


def cmd_decode(int_type: IntType, text: str) -> bool:
    """Decode a hex string and print the value."""
    try:
        data = bytes.fromhex(text)
    except ValueError as e:
        print(f"Error: invalid hex input: {e}")
        return False

    print(decode(data, int_type))
    return True


def cmd_info(int_type: IntType):
    """Print range and encoded size limits of a type."""
    min_len = len(encode(int_type.min_value, int_type))
    max_len = len(encode(int_type.max_value, int_type))

    print(f"Type {int_type}:")
    print(f"  Width:  {int_type.width} bits")
    print(f"  Signed: {'yes' if int_type.signed else 'no'}")
    print(f"  Min:    {int_type.min_value} ({_plural(min_len, 'byte')})")
    print(f"  Max:    {int_type.max_value} ({_plural(max_len, 'byte')})")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Encode and decode LEB128/zigzag varints"
    )

    # shared by all commands
    type_parser = argparse.ArgumentParser(add_help=False)
    type_parser.add_argument(
        "--type", "-t",
        type=parse_type,
        default=IntType.U64,
        help="Integer type: u16, u32, u64, i16, i32, i64 (default u64)"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # encode command
    encode_parser = subparsers.add_parser("encode", parents=[type_parser],
                                          help="Encode integers")
    encode_parser.add_argument("values", type=parse_int, nargs="+",
                               help="Integers to encode (decimal or 0x hex)")

    # decode command
    decode_parser = subparsers.add_parser("decode", parents=[type_parser],
                                          help="Decode a varint")
    decode_parser.add_argument("hex", help="Varint bytes as hex (e.g. 'ac 02')")

    # info command
    subparsers.add_parser("info", parents=[type_parser],
                          help="Show type range and encoded sizes")

    args = parser.parse_args(argv)

    if args.command == "encode":
        cmd_encode(args.type, args.values)
    elif args.command == "decode":
        if not cmd_decode(args.type, args.hex):
            return 1
    elif args.command == "info":
        cmd_info(args.type)
    return 0


if __name__ == "__main__":
    sys.exit(main())
