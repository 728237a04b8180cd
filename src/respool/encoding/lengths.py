#!/usr/bin/env python3
# Copyright (C) 2026 Alex Stoyanov
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with this program.
# If not, see <https://www.gnu.org/licenses/>.


from __future__ import annotations

from ..core.bounds import (
    UTF16_LENGTH_FLAG,
    UTF16_SHORT_LENGTH_MAX,
    UTF8_LENGTH_FLAG,
    UTF8_SHORT_LENGTH_MAX,
)
from ..core.models import StringType
from .buffers import ByteRegion, read_u8, read_u16le


def encode_length(length: int, string_type: StringType) -> bytes:
    """Encode a string length field.

    UTF-8 pools store lengths in one byte, or two bytes (big-endian, 15 bits)
    flagged by the top bit of the first byte. UTF-16 pools store one
    little-endian word, or two words (31 bits) flagged by the top bit of the
    first word.

    A negative length encodes as zero. Callers never write negative lengths;
    the fallback only keeps a bad count from producing an undecodable field.
    """
    if string_type is StringType.UTF8:
        if length < 0:
            return b"\x00"
        if length > UTF8_SHORT_LENGTH_MAX:
            return bytes((((length & 0x7F00) >> 8) | UTF8_LENGTH_FLAG, length & 0xFF))
        return bytes((length & 0xFF,))
    if string_type is StringType.UTF16:
        if length < 0:
            return b"\x00\x00"
        low = (length & 0xFFFF).to_bytes(2, "little")
        if length > UTF16_SHORT_LENGTH_MAX:
            high = ((length & 0x7FFF0000) >> 16) | UTF16_LENGTH_FLAG
            return high.to_bytes(2, "little") + low
        return low
    raise ValueError(f"unsupported string type: {string_type!r}")


def decode_length(data: ByteRegion, offset: int, string_type: StringType) -> tuple[int, int]:
    """Decode a length field at ``offset`` and return ``(length, next_offset)``."""
    if string_type is StringType.UTF8:
        length = read_u8(data, offset)
        if length & UTF8_LENGTH_FLAG:
            length = ((length & 0x7F) << 8) | read_u8(data, offset + 1)
            return length, offset + 2
        return length, offset + 1
    if string_type is StringType.UTF16:
        length = read_u16le(data, offset)
        if length & UTF16_LENGTH_FLAG:
            length = ((length & 0x7FFF) << 16) | read_u16le(data, offset + 2)
            return length, offset + 4
        return length, offset + 2
    raise ValueError(f"unsupported string type: {string_type!r}")


def length_field_size(length: int, string_type: StringType) -> int:
    if string_type is StringType.UTF8:
        return 2 if length > UTF8_SHORT_LENGTH_MAX else 1
    if string_type is StringType.UTF16:
        return 4 if length > UTF16_SHORT_LENGTH_MAX else 2
    raise ValueError(f"unsupported string type: {string_type!r}")
