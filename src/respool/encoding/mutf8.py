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


"""Conversion between modified UTF-8 and standard UTF-8.

String pools store UTF-8 strings as modified UTF-8, which differs from
standard UTF-8 in two ways:

1. Supplementary characters (above U+FFFF) are written as a surrogate pair,
   each surrogate as its own 3-byte sequence, instead of one 4-byte sequence.
2. U+0000 is written as ``C0 80`` instead of ``00``.

Every other character has the same bytes in both encodings.
"""

from __future__ import annotations

from .buffers import ByteRegion, read_bytes

_NUL_MODIFIED = b"\xc0\x80"


def modified_utf8_to_utf8(data: ByteRegion, offset: int, length: int) -> bytes:
    """Convert ``length`` bytes of modified UTF-8 at ``offset`` to standard UTF-8."""
    modified = read_bytes(data, offset, length)
    # Modified UTF-8 is never shorter than the equivalent UTF-8.
    utf8 = bytearray(length)
    modified_index = 0
    utf8_index = 0

    while modified_index < length:
        if length >= modified_index + 6 and _is_surrogate_pair(modified, modified_index):
            high = _decode_3byte_utf8(modified, modified_index)
            low = _decode_3byte_utf8(modified, modified_index + 3)
            code_point = 0x10000 + (((high & 0x3FF) << 10) | (low & 0x3FF))
            _encode_4byte_utf8(code_point, utf8, utf8_index)
            modified_index += 6
            utf8_index += 4
        elif (
            length >= modified_index + 2
            and modified[modified_index] == 0xC0
            and modified[modified_index + 1] == 0x80
        ):
            utf8[utf8_index] = 0
            modified_index += 2
            utf8_index += 1
        else:
            utf8[utf8_index] = modified[modified_index]
            modified_index += 1
            utf8_index += 1

    return bytes(utf8[:utf8_index])


def utf8_to_modified_utf8(utf8: bytes) -> bytes:
    """Convert standard UTF-8 to modified UTF-8."""
    modified = bytearray(modified_utf8_length(utf8))
    utf8_index = 0
    modified_index = 0
    size = len(utf8)

    while utf8_index < size:
        if utf8_index + 4 <= size and _is_4byte_utf8_lead(utf8[utf8_index]):
            code_point = (
                ((utf8[utf8_index] & 0x07) << 18)
                | ((utf8[utf8_index + 1] & 0x3F) << 12)
                | ((utf8[utf8_index + 2] & 0x3F) << 6)
                | (utf8[utf8_index + 3] & 0x3F)
            )
            high = ((code_point - 0x10000) >> 10) | 0xD800
            low = ((code_point - 0x10000) & 0x3FF) | 0xDC00
            _encode_3byte_utf8(high, modified, modified_index)
            _encode_3byte_utf8(low, modified, modified_index + 3)
            utf8_index += 4
            modified_index += 6
        elif utf8[utf8_index] == 0:
            modified[modified_index : modified_index + 2] = _NUL_MODIFIED
            utf8_index += 1
            modified_index += 2
        else:
            modified[modified_index] = utf8[utf8_index]
            utf8_index += 1
            modified_index += 1

    return bytes(modified)


def modified_utf8_length(utf8: bytes) -> int:
    """Return the size ``utf8`` will have once converted to modified UTF-8."""
    total = 0
    index = 0
    size = len(utf8)
    while index < size:
        if index + 4 <= size and _is_4byte_utf8_lead(utf8[index]):
            total += 6
            index += 4
        elif utf8[index] == 0:
            total += 2
            index += 1
        else:
            total += 1
            index += 1
    return total


def _is_surrogate_pair(data: bytes, index: int) -> bool:
    # ED A0..AF xx is a high surrogate, ED B0..BF xx a low one.
    return (
        data[index] == 0xED
        and data[index + 1] & 0xF0 == 0xA0
        and data[index + 3] == 0xED
        and data[index + 4] & 0xF0 == 0xB0
    )


def _is_4byte_utf8_lead(byte: int) -> bool:
    return byte & 0xF8 == 0xF0


def _decode_3byte_utf8(data: bytes, index: int) -> int:
    return (
        ((data[index] & 0x0F) << 12)
        | ((data[index + 1] & 0x3F) << 6)
        | (data[index + 2] & 0x3F)
    )


def _encode_3byte_utf8(code_point: int, out: bytearray, index: int) -> None:
    # Masked so an overlong 4-byte input cannot push a byte out of range.
    out[index] = (0xE0 | (code_point >> 12)) & 0xFF
    out[index + 1] = 0x80 | ((code_point >> 6) & 0x3F)
    out[index + 2] = 0x80 | (code_point & 0x3F)


def _encode_4byte_utf8(code_point: int, out: bytearray, index: int) -> None:
    out[index] = 0xF0 | (code_point >> 18)
    out[index + 1] = 0x80 | ((code_point >> 12) & 0x3F)
    out[index + 2] = 0x80 | ((code_point >> 6) & 0x3F)
    out[index + 3] = 0x80 | (code_point & 0x3F)
