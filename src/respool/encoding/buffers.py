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

from typing import Union

ByteRegion = Union[bytes, bytearray, memoryview]


def read_u8(data: ByteRegion, offset: int) -> int:
    _check_range(data, offset, 1)
    return data[offset]


def read_u16le(data: ByteRegion, offset: int) -> int:
    _check_range(data, offset, 2)
    return data[offset] | (data[offset + 1] << 8)


def read_bytes(data: ByteRegion, offset: int, size: int) -> bytes:
    _check_range(data, offset, size)
    return bytes(data[offset : offset + size])


def _check_range(data: ByteRegion, offset: int, size: int) -> None:
    # Slicing and negative indexing would otherwise hide reads past either end.
    if offset < 0 or size < 0 or offset + size > len(data):
        raise IndexError(
            f"read of {size} bytes at offset {offset} is outside buffer of {len(data)} bytes"
        )
