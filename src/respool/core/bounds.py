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

# UTF-8 length fields: one byte up to 0x7F, two bytes (15 bits) beyond.
UTF8_SHORT_LENGTH_MAX = 0x7F
UTF8_LENGTH_MAX = 0x7FFF
UTF8_LENGTH_FLAG = 0x80

# UTF-16 length fields: one word up to 0x7FFF, two words (31 bits) beyond.
UTF16_SHORT_LENGTH_MAX = 0x7FFF
UTF16_LENGTH_MAX = 0x7FFFFFFF
UTF16_LENGTH_FLAG = 0x8000

# Record terminators.
UTF8_TERMINATOR = b"\x00"
UTF16_TERMINATOR = b"\x00\x00"


__all__ = [
    "UTF16_LENGTH_FLAG",
    "UTF16_LENGTH_MAX",
    "UTF16_SHORT_LENGTH_MAX",
    "UTF16_TERMINATOR",
    "UTF8_LENGTH_FLAG",
    "UTF8_LENGTH_MAX",
    "UTF8_SHORT_LENGTH_MAX",
    "UTF8_TERMINATOR",
]
