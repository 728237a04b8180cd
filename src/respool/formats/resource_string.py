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

from ..core.bounds import UTF16_TERMINATOR, UTF8_TERMINATOR
from ..core.models import DecodedString, StringType
from ..encoding.buffers import ByteRegion, read_bytes
from ..encoding.lengths import decode_length, encode_length, length_field_size
from ..encoding.mutf8 import modified_utf8_length, modified_utf8_to_utf8, utf8_to_modified_utf8


def decode_string(data: ByteRegion, offset: int, string_type: StringType) -> str:
    """Decode the string record starting at ``offset``.

    Example UTF-8 record for ``ab©``::

        03 04 61 62 C2 A9 00

    The terminator is not checked; only the declared lengths are used.
    """
    return decode_string_record(data, offset, string_type).text


def decode_string_record(
    data: ByteRegion, offset: int, string_type: StringType
) -> DecodedString:
    """Decode the record at ``offset`` and report how many bytes it occupies."""
    start = offset
    # Both encodings lead with the length in UTF-16 code units. UTF-8 records
    # don't need it but it still has to be skipped.
    utf16_units, offset = decode_length(data, offset, string_type)
    if string_type is StringType.UTF8:
        payload_size, offset = decode_length(data, offset, string_type)
        utf8 = modified_utf8_to_utf8(data, offset, payload_size)
        text = utf8.decode("utf-8", errors="replace")
        end = offset + payload_size + len(UTF8_TERMINATOR)
    else:
        payload_size = utf16_units * 2
        text = read_bytes(data, offset, payload_size).decode("utf-16-le", errors="replace")
        end = offset + payload_size + len(UTF16_TERMINATOR)
    return DecodedString(text=text, size=end - start)


def encode_string(text: str, string_type: StringType) -> bytes:
    """Encode ``text`` as a string pool record of the given type.

    Example UTF-8 record for ``ab©``::

        03 04 61 62 C2 A9 00
    """
    if string_type is StringType.UTF8:
        payload = utf8_to_modified_utf8(text.encode("utf-8", errors="surrogatepass"))
        parts = [
            encode_length(utf16_length(text), string_type),
            encode_length(len(payload), string_type),
            payload,
            UTF8_TERMINATOR,
        ]
    elif string_type is StringType.UTF16:
        payload = text.encode("utf-16-le", errors="surrogatepass")
        parts = [
            encode_length(len(payload) // 2, string_type),
            payload,
            UTF16_TERMINATOR,
        ]
    else:
        raise ValueError(f"unsupported string type: {string_type!r}")
    return b"".join(parts)


def encoded_size(text: str, string_type: StringType) -> int:
    """Return ``len(encode_string(text, string_type))`` without building the record."""
    utf16_units = utf16_length(text)
    if string_type is StringType.UTF8:
        payload_size = modified_utf8_length(text.encode("utf-8", errors="surrogatepass"))
        return (
            length_field_size(utf16_units, string_type)
            + length_field_size(payload_size, string_type)
            + payload_size
            + len(UTF8_TERMINATOR)
        )
    if string_type is StringType.UTF16:
        return (
            length_field_size(utf16_units, string_type) + utf16_units * 2 + len(UTF16_TERMINATOR)
        )
    raise ValueError(f"unsupported string type: {string_type!r}")


def utf16_length(text: str) -> int:
    """Count UTF-16 code units; characters above U+FFFF count twice."""
    return len(text) + sum(1 for char in text if ord(char) > 0xFFFF)
