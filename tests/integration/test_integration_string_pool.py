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


import unittest

from respool import StringType, decode_string, decode_string_record, encode_string
from tests.test_support import SAMPLE_STRINGS


def _build_pool(strings: tuple[str, ...], string_type: StringType) -> tuple[bytes, list[int]]:
    data = bytearray()
    offsets: list[int] = []
    for text in strings:
        offsets.append(len(data))
        data.extend(encode_string(text, string_type))
    # Pools pad string data to a 4-byte boundary.
    while len(data) % 4:
        data.append(0)
    return bytes(data), offsets


class TestIntegrationStringPool(unittest.TestCase):
    def test_walk_records_by_size(self) -> None:
        for string_type in StringType:
            long_size = 0x7FFF if string_type is StringType.UTF8 else 0x8001
            strings = (*SAMPLE_STRINGS, "x" * 0x90, "y" * long_size)
            with self.subTest(string_type=string_type):
                data, offsets = _build_pool(strings, string_type)
                offset = 0
                decoded: list[str] = []
                for expected_offset in offsets:
                    self.assertEqual(offset, expected_offset)
                    record = decode_string_record(data, offset, string_type)
                    decoded.append(record.text)
                    offset += record.size
                self.assertEqual(tuple(decoded), strings)
                self.assertLess(len(data) - offset, 4)

    def test_random_access_by_offset(self) -> None:
        strings = ("first", "第二", "\U0001f600 third", "")
        for string_type in StringType:
            with self.subTest(string_type=string_type):
                data, offsets = _build_pool(strings, string_type)
                view = memoryview(data)
                for index in reversed(range(len(strings))):
                    self.assertEqual(
                        decode_string(view, offsets[index], string_type), strings[index]
                    )


if __name__ == "__main__":
    unittest.main()
