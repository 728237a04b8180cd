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

from respool.encoding.buffers import read_bytes, read_u8, read_u16le


class TestBuffers(unittest.TestCase):
    def test_reads(self) -> None:
        data = b"\x01\x34\x12\xff"
        self.assertEqual(read_u8(data, 0), 1)
        self.assertEqual(read_u16le(data, 1), 0x1234)
        self.assertEqual(read_bytes(data, 1, 3), b"\x34\x12\xff")
        self.assertEqual(read_bytes(data, 4, 0), b"")

    def test_reads_return_bytes_for_views(self) -> None:
        data = memoryview(bytearray(b"abcd"))
        chunk = read_bytes(data, 1, 2)
        self.assertIsInstance(chunk, bytes)
        self.assertEqual(chunk, b"bc")

    def test_out_of_range(self) -> None:
        data = b"\x00\x01\x02"
        cases = (
            lambda: read_u8(data, 3),
            lambda: read_u8(data, -1),
            lambda: read_u16le(data, 2),
            lambda: read_bytes(data, 1, 3),
            lambda: read_bytes(data, -1, 1),
        )
        for index, call in enumerate(cases):
            with self.subTest(case=index):
                with self.assertRaisesRegex(IndexError, "outside buffer of 3 bytes"):
                    call()


if __name__ == "__main__":
    unittest.main()
