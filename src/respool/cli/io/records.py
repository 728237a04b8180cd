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

from pathlib import Path


def format_hex(data: bytes) -> str:
    return data.hex(" ").upper()


def parse_hex(text: str) -> bytes:
    compact = "".join(text.split())
    if compact[:2].lower() == "0x":
        compact = compact[2:]
    try:
        return bytes.fromhex(compact)
    except ValueError as exc:
        raise ValueError(f"invalid hex input: {exc}") from exc


def read_input_bytes(hex_text: str | None, input_path: Path | None) -> bytes:
    if hex_text is not None and input_path is not None:
        raise ValueError("use either HEX or --input, not both")
    if input_path is not None:
        resolved = input_path.expanduser()
        if not resolved.is_file():
            raise FileNotFoundError(f"input file not found: {resolved}")
        return resolved.read_bytes()
    if hex_text is None:
        raise ValueError("provide the record as HEX or pass --input")
    return parse_hex(hex_text)


def write_output_bytes(path: Path, data: bytes) -> Path:
    resolved = path.expanduser()
    resolved.parent.mkdir(parents=True, exist_ok=True)
    resolved.write_bytes(data)
    return resolved
