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

import typer

from ...core.bounds import UTF16_TERMINATOR, UTF8_TERMINATOR
from ...core.models import StringType
from ...formats import decode_string_record
from ..core.common import (
    _ctx_quiet,
    _ctx_value,
    _load_ctx_config,
    _run_cli,
    _string_type_callback,
)
from ..core.log import _warn
from ..io.records import read_input_bytes

_DECODE_HELP = (
    "Decode one string pool record from hex text or a binary file.\n\n"
    "Examples:\n"
    "  respool decode '03 04 61 62 C2 A9 00'\n"
    "  respool decode 0200680069000000 --type utf16\n"
    "  respool decode --input strings.bin --offset 24 --size\n"
)


def register(app: typer.Typer) -> None:
    app.command(help=_DECODE_HELP)(decode)


def decode(
    ctx: typer.Context,
    hex_text: str | None = typer.Argument(
        None,
        metavar="[HEX]",
        help="Record bytes as hex (whitespace allowed).",
    ),
    input: Path | None = typer.Option(
        None,
        "--input",
        "-i",
        help="Read the buffer from this binary file instead.",
        rich_help_panel="Inputs",
    ),
    offset: int = typer.Option(
        0,
        "--offset",
        min=0,
        help="Byte offset of the record's first length field.",
        rich_help_panel="Inputs",
    ),
    string_type: str | None = typer.Option(
        None,
        "--type",
        "-t",
        help="Pool encoding: utf8 or utf16 (defaults to the config value).",
        callback=_string_type_callback,
        rich_help_panel="Encoding",
    ),
    size: bool = typer.Option(
        False,
        "--size",
        help="Also print the record size in bytes.",
        rich_help_panel="Outputs",
    ),
) -> None:
    debug_value = bool(_ctx_value(ctx, "debug"))

    def _run() -> None:
        config = _load_ctx_config(ctx)
        quiet_value = _ctx_quiet(ctx, config)
        resolved_type = string_type or config.defaults.string_type
        data = read_input_bytes(hex_text, input)
        record = decode_string_record(data, offset, resolved_type)
        if not _has_terminator(data, offset + record.size, resolved_type):
            _warn(f"record at offset {offset} is not NUL-terminated", quiet=quiet_value)
        typer.echo(record.text)
        if size:
            typer.echo(str(record.size))

    _run_cli(_run, debug=debug_value)


def _has_terminator(data: bytes, end: int, string_type: StringType) -> bool:
    terminator = UTF8_TERMINATOR if string_type is StringType.UTF8 else UTF16_TERMINATOR
    return data[end - len(terminator) : end] == terminator
