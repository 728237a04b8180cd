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

from ...config import OUTPUT_FORMATS
from ...formats import encode_string
from ..api import console
from ..core.common import (
    _ctx_quiet,
    _ctx_value,
    _load_ctx_config,
    _run_cli,
    _string_type_callback,
)
from ..io.records import format_hex, write_output_bytes

_ENCODE_HELP = (
    "Encode text as a string pool record.\n\n"
    "Examples:\n"
    "  respool encode 'ab©'\n"
    "  respool encode hi --type utf16\n"
    "  respool encode hello --format raw -o hello.bin\n"
)


def register(app: typer.Typer) -> None:
    app.command(help=_ENCODE_HELP)(encode)


def _format_callback(value: str | None) -> str | None:
    if value is None:
        return None
    normalized = value.strip().lower()
    if normalized not in OUTPUT_FORMATS:
        raise typer.BadParameter("format must be hex or raw")
    return normalized


def encode(
    ctx: typer.Context,
    text: str = typer.Argument(..., help="Text to encode."),
    string_type: str | None = typer.Option(
        None,
        "--type",
        "-t",
        help="Pool encoding: utf8 or utf16 (defaults to the config value).",
        callback=_string_type_callback,
        rich_help_panel="Encoding",
    ),
    format: str | None = typer.Option(
        None,
        "--format",
        "-f",
        help="Output format: hex or raw (defaults to the config value).",
        callback=_format_callback,
        rich_help_panel="Outputs",
    ),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the record to this file instead of stdout.",
        rich_help_panel="Outputs",
    ),
) -> None:
    debug_value = bool(_ctx_value(ctx, "debug"))

    def _run() -> None:
        config = _load_ctx_config(ctx)
        quiet_value = _ctx_quiet(ctx, config)
        resolved_type = string_type or config.defaults.string_type
        resolved_format = format or config.defaults.output
        record = encode_string(text, resolved_type)
        if resolved_format == "hex":
            payload = (format_hex(record) + "\n").encode("ascii")
        else:
            payload = record
        if output is None:
            typer.echo(payload, nl=False)
            return
        path = write_output_bytes(output, payload)
        if not quiet_value:
            console.print(f"[dim]Wrote {len(record)} byte record to {path}[/dim]")

    _run_cli(_run, debug=debug_value)
