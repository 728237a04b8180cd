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

import typer

from ..api import build_kv_table, console
from ..core.common import _ctx_value, _load_ctx_config, _run_cli

_CONFIG_HELP = (
    "Show the active TOML config.\n\n"
    "The config is taken from --config, then $RESPOOL_CONFIG, then the user config\n"
    "directory, then the packaged defaults.\n\n"
    "Examples:\n"
    "  respool config\n"
    "  respool config --print-path\n"
    "  respool --config ./my_config.toml config\n"
)


def register(app: typer.Typer) -> None:
    app.command(help=_CONFIG_HELP)(config)


def config(
    ctx: typer.Context,
    print_path: bool = typer.Option(
        False,
        "--print-path",
        help="Print the resolved config path and exit.",
        rich_help_panel="Behavior",
    ),
) -> None:
    debug_value = bool(_ctx_value(ctx, "debug"))

    def _run() -> None:
        app_config = _load_ctx_config(ctx)
        if print_path:
            console.print(str(app_config.path), soft_wrap=True)
            return
        rows = [
            ("Path", str(app_config.path)),
            ("String type", app_config.defaults.string_type.value),
            ("Output", app_config.defaults.output),
            ("Quiet", str(app_config.ui.quiet)),
            ("No color", str(app_config.ui.no_color)),
        ]
        console.print(build_kv_table(rows, title="respool config"))

    _run_cli(_run, debug=debug_value)
