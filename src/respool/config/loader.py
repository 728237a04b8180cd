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

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

from ..core.models import StringType
from .installer import resolve_config_path

OutputFormat = Literal["hex", "raw"]
OUTPUT_FORMATS: tuple[OutputFormat, ...] = ("hex", "raw")


@dataclass(frozen=True)
class CodecDefaults:
    string_type: StringType = StringType.UTF8
    output: OutputFormat = "hex"


@dataclass(frozen=True)
class UiDefaults:
    quiet: bool = False
    no_color: bool = False


@dataclass(frozen=True)
class AppConfig:
    path: Path
    defaults: CodecDefaults = field(default_factory=CodecDefaults)
    ui: UiDefaults = field(default_factory=UiDefaults)


def load_config(path: str | Path | None = None) -> AppConfig:
    config_path = resolve_config_path(path)
    data = _load_toml(config_path)
    return AppConfig(
        path=config_path,
        defaults=_parse_codec_defaults(_get_dict(data, "defaults")),
        ui=_parse_ui_defaults(_get_dict(data, "ui")),
    )


def parse_string_type(value: object, *, field: str) -> StringType:
    if isinstance(value, StringType):
        return value
    if not isinstance(value, str):
        raise ValueError(f"{field} must be 'utf8' or 'utf16'")
    normalized = value.strip().lower().replace("-", "").replace("_", "")
    for string_type in StringType:
        if normalized == string_type.value:
            return string_type
    raise ValueError(f"{field} must be 'utf8' or 'utf16'")


def _parse_codec_defaults(cfg: dict[str, object]) -> CodecDefaults:
    string_type = cfg.get("string_type")
    return CodecDefaults(
        string_type=(
            StringType.UTF8
            if string_type is None
            else parse_string_type(string_type, field="defaults.string_type")
        ),
        output=_parse_output_format(cfg.get("output"), field="defaults.output"),
    )


def _parse_ui_defaults(cfg: dict[str, object]) -> UiDefaults:
    return UiDefaults(
        quiet=_parse_bool(cfg.get("quiet"), field="ui.quiet", default=False),
        no_color=_parse_bool(cfg.get("no_color"), field="ui.no_color", default=False),
    )


def _parse_output_format(value: object, *, field: str) -> OutputFormat:
    if value is None:
        return "hex"
    if not isinstance(value, str):
        raise ValueError(f"{field} must be 'hex' or 'raw'")
    normalized = value.strip().lower()
    if normalized == "hex":
        return "hex"
    if normalized == "raw":
        return "raw"
    raise ValueError(f"{field} must be 'hex' or 'raw'")


def _load_toml(path: Path) -> dict[str, object]:
    with path.open("rb") as handle:
        return tomllib.load(handle)


def _get_dict(data: dict[str, object], key: str) -> dict[str, object]:
    value = data.get(key)
    if isinstance(value, dict):
        return value
    return {}


def _parse_bool(value: object, *, field: str, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        if value in (0, 1):
            return bool(value)
        raise ValueError(f"{field} must be a boolean")
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
        raise ValueError(f"{field} must be a boolean")
    raise ValueError(f"{field} must be a boolean")
