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

import os
import shutil
import sys
from pathlib import Path

from platformdirs import user_config_dir

PACKAGE_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_CONFIG_PATH = PACKAGE_ROOT / "config/default.toml"
USER_CONFIG_FILENAME = "config.toml"
CONFIG_PATH_ENV = "RESPOOL_CONFIG"
XDG_CONFIG_ENV = "XDG_CONFIG_HOME"


def user_config_dir_path() -> Path:
    xdg_override = os.environ.get(XDG_CONFIG_ENV)
    if xdg_override:
        return Path(xdg_override) / "respool"
    if sys.platform == "darwin":
        return Path.home() / ".config" / "respool"
    return Path(user_config_dir("respool", appauthor=False))


def user_config_path() -> Path:
    return user_config_dir_path() / USER_CONFIG_FILENAME


def resolve_config_path(path: str | Path | None = None) -> Path:
    if path:
        return Path(path)

    env_path = os.environ.get(CONFIG_PATH_ENV)
    if env_path and env_path.strip():
        return Path(env_path.strip())

    user_path = user_config_path()
    if user_path.exists():
        return user_path

    return DEFAULT_CONFIG_PATH


def init_user_config() -> Path:
    config_dir = user_config_dir_path()
    try:
        config_dir.mkdir(parents=True, exist_ok=True)
        _copy_if_missing(DEFAULT_CONFIG_PATH, config_dir / USER_CONFIG_FILENAME)
    except OSError as exc:
        raise OSError(f"unable to create config dir at {config_dir}") from exc
    return config_dir


def user_config_needs_init() -> bool:
    return not user_config_path().exists()


def _copy_if_missing(source: Path, dest: Path) -> None:
    if dest.exists():
        return
    dest.parent.mkdir(parents=True, exist_ok=True)
    shutil.copyfile(source, dest)
