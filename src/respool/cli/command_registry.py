#!/usr/bin/env python3
from __future__ import annotations

import typer

from .commands import (
    config as config_command,
    decode as decode_command,
    encode as encode_command,
)


def register(app: typer.Typer) -> None:
    encode_command.register(app)
    decode_command.register(app)
    config_command.register(app)
