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
from rich.markup import escape

from ...config import init_user_config, load_codec_defaults, resolve_config_path
from ..core.common import _ctx_value, _run_cli
from ..ui import console

_CONFIG_HELP = (
    "Show the active TOML config and the codec defaults it defines.\n\n"
    "The config is looked up in this order: --config, $B32CODEC_CONFIG, the user\n"
    "config file, then the built-in defaults.\n\n"
    "Examples:\n"
    "  b32codec config\n"
    "  b32codec config --print-path\n"
    "  b32codec config --init\n"
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
    init: bool = typer.Option(
        False,
        "--init",
        help="Copy the built-in defaults to the user config file.",
        rich_help_panel="Behavior",
    ),
) -> None:
    config_value = _ctx_value(ctx, "config")

    def _run() -> None:
        if init:
            path = init_user_config()
            console.print(f"User config ready at {escape(str(path))}", soft_wrap=True)
            return
        path = resolve_config_path(config_value)
        if print_path:
            console.print(str(path), markup=False, highlight=False, soft_wrap=True)
            return
        defaults = load_codec_defaults(path)
        console.print(
            f"[accent]Config:[/accent] {escape(str(path))}", highlight=False, soft_wrap=True
        )
        for name, value in vars(defaults).items():
            console.print(
                f"  {name} = {value!r}", markup=False, highlight=False, soft_wrap=True
            )

    _run_cli(_run, debug=bool(_ctx_value(ctx, "debug")))
