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

from ..core.codec import _resolve_codec
from ..core.common import _ctx_value, _run_cli
from ..core.io import _read_input, _wrap_lines, _write_output

_ENCODE_HELP = (
    "Encode bytes as Base32 text.\n\n"
    "Reads INPUT (or stdin when omitted or '-') and writes the encoded text followed\n"
    "by a newline. Options left unset fall back to the [codec] table of the config file.\n\n"
    "Examples:\n"
    "  b32codec encode secret.bin\n"
    "  b32codec encode --padding secret.bin -o secret.txt\n"
    "  printf foobar | b32codec encode --alphabet zbase32\n"
)


def register(app: typer.Typer) -> None:
    app.command(help=_ENCODE_HELP)(encode)


def encode(
    ctx: typer.Context,
    input_path: str | None = typer.Argument(
        None,
        metavar="INPUT",
        help="File to encode (default: stdin).",
        show_default=False,
    ),
    output: str | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the encoded text to this file (default: stdout).",
    ),
    alphabet: str | None = typer.Option(
        None,
        "--alphabet",
        "-a",
        help="Alphabet name (standard, zbase32) or 32 literal symbols.",
        rich_help_panel="Codec",
    ),
    padding: bool | None = typer.Option(
        None,
        "--padding/--no-padding",
        help="Pad output to a multiple of 8 symbols.",
        show_default=False,
        rich_help_panel="Codec",
    ),
    padding_char: str | None = typer.Option(
        None,
        "--padding-char",
        help="Padding character (default: '=').",
        rich_help_panel="Codec",
    ),
    wrap: int | None = typer.Option(
        None,
        "--wrap",
        "-w",
        min=1,
        help="Break output into lines of this many symbols.",
        rich_help_panel="Output",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress status output.",
        rich_help_panel="Behavior",
    ),
) -> None:
    quiet_value = quiet or bool(_ctx_value(ctx, "quiet"))

    def _run() -> None:
        codec = _resolve_codec(
            ctx,
            alphabet=alphabet,
            padding=padding,
            padding_char=padding_char,
            quiet=quiet_value,
        )
        encoded = codec.encode(_read_input(input_path))
        text = _wrap_lines(encoded, wrap) + "\n"
        _write_output(output, text.encode("utf-8"), quiet=quiet_value)

    _run_cli(_run, debug=bool(_ctx_value(ctx, "debug")))
