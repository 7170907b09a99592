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
from ..core.io import _read_input_text, _write_output

_DECODE_HELP = (
    "Decode Base32 text back to bytes.\n\n"
    "Reads INPUT (or stdin when omitted or '-'). Leading and trailing whitespace is\n"
    "always dropped; use --ignore-whitespace for wrapped or grouped text.\n\n"
    "Examples:\n"
    "  b32codec decode secret.txt -o secret.bin\n"
    "  echo MZXW6YTBOI | b32codec decode\n"
    "  b32codec decode --alphabet zbase32 --ignore-whitespace note.txt\n"
)


def register(app: typer.Typer) -> None:
    app.command(help=_DECODE_HELP)(decode)


def decode(
    ctx: typer.Context,
    input_path: str | None = typer.Argument(
        None,
        metavar="INPUT",
        help="File to decode (default: stdin).",
        show_default=False,
    ),
    output: str | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the decoded bytes to this file (default: stdout).",
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
        help="Require padded input (length a multiple of 8).",
        show_default=False,
        rich_help_panel="Codec",
    ),
    padding_char: str | None = typer.Option(
        None,
        "--padding-char",
        help="Padding character (default: '=').",
        rich_help_panel="Codec",
    ),
    case_sensitive: bool | None = typer.Option(
        None,
        "--case-sensitive/--case-insensitive",
        help="Match symbols case-sensitively.",
        show_default=False,
        rich_help_panel="Codec",
    ),
    ignore_whitespace: bool | None = typer.Option(
        None,
        "--ignore-whitespace/--strict-whitespace",
        help="Drop whitespace anywhere in the input.",
        show_default=False,
        rich_help_panel="Codec",
    ),
    strict_length: bool | None = typer.Option(
        None,
        "--strict-length/--lenient-length",
        help="Reject input whose last group has a length no encoder produces.",
        show_default=False,
        rich_help_panel="Codec",
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
            case_sensitive=case_sensitive,
            ignore_whitespace=ignore_whitespace,
            strict_length=strict_length,
            quiet=quiet_value,
        )
        text = _read_input_text(input_path).strip()
        _write_output(output, codec.decode(text), quiet=quiet_value)

    _run_cli(_run, debug=bool(_ctx_value(ctx, "debug")))
