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

from ...config import build_codec, load_codec_defaults
from ...encoding.alphabets import duplicate_symbols
from ...encoding.base32 import Base32Codec
from .common import _ctx_value
from .log import _warn


def _resolve_codec(
    ctx: typer.Context,
    *,
    alphabet: str | None = None,
    padding: bool | None = None,
    padding_char: str | None = None,
    case_sensitive: bool | None = None,
    ignore_whitespace: bool | None = None,
    strict_length: bool | None = None,
    quiet: bool = False,
) -> Base32Codec:
    defaults = load_codec_defaults(_ctx_value(ctx, "config"))
    codec = build_codec(
        defaults,
        alphabet=alphabet,
        padding=padding,
        padding_char=padding_char,
        case_sensitive=case_sensitive,
        ignore_whitespace=ignore_whitespace,
        strict_length=strict_length,
    )
    duplicates = duplicate_symbols(codec.alphabet, case_sensitive=codec.case_sensitive)
    if duplicates:
        symbols = ", ".join(repr(symbol) for symbol in duplicates)
        _warn(f"alphabet repeats {symbols}; decoding is ambiguous", quiet=quiet)
    return codec
