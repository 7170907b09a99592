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
from dataclasses import dataclass, replace
from pathlib import Path

from ..encoding.alphabets import (
    ALPHABET_SIZE,
    STANDARD_ALPHABET,
    STANDARD_PADDING_CHAR,
    resolve_alphabet,
)
from ..encoding.base32 import Base32Codec
from .installer import resolve_config_path


@dataclass(frozen=True)
class CodecDefaults:
    alphabet: str = STANDARD_ALPHABET
    padding: bool = False
    padding_char: str = STANDARD_PADDING_CHAR
    case_sensitive: bool = False
    ignore_whitespace: bool = False
    strict_length: bool = False


def load_codec_defaults(path: str | Path | None = None) -> CodecDefaults:
    config_path = resolve_config_path(path)
    if not config_path.is_file():
        raise FileNotFoundError(f"config file not found: {config_path}")
    data = _load_toml(config_path)
    return _parse_codec_defaults(_get_dict(data, "codec"))


def build_codec(
    defaults: CodecDefaults | None = None,
    *,
    alphabet: str | None = None,
    padding: bool | None = None,
    padding_char: str | None = None,
    case_sensitive: bool | None = None,
    ignore_whitespace: bool | None = None,
    strict_length: bool | None = None,
) -> Base32Codec:
    """Build a codec from config defaults; options that are not None win."""
    merged = defaults or CodecDefaults()
    overrides = {
        "alphabet": resolve_alphabet(alphabet) if alphabet is not None else None,
        "padding": padding,
        "padding_char": padding_char,
        "case_sensitive": case_sensitive,
        "ignore_whitespace": ignore_whitespace,
        "strict_length": strict_length,
    }
    explicit = {key: value for key, value in overrides.items() if value is not None}
    merged = replace(merged, **explicit)
    return Base32Codec(
        alphabet=merged.alphabet,
        use_padding=merged.padding,
        case_sensitive=merged.case_sensitive,
        ignore_whitespace=merged.ignore_whitespace,
        padding_char=merged.padding_char,
        strict_length=merged.strict_length,
    )


def _parse_codec_defaults(cfg: dict[str, object]) -> CodecDefaults:
    base = CodecDefaults()
    return CodecDefaults(
        alphabet=_parse_alphabet(
            cfg.get("alphabet"), field="codec.alphabet", default=base.alphabet
        ),
        padding=_parse_bool(cfg.get("padding"), field="codec.padding", default=base.padding),
        padding_char=_parse_padding_char(
            cfg.get("padding_char"), field="codec.padding_char", default=base.padding_char
        ),
        case_sensitive=_parse_bool(
            cfg.get("case_sensitive"), field="codec.case_sensitive", default=base.case_sensitive
        ),
        ignore_whitespace=_parse_bool(
            cfg.get("ignore_whitespace"),
            field="codec.ignore_whitespace",
            default=base.ignore_whitespace,
        ),
        strict_length=_parse_bool(
            cfg.get("strict_length"), field="codec.strict_length", default=base.strict_length
        ),
    )


def _load_toml(path: Path) -> dict[str, object]:
    with path.open("rb") as handle:
        return tomllib.load(handle)


def _get_dict(data: dict[str, object], key: str) -> dict[str, object]:
    value = data.get(key)
    if isinstance(value, dict):
        return value
    return {}


def _parse_alphabet(value: object, *, field: str, default: str) -> str:
    if value is None:
        return default
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"{field} must be an alphabet name or 32 symbols")
    alphabet = resolve_alphabet(value)
    if len(alphabet) != ALPHABET_SIZE:
        raise ValueError(f"{field} must be an alphabet name or 32 symbols")
    return alphabet


def _parse_padding_char(value: object, *, field: str, default: str) -> str:
    if value is None:
        return default
    if not isinstance(value, str) or len(value) != 1:
        raise ValueError(f"{field} must be a single character")
    return value


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
