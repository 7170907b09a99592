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

from ..errors import ConfigurationError

ALPHABET_SIZE = 32
STANDARD_PADDING_CHAR = "="
STANDARD_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"
ZBASE32_ALPHABET = "ybndrfg8ejkmcpqxot1uwisza345h769"

NAMED_ALPHABETS = {
    "standard": STANDARD_ALPHABET,
    "rfc4648": STANDARD_ALPHABET,
    "zbase32": ZBASE32_ALPHABET,
    "z-base-32": ZBASE32_ALPHABET,
}


def resolve_alphabet(value: str) -> str:
    """Return the symbols for a named alphabet, or ``value`` itself.

    Anything that is not a known name is treated as a literal 32-symbol
    alphabet and left for the codec to validate.
    """
    named = NAMED_ALPHABETS.get(value.strip().lower())
    if named is not None:
        return named
    return value


def validate_alphabet(alphabet: str) -> None:
    if not isinstance(alphabet, str):
        raise ConfigurationError("alphabet must be a string")
    if len(alphabet) != ALPHABET_SIZE:
        raise ConfigurationError("alphabet must be exactly 32 symbols")


def duplicate_symbols(alphabet: str, *, case_sensitive: bool) -> list[str]:
    # Duplicates are allowed but make decoding ambiguous: the highest index wins.
    seen: set[str] = set()
    duplicates: list[str] = []
    for symbol in alphabet:
        key = symbol if case_sensitive else symbol.lower()
        if key in seen and symbol not in duplicates:
            duplicates.append(symbol)
        seen.add(key)
    return duplicates
