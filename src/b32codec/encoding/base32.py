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

import re
from dataclasses import dataclass, field
from typing import Any

from ..errors import ConfigurationError, FormatError
from .alphabets import (
    NAMED_ALPHABETS,
    STANDARD_ALPHABET,
    STANDARD_PADDING_CHAR,
    validate_alphabet,
)
from .index_cache import DEFAULT_INDEX_CACHE, AlphabetIndexCache

BYTES_PER_CHUNK = 5
SYMBOLS_PER_CHUNK = 8
_CHUNK_BITS = 40
_SYMBOL_MASK = 0x1F
# ceil(n * 8 / 5) for a final chunk of n bytes.
_SYMBOLS_FOR_BYTES = {1: 2, 2: 4, 3: 5, 4: 7, 5: 8}
# Final chunk lengths no encoder can produce.
_INVALID_TAIL_LENGTHS = frozenset({1, 3, 6})
_WHITESPACE_RE = re.compile(r"\s+")


@dataclass(frozen=True)
class Base32Codec:
    """Base32 encoder/decoder bound to one alphabet and option set.

    Defaults match RFC4648 without padding: case-insensitive decoding and
    whitespace treated as an invalid character. Alphabets with repeated
    symbols are accepted, but decoding them is ambiguous.
    """

    alphabet: str = STANDARD_ALPHABET
    use_padding: bool = False
    case_sensitive: bool = False
    ignore_whitespace: bool = False
    padding_char: str = STANDARD_PADDING_CHAR
    strict_length: bool = False
    index_cache: AlphabetIndexCache = field(
        default=DEFAULT_INDEX_CACHE, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        validate_alphabet(self.alphabet)
        if not isinstance(self.padding_char, str) or len(self.padding_char) != 1:
            raise ConfigurationError("padding character must be a single character")

    @classmethod
    def from_name(cls, name: str, **options: Any) -> Base32Codec:
        alphabet = NAMED_ALPHABETS.get(name.strip().lower())
        if alphabet is None:
            known = ", ".join(sorted(NAMED_ALPHABETS))
            raise ConfigurationError(f"unknown alphabet {name!r} (expected one of: {known})")
        return cls(alphabet=alphabet, **options)

    def encode(self, data: bytes | bytearray | memoryview) -> str:
        raw = bytes(data)
        out_chars: list[str] = []

        for start in range(0, len(raw), BYTES_PER_CHUNK):
            chunk = raw[start : start + BYTES_PER_CHUNK]
            value = int.from_bytes(chunk.ljust(BYTES_PER_CHUNK, b"\x00"), "big")
            for idx in range(_SYMBOLS_FOR_BYTES[len(chunk)]):
                shift = _CHUNK_BITS - 5 * (idx + 1)
                out_chars.append(self.alphabet[(value >> shift) & _SYMBOL_MASK])

        if self.use_padding:
            remainder = len(out_chars) % SYMBOLS_PER_CHUNK
            if remainder:
                out_chars.append(self.padding_char * (SYMBOLS_PER_CHUNK - remainder))

        return "".join(out_chars)

    def decode(self, text: str) -> bytes:
        if self.ignore_whitespace:
            text = _WHITESPACE_RE.sub("", text)

        if self.use_padding:
            if len(text) % SYMBOLS_PER_CHUNK != 0:
                raise FormatError("invalid length for padded input")
            text = text.rstrip(self.padding_char)

        if self.strict_length and len(text) % SYMBOLS_PER_CHUNK in _INVALID_TAIL_LENGTHS:
            raise FormatError("invalid length for unpadded input")

        table = self.index_cache.get_or_build(self.alphabet, case_sensitive=self.case_sensitive)
        out = bytearray()

        for start in range(0, len(text), SYMBOLS_PER_CHUNK):
            chunk = text[start : start + SYMBOLS_PER_CHUNK]
            byte_count = len(chunk) * 5 // 8
            value = 0
            for idx, char in enumerate(chunk):
                symbol_value = table.lookup(char)
                if symbol_value is None:
                    raise FormatError(
                        f"invalid character '{char}', valid characters are: {self.alphabet}"
                    )
                value |= symbol_value << (_CHUNK_BITS - 5 * (idx + 1))
            out += value.to_bytes(BYTES_PER_CHUNK, "big")[:byte_count]

        return bytes(out)


DEFAULT_CODEC = Base32Codec()
STANDARD_ENCODE_CODEC = DEFAULT_CODEC
STANDARD_DECODE_CODEC = Base32Codec(ignore_whitespace=True)


def encode(data: bytes | bytearray | memoryview, codec: Base32Codec | None = None) -> str:
    return (codec or DEFAULT_CODEC).encode(data)


def decode(text: str, codec: Base32Codec | None = None) -> bytes:
    return (codec or DEFAULT_CODEC).decode(text)


def to_base32_string(data: bytes | bytearray | memoryview) -> str:
    """Encode with the standard alphabet and no padding."""
    return STANDARD_ENCODE_CODEC.encode(data)


def from_base32_string(text: str) -> bytes:
    """Decode standard, unpadded, case-insensitive text; whitespace is ignored."""
    return STANDARD_DECODE_CODEC.decode(text)
