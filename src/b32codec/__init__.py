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

"""Configurable Base32 codec (RFC4648 bit packing, z-base-32 and custom alphabets)."""

from .encoding.alphabets import (
    STANDARD_ALPHABET as STANDARD_ALPHABET,
    STANDARD_PADDING_CHAR as STANDARD_PADDING_CHAR,
    ZBASE32_ALPHABET as ZBASE32_ALPHABET,
)
from .encoding.base32 import (
    Base32Codec as Base32Codec,
    decode as decode,
    encode as encode,
    from_base32_string as from_base32_string,
    to_base32_string as to_base32_string,
)
from .encoding.index_cache import (
    DEFAULT_INDEX_CACHE as DEFAULT_INDEX_CACHE,
    AlphabetIndexCache as AlphabetIndexCache,
    IndexTable as IndexTable,
)
from .errors import (
    B32CodecError as B32CodecError,
    ConfigurationError as ConfigurationError,
    FormatError as FormatError,
)

__all__ = [
    "AlphabetIndexCache",
    "B32CodecError",
    "Base32Codec",
    "ConfigurationError",
    "DEFAULT_INDEX_CACHE",
    "FormatError",
    "IndexTable",
    "STANDARD_ALPHABET",
    "STANDARD_PADDING_CHAR",
    "ZBASE32_ALPHABET",
    "decode",
    "encode",
    "from_base32_string",
    "to_base32_string",
]
