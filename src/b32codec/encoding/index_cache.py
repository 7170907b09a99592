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

"""Symbol lookup tables shared by every codec that uses the same alphabet."""

from __future__ import annotations

import threading
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

IndexKey = tuple[bool, str]


@dataclass(frozen=True)
class IndexTable:
    alphabet: str
    case_sensitive: bool
    values: Mapping[str, int] = field(repr=False)

    def lookup(self, symbol: str) -> int | None:
        key = symbol if self.case_sensitive else symbol.lower()
        return self.values.get(key)


def build_index_table(alphabet: str, *, case_sensitive: bool) -> IndexTable:
    values: dict[str, int] = {}
    for idx, symbol in enumerate(alphabet):
        key = symbol if case_sensitive else symbol.lower()
        values[key] = idx
    return IndexTable(
        alphabet=alphabet,
        case_sensitive=case_sensitive,
        values=MappingProxyType(values),
    )


class AlphabetIndexCache:
    """Lazily built registry of index tables keyed by (case_sensitive, alphabet).

    Tables are published once under the lock and never replaced, so readers
    that find an entry need no locking.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._tables: dict[IndexKey, IndexTable] = {}

    def get_or_build(self, alphabet: str, *, case_sensitive: bool) -> IndexTable:
        key = (case_sensitive, alphabet)
        table = self._tables.get(key)
        if table is not None:
            return table
        with self._lock:
            table = self._tables.get(key)
            if table is None:
                table = build_index_table(alphabet, case_sensitive=case_sensitive)
                self._tables[key] = table
        return table

    def __contains__(self, key: object) -> bool:
        return key in self._tables

    def __len__(self) -> int:
        return len(self._tables)


DEFAULT_INDEX_CACHE = AlphabetIndexCache()
