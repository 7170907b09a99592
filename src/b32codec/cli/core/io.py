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

import sys
from pathlib import Path

from ..ui import console_err


def _read_input(path: str | None) -> bytes:
    if path is None or path == "-":
        return sys.stdin.buffer.read()
    file_path = Path(path)
    if not file_path.is_file():
        raise FileNotFoundError(f"input file not found: {path}")
    return file_path.read_bytes()


def _read_input_text(path: str | None) -> str:
    data = _read_input(path)
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ValueError("input is not valid UTF-8 text") from exc


def _write_output(path: str | None, data: bytes, *, quiet: bool) -> None:
    if path and path != "-":
        with open(path, "wb") as handle:
            handle.write(data)
        if not quiet:
            console_err.print(f"[muted]- wrote {path}[/muted]")
    else:
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()


def _wrap_lines(text: str, width: int | None) -> str:
    if not width or not text:
        return text
    return "\n".join(text[i : i + width] for i in range(0, len(text), width))
