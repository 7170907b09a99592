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

import os
import re
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Generator
from unittest import mock

# =============================================================================
# Test Constants
# =============================================================================

# RFC4648 section 10 vectors, unpadded.
RFC4648_VECTORS = (
    (b"", ""),
    (b"f", "MY"),
    (b"fo", "MZXQ"),
    (b"foo", "MZXW6"),
    (b"foob", "MZXW6YQ"),
    (b"fooba", "MZXW6YTB"),
    (b"foobar", "MZXW6YTBOI"),
)

ROUNDTRIP_PAYLOADS = (
    b"",
    b"\x00",
    b"\xff",
    b"\x00\x00\x00\x00\x00",
    b"\xff" * 11,
    b"hello world",
    bytes(range(256)),
)

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-?]*[ -/]*[@-~]")


def strip_ansi(text: str) -> str:
    return ANSI_ESCAPE_RE.sub("", text)


# =============================================================================
# Environment Helpers
# =============================================================================


@contextmanager
def temp_env(overrides: dict[str, str], *, clear: bool = False):
    with mock.patch.dict(os.environ, overrides, clear=clear):
        yield


@contextmanager
def temp_files(
    **kwargs: bytes | str,
) -> Generator[dict[str, Path], None, None]:
    """Create temporary files with specified content.

    Usage:
        with temp_files(input=b"data", config="[codec]") as paths:
            paths["input"]  # Path to file with b"data"
            paths["config"]  # Path to file with "[codec]"
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        tmp_path = Path(tmpdir)
        result: dict[str, Path] = {}
        for name, content in kwargs.items():
            file_path = tmp_path / name
            if isinstance(content, bytes):
                file_path.write_bytes(content)
            else:
                file_path.write_text(content, encoding="utf-8")
            result[name] = file_path
        result["_dir"] = tmp_path
        yield result


@contextmanager
def temp_directory() -> Generator[Path, None, None]:
    """Create a temporary directory with cleanup."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)
