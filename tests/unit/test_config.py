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

import unittest
from pathlib import Path

from b32codec.config import (
    CONFIG_PATH_ENV,
    DEFAULT_CONFIG_PATH,
    CodecDefaults,
    build_codec,
    init_user_config,
    load_codec_defaults,
    resolve_config_path,
    user_config_needs_init,
    user_config_path,
)
from b32codec.encoding.alphabets import STANDARD_ALPHABET, ZBASE32_ALPHABET
from b32codec.errors import ConfigurationError
from tests.test_support import temp_directory, temp_env, temp_files


class TestLoadCodecDefaults(unittest.TestCase):
    def test_packaged_default_matches_dataclass_defaults(self) -> None:
        self.assertTrue(DEFAULT_CONFIG_PATH.is_file())
        self.assertEqual(load_codec_defaults(DEFAULT_CONFIG_PATH), CodecDefaults())

    def test_parses_codec_table(self) -> None:
        toml = """
[codec]
alphabet = "zbase32"
padding = "yes"
padding_char = "*"
case_sensitive = true
ignore_whitespace = 1
strict_length = "off"
"""
        with temp_files(**{"config.toml": toml}) as paths:
            defaults = load_codec_defaults(paths["config.toml"])

        self.assertEqual(defaults.alphabet, ZBASE32_ALPHABET)
        self.assertTrue(defaults.padding)
        self.assertEqual(defaults.padding_char, "*")
        self.assertTrue(defaults.case_sensitive)
        self.assertTrue(defaults.ignore_whitespace)
        self.assertFalse(defaults.strict_length)

    def test_empty_file_uses_defaults(self) -> None:
        with temp_files(**{"config.toml": ""}) as paths:
            defaults = load_codec_defaults(paths["config.toml"])
        self.assertEqual(defaults, CodecDefaults())

    def test_literal_alphabet(self) -> None:
        literal = STANDARD_ALPHABET.lower()
        toml = f'[codec]\nalphabet = "{literal}"\n'
        with temp_files(**{"config.toml": toml}) as paths:
            defaults = load_codec_defaults(paths["config.toml"])
        self.assertEqual(defaults.alphabet, literal)

    def test_invalid_values_name_the_field(self) -> None:
        cases = (
            ('[codec]\nalphabet = "short"\n', "codec.alphabet"),
            ("[codec]\nalphabet = 5\n", "codec.alphabet"),
            ('[codec]\npadding = "maybe"\n', "codec.padding must be a boolean"),
            ("[codec]\ncase_sensitive = 2\n", "codec.case_sensitive must be a boolean"),
            ('[codec]\npadding_char = "=="\n', "codec.padding_char must be a single character"),
            ("[codec]\nstrict_length = 1.5\n", "codec.strict_length must be a boolean"),
        )
        for toml, message in cases:
            with self.subTest(toml=toml):
                with temp_files(**{"config.toml": toml}) as paths:
                    with self.assertRaisesRegex(ValueError, message):
                        load_codec_defaults(paths["config.toml"])

    def test_missing_file(self) -> None:
        with temp_directory() as tmp:
            with self.assertRaisesRegex(FileNotFoundError, "config file not found"):
                load_codec_defaults(tmp / "missing.toml")


class TestBuildCodec(unittest.TestCase):
    def test_defaults_only(self) -> None:
        codec = build_codec()
        self.assertEqual(codec.alphabet, STANDARD_ALPHABET)
        self.assertFalse(codec.use_padding)

    def test_overrides_win_over_defaults(self) -> None:
        defaults = CodecDefaults(padding=True, case_sensitive=True)
        codec = build_codec(defaults, padding=False, alphabet="zbase32")
        self.assertFalse(codec.use_padding)
        self.assertTrue(codec.case_sensitive)
        self.assertEqual(codec.alphabet, ZBASE32_ALPHABET)

    def test_none_overrides_keep_defaults(self) -> None:
        defaults = CodecDefaults(padding=True, padding_char="~", strict_length=True)
        codec = build_codec(defaults, padding=None, padding_char=None)
        self.assertTrue(codec.use_padding)
        self.assertEqual(codec.padding_char, "~")
        self.assertTrue(codec.strict_length)

    def test_invalid_override_raises_configuration_error(self) -> None:
        with self.assertRaisesRegex(ConfigurationError, "exactly 32 symbols"):
            build_codec(alphabet="ABC")


class TestConfigPaths(unittest.TestCase):
    def test_explicit_path_wins(self) -> None:
        with temp_env({CONFIG_PATH_ENV: "/from/env.toml"}):
            self.assertEqual(resolve_config_path("custom.toml"), Path("custom.toml"))

    def test_env_path(self) -> None:
        with temp_env({CONFIG_PATH_ENV: "/from/env.toml"}):
            self.assertEqual(resolve_config_path(), Path("/from/env.toml"))

    def test_falls_back_to_packaged_default(self) -> None:
        with temp_directory() as tmp:
            with temp_env({"XDG_CONFIG_HOME": str(tmp), CONFIG_PATH_ENV: ""}):
                self.assertEqual(resolve_config_path(), DEFAULT_CONFIG_PATH)
                self.assertTrue(user_config_needs_init())

    def test_init_user_config_copies_default(self) -> None:
        with temp_directory() as tmp:
            with temp_env({"XDG_CONFIG_HOME": str(tmp), CONFIG_PATH_ENV: ""}):
                path = init_user_config()
                self.assertEqual(path, tmp / "b32codec" / "config.toml")
                self.assertEqual(path, user_config_path())
                self.assertEqual(
                    path.read_text(encoding="utf-8"),
                    DEFAULT_CONFIG_PATH.read_text(encoding="utf-8"),
                )
                self.assertFalse(user_config_needs_init())
                self.assertEqual(resolve_config_path(), path)

    def test_init_user_config_keeps_existing_file(self) -> None:
        with temp_directory() as tmp:
            with temp_env({"XDG_CONFIG_HOME": str(tmp), CONFIG_PATH_ENV: ""}):
                path = user_config_path()
                path.parent.mkdir(parents=True)
                path.write_text("[codec]\npadding = true\n", encoding="utf-8")
                init_user_config()
                self.assertTrue(load_codec_defaults().padding)


if __name__ == "__main__":
    unittest.main()
