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


import re
import tempfile
import unittest
from pathlib import Path

from typer.testing import CliRunner

from respool.cli import app
from respool.config import CONFIG_PATH_ENV, DEFAULT_CONFIG_PATH
from tests.test_support import UTF16_HI, UTF8_AB_COPYRIGHT, write_config

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-?]*[ -/]*[@-~]")


def _strip_ansi(text: str) -> str:
    return ANSI_ESCAPE_RE.sub("", text)


class CliTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.runner = CliRunner()
        self._tmpdir = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmpdir.cleanup)
        self.tmp_path = Path(self._tmpdir.name)
        # Keep the developer's own config out of the picture.
        self.env = {
            CONFIG_PATH_ENV: str(DEFAULT_CONFIG_PATH),
            "XDG_CONFIG_HOME": str(self.tmp_path / "xdg"),
        }

    def invoke(self, args: list[str]):
        return self.runner.invoke(app, args, env=self.env)


class TestCliRoot(CliTestCase):
    def test_help_lists_commands(self) -> None:
        result = self.invoke(["--help"])
        self.assertEqual(result.exit_code, 0)
        output = _strip_ansi(result.output)
        for command in ("encode", "decode", "config"):
            self.assertIn(command, output)

    def test_version(self) -> None:
        result = self.invoke(["--version"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("respool", result.output.lower())

    def test_no_subcommand_references_help(self) -> None:
        result = self.invoke([])
        self.assertEqual(result.exit_code, 2)
        self.assertIn("respool --help", result.output)

    def test_init_config_creates_user_config(self) -> None:
        result = self.invoke(["--init-config"])
        self.assertEqual(result.exit_code, 0)
        self.assertTrue((self.tmp_path / "xdg" / "respool" / "config.toml").is_file())


class TestCliEncode(CliTestCase):
    def test_utf8_hex(self) -> None:
        result = self.invoke(["encode", "ab©"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(result.stdout.strip(), "03 04 61 62 C2 A9 00")

    def test_utf16_hex(self) -> None:
        result = self.invoke(["encode", "hi", "--type", "utf16"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(result.stdout.strip(), "02 00 68 00 69 00 00 00")

    def test_raw_stdout(self) -> None:
        result = self.invoke(["encode", "hi", "-t", "UTF-16", "--format", "raw"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(result.stdout_bytes, UTF16_HI)

    def test_raw_output_file(self) -> None:
        target = self.tmp_path / "out" / "record.bin"
        result = self.invoke(["--quiet", "encode", "ab©", "-f", "raw", "-o", str(target)])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(target.read_bytes(), UTF8_AB_COPYRIGHT)
        self.assertEqual(result.output, "")

    def test_hex_output_file_reports_path(self) -> None:
        target = self.tmp_path / "record.hex"
        result = self.invoke(["encode", "hi", "-o", str(target)])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(target.read_text(encoding="ascii"), "02 02 68 69 00\n")
        self.assertIn("5 byte record", _strip_ansi(result.output))

    def test_config_supplies_defaults(self) -> None:
        config = write_config(
            self.tmp_path,
            '[defaults]\nstring_type = "utf16"\noutput = "raw"\n',
        )
        result = self.invoke(["--config", str(config), "encode", "hi"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(result.stdout_bytes, UTF16_HI)

    def test_rejects_unknown_type(self) -> None:
        result = self.invoke(["encode", "hi", "--type", "utf32"])
        self.assertEqual(result.exit_code, 2)

    def test_rejects_unknown_format(self) -> None:
        result = self.invoke(["encode", "hi", "--format", "base64"])
        self.assertEqual(result.exit_code, 2)

    def test_bad_config_is_reported(self) -> None:
        config = write_config(self.tmp_path, '[defaults]\noutput = "base64"\n')
        result = self.invoke(["--config", str(config), "encode", "hi"])
        self.assertEqual(result.exit_code, 2)
        self.assertIn("defaults.output", _strip_ansi(result.output))


class TestCliDecode(CliTestCase):
    def test_utf8_hex(self) -> None:
        result = self.invoke(["decode", "03 04 61 62 C2 A9 00"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(result.stdout, "ab©\n")

    def test_utf16_hex_with_size(self) -> None:
        result = self.invoke(["decode", "0x0200680069000000", "--type", "utf16", "--size"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(result.stdout.splitlines(), ["hi", "8"])

    def test_input_file_at_offset(self) -> None:
        source = self.tmp_path / "pool.bin"
        source.write_bytes(b"\xaa" * 5 + UTF16_HI + b"\xbb")
        result = self.invoke(
            ["decode", "--input", str(source), "--offset", "5", "--type", "utf16"]
        )
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(result.stdout, "hi\n")

    def test_missing_terminator_warns(self) -> None:
        result = self.invoke(["decode", "03 04 61 62 C2 A9 FF"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("ab©", result.output)
        self.assertIn("not NUL-terminated", _strip_ansi(result.output))

    def test_missing_terminator_quiet(self) -> None:
        result = self.invoke(["--quiet", "decode", "03 04 61 62 C2 A9"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(result.output, "ab©\n")

    def test_truncated_record_is_an_error(self) -> None:
        result = self.invoke(["decode", "05 05 68 65"])
        self.assertEqual(result.exit_code, 2)
        self.assertIn("Error:", _strip_ansi(result.output))

    def test_invalid_hex(self) -> None:
        result = self.invoke(["decode", "zz"])
        self.assertEqual(result.exit_code, 2)
        self.assertIn("invalid hex input", _strip_ansi(result.output))

    def test_requires_exactly_one_input(self) -> None:
        source = self.tmp_path / "pool.bin"
        source.write_bytes(UTF8_AB_COPYRIGHT)
        cases = (
            (["decode"], "provide the record"),
            (["decode", "00 00 00", "--input", str(source)], "not both"),
            (["decode", "--input", str(self.tmp_path / "missing.bin")], "not found"),
        )
        for args, message in cases:
            with self.subTest(args=args):
                result = self.invoke(args)
                self.assertEqual(result.exit_code, 2)
                self.assertIn(message, _strip_ansi(result.output))

    def test_negative_offset_is_rejected(self) -> None:
        result = self.invoke(["decode", "00 00 00", "--offset", "-1"])
        self.assertEqual(result.exit_code, 2)


class TestCliConfig(CliTestCase):
    def test_print_path(self) -> None:
        result = self.invoke(["config", "--print-path"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(result.stdout.strip(), str(DEFAULT_CONFIG_PATH))

    def test_shows_effective_values(self) -> None:
        config = write_config(self.tmp_path, '[defaults]\nstring_type = "utf16"\n')
        result = self.invoke(["--config", str(config), "config"])
        self.assertEqual(result.exit_code, 0, result.output)
        output = _strip_ansi(result.output)
        self.assertIn("utf16", output)
        self.assertIn("hex", output)


if __name__ == "__main__":
    unittest.main()
