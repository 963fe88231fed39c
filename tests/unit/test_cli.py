import io
import json
import sys
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "apps" / "cli"))
sys.path.insert(0, str(ROOT / "packages" / "core"))

from octopt_app.cli import build_parser, main
from octopt_core.models import Options


def _run(argv):
    out, err = io.StringIO(), io.StringIO()
    with redirect_stdout(out), redirect_stderr(err):
        rc = main(argv)
    return rc, out.getvalue(), err.getvalue()


class CliParserTests(unittest.TestCase):
    def test_convert_command(self):
        args = build_parser().parse_args(["convert", "game.json", "--to", "ini", "-o", "game.ini"])
        self.assertEqual(args.command, "convert")
        self.assertEqual(args.input, "game.json")
        self.assertIsNone(args.source_format)
        self.assertEqual(args.to, "ini")
        self.assertEqual(args.output, "game.ini")

    def test_defaults_command(self):
        args = build_parser().parse_args(["defaults", "--format", "ini"])
        self.assertEqual(args.command, "defaults")
        self.assertEqual(args.format, "ini")

    def test_font_command(self):
        args = build_parser().parse_args(["font", "schip"])
        self.assertEqual(args.name, "schip")

    def test_archive_command(self):
        args = build_parser().parse_args(["archive", "--file", "programs.json"])
        self.assertEqual(args.command, "archive")
        self.assertEqual(args.file, "programs.json")


class CliRunTests(unittest.TestCase):
    def test_convert_ini_to_json_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            src = Path(tmp) / "game.ini"
            src.write_text("core.tickrate = 20\nquirks.logic = 1\n", encoding="utf-8")
            dest = Path(tmp) / "out" / "game.json"
            rc, _out, _err = _run(["convert", str(src), "--to", "json", "-o", str(dest)])
            self.assertEqual(rc, 0)
            data = json.loads(dest.read_text(encoding="utf-8"))
            self.assertEqual(data["tickrate"], 20)
            self.assertEqual(data["logicQuirks"], 1)

    def test_convert_to_stdout(self):
        with tempfile.TemporaryDirectory() as tmp:
            src = Path(tmp) / "game.json"
            src.write_text('{"tickrate": 7, "backgroundColor": "#996600"}', encoding="utf-8")
            rc, out, _err = _run(["convert", str(src), "--to", "ini"])
            self.assertEqual(rc, 0)
            self.assertIn("core.tickrate = 7\n", out)
            self.assertIn("colors.plane0 = 996600\n", out)

    def test_invalid_input_reports_error(self):
        with tempfile.TemporaryDirectory() as tmp:
            src = Path(tmp) / "game.ini"
            src.write_text("quirks.shift = 2\n", encoding="utf-8")
            rc, out, err = _run(["convert", str(src), "--to", "json"])
            self.assertEqual(rc, 2)
            self.assertEqual(out, "")
            self.assertIn("quirks.shift", err)

    def test_defaults(self):
        rc, out, _err = _run(["defaults"])
        self.assertEqual(rc, 0)
        self.assertEqual(Options.from_json(out), Options.default())

    def test_font(self):
        rc, out, _err = _run(["font", "vip"])
        self.assertEqual(rc, 0)
        data = json.loads(out)
        self.assertEqual(len(data["small"]), 160)
        self.assertIsNone(data["big"])

    def test_archive_from_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            src = Path(tmp) / "programs.json"
            src.write_text(
                json.dumps({"a": {"options": {"tickrate": 15}}, "b": {"options": {"fontStyle": "fish"}}}),
                encoding="utf-8",
            )
            rc, out, _err = _run(["archive", "--file", str(src)])
            self.assertEqual(rc, 0)
            data = json.loads(out)
            self.assertEqual(data["programs"], 2)
            self.assertEqual(data["with_tickrate"], 1)
            self.assertEqual(data["fonts"], ["fish", "octo"])


if __name__ == "__main__":
    unittest.main()
