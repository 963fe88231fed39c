"""CLI entrypoints for converting, inspecting and validating CHIP-8 options."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from octopt_core import Font, get_font_data, options_to_dict
from octopt_core.archive import ARCHIVE_URL, fetch_archive, parse_archive
from octopt_core.logging_setup import configure_logging, get_logger, log_dir
from octopt_core.models import Options
from octopt_core.storage import FORMATS, decode_options, detect_format, encode_options


def _print_json(data: object) -> None:
    print(json.dumps(data, indent=2, sort_keys=True, default=str))


def _read_input(path: str, fmt: str | None) -> Options:
    if path == "-":
        if fmt is None:
            raise ValueError("--from is required when reading from stdin")
        return decode_options(sys.stdin.read(), fmt)
    source = Path(path)
    return decode_options(source.read_text(encoding="utf-8"), fmt or detect_format(source))


def cmd_convert(args: argparse.Namespace) -> int:
    options = _read_input(args.input, args.source_format)
    text = encode_options(options, args.to, indent=args.indent)
    if args.to == "json":
        text += "\n"
    if args.output:
        out = Path(args.output)
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(text, encoding="utf-8")
        get_logger().info(f"wrote {args.to} options to {out}", extra={"event": "convert_written"})
    else:
        sys.stdout.write(text)
    return 0


def cmd_show(args: argparse.Namespace) -> int:
    options = _read_input(args.input, args.source_format)
    _print_json(options_to_dict(options))
    return 0


def cmd_defaults(args: argparse.Namespace) -> int:
    text = encode_options(Options.default(), args.format, indent=2)
    sys.stdout.write(text + ("\n" if args.format == "json" else ""))
    return 0


def cmd_font(args: argparse.Namespace) -> int:
    small, big = get_font_data(Font(args.name))
    _print_json(
        {
            "font": args.name,
            "small": small.hex().upper(),
            "big": big.hex().upper() if big is not None else None,
        }
    )
    return 0


def cmd_archive(args: argparse.Namespace) -> int:
    if args.file:
        programs = parse_archive(Path(args.file).read_text(encoding="utf-8"))
    else:
        programs = fetch_archive(args.url)

    _print_json(
        {
            "success": True,
            "programs": len(programs),
            "with_tickrate": sum(1 for o in programs.values() if o.tickrate is not None),
            "fonts": sorted({o.font_style.value for o in programs.values()}),
        }
    )
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="octopt", description="CHIP-8 options conversion tools")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug details to stderr")
    parser.add_argument("--log-file", default=None, help="Also write JSON log lines to this file")
    parser.add_argument("--log", action="store_true", help="Write JSON log lines to the default log directory")
    sub = parser.add_subparsers(dest="command", required=True)

    convert_cmd = sub.add_parser("convert", help="Convert options between JSON and INI")
    convert_cmd.add_argument("input", help="Options file, or - for stdin")
    convert_cmd.add_argument("--from", dest="source_format", choices=FORMATS, default=None)
    convert_cmd.add_argument("--to", required=True, choices=FORMATS)
    convert_cmd.add_argument("-o", "--output", default=None, help="Write here instead of stdout")
    convert_cmd.add_argument("--indent", type=int, default=None, help="JSON indentation")
    convert_cmd.set_defaults(func=cmd_convert)

    show_cmd = sub.add_parser("show", help="Print decoded options as JSON")
    show_cmd.add_argument("input", help="Options file, or - for stdin")
    show_cmd.add_argument("--from", dest="source_format", choices=FORMATS, default=None)
    show_cmd.set_defaults(func=cmd_show)

    defaults_cmd = sub.add_parser("defaults", help="Print the default options")
    defaults_cmd.add_argument("--format", choices=FORMATS, default="json")
    defaults_cmd.set_defaults(func=cmd_defaults)

    font_cmd = sub.add_parser("font", help="Dump a built-in font as hex")
    font_cmd.add_argument("name", choices=[f.value for f in Font])
    font_cmd.set_defaults(func=cmd_font)

    archive_cmd = sub.add_parser("archive", help="Decode every program in the CHIP-8 Community Archive")
    archive_cmd.add_argument("--url", default=ARCHIVE_URL)
    archive_cmd.add_argument("--file", default=None, help="Local programs.json instead of downloading")
    archive_cmd.set_defaults(func=cmd_archive)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    log_file = Path(args.log_file) if args.log_file else None
    if log_file is None and args.log:
        log_file = log_dir() / "octopt.log"
    configure_logging(level=logging.DEBUG if args.verbose else logging.WARNING, log_file=log_file)

    try:
        return int(args.func(args))
    except (ValueError, OSError) as exc:
        get_logger().debug("command failed", exc_info=True, extra={"event": "command_failed"})
        print(f"error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
