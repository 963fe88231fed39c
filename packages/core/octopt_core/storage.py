"""Load and save options files, picking the format from the file name."""

from __future__ import annotations

import logging
from pathlib import Path

from .ini_format import options_from_ini, options_to_ini
from .json_format import options_from_json, options_to_json
from .models import Options

logger = logging.getLogger("octopt.storage")

FORMATS = ("json", "ini")

_SUFFIXES = {
    ".json": "json",
    ".ini": "ini",
    ".cfg": "ini",
}


def detect_format(path: Path) -> str:
    fmt = _SUFFIXES.get(path.suffix.lower())
    if fmt is None:
        raise ValueError(f"Cannot tell the options format of {path.name}; pass it explicitly")
    return fmt


def _check_format(fmt: str) -> str:
    if fmt not in FORMATS:
        raise ValueError(f"Unknown options format: {fmt}")
    return fmt


def decode_options(text: str, fmt: str) -> Options:
    if _check_format(fmt) == "json":
        return options_from_json(text)
    return options_from_ini(text)


def encode_options(options: Options, fmt: str, indent: int | None = None) -> str:
    if _check_format(fmt) == "json":
        return options_to_json(options, indent=indent)
    return options_to_ini(options)


def load_options(path: Path, fmt: str | None = None) -> Options:
    fmt = fmt or detect_format(path)
    options = decode_options(path.read_text(encoding="utf-8"), fmt)
    logger.info(f"loaded {fmt} options from {path}", extra={"event": "options_loaded"})
    return options


def save_options(options: Options, path: Path, fmt: str | None = None) -> Path:
    fmt = fmt or detect_format(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    text = encode_options(options, fmt, indent=2)
    if fmt == "json":
        text += "\n"
    path.write_text(text, encoding="utf-8")
    logger.info(f"saved {fmt} options to {path}", extra={"event": "options_saved"})
    return path
