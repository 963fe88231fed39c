"""Reader for the CHIP-8 Community Archive program list.

The archive's ``programs.json`` maps each program id to its metadata, whose
``options`` member is a structured-format options object.
"""

from __future__ import annotations

import json
import logging
import os
import ssl
import urllib.request
from typing import Any

import certifi

from .errors import FormatSyntaxError, OptionsError
from .json_format import options_from_dict
from .models import Options

logger = logging.getLogger("octopt.archive")

ARCHIVE_URL = "https://raw.githubusercontent.com/JohnEarnest/chip8Archive/master/programs.json"


class ArchiveProgramError(OptionsError):
    def __init__(self, program: str, cause: OptionsError) -> None:
        super().__init__(f"{program}: {cause}")
        self.program = program
        self.cause = cause


def _build_ssl_context() -> ssl.SSLContext:
    ca_bundle = os.environ.get("OCTOPT_CA_BUNDLE", "").strip()
    if ca_bundle:
        return ssl.create_default_context(cafile=ca_bundle)
    return ssl.create_default_context(cafile=certifi.where())


def parse_programs(programs: dict[str, Any]) -> dict[str, Options]:
    out: dict[str, Options] = {}
    for name, program in programs.items():
        raw = program.get("options", {}) if isinstance(program, dict) else {}
        try:
            out[name] = options_from_dict(raw if raw is not None else {})
        except OptionsError as exc:
            logger.debug(
                f"options of {name} failed to decode",
                extra={"event": "archive_program_failed", "program": name},
            )
            raise ArchiveProgramError(name, exc) from exc
    logger.info(f"decoded options for {len(out)} programs", extra={"event": "archive_parsed"})
    return out


def parse_archive(text: str) -> dict[str, Options]:
    try:
        programs = json.loads(text)
    except json.JSONDecodeError as exc:
        raise FormatSyntaxError(exc.msg, line=exc.lineno) from exc
    if not isinstance(programs, dict):
        raise FormatSyntaxError("expected the archive to be a JSON object")
    return parse_programs(programs)


def fetch_archive(url: str = ARCHIVE_URL, timeout_s: int = 30) -> dict[str, Options]:
    request = urllib.request.Request(url, headers={"User-Agent": "octopt", "Accept": "application/json"})
    with urllib.request.urlopen(request, timeout=timeout_s, context=_build_ssl_context()) as response:
        body = response.read().decode("utf-8")
    logger.info(f"fetched {len(body)} bytes from {url}", extra={"event": "archive_fetched"})
    return parse_archive(body)
