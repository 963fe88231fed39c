from __future__ import annotations

import json
import logging

from octopt_core.logging_setup import JsonFormatter, log_dir


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord("octopt.ini", logging.DEBUG, __file__, 1, "ignoring %s", ("x",), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_includes_event_and_field() -> None:
    payload = json.loads(JsonFormatter().format(_record(event="numeric_fallback", field="core.tickrate")))
    assert payload["level"] == "DEBUG"
    assert payload["logger"] == "octopt.ini"
    assert payload["msg"] == "ignoring x"
    assert payload["event"] == "numeric_fallback"
    assert payload["field"] == "core.tickrate"
    assert "ts_utc" in payload


def test_json_formatter_includes_program() -> None:
    payload = json.loads(JsonFormatter().format(_record(event="archive_program_failed", program="snek")))
    assert payload["program"] == "snek"


def test_json_formatter_omits_missing_extras() -> None:
    payload = json.loads(JsonFormatter().format(_record()))
    assert "event" not in payload
    assert "field" not in payload
    assert "program" not in payload


def test_log_dir_lives_under_config_root(monkeypatch, tmp_path) -> None:
    monkeypatch.setattr("octopt_core.logging_setup._config_root", lambda: tmp_path / "octopt")
    path = log_dir()
    assert path == tmp_path / "octopt" / "logs"
    assert path.is_dir()
