"""Exception types raised while decoding and encoding options."""

from __future__ import annotations

from typing import Any


class OptionsError(ValueError):
    """Base class for every options decoding error."""


class ColorParseError(OptionsError):
    def __init__(self, text: Any) -> None:
        super().__init__(f"Failed to parse color: {text!r}")
        self.text = text


class InvalidQuirkValue(OptionsError):
    def __init__(self, value: Any) -> None:
        super().__init__(f"invalid value {value!r}, expected zero or one")
        self.value = value


class InvalidFieldValue(OptionsError):
    def __init__(self, field: str, value: Any, expected: str) -> None:
        super().__init__(f"invalid value {value!r} for {field}, expected {expected}")
        self.field = field
        self.value = value
        self.expected = expected


class FormatSyntaxError(OptionsError):
    def __init__(self, message: str, line: int | None = None) -> None:
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)
        self.line = line


def with_key(exc: OptionsError, key: str) -> OptionsError:
    """Prefix the wire key to an error message, keeping its type and attributes."""
    exc.args = (f"{key}: {exc.args[0]}" if exc.args else key,) + tuple(exc.args[1:])
    exc.key = key  # type: ignore[attr-defined]
    return exc
