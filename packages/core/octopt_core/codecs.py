"""Field-level value codecs shared by both wire formats.

Quirk flags are strict: anything other than a boolean or the integers 0/1 is
rejected. Numeric fields are lenient: a string that is not an unsigned 16-bit
integer silently becomes ``None``.
"""

from __future__ import annotations

import logging
import re
from typing import Any

from .errors import InvalidFieldValue, InvalidQuirkValue

logger = logging.getLogger("octopt.codecs")

U16_MAX = 0xFFFF
_UNSIGNED_RE = re.compile(r"\+?[0-9]+")


def decode_quirk(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        if value == 1:
            return True
        if value == 0:
            return False
    raise InvalidQuirkValue(value)


def decode_quirk_text(text: str) -> bool:
    stripped = text.strip()
    if not _UNSIGNED_RE.fullmatch(stripped):
        raise InvalidQuirkValue(text)
    return decode_quirk(int(stripped))


def encode_quirk(flag: bool) -> int:
    return 1 if flag else 0


def parse_u16(text: str) -> int | None:
    if not _UNSIGNED_RE.fullmatch(text):
        return None
    value = int(text)
    if value > U16_MAX:
        return None
    return value


def decode_u16(value: Any, field: str = "value") -> int | None:
    if isinstance(value, str):
        parsed = parse_u16(value)
        if parsed is None:
            logger.debug(
                f"ignoring non-numeric {field}={value!r}",
                extra={"event": "numeric_fallback", "field": field},
            )
        return parsed
    if isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= U16_MAX:
        return value
    raise InvalidFieldValue(field, value, "an unsigned 16-bit integer or a numeric string")
