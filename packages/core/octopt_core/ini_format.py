"""Flat (INI style) options format.

One ``namespace.key = value`` pair per line under the ``core``, ``colors`` and
``quirks`` namespaces. Quirks are written as ``0``/``1`` and colors as bare hex
digits without a leading ``#``.

The color keys are historical: ``colors.plane0`` is the background color and
``colors.background`` is the color shown while the buzzer is quiet.
"""

from __future__ import annotations

import logging
from typing import Any

from . import mappings
from .codecs import decode_quirk_text, encode_quirk, parse_u16
from .color import format_color_bare, parse_color
from .errors import FormatSyntaxError, InvalidFieldValue, OptionsError, with_key
from .fields import FieldKind, WireField, build_options, read_field
from .models import Options

logger = logging.getLogger("octopt.ini")

INI_FIELDS: tuple[WireField, ...] = (
    WireField(None, "tickrate", "core.tickrate", FieldKind.U16),
    WireField(None, "max_size", "core.max_rom", FieldKind.U16),
    WireField(None, "screen_rotation", "core.rotation", FieldKind.ROTATION),
    WireField(None, "font_style", "core.font", FieldKind.FONT),
    WireField(None, "touch_input_mode", "core.touch_mode", FieldKind.TOUCH_MODE),
    WireField(None, "start_address", "core.start_address", FieldKind.U16),
    WireField("colors", "fill_color", "colors.plane1", FieldKind.COLOR),
    WireField("colors", "fill_color2", "colors.plane2", FieldKind.COLOR),
    WireField("colors", "blend_color", "colors.plane3", FieldKind.COLOR),
    WireField("colors", "background_color", "colors.plane0", FieldKind.COLOR),
    WireField("colors", "buzz_color", "colors.sound", FieldKind.COLOR),
    WireField("colors", "quiet_color", "colors.background", FieldKind.COLOR),
    WireField("quirks", "shift", "quirks.shift", FieldKind.QUIRK),
    WireField("quirks", "load_store", "quirks.loadstore", FieldKind.QUIRK),
    WireField("quirks", "jump0", "quirks.jump0", FieldKind.QUIRK),
    WireField("quirks", "logic", "quirks.logic", FieldKind.QUIRK),
    WireField("quirks", "clip", "quirks.clip", FieldKind.QUIRK),
    WireField("quirks", "vblank", "quirks.vblank", FieldKind.QUIRK),
    WireField("quirks", "vf_order", "quirks.vforder", FieldKind.QUIRK),
    WireField("quirks", "lores_dxy0", "quirks.lores_dxy0", FieldKind.LORES_DXY0),
    WireField("quirks", "res_clear", "quirks.resclear", FieldKind.QUIRK),
    WireField("quirks", "delay_wrap", "quirks.delaywrap", FieldKind.QUIRK),
    WireField("quirks", "hires_collision", "quirks.hirescollision", FieldKind.QUIRK),
    WireField("quirks", "clip_collision", "quirks.clipcollision", FieldKind.QUIRK),
    WireField("quirks", "scroll", "quirks.scroll", FieldKind.QUIRK),
    WireField("quirks", "overflow_i", "quirks.overflow_i", FieldKind.QUIRK),
)

_BY_KEY = {wire.key: wire for wire in INI_FIELDS}
_COMMENT_PREFIXES = ("#", ";")


def parse_pairs(text: str) -> dict[str, str]:
    """Split flat text into lowercased keys and stripped values; later duplicates win."""
    pairs: dict[str, str] = {}
    # only \n and \r\n end a line; other control characters stay inside values
    for line_no, line in enumerate(text.split("\n"), start=1):
        stripped = line.removesuffix("\r").strip()
        if not stripped or stripped.startswith(_COMMENT_PREFIXES):
            continue
        key, sep, value = stripped.partition("=")
        key = key.strip().lower()
        if not sep or not key:
            raise FormatSyntaxError(f"expected 'key = value', got {stripped!r}", line=line_no)
        pairs[key] = value.strip()
    return pairs


def _decode_value(wire: WireField, raw: str) -> Any:
    kind = wire.kind
    if kind is FieldKind.U16:
        value = parse_u16(raw)
        if value is None:
            logger.debug(
                f"ignoring non-numeric {wire.key}={raw!r}",
                extra={"event": "numeric_fallback", "field": wire.key},
            )
        return value
    if kind is FieldKind.ROTATION:
        code = parse_u16(raw)
        if code is None:
            raise InvalidFieldValue(wire.key, raw, "one of 0, 90, 180, 270")
        return mappings.decode_rotation(code, wire.key)
    if kind is FieldKind.FONT:
        return mappings.FONT_INI.decode(raw, wire.key)
    if kind is FieldKind.TOUCH_MODE:
        return mappings.TOUCH_MODE_INI.decode(raw, wire.key)
    if kind is FieldKind.COLOR:
        return parse_color(raw)
    if kind is FieldKind.QUIRK:
        return decode_quirk_text(raw)
    return mappings.LORES_DXY0_INI.decode(raw, wire.key)


def _encode_value(wire: WireField, value: Any) -> str:
    kind = wire.kind
    if kind is FieldKind.U16:
        return str(int(value))
    if kind is FieldKind.ROTATION:
        return str(mappings.encode_rotation(value))
    if kind is FieldKind.FONT:
        return mappings.FONT_INI.encode(value)
    if kind is FieldKind.TOUCH_MODE:
        return mappings.TOUCH_MODE_INI.encode(value)
    if kind is FieldKind.COLOR:
        return format_color_bare(value)
    if kind is FieldKind.QUIRK:
        return str(encode_quirk(value))
    return mappings.LORES_DXY0_INI.encode(value)


def options_from_pairs(pairs: dict[str, str]) -> Options:
    unknown = sorted(k for k in pairs if k not in _BY_KEY)
    if unknown:
        logger.debug(f"ignoring unknown keys: {', '.join(unknown)}", extra={"event": "unknown_keys"})

    values: dict[WireField, Any] = {}
    for key, raw in pairs.items():
        wire = _BY_KEY.get(key)
        if wire is None:
            continue
        try:
            values[wire] = _decode_value(wire, raw)
        except OptionsError as exc:
            raise with_key(exc, wire.key) from None
    return build_options(values)


def options_to_pairs(options: Options) -> list[tuple[str, str]]:
    out: list[tuple[str, str]] = []
    for wire in INI_FIELDS:
        value = read_field(options, wire)
        if value is None:
            continue
        out.append((wire.key, _encode_value(wire, value)))
    return out


def options_from_ini(text: str) -> Options:
    return options_from_pairs(parse_pairs(text))


def options_to_ini(options: Options) -> str:
    return "".join(f"{key} = {value}\n" for key, value in options_to_pairs(options))
