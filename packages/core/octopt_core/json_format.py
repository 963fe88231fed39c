"""Structured (JSON) options format.

This is the format Octo writes into OctoCarts and HTML exports, and the one
used by the CHIP-8 Community Archive: a single flat object with camelCase
keys, colors and quirks flattened into the top level, quirks as 0/1.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from . import mappings
from .codecs import decode_quirk, decode_u16, encode_quirk
from .color import format_color, parse_color
from .errors import FormatSyntaxError, OptionsError, with_key
from .fields import FieldKind, WireField, build_options, read_field
from .models import Options

logger = logging.getLogger("octopt.json")

JSON_FIELDS: tuple[WireField, ...] = (
    WireField(None, "tickrate", "tickrate", FieldKind.U16),
    WireField(None, "max_size", "maxSize", FieldKind.U16),
    WireField(None, "screen_rotation", "screenRotation", FieldKind.ROTATION),
    WireField(None, "font_style", "fontStyle", FieldKind.FONT),
    WireField(None, "touch_input_mode", "touchInputMode", FieldKind.TOUCH_MODE),
    WireField(None, "start_address", "startAddress", FieldKind.U16),
    WireField("colors", "fill_color", "fillColor", FieldKind.COLOR),
    WireField("colors", "fill_color2", "fillColor2", FieldKind.COLOR),
    WireField("colors", "blend_color", "blendColor", FieldKind.COLOR),
    WireField("colors", "background_color", "backgroundColor", FieldKind.COLOR),
    WireField("colors", "buzz_color", "buzzColor", FieldKind.COLOR),
    WireField("colors", "quiet_color", "quietColor", FieldKind.COLOR),
    WireField("quirks", "shift", "shiftQuirks", FieldKind.QUIRK),
    WireField("quirks", "load_store", "loadStoreQuirks", FieldKind.QUIRK),
    WireField("quirks", "jump0", "jumpQuirks", FieldKind.QUIRK),
    WireField("quirks", "logic", "logicQuirks", FieldKind.QUIRK),
    WireField("quirks", "clip", "clipQuirks", FieldKind.QUIRK),
    WireField("quirks", "vblank", "vBlankQuirks", FieldKind.QUIRK),
    WireField("quirks", "vf_order", "vfOrderQuirks", FieldKind.QUIRK),
    WireField("quirks", "lores_dxy0", "loresDXY0Quirks", FieldKind.LORES_DXY0),
    WireField("quirks", "res_clear", "resClearQuirks", FieldKind.QUIRK),
    WireField("quirks", "delay_wrap", "delayWrapQuirks", FieldKind.QUIRK),
    WireField("quirks", "hires_collision", "hiresCollisionQuirks", FieldKind.QUIRK),
    WireField("quirks", "clip_collision", "clipCollisionQuirks", FieldKind.QUIRK),
    WireField("quirks", "scroll", "scrollQuirks", FieldKind.QUIRK),
    WireField("quirks", "overflow_i", "overflowIQuirks", FieldKind.QUIRK),
)

_KEYS = {wire.key for wire in JSON_FIELDS}


def _decode_value(wire: WireField, raw: Any) -> Any:
    kind = wire.kind
    if kind is FieldKind.U16:
        return decode_u16(raw, wire.key)
    if kind is FieldKind.ROTATION:
        return mappings.decode_rotation(raw, wire.key)
    if kind is FieldKind.FONT:
        return mappings.FONT_JSON.decode(raw, wire.key)
    if kind is FieldKind.TOUCH_MODE:
        return mappings.TOUCH_MODE_JSON.decode(raw, wire.key)
    if kind is FieldKind.COLOR:
        return parse_color(raw)
    if kind is FieldKind.QUIRK:
        return decode_quirk(raw)
    return mappings.LORES_DXY0_JSON.decode(raw, wire.key)


def _encode_value(wire: WireField, value: Any) -> Any:
    kind = wire.kind
    if kind is FieldKind.U16:
        return int(value)
    if kind is FieldKind.ROTATION:
        return mappings.encode_rotation(value)
    if kind is FieldKind.FONT:
        return mappings.FONT_JSON.encode(value)
    if kind is FieldKind.TOUCH_MODE:
        return mappings.TOUCH_MODE_JSON.encode(value)
    if kind is FieldKind.COLOR:
        return format_color(value)
    if kind is FieldKind.QUIRK:
        return encode_quirk(value)
    return mappings.LORES_DXY0_JSON.encode(value)


def options_from_dict(data: dict[str, Any]) -> Options:
    if not isinstance(data, dict):
        raise FormatSyntaxError(f"expected a JSON object, got {type(data).__name__}")

    unknown = sorted(k for k in data if k not in _KEYS)
    if unknown:
        logger.debug(f"ignoring unknown keys: {', '.join(unknown)}", extra={"event": "unknown_keys"})

    values: dict[WireField, Any] = {}
    for wire in JSON_FIELDS:
        raw = data.get(wire.key)
        # null is read as an absent key rather than rejected
        if raw is None:
            continue
        try:
            values[wire] = _decode_value(wire, raw)
        except OptionsError as exc:
            raise with_key(exc, wire.key) from None
    return build_options(values)


def options_to_dict(options: Options) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for wire in JSON_FIELDS:
        value = read_field(options, wire)
        if value is None:
            continue
        out[wire.key] = _encode_value(wire, value)
    return out


def options_from_json(text: str) -> Options:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise FormatSyntaxError(exc.msg, line=exc.lineno) from exc
    return options_from_dict(data)


def options_to_json(options: Options, indent: int | None = None) -> str:
    separators = (",", ":") if indent is None else None
    return json.dumps(options_to_dict(options), indent=indent, separators=separators)
