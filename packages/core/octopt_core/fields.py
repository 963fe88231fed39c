"""Declarative field tables shared by the wire format converters."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from .models import Colors, Options, Quirks


class FieldKind(str, Enum):
    U16 = "u16"
    ROTATION = "rotation"
    FONT = "font"
    TOUCH_MODE = "touch_mode"
    COLOR = "color"
    QUIRK = "quirk"
    LORES_DXY0 = "lores_dxy0"


@dataclass(frozen=True)
class WireField:
    group: str | None  # None, "colors" or "quirks"
    attr: str
    key: str
    kind: FieldKind


def read_field(options: Options, wire: WireField) -> Any:
    owner = options if wire.group is None else getattr(options, wire.group)
    return getattr(owner, wire.attr)


def build_options(values: dict[WireField, Any]) -> Options:
    """Assemble an Options value from decoded fields; anything missing keeps its dataclass default."""
    top: dict[str, Any] = {}
    colors: dict[str, Any] = {}
    quirks: dict[str, Any] = {}
    for wire, value in values.items():
        if wire.group is None:
            top[wire.attr] = value
        elif wire.group == "colors":
            colors[wire.attr] = value
        else:
            quirks[wire.attr] = value
    return Options(colors=Colors(**colors), quirks=Quirks(**quirks), **top)
