"""Per-format spellings of the option enumerations.

The structured (JSON) and flat (INI) formats don't agree on casing for every
variant, so each format gets its own explicit table. Every table has one
canonical spelling per variant for output; decoders also accept the aliases
listed alongside it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

from .errors import InvalidFieldValue
from .models import Font, LoResDxy0Behavior, ScreenRotation, TouchMode

E = TypeVar("E", bound=Enum)


@dataclass(frozen=True)
class EnumTable(Generic[E]):
    name: str
    spellings: dict[E, str]
    aliases: dict[str, E]
    case_sensitive: bool = True

    def encode(self, variant: E) -> str:
        return self.spellings[variant]

    def decode(self, text: Any, field: str | None = None) -> E:
        if isinstance(text, str):
            key = text if self.case_sensitive else text.strip().lower()
            for variant, spelling in self.spellings.items():
                if spelling == key:
                    return variant
            if key in self.aliases:
                return self.aliases[key]
        expected = "one of " + ", ".join(self.spellings.values())
        raise InvalidFieldValue(field or self.name, text, expected)


FONT_JSON = EnumTable(
    name="fontStyle",
    spellings={
        Font.OCTO: "octo",
        Font.VIP: "vip",
        Font.DREAM6800: "dream6800",
        Font.ETI660: "eti660",
        Font.SCHIP: "schip",
        Font.FISH: "fish",
        Font.AKOUZ1: "akouz1",
    },
    aliases={"a_kou_z1": Font.AKOUZ1},
)

FONT_INI = EnumTable(
    name="core.font",
    spellings={
        Font.OCTO: "octo",
        Font.VIP: "vip",
        Font.DREAM6800: "dream6800",
        Font.ETI660: "eti660",
        Font.SCHIP: "schip",
        Font.FISH: "fish",
        Font.AKOUZ1: "a_kou_z1",
    },
    aliases={"akouz1": Font.AKOUZ1},
    case_sensitive=False,
)

TOUCH_MODE_JSON = EnumTable(
    name="touchInputMode",
    spellings={
        TouchMode.NONE: "none",
        TouchMode.SWIPE: "swipe",
        TouchMode.SEG16: "seg16",
        TouchMode.SEG16_FILL: "seg16_fill",
        TouchMode.GAMEPAD: "gamepad",
        TouchMode.VIP: "vip",
    },
    aliases={"seg16fill": TouchMode.SEG16_FILL},
)

TOUCH_MODE_INI = EnumTable(
    name="core.touch_mode",
    spellings={
        TouchMode.NONE: "none",
        TouchMode.SWIPE: "swipe",
        TouchMode.SEG16: "seg16",
        TouchMode.SEG16_FILL: "seg16fill",
        TouchMode.GAMEPAD: "gamepad",
        TouchMode.VIP: "vip",
    },
    aliases={"seg16_fill": TouchMode.SEG16_FILL},
    case_sensitive=False,
)

LORES_DXY0_JSON = EnumTable(
    name="loresDXY0Quirks",
    spellings={
        LoResDxy0Behavior.NO_OP: "no_op",
        LoResDxy0Behavior.TALL_SPRITE: "tall_sprite",
        LoResDxy0Behavior.BIG_SPRITE: "big_sprite",
    },
    aliases={},
)

LORES_DXY0_INI = EnumTable(
    name="quirks.lores_dxy0",
    spellings=dict(LORES_DXY0_JSON.spellings),
    aliases={},
    case_sensitive=False,
)


def decode_rotation(value: Any, field: str = "screenRotation") -> ScreenRotation:
    """Rotation travels as its numeric code (0, 90, 180, 270) in both formats."""
    if isinstance(value, int) and not isinstance(value, bool):
        try:
            return ScreenRotation(value)
        except ValueError:
            pass
    raise InvalidFieldValue(field, value, "one of 0, 90, 180, 270")


def encode_rotation(rotation: ScreenRotation) -> int:
    return int(rotation)
