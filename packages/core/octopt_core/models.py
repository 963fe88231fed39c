"""Typed models for CHIP-8 interpreter options.

CHIP-8 has been around since 1977 and has many slightly incompatible
implementations. Games often require specific behavior from the interpreter
that can't be inferred from their bytecode, so these models carry every
setting a game's metadata can express: speed, memory layout, display,
colors and the divergent behaviors ("quirks") of historical interpreters.

Every optional field uses ``None`` for "unspecified, let the interpreter
decide", which is distinct from an explicit ``False``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum

from .color import Color


class ScreenRotation(IntEnum):
    """Display orientation. Only affects presentation; drawing still happens as if unrotated."""

    NORMAL = 0
    CLOCKWISE = 90
    UPSIDE_DOWN = 180
    COUNTER_CLOCKWISE = 270


class Font(str, Enum):
    """Built-in hex digit fonts; see ``fonts.get_font_data`` for the sprite tables."""

    OCTO = "octo"
    VIP = "vip"
    DREAM6800 = "dream6800"
    ETI660 = "eti660"
    SCHIP = "schip"
    FISH = "fish"
    AKOUZ1 = "akouz1"


class TouchMode(str, Enum):
    """Touch input schemes supported by Octo."""

    NONE = "none"
    # taps press key 6, swipes act as a d-pad on keys 5/7/8/9
    SWIPE = "swipe"
    # invisible 4x4 hex keypad over the center of the screen
    SEG16 = "seg16"
    # same as SEG16 but covering the whole display
    SEG16_FILL = "seg16_fill"
    # translucent gamepad; d-pad on 5/7/8/9, A and B on 6 and 4
    GAMEPAD = "gamepad"
    # 4x4 hex keypad drawn below the screen
    VIP = "vip"


class LoResDxy0Behavior(str, Enum):
    """What DXY0 (zero height sprite) draws in 64x32 lores mode."""

    NO_OP = "no_op"  # original COSMAC VIP
    TALL_SPRITE = "tall_sprite"  # 8x16 sprite, DREAM 6800
    BIG_SPRITE = "big_sprite"  # 16x16 sprite as in hires, Octo


@dataclass(frozen=True)
class Colors:
    fill_color: Color | None = None
    fill_color2: Color | None = None
    blend_color: Color | None = None
    background_color: Color | None = None
    buzz_color: Color | None = None
    quiet_color: Color | None = None

    @classmethod
    def default(cls) -> Colors:
        """White on black, with the XO-CHIP and buzzer colors borrowed from Octo's "Hot Dog" preset."""
        return cls(
            fill_color=Color(255, 255, 255),
            fill_color2=Color(255, 255, 0),
            blend_color=Color(255, 0, 0),
            background_color=Color(0, 0, 0),
            buzz_color=Color(153, 0, 0),
            quiet_color=Color(51, 0, 0),
        )


@dataclass(frozen=True)
class Quirks:
    """Divergent runtime behaviors.

    ``True`` selects the "quirky" behavior and ``False`` the default one; which
    of the two matches the original COSMAC VIP interpreter varies per flag for
    historical reasons. ``None`` means the metadata didn't mention the quirk.

    shift: 8XY6/8XYE shift VX in place instead of shifting VY into VX (CHIP-48, SUPER-CHIP).
    load_store: FX55/FX65 leave I unchanged instead of incrementing it (SUPER-CHIP).
    jump0: BXNN jumps by VX instead of V0 (CHIP-48, SUPER-CHIP).
    logic: 8XY1/8XY2/8XY3 leave VF undefined (original).
    clip: sprites clip at the screen edges instead of wrapping.
    vblank: drawing waits for the next frame (original).
    vf_order: arithmetic with VF as operand stores the flag last (original).
    lores_dxy0: behavior of DXY0 in lores mode.
    res_clear: switching resolution clears the screen (Octo).
    delay_wrap: the delay timer wraps from 0 to 255 (DREAM 6800).
    hires_collision: VF counts colliding rows in hires mode (SUPER-CHIP 1.1).
    clip_collision: sprites clipped at the bottom count as a collision (SUPER-CHIP 1.1).
    scroll: lores scrolling moves half as many pixels (SUPER-CHIP).
    overflow_i: VF is set when I goes past 0x0FFF (Amiga interpreter).
    """

    shift: bool | None = None
    load_store: bool | None = None
    jump0: bool | None = None
    logic: bool | None = None
    clip: bool | None = None
    vblank: bool | None = None
    vf_order: bool | None = None
    lores_dxy0: LoResDxy0Behavior | None = None
    res_clear: bool | None = None
    delay_wrap: bool | None = None
    hires_collision: bool | None = None
    clip_collision: bool | None = None
    scroll: bool | None = None
    overflow_i: bool | None = None

    @classmethod
    def default(cls) -> Quirks:
        """No quirks enabled except the ones Octo observes."""
        return cls(
            shift=False,
            load_store=False,
            jump0=False,
            logic=False,
            clip=False,
            vblank=False,
            vf_order=False,
            lores_dxy0=LoResDxy0Behavior.BIG_SPRITE,
            res_clear=True,
            delay_wrap=False,
            hires_collision=False,
            clip_collision=False,
            scroll=False,
            overflow_i=False,
        )


@dataclass(frozen=True)
class Options:
    # instructions per 60Hz frame: 7-15 for the COSMAC VIP, 20-30 for HP 48 SUPER-CHIP, 10000 for Octo's fastest
    tickrate: int | None = None
    # bytes available to the program: 3216 (VIP), 3583 (HP 48), 3584 (Octo), 65024 (XO-CHIP)
    max_size: int | None = None
    screen_rotation: ScreenRotation = ScreenRotation.NORMAL
    font_style: Font = Font.OCTO
    touch_input_mode: TouchMode = TouchMode.NONE
    # load address: 512 on most hardware, 1536 on the ETI-660
    start_address: int | None = None
    colors: Colors = field(default_factory=Colors)
    quirks: Quirks = field(default_factory=Quirks)

    @classmethod
    def default(cls) -> Options:
        return cls(
            tickrate=500,
            max_size=3584,
            start_address=512,
            colors=Colors.default(),
            quirks=Quirks.default(),
        )

    @classmethod
    def from_json(cls, text: str) -> Options:
        from .json_format import options_from_json

        return options_from_json(text)

    def to_json(self, indent: int | None = None) -> str:
        from .json_format import options_to_json

        return options_to_json(self, indent=indent)

    @classmethod
    def from_ini(cls, text: str) -> Options:
        from .ini_format import options_from_ini

        return options_from_ini(text)

    def to_ini(self) -> str:
        from .ini_format import options_to_ini

        return options_to_ini(self)

    def __str__(self) -> str:
        return self.to_json()
