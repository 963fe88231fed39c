"""Built-in CHIP-8 font sprite tables.

Each font has 16 small sprites (hex digits 0-F, 5 bytes each). Fonts that
support SUPER-CHIP/XO-CHIP hires mode also carry big sprites, 10 bytes each;
SUPER-CHIP itself only provides big digits for 0-9.

Interpreters usually copy one font into the first 512 bytes of memory, often
at address 0 or 0x50.
"""

from __future__ import annotations

from .models import Font

SMALL_SPRITE_HEIGHT = 5
BIG_SPRITE_HEIGHT = 10

_OCTO_SMALL = bytes([
    0xF0, 0x90, 0x90, 0x90, 0xF0,  # 0
    0x20, 0x60, 0x20, 0x20, 0x70,  # 1
    0xF0, 0x10, 0xF0, 0x80, 0xF0,  # 2
    0xF0, 0x10, 0xF0, 0x10, 0xF0,  # 3
    0x90, 0x90, 0xF0, 0x10, 0x10,  # 4
    0xF0, 0x80, 0xF0, 0x10, 0xF0,  # 5
    0xF0, 0x80, 0xF0, 0x90, 0xF0,  # 6
    0xF0, 0x10, 0x20, 0x40, 0x40,  # 7
    0xF0, 0x90, 0xF0, 0x90, 0xF0,  # 8
    0xF0, 0x90, 0xF0, 0x10, 0xF0,  # 9
    0xF0, 0x90, 0xF0, 0x90, 0x90,  # A
    0xE0, 0x90, 0xE0, 0x90, 0xE0,  # B
    0xF0, 0x80, 0x80, 0x80, 0xF0,  # C
    0xE0, 0x90, 0x90, 0x90, 0xE0,  # D
    0xF0, 0x80, 0xF0, 0x80, 0xF0,  # E
    0xF0, 0x80, 0xF0, 0x80, 0x80,  # F
])

_OCTO_BIG = bytes([
    0xFF, 0xFF, 0xC3, 0xC3, 0xC3, 0xC3, 0xC3, 0xC3, 0xFF, 0xFF,  # 0
    0x18, 0x78, 0x78, 0x18, 0x18, 0x18, 0x18, 0x18, 0xFF, 0xFF,  # 1
    0xFF, 0xFF, 0x03, 0x03, 0xFF, 0xFF, 0xC0, 0xC0, 0xFF, 0xFF,  # 2
    0xFF, 0xFF, 0x03, 0x03, 0xFF, 0xFF, 0x03, 0x03, 0xFF, 0xFF,  # 3
    0xC3, 0xC3, 0xC3, 0xC3, 0xFF, 0xFF, 0x03, 0x03, 0x03, 0x03,  # 4
    0xFF, 0xFF, 0xC0, 0xC0, 0xFF, 0xFF, 0x03, 0x03, 0xFF, 0xFF,  # 5
    0xFF, 0xFF, 0xC0, 0xC0, 0xFF, 0xFF, 0xC3, 0xC3, 0xFF, 0xFF,  # 6
    0xFF, 0xFF, 0x03, 0x03, 0x06, 0x0C, 0x18, 0x18, 0x18, 0x18,  # 7
    0xFF, 0xFF, 0xC3, 0xC3, 0xFF, 0xFF, 0xC3, 0xC3, 0xFF, 0xFF,  # 8
    0xFF, 0xFF, 0xC3, 0xC3, 0xFF, 0xFF, 0x03, 0x03, 0xFF, 0xFF,  # 9
    0x7E, 0xFF, 0xC3, 0xC3, 0xC3, 0xFF, 0xFF, 0xC3, 0xC3, 0xC3,  # A
    0xFC, 0xFC, 0xC3, 0xC3, 0xFC, 0xFC, 0xC3, 0xC3, 0xFC, 0xFC,  # B
    0x3C, 0xFF, 0xC3, 0xC0, 0xC0, 0xC0, 0xC0, 0xC3, 0xFF, 0x3C,  # C
    0xFC, 0xFE, 0xC3, 0xC3, 0xC3, 0xC3, 0xC3, 0xC3, 0xFE, 0xFC,  # D
    0xFF, 0xFF, 0xC0, 0xC0, 0xFF, 0xFF, 0xC0, 0xC0, 0xFF, 0xFF,  # E
    0xFF, 0xFF, 0xC0, 0xC0, 0xFF, 0xFF, 0xC0, 0xC0, 0xC0, 0xC0,  # F
])

_VIP_SMALL = bytes([
    0xF0, 0x90, 0x90, 0x90, 0xF0,  # 0
    0x60, 0x20, 0x20, 0x20, 0x70,  # 1
    0xF0, 0x10, 0xF0, 0x80, 0xF0,  # 2
    0xF0, 0x10, 0xF0, 0x10, 0xF0,  # 3
    0xA0, 0xA0, 0xF0, 0x20, 0x20,  # 4
    0xF0, 0x80, 0xF0, 0x10, 0xF0,  # 5
    0xF0, 0x80, 0xF0, 0x90, 0xF0,  # 6
    0xF0, 0x10, 0x10, 0x10, 0x10,  # 7
    0xF0, 0x90, 0xF0, 0x90, 0xF0,  # 8
    0xF0, 0x90, 0xF0, 0x10, 0xF0,  # 9
    0xF0, 0x90, 0xF0, 0x90, 0x90,  # A
    0xF0, 0x50, 0x70, 0x50, 0xF0,  # B
    0xF0, 0x80, 0x80, 0x80, 0xF0,  # C
    0xF0, 0x50, 0x50, 0x50, 0xF0,  # D
    0xF0, 0x80, 0xF0, 0x80, 0xF0,  # E
    0xF0, 0x80, 0xF0, 0x80, 0x80,  # F
])

_DREAM6800_SMALL = bytes([
    0xE0, 0xA0, 0xA0, 0xA0, 0xE0,  # 0
    0x40, 0x40, 0x40, 0x40, 0x40,  # 1
    0xE0, 0x20, 0xE0, 0x80, 0xE0,  # 2
    0xE0, 0x20, 0xE0, 0x20, 0xE0,  # 3
    0x80, 0xA0, 0xA0, 0xE0, 0x20,  # 4
    0xE0, 0x80, 0xE0, 0x20, 0xE0,  # 5
    0xE0, 0x80, 0xE0, 0xA0, 0xE0,  # 6
    0xE0, 0x20, 0x20, 0x20, 0x20,  # 7
    0xE0, 0xA0, 0xE0, 0xA0, 0xE0,  # 8
    0xE0, 0xA0, 0xE0, 0x20, 0xE0,  # 9
    0xE0, 0xA0, 0xE0, 0xA0, 0xA0,  # A
    0xC0, 0xA0, 0xE0, 0xA0, 0xC0,  # B
    0xE0, 0x80, 0x80, 0x80, 0xE0,  # C
    0xC0, 0xA0, 0xA0, 0xA0, 0xC0,  # D
    0xE0, 0x80, 0xE0, 0x80, 0xE0,  # E
    0xE0, 0x80, 0xC0, 0x80, 0x80,  # F
])

_ETI660_SMALL = bytes([
    0xE0, 0xA0, 0xA0, 0xA0, 0xE0,  # 0
    0x20, 0x20, 0x20, 0x20, 0x20,  # 1
    0xE0, 0x20, 0xE0, 0x80, 0xE0,  # 2
    0xE0, 0x20, 0xE0, 0x20, 0xE0,  # 3
    0xA0, 0xA0, 0xE0, 0x20, 0x20,  # 4
    0xE0, 0x80, 0xE0, 0x20, 0xE0,  # 5
    0xE0, 0x80, 0xE0, 0xA0, 0xE0,  # 6
    0xE0, 0x20, 0x20, 0x20, 0x20,  # 7
    0xE0, 0xA0, 0xE0, 0xA0, 0xE0,  # 8
    0xE0, 0xA0, 0xE0, 0x20, 0xE0,  # 9
    0xE0, 0xA0, 0xE0, 0xA0, 0xA0,  # A
    0x80, 0x80, 0xE0, 0xA0, 0xE0,  # B
    0xE0, 0x80, 0x80, 0x80, 0xE0,  # C
    0x20, 0x20, 0xE0, 0xA0, 0xE0,  # D
    0xE0, 0x80, 0xE0, 0x80, 0xE0,  # E
    0xE0, 0x80, 0xC0, 0x80, 0x80,  # F
])

# small digits are identical to Octo's
_SCHIP_BIG = bytes([
    0x3C, 0x7E, 0xE7, 0xC3, 0xC3, 0xC3, 0xC3, 0xE7, 0x7E, 0x3C,  # 0
    0x18, 0x38, 0x58, 0x18, 0x18, 0x18, 0x18, 0x18, 0x18, 0x3C,  # 1
    0x3E, 0x7F, 0xC3, 0x06, 0x0C, 0x18, 0x30, 0x60, 0xFF, 0xFF,  # 2
    0x3C, 0x7E, 0xC3, 0x03, 0x0E, 0x0E, 0x03, 0xC3, 0x7E, 0x3C,  # 3
    0x06, 0x0E, 0x1E, 0x36, 0x66, 0xC6, 0xFF, 0xFF, 0x06, 0x06,  # 4
    0xFF, 0xFF, 0xC0, 0xC0, 0xFC, 0xFE, 0x03, 0xC3, 0x7E, 0x3C,  # 5
    0x3E, 0x7C, 0xE0, 0xC0, 0xFC, 0xFE, 0xC3, 0xC3, 0x7E, 0x3C,  # 6
    0xFF, 0xFF, 0x03, 0x06, 0x0C, 0x18, 0x30, 0x60, 0x60, 0x60,  # 7
    0x3C, 0x7E, 0xC3, 0xC3, 0x7E, 0x7E, 0xC3, 0xC3, 0x7E, 0x3C,  # 8
    0x3C, 0x7E, 0xC3, 0xC3, 0x7F, 0x3F, 0x03, 0x03, 0x3E, 0x7C,  # 9
])

_FISH_SMALL = bytes([
    0x60, 0xA0, 0xA0, 0xA0, 0xC0,  # 0
    0x40, 0xC0, 0x40, 0x40, 0xE0,  # 1
    0xC0, 0x20, 0x40, 0x80, 0xE0,  # 2
    0xC0, 0x20, 0x40, 0x20, 0xC0,  # 3
    0x20, 0xA0, 0xE0, 0x20, 0x20,  # 4
    0xE0, 0x80, 0xC0, 0x20, 0xC0,  # 5
    0x40, 0x80, 0xC0, 0xA0, 0x40,  # 6
    0xE0, 0x20, 0x60, 0x40, 0x40,  # 7
    0x40, 0xA0, 0x40, 0xA0, 0x40,  # 8
    0x40, 0xA0, 0x60, 0x20, 0x40,  # 9
    0x40, 0xA0, 0xE0, 0xA0, 0xA0,  # A
    0xC0, 0xA0, 0xC0, 0xA0, 0xC0,  # B
    0x60, 0x80, 0x80, 0x80, 0x60,  # C
    0xC0, 0xA0, 0xA0, 0xA0, 0xC0,  # D
    0xE0, 0x80, 0xC0, 0x80, 0xE0,  # E
    0xE0, 0x80, 0xC0, 0x80, 0x80,  # F
])

# 7x9 pixel glyphs padded to 10 rows
_FISH_BIG = bytes([
    0x7C, 0xC6, 0xCE, 0xDE, 0xD6, 0xF6, 0xE6, 0xC6, 0x7C, 0x00,  # 0
    0x10, 0x30, 0xF0, 0x30, 0x30, 0x30, 0x30, 0x30, 0xFC, 0x00,  # 1
    0x78, 0xCC, 0xCC, 0x0C, 0x18, 0x30, 0x60, 0xCC, 0xFC, 0x00,  # 2
    0x78, 0xCC, 0x0C, 0x0C, 0x38, 0x0C, 0x0C, 0xCC, 0x78, 0x00,  # 3
    0x0C, 0x1C, 0x3C, 0x6C, 0xCC, 0xFE, 0x0C, 0x0C, 0x1E, 0x00,  # 4
    0xFC, 0xC0, 0xC0, 0xC0, 0xF8, 0x0C, 0x0C, 0xCC, 0x78, 0x00,  # 5
    0x38, 0x60, 0xC0, 0xC0, 0xF8, 0xCC, 0xCC, 0xCC, 0x78, 0x00,  # 6
    0xFE, 0xC6, 0xC6, 0x06, 0x0C, 0x18, 0x30, 0x30, 0x30, 0x00,  # 7
    0x78, 0xCC, 0xCC, 0xEC, 0x78, 0xDC, 0xCC, 0xCC, 0x78, 0x00,  # 8
    0x7C, 0xC6, 0xC6, 0xC6, 0x7C, 0x18, 0x18, 0x30, 0x70, 0x00,  # 9
    0x30, 0x78, 0xCC, 0xCC, 0xCC, 0xFC, 0xCC, 0xCC, 0xCC, 0x00,  # A
    0xFC, 0x66, 0x66, 0x66, 0x7C, 0x66, 0x66, 0x66, 0xFC, 0x00,  # B
    0x3C, 0x66, 0xC6, 0xC0, 0xC0, 0xC0, 0xC6, 0x66, 0x3C, 0x00,  # C
    0xF8, 0x6C, 0x66, 0x66, 0x66, 0x66, 0x66, 0x6C, 0xF8, 0x00,  # D
    0xFE, 0x62, 0x60, 0x64, 0x7C, 0x64, 0x60, 0x62, 0xFE, 0x00,  # E
    0xFE, 0x66, 0x62, 0x64, 0x7C, 0x64, 0x60, 0x60, 0xF0, 0x00,  # F
])

_AKOUZ1_SMALL = bytes([
    0x60, 0x90, 0x90, 0x90, 0x60,  # 0
    0x20, 0x60, 0x20, 0x20, 0x70,  # 1
    0xE0, 0x10, 0x60, 0x80, 0xF0,  # 2
    0xE0, 0x10, 0xE0, 0x10, 0xE0,  # 3
    0x30, 0x50, 0x90, 0xF0, 0x10,  # 4
    0xF0, 0x80, 0xF0, 0x10, 0xE0,  # 5
    0x70, 0x80, 0xF0, 0x90, 0x60,  # 6
    0xF0, 0x10, 0x20, 0x40, 0x40,  # 7
    0x60, 0x90, 0x60, 0x90, 0x60,  # 8
    0x60, 0x90, 0x70, 0x10, 0x60,  # 9
    0x60, 0x90, 0xF0, 0x90, 0x90,  # A
    0xE0, 0x90, 0xE0, 0x90, 0xE0,  # B
    0x70, 0x80, 0x80, 0x80, 0x70,  # C
    0xE0, 0x90, 0x90, 0x90, 0xE0,  # D
    0xF0, 0x80, 0xE0, 0x80, 0xF0,  # E
    0xF0, 0x80, 0xE0, 0x80, 0x80,  # F
])

_AKOUZ1_BIG = bytes([
    0x7E, 0xC7, 0xC7, 0xCB, 0xCB, 0xD3, 0xD3, 0xE3, 0xE3, 0x7E,  # 0
    0x18, 0x38, 0x78, 0x18, 0x18, 0x18, 0x18, 0x18, 0x18, 0x7E,  # 1
    0x7E, 0xC3, 0x03, 0x03, 0x0E, 0x18, 0x30, 0x60, 0xC0, 0xFF,  # 2
    0x7E, 0xC3, 0x03, 0x03, 0x1E, 0x03, 0x03, 0x03, 0xC3, 0x7E,  # 3
    0x06, 0x0E, 0x1E, 0x36, 0x66, 0xC6, 0xC6, 0xFF, 0x06, 0x06,  # 4
    0xFF, 0xC0, 0xC0, 0xC0, 0xFE, 0x03, 0x03, 0x03, 0xC3, 0x7E,  # 5
    0x7E, 0xC3, 0xC0, 0xC0, 0xFE, 0xC3, 0xC3, 0xC3, 0xC3, 0x7E,  # 6
    0xFF, 0x03, 0x03, 0x03, 0x06, 0x0C, 0x18, 0x18, 0x18, 0x18,  # 7
    0x7E, 0xC3, 0xC3, 0xC3, 0x7E, 0xC3, 0xC3, 0xC3, 0xC3, 0x7E,  # 8
    0x7E, 0xC3, 0xC3, 0xC3, 0x7F, 0x03, 0x03, 0x03, 0xC3, 0x7E,  # 9
    0x7E, 0xC3, 0xC3, 0xC3, 0xFF, 0xC3, 0xC3, 0xC3, 0xC3, 0xC3,  # A
    0xFE, 0xC3, 0xC3, 0xC3, 0xFE, 0xC3, 0xC3, 0xC3, 0xC3, 0xFE,  # B
    0x7E, 0xC3, 0xC0, 0xC0, 0xC0, 0xC0, 0xC0, 0xC0, 0xC3, 0x7E,  # C
    0xFC, 0xC6, 0xC3, 0xC3, 0xC3, 0xC3, 0xC3, 0xC3, 0xC6, 0xFC,  # D
    0xFF, 0xC0, 0xC0, 0xC0, 0xFE, 0xC0, 0xC0, 0xC0, 0xC0, 0xFF,  # E
    0xFF, 0xC0, 0xC0, 0xC0, 0xFE, 0xC0, 0xC0, 0xC0, 0xC0, 0xC0,  # F
])

FONTS: dict[Font, tuple[bytes, bytes | None]] = {
    Font.OCTO: (_OCTO_SMALL, _OCTO_BIG),
    Font.VIP: (_VIP_SMALL, None),
    Font.DREAM6800: (_DREAM6800_SMALL, None),
    Font.ETI660: (_ETI660_SMALL, None),
    Font.SCHIP: (_OCTO_SMALL, _SCHIP_BIG),
    Font.FISH: (_FISH_SMALL, _FISH_BIG),
    Font.AKOUZ1: (_AKOUZ1_SMALL, _AKOUZ1_BIG),
}


def get_font_data(font: Font) -> tuple[bytes, bytes | None]:
    """Return the 80-byte small sprite table and the optional big sprite table for a font."""
    return FONTS[Font(font)]

