"""CHIP-8 interpreter options: data model, JSON and INI codecs, fonts."""

from .color import Color, format_color, parse_color, resolve_named_color
from .errors import ColorParseError, FormatSyntaxError, InvalidFieldValue, InvalidQuirkValue, OptionsError
from .fonts import get_font_data
from .ini_format import options_from_ini, options_to_ini
from .json_format import options_from_dict, options_from_json, options_to_dict, options_to_json
from .models import Colors, Font, LoResDxy0Behavior, Options, Quirks, ScreenRotation, TouchMode
from .storage import load_options, save_options

__all__ = [
    "Color",
    "ColorParseError",
    "Colors",
    "Font",
    "FormatSyntaxError",
    "InvalidFieldValue",
    "InvalidQuirkValue",
    "LoResDxy0Behavior",
    "Options",
    "OptionsError",
    "Quirks",
    "ScreenRotation",
    "TouchMode",
    "format_color",
    "get_font_data",
    "load_options",
    "options_from_dict",
    "options_from_ini",
    "options_from_json",
    "options_to_dict",
    "options_to_ini",
    "options_to_json",
    "parse_color",
    "resolve_named_color",
    "save_options",
]
