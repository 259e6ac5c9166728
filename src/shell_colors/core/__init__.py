"""Core color value, named table and palette search."""

from shell_colors.core.color import Color, ColorFlags, ColorKind, ColorMode, Special
from shell_colors.core.nearest import nearest
from shell_colors.core.table import NamedColor, list_names, lookup, name_for_index

__all__ = [
    "Color",
    "ColorFlags",
    "ColorKind",
    "ColorMode",
    "Special",
    "NamedColor",
    "nearest",
    "list_names",
    "lookup",
    "name_for_index",
]
