"""
shell-colors: color specifications for shell output

Resolve the color strings a shell accepts (named colors, "normal"/"reset",
hex RGB) into the numeric form a terminal understands.

Quick Start:
    >>> import shell_colors as sc
    >>> sc.parse("brblue").to_palette16_index()
    12
    >>> sc.parse("#f3a035").to_palette256_index()
    215
    >>> sc.parse("FA3").to_rgb24()
    (255, 170, 51)

Features:
    - Case-insensitive named colors, including hidden aliases
    - Short (#rgb) and long (#rrggbb) hex literals
    - Nearest-color downgrade to the 16- and 256-color palettes
    - A set_color-style command line (shell-colors)
"""

__version__ = "0.1.0"

# Core types
from shell_colors.core.color import Color, ColorFlags, ColorKind, ColorMode, Special
from shell_colors.core.table import NamedColor, list_names, lookup


def parse(spec: str) -> Color:
    """Parse a color specification; unrecognized input gives a NONE color."""
    return Color.parse(spec)


__all__ = [
    # Version
    "__version__",
    # Core types
    "Color",
    "ColorFlags",
    "ColorKind",
    "ColorMode",
    "Special",
    "NamedColor",
    # Table
    "list_names",
    "lookup",
    # Parsing
    "parse",
]
