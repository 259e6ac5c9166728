"""Nearest-color search for downgrading 24-bit colors to palette indices."""

from collections.abc import Sequence

RGB = tuple[int, int, int]

# Representative values for the 16 legacy ANSI colors (index 0-15)
PALETTE_16: tuple[RGB, ...] = (
    (0x00, 0x00, 0x00),  # Black
    (0x80, 0x00, 0x00),  # Red
    (0x00, 0x80, 0x00),  # Green
    (0x80, 0x80, 0x00),  # Yellow
    (0x00, 0x00, 0x80),  # Blue
    (0x80, 0x00, 0x80),  # Magenta
    (0x00, 0x80, 0x80),  # Cyan
    (0xC0, 0xC0, 0xC0),  # White
    (0x80, 0x80, 0x80),  # Bright Black
    (0xFF, 0x00, 0x00),  # Bright Red
    (0x00, 0xFF, 0x00),  # Bright Green
    (0xFF, 0xFF, 0x00),  # Bright Yellow
    (0x00, 0x00, 0xFF),  # Bright Blue
    (0xFF, 0x00, 0xFF),  # Bright Magenta
    (0x00, 0xFF, 0xFF),  # Bright Cyan
    (0xFF, 0xFF, 0xFF),  # Bright White
)

# xterm 6x6x6 cube levels
CUBE_LEVELS: tuple[int, ...] = (0x00, 0x5F, 0x87, 0xAF, 0xD7, 0xFF)

# Entries 16-255 of the xterm palette: the color cube (red-major), then
# a 24-step grayscale ramp from 0x08 to 0xEE.
PALETTE_240: tuple[RGB, ...] = tuple(
    (r, g, b) for r in CUBE_LEVELS for g in CUBE_LEVELS for b in CUBE_LEVELS
) + tuple((v, v, v) for v in range(0x08, 0xEF, 10))

assert len(PALETTE_240) == 240


def distance(a: RGB, b: RGB) -> int:
    """Squared Euclidean distance between two RGB colors."""
    return sum((x - y) * (x - y) for x, y in zip(a, b))


def nearest(target: RGB, palette: Sequence[RGB]) -> int:
    """
    Return the index of the palette entry closest to target.

    Ties go to the later entry: the scan keeps the most recent candidate
    at the minimal distance.
    """
    if not palette:
        raise ValueError("Palette must not be empty")
    best_index = -1
    best_distance = -1
    for idx, color in enumerate(palette):
        d = distance(target, color)
        if best_index < 0 or d <= best_distance:
            best_index = idx
            best_distance = d
    return best_index


def term16_index_for_rgb(rgb: RGB) -> int:
    """Nearest legacy 16-color index for an RGB value."""
    return nearest(rgb, PALETTE_16)


def term256_index_for_rgb(rgb: RGB) -> int:
    """Nearest 256-color index for an RGB value, always in 16-255."""
    return 16 + nearest(rgb, PALETTE_240)
