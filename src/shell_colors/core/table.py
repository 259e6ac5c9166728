"""Named color table for shell color specifications."""

from bisect import bisect_left
from dataclasses import dataclass
from itertools import pairwise

# Folds only ASCII A-Z; the table order and every lookup depend on it.
_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    "abcdefghijklmnopqrstuvwxyz",
)

UNKNOWN_NAME = "unknown"
NORMAL_NAME = "normal"


def _fold(s: str) -> str:
    return s.translate(_ASCII_LOWER)


def icmp(a: str, b: str) -> int:
    """Compare two strings with ASCII-only case folding, returning -1, 0 or 1."""
    fa, fb = _fold(a), _fold(b)
    if fa == fb:
        return 0
    return -1 if fa < fb else 1


@dataclass(frozen=True, slots=True)
class NamedColor:
    """
    One entry of the named color table.

    The RGB value is the representative swatch for the legacy palette index.
    Hidden entries are aliases that still parse but are not listed to users.
    """
    name: str
    index: int
    rgb: tuple[int, int, int]
    hidden: bool = False


# Keep sorted by icmp
NAMED_COLORS: tuple[NamedColor, ...] = (
    NamedColor("black", 0, (0x00, 0x00, 0x00)),
    NamedColor("blue", 4, (0x00, 0x00, 0x80)),
    NamedColor("brblack", 8, (0x80, 0x80, 0x80)),
    NamedColor("brblue", 12, (0x00, 0x00, 0xFF)),
    NamedColor("brbrown", 11, (0xFF, 0xFF, 0x00), hidden=True),
    NamedColor("brcyan", 14, (0x00, 0xFF, 0xFF)),
    NamedColor("brgreen", 10, (0x00, 0xFF, 0x00)),
    NamedColor("brgrey", 8, (0x55, 0x55, 0x55), hidden=True),
    NamedColor("brmagenta", 13, (0xFF, 0x00, 0xFF)),
    NamedColor("brown", 3, (0x72, 0x50, 0x00), hidden=True),
    NamedColor("brpurple", 13, (0xFF, 0x00, 0xFF), hidden=True),
    NamedColor("brred", 9, (0xFF, 0x00, 0x00)),
    NamedColor("brwhite", 15, (0xFF, 0xFF, 0xFF)),
    NamedColor("bryellow", 11, (0xFF, 0xFF, 0x00)),
    NamedColor("cyan", 6, (0x00, 0x80, 0x80)),
    NamedColor("green", 2, (0x00, 0x80, 0x00)),
    NamedColor("grey", 7, (0xE5, 0xE5, 0xE5), hidden=True),
    NamedColor("magenta", 5, (0x80, 0x00, 0x80)),
    NamedColor("purple", 5, (0x80, 0x00, 0x80), hidden=True),
    NamedColor("red", 1, (0x80, 0x00, 0x00)),
    NamedColor("white", 7, (0xC0, 0xC0, 0xC0)),
    NamedColor("yellow", 3, (0x80, 0x80, 0x00)),
)

assert all(icmp(a.name, b.name) < 0 for a, b in pairwise(NAMED_COLORS)), \
    "NAMED_COLORS must be sorted by name"

_FOLDED_NAMES: tuple[str, ...] = tuple(_fold(c.name) for c in NAMED_COLORS)


def lookup(name: str) -> NamedColor | None:
    """Find a table entry by name, ignoring ASCII case."""
    if not name:
        return None
    folded = _fold(name)
    pos = bisect_left(_FOLDED_NAMES, folded)
    if pos < len(NAMED_COLORS) and _FOLDED_NAMES[pos] == folded:
        return NAMED_COLORS[pos]
    return None


def list_names(include_hidden: bool = False) -> list[str]:
    """
    Return color names in table order.

    The visible listing ends with "normal", which is a valid color spec but
    has no palette entry. The full listing (include_hidden=True) contains
    only real table entries.
    """
    if include_hidden:
        return [c.name for c in NAMED_COLORS]
    names = [c.name for c in NAMED_COLORS if not c.hidden]
    names.append(NORMAL_NAME)
    return names


def name_for_index(index: int) -> str:
    """Return the first table name for a legacy palette index."""
    for color in NAMED_COLORS:
        if color.index == index:
            return color.name
    return UNKNOWN_NAME
