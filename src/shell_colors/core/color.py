"""Color values parsed from shell color specifications."""

import logging
import string
from dataclasses import dataclass, field, replace
from enum import Enum

from shell_colors.core.nearest import RGB, term16_index_for_rgb, term256_index_for_rgb
from shell_colors.core.table import icmp, lookup, name_for_index

logger = logging.getLogger(__name__)


class ColorMode(Enum):
    """Color depth a terminal accepts."""
    STANDARD_16 = "16"      # Legacy palette index 0-15
    EXTENDED_256 = "256"    # xterm palette index 0-255
    TRUE_COLOR = "rgb"      # 24-bit (r, g, b)


class ColorKind(Enum):
    """Discriminant for the payload of a Color."""
    NONE = "none"
    SPECIAL = "special"
    NAMED = "named"
    RGB = "rgb"


class Special(Enum):
    """Terminal instructions that are spelled like colors."""
    NORMAL = "normal"   # Terminal default color
    RESET = "reset"     # Reset all attributes


@dataclass(frozen=True, slots=True)
class ColorFlags:
    """Presentation modifiers carried alongside a color."""
    bold: bool = False
    underline: bool = False
    italics: bool = False
    dim: bool = False
    reverse: bool = False

    def any(self) -> bool:
        """True if any modifier is set."""
        return self.bold or self.underline or self.italics or self.dim or self.reverse


@dataclass(frozen=True)
class Color:
    """
    A color as understood by the shell.

    Exactly one payload interpretation is valid for each kind:

    - NONE: no color; value is None
    - SPECIAL: value is a Special (normal or reset)
    - NAMED: value is a legacy palette index 0-15
    - RGB: value is an (r, g, b) tuple

    Asking for a representation the kind cannot provide is a caller bug
    and fails an assertion.
    """
    kind: ColorKind = ColorKind.NONE
    value: Special | int | RGB | None = None
    flags: ColorFlags = field(default_factory=ColorFlags, compare=False)

    @classmethod
    def parse(cls, spec: str) -> "Color":
        """
        Parse a color specification.

        Tries, in order: "normal"/"reset", a table name, then a hex RGB
        literal (#rgb, #rrggbb, with or without the '#'). Anything else
        yields a NONE color; this never raises.
        """
        for attempt in (cls._try_parse_special, cls._try_parse_named, cls._try_parse_rgb):
            color = attempt(spec)
            if color is not None:
                return color
        logger.debug("Unrecognized color spec %r", spec)
        return cls.none()

    @classmethod
    def _try_parse_special(cls, spec: str) -> "Color | None":
        # Length first; most specs are rejected without comparing characters
        if len(spec) == len(Special.NORMAL.value):
            if icmp(spec, Special.NORMAL.value) == 0:
                return cls.normal()
        elif len(spec) == len(Special.RESET.value):
            if icmp(spec, Special.RESET.value) == 0:
                return cls.reset()
        return None

    @classmethod
    def _try_parse_named(cls, spec: str) -> "Color | None":
        entry = lookup(spec)
        if entry is None:
            return None
        return cls(ColorKind.NAMED, entry.index)

    @classmethod
    def _try_parse_rgb(cls, spec: str) -> "Color | None":
        digits = spec[1:] if spec.startswith("#") else spec
        if len(digits) == 3:
            # Short form: FA3 -> FFAA33
            values = [_hex_value(ch) for ch in digits]
            if min(values) < 0:
                return None
            r, g, b = (v * 16 + v for v in values)
        elif len(digits) == 6:
            values = [_hex_value(ch) for ch in digits]
            if min(values) < 0:
                return None
            r, g, b = (values[i] * 16 + values[i + 1] for i in range(0, 6, 2))
        else:
            return None
        return cls(ColorKind.RGB, (r, g, b))

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> "Color":
        """Create a Color from RGB values."""
        if not all(0 <= c <= 255 for c in (r, g, b)):
            raise ValueError(f"RGB values must be 0-255, got ({r}, {g}, {b})")
        return cls(ColorKind.RGB, (r, g, b))

    @classmethod
    def from_index(cls, index: int) -> "Color":
        """Create a named Color from a legacy palette index."""
        if not 0 <= index <= 15:
            raise ValueError(f"Palette index must be 0-15, got {index}")
        return cls(ColorKind.NAMED, index)

    @classmethod
    def normal(cls) -> "Color":
        return cls(ColorKind.SPECIAL, Special.NORMAL)

    @classmethod
    def reset(cls) -> "Color":
        return cls(ColorKind.SPECIAL, Special.RESET)

    @classmethod
    def none(cls) -> "Color":
        return cls(ColorKind.NONE)

    @classmethod
    def white(cls) -> "Color":
        return cls(ColorKind.NAMED, 7)

    @classmethod
    def black(cls) -> "Color":
        return cls(ColorKind.NAMED, 0)

    def is_none(self) -> bool:
        return self.kind is ColorKind.NONE

    def is_special(self) -> bool:
        return self.kind is ColorKind.SPECIAL

    def is_normal(self) -> bool:
        return self.kind is ColorKind.SPECIAL and self.value is Special.NORMAL

    def is_reset(self) -> bool:
        return self.kind is ColorKind.SPECIAL and self.value is Special.RESET

    def is_named(self) -> bool:
        return self.kind is ColorKind.NAMED

    def is_rgb(self) -> bool:
        return self.kind is ColorKind.RGB

    def with_flags(self, **changes: bool) -> "Color":
        """Return a copy with the given modifiers changed, e.g. bold=True."""
        return replace(self, flags=replace(self.flags, **changes))

    def to_rgb24(self) -> RGB:
        """Return the stored (r, g, b) channels. Only valid for RGB colors."""
        assert self.kind is ColorKind.RGB, f"to_rgb24() on {self.kind.name} color"
        assert isinstance(self.value, tuple)
        return self.value

    def to_palette16_index(self) -> int:
        """Return the legacy palette index, searching for the nearest one for RGB colors."""
        assert self.kind in (ColorKind.NAMED, ColorKind.RGB), \
            f"to_palette16_index() on {self.kind.name} color"
        if self.kind is ColorKind.NAMED:
            assert isinstance(self.value, int)
            return self.value
        return term16_index_for_rgb(self.to_rgb24())

    def to_palette256_index(self) -> int:
        """Return the nearest xterm 256-color index (16-255). Only valid for RGB colors."""
        assert self.kind is ColorKind.RGB, f"to_palette256_index() on {self.kind.name} color"
        return term256_index_for_rgb(self.to_rgb24())

    def for_mode(self, mode: ColorMode) -> int | RGB:
        """
        Return the numeric form to use on a terminal of the given depth.

        Named colors always give their legacy index. RGB colors give the
        triple, the 256-color index or the 16-color index depending on mode.
        """
        assert self.kind in (ColorKind.NAMED, ColorKind.RGB), \
            f"for_mode() on {self.kind.name} color"
        if self.kind is ColorKind.NAMED:
            return self.to_palette16_index()
        if mode is ColorMode.TRUE_COLOR:
            return self.to_rgb24()
        if mode is ColorMode.EXTENDED_256:
            return self.to_palette256_index()
        return self.to_palette16_index()

    def description(self) -> str:
        """Human-readable rendering, e.g. 'named(1: red)' or 'rgb(0xffaa33)'."""
        if self.kind is ColorKind.NONE:
            return "none"
        elif self.kind is ColorKind.SPECIAL:
            if self.value is Special.NORMAL:
                return "normal"
            elif self.value is Special.RESET:
                return "reset"
        elif self.kind is ColorKind.NAMED:
            return f"named({self.value}: {name_for_index(self.value)})"
        elif self.kind is ColorKind.RGB:
            r, g, b = self.value
            return f"rgb(0x{r:02x}{g:02x}{b:02x})"
        raise AssertionError(f"Unknown color kind: {self.kind!r} ({self.value!r})")

    def __str__(self) -> str:
        return self.description()


def _hex_value(ch: str) -> int:
    """Value of a single hex digit, or -1."""
    if ch in string.hexdigits:
        return int(ch, 16)
    return -1
