"""Terminal colours, ANSI styling helpers and colour-related conversions."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Union

_RESET = "\x1b[0m"
_FG_RESET = "\x1b[39m"
_BG_RESET = "\x1b[49m"
_COLOR_MARKER = re.compile(r"\{\d+\}")
_HEX_DIGITS = re.compile(r"[0-9a-fA-F]{6}")


class AnsiColor(Enum):
    """The sixteen standard terminal colours plus the terminal default."""

    BLACK = 30
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    MAGENTA = 35
    CYAN = 36
    WHITE = 37
    DEFAULT = 39
    BRIGHT_BLACK = 90
    BRIGHT_RED = 91
    BRIGHT_GREEN = 92
    BRIGHT_YELLOW = 93
    BRIGHT_BLUE = 94
    BRIGHT_MAGENTA = 95
    BRIGHT_CYAN = 96
    BRIGHT_WHITE = 97

    @property
    def fg_code(self) -> str:
        return str(self.value)

    @property
    def bg_code(self) -> str:
        return str(self.value + 10)


@dataclass(frozen=True)
class Rgb:
    """A 24-bit true colour."""

    r: int
    g: int
    b: int

    @property
    def fg_code(self) -> str:
        return f"38;2;{self.r};{self.g};{self.b}"

    @property
    def bg_code(self) -> str:
        return f"48;2;{self.r};{self.g};{self.b}"


Color = Union[AnsiColor, Rgb]

_NUMBERED_COLORS = (
    AnsiColor.BLACK,
    AnsiColor.RED,
    AnsiColor.GREEN,
    AnsiColor.YELLOW,
    AnsiColor.BLUE,
    AnsiColor.MAGENTA,
    AnsiColor.CYAN,
    AnsiColor.WHITE,
    AnsiColor.BRIGHT_BLACK,
    AnsiColor.BRIGHT_RED,
    AnsiColor.BRIGHT_GREEN,
    AnsiColor.BRIGHT_YELLOW,
    AnsiColor.BRIGHT_BLUE,
    AnsiColor.BRIGHT_MAGENTA,
    AnsiColor.BRIGHT_CYAN,
    AnsiColor.BRIGHT_WHITE,
)


@dataclass(frozen=True)
class Style:
    """A foreground colour with optional bold weight."""

    color: Color | None = None
    bold: bool = False

    def paint(self, text: str) -> str:
        """Wrap text in the escape sequences of this style."""
        codes = []
        if self.color is not None:
            codes.append(self.color.fg_code)
        if self.bold:
            codes.append("1")
        if not codes:
            return text
        return f"\x1b[{';'.join(codes)}m{text}{_RESET}"


def fg(color: Color, text: str) -> str:
    """Colour the foreground of text, resetting only the foreground after it."""
    return f"\x1b[{color.fg_code}m{text}{_FG_RESET}"


def on(color: Color, text: str) -> str:
    """Colour the background of text, resetting only the background after it."""
    return f"\x1b[{color.bg_code}m{text}{_BG_RESET}"


def num_to_color(num: int) -> AnsiColor:
    """Map a colour number 0-15 to its terminal colour; anything else is the default."""
    if 0 <= num < len(_NUMBERED_COLORS):
        return _NUMBERED_COLORS[num]
    return AnsiColor.DEFAULT


def get_ascii_colors(
    language_colors: Sequence[Color], ascii_colors: Iterable[int]
) -> list[Color]:
    """Combine user-chosen colour numbers with a language's colours.

    User colours come first; language colours fill any remaining positions.
    """
    custom = [num_to_color(n) for n in ascii_colors]
    if not custom:
        return list(language_colors)
    return custom + list(language_colors[len(custom):])


def hex_to_rgb(value: str) -> Rgb:
    """Parse a colour of the form ``#rrggbb``."""
    if not isinstance(value, str):
        raise TypeError("expected string")
    if not value.startswith("#"):
        raise ValueError("expected hex string starting with `#`")
    digits = value[1:]
    if len(digits) != 6:
        raise ValueError("expected a 6 digit hex string")
    if not _HEX_DIGITS.fullmatch(digits):
        raise ValueError("expected a valid hex string")
    channels = int(digits, 16)
    return Rgb((channels >> 16) & 0xFF, (channels >> 8) & 0xFF, channels & 0xFF)


def strip_color_tokens(value: str) -> str:
    """Remove every ``{n}`` colour marker from a string."""
    if not isinstance(value, str):
        raise TypeError("expected string")
    return _COLOR_MARKER.sub("", value)