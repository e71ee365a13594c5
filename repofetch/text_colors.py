"""Colours used for the text half of the output."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from repofetch.colors import AnsiColor, Color, num_to_color


@dataclass(frozen=True)
class TextColors:
    """Colours of the title, tilde, underline, subtitles, colons and values."""

    title: Color
    tilde: Color
    underline: Color
    subtitle: Color
    colon: Color
    info: Color

    @classmethod
    def from_numbers(
        cls, colors: Iterable[int], logo_primary_color: Color
    ) -> TextColors:
        """Build text colours from up to six colour numbers, in field order."""
        custom = [num_to_color(n) for n in colors]

        def pick(index: int, default: Color) -> Color:
            return custom[index] if index < len(custom) else default

        return cls(
            title=pick(0, logo_primary_color),
            tilde=pick(1, AnsiColor.DEFAULT),
            underline=pick(2, AnsiColor.DEFAULT),
            subtitle=pick(3, logo_primary_color),
            colon=pick(4, AnsiColor.DEFAULT),
            info=pick(5, AnsiColor.DEFAULT),
        )