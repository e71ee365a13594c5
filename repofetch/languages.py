"""The languages field: a coloured distribution bar and a legend."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import ClassVar

from repofetch.colors import AnsiColor, Color, fg, on
from repofetch.info_field import InfoField, InfoType

LANGUAGES_BAR_LENGTH = 26
_MAX_SHOWN = 6
_PALETTE = (
    AnsiColor.RED,
    AnsiColor.GREEN,
    AnsiColor.YELLOW,
    AnsiColor.BLUE,
    AnsiColor.MAGENTA,
    AnsiColor.CYAN,
)


def _round_half_away(value: float) -> int:
    return int(math.floor(abs(value) + 0.5)) * (1 if value >= 0 else -1)


@dataclass(frozen=True)
class LanguageWithPercentage:
    """A language, its share of the code in percent, and its own circle colour."""

    language: str
    percentage: float
    circle_color: Color | None = None

    def to_dict(self) -> dict[str, object]:
        return {"language": self.language, "percentage": self.percentage}


@dataclass
class LanguagesInfo(InfoField):
    """Languages ordered by share; beyond six, the rest are grouped as Other."""

    TYPE: ClassVar[InfoType] = InfoType.LANGUAGES
    languages_with_percentage: list[LanguageWithPercentage] = field(default_factory=list)
    true_color: bool = False
    info_color: Color = AnsiColor.DEFAULT

    def _entries(self) -> list[tuple[str, float, Color]]:
        entries = []
        for i, item in enumerate(self.languages_with_percentage):
            if self.true_color and item.circle_color is not None:
                color = item.circle_color
            else:
                color = _PALETTE[i % len(_PALETTE)]
            entries.append((item.language, item.percentage, color))
        if len(entries) > _MAX_SHOWN:
            other = sum(perc for _, perc, _ in entries[_MAX_SHOWN:])
            entries = entries[:_MAX_SHOWN] + [("Other", other, AnsiColor.WHITE)]
        return entries

    def __str__(self) -> str:
        pad = " " * (len(self.title()) + 2)
        entries = self._entries()
        parts = [
            on(color, " " * max(_round_half_away(perc / 100 * LANGUAGES_BAR_LENGTH), 1))
            for _, perc, color in entries
        ]
        for i, (language, perc, color) in enumerate(entries):
            label = fg(self.info_color, f"{language} ({perc:.1f} %)")
            entry = f"{fg(color, chr(0x25CF))} {label} "
            parts.append(f"\n{pad}{entry}" if i % 2 == 0 else entry)
        return "".join(parts)

    def value(self) -> str:
        return str(self)

    def title(self) -> str:
        return "Languages" if len(self.languages_with_percentage) > 1 else "Language"

    def to_list(self) -> list[dict[str, object]]:
        return [item.to_dict() for item in self.languages_with_percentage]