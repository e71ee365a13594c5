"""Parsing and rendering of ASCII logos with ``{n}`` colour markers."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from enum import Enum

from repofetch.colors import AnsiColor, Color, Style

_DIGITS = "0123456789"


class TokenKind(Enum):
    COLOR = "color"
    CHAR = "char"
    SPACE = "space"


@dataclass(frozen=True)
class Token:
    """One element of a logo line: a colour switch, a space or a character."""

    kind: TokenKind
    value: int | str | None = None

    @classmethod
    def of_color(cls, index: int) -> Token:
        return cls(TokenKind.COLOR, index)

    @classmethod
    def of_char(cls, char: str) -> Token:
        return cls(TokenKind.CHAR, char)

    @property
    def is_solid(self) -> bool:
        return self.kind is TokenKind.CHAR

    @property
    def is_space(self) -> bool:
        return self.kind is TokenKind.SPACE

    @property
    def has_zero_width(self) -> bool:
        return self.kind is TokenKind.COLOR

    def __str__(self) -> str:
        if self.kind is TokenKind.COLOR:
            return f"{{{self.value}}}"
        if self.kind is TokenKind.CHAR:
            return str(self.value)
        return " "


SPACE = Token(TokenKind.SPACE)

ParseResult = "tuple[str, Token] | None"


def color_token(s: str) -> tuple[str, Token] | None:
    """Parse a colour marker ``{n}`` where n is a single digit."""
    if len(s) >= 3 and s[0] == "{" and s[1] in _DIGITS and s[2] == "}":
        return s[3:], Token.of_color(int(s[1]))
    return None


def space_token(s: str) -> tuple[str, Token] | None:
    """Parse a single space."""
    if s.startswith(" "):
        return s[1:], SPACE
    return None


def char_token(s: str) -> tuple[str, Token] | None:
    """Parse any single character; fails only on empty input."""
    if not s:
        return None
    return s[1:], Token.of_char(s[0])


def tokenize(line: str) -> Iterator[Token]:
    """Yield the tokens of a logo line."""
    rest = line
    while True:
        parsed = color_token(rest) or space_token(rest) or char_token(rest)
        if parsed is None:
            return
        rest, token = parsed
        yield token


def is_blank(line: str) -> bool:
    """True if the line holds no visible character."""
    return not any(token.is_solid for token in tokenize(line))


def leading_spaces(line: str) -> int:
    """Count spaces before the first visible character."""
    count = 0
    for token in tokenize(line):
        if token.is_solid:
            break
        if token.is_space:
            count += 1
    return count


def true_length(line: str) -> int:
    """Printed width of the line up to its last visible character."""
    last_non_space = 0
    position = 0
    for token in tokenize(line):
        if token.has_zero_width:
            continue
        position += 1
        if not token.is_space:
            last_non_space = position
    return last_non_space


def truncate(line: str, start: int, end: int) -> Iterator[Token]:
    """Yield the tokens within printed columns ``start`` to ``end``.

    Colour markers before the window are kept so colours carry over.
    """
    if start > end:
        raise ValueError("start must not exceed end")
    to_skip = start
    width = end - start
    for token in tokenize(line):
        if to_skip > 0 and not token.has_zero_width:
            to_skip -= 1
            continue
        if width == 0:
            return
        if not token.has_zero_width:
            width -= 1
        yield token


def render(
    line: str, colors: Sequence[Color], start: int, end: int, bold: bool
) -> str:
    """Render the columns ``start`` to ``end`` of a line, padded to full width."""
    if start > end:
        raise ValueError("start must not exceed end")
    width = end - start
    parts: list[str] = []
    segment: list[str] = []
    color: Color = AnsiColor.DEFAULT

    for token in truncate(line, start, end):
        if token.kind is TokenKind.COLOR:
            parts.append(Style(color, bold).paint("".join(segment)))
            segment = []
            index = token.value
            color = colors[index] if index < len(colors) else AnsiColor.DEFAULT
        else:
            width = max(width - 1, 0)
            segment.append(str(token))

    parts.append(Style(color, bold).paint("".join(segment)))
    parts.append(" " * width)
    return "".join(parts)


def get_min_start_max_end(lines: Sequence[str]) -> tuple[int, int]:
    """Smallest indentation and largest printed width across the lines."""
    start, end = sys.maxsize, 0
    for line in lines:
        start = min(start, leading_spaces(line))
        end = max(end, true_length(line))
    return start, end


def _split_lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


class AsciiArt:
    """A logo trimmed of surrounding blank space, rendered line by line."""

    def __init__(self, text: str, colors: Sequence[Color], bold: bool) -> None:
        lines = _split_lines(text)
        first = next((i for i, line in enumerate(lines) if line), len(lines))
        lines = lines[first:]
        while lines and is_blank(lines[-1]):
            lines.pop()
        self.lines = lines
        self.colors = list(colors)
        self.bold = bold
        self.start, self.end = get_min_start_max_end(lines)

    def width(self) -> int:
        """Printed width of every rendered line."""
        if self.end < self.start:
            raise ValueError("logo has no lines to measure")
        return self.end - self.start

    def __iter__(self) -> Iterator[str]:
        for line in self.lines:
            yield render(line, self.colors, self.start, self.end, self.bold)