"""Laying out the logo next to the information, or serialising it."""

from __future__ import annotations

import json
import os
from itertools import zip_longest
from pathlib import Path
from typing import TextIO

import yaml

from repofetch.ascii_art import AsciiArt
from repofetch.config import Config, SerializationFormat, When
from repofetch.info import Info

CENTER_PAD_LENGTH = 3
MAX_TERM_WIDTH = 95


def _terminal_width() -> int | None:
    try:
        return os.get_terminal_size().columns
    except (OSError, ValueError):
        return None


def _art_off(show_logo: When) -> bool:
    if show_logo is When.ALWAYS:
        return False
    if show_logo is When.NEVER:
        return True
    width = _terminal_width()
    return width is not None and width < MAX_TERM_WIDTH


def _load_image(path: Path | None) -> bytes | None:
    if path is None:
        return None
    try:
        return Path(path).read_bytes()
    except OSError as exc:
        raise OSError(f"Could not load the specified image: {exc}") from exc


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


class Printer:
    """Writes the gathered information to a text stream."""

    def __init__(self, writer: TextIO, info: Info, config: Config) -> None:
        self.writer = writer
        self.info = info
        self.output = config.output
        self.art_off = _art_off(config.show_logo)
        self.image = _load_image(config.image)
        self.color_resolution = config.color_resolution
        self.no_bold = config.no_bold
        self.ascii_input = config.ascii_input

    def _logo(self) -> AsciiArt | None:
        if self.ascii_input is None:
            return None
        return AsciiArt(self.ascii_input, self.info.ascii_colors, not self.no_bold)

    def render(self) -> str:
        """The complete text that ``print`` writes."""
        if self.output is SerializationFormat.JSON:
            return json.dumps(self.info.to_dict(), indent=2, ensure_ascii=False) + "\n"
        if self.output is SerializationFormat.YAML:
            dumped = yaml.safe_dump(
                self.info.to_dict(), sort_keys=False, allow_unicode=True
            )
            return dumped + "\n"

        info_str = str(self.info)
        if self.art_off:
            return info_str
        if self.image is not None:
            raise RuntimeError("Could not detect a supported image backend")

        logo = self._logo()
        if logo is None:
            # No logo is available for the repository, so only the text is shown.
            return info_str

        center_pad = " " * CENTER_PAD_LENGTH
        parts: list[str] = []
        for logo_line, info_line in zip_longest(logo, _lines(info_str)):
            if logo_line is not None and info_line is not None:
                parts.append(f"{logo_line}{center_pad}{info_line}\n")
            elif logo_line is not None:
                parts.append(f"{logo_line}\n")
            else:
                parts.append(f"{' ' * logo.width()}{center_pad}{info_line}\n")
        parts.append("\n")
        return "".join(parts)

    def print(self) -> None:
        """Write the rendered output to the writer."""
        self.writer.write(self.render())
        self.writer.flush()