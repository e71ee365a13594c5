"""The title line: git user name and git version, underlined."""

from __future__ import annotations

import subprocess
from dataclasses import dataclass

from repofetch.colors import AnsiColor, Color, Style, fg


def get_git_version() -> str:
    """The output of ``git --version`` without newlines, or empty if git cannot run."""
    try:
        completed = subprocess.run(["git", "--version"], capture_output=True, check=False)
    except OSError:
        return ""
    return completed.stdout.decode("utf-8", "replace").replace("\n", "")


def _byte_length(text: str) -> int:
    return len(text.encode("utf-8"))


@dataclass
class Title:
    """The heading shown above the information lines."""

    git_username: str
    git_version: str
    title_color: Color = AnsiColor.DEFAULT
    tilde_color: Color = AnsiColor.DEFAULT
    underline_color: Color = AnsiColor.DEFAULT
    is_bold: bool = True

    def __str__(self) -> str:
        if not self.git_username and not self.git_version:
            return ""
        info_length = _byte_length(self.git_username) + _byte_length(self.git_version)
        title_style = Style(self.title_color, self.is_bold)
        username = title_style.paint(self.git_username)
        version = title_style.paint(self.git_version)

        if self.git_username and self.git_version:
            tilde = Style(self.tilde_color, self.is_bold).paint("~")
            heading = f"{username} {tilde} {version}"
            heading_length = info_length + 3
        else:
            heading = f"{username}{version}"
            heading_length = info_length

        separator = fg(self.underline_color, "-" * heading_length)
        return f"{heading}\n{separator}\n"

    def to_dict(self) -> dict[str, str]:
        return {"git_username": self.git_username, "git_version": self.git_version}