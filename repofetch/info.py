"""All repository information gathered together and laid out for display."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any

from repofetch.author import AuthorsInfo
from repofetch.colors import AnsiColor, Color, Style, fg, get_ascii_colors, on
from repofetch.config import Config, When
from repofetch.fields import (
    CommitsInfo,
    ContributorsInfo,
    CreatedInfo,
    HeadInfo,
    LastChangeInfo,
    LocInfo,
    PendingInfo,
    ProjectInfo,
    SizeInfo,
    UrlInfo,
    VersionInfo,
    bytes_to_human_readable,
    commit_count_text,
    get_repo_name,
)
from repofetch.info_field import InfoField, InfoType
from repofetch.languages import LanguagesInfo
from repofetch.repository import Commits, Repository
from repofetch.text_colors import TextColors
from repofetch.timefmt import format_time
from repofetch.title import Title, get_git_version

_PALETTE = (
    AnsiColor.BLACK,
    AnsiColor.RED,
    AnsiColor.GREEN,
    AnsiColor.YELLOW,
    AnsiColor.BLUE,
    AnsiColor.MAGENTA,
    AnsiColor.CYAN,
    AnsiColor.WHITE,
)


def get_style(is_bold: bool, color: Color) -> Style:
    """A style of the given colour, bold if requested."""
    return Style(color, is_bold)


def is_truecolor_terminal() -> bool:
    """True if the terminal announces 24-bit colour support."""
    return os.environ.get("COLORTERM", "") in ("truecolor", "24bit")


def _true_color_enabled(when: When) -> bool:
    if when is When.ALWAYS:
        return True
    if when is When.NEVER:
        return False
    return is_truecolor_terminal()


@dataclass
class Info:
    """The title, the information fields and the display options."""

    title: Title
    project: ProjectInfo
    head: HeadInfo
    pending: PendingInfo
    version: VersionInfo
    created: CreatedInfo
    languages: LanguagesInfo
    authors: AuthorsInfo
    last_change: LastChangeInfo
    contributors: ContributorsInfo
    repo: UrlInfo
    commits: CommitsInfo
    size: SizeInfo
    text_colors: TextColors
    disabled_fields: list[InfoType] = field(default_factory=list)
    no_color_palette: bool = False
    no_bold: bool = False
    lines_of_code: LocInfo | None = None
    dominant_language: str | None = None
    ascii_colors: list[Color] = field(default_factory=lambda: [AnsiColor.DEFAULT])

    @classmethod
    def collect(cls, config: Config) -> Info:
        """Gather the information about the repository at ``config.input``."""
        repo = Repository.discover(config.input)
        true_color = _true_color_enabled(config.true_color)

        ascii_colors = get_ascii_colors([], config.ascii_colors) or [AnsiColor.DEFAULT]
        text_colors = TextColors.from_numbers(config.text_colors, ascii_colors[0])

        title = Title(
            git_username=repo.committer_name(),
            git_version=get_git_version(),
            title_color=text_colors.title,
            tilde_color=text_colors.tilde,
            underline_color=text_colors.underline,
            is_bold=not config.no_bold,
        )
        pending = PendingInfo(repo.pending_changes())
        repo_url = UrlInfo(repo.remote_url())
        project = ProjectInfo(
            get_repo_name(repo_url.repo_url),
            repo.number_of_branches(),
            repo.number_of_tags(),
        )
        head = HeadInfo(repo.head_refs())
        version = VersionInfo(repo.version())
        total_size, file_count = repo.index_size()
        size = SizeInfo(bytes_to_human_readable(total_size), file_count)

        commits = Commits.collect(
            repo,
            config.no_merges,
            config.no_bots,
            config.number_of_authors,
            config.email,
        )

        return cls(
            title=title,
            project=project,
            head=head,
            pending=pending,
            version=version,
            created=CreatedInfo(format_time(commits.time_of_first_commit, config.iso_time)),
            languages=LanguagesInfo([], true_color, text_colors.info),
            authors=AuthorsInfo(list(commits.authors), text_colors.info),
            last_change=LastChangeInfo(
                format_time(commits.time_of_most_recent_commit, config.iso_time)
            ),
            contributors=ContributorsInfo(
                commits.total_num_authors, config.number_of_authors
            ),
            repo=repo_url,
            commits=CommitsInfo(commit_count_text(commits.num_commits, commits.is_shallow)),
            size=size,
            text_colors=text_colors,
            disabled_fields=list(config.disabled_fields),
            no_color_palette=config.no_color_palette,
            no_bold=config.no_bold,
            ascii_colors=ascii_colors,
        )

    def _fields(self) -> list[InfoField]:
        ordered = (
            self.project,
            self.head,
            self.pending,
            self.version,
            self.created,
            self.languages,
            self.authors,
            self.last_change,
            self.contributors,
            self.repo,
            self.commits,
            self.lines_of_code,
            self.size,
        )
        return [info for info in ordered if info is not None]

    def style_subtitle(self, subtitle: str) -> str:
        """The subtitle and its colon, each in its own style."""
        subtitle_style = get_style(not self.no_bold, self.text_colors.subtitle)
        colon_style = get_style(not self.no_bold, self.text_colors.colon)
        return f"{subtitle_style.paint(subtitle)}{colon_style.paint(':')}"

    def _info_line(self, subtitle: str, value: str) -> str:
        return f"{self.style_subtitle(subtitle)} {fg(self.text_colors.info, value)}\n"

    def __str__(self) -> str:
        parts: list[str] = []
        if InfoType.TITLE not in self.disabled_fields:
            parts.append(str(self.title))
        for info in self._fields():
            value = info.get(self.disabled_fields)
            if value is not None:
                parts.append(self._info_line(info.title(), value))
        if not self.no_color_palette:
            palette = "".join(on(color, "   ") for color in _PALETTE)
            parts.append(f"\n{palette}\n")
        return "".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """The information as plain data for machine-readable output."""
        data: dict[str, Any] = {
            "gitUsername": self.title.git_username,
            "gitVersion": self.title.git_version,
            "project": self.project.to_dict(),
            "head": self.head.head_refs.to_dict(),
            "version": self.version.version,
            "created": self.created.creation_date,
            "languages": self.languages.to_list(),
            "authors": [author.to_dict() for author in self.authors.authors],
            "lastChange": self.last_change.last_change,
            "contributors": self.contributors.number_of_contributors,
            "repoUrl": self.repo.repo_url,
            "numberOfCommits": self.commits.number_of_commits,
        }
        if self.lines_of_code is not None:
            data["linesOfCode"] = self.lines_of_code.lines_of_code
        data["repoSize"] = self.size.repo_size
        return data