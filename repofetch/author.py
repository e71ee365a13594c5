"""Commit authors and the field that lists the most active of them."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import ClassVar

from repofetch.colors import AnsiColor, Color, fg
from repofetch.info_field import InfoField, InfoType


def _round_half_away(value: float) -> int:
    return int(math.floor(abs(value) + 0.5)) * (1 if value >= 0 else -1)


@dataclass(frozen=True)
class Author:
    """An author with their commit count and share of all commits, in percent."""

    name: str
    email: str
    nbr_of_commits: int
    contribution: int
    show_email: bool = False

    @classmethod
    def from_counts(
        cls,
        name: str,
        email: str,
        nbr_of_commits: int,
        total_nbr_of_commits: int,
        show_email: bool,
    ) -> Author:
        """Build an author, working out their rounded contribution percentage."""
        if total_nbr_of_commits > 0:
            contribution = _round_half_away(nbr_of_commits * 100 / total_nbr_of_commits)
        else:
            contribution = 0
        return cls(name, email, nbr_of_commits, max(contribution, 0), show_email)

    def __str__(self) -> str:
        if self.show_email:
            return f"{self.contribution}% {self.name} <{self.email}> {self.nbr_of_commits}"
        return f"{self.contribution}% {self.name} {self.nbr_of_commits}"

    def to_dict(self) -> dict[str, object]:
        return {
            "name": self.name,
            "email": self.email,
            "nbr_of_commits": self.nbr_of_commits,
            "contribution": self.contribution,
        }


@dataclass
class AuthorsInfo(InfoField):
    """The top authors, one per line, aligned under the first."""

    TYPE: ClassVar[InfoType] = InfoType.AUTHORS
    authors: list[Author] = field(default_factory=list)
    info_color: Color = AnsiColor.DEFAULT

    def __str__(self) -> str:
        pad = " " * (len(self.title()) + 2)
        return f"\n{pad}".join(fg(self.info_color, str(author)) for author in self.authors)

    def value(self) -> str:
        return str(self)

    def title(self) -> str:
        return "Authors" if len(self.authors) > 1 else "Author"