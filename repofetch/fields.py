"""The simple repository fields shown in the output."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import PurePosixPath
from typing import ClassVar
from urllib.parse import urlsplit

from repofetch.info_field import InfoField, InfoType

_BINARY_UNITS = ("KiB", "MiB", "GiB", "TiB", "PiB", "EiB", "ZiB")


def commit_count_text(num_commits: int, is_shallow: bool) -> str:
    """The commit count, marked when the history is shallow."""
    return f"{num_commits}{' (shallow)' if is_shallow else ''}"


def format_pending(added: int, deleted: int, modified: int) -> str:
    """Summarise pending changes as ``"M+- A+ D-"``, leaving out zero counts."""
    result = ""
    if modified > 0:
        result = f"{modified}+-"
    if added > 0:
        result = f"{result} {added}+"
    if deleted > 0:
        result = f"{result} {deleted}-"
    return result.strip()


def bytes_to_human_readable(size: int) -> str:
    """Format a byte count with the largest fitting binary unit."""
    if size < 1024:
        return f"{size} B"
    unit_size = 1024
    unit = _BINARY_UNITS[0]
    for candidate in _BINARY_UNITS[1:]:
        if size < unit_size * 1024:
            break
        unit_size *= 1024
        unit = candidate
    return f"{size / unit_size:.2f} {unit}"


def _url_path(repo_url: str) -> str:
    if "://" in repo_url:
        return urlsplit(repo_url).path
    colon = repo_url.find(":")
    slash = repo_url.find("/")
    is_drive = colon == 1 and repo_url[0].isalpha()
    if colon > 0 and (slash == -1 or colon < slash) and not is_drive:
        return repo_url[colon + 1:]
    return repo_url


def get_repo_name(repo_url: str) -> str:
    """The repository name from a remote URL, without any ``.git`` suffix."""
    if not repo_url.strip():
        raise ValueError("cannot parse an empty repository URL")
    path = PurePosixPath(_url_path(repo_url).replace("\\", "/"))
    if not path.name:
        raise ValueError(f"repository URL has no path name: {repo_url!r}")
    return path.stem


@dataclass
class CommitsInfo(InfoField):
    TYPE: ClassVar[InfoType] = InfoType.COMMITS
    number_of_commits: str

    def value(self) -> str:
        return self.number_of_commits

    def title(self) -> str:
        return "Commits"


@dataclass
class ContributorsInfo(InfoField):
    TYPE: ClassVar[InfoType] = InfoType.CONTRIBUTORS
    number_of_contributors: int
    number_of_authors_to_display: int

    def value(self) -> str:
        if self.number_of_contributors > self.number_of_authors_to_display:
            return str(self.number_of_contributors)
        return ""

    def title(self) -> str:
        return "Contributors"


@dataclass
class CreatedInfo(InfoField):
    TYPE: ClassVar[InfoType] = InfoType.CREATED
    creation_date: str

    def value(self) -> str:
        return self.creation_date

    def title(self) -> str:
        return "Created"


@dataclass
class LastChangeInfo(InfoField):
    TYPE: ClassVar[InfoType] = InfoType.LAST_CHANGE
    last_change: str

    def value(self) -> str:
        return self.last_change

    def title(self) -> str:
        return "Last change"


@dataclass
class LocInfo(InfoField):
    TYPE: ClassVar[InfoType] = InfoType.LINES_OF_CODE
    lines_of_code: int

    def value(self) -> str:
        return str(self.lines_of_code)

    def title(self) -> str:
        return "Lines of code"


@dataclass
class SizeInfo(InfoField):
    TYPE: ClassVar[InfoType] = InfoType.SIZE
    repo_size: str
    file_count: int

    def __str__(self) -> str:
        if self.file_count == 0:
            return self.repo_size
        if self.file_count == 1:
            return f"{self.repo_size} (1 file)"
        return f"{self.repo_size} ({self.file_count} files)"

    def value(self) -> str:
        return str(self)

    def title(self) -> str:
        return "Size"


@dataclass
class UrlInfo(InfoField):
    TYPE: ClassVar[InfoType] = InfoType.REPO
    repo_url: str

    def value(self) -> str:
        return self.repo_url

    def title(self) -> str:
        return "Repo"


@dataclass
class VersionInfo(InfoField):
    TYPE: ClassVar[InfoType] = InfoType.VERSION
    version: str

    def value(self) -> str:
        return self.version

    def title(self) -> str:
        return "Version"


@dataclass
class PendingInfo(InfoField):
    TYPE: ClassVar[InfoType] = InfoType.PENDING
    pending_changes: str

    def value(self) -> str:
        return self.pending_changes

    def title(self) -> str:
        return "Pending"


@dataclass
class HeadRefs:
    """The abbreviated HEAD commit and the non-tag refs pointing at it."""

    short_commit_id: str
    refs: list[str] = field(default_factory=list)

    def __str__(self) -> str:
        if self.refs:
            return f"{self.short_commit_id} ({', '.join(self.refs)})"
        return self.short_commit_id

    def to_dict(self) -> dict[str, object]:
        return {"short_commit_id": self.short_commit_id, "refs": list(self.refs)}


@dataclass
class HeadInfo(InfoField):
    TYPE: ClassVar[InfoType] = InfoType.HEAD
    head_refs: HeadRefs

    def value(self) -> str:
        return str(self.head_refs)

    def title(self) -> str:
        return "HEAD"


@dataclass
class ProjectInfo(InfoField):
    TYPE: ClassVar[InfoType] = InfoType.PROJECT
    repo_name: str
    number_of_branches: int
    number_of_tags: int

    def __str__(self) -> str:
        branches = {0: "", 1: "1 branch"}.get(
            self.number_of_branches, f"{self.number_of_branches} branches"
        )
        tags = {0: "", 1: "1 tag"}.get(
            self.number_of_tags, f"{self.number_of_tags} tags"
        )
        if not tags and not branches:
            return self.repo_name
        if not branches or not tags:
            return f"{self.repo_name} ({tags}{branches})"
        return f"{self.repo_name} ({branches}, {tags})"

    def value(self) -> str:
        return str(self)

    def title(self) -> str:
        return "Project"

    def to_dict(self) -> dict[str, object]:
        return {
            "repoName": self.repo_name,
            "numberOfBranches": self.number_of_branches,
            "numberOfTags": self.number_of_tags,
        }