"""Reading repository facts by running git."""

from __future__ import annotations

import os
import re
import subprocess
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Pattern

from repofetch.author import Author
from repofetch.fields import HeadRefs, format_pending

_SIZE_LINE = re.compile(r"^\s+size: (\d+)", re.MULTILINE)
_SHORTEN_PREFIXES = ("refs/heads/", "refs/remotes/", "refs/tags/", "refs/notes/")
_FIELD_SEP = "\x1f"


class GitError(RuntimeError):
    """Git could not be run or reported a failure."""


def _run_git(cwd: Path | str, *args: str) -> str:
    try:
        completed = subprocess.run(
            ["git", "-C", str(cwd), *args], capture_output=True, check=False
        )
    except OSError as exc:
        raise GitError(f"could not run git: {exc}") from exc
    if completed.returncode != 0:
        message = completed.stderr.decode("utf-8", "replace").strip()
        raise GitError(message or f"git {' '.join(args)} failed")
    return completed.stdout.decode("utf-8", "replace")


def _shorten(ref_name: str) -> str:
    for prefix in _SHORTEN_PREFIXES:
        if ref_name.startswith(prefix):
            return ref_name[len(prefix):]
    return ref_name


def is_bot(author_name: str, bot_regex: Pattern[str] | None) -> bool:
    """True if a bot pattern is given and matches the author name."""
    return bot_regex is not None and bot_regex.search(author_name) is not None


@dataclass(frozen=True)
class Repository:
    """A non-bare git repository, addressed by its working tree."""

    work_dir: Path
    git_dir: Path

    @classmethod
    def discover(cls, path: Path | str = ".") -> Repository:
        """Find the repository containing ``path``."""
        out = _run_git(path, "rev-parse", "--absolute-git-dir", "--is-bare-repository")
        git_dir, is_bare = (out.splitlines() + ["", ""])[:2]
        if is_bare.strip() == "true":
            raise GitError("please run inside of a non-bare git repository")
        top = _run_git(path, "rev-parse", "--show-toplevel").strip()
        if not top:
            raise GitError("please run inside of a non-bare git repository")
        return cls(Path(top), Path(git_dir.strip()))

    def git(self, *args: str) -> str:
        """Run a git command in the working tree and return its output."""
        return _run_git(self.work_dir, *args)

    def _config_value(self, key: str) -> str | None:
        try:
            value = self.git("config", "--get", key).strip()
        except GitError:
            return None
        return value or None

    def _refs(self, *patterns: str, fmt: str = "%(refname)") -> list[str]:
        out = self.git("for-each-ref", f"--format={fmt}", *patterns)
        return [line for line in out.splitlines() if line]

    def committer_name(self) -> str:
        """The configured committer name, or an empty string."""
        env_name = os.environ.get("GIT_COMMITTER_NAME")
        if env_name:
            return env_name
        for key in ("committer.name", "user.name"):
            value = self._config_value(key)
            if value:
                return value
        return ""

    def remote_url(self) -> str:
        """The URL of ``origin``, else of the last remote with a URL, else empty."""
        try:
            out = self.git("config", "-z", "--get-regexp", r"^remote\..*\.url$")
        except GitError:
            return ""
        url = ""
        for record in filter(None, out.split("\0")):
            key, _, value = record.partition("\n")
            url = value
            if key[len("remote."):-len(".url")] == "origin":
                break
        return url

    def head_refs(self) -> HeadRefs:
        """The short HEAD id and the non-tag refs pointing directly at it."""
        try:
            head = self.git("rev-parse", "--verify", "HEAD").strip()
        except GitError as exc:
            raise GitError("Could not read HEAD") from exc
        short = self.git("rev-parse", "--short", head).strip()
        refs = []
        for line in self._refs(fmt="%(refname)%00%(objectname)%00%(symref)"):
            name, oid, symref = line.split("\0")
            if not symref and oid == head and not name.startswith("refs/tags/"):
                refs.append(_shorten(name))
        return HeadRefs(short, refs)

    def pending_changes(self) -> str:
        """Summary of working-tree changes relative to the index."""
        out = self.git("status", "--porcelain=v1", "-z", "--untracked-files=all")
        added = deleted = modified = 0
        records = iter(out.split("\0"))
        for record in records:
            if len(record) < 3:
                continue
            index_status, worktree_status = record[0], record[1]
            if index_status in "RC":
                next(records, None)
            if worktree_status == " ":
                continue
            if worktree_status == "?":
                added += 1
            elif worktree_status == "D":
                deleted += 1
            else:
                modified += 1
        return format_pending(added, deleted, modified)

    def version(self) -> str:
        """The tag whose commit has the most recent commit time, or empty."""
        fmt = (
            "%(refname)%00%(objecttype)%00%(committerdate:unix)"
            "%00%(*objecttype)%00%(*committerdate:unix)"
        )
        version_name = ""
        most_recent = 0
        for line in self._refs("refs/tags", fmt=fmt):
            name, otype, cdate, peeled_type, peeled_date = line.split("\0")
            if otype == "commit":
                date = cdate
            elif peeled_type == "commit":
                date = peeled_date
            else:
                continue
            if date and int(date) > most_recent:
                most_recent = int(date)
                version_name = _shorten(name)
        return version_name

    def number_of_branches(self) -> int:
        """Remote branches, not counting the remote HEAD pointer."""
        return max(len(self._refs("refs/remotes")) - 1, 0)

    def number_of_tags(self) -> int:
        return len(self._refs("refs/tags"))

    def index_size(self) -> tuple[int, int]:
        """Total size in bytes and number of index entries; zeros if unreadable."""
        try:
            out = self.git("ls-files", "--debug")
        except GitError:
            return 0, 0
        sizes = [int(match.group(1)) for match in _SIZE_LINE.finditer(out)]
        return sum(sizes), len(sizes)


@dataclass
class Commits:
    """Commit statistics gathered from the history of HEAD."""

    authors: list[Author] = field(default_factory=list)
    total_num_authors: int = 0
    num_commits: int = 0
    is_shallow: bool = False
    time_of_most_recent_commit: int = 0
    time_of_first_commit: int = 0

    @classmethod
    def collect(
        cls,
        repo: Repository,
        no_merges: bool,
        bot_regex: Pattern[str] | None,
        number_of_authors_to_display: int,
        show_email: bool,
    ) -> Commits:
        """Walk the history of HEAD, counting commits per mailmapped author."""
        out = repo.git("log", "-z", f"--format=%P{_FIELD_SEP}%aN{_FIELD_SEP}%aE{_FIELD_SEP}%ct", "HEAD")
        records = [record for record in out.split("\0") if record]

        counts: Counter[tuple[str, str]] = Counter()
        most_recent: int | None = None
        first: int | None = None
        for position, record in enumerate(records, 1):
            parents, name, email, commit_time = record.lstrip("\n").split(_FIELD_SEP)
            if no_merges and len(parents.split()) > 1:
                continue
            if is_bot(name, bot_regex):
                continue
            counts[(name, email)] += 1
            when = int(commit_time)
            if most_recent is None:
                most_recent = when
            if position == len(records):
                first = when

        num_commits = sum(counts.values())
        ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0][0], item[0][1]))
        authors = [
            Author.from_counts(name, email, count, num_commits, show_email)
            for (name, email), count in ranked[:number_of_authors_to_display]
        ]
        if first is None or most_recent is None:
            first = most_recent = 0
        is_shallow = repo.git("rev-parse", "--is-shallow-repository").strip() == "true"
        return cls(
            authors=authors,
            total_num_authors=len(ranked),
            num_commits=num_commits,
            is_shallow=is_shallow,
            time_of_most_recent_commit=most_recent,
            time_of_first_commit=first,
        )