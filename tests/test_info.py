import subprocess

import pytest

from repofetch.author import Author, AuthorsInfo
from repofetch.colors import AnsiColor, Style
from repofetch.config import parse_config
from repofetch.fields import (
    CommitsInfo,
    ContributorsInfo,
    CreatedInfo,
    HeadInfo,
    HeadRefs,
    LastChangeInfo,
    PendingInfo,
    ProjectInfo,
    SizeInfo,
    UrlInfo,
    VersionInfo,
)
from repofetch.info import Info, get_style, is_truecolor_terminal
from repofetch.info_field import InfoType
from repofetch.languages import LanguagesInfo
from repofetch.text_colors import TextColors
from repofetch.title import Title

PROJECT_LINE = (
    "\x1b[39;1mProject\x1b[0m\x1b[39;1m:\x1b[0m \x1b[39mrepofetch\x1b[39m\n"
)
PALETTE_START = "\x1b[40m   \x1b[49m"


def make_info(**overrides):
    values = dict(
        title=Title("", ""),
        project=ProjectInfo("repofetch", 0, 0),
        head=HeadInfo(HeadRefs("abc1234", ["main"])),
        pending=PendingInfo(""),
        version=VersionInfo(""),
        created=CreatedInfo("2 years ago"),
        languages=LanguagesInfo(),
        authors=AuthorsInfo([], AnsiColor.DEFAULT),
        last_change=LastChangeInfo("now"),
        contributors=ContributorsInfo(1, 3),
        repo=UrlInfo(""),
        commits=CommitsInfo("5"),
        size=SizeInfo("0 B", 0),
        text_colors=TextColors.from_numbers([], AnsiColor.DEFAULT),
    )
    values.update(overrides)
    return Info(**values)


def _git(cwd, *args):
    subprocess.run(["git", "-C", str(cwd), *args], check=True, capture_output=True)


@pytest.fixture
def sample_repo(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    for name in ("GIT_COMMITTER_NAME", "GIT_AUTHOR_NAME", "GIT_DIR", "GIT_WORK_TREE"):
        monkeypatch.delenv(name, raising=False)
    repo = tmp_path / "work"
    repo.mkdir()
    _git(repo, "init", "-q")
    _git(repo, "symbolic-ref", "HEAD", "refs/heads/main")
    _git(repo, "config", "user.name", "Jane Tester")
    _git(repo, "config", "user.email", "jane@example.com")
    _git(repo, "config", "commit.gpgsign", "false")
    _git(repo, "config", "tag.gpgsign", "false")
    _git(repo, "remote", "add", "origin", "https://example.com/team/sample.git")
    (repo / "a.txt").write_text("first\n")
    _git(repo, "add", "a.txt")
    _git(repo, "commit", "-q", "-m", "first")
    (repo / "b.txt").write_text("second\n")
    _git(repo, "add", "b.txt")
    _git(repo, "commit", "-q", "-m", "second")
    _git(repo, "tag", "v1.0")
    return repo


def test_get_style():
    assert get_style(True, AnsiColor.CYAN) == Style(AnsiColor.CYAN, bold=True)


def test_get_style_no_bold():
    assert get_style(False, AnsiColor.CYAN) == Style(AnsiColor.CYAN)


def test_style_subtitle(sample_repo):
    config = parse_config([str(sample_repo), "--text-colors", "0", "0", "0", "3", "4"])
    info = Info.collect(config)
    assert info.style_subtitle("test") == (
        "\x1b[33;1mtest\x1b[0m\x1b[34;1m:\x1b[0m"
    )


def test_style_subtitle_without_bold():
    info = make_info(no_bold=True)
    assert info.style_subtitle("HEAD") == "\x1b[39mHEAD\x1b[0m\x1b[39m:\x1b[0m"


@pytest.mark.parametrize(
    "value, expected",
    [("truecolor", True), ("24bit", True), ("256color", False), ("", False)],
)
def test_is_truecolor_terminal(monkeypatch, value, expected):
    monkeypatch.setenv("COLORTERM", value)
    assert is_truecolor_terminal() is expected


def test_is_truecolor_terminal_unset(monkeypatch):
    monkeypatch.delenv("COLORTERM", raising=False)
    assert is_truecolor_terminal() is False


def test_display_contains_styled_project_line():
    assert PROJECT_LINE in str(make_info())


def test_display_skips_disabled_field():
    text = str(make_info(disabled_fields=[InfoType.PROJECT]))
    assert "Project" not in text
    assert "HEAD" in text


def test_display_skips_empty_fields():
    text = str(make_info())
    assert "Pending" not in text
    assert "Contributors" not in text
    assert "Version" not in text


def test_display_palette_toggle():
    assert PALETTE_START in str(make_info())
    assert PALETTE_START not in str(make_info(no_color_palette=True))


def test_display_title_first_unless_disabled():
    title = Title("Jane Tester", "git version 2.40.0", is_bold=False)
    assert str(make_info(title=title)).startswith(str(title))
    disabled = str(make_info(title=title, disabled_fields=[InfoType.TITLE]))
    assert "Jane Tester" not in disabled


def test_display_field_order():
    text = str(make_info())
    assert text.index("Project") < text.index("HEAD") < text.index("Commits")


def test_to_dict():
    author = Author.from_counts("Jane Tester", "jane@example.com", 3, 4, False)
    data = make_info(authors=AuthorsInfo([author], AnsiColor.DEFAULT)).to_dict()
    assert data["project"] == {
        "repoName": "repofetch",
        "numberOfBranches": 0,
        "numberOfTags": 0,
    }
    assert data["head"] == {"short_commit_id": "abc1234", "refs": ["main"]}
    assert data["numberOfCommits"] == "5"
    assert data["contributors"] == 1
    assert data["authors"][0]["contribution"] == 75
    assert data["languages"] == []


def test_collect_reads_repository(sample_repo):
    info = Info.collect(parse_config([str(sample_repo)]))
    assert info.project.repo_name == "sample"
    assert info.commits.value() == "2"
    assert info.repo.repo_url == "https://example.com/team/sample.git"
    assert info.title.git_username == "Jane Tester"
    assert info.authors.authors[0].name == "Jane Tester"
    assert info.authors.authors[0].nbr_of_commits == 2
    assert info.version.version == "v1.0"
    assert "main" in info.head.head_refs.refs
    assert info.size.file_count == 2


def test_collect_iso_time(sample_repo):
    info = Info.collect(parse_config([str(sample_repo), "--iso-time"]))
    assert info.created.creation_date.endswith("Z")
    assert "T" in info.last_change.last_change


def test_collect_outside_repository_fails(tmp_path, monkeypatch):
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path))
    empty = tmp_path / "empty"
    empty.mkdir()
    with pytest.raises(RuntimeError):
        Info.collect(parse_config([str(empty)]))