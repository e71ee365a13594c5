import subprocess
from unittest import mock

from repofetch.colors import AnsiColor
from repofetch.title import Title, get_git_version


def _title(username="onefetch-committer-name", version="git version 2.37.2", bold=True):
    return Title(
        git_username=username,
        git_version=version,
        title_color=AnsiColor.RED,
        tilde_color=AnsiColor.WHITE,
        underline_color=AnsiColor.BLUE,
        is_bold=bold,
    )


def test_title_format():
    title = _title()
    text = str(title)
    assert "onefetch-committer-name" in text
    assert "~" in text
    assert "git version 2.37.2" in text

    title.git_version = ""
    text = str(title)
    assert "onefetch-committer-name" in text
    assert "~" not in text
    assert "git version 2.37.2" not in text

    title.git_username = ""
    assert str(title) == ""


def test_title_exact_rendering_with_both_parts():
    title = _title(username="ab", version="cd")
    assert str(title) == (
        "\x1b[31;1mab\x1b[0m \x1b[37;1m~\x1b[0m \x1b[31;1mcd\x1b[0m\n"
        "\x1b[34m-------\x1b[39m\n"
    )


def test_title_exact_rendering_username_only_no_bold():
    title = _title(username="abc", version="", bold=False)
    assert str(title) == "\x1b[31mabc\x1b[0m\n\x1b[34m---\x1b[39m\n"


def test_title_version_only():
    title = _title(username="", version="v1")
    text = str(title)
    assert "~" not in text
    assert text.endswith("\x1b[34m--\x1b[39m\n")


def test_title_to_dict():
    title = _title(username="name", version="git version 2.0")
    assert title.to_dict() == {"git_username": "name", "git_version": "git version 2.0"}


def test_get_git_version_strips_newlines():
    completed = subprocess.CompletedProcess(
        args=["git", "--version"], returncode=0, stdout=b"git version 2.37.2\n", stderr=b""
    )
    with mock.patch("repofetch.title.subprocess.run", return_value=completed):
        assert get_git_version() == "git version 2.37.2"


def test_get_git_version_empty_when_git_missing():
    with mock.patch("repofetch.title.subprocess.run", side_effect=FileNotFoundError("git")):
        assert get_git_version() == ""