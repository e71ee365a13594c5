import pytest

from repofetch.ascii_art import (
    SPACE,
    AsciiArt,
    Token,
    char_token,
    color_token,
    get_min_start_max_end,
    is_blank,
    leading_spaces,
    render,
    space_token,
    tokenize,
    true_length,
    truncate,
)
from repofetch.colors import AnsiColor


def test_get_min_start_max_end():
    lines = [
        "                     xxx",
        "   xxx",
        "         oo",
        "     o",
        "                           xx",
    ]
    assert get_min_start_max_end(lines) == (3, 29)


def test_space_parses():
    assert space_token(" ") == ("", SPACE)
    assert space_token(" hello") == ("hello", SPACE)
    assert space_token("      ") == ("     ", SPACE)
    assert space_token(" {1}{2}") == ("{1}{2}", SPACE)
    assert space_token("x") is None


def test_color_indicator_parses():
    assert color_token("{1}") == ("", Token.of_color(1))
    assert color_token("{9} ") == (" ", Token.of_color(9))
    assert color_token("{12}") is None
    assert color_token("{a}") is None


def test_char_token():
    assert char_token("ab") == ("b", Token.of_char("a"))
    assert char_token("") is None


def test_tokenize_and_str_round_trip():
    line = "a {3}b{x}"
    assert "".join(str(t) for t in tokenize(line)) == line
    assert list(tokenize("{3}")) == [Token.of_color(3)]


def test_leading_spaces_counts_correctly():
    assert leading_spaces("") == 0
    assert leading_spaces("     ") == 5
    assert leading_spaces("     a;lksjf;a") == 5
    assert leading_spaces("  {1} {5}  {9} a") == 6


def test_true_length():
    assert true_length("  ab  ") == 4
    assert true_length("{1}  a{2}") == 3
    assert true_length("    ") == 0


def test_is_blank():
    assert is_blank("   {1} ")
    assert not is_blank("  x")


def test_render():
    colors = []
    assert render("", colors, 0, 0, True) == "\x1b[39;1m\x1b[0m"
    assert render("     ", colors, 0, 0, True) == "\x1b[39;1m\x1b[0m"
    assert render("     ", colors, 0, 5, True) == "\x1b[39;1m     \x1b[0m"
    assert render("     ", colors, 1, 5, True) == "\x1b[39;1m    \x1b[0m"
    assert render("     ", colors, 3, 5, True) == "\x1b[39;1m  \x1b[0m"
    assert render("     ", colors, 0, 4, True) == "\x1b[39;1m    \x1b[0m"
    assert render("     ", colors, 0, 3, True) == "\x1b[39;1m   \x1b[0m"
    assert (
        render("  {1} {5}  {9} a", colors, 4, 10, True)
        == "\x1b[39;1m\x1b[0m\x1b[39;1m\x1b[0m\x1b[39;1m \x1b[0m\x1b[39;1m a\x1b[0m   "
    )
    assert render("     ", colors, 0, 0, False) == "\x1b[39m\x1b[0m"
    assert render("     ", colors, 0, 5, False) == "\x1b[39m     \x1b[0m"


def test_render_with_color():
    assert render("{0}ab", [AnsiColor.RED], 0, 2, False) == (
        "\x1b[39m\x1b[0m\x1b[31mab\x1b[0m"
    )


def test_render_rejects_reversed_range():
    with pytest.raises(ValueError):
        render("abc", [], 3, 1, True)


def test_truncate():
    assert list(truncate("", 0, 0)) == list(tokenize(""))
    assert list(truncate("     ", 0, 0)) == list(tokenize(""))
    assert list(truncate("     ", 0, 5)) == list(tokenize("     "))
    assert list(truncate("     ", 1, 5)) == list(tokenize("    "))
    assert list(truncate("     ", 3, 5)) == list(tokenize("  "))
    assert list(truncate("     ", 0, 4)) == list(tokenize("    "))
    assert list(truncate("     ", 0, 3)) == list(tokenize("   "))
    assert list(truncate("  {1} {5}  {9} a", 4, 10)) == list(tokenize("{1}{5} {9} a"))


def test_truncate_rejects_reversed_range():
    with pytest.raises(ValueError):
        list(truncate("abc", 2, 1))


def test_ascii_art_trims_and_renders():
    art = AsciiArt("\n\n  {0}ab\n {1}c\n  \n", [AnsiColor.RED, AnsiColor.GREEN], False)
    assert art.width() == 3
    assert list(art) == [
        "\x1b[39m \x1b[0m\x1b[31mab\x1b[0m",
        "\x1b[39m\x1b[0m\x1b[32mc\x1b[0m  ",
    ]


def test_ascii_art_empty_width_raises():
    art = AsciiArt("   \n", [], True)
    assert list(art) == []
    with pytest.raises(ValueError):
        art.width()