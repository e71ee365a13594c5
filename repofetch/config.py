"""Command-line options and their parsing."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import NoReturn, Pattern

from repofetch.info_field import InfoType

PROG = "repofetch"
COLOR_RESOLUTIONS = (16, 32, 64, 128, 256)
DEFAULT_COLOR_RESOLUTION = 16
DEFAULT_NUMBER_OF_AUTHORS = 3
DEFAULT_BOT_PATTERN = r"(b|B)ot"
LANGUAGE_TYPES = ("programming", "markup", "prose", "data")
DEFAULT_LANGUAGE_TYPES = ("programming", "markup")
SHELLS = ("bash", "elvish", "fish", "powershell", "zsh")
IMAGE_PROTOCOLS = ("kitty", "sixel", "iterm")
MAX_TEXT_COLORS = 6


class When(Enum):
    """When to enable a feature."""

    AUTO = "auto"
    NEVER = "never"
    ALWAYS = "always"


class SerializationFormat(Enum):
    """Machine-readable output formats."""

    JSON = "json"
    YAML = "yaml"


class ConfigError(ValueError):
    """The command line could not be turned into a configuration."""


@dataclass
class Config:
    """Every option the program accepts, with its default."""

    input: Path = Path(".")
    ascii_input: str | None = None
    ascii_language: str | None = None
    ascii_colors: list[int] = field(default_factory=list)
    disabled_fields: list[InfoType] = field(default_factory=list)
    image: Path | None = None
    image_protocol: str | None = None
    color_resolution: int = DEFAULT_COLOR_RESOLUTION
    no_bold: bool = False
    no_merges: bool = False
    no_color_palette: bool = False
    number_of_authors: int = DEFAULT_NUMBER_OF_AUTHORS
    exclude: list[Path] = field(default_factory=list)
    no_bots: Pattern[str] | None = None
    languages: bool = False
    package_managers: bool = False
    output: SerializationFormat | None = None
    true_color: When = When.AUTO
    show_logo: When = When.ALWAYS
    text_colors: list[int] = field(default_factory=list)
    iso_time: bool = False
    email: bool = False
    include_hidden: bool = False
    type: list[str] = field(default_factory=lambda: list(DEFAULT_LANGUAGE_TYPES))
    completion: str | None = None


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        raise ConfigError(message)


def _color_number(text: str) -> int:
    try:
        number = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid digit found in {text!r}") from None
    if not 0 <= number < 16:
        raise argparse.ArgumentTypeError(f"{number} is not in 0..16")
    return number


def _non_negative_int(text: str) -> int:
    try:
        number = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number {text!r}") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"{number} must not be negative")
    return number


def _regex(text: str) -> Pattern[str]:
    try:
        return re.compile(text)
    except re.error as exc:
        raise argparse.ArgumentTypeError(f"invalid regex {text!r}: {exc}") from None


def _package_version() -> str:
    try:
        return version(PROG)
    except PackageNotFoundError:
        return "unknown"


def build_parser() -> argparse.ArgumentParser:
    """The argument parser for the command line."""
    parser = _Parser(prog=PROG, description="Show information about a git repository.")
    parser.add_argument("--version", "-V", action="version", version=f"%(prog)s {_package_version()}")
    parser.add_argument(
        "input", nargs="?", default=".", type=Path,
        help="run as if started in INPUT instead of the current working directory",
    )
    parser.add_argument("--ascii-input", metavar="STRING", help="a non-empty STRING replacing the ASCII logo")
    parser.add_argument(
        "--ascii-language", "-a", metavar="LANGUAGE", type=str.lower,
        help="which LANGUAGE's ascii art to print",
    )
    parser.add_argument(
        "--ascii-colors", "-c", nargs="+", metavar="X", type=_color_number, default=[],
        help="colors (X X X...) to print the ascii art",
    )
    parser.add_argument(
        "--disabled-fields", "-d", nargs="+", metavar="FIELD", type=InfoType, default=[],
        help="disable FIELD(s) from appearing in the output",
    )
    parser.add_argument("--image", "-i", type=Path, help="path to the IMAGE file")
    parser.add_argument("--image-protocol", choices=IMAGE_PROTOCOLS, help="which image protocol to use")
    parser.add_argument(
        "--color-resolution", metavar="VALUE", type=int, choices=COLOR_RESOLUTIONS,
        help="VALUE of color resolution to use with SIXEL backend",
    )
    parser.add_argument("--no-bold", action="store_true", help="turn off bold formatting")
    parser.add_argument("--no-merges", action="store_true", help="ignore merge commits")
    parser.add_argument("--no-color-palette", action="store_true", help="hide the color palette")
    parser.add_argument(
        "--number-of-authors", "-n", metavar="NUM", type=_non_negative_int,
        default=DEFAULT_NUMBER_OF_AUTHORS, help="NUM of authors to be shown",
    )
    parser.add_argument(
        "--exclude", "-e", nargs="+", type=Path, default=[],
        help="ignore all files and directories matching EXCLUDE",
    )
    parser.add_argument(
        "--no-bots", nargs="?", metavar="REGEX", type=_regex,
        const=re.compile(DEFAULT_BOT_PATTERN),
        help="exclude [bot] commits; REGEX overrides the default pattern",
    )
    parser.add_argument("--languages", "-l", action="store_true", help="print supported languages")
    parser.add_argument("--package-managers", "-p", action="store_true", help="print supported package managers")
    parser.add_argument(
        "--output", "-o", metavar="FORMAT", type=SerializationFormat,
        help="output in a specific format (json, yaml)",
    )
    parser.add_argument(
        "--true-color", metavar="WHEN", type=When, default=When.AUTO,
        help="when to use true color (auto, never, always)",
    )
    parser.add_argument(
        "--show-logo", metavar="WHEN", type=When, default=When.ALWAYS,
        help="when to show the logo (auto hides it in terminals narrower than 95)",
    )
    parser.add_argument(
        "--text-colors", "-t", nargs="+", metavar="X", type=_color_number, default=[],
        help="text colors: title, ~, underline, subtitle, colon and info",
    )
    parser.add_argument("--iso-time", "-z", action="store_true", help="use ISO 8601 formatted timestamps")
    parser.add_argument("--email", "-E", action="store_true", help="show the email address of each author")
    parser.add_argument("--include-hidden", action="store_true", help="count hidden files and directories")
    parser.add_argument(
        "--type", "-T", nargs="+", choices=LANGUAGE_TYPES, dest="type",
        help="filter output by language type",
    )
    parser.add_argument(
        "--generate", dest="completion", metavar="SHELL", choices=SHELLS,
        help="output the completion file for the given SHELL",
    )
    return parser


def parse_config(argv: Sequence[str] | None = None) -> Config:
    """Parse command-line arguments into a configuration."""
    args = build_parser().parse_args(list(sys.argv[1:] if argv is None else argv))

    if args.image is None:
        if args.image_protocol is not None:
            raise ConfigError("--image-protocol requires --image")
        if args.color_resolution is not None:
            raise ConfigError("--color-resolution requires --image")
    if len(args.text_colors) > MAX_TEXT_COLORS:
        raise ConfigError(f"--text-colors takes at most {MAX_TEXT_COLORS} values")
    if args.ascii_input is not None and not args.ascii_input:
        raise ConfigError("--ascii-input takes a non-empty STRING")

    return Config(
        input=args.input,
        ascii_input=args.ascii_input,
        ascii_language=args.ascii_language,
        ascii_colors=list(args.ascii_colors),
        disabled_fields=list(args.disabled_fields),
        image=args.image,
        image_protocol=args.image_protocol,
        color_resolution=(
            DEFAULT_COLOR_RESOLUTION if args.color_resolution is None else args.color_resolution
        ),
        no_bold=args.no_bold,
        no_merges=args.no_merges,
        no_color_palette=args.no_color_palette,
        number_of_authors=args.number_of_authors,
        exclude=list(args.exclude),
        no_bots=args.no_bots,
        languages=args.languages,
        package_managers=args.package_managers,
        output=args.output,
        true_color=args.true_color,
        show_logo=args.show_logo,
        text_colors=list(args.text_colors),
        iso_time=args.iso_time,
        email=args.email,
        include_hidden=args.include_hidden,
        type=list(args.type) if args.type else list(DEFAULT_LANGUAGE_TYPES),
        completion=args.completion,
    )