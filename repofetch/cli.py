"""The command-line entry point."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from repofetch.config import PROG, ConfigError, build_parser, parse_config
from repofetch.info import Info
from repofetch.printer import Printer


def _option_strings(parser: argparse.ArgumentParser) -> list[str]:
    return [option for action in parser._actions for option in action.option_strings]


def _completion_script(shell: str, parser: argparse.ArgumentParser) -> str:
    options = _option_strings(parser)
    words = " ".join(options)
    if shell == "bash":
        return f'complete -o default -W "{words}" {PROG}\n'
    if shell == "zsh":
        return (
            f"#compdef {PROG}\n"
            f"_{PROG}() {{\n    compadd -- {words}\n}}\n"
            f"compdef _{PROG} {PROG}\n"
        )
    if shell == "fish":
        lines = []
        for option in options:
            if option.startswith("--"):
                lines.append(f"complete -c {PROG} -l {option[2:]}")
            else:
                lines.append(f"complete -c {PROG} -s {option[1:]}")
        return "\n".join(lines) + "\n"
    if shell == "powershell":
        quoted = ", ".join(f"'{option}'" for option in options)
        return (
            f"Register-ArgumentCompleter -Native -CommandName '{PROG}' -ScriptBlock {{\n"
            "    param($wordToComplete)\n"
            f"    @({quoted}) | Where-Object {{ $_ -like \"$wordToComplete*\" }}\n"
            "}\n"
        )
    if shell == "elvish":
        return f"set edit:completion:arg-completer[{PROG}] = {{|@words| put {words} }}\n"
    raise ValueError(f"unsupported shell: {shell}")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the program and return its exit status."""
    try:
        config = parse_config(argv)
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    # The tables of supported languages and package managers are empty here,
    # so listing them prints nothing.
    if config.languages or config.package_managers:
        return 0

    if config.completion is not None:
        sys.stdout.write(_completion_script(config.completion, build_parser()))
        return 0

    try:
        info = Info.collect(config)
        Printer(sys.stdout, info, config).print()
    except (OSError, RuntimeError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())