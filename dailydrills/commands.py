"""A command-line tool with subcommands for counting, sizing and echoing."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Union

from .wordcount import CliError, CliIOError, MissingArgumentError, analyze_file


class InvalidCommandError(CliError):
    """The subcommand is unknown."""

    def __init__(self, message: str = "invalid command") -> None:
        super().__init__(message)


@dataclass(frozen=True)
class Count:
    filename: str


@dataclass(frozen=True)
class StatsJson:
    filename: str


@dataclass(frozen=True)
class FileSize:
    filename: str


@dataclass(frozen=True)
class StatsYaml:
    filename: str


@dataclass(frozen=True)
class Echo:
    text: str


@dataclass(frozen=True)
class Help:
    pass


Command = Union[Count, StatsJson, FileSize, StatsYaml, Echo, Help]

_FILE_COMMANDS = {
    "count": Count,
    "size": FileSize,
    "statsjson": StatsJson,
    "statsyaml": StatsYaml,
}


@dataclass(frozen=True)
class CommandConfig:
    """The command chosen on the command line."""

    command: Command

    @classmethod
    def from_args(cls, args: Sequence[str]) -> CommandConfig:
        """Build a config from the full argument list, program name first."""
        return cls(command=parse_args(args))


def parse_args(args: Sequence[str]) -> Command:
    """Turn program name, subcommand and its argument into a command."""
    if len(args) <= 1:
        raise MissingArgumentError()
    if args[1] == "--help":
        if len(args) <= 2:
            return Help()
        raise MissingArgumentError()
    if len(args) != 3:
        raise MissingArgumentError()

    name, argument = args[1].lower(), args[2]
    if name == "echo":
        return Echo(text=argument)
    try:
        return _FILE_COMMANDS[name](filename=argument)
    except KeyError:
        raise InvalidCommandError(f"invalid command: {args[1]!r}") from None


def execute(command: Command) -> str:
    """Run a command and return the text it produces."""
    match command:
        case Count(filename=filename):
            data = analyze_file(filename)
            return f"lines: {data.lines}, words: {data.words}, chars: {data.chars}"
        case StatsJson(filename=filename):
            data = analyze_file(filename)
            return (
                f'{{"lines": {data.lines}, "words": {data.words}, '
                f'"chars": {data.chars}}}'
            )
        case Echo(text=text):
            return f"Echo: {text}"
        case FileSize(filename=filename):
            return f"Size of file is: {get_file_size(filename)} Byte"
        case StatsYaml(filename=filename):
            data = analyze_file(filename)
            return (
                f"items:\n  lines: {data.lines}\n  words: {data.words}\n"
                f"  chars: {data.chars}"
            )
        case Help():
            return format_help()
    raise TypeError(f"unknown command: {command!r}")


def format_help() -> str:
    """Return the help text listing the commands."""
    indent = "        "
    return (
        "Commands\n\t\n"
        f"{indent}count <file>\tprints line/word/char counts\n\t\n"
        f"{indent}size  <file> \tprints size of file\n\t\n"
        f"{indent}statsjson <file>\tprints JSON analysis\n\t\n"
        f"{indent}statsyaml <file>\tprints YAML analysis\n\t\n"
        f"{indent}echo  <text>\tprints the text\n\t"
    )


def get_file_size(path: str | os.PathLike[str]) -> int:
    """Return the size of a file in bytes."""
    try:
        return os.stat(path).st_size
    except OSError as exc:
        raise CliIOError(exc) from exc


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the command line, run the command and print its output."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        config = CommandConfig.from_args(["commands", *args])
        output = execute(config.command)
    except CliError as exc:
        print(f"Error: {type(exc).__name__}: {exc}", file=sys.stderr)
        return 1
    print(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())