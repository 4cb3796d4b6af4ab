"""Line, word and character counts for text files, with a small command line."""

from __future__ import annotations

import os
import re
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

_USAGE = "Usage: wc-light <filename>"
_WHITESPACE = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000"
)
_WORD = re.compile(f"[^{_WHITESPACE}]+")


class CliError(Exception):
    """Base class for command-line errors."""


class MissingArgumentError(CliError):
    """The arguments do not have the expected shape."""

    def __init__(self, message: str = "missing argument") -> None:
        super().__init__(message)


class InvalidModeError(CliError):
    """The requested counting mode is unknown."""

    def __init__(self, message: str = "invalid mode") -> None:
        super().__init__(message)


class CliIOError(CliError):
    """A file could not be read or inspected."""

    def __init__(self, error: BaseException) -> None:
        super().__init__(str(error))
        self.error = error


@dataclass(frozen=True)
class Analysis:
    """Counts of lines, words and characters in a text."""

    lines: int
    words: int
    chars: int


def _count_lines(content: str) -> int:
    if not content:
        return 0
    newlines = content.count("\n")
    return newlines if content.endswith("\n") else newlines + 1


def analyze_text(content: str) -> Analysis:
    """Count the lines, whitespace-separated words and characters of a text."""
    return Analysis(
        lines=_count_lines(content),
        words=len(_WORD.findall(content)),
        chars=len(content),
    )


def _read_text(path: str | os.PathLike[str]) -> str:
    try:
        return Path(path).read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise CliIOError(exc) from exc


def analyze_file(path: str | os.PathLike[str]) -> Analysis:
    """Read a UTF-8 file and count its lines, words and characters."""
    return analyze_text(_read_text(path))


class Mode(Enum):
    """Which count to report."""

    LINES = "Lines"
    WORDS = "Words"
    CHARS = "Chars"
    ALL = "All"

    @classmethod
    def parse(cls, text: str) -> Mode:
        """Return the mode named by the text, ignoring case."""
        wanted = text.lower()
        for mode in cls:
            if mode.name.lower() == wanted:
                return mode
        raise InvalidModeError(f"invalid mode: {text!r}")


@dataclass(frozen=True)
class Config:
    """A file to analyse and the count to report."""

    filename: str
    mode: Mode

    @classmethod
    def from_args(cls, args: Sequence[str]) -> Config:
        """Build a config from program name, file name and mode."""
        if len(args) != 3:
            raise MissingArgumentError()
        return cls(filename=args[1], mode=Mode.parse(args[2]))


def _demo_io() -> str:
    content = Path("input.txt").read_text(encoding="utf-8")
    print(f"Content:\n{content}")
    Path("output.txt").write_text("Ich wurde von Rust erstellt!\n", encoding="utf-8")
    return content


def count_main(argv: Sequence[str] | None = None) -> int:
    """Echo input.txt, write output.txt, then print the counts for one file."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print(_USAGE, file=sys.stderr)
        return 1
    try:
        _demo_io()
        analysis = analyze_text(_read_text_plain(args[0]))
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(f"Lines: {analysis.lines}")
    print(f"Words: {analysis.words}")
    print(f"Chars: {analysis.chars}")
    return 0


def _read_text_plain(path: str) -> str:
    return Path(path).read_bytes().decode("utf-8")


def main(argv: Sequence[str] | None = None) -> int:
    """Report one count, or all of them, for the file named on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        config = Config.from_args(["wordcount", *args])
        result = analyze_file(config.filename)
    except CliError as exc:
        print(f"Error: {type(exc).__name__}: {exc}", file=sys.stderr)
        return 1

    label = config.mode.value
    if config.mode is Mode.LINES:
        print(f"{label} {result.lines}")
    elif config.mode is Mode.WORDS:
        print(f"{label} {result.words}")
    elif config.mode is Mode.CHARS:
        print(f"{label} {result.chars}")
    else:
        print(
            f"{label} Analysis {{ lines: {result.lines}, "
            f"words: {result.words}, chars: {result.chars} }}"
        )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())