"""Reading numbers from files, with errors that say what went wrong."""

from __future__ import annotations

import os
import re
from pathlib import Path

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1
_WHITESPACE = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000"
)
_WORD = re.compile(f"[^{_WHITESPACE}]+")
_INTEGER = re.compile(r"[+-]?[0-9]+")


class ReadError(Exception):
    """A number could not be read from a file."""


class NoTokenError(ReadError):
    """The file holds nothing but whitespace."""

    def __init__(self, message: str = "no token in file") -> None:
        super().__init__(message)


class DivisionByZeroError(ZeroDivisionError):
    """The divisor was zero."""


class LoadError(Exception):
    """A number could not be loaded and doubled."""


class NegativeNumberError(LoadError):
    """The loaded number was negative."""


def _parse_i32(word: str) -> int:
    if not _INTEGER.fullmatch(word):
        raise ReadError("invalid digit found in string")
    value = int(word)
    if value > _I32_MAX:
        raise ReadError("number too large to fit in target type")
    if value < _I32_MIN:
        raise ReadError("number too small to fit in target type")
    return value


def read_number(path: str | os.PathLike[str]) -> int:
    """Return the first whitespace-separated word of a file as a 32-bit integer."""
    try:
        content = Path(path).read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ReadError(str(exc)) from exc
    match = _WORD.search(content)
    if match is None:
        raise NoTokenError()
    return _parse_i32(match.group())


def safe_division(a: int, b: int) -> int:
    """Divide two 32-bit integers, truncating toward zero."""
    if b == 0:
        raise DivisionByZeroError("division by zero")
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    if not _I32_MIN <= quotient <= _I32_MAX:
        raise OverflowError("attempt to divide with overflow")
    return quotient


def load_and_double(path: str | os.PathLike[str]) -> int:
    """Read a non-negative number from a file and return twice its value."""
    try:
        number = read_number(path)
    except ReadError as exc:
        raise LoadError(f"read error: {exc}") from exc
    if number < 0:
        raise NegativeNumberError("negative number")
    doubled = number * 2
    if doubled > _I32_MAX:
        raise OverflowError("attempt to multiply with overflow")
    return doubled