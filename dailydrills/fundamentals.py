"""Parsing, validation and small trait-style helpers."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable, Protocol, Union

Number = Union[int, float]

_INT_RANGES = {
    "i32": (-(2**31), 2**31 - 1),
    "u32": (0, 2**32 - 1),
    "i64": (-(2**63), 2**63 - 1),
    "u64": (0, 2**64 - 1),
    "usize": (0, 2**64 - 1),
}
_FLOAT_KINDS = {"f64"}


class _IntErrorKind(Enum):
    EMPTY = "cannot parse integer from empty string"
    INVALID_DIGIT = "invalid digit found in string"
    POS_OVERFLOW = "number too large to fit in target type"
    NEG_OVERFLOW = "number too small to fit in target type"


class _IntParseError(ValueError):
    def __init__(self, kind: _IntErrorKind) -> None:
        super().__init__(kind.value)
        self.kind = kind


def _parse_int(text: str, kind: str) -> int:
    low, high = _INT_RANGES[kind]
    if not text:
        raise _IntParseError(_IntErrorKind.EMPTY)
    digits, negative = text, False
    if text[0] in "+-":
        negative = text[0] == "-"
        if negative and low == 0:
            raise _IntParseError(_IntErrorKind.INVALID_DIGIT)
        digits = text[1:]
    if not digits or not (digits.isascii() and digits.isdigit()):
        raise _IntParseError(_IntErrorKind.INVALID_DIGIT)
    value = -int(digits) if negative else int(digits)
    if value > high:
        raise _IntParseError(_IntErrorKind.POS_OVERFLOW)
    if value < low:
        raise _IntParseError(_IntErrorKind.NEG_OVERFLOW)
    return value


def _parse_float(text: str) -> float:
    if not text or text != text.strip() or "_" in text:
        raise ValueError("invalid float literal")
    return float(text)


def _check_kind(kind: str) -> None:
    if kind not in _INT_RANGES and kind not in _FLOAT_KINDS:
        raise ValueError(f"unsupported number kind: {kind!r}")


def _parse(text: str, kind: str) -> Number:
    if kind in _FLOAT_KINDS:
        return _parse_float(text)
    return _parse_int(text, kind)


def read_file(path: str | os.PathLike[str]) -> str:
    """Return the whole text of a file."""
    with open(path, encoding="utf-8") as handle:
        return handle.read()


def parse_positive_number(text: str) -> int:
    """Parse a non-negative 32-bit number, with a short message on failure."""
    trimmed = text.strip()
    if trimmed.startswith("-"):
        raise ValueError("Negative number not allowed")
    try:
        return _parse_int(trimmed, "u32")
    except _IntParseError as exc:
        if exc.kind is _IntErrorKind.INVALID_DIGIT:
            raise ValueError("Not a number") from None
        if exc.kind is _IntErrorKind.POS_OVERFLOW:
            raise ValueError("Number too large") from None
        raise ValueError("Unknown numeric error") from None


def process_number_file(text: str, out_path: str | os.PathLike[str]) -> None:
    """Parse a number, square it and write the result to a file."""
    number = _parse_int(text.strip(), "u32")
    squared = number**2
    if squared > _INT_RANGES["u32"][1]:
        raise OverflowError("attempt to multiply with overflow")
    Path(out_path).write_text(str(squared), encoding="utf-8")


def first_char_as_digit(text: str) -> int:
    """Return the decimal digit at the start of the text."""
    if not text:
        raise ValueError("Empty string")
    first = text[0]
    if not ("0" <= first <= "9"):
        raise ValueError("Not a digit")
    return int(first)


def parse_and_validate(text: str, kind: str, validator: Callable[[Number], bool]) -> Number:
    """Parse the text as the given kind and check it with the validator."""
    _check_kind(kind)
    try:
        value = _parse(text, kind)
    except ValueError:
        raise ValueError("Parse error") from None
    if not validator(value):
        raise ValueError("Validation error")
    return value


def user_message(error: BaseException) -> str:
    """Return the text to show a user for an error."""
    return str(error)


@dataclass(frozen=True)
class ConstSource:
    """A source that always yields the same value."""

    value: int

    def read_value(self) -> int:
        return self.value


@dataclass(frozen=True)
class EnvSource:
    """A source that reads an unsigned number from an environment variable."""

    var: str

    def read_value(self) -> int:
        raw = os.environ.get(self.var)
        if raw is None:
            raise ValueError("Env error")
        try:
            return _parse_int(raw, "u32")
        except ValueError:
            raise ValueError("Env error") from None


class Describable(Protocol):
    def describe(self) -> str: ...


@dataclass(frozen=True)
class User:
    name: str

    def describe(self) -> str:
        return f"User: {self.name}"


@dataclass(frozen=True)
class System:
    id: int

    def describe(self) -> str:
        return f"System ID: {self.id}"


def parse_and_double(text: str, kind: str) -> Number:
    """Parse the trimmed text as the given kind and double it."""
    _check_kind(kind)
    try:
        value = _parse(text.strip(), kind)
    except ValueError:
        raise ValueError("Env error") from None
    if kind in _FLOAT_KINDS:
        return value + value
    doubled = value * 2
    low, high = _INT_RANGES[kind]
    if not low <= doubled <= high:
        raise OverflowError("attempt to add with overflow")
    return doubled


def double(value: int) -> int:
    return value * 2


def parse_number(text: str) -> int:
    """Parse a trimmed signed 32-bit number."""
    try:
        return _parse_int(text.strip(), "i32")
    except ValueError:
        raise ValueError("Parse error") from None


def add(a: int, b: int) -> int:
    return a + b