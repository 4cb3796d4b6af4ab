"""String, record and sequence helpers around sharing and mutation."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from decimal import Decimal
from typing import MutableSequence, Sequence, Union


def _byte_len(text: str) -> int:
    return len(text.encode("utf-8"))


def longer(a: str, b: str) -> str:
    """Return the string with more UTF-8 bytes, the second one on a tie."""
    return a if _byte_len(a) > _byte_len(b) else b


@dataclass(frozen=True)
class Person:
    name: str


def first_char(person: Person) -> str:
    """Return the first byte of the name; it must be a whole character."""
    if not person.name:
        raise ValueError("name is empty")
    first = person.name[0]
    if _byte_len(first) != 1:
        raise ValueError("first byte is not a character boundary")
    return first


def sum_lengths(a: str, b: str) -> int:
    """Return the combined UTF-8 byte length of both strings."""
    return _byte_len(a) + _byte_len(b)


@dataclass(frozen=True)
class Temperature:
    value: float


@dataclass(frozen=True)
class Pressure:
    value: float


@dataclass(frozen=True)
class Status:
    text: str


SensorValue = Union[Temperature, Pressure, Status]


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value == 0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"
    text = repr(float(value))
    if "e" in text:
        text = format(Decimal(text), "f")
    if text.endswith(".0"):
        text = text[:-2]
    return text


def describe_sensor(value: SensorValue) -> str:
    """Render a sensor value with its unit."""
    match value:
        case Temperature(value=v):
            return f"Temperature: {_format_float(v)}°C"
        case Pressure(value=p):
            return f"Pressure: {_format_float(p)}hPa"
        case Status(text=s):
            return f"Status: {s}"
    raise TypeError(f"unknown sensor value: {value!r}")


@dataclass(frozen=True)
class Number:
    value: int


@dataclass(frozen=True)
class Text:
    text: str


def consume(data: Number | Text) -> int:
    """Return the magnitude of a number or the byte length of a text."""
    match data:
        case Number(value=n):
            return abs(n)
        case Text(text=s):
            return _byte_len(s)
    raise TypeError(f"unknown data: {data!r}")


@dataclass
class Book:
    title: str
    pages: int


@dataclass(frozen=True)
class Library:
    book1: Book
    book2: Book


def make_library(book1: Book, book2: Book) -> Library:
    return Library(book1=book1, book2=book2)


def add_pages(book: Book, extra: int) -> Book:
    """Add pages to the book in place and return it."""
    book.pages += extra
    return book


@dataclass(frozen=True)
class Highlight:
    text: str
    level: int = 1


def emphasize(text: str) -> Highlight:
    return Highlight(text=text, level=1)


def maybe_uppercase(text: str) -> str:
    """Return the text itself if every character is uppercase, else an uppercased copy."""
    if all(char.isupper() for char in text):
        return text
    return text.upper()


def sum_values(nums: Sequence[int]) -> int:
    return sum(nums)


def increment_all(nums: MutableSequence[int]) -> None:
    """Add one to every element in place."""
    nums[:] = [n + 1 for n in nums]


def first_word(text: str) -> str:
    """Return the text up to the first space."""
    return text.partition(" ")[0]


def split_process(nums: MutableSequence[int]) -> None:
    """Increment the first half in place and double the second half."""
    middle = len(nums) // 2
    nums[:middle] = [n + 1 for n in nums[:middle]]
    nums[middle:] = [n * 2 for n in nums[middle:]]


@dataclass
class Stats:
    """A growing collection of integer samples."""

    values: list[int] = field(default_factory=list)

    def add(self, value: int) -> None:
        self.values.append(value)

    def total(self) -> int:
        return sum(self.values)

    def mean(self) -> float:
        """Return the average, or NaN when there are no samples."""
        if not self.values:
            return math.nan
        return self.total() / len(self.values)

    def scale(self, factor: int) -> None:
        self.values[:] = [v * factor for v in self.values]

    def sorted_values(self) -> list[int]:
        return sorted(self.values)