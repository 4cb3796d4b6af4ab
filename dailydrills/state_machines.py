"""Traffic lights, a word counter and a character reader as state machines."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

_WHITESPACE = frozenset(
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


class Light(Enum):
    """A traffic light cycling red, green, yellow."""

    RED = "Red"
    GREEN = "Green"
    YELLOW = "Yellow"

    def next(self) -> Light:
        """Return the light that follows this one."""
        order = list(Light)
        return order[(order.index(self) + 1) % len(order)]


def count_words(text: str) -> int:
    """Count runs of non-whitespace characters."""
    count = 0
    in_word = False
    for char in text:
        if char in _WHITESPACE:
            in_word = False
        elif not in_word:
            in_word = True
            count += 1
    return count


@dataclass(frozen=True)
class Closed:
    pass


@dataclass(frozen=True)
class Open:
    position: int


@dataclass(frozen=True)
class Error:
    message: str


ReaderState = Union[Closed, Open, Error]


@dataclass
class Reader:
    """Reads a text one character at a time while open."""

    state: ReaderState = field(default_factory=Closed)

    def open(self) -> None:
        """Open a closed reader; opening twice puts it in an error state."""
        match self.state:
            case Closed():
                self.state = Open(0)
            case Open():
                self.state = Error("already open")
            case Error():
                pass

    def close(self) -> None:
        self.state = Closed()

    def read_char(self, content: str) -> Optional[str]:
        """Return the next character, or None when closed, failed or at the end."""
        match self.state:
            case Open(position=position) if position < len(content.encode("utf-8")):
                if position >= len(content):
                    raise IndexError("character index out of range")
                self.state = Open(position + 1)
                return content[position]
        return None