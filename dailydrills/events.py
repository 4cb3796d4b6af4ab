"""Input events, messages and the text that describes them."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Optional, Union

_U32_MAX = 2**32 - 1


@dataclass(frozen=True)
class Click:
    x: int
    y: int


@dataclass(frozen=True)
class Key:
    char: str


@dataclass(frozen=True)
class Resize:
    width: int
    height: int


@dataclass(frozen=True)
class Quit:
    pass


Event = Union[Click, Key, Resize, Quit]


def process_event(event: Event) -> str:
    """Describe an input event."""
    match event:
        case Click(x=x, y=y):
            return f"Click at ({x},{y})"
        case Key(char="q"):
            return "Quit key"
        case Key(char="c"):
            return "Key c"
        case Key(char=other):
            return f"Other key: {other}"
        case Resize(width=width, height=height):
            return f"Resized to {width}x{height}"
        case Quit():
            return "Program ended"
    raise TypeError(f"unknown event: {event!r}")


def only_click(event: Event) -> Optional[tuple[int, int]]:
    """Return the position of a click, or None for any other event."""
    if isinstance(event, Click):
        return (event.x, event.y)
    return None


def filter_clicks(events: Iterable[Event]) -> list[tuple[int, int]]:
    """Return the positions of all clicks, in order."""
    return [(ev.x, ev.y) for ev in events if isinstance(ev, Click)]


def dispatch(event: Event) -> None:
    """Print the pressed key, or a note that the event is not a key."""
    if not isinstance(event, Key):
        print("not a key")
        return
    print(f"Pressed key: {event.char}")


@dataclass(frozen=True)
class QuitMessage:
    pass


@dataclass(frozen=True)
class Move:
    x: int
    y: int


@dataclass(frozen=True)
class Write:
    text: str


@dataclass(frozen=True)
class ChangeColor:
    red: int
    green: int
    blue: int


Message = Union[QuitMessage, Move, Write, ChangeColor]


def handle_message(message: Message) -> str:
    """Describe a message."""
    match message:
        case QuitMessage():
            return "Bye"
        case Move(x=0, y=0):
            return "No movement"
        case Move(x=x, y=y):
            return f"Moving to ({x},{y})"
        case Write(text=""):
            return "Empty"
        case Write(text=text):
            return f"Text: {text}"
        case ChangeColor(red=r, green=g, blue=b) if r <= 20 and g <= 20 and b <= 20:
            return "Dark color"
        case ChangeColor(red=r, green=g, blue=b):
            return f"Color RGB({r},{g},{b})"
    raise TypeError(f"unknown message: {message!r}")


@dataclass(frozen=True)
class Rectangle:
    width: int
    height: int


def rectangle_area(rect: Rectangle) -> int:
    """Return width times height, which must fit in 32 unsigned bits."""
    area = rect.width * rect.height
    if area > _U32_MAX:
        raise OverflowError("attempt to multiply with overflow")
    return area


@dataclass(frozen=True)
class Mouse:
    event: Union[Click, Key]


@dataclass(frozen=True)
class Keyboard:
    event: Union[Click, Key]


Action = Union[Mouse, Keyboard]


def extract_click(action: Action) -> Optional[tuple[int, int]]:
    """Return the position of a mouse click, or None for anything else."""
    match action:
        case Mouse(event=Click(x=x, y=y)):
            return (x, y)
    return None