"""Classification and description by structural pattern matching."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1
_U32_MAX = 2**32 - 1


def classify(n: int) -> str:
    """Classify an integer as negative, zero, small, or big even or odd."""
    if n < 0:
        return "negative"
    if n == 0:
        return "zero"
    if n <= 10:
        return "small"
    return "big even" if n % 2 == 0 else "big odd"


@dataclass(frozen=True)
class Admin:
    level: int


@dataclass(frozen=True)
class RegularUser:
    pass


Role = Union[Admin, RegularUser]


@dataclass(frozen=True)
class Login:
    name: str
    role: Role


@dataclass(frozen=True)
class Logout:
    name: str


Event = Union[Login, Logout]


def describe_event(event: Event) -> str:
    """Describe a login or logout."""
    match event:
        case Login(name=name, role=Admin(level=level)) if 0 <= level <= 4:
            return f"Admin login: {name} (low)"
        case Login(name=name, role=Admin()):
            return f"Admin login: {name} (high)"
        case Login(name=name, role=RegularUser()):
            return f"User login: {name}"
        case Logout(name=name):
            return f"Goodbye {name}"
    raise TypeError(f"unknown event: {event!r}")


@dataclass(frozen=True)
class Point:
    x: int
    y: int


@dataclass(frozen=True)
class Circle:
    center: Point
    radius: int


@dataclass(frozen=True)
class Rect:
    top_left: Point
    bottom_right: Point


Shape = Union[Circle, Rect]


def _span(a: int, b: int) -> int:
    diff = b - a
    if not _I32_MIN <= diff <= _I32_MAX:
        raise OverflowError("attempt to subtract with overflow")
    return abs(diff)


def shape_area(shape: Shape) -> int:
    """Return an integer area: 3·r² for circles, width·height for rectangles."""
    match shape:
        case Circle(radius=r):
            area = 3 * r * r
        case Rect(top_left=Point(x=x1, y=y1), bottom_right=Point(x=x2, y=y2)):
            area = _span(x1, x2) * _span(y1, y2)
        case _:
            raise TypeError(f"unknown shape: {shape!r}")
    if area > _U32_MAX:
        raise OverflowError("attempt to multiply with overflow")
    return area