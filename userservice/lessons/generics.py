"""Generic containers, an optional value type and bounded helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")
A = TypeVar("A")
B = TypeVar("B")


def _check_byte(value: Any, what: str) -> None:
    if not isinstance(value, int) or not 0 <= value <= 255:
        raise ValueError(f"{what} must be an unsigned byte, got {value!r}")


@dataclass(frozen=True)
class Point(Generic[T]):
    x: T
    y: T


@dataclass(frozen=True)
class Line(Generic[A, B]):
    start: Point[A]
    end: Point[B]


@dataclass(frozen=True)
class Maybe(Generic[T]):
    """A value that is either present (``Some``) or absent (``None``)."""

    value: T | None = None
    is_some: bool = False

    @classmethod
    def some(cls, value: T) -> Maybe[T]:
        return cls(value, True)

    @classmethod
    def none(cls) -> Maybe[T]:
        return cls()

    def __str__(self) -> str:
        return f"Some({self.value})" if self.is_some else "None"


@dataclass(frozen=True)
class GridPoint:
    """A point with unsigned byte coordinates."""

    x: int
    y: int

    def __post_init__(self) -> None:
        _check_byte(self.x, "x")
        _check_byte(self.y, "y")

    def pretty(self) -> str:
        return str(GameMap(self))


@dataclass(frozen=True)
class GameMap(Generic[T]):
    zero: T

    def __str__(self) -> str:
        if not isinstance(self.zero, GridPoint):
            raise TypeError(f"GameMap of {type(self.zero).__name__} cannot be displayed")
        return f"GameMap<Point>(x: {self.zero.x}, y: {self.zero.y})"


def pair(a: T, b: T) -> tuple[T, T]:
    return (a, b)


def non_blank(s: str) -> Maybe[str]:
    """The trimmed text, or ``None`` when nothing but whitespace is left."""
    trimmed = s.strip()
    return Maybe.some(trimmed) if trimmed else Maybe.none()


def max_of(a: T, b: T) -> T:
    """The larger of two values; ``b`` when they are equal."""
    return a if a > b else b  # type: ignore[operator]


def pretty(value: int, label: str) -> str:
    """Render an unsigned byte after a label."""
    _check_byte(value, "value")
    return f"{label} {value}"


def main(argv: list[str] | None = None) -> int:
    point1 = Point(0, 10)
    point2 = Point(15.2, 0.0)
    point3 = Point("zero", "one")
    print(point1)
    print(point2)
    print(point3)
    print(Line(point1, point2))

    print(pair(1, 3))
    print(pair("X", "Y"))

    print(Maybe.some(1))
    print(Maybe.none())
    for text in ("s", " z ", "  ", ""):
        print(non_blank(text))

    print(max_of(2, 3))
    print(pretty(150, "unsigned byte:"))
    print(pretty(150, "just byte:"))
    print(GridPoint(11, 7).pretty())
    return 0