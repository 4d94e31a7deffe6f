"""Pets with colours and greetings."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Color(Enum):
    """A basic colour a fish can have."""

    RED = "Red"
    GREEN = "Green"
    BLUE = "Blue"

    def __str__(self) -> str:
        return self.value


class Greeting:
    """Something that can greet; silent unless a subclass says otherwise."""

    def greet(self) -> str:
        return "Silent pet"


@dataclass(frozen=True)
class Dog(Greeting):
    name: str

    def greet(self) -> str:
        return "Gaw Gaw"


@dataclass(frozen=True)
class Fish(Greeting):
    color: Color


@dataclass(frozen=True)
class RgbColor:
    """A colour given by unsigned byte red, green and blue components."""

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        for component in ("red", "green", "blue"):
            value = getattr(self, component)
            if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 255:
                raise ValueError(f"{component} must be an unsigned byte, got {value!r}")

    def __str__(self) -> str:
        if self == BLACK:
            return "Black"
        if self == WHITE:
            return "White"
        return f"RGB color r:{self.red}, g:{self.green}, b:{self.blue}"


WHITE = RgbColor(255, 255, 255)
BLACK = RgbColor(0, 0, 0)


@dataclass(frozen=True)
class Cat(Greeting):
    name: str
    color: RgbColor

    def greet(self) -> str:
        return f"Meow {self.name}"


def main(argv: list[str] | None = None) -> int:
    print(f"Color is {Color.BLUE}")

    for color in (Color.RED, Color.GREEN, Color.BLUE):
        fish = Fish(color)
        print(f"Its a fish {fish.color} that say {fish.greet()}")

    dog = Dog("Lucky")
    print(f"Its a dog {dog.name} that say {dog.greet()}")

    cats = (
        Cat("Kitty", WHITE),
        Cat("Blacky", BLACK),
        Cat("Kiss", RgbColor(10, 0, 5)),
    )
    for cat in cats:
        print(f"Its a cat {cat.name} with color {cat.color} that say {cat.greet()}")
    return 0