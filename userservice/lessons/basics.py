"""Basic values, structs, JSON parsing and collection helpers."""

from __future__ import annotations

import dataclasses
import json
import struct
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Mapping

_U32_MAX = 2**32 - 1


class IpAddrKind(Enum):
    """Kind of an IP address."""

    V4 = "V4"
    V6 = "V6"


def increment(value: int) -> int:
    """Return ``value + 1``, keeping the result within an unsigned 32-bit range."""
    if not 0 <= value < _U32_MAX:
        raise OverflowError(f"cannot increment {value} within an unsigned 32-bit range")
    return value + 1


def _to_f32(value: float) -> float:
    return struct.unpack("<f", struct.pack("<f", value))[0]


def _format_f32(value: float) -> str:
    """Shortest decimal text that reads back as the same single-precision value."""
    for digits in range(1, 10):
        text = f"{value:.{digits}g}"
        if _to_f32(float(text)) == value:
            return text
    return repr(value)


def float_sum_f64(a: float, b: float) -> float:
    """Add two numbers in double precision."""
    return float(a) + float(b)


def float_sum_f32(a: float, b: float) -> float:
    """Add two numbers in single precision and return the rounded result."""
    return _to_f32(_to_f32(a) + _to_f32(b))


def extend_string(text: str, suffix: str) -> str:
    """Return ``text`` with ``suffix`` appended."""
    return text + suffix


@dataclass
class SimplePerson:
    first_name: str
    last_name: str
    age: int

    @staticmethod
    def descr() -> str:
        return "Peson is a man, woman, or child."

    def name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def greeting(self, greet: str) -> str:
        return f"{greet} {self.first_name}"


@dataclass
class DisplayPerson:
    first_name: str
    last_name: str
    age: int

    def __str__(self) -> str:
        return (
            "Person with Display trait "
            f"(first_name: {self.first_name}, last_name: {self.last_name}, age: {self.age})"
        )


@dataclass(frozen=True)
class Person:
    first_name: str
    last_name: str
    age: int


def parse_json(text: str) -> Any:
    """Parse a JSON document; raises ``ValueError`` when it is malformed."""
    return json.loads(text)


def stack_pops(values: Iterable[Any]) -> list[Any | None]:
    """Push every value on a stack, then pop until one pop finds it empty."""
    stack = list(values)
    popped: list[Any | None] = []
    while stack:
        popped.append(stack.pop())
    popped.append(None)
    return popped


def find_position(values: Iterable[Any], threshold: Any) -> int | None:
    """Index of the first value greater than ``threshold``, or ``None``."""
    return next((index for index, value in enumerate(values) if value > threshold), None)


def evens_times_ten(values: Iterable[int]) -> list[int]:
    """Keep the even values and multiply each by ten."""
    return [value * 10 for value in values if value % 2 == 0]


def transform_users(users: Mapping[int, str]) -> dict[int, str]:
    """Keep users with keys above 1, shifting keys by one and decorating names."""
    return {key + 1: f"!={name}=!" for key, name in users.items() if key > 1}


_SAMPLE_JSON = """
{
    "code": 200,
    "success": true,
    "payload": {
        "features": [
            "awesome",
            "easyAPI",
            "lowLearningCurve"
        ]
    }
}
"""


def main(argv: list[str] | None = None) -> int:
    for kind in IpAddrKind:
        print(kind.name)

    x = 42
    print(x)
    print(f"a = {increment(x)}")

    print(float_sum_f64(0.1, 0.2))
    print(_format_f32(float_sum_f32(0.1, 0.2)))

    string1 = "String1"
    print(string1, "String2", "String_literal", string1, string1)
    print(extend_string(string1, " and new part"))

    smike = SimplePerson("Mike", "Smith", 45)
    print(f"Person: {smike.first_name}, {smike.last_name}, {smike.age}")
    print(f"Person type description: {SimplePerson.descr()}")
    print(f"Person name is {smike.name()}")
    print(smike.greeting("Hello"))
    john = dataclasses.replace(smike, first_name="John")
    print(f"Person: {john.first_name}, {john.last_name}, {john.age}")
    print(DisplayPerson("Mike", "Smith", 45))
    mike = Person("Mike", "Smith", 45)
    mike2 = dataclasses.replace(mike)
    mike3 = Person("Mike", "Smith", 45)
    print(mike)
    print(mike == mike2, mike2 == mike, mike == mike3, mike2 == mike3)

    print(parse_json(_SAMPLE_JSON))

    print(f"v1: {[]}")
    print(f"v2: {[1, 2, 3]}")
    pops = stack_pops([1, 2, 3])
    print(f"pops={pops}")
    numbers = [1, 2, 3, 4, 5]
    print(f"x={numbers[0]}, y={numbers[1]}, len={len(numbers)}")
    numbers[0] = 10
    numbers.pop(0)
    numbers.insert(0, 1)
    print(f"v1={numbers}")
    print(f"v1 contains 3? = {3 in numbers}")
    print(f"v1 position for x > 2 = {find_position(numbers, 2)}")
    print(f"multed = {evens_times_ten(numbers)}")

    users = {1: "Mike", 2: "Alex", 3: "Mary"}
    print(f"users_map {users}")
    print(f"users_map.get(1) = {users.get(1)}")
    print(f"users_map.get(10) = {users.get(10)}")
    print(f"filtered key > 1 = {transform_users(users)}")
    return 0