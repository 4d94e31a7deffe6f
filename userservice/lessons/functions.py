"""Functions, closures, higher-order helpers and iterative approximation."""

from __future__ import annotations

from typing import Callable, TypeVar

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")

_GREETING = "Dear "
_DEARS = ("mike", "alex")
_E = 2.7182817
_TOLERANCE = 0.001


def say_hello(name: str) -> str:
    return f"Hello {name}"


def say_hello2(name: str) -> str:
    """Greet, adding "Dear " for favoured names."""

    def dear(who: str) -> str:
        return _GREETING + who if who.lower() in _DEARS else who

    return f"Hello {dear(name)}"


def say_hello3(name: str) -> str:
    """Same as :func:`say_hello2`, built around a closure over ``name``."""
    dear_name = lambda: _GREETING + name if name.lower() in _DEARS else name  # noqa: E731
    return f"Hello {dear_name()}"


def underscore_unknown_chars(s: str, uchar: str, predicate: Callable[[str], bool]) -> str:
    """Replace every character the predicate rejects with ``uchar``, padding each with spaces."""
    return "".join(f" {c if predicate(c) else uchar} " for c in s)


def make_add_five() -> Callable[[int], int]:
    def inner(x: int) -> int:
        return x + 5

    return inner


def make_add_five_closure() -> Callable[[int], int]:
    five = 5
    return lambda x: x + five


def iterate(
    start: Callable[[float], float],
    make_guess: Callable[[float, float, int], float],
    is_good_enough: Callable[[float, float], bool],
) -> Callable[[float], float]:
    """Build a solver that refines a guess until it is good enough."""

    def solve(x: float) -> float:
        step = 1
        guess = make_guess(start(x), x, step)
        while not is_good_enough(guess, x):
            step += 1
            guess = make_guess(guess, x, step)
        return guess

    return solve


def _sqrt_good_enough(guess: float, x: float) -> bool:
    return abs(x - guess * guess) <= _TOLERANCE


def _sqrt_guess(guess: float, x: float, _step: int) -> float:
    return (guess + x / guess) / 2.0


def _ln_good_enough(guess: float, x: float) -> bool:
    return abs(_E**guess - x) <= _TOLERANCE


def _ln_guess(guess: float, x: float, step: int) -> float:
    n = float(2 * step - 1)
    y = (x - 1.0) / (x + 1.0)
    return guess + 2.0 * (1.0 / n) * y**n


def sqrt(x: float) -> float:
    """Square root by Newton's method."""
    if x < 0:
        raise ValueError("sqrt requires a non-negative number")
    if x == 0:
        return 0.0
    return iterate(lambda v: v / 2.0, _sqrt_guess, _sqrt_good_enough)(x)


def ln(x: float) -> float:
    """Natural logarithm by the area-hyperbolic-tangent series."""
    if x <= 0:
        raise ValueError("ln requires a positive number")
    return iterate(lambda _v: 0.0, _ln_guess, _ln_good_enough)(x)


def add(x: int, y: int) -> int:
    return x + y


def add_curried(x: int) -> Callable[[int], int]:
    return lambda y: add(x, y)


def compose(f: Callable[[A], B], g: Callable[[B], C]) -> Callable[[A], C]:
    """Return a function applying ``f`` and then ``g``."""
    return lambda x: g(f(x))


def main(argv: list[str] | None = None) -> int:
    print(say_hello("Mike"))
    print(say_hello2("John"))
    print(say_hello2("Alex"))
    greet = say_hello
    print(greet("John"))
    print((lambda name: f"Good day {name}")("Alex"))
    print(say_hello3("Mary"))

    s = "Mike"
    print(underscore_unknown_chars(s, "_", lambda _c: False))
    print(underscore_unknown_chars(s, "?", lambda _c: True))
    print(underscore_unknown_chars(s, "_", lambda _c: True))
    print(underscore_unknown_chars(s, "_", lambda c: c.lower() in ("m", "e")))

    for adder in (make_add_five(), make_add_five_closure()):
        print(adder(10))

    print(sqrt(2.0))
    print(ln(10.0))

    add_3_to = add_curried(3)
    print(add(1, 2), add_curried(1)(2), add_3_to(5))
    print(compose(lambda x: x * 2, lambda x: x + 2)(5))
    return 0