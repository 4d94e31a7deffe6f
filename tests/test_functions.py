import math

import pytest

from userservice.lessons.functions import (
    add,
    add_curried,
    compose,
    iterate,
    ln,
    main,
    make_add_five,
    make_add_five_closure,
    say_hello,
    say_hello2,
    say_hello3,
    sqrt,
    underscore_unknown_chars,
)


def test_say_hello():
    assert say_hello("Mike") == "Hello Mike"


def test_say_hello2_plain_name():
    assert say_hello2("John") == say_hello("John")


def test_say_hello2_dear_name():
    assert say_hello2("Alex") == say_hello("Dear Alex")
    assert say_hello2("MIKE") == say_hello("Dear MIKE")


@pytest.mark.parametrize("name", ["Mike", "alex", "John", "Mary", ""])
def test_say_hello3_matches_say_hello2(name):
    assert say_hello3(name) == say_hello2(name)


def test_underscore_all():
    assert underscore_unknown_chars("Mike", "_", lambda _c: False) == " _  _  _  _ "


def test_underscore_none():
    result = underscore_unknown_chars("Mike", "?", lambda _c: True)
    assert result.split() == list("Mike")
    assert len(result) == 3 * len("Mike")


def test_underscore_some():
    result = underscore_unknown_chars("Mike", "_", lambda c: c.lower() in "me")
    assert result.split() == ["M", "_", "_", "e"]


def test_add_five():
    assert make_add_five()(10) == 15
    assert make_add_five_closure()(10) == 15


def test_iterate_counts_steps():
    solve = iterate(lambda x: 0, lambda guess, x, step: step, lambda guess, x: guess >= x)
    assert solve(4) == 4


def test_sqrt():
    result = sqrt(2.0)
    assert abs(result * result - 2.0) <= 0.001


def test_sqrt_zero_and_negative():
    assert sqrt(0) == 0.0
    with pytest.raises(ValueError):
        sqrt(-1.0)


def test_ln():
    result = ln(10.0)
    assert math.isclose(result, math.log(10.0), abs_tol=0.001)


def test_ln_of_one():
    assert ln(1.0) == 0.0


@pytest.mark.parametrize("x", [0.0, -1.0])
def test_ln_invalid(x):
    with pytest.raises(ValueError):
        ln(x)


def test_currying():
    assert add(1, 2) == 3
    assert add_curried(1)(2) == 3
    assert add_curried(3)(5) == 8


def test_compose():
    multiply_and_add_2 = compose(lambda x: x * 2, lambda x: x + 2)
    assert multiply_and_add_2(5) == 12


def test_main_output(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert say_hello("Mike") in out
    assert say_hello2("Alex") in out