import pytest

from userservice.lessons.generics import (
    GameMap,
    GridPoint,
    Line,
    Maybe,
    Point,
    main,
    max_of,
    non_blank,
    pair,
    pretty,
)


def test_point_equality_and_hash():
    point = Point(0, 10)
    assert (point.x, point.y) == (0, 10)
    assert point == Point(0, 10)
    assert point != Point(10, 0)
    words = Point("zero", "one")
    assert (words.x, words.y) == ("zero", "one")
    assert hash(words) == hash(Point("zero", "one"))


def test_line_holds_points():
    line = Line(Point(0, 10), Point(15.2, 0.0))
    assert line.start == Point(0, 10)
    assert line.end.x == 15.2


def test_pair():
    assert pair(1, 3) == (1, 3)
    assert pair("X", "Y") == ("X", "Y")


def test_maybe_display():
    assert str(Maybe.some(1)) == "Some(1)"
    assert str(Maybe.none()) == "None"


def test_non_blank_present():
    assert non_blank("s") == Maybe.some("s")
    assert str(non_blank(" z ")) == "Some(z)"


@pytest.mark.parametrize("text", ["  ", ""])
def test_non_blank_absent(text):
    assert non_blank(text) == Maybe.none()


def test_max_of():
    assert max_of(2, 3) == 3
    assert max_of(3, 2) == 3
    assert max_of("a", "b") == "b"


def test_pretty():
    assert pretty(150, "unsigned byte:") == "unsigned byte: 150"
    assert pretty(150, "just byte:") == "just byte: 150"


def test_pretty_rejects_non_byte():
    with pytest.raises(ValueError):
        pretty(256, "x")


def test_grid_point_pretty():
    assert GridPoint(11, 7).pretty() == "GameMap<Point>(x: 11, y: 7)"


def test_grid_point_range():
    with pytest.raises(ValueError):
        GridPoint(300, 0)


def test_game_map_of_other_type_not_displayable():
    with pytest.raises(TypeError):
        str(GameMap(Point(1, 2)))


def test_main_output(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "GameMap<Point>(x: 11, y: 7)" in out
    assert "Some(z)" in out