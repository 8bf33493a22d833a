from dataclasses import replace

import pytest

from tiles1024.glyphs import digit_shapes, number_shapes
from tiles1024.graphics import WHITE, Ellipse, Line

X, Y, HT = 105, 95, 10

STROKE_COUNTS = {0: 1, 1: 1, 2: 5, 3: 5, 4: 3, 5: 5, 6: 5, 7: 2, 8: 5, 9: 5}


def test_zero_is_a_filled_ellipse():
    assert digit_shapes(0, X, Y, HT) == [Ellipse(X, Y, X + HT, Y + HT, WHITE, WHITE)]


def test_one_is_a_vertical_line():
    assert digit_shapes(1, X, Y, HT) == [Line(X, Y, X, Y + HT, WHITE)]


@pytest.mark.parametrize("digit, count", sorted(STROKE_COUNTS.items()))
def test_stroke_counts(digit, count):
    assert len(digit_shapes(digit, X, Y, HT)) == count


@pytest.mark.parametrize("digit", range(1, 10))
def test_first_stroke_starts_at_origin(digit):
    first = digit_shapes(digit, X, Y, HT)[0]
    assert (first.x1, first.y1) == (X, Y)


@pytest.mark.parametrize("digit", range(10))
def test_all_strokes_are_white(digit):
    for shape in digit_shapes(digit, X, Y, HT):
        color = shape.color if isinstance(shape, Line) else shape.line_color
        assert color == WHITE


@pytest.mark.parametrize("digit", range(1, 10))
def test_digits_move_with_origin(digit):
    dx, dy = 37, 11
    moved = digit_shapes(digit, X + dx, Y + dy, HT)
    shifted = [
        replace(s, x1=s.x1 + dx, y1=s.y1 + dy, x2=s.x2 + dx, y2=s.y2 + dy)
        for s in digit_shapes(digit, X, Y, HT)
    ]
    assert moved == shifted


@pytest.mark.parametrize("value", [-1, 10, 11, 42])
def test_non_digit_draws_nothing(value):
    assert digit_shapes(value, X, Y, HT) == []


@pytest.mark.parametrize("number", range(10))
def test_single_digit_number(number):
    assert number_shapes(number, X, Y, HT) == digit_shapes(number, X, Y, HT)


def test_ten_draws_nothing():
    assert number_shapes(10, X, Y, HT) == []


def test_two_digit_number():
    expected = digit_shapes(2, X + 20, Y, HT) + digit_shapes(1, X - HT, Y, HT)
    assert number_shapes(12, X, Y, HT) == expected