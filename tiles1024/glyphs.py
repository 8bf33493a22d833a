"""Line drawings of the decimal digits used to label tiles."""

from __future__ import annotations

from .graphics import WHITE, Ellipse, Line, Shape


def _div(numerator: int, denominator: int) -> int:
    """Integer division that truncates towards zero."""
    quotient = abs(numerator) // denominator
    return quotient if numerator >= 0 else -quotient


def digit_shapes(digit: int, x: int, y: int, ht: int) -> list[Shape]:
    """Return the strokes of ``digit`` drawn at ``(x, y)`` with height ``ht``.

    Anything other than 0 to 9 draws nothing.
    """
    if digit == 0:
        return [Ellipse(x, y, x + ht, y + ht, WHITE, WHITE)]

    half = _div(ht, 2)
    fifth = _div(ht, 5)
    quarter = _div(ht, 4)
    two_fifths = _div(2 * ht, 5)
    three_fifths = _div(3 * ht, 5)
    four_fifths = _div(4 * ht, 5)
    right = x + ht

    segments = {
        1: [(x, y, x, y + ht)],
        2: [
            (x, y, right, y),
            (right, y, right, y + half),
            (right, y + half, x, y + half),
            (x, y + half, x, y + half + 5),
            (x, y + ht + fifth, right, y + ht + fifth),
        ],
        3: [
            (x, y, right, y),
            (right, y, right, y + three_fifths),
            (right, y + three_fifths, x, y + three_fifths),
            (right, y + three_fifths, right, y + four_fifths + 2),
            (x, y + ht + quarter, right, y + ht + quarter),
        ],
        4: [
            (x, y, x, y + three_fifths),
            (x, y + three_fifths, right, y + three_fifths),
            (x + two_fifths, y + quarter, x + two_fifths, y + four_fifths + 3),
        ],
        5: [
            (x, y, right, y),
            (x, y, x, y + three_fifths),
            (right, y + three_fifths, x, y + three_fifths),
            (right, y + three_fifths, right, y + four_fifths),
            (x, y + ht + quarter, right, y + ht + quarter),
        ],
        6: [
            (x, y, right, y),
            (x, y, x, y + ht + fifth),
            (x, y + ht + fifth, right, y + ht + fifth),
            (right, y + ht + fifth, right, y + half),
            (right, y + half, x, y + half),
        ],
        7: [
            (x, y, right, y),
            (right, y, x + four_fifths, y + ht),
        ],
        8: [
            (x, y, right, y),
            (x, y, x, y + ht + quarter),
            (right, y, right, y + ht + quarter),
            (x, y + ht + quarter, right, y + ht + quarter),
            (x, y + three_fifths, right, y + 3 + quarter),
        ],
        9: [
            (x, y, right, y),
            (x, y, x, y + half),
            (right, y, right, y + ht + fifth),
            (x, y + ht + fifth, right, y + ht + fifth),
            (x, y + half, right, y + 3 + fifth),
        ],
    }
    return [Line(*coords, WHITE) for coords in segments.get(digit, [])]


def number_shapes(number: int, x: int, y: int, ht: int) -> list[Shape]:
    """Return the strokes of ``number``, its last digit drawn rightmost.

    While more than 10 remains, each low digit is set ``20`` pixels to the
    right of its slot; the leading part is then drawn in its own slot.
    """
    shapes: list[Shape] = []
    remaining = number
    position = 0
    while remaining > 10:
        shapes.extend(digit_shapes(remaining % 10, x - (position * ht - 20), y, ht))
        position += 1
        remaining //= 10
    shapes.extend(digit_shapes(remaining, x - position * ht, y, ht))
    return shapes