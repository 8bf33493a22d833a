"""Drawing primitives: colours, shapes and surfaces that draw them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

PEN_WIDTH = 2
TEXT_LIMIT = 20
FONT_FAMILY = "Impact"


@dataclass(frozen=True)
class Color:
    """An RGB colour with 8-bit channels."""

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue"):
            value = getattr(self, name)
            if not isinstance(value, int) or not 0 <= value <= 255:
                raise ValueError(f"{name} must be an integer from 0 to 255, not {value!r}")

    @property
    def hex(self) -> str:
        """The colour as ``#rrggbb``."""
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"

    @classmethod
    def from_hex(cls, text: str) -> "Color":
        """Parse a ``#rrggbb`` string."""
        digits = text[1:] if text.startswith("#") else text
        if len(digits) != 6:
            raise ValueError(f"not a #rrggbb colour: {text!r}")
        try:
            value = int(digits, 16)
        except ValueError:
            raise ValueError(f"not a #rrggbb colour: {text!r}") from None
        return cls((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)

    def to_colorref(self) -> int:
        """Pack as a COLORREF value: red in the low byte, blue in the third."""
        return self.red | (self.green << 8) | (self.blue << 16)

    @classmethod
    def from_colorref(cls, value: int) -> "Color":
        """Unpack a COLORREF value."""
        if not 0 <= value <= 0xFFFFFF:
            raise ValueError(f"COLORREF out of range: {value!r}")
        return cls(value & 0xFF, (value >> 8) & 0xFF, (value >> 16) & 0xFF)


WHITE = Color(255, 255, 255)
BLACK = Color(0, 0, 0)


@dataclass(frozen=True)
class Line:
    x1: int
    y1: int
    x2: int
    y2: int
    color: Color
    width: int = PEN_WIDTH


@dataclass(frozen=True)
class Rect:
    x1: int
    y1: int
    x2: int
    y2: int
    line_color: Color
    fill_color: Color
    width: int = PEN_WIDTH


@dataclass(frozen=True)
class Ellipse:
    x1: int
    y1: int
    x2: int
    y2: int
    line_color: Color
    fill_color: Color
    width: int = PEN_WIDTH


@dataclass(frozen=True)
class Text:
    x: int
    y: int
    height: int
    text: str
    line_color: Color
    fill_color: Color


@dataclass(frozen=True)
class Pixel:
    x: int
    y: int
    color: Color


Shape = Union[Line, Rect, Ellipse, Text, Pixel]


def _clip_text(text: str) -> str:
    """Keep the text up to the first NUL and at most TEXT_LIMIT characters."""
    return text.split("\0", 1)[0][:TEXT_LIMIT]


class RecordingSurface:
    """A surface that keeps the shapes drawn on it, in order, in ``shapes``."""

    def __init__(self) -> None:
        self.shapes: list[Shape] = []

    def _add(self, shape: Shape) -> Shape:
        self.shapes.append(shape)
        return shape

    def line(self, x1: int, y1: int, x2: int, y2: int, color: Color) -> Line:
        return self._add(Line(x1, y1, x2, y2, color))

    def rect(
        self, x1: int, y1: int, x2: int, y2: int, line_color: Color, fill_color: Color
    ) -> Rect:
        return self._add(Rect(x1, y1, x2, y2, line_color, fill_color))

    def ellipse(
        self, x1: int, y1: int, x2: int, y2: int, line_color: Color, fill_color: Color
    ) -> Ellipse:
        return self._add(Ellipse(x1, y1, x2, y2, line_color, fill_color))

    def text(
        self, x: int, y: int, height: int, text: str, line_color: Color, fill_color: Color
    ) -> Text:
        return self._add(Text(x, y, height, _clip_text(text), line_color, fill_color))

    def pixel(self, x: int, y: int, color: Color) -> Pixel:
        return self._add(Pixel(x, y, color))

    def clear(self) -> None:
        self.shapes.clear()


class TkSurface:
    """A window with a canvas that shapes are drawn on straight away.

    ``root`` and ``canvas`` are the underlying Tk objects.
    """

    def __init__(self, width: int = 600, height: int = 600, title: str = "1024") -> None:
        import tkinter

        self.root: Any = tkinter.Tk()
        self.root.title(title)
        self.canvas: Any = tkinter.Canvas(
            self.root,
            width=width,
            height=height,
            background=BLACK.hex,
            highlightthickness=0,
        )
        self.canvas.pack()

    def _refresh(self) -> None:
        self.root.update_idletasks()

    def line(self, x1: int, y1: int, x2: int, y2: int, color: Color) -> None:
        self.canvas.create_line(x1, y1, x2, y2, fill=color.hex, width=PEN_WIDTH)
        self._refresh()

    def rect(
        self, x1: int, y1: int, x2: int, y2: int, line_color: Color, fill_color: Color
    ) -> None:
        self.canvas.create_rectangle(
            x1, y1, x2, y2, outline=line_color.hex, fill=fill_color.hex, width=PEN_WIDTH
        )
        self._refresh()

    def ellipse(
        self, x1: int, y1: int, x2: int, y2: int, line_color: Color, fill_color: Color
    ) -> None:
        self.canvas.create_oval(
            x1, y1, x2, y2, outline=line_color.hex, fill=fill_color.hex, width=PEN_WIDTH
        )
        self._refresh()

    def text(
        self, x: int, y: int, height: int, text: str, line_color: Color, fill_color: Color
    ) -> None:
        item = self.canvas.create_text(
            x,
            y,
            anchor="nw",
            text=_clip_text(text),
            fill=line_color.hex,
            font=(FONT_FAMILY, -abs(height), "underline"),
        )
        bbox = self.canvas.bbox(item)
        if bbox:
            background = self.canvas.create_rectangle(
                *bbox, fill=fill_color.hex, outline=""
            )
            self.canvas.tag_lower(background, item)
        self._refresh()

    def pixel(self, x: int, y: int, color: Color) -> None:
        self.canvas.create_rectangle(x, y, x + 1, y + 1, outline="", fill=color.hex)
        self._refresh()

    def clear(self) -> None:
        self.canvas.delete("all")
        self._refresh()