"""A 4x4 sliding-tile 1024 puzzle, played in a Tk window or a terminal."""

__version__ = "0.1.0"
__all__ = ["app", "board", "console", "glyphs", "graphics"]