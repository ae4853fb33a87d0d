"""A raster of pixel data stored in columns."""

from __future__ import annotations

from typing import Any, Callable, Iterator

from animray.extents2d import Extents2D


class UnderflowError(ArithmeticError):
    """A value fell below the smallest one allowed."""


def _check_width_height(width: int, height: int) -> None:
    if width < 1:
        raise UnderflowError("Width can't be less than 1", width)
    if height < 1:
        raise UnderflowError("Height can't be less than 1", height)


class Film:
    """A raster of pixels addressed as ``film[column][row]``.

    ``colour`` is either the value every pixel starts with, or a function
    of ``(column, row)`` giving each pixel's value.
    """

    def __init__(self, width: int, height: int, colour: Any = 0) -> None:
        _check_width_height(width, height)
        if callable(colour):
            self._columns = [[colour(c, r) for r in range(height)] for c in range(width)]
        else:
            self._columns = [[colour] * height for _ in range(width)]

    def width(self) -> int:
        """The number of columns."""
        return len(self._columns)

    def height(self) -> int:
        """The number of rows."""
        return len(self._columns[0])

    def size(self) -> Extents2D:
        """The extents covering every pixel."""
        return Extents2D(0, 0, self.width() - 1, self.height() - 1)

    def __getitem__(self, column: int) -> list:
        if not 0 <= column < len(self._columns):
            raise IndexError(f"Column {column} is outside the film")
        return self._columns[column]

    def __iter__(self) -> Iterator[list]:
        return iter(self._columns)

    def for_each(self, fn: Callable[[Any], Any]) -> None:
        """Call ``fn`` on every pixel, column by column."""
        for column in self._columns:
            for pixel in column:
                fn(pixel)

    def for_each_row(self, fn: Callable[[Any], Any]) -> None:
        """Call ``fn`` on every pixel, row by row."""
        for row in zip(*self._columns):
            for pixel in row:
                fn(pixel)