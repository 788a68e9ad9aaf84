"""Position - sparse stone placement on a square board."""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from kifudojo.core.enums import Color
from kifudojo.core.types import Point, is_on_board


class Position:
    """Stones keyed by :class:`Point`, tied to the board size they live on.

    Absence of a key means the intersection is empty. Reads outside the
    board return ``None``; writes are not range-checked (move application
    validates before it mutates).
    """

    __slots__ = ("_size", "_stones")

    def __init__(
        self,
        size: int = 19,
        stones: Mapping[Point, Color] | None = None,
    ) -> None:
        if size < 1:
            raise ValueError(f"Board size must be positive, got {size}")
        self._size = size
        self._stones: dict[Point, Color] = {}
        if stones:
            for point, color in stones.items():
                if not is_on_board(point, size):
                    raise ValueError(f"Stone at {point} is off the {size}x{size} board")
                self._stones[point] = Color(color)

    @property
    def size(self) -> int:
        return self._size

    # -- Element access -----------------------------------------------------

    def color_at(self, point: Point) -> Color | None:
        return self._stones.get(point)

    def __getitem__(self, point: Point) -> Color | None:
        return self._stones.get(point)

    def __setitem__(self, point: Point, color: Color | None) -> None:
        if color is None:
            self._stones.pop(point, None)
        else:
            self._stones[point] = color

    def set(self, point: Point, color: Color) -> None:
        self._stones[point] = color

    def remove(self, point: Point) -> None:
        self._stones.pop(point, None)

    def is_empty(self, point: Point) -> bool:
        return point not in self._stones

    def contains(self, point: Point) -> bool:
        """Whether *point* is a valid intersection of this board."""
        return is_on_board(point, self._size)

    # -- Query helpers ------------------------------------------------------

    def stones(self, color: Color | None = None) -> dict[Point, Color]:
        """Copy of the occupied points, optionally filtered by *color*."""
        if color is None:
            return dict(self._stones)
        return {p: c for p, c in self._stones.items() if c == color}

    def count(self, color: Color) -> int:
        return sum(1 for c in self._stones.values() if c == color)

    def __len__(self) -> int:
        return len(self._stones)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._stones)

    def items(self) -> Iterator[tuple[Point, Color]]:
        return iter(self._stones.items())

    # -- Copying ------------------------------------------------------------

    def copy(self) -> Position:
        pos = Position(self._size)
        pos._stones = self._stones.copy()
        return pos

    def toggled(self, point: Point, color: Color) -> Position:
        """New position with *point* cleared if occupied, else set to *color*.

        Editor semantics: no captures, no legality checks.
        """
        if not self.contains(point):
            raise ValueError(f"{point} is off the {self._size}x{self._size} board")
        pos = self.copy()
        if point in pos._stones:
            del pos._stones[point]
        else:
            pos._stones[point] = color
        return pos

    def clear(self) -> None:
        self._stones.clear()

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return self._size == other._size and self._stones == other._stones

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(self._size):
            cells = []
            for col in range(self._size):
                color = self._stones.get(Point(col, row))
                if color is None:
                    cells.append(".")
                else:
                    cells.append("X" if color == Color.BLACK else "O")
            rows.append(" ".join(cells))
        return "\n".join(rows)
