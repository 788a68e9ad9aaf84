"""Point type and coordinate helpers.

Coordinates are ``(col, row)`` pairs, both zero-based, with ``(0, 0)`` in
the top-left corner of the board as it is drawn.
"""

from __future__ import annotations

from dataclasses import dataclass

_OFFSETS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


@dataclass(frozen=True, slots=True)
class Point:
    """Immutable board intersection."""

    col: int
    row: int

    def __str__(self) -> str:
        return f"{self.col},{self.row}"


def is_on_board(point: Point, size: int) -> bool:
    """Whether *point* lies inside a ``size`` x ``size`` board."""
    return 0 <= point.col < size and 0 <= point.row < size


def neighbors(point: Point, size: int) -> list[Point]:
    """Orthogonal neighbours of *point* that exist on the board."""
    result: list[Point] = []
    for dc, dr in _OFFSETS:
        col, row = point.col + dc, point.row + dr
        if 0 <= col < size and 0 <= row < size:
            result.append(Point(col, row))
    return result


def all_points(size: int) -> list[Point]:
    """Every intersection, row by row."""
    return [Point(col, row) for row in range(size) for col in range(size)]
