"""Move rejection errors.

All of them are recoverable: a rejected move never changes the position
it was tried against.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from kifudojo.core.enums import Color
    from kifudojo.core.types import Point


class IllegalMoveError(ValueError):
    """Base class for a move the engine refuses to play."""

    reason = "illegal move"

    def __init__(self, point: Point, color: Color) -> None:
        self.point = point
        self.color = color
        super().__init__(f"{self.reason}: {color} at {point}")


class OccupiedCellError(IllegalMoveError):
    reason = "intersection is occupied"


class SuicideMoveError(IllegalMoveError):
    reason = "suicide move"


class OutOfBoundsError(IllegalMoveError):
    reason = "point is off the board"
