"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from kifudojo.core.enums import Color
from kifudojo.core.types import Point


@dataclass(frozen=True, slots=True)
class Move:
    """A stone played by *color* at *point*.

    ``captured`` is filled in by move application: the number of enemy
    stones this move removed.
    """

    point: Point
    color: Color
    captured: int = 0

    def __post_init__(self) -> None:
        if self.captured < 0:
            raise ValueError(f"Negative capture count: {self.captured}")

    def __str__(self) -> str:
        base = f"{'B' if self.color == Color.BLACK else 'W'} {self.point}"
        if self.captured:
            base += f" x{self.captured}"
        return base
