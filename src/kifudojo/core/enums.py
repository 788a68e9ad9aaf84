"""Core enumerations for the Go domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Stone color. Empty intersections have no color at all."""

    BLACK = 0
    WHITE = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()

    @classmethod
    def parse(cls, text: str) -> Color:
        """Parse ``'black'`` / ``'white'`` (case-insensitive)."""
        try:
            return cls[text.strip().upper()]
        except KeyError:
            raise ValueError(f"Invalid stone color: {text!r}") from None


SUPPORTED_SIZES: tuple[int, ...] = (9, 13, 19)

# Hoshi coordinates (col, row) per board size, for board renderers.
STAR_POINTS: dict[int, tuple[tuple[int, int], ...]] = {
    9: ((4, 4), (2, 2), (2, 6), (6, 2), (6, 6)),
    13: ((6, 6), (3, 3), (3, 9), (9, 3), (9, 9)),
    19: (
        (3, 3), (3, 9), (3, 15),
        (9, 3), (9, 9), (9, 15),
        (15, 3), (15, 9), (15, 15),
    ),
}
