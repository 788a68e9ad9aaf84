"""Position diffing used to grade a rebuilt board against its target."""

from __future__ import annotations

from dataclasses import dataclass

from kifudojo.core.position import Position
from kifudojo.core.types import Point


@dataclass(frozen=True, slots=True)
class DiffResult:
    """Cell-wise comparison of an actual board against a target.

    A wrong-color stone is in both ``missing`` (the expected stone is
    absent) and ``extra`` (an unwanted stone is present).
    """

    correct: frozenset[Point]
    missing: frozenset[Point]
    extra: frozenset[Point]

    @property
    def is_perfect(self) -> bool:
        return not self.missing and not self.extra

    @property
    def accuracy(self) -> float:
        """Share of target stones reproduced exactly (1.0 for an empty target)."""
        expected = len(self.correct) + len(self.missing)
        if expected == 0:
            return 1.0 if not self.extra else 0.0
        return len(self.correct) / expected


def diff(target: Position, actual: Position) -> DiffResult:
    correct: set[Point] = set()
    missing: set[Point] = set()
    extra: set[Point] = set()

    for point, color in target.items():
        if actual.color_at(point) == color:
            correct.add(point)
        else:
            missing.add(point)

    for point, color in actual.items():
        if target.color_at(point) != color:
            extra.add(point)

    return DiffResult(frozenset(correct), frozenset(missing), frozenset(extra))
