"""Group discovery and liberty counting."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from typing import TYPE_CHECKING

from kifudojo.core.types import Point, neighbors

if TYPE_CHECKING:
    from kifudojo.core.position import Position


def group_at(position: Position, point: Point) -> frozenset[Point] | None:
    """Maximal same-color chain containing *point*, or ``None`` if empty.

    Breadth-first flood fill over orthogonal neighbours with an explicit
    queue, so board size never affects stack depth.
    """
    color = position.color_at(point)
    if color is None:
        return None

    size = position.size
    visited: set[Point] = {point}
    queue: deque[Point] = deque([point])
    while queue:
        current = queue.popleft()
        for nb in neighbors(current, size):
            if nb not in visited and position.color_at(nb) == color:
                visited.add(nb)
                queue.append(nb)
    return frozenset(visited)


def liberty_points(position: Position, group: Iterable[Point]) -> frozenset[Point]:
    """Distinct empty intersections orthogonally adjacent to *group*."""
    size = position.size
    found: set[Point] = set()
    for point in group:
        for nb in neighbors(point, size):
            if position.is_empty(nb):
                found.add(nb)
    return frozenset(found)


def liberties(position: Position, group: Iterable[Point]) -> int:
    return len(liberty_points(position, group))


def group_and_liberties(
    position: Position, point: Point
) -> tuple[frozenset[Point], int] | None:
    """``(group, liberty_count)`` for the stone on *point*; read-only."""
    group = group_at(position, point)
    if group is None:
        return None
    return group, liberties(position, group)
