"""Move application: placement, capture resolution and suicide rejection.

Simplified rule set: opponent groups left without liberties are removed,
then the mover's own group must have at least one liberty. There is no
ko, superko or scoring.
"""

from __future__ import annotations

import logging

from kifudojo.core.enums import Color
from kifudojo.core.errors import (
    IllegalMoveError,
    OccupiedCellError,
    OutOfBoundsError,
    SuicideMoveError,
)
from kifudojo.core.groups import group_at, liberties
from kifudojo.core.move import Move
from kifudojo.core.position import Position
from kifudojo.core.types import Point, neighbors

_LOGGER = logging.getLogger(__name__)


def _remove_dead_neighbors(position: Position, point: Point, color: Color) -> int:
    """Remove every opponent group next to *point* that has no liberties."""
    opponent = color.opposite
    captured = 0
    for nb in neighbors(point, position.size):
        # A group spanning several neighbours is gone after its first visit.
        if position.color_at(nb) != opponent:
            continue
        group = group_at(position, nb)
        if group is not None and liberties(position, group) == 0:
            for stone in group:
                position.remove(stone)
            captured += len(group)
    return captured


def place_stone(position: Position, point: Point, color: Color) -> int:
    """Put *color* on *point* in place and resolve captures.

    Returns the number of opponent stones removed. Neither occupancy nor
    suicide is checked; this is the capture mechanic shared by live play
    and replay of already-accepted moves.
    """
    if not position.contains(point):
        raise OutOfBoundsError(point, color)
    position.set(point, color)
    return _remove_dead_neighbors(position, point, color)


def apply_move(position: Position, point: Point, color: Color) -> tuple[Position, Move]:
    """Play *color* at *point* and return ``(new_position, move)``.

    *position* itself is never modified, so a rejected move leaves the
    caller's position exactly as it was.

    Raises:
        OutOfBoundsError: *point* is not on the board.
        OccupiedCellError: *point* already holds a stone.
        SuicideMoveError: the mover's group has no liberties after captures.
    """
    if not position.contains(point):
        raise OutOfBoundsError(point, color)
    if not position.is_empty(point):
        raise OccupiedCellError(point, color)

    board = position.copy()
    captured = place_stone(board, point, color)

    own_group = group_at(board, point)
    assert own_group is not None
    if liberties(board, own_group) == 0:
        raise SuicideMoveError(point, color)

    if captured:
        _LOGGER.debug("%s at %s captured %d stone(s)", color, point, captured)
    return board, Move(point, color, captured)


def captured_by(position: Position, point: Point, color: Color) -> frozenset[Point]:
    """Opponent stones that playing *color* at *point* would remove.

    Preview helper for highlighting dead groups before a move is confirmed.
    """
    if not position.contains(point):
        raise OutOfBoundsError(point, color)
    if not position.is_empty(point):
        raise OccupiedCellError(point, color)
    board = position.copy()
    place_stone(board, point, color)
    opponent = color.opposite
    return frozenset(
        p for p, c in position.items() if c == opponent and board.is_empty(p)
    )


def is_legal(position: Position, point: Point, color: Color) -> bool:
    try:
        apply_move(position, point, color)
    except IllegalMoveError:
        return False
    return True
