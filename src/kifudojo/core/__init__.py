"""Core domain layer - the Go position engine, no external dependencies.

Quick start::

    from kifudojo.core import Color, Point, Position, apply_move, replay

    pos = Position(9)
    pos, move = apply_move(pos, Point(2, 2), Color.BLACK)
    state = replay([move], 9)
    assert state.position == pos
"""

from kifudojo.core.diff import DiffResult, diff
from kifudojo.core.enums import STAR_POINTS, SUPPORTED_SIZES, Color
from kifudojo.core.errors import (
    IllegalMoveError,
    OccupiedCellError,
    OutOfBoundsError,
    SuicideMoveError,
)
from kifudojo.core.groups import group_and_liberties, group_at, liberties
from kifudojo.core.move import Move
from kifudojo.core.notation import (
    move_from_dict,
    move_to_dict,
    parse_point_key,
    point_key,
    position_from_diagram,
    position_from_dict,
    position_to_diagram,
    position_to_dict,
)
from kifudojo.core.position import Position
from kifudojo.core.replay import (
    CaptureTally,
    ReplayState,
    iter_replay,
    replay,
    tally_from_moves,
)
from kifudojo.core.rules import apply_move, captured_by, is_legal, place_stone
from kifudojo.core.types import Point, is_on_board, neighbors

__all__ = [
    # Enums / constants
    "Color",
    "STAR_POINTS",
    "SUPPORTED_SIZES",
    # Types / helpers
    "Point",
    "is_on_board",
    "neighbors",
    # Domain objects
    "CaptureTally",
    "DiffResult",
    "Move",
    "Position",
    "ReplayState",
    # Errors
    "IllegalMoveError",
    "OccupiedCellError",
    "OutOfBoundsError",
    "SuicideMoveError",
    # Engine operations
    "apply_move",
    "captured_by",
    "diff",
    "group_and_liberties",
    "group_at",
    "is_legal",
    "iter_replay",
    "liberties",
    "place_stone",
    "replay",
    "tally_from_moves",
    # Notation
    "move_from_dict",
    "move_to_dict",
    "parse_point_key",
    "point_key",
    "position_from_diagram",
    "position_from_dict",
    "position_to_diagram",
    "position_to_dict",
]
