"""Replay - rebuild a position and capture tally from a move list.

There is no incremental undo anywhere in the package: every historical
board (playback seek, recorder undo) is recomputed by folding the move
prefix from an empty board.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from kifudojo.core.enums import Color
from kifudojo.core.move import Move
from kifudojo.core.position import Position
from kifudojo.core.rules import place_stone

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CaptureTally:
    """Stones captured *by* each color."""

    black: int = 0
    white: int = 0

    def __getitem__(self, color: Color) -> int:
        return self.black if color == Color.BLACK else self.white

    def plus(self, color: Color, count: int) -> CaptureTally:
        if color == Color.BLACK:
            return CaptureTally(self.black + count, self.white)
        return CaptureTally(self.black, self.white + count)

    @property
    def total(self) -> int:
        return self.black + self.white


@dataclass(frozen=True, slots=True)
class ReplayState:
    """Board after the first ``ply`` moves of a game."""

    position: Position
    captures: CaptureTally
    ply: int
    last_move: Move | None = None


def tally_from_moves(moves: Sequence[Move]) -> CaptureTally:
    """Sum the recorded ``captured`` counts per mover."""
    tally = CaptureTally()
    for move in moves:
        tally = tally.plus(move.color, move.captured)
    return tally


def iter_replay(moves: Sequence[Move], size: int) -> Iterator[ReplayState]:
    """Yield the state after every ply, starting with the empty board."""
    board = Position(size)
    tally = CaptureTally()
    yield ReplayState(board.copy(), tally, 0)
    for ply, move in enumerate(moves, start=1):
        if not board.is_empty(move.point):
            _LOGGER.warning("Replay ply %d overwrites a stone at %s", ply, move.point)
        captured = place_stone(board, move.point, move.color)
        if captured != move.captured:
            _LOGGER.warning(
                "Replay ply %d captured %d stone(s), record says %d",
                ply,
                captured,
                move.captured,
            )
        tally = tally.plus(move.color, captured)
        yield ReplayState(board.copy(), tally, ply, move)


def replay(moves: Sequence[Move], size: int, ply: int | None = None) -> ReplayState:
    """Fold the first *ply* moves (all of them when ``None``) onto an empty board.

    Captures are recomputed from the accumulating position rather than read
    from the records, so the same prefix always yields the same result.
    """
    if ply is None:
        ply = len(moves)
    if not 0 <= ply <= len(moves):
        raise ValueError(f"Ply {ply} outside 0..{len(moves)}")

    *_, state = iter_replay(moves[:ply], size)
    return state
