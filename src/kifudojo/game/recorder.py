"""GameRecorder - live recording of a game with automatic captures.

Keeps the move list, whose turn it is, the current board and the capture
tally. Undo drops the last move and rebuilds everything from the
remaining moves; there is no stored inverse of a capture.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date as _date

from kifudojo.core.enums import SUPPORTED_SIZES, Color
from kifudojo.core.errors import IllegalMoveError
from kifudojo.core.move import Move
from kifudojo.core.position import Position
from kifudojo.core.replay import CaptureTally, replay
from kifudojo.core.rules import apply_move
from kifudojo.core.types import Point
from kifudojo.storage.models import GameRecord, new_id

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Move, "GameRecorder"], None]
RejectedCallback = Callable[[IllegalMoveError], None]
UndoCallback = Callable[[Move], None]


@dataclass
class RecorderEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_rejected: list[RejectedCallback] = field(default_factory=list)
    on_undo: list[UndoCallback] = field(default_factory=list)


# ── Recorder ─────────────────────────────────────────────────────────────────


class GameRecorder:
    """Records alternating moves, Black first, on a single board."""

    __slots__ = ("_size", "_moves", "_position", "_captures", "events")

    def __init__(self, size: int = 19) -> None:
        if size not in SUPPORTED_SIZES:
            raise ValueError(f"Unsupported board size: {size}")
        self._size = size
        self._moves: list[Move] = []
        self._position = Position(size)
        self._captures = CaptureTally()
        self.events = RecorderEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def size(self) -> int:
        return self._size

    @property
    def moves(self) -> tuple[Move, ...]:
        return tuple(self._moves)

    @property
    def position(self) -> Position:
        return self._position

    @property
    def captures(self) -> CaptureTally:
        return self._captures

    @property
    def turn(self) -> Color:
        return Color.BLACK if len(self._moves) % 2 == 0 else Color.WHITE

    @property
    def ply_count(self) -> int:
        return len(self._moves)

    @property
    def last_move(self) -> Move | None:
        return self._moves[-1] if self._moves else None

    # ── Recording ────────────────────────────────────────────────────────

    def play(self, point: Point) -> Move | None:
        """Play the side to move at *point*.

        Returns the recorded move, or ``None`` if the move was rejected
        (listeners on ``on_rejected`` receive the reason).
        """
        color = self.turn
        try:
            position, move = apply_move(self._position, point, color)
        except IllegalMoveError as exc:
            _LOGGER.info("Rejected move: %s", exc)
            for cb in self.events.on_rejected:
                cb(exc)
            return None

        self._position = position
        self._moves.append(move)
        self._captures = self._captures.plus(color, move.captured)
        for cb in self.events.on_move:
            cb(move, self)
        return move

    def undo(self) -> Move | None:
        """Drop the last move. Returns it, or ``None`` if nothing to undo."""
        if not self._moves:
            return None
        undone = self._moves.pop()
        state = replay(self._moves, self._size)
        self._position = state.position
        self._captures = state.captures
        for cb in self.events.on_undo:
            cb(undone)
        return undone

    def reset(self, size: int | None = None) -> None:
        """Start over, optionally on a different board size."""
        if size is not None:
            if size not in SUPPORTED_SIZES:
                raise ValueError(f"Unsupported board size: {size}")
            self._size = size
        self._moves.clear()
        self._position = Position(self._size)
        self._captures = CaptureTally()

    # ── Export ───────────────────────────────────────────────────────────

    def to_record(
        self,
        *,
        black_player: str = "",
        white_player: str = "",
        result: str = "",
        notes: str = "",
        date: str | None = None,
    ) -> GameRecord:
        """Package the recorded game with its metadata."""
        black_player = black_player.strip()
        white_player = white_player.strip()
        if not black_player and not white_player:
            raise ValueError("Enter at least one player name")
        return GameRecord(
            id=new_id(),
            date=date or _date.today().isoformat(),
            size=self._size,
            black_player=black_player or "Black",
            white_player=white_player or "White",
            result=result.strip() or "?",
            notes=notes,
            moves=list(self._moves),
            final_stones=self._position.copy(),
            captures=self._captures,
        )
