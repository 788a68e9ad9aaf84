"""ReplayCursor - step through a recorded game one ply at a time."""

from __future__ import annotations

from collections.abc import Sequence

from kifudojo.core.move import Move
from kifudojo.core.replay import ReplayState, replay
from kifudojo.storage.models import GameRecord


class ReplayCursor:
    """Seekable view of a move list.

    ``ply`` counts the moves shown: 0 is the empty board, ``len(moves)``
    the final position. Every seek rebuilds the board from scratch.
    """

    __slots__ = ("_moves", "_size", "_state")

    def __init__(self, moves: Sequence[Move], size: int) -> None:
        self._moves: tuple[Move, ...] = tuple(moves)
        self._size = size
        self._state = replay(self._moves, size, 0)

    @classmethod
    def from_record(cls, record: GameRecord) -> ReplayCursor:
        return cls(record.moves, record.size)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def ply(self) -> int:
        return self._state.ply

    @property
    def length(self) -> int:
        return len(self._moves)

    @property
    def state(self) -> ReplayState:
        return self._state

    @property
    def at_start(self) -> bool:
        return self.ply == 0

    @property
    def at_end(self) -> bool:
        return self.ply == len(self._moves)

    # ── Navigation ───────────────────────────────────────────────────────

    def seek(self, ply: int) -> ReplayState:
        """Jump to *ply*, clamped to the game's range."""
        ply = max(0, min(ply, len(self._moves)))
        if ply != self._state.ply:
            self._state = replay(self._moves, self._size, ply)
        return self._state

    def step_forward(self) -> ReplayState:
        return self.seek(self.ply + 1)

    def step_back(self) -> ReplayState:
        return self.seek(self.ply - 1)

    def to_start(self) -> ReplayState:
        return self.seek(0)

    def to_end(self) -> ReplayState:
        return self.seek(len(self._moves))
