"""Saved shapes and game records, with their JSON dictionary forms."""

from __future__ import annotations

import time
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from kifudojo.core.enums import SUPPORTED_SIZES
from kifudojo.core.move import Move
from kifudojo.core.notation import (
    move_from_dict,
    move_to_dict,
    position_from_dict,
    position_to_dict,
)
from kifudojo.core.position import Position
from kifudojo.core.replay import CaptureTally, replay


_last_id = 0


def new_id() -> str:
    """Millisecond timestamp id, bumped past the previous one on a clash."""
    global _last_id
    _last_id = max(time.time_ns() // 1_000_000, _last_id + 1)
    return str(_last_id)


def _parse_size(data: Mapping[str, Any]) -> int:
    try:
        size = int(data["size"])
    except KeyError:
        raise ValueError("Record missing field 'size'") from None
    except (TypeError, ValueError):
        raise ValueError(f"Invalid board size: {data['size']!r}") from None
    if size not in SUPPORTED_SIZES:
        raise ValueError(f"Unsupported board size: {size}")
    return size


@dataclass(slots=True)
class SavedShape:
    """A named target position for the memory drill."""

    id: str
    name: str
    position: Position
    created_at: int = 0

    @property
    def size(self) -> int:
        return self.position.size

    @property
    def stone_count(self) -> int:
        return len(self.position)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "size": self.size,
            "stones": position_to_dict(self.position),
            "createdAt": self.created_at,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SavedShape:
        size = _parse_size(data)
        try:
            shape_id = str(data["id"])
            name = str(data["name"])
        except KeyError as exc:
            raise ValueError(f"Shape missing field {exc.args[0]!r}") from None
        return cls(
            id=shape_id,
            name=name,
            position=position_from_dict(data.get("stones") or {}, size),
            created_at=int(data.get("createdAt") or 0),
        )


@dataclass(slots=True)
class GameRecord:
    """One recorded game: metadata plus the move list it was played with."""

    id: str
    date: str
    size: int
    black_player: str = "Black"
    white_player: str = "White"
    result: str = "?"
    notes: str = ""
    moves: list[Move] = field(default_factory=list)
    final_stones: Position | None = None
    captures: CaptureTally = field(default_factory=CaptureTally)

    def __post_init__(self) -> None:
        if self.final_stones is None:
            self.final_stones = replay(self.moves, self.size).position

    def to_dict(self) -> dict[str, Any]:
        assert self.final_stones is not None
        return {
            "id": self.id,
            "date": self.date,
            "blackPlayer": self.black_player,
            "whitePlayer": self.white_player,
            "size": self.size,
            "result": self.result,
            "notes": self.notes,
            "finalStones": position_to_dict(self.final_stones),
            "moves": [move_to_dict(m) for m in self.moves],
            "captures": {"black": self.captures.black, "white": self.captures.white},
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> GameRecord:
        """Build a record, migrating older layouts.

        Records written before players were split into black/white carry a
        single ``opponent`` field, which becomes the white player.
        """
        size = _parse_size(data)
        if "id" not in data:
            raise ValueError("Game record missing field 'id'")

        moves = [move_from_dict(m) for m in data.get("moves") or []]
        final_raw = data.get("finalStones")
        final_stones = (
            position_from_dict(final_raw, size) if final_raw is not None else None
        )

        captures_raw = data.get("captures")
        if isinstance(captures_raw, Mapping):
            captures = CaptureTally(
                int(captures_raw.get("black") or 0),
                int(captures_raw.get("white") or 0),
            )
        else:
            captures = replay(moves, size).captures

        return cls(
            id=str(data["id"]),
            date=str(data.get("date") or ""),
            size=size,
            black_player=data.get("blackPlayer") or "Black",
            white_player=data.get("whitePlayer") or data.get("opponent") or "White",
            result=data.get("result") or "?",
            notes=data.get("notes") or "",
            moves=moves,
            final_stones=final_stones,
            captures=captures,
        )
