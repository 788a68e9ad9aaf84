"""Serialization of points, positions and moves.

Dictionary forms match the saved-data layout: positions are maps of
``"col,row"`` keys to ``"black"`` / ``"white"``, moves are
``{"x", "y", "color", "captures"}`` records. Diagrams are a compact text
form, one line per row, ``X`` black, ``O`` white, ``.`` empty.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from kifudojo.core.enums import Color
from kifudojo.core.move import Move
from kifudojo.core.position import Position
from kifudojo.core.types import Point

_DIAGRAM_CHARS: dict[str, Color | None] = {
    "X": Color.BLACK,
    "B": Color.BLACK,
    "O": Color.WHITE,
    "W": Color.WHITE,
    ".": None,
    "+": None,
}


def point_key(point: Point) -> str:
    """``Point(3, 4)`` -> ``'3,4'``."""
    return f"{point.col},{point.row}"


def parse_point_key(key: str) -> Point:
    """``'3,4'`` -> ``Point(3, 4)``."""
    parts = key.split(",")
    if len(parts) != 2:
        raise ValueError(f"Invalid point key: {key!r}")
    try:
        col, row = (int(p) for p in parts)
    except ValueError:
        raise ValueError(f"Invalid point key: {key!r}") from None
    return Point(col, row)


# -- Positions ----------------------------------------------------------------


def position_to_dict(position: Position) -> dict[str, str]:
    return {point_key(p): str(c) for p, c in position.items()}


def position_from_dict(data: Mapping[str, str], size: int) -> Position:
    if not isinstance(data, Mapping):
        raise ValueError(f"Invalid stone map: {data!r}")
    stones: dict[Point, Color] = {}
    for key, color_text in data.items():
        if not isinstance(color_text, str):
            raise ValueError(f"Invalid stone color at {key!r}: {color_text!r}")
        stones[parse_point_key(key)] = Color.parse(color_text)
    return Position(size, stones)


def position_from_diagram(text: str) -> Position:
    """Parse a square diagram; the board size is the number of rows."""
    rows = ["".join(line.split()) for line in text.strip().splitlines()]
    rows = [r for r in rows if r]
    size = len(rows)
    if size == 0:
        raise ValueError("Empty diagram")

    stones: dict[Point, Color] = {}
    for row, line in enumerate(rows):
        if len(line) != size:
            raise ValueError(
                f"Diagram row {row} has {len(line)} cells, expected {size}"
            )
        for col, ch in enumerate(line):
            try:
                color = _DIAGRAM_CHARS[ch.upper()]
            except KeyError:
                raise ValueError(f"Invalid diagram character {ch!r}") from None
            if color is not None:
                stones[Point(col, row)] = color
    return Position(size, stones)


def position_to_diagram(position: Position) -> str:
    return repr(position)


# -- Moves ----------------------------------------------------------------------


def move_to_dict(move: Move) -> dict[str, Any]:
    return {
        "x": move.point.col,
        "y": move.point.row,
        "color": str(move.color),
        "captures": move.captured,
    }


def move_from_dict(data: Mapping[str, Any]) -> Move:
    try:
        col = int(data["x"])
        row = int(data["y"])
        color = Color.parse(str(data["color"]))
    except KeyError as exc:
        raise ValueError(f"Move record missing field {exc.args[0]!r}") from None
    except (TypeError, ValueError):
        raise ValueError(f"Invalid move record: {dict(data)!r}") from None
    captures = data.get("captures") or 0
    return Move(Point(col, row), color, int(captures))
