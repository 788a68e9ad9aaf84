"""ShapeEditor - free-form placement of stones for building drill targets."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from kifudojo.core.enums import SUPPORTED_SIZES, Color
from kifudojo.core.position import Position
from kifudojo.core.types import Point
from kifudojo.storage.models import SavedShape, new_id

PositionCallback = Callable[[Position], None]
PlacedCallback = Callable[[Point, Color], None]


@dataclass
class EditorEvents:
    on_changed: list[PositionCallback] = field(default_factory=list)
    on_stone_placed: list[PlacedCallback] = field(default_factory=list)


class ShapeEditor:
    """Toggle stones on and off; no captures, no legality checks."""

    __slots__ = ("_position", "tool_color", "events")

    def __init__(self, size: int = 19, tool_color: Color = Color.BLACK) -> None:
        _check_size(size)
        self._position = Position(size)
        self.tool_color = tool_color
        self.events = EditorEvents()

    @property
    def position(self) -> Position:
        return self._position

    @property
    def size(self) -> int:
        return self._position.size

    def click(self, point: Point) -> bool:
        """Remove the stone on *point*, or place the tool color there.

        Returns ``True`` when a stone was placed.
        """
        placed = self._position.is_empty(point)
        self._replace(self._position.toggled(point, self.tool_color))
        if placed:
            for cb in self.events.on_stone_placed:
                cb(point, self.tool_color)
        return placed

    def set_size(self, size: int) -> None:
        """Switch board size; the board is cleared."""
        _check_size(size)
        self._replace(Position(size))

    def clear(self) -> None:
        self._replace(Position(self.size))

    def load(self, shape: SavedShape) -> None:
        self._replace(shape.position.copy())

    def to_shape(self, name: str) -> SavedShape:
        """Snapshot the board as a named shape."""
        name = name.strip()
        if not name:
            raise ValueError("Shape name must not be empty")
        shape_id = new_id()
        return SavedShape(
            id=shape_id,
            name=name,
            position=self._position.copy(),
            created_at=int(shape_id),
        )

    def _replace(self, position: Position) -> None:
        self._position = position
        for cb in self.events.on_changed:
            cb(position)


def _check_size(size: int) -> None:
    if size not in SUPPORTED_SIZES:
        raise ValueError(f"Unsupported board size: {size}")
