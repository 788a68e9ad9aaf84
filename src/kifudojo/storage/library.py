"""JSON-file library of saved shapes and game records."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Any, TypeVar

from kifudojo.storage.models import GameRecord, SavedShape

_LOGGER = logging.getLogger(__name__)

SHAPES_FILE = "shapes.json"
GAMES_FILE = "games.json"

_T = TypeVar("_T")


class Library:
    """Loads and saves the two collections under a data directory.

    An unreadable file is logged and treated as an empty collection; a
    single malformed entry is skipped without discarding the rest.
    """

    __slots__ = ("_root",)

    def __init__(self, root: Path | str) -> None:
        self._root = Path(root).expanduser()

    @property
    def root(self) -> Path:
        return self._root

    @property
    def shapes_path(self) -> Path:
        return self._root / SHAPES_FILE

    @property
    def games_path(self) -> Path:
        return self._root / GAMES_FILE

    # -- Shapes -------------------------------------------------------------

    def load_shapes(self) -> list[SavedShape]:
        return self._load(self.shapes_path, SavedShape.from_dict)

    def save_shapes(self, shapes: Iterable[SavedShape]) -> None:
        self._save(self.shapes_path, [s.to_dict() for s in shapes])

    def add_shape(self, shape: SavedShape) -> list[SavedShape]:
        shapes = self.load_shapes()
        shapes.append(shape)
        self.save_shapes(shapes)
        return shapes

    def delete_shape(self, shape_id: str) -> list[SavedShape]:
        shapes = [s for s in self.load_shapes() if s.id != shape_id]
        self.save_shapes(shapes)
        return shapes

    def find_shape(self, shape_id: str) -> SavedShape | None:
        return next((s for s in self.load_shapes() if s.id == shape_id), None)

    # -- Games --------------------------------------------------------------

    def load_games(self) -> list[GameRecord]:
        return self._load(self.games_path, GameRecord.from_dict)

    def save_games(self, games: Iterable[GameRecord]) -> None:
        self._save(self.games_path, [g.to_dict() for g in games])

    def add_game(self, record: GameRecord) -> list[GameRecord]:
        games = self.load_games()
        games.append(record)
        self.save_games(games)
        return games

    def delete_game(self, record_id: str) -> list[GameRecord]:
        games = [g for g in self.load_games() if g.id != record_id]
        self.save_games(games)
        return games

    # -- Internal -----------------------------------------------------------

    def _load(self, path: Path, parse: Callable[[dict[str, Any]], _T]) -> list[_T]:
        if not path.is_file():
            return []
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            _LOGGER.error("Failed to load %s: %s", path, exc)
            return []
        if not isinstance(raw, list):
            _LOGGER.error("Failed to load %s: expected a list", path)
            return []

        items: list[_T] = []
        for index, entry in enumerate(raw):
            if not isinstance(entry, dict):
                _LOGGER.warning("Skipping entry %d in %s: not an object", index, path)
                continue
            try:
                items.append(parse(entry))
            except (TypeError, ValueError) as exc:
                _LOGGER.warning("Skipping entry %d in %s: %s", index, path, exc)
        return items

    def _save(self, path: Path, payload: list[dict[str, Any]]) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp = path.with_suffix(path.suffix + ".tmp")
        tmp.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        tmp.replace(path)
