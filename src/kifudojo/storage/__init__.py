"""Persistence of saved shapes and game records."""

from kifudojo.storage.library import GAMES_FILE, SHAPES_FILE, Library
from kifudojo.storage.models import GameRecord, SavedShape, new_id

__all__ = [
    "GAMES_FILE",
    "SHAPES_FILE",
    "GameRecord",
    "Library",
    "SavedShape",
    "new_id",
]
