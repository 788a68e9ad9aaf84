"""Game layer - editor, drill, recorder and playback built on the engine.

Quick start::

    from kifudojo.core import Point
    from kifudojo.game import GameRecorder, ReplayCursor

    rec = GameRecorder(9)
    rec.play(Point(2, 2))
    rec.play(Point(6, 6))
    cursor = ReplayCursor(rec.moves, rec.size)
    cursor.to_end()
"""

from kifudojo.game.countdown import Countdown
from kifudojo.game.drill import DrillEvents, DrillSession
from kifudojo.game.editor import EditorEvents, ShapeEditor
from kifudojo.game.interfaces import DrillPhase, ICountdown
from kifudojo.game.playback import ReplayCursor
from kifudojo.game.recorder import GameRecorder, RecorderEvents

__all__ = [
    # Interfaces
    "DrillPhase",
    "ICountdown",
    # Concrete
    "Countdown",
    "DrillEvents",
    "DrillSession",
    "EditorEvents",
    "GameRecorder",
    "RecorderEvents",
    "ReplayCursor",
    "ShapeEditor",
]
