"""DrillSession - memorize a saved shape, rebuild it, get graded."""

from __future__ import annotations

import logging
import random
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from kifudojo.core.diff import DiffResult, diff
from kifudojo.core.enums import Color
from kifudojo.core.position import Position
from kifudojo.core.types import Point
from kifudojo.game.countdown import Countdown
from kifudojo.game.interfaces import DrillPhase
from kifudojo.storage.models import SavedShape

_LOGGER = logging.getLogger(__name__)

PhaseCallback = Callable[[DrillPhase], None]
FeedbackCallback = Callable[[DiffResult], None]


@dataclass
class DrillEvents:
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)
    on_feedback: list[FeedbackCallback] = field(default_factory=list)


class DrillSession:
    """Drill state machine: IDLE -> MEMORIZE -> REBUILD -> FEEDBACK.

    The host calls :meth:`tick` periodically while memorizing; once the
    countdown has run out the board is emptied for the rebuild.
    """

    __slots__ = (
        "_phase",
        "_shape",
        "_target",
        "_position",
        "_feedback",
        "_countdown",
        "_memorize_seconds",
        "tool_color",
        "events",
    )

    def __init__(self, memorize_seconds: float = 5.0) -> None:
        self._phase = DrillPhase.IDLE
        self._shape: SavedShape | None = None
        self._target: Position | None = None
        self._position: Position | None = None
        self._feedback: DiffResult | None = None
        self._countdown = Countdown(memorize_seconds)
        self._memorize_seconds = memorize_seconds
        self.tool_color = Color.BLACK
        self.events = DrillEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def phase(self) -> DrillPhase:
        return self._phase

    @property
    def shape(self) -> SavedShape | None:
        return self._shape

    @property
    def target(self) -> Position | None:
        return self._target

    @property
    def position(self) -> Position | None:
        """The board currently shown to the user."""
        return self._position

    @property
    def feedback(self) -> DiffResult | None:
        return self._feedback

    @property
    def countdown(self) -> Countdown:
        return self._countdown

    @property
    def seconds_left(self) -> int:
        if self._phase != DrillPhase.MEMORIZE:
            return 0
        return self._countdown.seconds_left

    # ── Transitions ──────────────────────────────────────────────────────

    def start(self, shape: SavedShape) -> None:
        """Show *shape* and start the memorization countdown."""
        self._shape = shape
        self._target = shape.position.copy()
        self._position = shape.position.copy()
        self._feedback = None
        self._countdown.restart(self._memorize_seconds)
        _LOGGER.debug("Drill started on %r (%d stones)", shape.name, len(shape.position))
        self._set_phase(DrillPhase.MEMORIZE)

    def start_random(
        self, shapes: Sequence[SavedShape], rng: random.Random | None = None
    ) -> SavedShape:
        if not shapes:
            raise ValueError("No saved shapes to drill")
        shape = (rng or random).choice(shapes)
        self.start(shape)
        return shape

    def tick(self) -> DrillPhase:
        """Advance to REBUILD once the countdown has expired."""
        if self._phase == DrillPhase.MEMORIZE and self._countdown.is_expired():
            self.begin_rebuild()
        return self._phase

    def begin_rebuild(self) -> None:
        """Hide the target and hand the empty board to the user."""
        if self._phase != DrillPhase.MEMORIZE or self._target is None:
            return
        self._countdown.stop()
        self._position = Position(self._target.size)
        self._set_phase(DrillPhase.REBUILD)

    def click(self, point: Point) -> bool:
        """Toggle a stone while rebuilding. Ignored in every other phase."""
        if self._phase != DrillPhase.REBUILD or self._position is None:
            return False
        self._position = self._position.toggled(point, self.tool_color)
        return True

    def clear(self) -> None:
        if self._phase == DrillPhase.REBUILD and self._position is not None:
            self._position = Position(self._position.size)

    def check(self) -> DiffResult | None:
        """Grade the rebuilt board; ``None`` outside the REBUILD phase."""
        if self._phase != DrillPhase.REBUILD:
            return None
        assert self._target is not None and self._position is not None
        result = diff(self._target, self._position)
        self._feedback = result
        _LOGGER.debug(
            "Drill checked: %d correct, %d missing, %d extra",
            len(result.correct),
            len(result.missing),
            len(result.extra),
        )
        self._set_phase(DrillPhase.FEEDBACK)
        for cb in self.events.on_feedback:
            cb(result)
        return result

    def retry(self) -> bool:
        """Restart the drill on the last shape."""
        if self._shape is None:
            return False
        self.start(self._shape)
        return True

    def end(self) -> None:
        """Back to IDLE; the last shape is remembered for :meth:`retry`."""
        self._countdown.stop()
        self._target = None
        self._position = None
        self._feedback = None
        self._set_phase(DrillPhase.IDLE)

    # ── Internal ─────────────────────────────────────────────────────────

    def _set_phase(self, phase: DrillPhase) -> None:
        if phase == self._phase and phase != DrillPhase.MEMORIZE:
            return
        self._phase = phase
        for cb in self.events.on_phase_changed:
            cb(phase)
