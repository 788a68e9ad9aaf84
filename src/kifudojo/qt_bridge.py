"""Qt timers that drive the drill countdown and game autoplay."""

from __future__ import annotations

from PyQt6.QtCore import QObject, QTimer, pyqtSignal, pyqtSlot

from kifudojo.game.drill import DrillSession
from kifudojo.game.interfaces import DrillPhase
from kifudojo.game.playback import ReplayCursor

_DRILL_TICK_MS = 250


class DrillTimer(QObject):
    """Polls a :class:`DrillSession` while it is in the MEMORIZE phase."""

    ticked = pyqtSignal(int)  # seconds left
    rebuild_started = pyqtSignal()

    def __init__(self, session: DrillSession, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._session = session
        self._last_shown: int | None = None
        self._timer = QTimer(self)
        self._timer.setInterval(_DRILL_TICK_MS)
        self._timer.timeout.connect(self._on_timeout)

    @property
    def is_active(self) -> bool:
        return self._timer.isActive()

    def start(self) -> None:
        """Begin polling; call right after ``session.start(...)``."""
        self._last_shown = None
        self._on_timeout()
        if self._session.phase == DrillPhase.MEMORIZE:
            self._timer.start()

    def stop(self) -> None:
        self._timer.stop()

    @pyqtSlot()
    def _on_timeout(self) -> None:
        if self._session.phase != DrillPhase.MEMORIZE:
            self._timer.stop()
            return
        phase = self._session.tick()
        if phase == DrillPhase.REBUILD:
            self._timer.stop()
            self.rebuild_started.emit()
            return
        left = self._session.seconds_left
        if left != self._last_shown:
            self._last_shown = left
            self.ticked.emit(left)


class AutoPlayer(QObject):
    """Steps a :class:`ReplayCursor` forward on a fixed interval."""

    ply_changed = pyqtSignal(int)
    finished = pyqtSignal()

    def __init__(
        self,
        cursor: ReplayCursor,
        interval_ms: int = 500,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._cursor = cursor
        self._timer = QTimer(self)
        self._timer.setInterval(interval_ms)
        self._timer.timeout.connect(self._on_timeout)

    @property
    def is_playing(self) -> bool:
        return self._timer.isActive()

    def set_cursor(self, cursor: ReplayCursor) -> None:
        self.stop()
        self._cursor = cursor

    def set_interval(self, interval_ms: int) -> None:
        self._timer.setInterval(interval_ms)

    def play(self) -> None:
        if self._cursor.at_end:
            self.finished.emit()
            return
        self._timer.start()

    def stop(self) -> None:
        self._timer.stop()

    def toggle(self) -> None:
        if self.is_playing:
            self.stop()
        else:
            self.play()

    @pyqtSlot()
    def _on_timeout(self) -> None:
        if self._cursor.at_end:
            self._timer.stop()
            self.finished.emit()
            return
        state = self._cursor.step_forward()
        self.ply_changed.emit(state.ply)
        if self._cursor.at_end:
            self._timer.stop()
            self.finished.emit()
