"""Abstract interfaces and state enums for the game layer."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto

# ── Drill FSM states ─────────────────────────────────────────────────────────


class DrillPhase(IntEnum):
    """Finite-state-machine states for a memory drill."""

    IDLE = auto()
    MEMORIZE = auto()  # target shown, countdown running
    REBUILD = auto()  # board cleared, user places stones
    FEEDBACK = auto()  # diff shown


# ── Abstract interfaces ─────────────────────────────────────────────────────


class ICountdown(ABC):
    """Interface for the memorization countdown."""

    @abstractmethod
    def start(self) -> None:
        """Start (or resume) counting down."""

    @abstractmethod
    def stop(self) -> None:
        """Pause the countdown."""

    @abstractmethod
    def remaining(self) -> float:
        """Seconds left, never negative."""

    @abstractmethod
    def is_expired(self) -> bool:
        """Has the countdown reached zero?"""
