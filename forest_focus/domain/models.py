# -*- coding: utf-8 -*-

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from forest_focus.core.config import (
    DEFAULT_BREAK_MINUTES,
    DEFAULT_FOCUS_MINUTES,
    clamp_break_minutes,
    clamp_focus_minutes,
    minutes_to_ms,
)


class Mode(str, Enum):
    FOCUS = "focus"
    BREAK = "break"

    @property
    def label(self) -> str:
        return "Focus" if self is Mode.FOCUS else "Break"


class Species(str, Enum):
    FERN = "fern"
    SAPLING = "sapling"
    SPROUT = "sprout"
    BAMBOO = "bamboo"


@dataclass(frozen=True)
class SessionConfig:
    focus_minutes: float = DEFAULT_FOCUS_MINUTES
    break_minutes: float = DEFAULT_BREAK_MINUTES

    @classmethod
    def clamped(cls, focus_minutes, break_minutes) -> "SessionConfig":
        return cls(
            focus_minutes=clamp_focus_minutes(focus_minutes),
            break_minutes=clamp_break_minutes(break_minutes),
        )

    def total_ms(self, mode: Mode) -> int:
        minutes = self.focus_minutes if mode is Mode.FOCUS else self.break_minutes
        return minutes_to_ms(minutes)


@dataclass(frozen=True)
class EngineSnapshot:
    mode: Mode
    is_running: bool
    remaining_ms: int
    total_ms: int
    session_count: int
    progress: float
    species: Species
    focus_minutes: float
    break_minutes: float


@dataclass(frozen=True)
class PersistedRecord:
    """Timer half of the durable record (camelCase on disk)."""

    focus_minutes: float
    break_minutes: float
    mode: Mode
    is_running: bool
    remaining_ms: int
    interval_ms: int
    end_at: Optional[int]
    session_count: int
    species: Species
    saved_at: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "focusMinutes": self.focus_minutes,
            "breakMinutes": self.break_minutes,
            "mode": self.mode.value,
            "isRunning": self.is_running,
            "remainingMs": self.remaining_ms,
            "intervalMs": self.interval_ms,
            "endAt": self.end_at,
            "sessionCount": self.session_count,
            "species": self.species.value,
            "savedAt": self.saved_at,
        }
