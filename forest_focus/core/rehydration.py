# -*- coding: utf-8 -*-

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from forest_focus.core.config import (
    DEFAULT_BREAK_MINUTES,
    DEFAULT_FOCUS_MINUTES,
    MAX_BREAK_MINUTES,
    MAX_FOCUS_MINUTES,
    is_real_number,
    minutes_to_ms,
)
from forest_focus.domain.models import Mode, SessionConfig, Species

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RehydratedState:
    config: SessionConfig
    mode: Mode
    is_running: bool
    remaining_ms: int
    interval_ms: int
    session_count: int
    species: Species


def pick_species(value: Any = None, rng: Optional[random.Random] = None) -> Species:
    try:
        return Species(value)
    except ValueError:
        return (rng or random).choice(list(Species))


def _number(record: Mapping[str, Any], key: str, default=None):
    value = record.get(key)
    if is_real_number(value):
        return value
    if value is not None:
        logger.debug("ignoring persisted %s=%r", key, value)
    return default


def _mode(value: Any) -> Mode:
    try:
        return Mode(value)
    except ValueError:
        return Mode.FOCUS


def _interval_ms(record: Mapping[str, Any], config: SessionConfig, mode: Mode) -> int:
    max_minutes = MAX_FOCUS_MINUTES if mode is Mode.FOCUS else MAX_BREAK_MINUTES
    interval = _number(record, "intervalMs")
    if interval is not None and 0 < interval <= minutes_to_ms(max_minutes):
        return int(interval)
    return config.total_ms(mode)


def _session_count(value: Any) -> int:
    if is_real_number(value) and value >= 0 and int(value) == value:
        return int(value)
    return 0


def rehydrate(
    record: Optional[Mapping[str, Any]],
    now_wall_ms: int,
    rng: Optional[random.Random] = None,
) -> RehydratedState:
    """
    Rebuild timer state from the last persisted record.

    A running interval is re-estimated from endAt, but never gets more time
    than was last stored. Completions missed while the app was closed are
    not replayed: an interval that ran out is presented as ended, idle.
    """
    if not isinstance(record, Mapping):
        if record is not None:
            logger.warning("persisted state is not an object, using defaults")
        record = {}

    config = SessionConfig.clamped(
        _number(record, "focusMinutes", DEFAULT_FOCUS_MINUTES),
        _number(record, "breakMinutes", DEFAULT_BREAK_MINUTES),
    )
    mode = _mode(record.get("mode"))
    interval_ms = _interval_ms(record, config, mode)

    stored_ms = _number(record, "remainingMs")
    if stored_ms is None or stored_ms < 0:
        stored_ms = interval_ms

    is_running = record.get("isRunning") is True
    end_at = _number(record, "endAt")

    if is_running and end_at is not None:
        estimated_ms = max(0, end_at - now_wall_ms)
        remaining_ms = min(max(estimated_ms, 0), max(stored_ms, estimated_ms))
    else:
        # no endAt: elapsed time is unknown, come back paused
        remaining_ms = stored_ms
        is_running = False

    remaining_ms = int(max(0, min(interval_ms, remaining_ms)))
    if remaining_ms == 0:
        is_running = False

    return RehydratedState(
        config=config,
        mode=mode,
        is_running=is_running,
        remaining_ms=remaining_ms,
        interval_ms=interval_ms,
        session_count=_session_count(record.get("sessionCount")),
        species=pick_species(record.get("species"), rng),
    )
