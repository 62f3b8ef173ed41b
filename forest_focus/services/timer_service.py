# -*- coding: utf-8 -*-

from __future__ import annotations

import logging
import random
from typing import Callable, Optional

from forest_focus.core.config import PERSIST_INTERVAL_MS
from forest_focus.core.frame_loop import FrameScheduler, mono_ms, wall_ms
from forest_focus.core.rehydration import rehydrate
from forest_focus.core.session_clock import SessionClock
from forest_focus.core.session_machine import (
    SessionCompletedListener,
    SessionStateMachine,
)
from forest_focus.domain.models import (
    EngineSnapshot,
    Mode,
    PersistedRecord,
    SessionConfig,
    Species,
)
from forest_focus.storage.repos import StateStore

logger = logging.getLogger(__name__)


class TimerService:
    """
    Orchestrates:
    - SessionConfig (clamped durations)
    - SessionClock countdown and its frame loop
    - SessionStateMachine transitions (focus <-> break)
    - StateStore persistence, rehydration on construction
    - Callbacks for UI
    """

    def __init__(
        self,
        store: StateStore,
        scheduler: FrameScheduler,
        mono_now: Callable[[], int] = mono_ms,
        wall_now: Callable[[], int] = wall_ms,
        rng: Optional[random.Random] = None,
        persist_interval_ms: int = PERSIST_INTERVAL_MS,
    ):
        self.store = store
        self._mono_now = mono_now
        self._wall_now = wall_now
        self._persist_interval_ms = persist_interval_ms
        self._last_persist_ms: Optional[int] = None

        state = rehydrate(store.load(), wall_now(), rng)

        self.config: SessionConfig = state.config
        self._species: Species = state.species

        self.machine = SessionStateMachine(state.mode, state.session_count)
        self.machine.set_on_enter(self._enter_interval)

        self.clock = SessionClock(
            scheduler,
            total_ms=state.interval_ms,
            remaining_ms=state.remaining_ms,
            now_ms=mono_now,
        )
        self.clock.set_on_expire(self._on_expire)
        self.clock.set_on_tick(self._on_frame)

        self._on_tick: Optional[Callable[[EngineSnapshot], None]] = None
        self._on_phase_change: Optional[Callable[[EngineSnapshot], None]] = None
        self._on_state_change: Optional[Callable[[EngineSnapshot], None]] = None

        if state.is_running:
            logger.info(
                "resuming %s interval with %d ms left",
                state.mode.value,
                state.remaining_ms,
            )
            self.clock.start()
        self._persist()

    # ----- Callbacks -----
    def set_on_tick(self, fn: Callable[[EngineSnapshot], None]) -> None:
        self._on_tick = fn

    def set_on_phase_change(self, fn: Callable[[EngineSnapshot], None]) -> None:
        self._on_phase_change = fn

    def set_on_state_change(self, fn: Callable[[EngineSnapshot], None]) -> None:
        self._on_state_change = fn

    def subscribe_session_completed(
        self, fn: SessionCompletedListener
    ) -> Callable[[], None]:
        return self.machine.subscribe(fn)

    def _emit_tick(self) -> None:
        if self._on_tick:
            self._on_tick(self.get_snapshot())

    def _emit_phase_change(self) -> None:
        if self._on_phase_change:
            self._on_phase_change(self.get_snapshot())

    def _emit_state_change(self) -> None:
        if self._on_state_change:
            self._on_state_change(self.get_snapshot())

    # ----- Read-only state -----
    @property
    def mode(self) -> Mode:
        return self.machine.mode

    @property
    def is_running(self) -> bool:
        return self.clock.is_running

    @property
    def remaining_ms(self):
        return self.clock.remaining_ms

    @property
    def total_ms(self) -> int:
        return self.clock.total_ms

    @property
    def session_count(self) -> int:
        return self.machine.session_count

    @property
    def progress(self) -> float:
        return self.clock.progress

    @property
    def species(self) -> Species:
        return self._species

    @property
    def focus_minutes(self):
        return self.config.focus_minutes

    @property
    def break_minutes(self):
        return self.config.break_minutes

    def get_snapshot(self) -> EngineSnapshot:
        return EngineSnapshot(
            mode=self.mode,
            is_running=self.is_running,
            remaining_ms=self.remaining_ms,
            total_ms=self.total_ms,
            session_count=self.session_count,
            progress=self.progress,
            species=self._species,
            focus_minutes=self.config.focus_minutes,
            break_minutes=self.config.break_minutes,
        )

    # ----- Public API -----
    def start(self) -> None:
        self.clock.start()
        logger.debug("start %s, %d ms left", self.mode.value, self.remaining_ms)
        self._changed()

    def pause(self) -> None:
        self.clock.pause()
        self._changed()

    def resume(self) -> None:
        self.clock.resume()
        self._changed()

    def reset(self) -> None:
        self.clock.reset(self.config.total_ms(self.mode))
        self._changed()

    def set_durations(self, focus_minutes, break_minutes) -> None:
        """
        Clamp and store new durations.
        An idle timer shows the new length right away; a running interval
        keeps its length and the change applies from the next interval.
        """
        self.config = SessionConfig.clamped(focus_minutes, break_minutes)
        self.clock.set_idle_remaining(self.config.total_ms(self.mode))
        logger.info(
            "durations set to focus=%s break=%s",
            self.config.focus_minutes,
            self.config.break_minutes,
        )
        self._changed()

    def tick(self, delta_ms) -> None:
        """Spend delta_ms of a running interval, as one frame of the loop would."""
        if not self.is_running:
            return
        if self.clock.tick(delta_ms):
            self._on_expire()
        self._on_frame()

    def notify_visibility_changed(self) -> None:
        # hidden time is discarded, not replayed as one big frame
        self.clock.reanchor()
        self._persist()

    def flush(self) -> None:
        self._persist()

    # ----- Engine internals -----
    def _enter_interval(self, mode: Mode) -> None:
        self.clock.restart_interval(self.config.total_ms(mode))

    def _on_expire(self) -> None:
        self.machine.complete()
        self._persist()
        self._emit_phase_change()

    def _on_frame(self) -> None:
        now = self._mono_now()
        if (
            self._last_persist_ms is None
            or now - self._last_persist_ms >= self._persist_interval_ms
        ):
            self._persist()
        self._emit_tick()

    def _changed(self) -> None:
        self._persist()
        self._emit_state_change()
        self._emit_tick()

    def _persist(self) -> None:
        now = self._wall_now()
        remaining = self.clock.remaining_ms
        record = PersistedRecord(
            focus_minutes=self.config.focus_minutes,
            break_minutes=self.config.break_minutes,
            mode=self.mode,
            is_running=self.is_running,
            remaining_ms=remaining,
            interval_ms=self.clock.total_ms,
            end_at=now + remaining if self.is_running else None,
            session_count=self.session_count,
            species=self._species,
            saved_at=now,
        )
        self.store.save(record.to_dict())
        self._last_persist_ms = self._mono_now()
