# -*- coding: utf-8 -*-

from __future__ import annotations

from typing import Any, Callable, Optional

from forest_focus.core.config import clamp01
from forest_focus.core.frame_loop import FrameScheduler, mono_ms


class SessionClock:
    """
    Countdown clock for one interval (no Tkinter).

    Time is measured between frames with a monotonic source, so wall-clock
    adjustments never move the countdown. Frames come from the injected
    FrameScheduler and are only requested while the clock is running.
    """

    def __init__(
        self,
        scheduler: FrameScheduler,
        total_ms: int,
        remaining_ms: Optional[int] = None,
        now_ms: Callable[[], int] = mono_ms,
    ):
        self._scheduler = scheduler
        self._now_ms = now_ms

        self._total_ms = max(0, int(total_ms))
        if remaining_ms is None:
            remaining_ms = self._total_ms
        self._remaining_ms = max(0, min(self._total_ms, remaining_ms))
        self._is_running = False

        # frame-loop bookkeeping, private to this instance
        self._last_tick_ms: Optional[int] = None
        self._frame_handle: Any = None

        self._on_tick: Optional[Callable[[], None]] = None
        self._on_expire: Optional[Callable[[], None]] = None

    # ----- Callbacks -----
    def set_on_tick(self, fn: Callable[[], None]) -> None:
        self._on_tick = fn

    def set_on_expire(self, fn: Callable[[], None]) -> None:
        self._on_expire = fn

    # ----- Read-only state -----
    @property
    def remaining_ms(self):
        return self._remaining_ms

    @property
    def total_ms(self) -> int:
        return self._total_ms

    @property
    def is_running(self) -> bool:
        return self._is_running

    @property
    def is_scheduled(self) -> bool:
        return self._frame_handle is not None

    @property
    def progress(self) -> float:
        if not self._total_ms:
            return 0.0
        return clamp01(1 - self._remaining_ms / self._total_ms)

    # ----- Controls -----
    def start(self) -> None:
        # a finished (or never started) interval restarts full-length
        if self._remaining_ms <= 0:
            self._remaining_ms = self._total_ms
        self._is_running = True
        self._ensure_loop()

    def pause(self) -> None:
        self._is_running = False
        self._stop_loop()

    def resume(self) -> None:
        if self._is_running or self._remaining_ms <= 0:
            return
        self._is_running = True
        self._ensure_loop()

    def reset(self, total_ms: Optional[int] = None) -> None:
        self._stop_loop()
        self._is_running = False
        if total_ms is not None:
            self._total_ms = max(0, int(total_ms))
        self._remaining_ms = self._total_ms

    def restart_interval(self, total_ms: int) -> None:
        """Begin a new interval without touching the running flag."""
        self._total_ms = max(0, int(total_ms))
        self._remaining_ms = self._total_ms
        if self._last_tick_ms is not None:
            self._last_tick_ms = self._now_ms()

    def set_idle_remaining(self, total_ms: int) -> bool:
        if self._is_running:
            return False
        self._total_ms = max(0, int(total_ms))
        self._remaining_ms = self._total_ms
        return True

    def reanchor(self) -> None:
        """Drop time elapsed since the last frame (window hidden / shown)."""
        if self._last_tick_ms is not None:
            self._last_tick_ms = self._now_ms()

    def tick(self, delta_ms) -> bool:
        """
        Spend delta_ms of the interval.
        Returns True only when remaining went from positive to zero.
        """
        if delta_ms <= 0:
            return False
        prev = self._remaining_ms
        self._remaining_ms = max(0, prev - delta_ms)
        return prev > 0 and self._remaining_ms == 0

    # ----- Frame loop -----
    def _ensure_loop(self) -> None:
        if self._frame_handle is not None:
            return
        self._last_tick_ms = self._now_ms()
        self._frame_handle = self._scheduler.request_frame(self._on_frame)

    def _stop_loop(self) -> None:
        if self._frame_handle is not None:
            self._scheduler.cancel_frame(self._frame_handle)
            self._frame_handle = None
        self._last_tick_ms = None

    def _on_frame(self) -> None:
        self._frame_handle = None
        if not self._is_running:
            return

        now = self._now_ms()
        prev = self._last_tick_ms if self._last_tick_ms is not None else now
        self._last_tick_ms = now

        if self.tick(now - prev) and self._on_expire:
            self._on_expire()

        if self._on_tick:
            self._on_tick()

        # listeners may have paused, reset or restarted the loop themselves
        if self._is_running and self._frame_handle is None:
            self._frame_handle = self._scheduler.request_frame(self._on_frame)
