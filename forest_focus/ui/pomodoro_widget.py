# -*- coding: utf-8 -*-

import tkinter as tk
from tkinter import ttk
from typing import Callable, Optional

from forest_focus.domain.models import EngineSnapshot, Mode
from forest_focus.services.timer_service import TimerService
from forest_focus.ui.plant_canvas import PlantCanvas

FOCUS_COLOR = "#2F7D4F"
BREAK_COLOR = "#C58B3A"
RING_TRACK = "#CFE3D4"


def format_time(ms) -> str:
    sec = max(0, int(ms)) // 1000
    m = sec // 60
    s = sec % 60
    return f"{m:02d}:{s:02d}"


class PomodoroWidget(ttk.Frame):
    def __init__(
        self,
        master,
        timer_service: TimerService,
        on_request_refresh: Optional[Callable[[EngineSnapshot], None]] = None,
        on_tick: Optional[Callable[[EngineSnapshot], None]] = None,
        ring_size: int = 260,
        ring_width: int = 12,
    ):
        super().__init__(master)

        self.timer_service = timer_service
        self.on_request_refresh = on_request_refresh
        self.on_tick = on_tick
        self.ring_size = ring_size
        self.ring_width = ring_width

        self._build_ui()

        # wire callbacks from service -> widget UI
        self.timer_service.set_on_tick(self._on_tick)
        self.timer_service.set_on_phase_change(self._on_phase_change)
        self.timer_service.set_on_state_change(self._on_state_change)

        # initial render
        self._render(self.timer_service.get_snapshot())
        self._update_buttons()

    def _build_ui(self):
        self.columnconfigure(0, weight=1)
        self.columnconfigure(1, weight=1)

        self.ring = tk.Canvas(
            self,
            width=self.ring_size,
            height=self.ring_size,
            highlightthickness=0,
        )
        self.ring.grid(row=0, column=0, padx=(0, 12))

        pad = self.ring_width / 2 + 2
        box = (pad, pad, self.ring_size - pad, self.ring_size - pad)
        self.ring.create_oval(*box, outline=RING_TRACK, width=self.ring_width)
        self._arc = self.ring.create_arc(
            *box,
            start=90,
            extent=0,
            style="arc",
            outline=FOCUS_COLOR,
            width=self.ring_width,
        )
        mid = self.ring_size / 2
        self._time_text = self.ring.create_text(
            mid, mid - 8, text="25:00", font=("Sans", 36, "bold")
        )
        self._mode_text = self.ring.create_text(
            mid, mid + 34, text="Focus", font=("Sans", 12)
        )

        self.plant = PlantCanvas(self)
        self.plant.grid(row=0, column=1)

        self.count_var = tk.StringVar(value="Sessions: 0")
        ttk.Label(self, textvariable=self.count_var).grid(
            row=1, column=0, columnspan=2, pady=(8, 4)
        )

        btns = ttk.Frame(self)
        btns.grid(row=2, column=0, columnspan=2)

        self.start_btn = ttk.Button(btns, text="Start", command=self._start)
        self.pause_btn = ttk.Button(btns, text="Pause", command=self._pause)
        self.resume_btn = ttk.Button(btns, text="Resume", command=self._resume)
        self.reset_btn = ttk.Button(btns, text="Reset", command=self._reset)

        self.start_btn.grid(row=0, column=0, padx=(0, 6))
        self.pause_btn.grid(row=0, column=1, padx=(0, 6))
        self.resume_btn.grid(row=0, column=2, padx=(0, 6))
        self.reset_btn.grid(row=0, column=3)

    def _update_buttons(self):
        snap = self.timer_service.get_snapshot()

        # Start while stopped, Pause while running; Resume only with time left
        if snap.is_running:
            self.start_btn.state(["disabled"])
            self.pause_btn.state(["!disabled"])
            self.resume_btn.state(["disabled"])
        else:
            self.start_btn.state(["!disabled"])
            self.pause_btn.state(["disabled"])
            if 0 < snap.remaining_ms < snap.total_ms:
                self.resume_btn.state(["!disabled"])
            else:
                self.resume_btn.state(["disabled"])

    def _start(self):
        self.timer_service.start()

    def _pause(self):
        self.timer_service.pause()

    def _resume(self):
        self.timer_service.resume()

    def _reset(self):
        self.timer_service.reset()

    # ---- Service callbacks ----
    def _on_tick(self, snap: EngineSnapshot):
        self._render(snap)
        if self.on_tick:
            self.on_tick(snap)

    def _on_phase_change(self, snap: EngineSnapshot):
        self._render(snap)
        self._update_buttons()
        if self.on_request_refresh:
            self.on_request_refresh(snap)

    def _on_state_change(self, snap: EngineSnapshot):
        self._render(snap)
        self._update_buttons()
        if self.on_request_refresh:
            self.on_request_refresh(snap)

    def _render(self, snap: EngineSnapshot):
        color = FOCUS_COLOR if snap.mode is Mode.FOCUS else BREAK_COLOR
        self.ring.itemconfigure(
            self._arc, extent=-359.9 * snap.progress, outline=color
        )
        self.ring.itemconfigure(self._time_text, text=format_time(snap.remaining_ms))
        self.ring.itemconfigure(self._mode_text, text=snap.mode.label, fill=color)
        self.count_var.set(f"Sessions: {snap.session_count}")
        self.plant.render(snap.species, snap.progress, snap.mode)
