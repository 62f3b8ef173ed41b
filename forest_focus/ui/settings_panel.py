# -*- coding: utf-8 -*-

import tkinter as tk
from tkinter import ttk

from forest_focus.core.config import (
    MAX_BREAK_MINUTES,
    MAX_FOCUS_MINUTES,
    MIN_BREAK_MINUTES,
    MIN_FOCUS_MINUTES,
)
from forest_focus.domain.models import EngineSnapshot
from forest_focus.services.timer_service import TimerService


def _parse_minutes(text: str):
    """Best effort number; anything else is handed on and clamped later."""
    try:
        value = float(text.strip())
    except ValueError:
        return text
    return int(value) if value.is_integer() else value


class SettingsPanel(ttk.Labelframe):
    def __init__(self, master, timer_service: TimerService):
        super().__init__(master, text="Durations", padding=10)
        self.timer_service = timer_service

        self.focus_var = tk.StringVar(value=str(timer_service.focus_minutes))
        self.break_var = tk.StringVar(value=str(timer_service.break_minutes))
        self.note_var = tk.StringVar(value="")

        ttk.Label(self, text="Focus (min)").grid(row=0, column=0, sticky="w")
        ttk.Spinbox(
            self,
            from_=MIN_FOCUS_MINUTES,
            to=MAX_FOCUS_MINUTES,
            textvariable=self.focus_var,
            width=6,
        ).grid(row=0, column=1, padx=(6, 12))

        ttk.Label(self, text="Break (min)").grid(row=0, column=2, sticky="w")
        ttk.Spinbox(
            self,
            from_=MIN_BREAK_MINUTES,
            to=MAX_BREAK_MINUTES,
            textvariable=self.break_var,
            width=6,
        ).grid(row=0, column=3, padx=(6, 12))

        ttk.Button(self, text="Apply", command=self._apply).grid(row=0, column=4)
        ttk.Label(self, textvariable=self.note_var, foreground="#4B6B57").grid(
            row=1, column=0, columnspan=5, sticky="w", pady=(6, 0)
        )

    def _apply(self):
        self.timer_service.set_durations(
            _parse_minutes(self.focus_var.get()),
            _parse_minutes(self.break_var.get()),
        )
        if self.timer_service.is_running:
            self.note_var.set("Applies from the next interval.")
        else:
            self.note_var.set("")
        self.sync(self.timer_service.get_snapshot())

    def sync(self, snap: EngineSnapshot):
        # show the clamped values back to the user
        self.focus_var.set(str(snap.focus_minutes))
        self.break_var.set(str(snap.break_minutes))
