# -*- coding: utf-8 -*-

import logging
import tkinter as tk
from tkinter import ttk
from typing import Optional, Tuple

from forest_focus.domain.models import EngineSnapshot, Mode
from forest_focus.services.audio_service import AudioService
from forest_focus.services.timer_service import TimerService
from forest_focus.ui.ambience_panel import AmbiencePanel
from forest_focus.ui.pomodoro_widget import PomodoroWidget, format_time
from forest_focus.ui.quote_panel import QuotePanel
from forest_focus.ui.settings_panel import SettingsPanel

logger = logging.getLogger(__name__)

APP_TITLE = "Forest Focus"


def window_title(snap: EngineSnapshot) -> str:
    return f"{format_time(snap.remaining_ms)} • {snap.mode.label} • {APP_TITLE}"


class MainWindow:
    def __init__(
        self,
        root: tk.Tk,
        timer_service: TimerService,
        audio_service: AudioService,
    ):
        self.root = root
        self.timer_service = timer_service
        self.audio_service = audio_service

        self.root.title(APP_TITLE)
        self.root.geometry("620x560")

        self._quote_key: Optional[Tuple[Mode, int]] = None
        self._title = ""

        self._build_ui()

        self.root.bind("<Map>", self._on_visibility)
        self.root.bind("<Unmap>", self._on_visibility)
        self.root.protocol("WM_DELETE_WINDOW", self._on_close)

        self._refresh(self.timer_service.get_snapshot())

    def _build_ui(self):
        outer = ttk.Frame(self.root, padding=10)
        outer.pack(fill="both", expand=True)
        outer.columnconfigure(0, weight=1)

        self.quote_panel = QuotePanel(outer)
        self.quote_panel.grid(row=0, column=0, sticky="ew", pady=(0, 8))

        self.ambience = AmbiencePanel(outer, self.audio_service)
        self.ambience.grid(row=1, column=0, sticky="w", pady=(0, 8))

        self.pomodoro = PomodoroWidget(
            outer,
            self.timer_service,
            on_request_refresh=self._refresh,
            on_tick=self._update_title,
        )
        self.pomodoro.grid(row=2, column=0, sticky="nsew")
        outer.rowconfigure(2, weight=1)

        self.settings = SettingsPanel(outer, self.timer_service)
        self.settings.grid(row=3, column=0, sticky="ew", pady=(8, 0))

    def run(self):
        self.root.mainloop()

    # ---- Events ----
    def _on_visibility(self, event=None):
        if event is not None and event.widget is not self.root:
            return
        self.timer_service.notify_visibility_changed()

    def _on_close(self):
        logger.info("closing, saving state")
        self.timer_service.flush()
        self.audio_service.close()
        self.root.destroy()

    # ---- Refresh ----
    def _refresh(self, snap: EngineSnapshot):
        self._update_title(snap)

        key = (snap.mode, snap.session_count)
        if key != self._quote_key:
            self._quote_key = key
            self.quote_panel.refresh(snap.mode)

    def _update_title(self, snap: EngineSnapshot):
        title = window_title(snap)
        if title != self._title:
            self._title = title
            self.root.title(title)
