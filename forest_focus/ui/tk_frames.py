# -*- coding: utf-8 -*-

import tkinter as tk
from typing import Callable

from forest_focus.core.config import FRAME_INTERVAL_MS


class TkFrameScheduler:
    """FrameScheduler on top of widget.after()."""

    def __init__(self, widget: tk.Misc, interval_ms: int = FRAME_INTERVAL_MS):
        self.widget = widget
        self.interval_ms = interval_ms

    def request_frame(self, fn: Callable[[], None]) -> str:
        return self.widget.after(self.interval_ms, fn)

    def cancel_frame(self, handle: str) -> None:
        try:
            self.widget.after_cancel(handle)
        except tk.TclError:
            pass
