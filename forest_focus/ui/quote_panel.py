# -*- coding: utf-8 -*-

import logging
import random
import tkinter as tk
from typing import Optional

from tkinterweb import HtmlFrame

from forest_focus.domain.models import Mode
from forest_focus.domain.quotes import random_quote
from forest_focus.ui.quote_renderer import QuoteRenderer

logger = logging.getLogger(__name__)


class QuotePanel(tk.Frame):
    def __init__(
        self,
        master,
        renderer: Optional[QuoteRenderer] = None,
        rng: Optional[random.Random] = None,
    ):
        self.renderer = renderer or QuoteRenderer()
        super().__init__(master, bg=self.renderer.theme.panel, height=96)
        self.pack_propagate(False)
        self._rng = rng
        self.quote = ""

        self.view = HtmlFrame(self, messages_enabled=False, vertical_scrollbar=False)
        self.view.pack(fill="both", expand=True)

    def refresh(self, mode: Mode) -> None:
        self.quote = random_quote(mode, self._rng)
        html = self.renderer.to_html(self.quote, mode)
        try:
            self.view.load_html(html)
        except tk.TclError as e:
            logger.debug("quote render failed: %s", e)
