# ui/quote_renderer.py
# -*- coding: utf-8 -*-

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from markdown import markdown

from forest_focus.domain.models import Mode


@dataclass(frozen=True)
class QuoteTheme:
    text: str = "#1F3B2C"
    muted: str = "#4B6B57"
    panel: str = "#EAF4EC"
    focus_accent: str = "#2F7D4F"
    break_accent: str = "#C58B3A"


class QuoteRenderer:
    """
    Single responsibility:
    - Turn a quote into a markdown blockquote -> HTML
    - Provide CSS (tkhtml friendly: no flex, no web fonts)
    """

    def __init__(self, theme: Optional[QuoteTheme] = None):
        self.theme = theme or QuoteTheme()

    def to_markdown(self, quote: str, mode: Mode) -> str:
        heading = "Focus" if mode is Mode.FOCUS else "Break"
        text = (quote or "").strip().replace("\n", " ")
        return f"> *{text}*\n\n**{heading}** &middot; Forest Focus"

    def css(self, mode: Mode) -> str:
        t = self.theme
        accent = t.focus_accent if mode is Mode.FOCUS else t.break_accent
        return f"""
        body {{
          font-family: Georgia, "Times New Roman", serif;
          margin: 10px 14px;
          color: {t.text};
          background: {t.panel};
          font-size: 15px;
          line-height: 1.45;
        }}
        blockquote {{
          margin: 0 0 6px 0;
          padding: 4px 0 4px 12px;
          border-left: 4px solid {accent};
        }}
        p {{ margin: 0.3em 0; }}
        strong {{ color: {accent}; }}
        """

    def to_html(self, quote: str, mode: Mode) -> str:
        body = markdown(
            self.to_markdown(quote, mode),
            extensions=["extra", "sane_lists"],
            output_format="html5",
        )
        return f"""
        <html>
          <head>
            <meta charset="utf-8"/>
            <style>{self.css(mode)}</style>
          </head>
          <body>{body}</body>
        </html>
        """
