import random

from forest_focus.domain.models import Mode
from forest_focus.domain.quotes import BREAK_QUOTES, FOCUS_QUOTES, random_quote
from forest_focus.ui.quote_renderer import QuoteRenderer


class TestQuotes:
    def test_pools_by_mode(self):
        rng = random.Random(5)
        for _ in range(20):
            assert random_quote(Mode.FOCUS, rng) in FOCUS_QUOTES
            assert random_quote(Mode.BREAK, rng) in BREAK_QUOTES

    def test_default_is_focus(self):
        assert random_quote() in FOCUS_QUOTES


class TestQuoteRenderer:
    def test_markdown_blockquote(self):
        md = QuoteRenderer().to_markdown("Deep roots allow tall trees.", Mode.FOCUS)
        assert md.startswith("> *Deep roots allow tall trees.*")
        assert "**Focus**" in md

    def test_html(self):
        html = QuoteRenderer().to_html("Rest is part of growth.", Mode.BREAK)
        assert "<blockquote>" in html
        assert "<em>Rest is part of growth.</em>" in html
        assert "<strong>Break</strong>" in html

    def test_accent_follows_mode(self):
        r = QuoteRenderer()
        assert r.theme.break_accent in r.css(Mode.BREAK)
        assert r.theme.focus_accent in r.css(Mode.FOCUS)
