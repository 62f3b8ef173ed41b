# -*- coding: utf-8 -*-

import random
from typing import Optional

from forest_focus.domain.models import Mode

FOCUS_QUOTES = (
    "Grow silently. Let your work be the leaves.",
    "Deep roots allow tall trees.",
    "Focus: one ring, one leaf, one moment.",
    "Small steps become forests.",
    "Breathe in calm, breathe out distraction.",
    "The forest doesn't hurry, yet everything is accomplished.",
    "Tend to your attention like a garden.",
    "Stay present. You are planting your future.",
    "Quiet the noise; hear the wind in the leaves.",
)

BREAK_QUOTES = (
    "Rest is part of growth.",
    "Let your mind wander like leaves on a breeze.",
    "Unwind. The forest watches over you.",
    "Breathe. You are enough.",
    "Stretch gently. Roots deepen in stillness.",
    "Sip water like rain on soil.",
    "Relax shoulders; soften the gaze.",
    "The pause nourishes the next step.",
)


def random_quote(mode: Mode = Mode.FOCUS, rng: Optional[random.Random] = None) -> str:
    quotes = BREAK_QUOTES if mode is Mode.BREAK else FOCUS_QUOTES
    return (rng or random).choice(quotes)
