# -*- coding: utf-8 -*-

import math

DEFAULT_FOCUS_MINUTES = 25
DEFAULT_BREAK_MINUTES = 5

MIN_FOCUS_MINUTES = 5
MAX_FOCUS_MINUTES = 120
MIN_BREAK_MINUTES = 1
MAX_BREAK_MINUTES = 60

# ~60 fps; tkinter has no vsync callback so after() stands in for it
FRAME_INTERVAL_MS = 16

# max one store write per second while the clock is ticking
PERSIST_INTERVAL_MS = 1000

STATE_KEY = "forest_focus_state_v1"

DEFAULT_VOLUME = 0.6
AMBIENT_GAIN = 0.25


def is_real_number(value) -> bool:
    if isinstance(value, bool):
        return False
    if not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def clamp(value, lo, hi):
    """
    Clamp value into [lo, hi].
    Anything that is not a finite number maps to lo.
    """
    if not is_real_number(value):
        return lo
    return max(lo, min(hi, value))


def clamp01(value: float) -> float:
    if not is_real_number(value):
        return 0.0
    return max(0.0, min(1.0, float(value)))


def minutes_to_ms(minutes) -> int:
    return int(round(minutes * 60 * 1000))


def clamp_focus_minutes(value):
    return clamp(value, MIN_FOCUS_MINUTES, MAX_FOCUS_MINUTES)


def clamp_break_minutes(value):
    return clamp(value, MIN_BREAK_MINUTES, MAX_BREAK_MINUTES)
