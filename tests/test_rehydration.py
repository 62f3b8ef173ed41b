"""Rebuilding timer state from the persisted record."""

import math
import random

import pytest

from forest_focus.core.rehydration import pick_species, rehydrate
from forest_focus.domain.models import Mode, Species

NOW = 1_700_000_000_000


# ---- Helpers ----

def record(**overrides):
    base = {
        "focusMinutes": 25,
        "breakMinutes": 5,
        "mode": "focus",
        "isRunning": False,
        "remainingMs": 1_500_000,
        "intervalMs": 1_500_000,
        "endAt": None,
        "sessionCount": 0,
        "species": "fern",
        "savedAt": NOW,
    }
    base.update(overrides)
    return base


# ---- Running intervals ----

class TestRunning:
    def test_estimate_from_end_at(self):
        state = rehydrate(record(isRunning=True, remainingMs=20_000, endAt=NOW + 5_000), NOW)
        assert state.remaining_ms == 5_000
        assert state.is_running is True

    def test_estimate_capped_to_interval(self):
        state = rehydrate(record(isRunning=True, remainingMs=20_000, endAt=NOW + 9_000_000), NOW)
        assert state.remaining_ms == 1_500_000
        assert state.is_running is True

    def test_end_at_in_past_is_ended(self):
        state = rehydrate(record(isRunning=True, remainingMs=20_000, endAt=NOW - 1), NOW)
        assert state.remaining_ms == 0
        assert state.is_running is False
        assert state.mode is Mode.FOCUS
        assert state.session_count == 0

    def test_running_without_end_at_comes_back_paused(self):
        state = rehydrate(record(isRunning=True, remainingMs=42_000, endAt=None), NOW)
        assert state.remaining_ms == 42_000
        assert state.is_running is False

    def test_paused_keeps_stored_remaining(self):
        state = rehydrate(record(remainingMs=61_000, endAt=NOW - 10_000_000), NOW)
        assert state.remaining_ms == 61_000
        assert not state.is_running


# ---- Defaults and malformed records ----

class TestMalformed:
    @pytest.mark.parametrize("raw", [None, [], "junk", 42])
    def test_not_a_record(self, raw):
        state = rehydrate(raw, NOW, random.Random(1))
        assert state.config.focus_minutes == 25
        assert state.config.break_minutes == 5
        assert state.mode is Mode.FOCUS
        assert state.remaining_ms == 1_500_000
        assert state.is_running is False
        assert state.session_count == 0
        assert isinstance(state.species, Species)

    def test_durations_clamped(self):
        state = rehydrate(record(focusMinutes=500, breakMinutes=0, intervalMs=None), NOW)
        assert state.config.focus_minutes == 120
        assert state.config.break_minutes == 1
        assert state.interval_ms == 120 * 60_000

    def test_non_numeric_durations_use_defaults(self):
        state = rehydrate(record(focusMinutes="ten", breakMinutes=math.nan), NOW)
        assert state.config.focus_minutes == 25
        assert state.config.break_minutes == 5

    def test_unknown_mode(self):
        assert rehydrate(record(mode="nap"), NOW).mode is Mode.FOCUS

    @pytest.mark.parametrize("bad", [-1, 2.5, "3", True, math.inf])
    def test_bad_session_count(self, bad):
        assert rehydrate(record(sessionCount=bad), NOW).session_count == 0

    def test_negative_remaining_uses_interval(self):
        state = rehydrate(record(remainingMs=-50), NOW)
        assert state.remaining_ms == 1_500_000

    def test_remaining_clamped_to_interval(self):
        state = rehydrate(record(remainingMs=9_999_999), NOW)
        assert state.remaining_ms == 1_500_000

    def test_break_mode(self):
        state = rehydrate(record(mode="break", intervalMs=None, remainingMs=None), NOW)
        assert state.mode is Mode.BREAK
        assert state.interval_ms == 300_000
        assert state.remaining_ms == 300_000


# ---- intervalMs ----

class TestIntervalLength:
    def test_interval_survives_config_change(self):
        # durations changed mid-interval: the running one keeps its length
        state = rehydrate(
            record(focusMinutes=50, intervalMs=1_500_000, remainingMs=600_000), NOW
        )
        assert state.interval_ms == 1_500_000
        assert state.config.total_ms(Mode.FOCUS) == 3_000_000
        assert state.remaining_ms == 600_000

    @pytest.mark.parametrize("bad", [0, -10, 10 ** 12, "x"])
    def test_bad_interval_falls_back_to_config(self, bad):
        state = rehydrate(record(intervalMs=bad, remainingMs=None), NOW)
        assert state.interval_ms == 1_500_000


# ---- Species ----

class TestSpecies:
    def test_known_species_kept(self):
        assert rehydrate(record(species="bamboo"), NOW).species is Species.BAMBOO

    def test_unknown_species_picked(self):
        assert pick_species("cactus", random.Random(0)) in list(Species)

    def test_missing_species_picked(self):
        assert isinstance(pick_species(None), Species)
