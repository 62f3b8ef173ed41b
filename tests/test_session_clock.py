"""SessionClock: countdown arithmetic and the frame loop."""

from fakes import FakeClock, ManualScheduler

from forest_focus.core.session_clock import SessionClock


# ---- Helpers ----

def make_clock(total_ms: int = 10_000, remaining_ms=None):
    clock = FakeClock()
    scheduler = ManualScheduler(clock)
    sc = SessionClock(scheduler, total_ms, remaining_ms, now_ms=clock.mono_ms)
    return sc, scheduler, clock


# ---- tick ----

class TestTick:
    def test_decrements(self):
        sc, _, _ = make_clock()
        assert sc.tick(1_000) is False
        assert sc.remaining_ms == 9_000

    def test_floors_at_zero_and_reports_expiry_once(self):
        sc, _, _ = make_clock(total_ms=1_000)
        assert sc.tick(5_000) is True
        assert sc.remaining_ms == 0
        assert sc.tick(5_000) is False
        assert sc.remaining_ms == 0

    def test_non_positive_delta_ignored(self):
        sc, _, _ = make_clock()
        assert sc.tick(0) is False
        assert sc.tick(-500) is False
        assert sc.remaining_ms == 10_000

    def test_progress(self):
        sc, _, _ = make_clock(total_ms=4_000)
        assert sc.progress == 0.0
        sc.tick(1_000)
        assert sc.progress == 0.25
        sc.tick(3_000)
        assert sc.progress == 1.0

    def test_progress_zero_total(self):
        sc, _, _ = make_clock(total_ms=0)
        assert sc.progress == 0.0

    def test_remaining_clamped_to_total(self):
        sc, _, _ = make_clock(total_ms=1_000, remaining_ms=5_000)
        assert sc.remaining_ms == 1_000


# ---- Controls ----

class TestControls:
    def test_start_requests_one_frame(self):
        sc, scheduler, _ = make_clock()
        sc.start()
        sc.start()
        assert sc.is_running
        assert len(scheduler.pending) == 1

    def test_start_after_expiry_restarts_full_length(self):
        sc, _, _ = make_clock(total_ms=1_000, remaining_ms=0)
        sc.start()
        assert sc.remaining_ms == 1_000

    def test_pause_is_idempotent(self):
        sc, scheduler, _ = make_clock()
        sc.start()
        sc.pause()
        sc.pause()
        assert not sc.is_running
        assert not scheduler.pending
        assert not sc.is_scheduled

    def test_resume_keeps_remaining(self):
        sc, _, _ = make_clock()
        sc.tick(4_000)
        sc.resume()
        assert sc.is_running
        assert sc.remaining_ms == 6_000

    def test_resume_at_zero_does_nothing(self):
        sc, scheduler, _ = make_clock(remaining_ms=0)
        sc.resume()
        assert not sc.is_running
        assert not scheduler.pending

    def test_reset(self):
        sc, scheduler, _ = make_clock()
        sc.start()
        sc.tick(3_000)
        sc.reset(20_000)
        assert not sc.is_running
        assert sc.total_ms == 20_000
        assert sc.remaining_ms == 20_000
        assert not scheduler.pending

    def test_set_idle_remaining_refused_while_running(self):
        sc, _, _ = make_clock()
        sc.start()
        assert sc.set_idle_remaining(60_000) is False
        assert sc.total_ms == 10_000
        sc.pause()
        assert sc.set_idle_remaining(60_000) is True
        assert sc.remaining_ms == 60_000


# ---- Frame loop ----

class TestFrameLoop:
    def test_frames_spend_measured_time(self):
        sc, scheduler, _ = make_clock()
        sc.start()
        scheduler.run_frame(16)
        scheduler.run_frame(34)
        assert sc.remaining_ms == 10_000 - 50

    def test_late_frame_catches_up(self):
        sc, scheduler, _ = make_clock()
        sc.start()
        scheduler.run_frame(2_500)
        assert sc.remaining_ms == 7_500

    def test_no_frames_while_paused(self):
        sc, scheduler, clock = make_clock()
        sc.start()
        scheduler.run_frame(100)
        sc.pause()
        clock.advance(5_000)
        assert scheduler.run_frame(100) == 0
        assert sc.remaining_ms == 9_900

    def test_resume_does_not_count_paused_time(self):
        sc, scheduler, clock = make_clock()
        sc.start()
        scheduler.run_frame(1_000)
        sc.pause()
        clock.advance(60_000)
        sc.resume()
        scheduler.run_frame(500)
        assert sc.remaining_ms == 8_500

    def test_reanchor_drops_hidden_time(self):
        sc, scheduler, clock = make_clock()
        sc.start()
        scheduler.run_frame(1_000)
        clock.advance(4_000)
        sc.reanchor()
        scheduler.run_frame(100)
        assert sc.remaining_ms == 8_900

    def test_expire_fires_once_then_tick(self):
        sc, scheduler, _ = make_clock(total_ms=100)
        calls = []
        sc.set_on_expire(lambda: calls.append("expire"))
        sc.set_on_tick(lambda: calls.append("tick"))
        sc.start()
        scheduler.run_frame(150)
        scheduler.run_frame(16)
        assert calls == ["expire", "tick", "tick"]

    def test_listener_pause_stops_loop(self):
        sc, scheduler, _ = make_clock()
        sc.set_on_tick(sc.pause)
        sc.start()
        scheduler.run_frame(16)
        assert not sc.is_running
        assert not scheduler.pending

    def test_restart_interval_keeps_running(self):
        sc, scheduler, _ = make_clock(total_ms=100)
        sc.set_on_expire(lambda: sc.restart_interval(5_000))
        sc.start()
        scheduler.run_frame(200)
        assert sc.is_running
        assert sc.total_ms == 5_000
        assert sc.remaining_ms == 5_000
        scheduler.run_frame(1_000)
        assert sc.remaining_ms == 4_000
