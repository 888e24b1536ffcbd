"""Tests for the tick source."""

from looptimer.system.timings import TICK_INTERVAL_MS, TickClock


def test_not_running_until_started():
    clock = TickClock()

    assert not clock.isActive()
    assert clock.intervalMs == TICK_INTERVAL_MS


def test_start_is_idempotent(signalRecorder):
    clock = TickClock()
    recorder = signalRecorder()
    recorder.attach(clock.activeChanged, "active")

    clock.start()
    clock.start()

    assert clock.isActive()
    assert recorder.named("active") == [(True,)]

    clock.stop()
    clock.stop()

    assert not clock.isActive()
    assert recorder.named("active") == [(True,), (False,)]


def test_timeout_emits_elapsed_seconds(signalRecorder):
    clock = TickClock(intervalMs=250)
    recorder = signalRecorder()
    recorder.attach(clock.tick, "tick")

    clock.start()
    clock._onTimeout()
    clock.stop()

    (elapsed,), = recorder.named("tick")
    assert elapsed >= 0.0
    assert clock.intervalMs == 250
