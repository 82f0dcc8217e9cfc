from __future__ import annotations

from roblox_api_client.core.throttling import MinIntervalThrottler
from tests.shared.transport import FakeClock


def test_throttler_waits_for_remaining_interval():
    clock = FakeClock()
    throttler = MinIntervalThrottler(1.0, clock=clock, sleeper=clock.sleep)
    throttler.wait()  # first call, no wait
    clock.now = 0.2
    throttler.wait()
    assert clock.sleeps and abs(clock.sleeps[0] - 0.8) < 1e-6


def test_throttler_does_not_sleep_when_interval_elapsed():
    clock = FakeClock()
    throttler = MinIntervalThrottler(1.0, clock=clock, sleeper=clock.sleep)
    throttler.wait()
    clock.now = 1.5
    throttler.wait()
    assert clock.sleeps == []


def test_started_throttler_sleeps_before_first_request():
    clock = FakeClock()
    throttler = MinIntervalThrottler(0.2, clock=clock, sleeper=clock.sleep)
    throttler.start()
    throttler.wait()
    assert clock.sleeps == [0.2]


def test_negative_interval_is_clamped_to_zero():
    clock = FakeClock()
    throttler = MinIntervalThrottler(-1.0, clock=clock, sleeper=clock.sleep)
    throttler.start()
    throttler.wait()
    throttler.wait()
    assert clock.sleeps == []
