"""
Countdown: target parsing, duration arithmetic and the COUNTING -> EXPIRED machine.
"""
from datetime import datetime, timedelta, timezone

import pytest

from telemetry.countdown import (
    CountdownEngine,
    format_hms,
    parse_target,
    parse_target_string,
    remaining_seconds,
)
from telemetry.errors import ConfigurationError
from telemetry.model import CountdownState


def local(*args) -> float:
    return datetime(*args).timestamp()


class FakeClock:
    def __init__(self, now: float):
        self.now = now

    def __call__(self):
        return self.now


class TestParseTarget:

    def test_end_of_day_local(self):
        target = parse_target(9, 10, 2025)
        assert target.timestamp() == local(2025, 10, 9, 23, 59, 59)
        assert (target.hour, target.minute, target.second) == (23, 59, 59)

    def test_numeric_strings(self):
        assert parse_target("09", "10", "2025") == parse_target(9, 10, 2025)

    def test_explicit_timezone(self):
        target = parse_target(1, 1, 2030, tz=timezone.utc)
        assert target == datetime(2030, 1, 1, 23, 59, 59, tzinfo=timezone.utc)

    def test_from_string(self):
        assert parse_target_string("09/10/2025") == parse_target(9, 10, 2025)

    @pytest.mark.parametrize("day,month,year", [
        (32, 1, 2025),
        (0, 1, 2025),
        (1, 13, 2025),
        (1, 0, 2025),
        (31, 2, 2025),
        ("aa", 1, 2025),
        (1, "x", 2025),
        (1, 1, "20x5"),
        (True, 1, 2025),
    ])
    def test_malformed_rejected(self, day, month, year):
        with pytest.raises(ConfigurationError):
            parse_target(day, month, year)

    @pytest.mark.parametrize("text", ["2025-10-09", "09/10", "09/10/2025/1", ""])
    def test_malformed_string_rejected(self, text):
        with pytest.raises(ConfigurationError):
            parse_target_string(text)


class TestRemainingSeconds:

    def test_reference_example(self):
        target = parse_target(9, 10, 2025)
        now = local(2025, 10, 9, 23, 59, 0)
        assert remaining_seconds(target, now) == 59
        assert format_hms(remaining_seconds(target, now)) == "00:00:59"

    def test_at_and_after_target(self):
        target = parse_target(9, 10, 2025)
        assert remaining_seconds(target, target) == 0
        assert remaining_seconds(target, target + timedelta(days=3)) == 0

    def test_floors_partial_seconds(self):
        assert remaining_seconds(100.0, 40.4) == 59
        assert remaining_seconds(100.0, 99.999) == 0

    def test_monotonic_and_non_negative(self):
        target = 10_000.0
        previous = None
        now = 0.0
        while now < 12_000.0:
            current = remaining_seconds(target, now)
            assert current >= 0
            if previous is not None:
                assert current <= previous
            previous = current
            now += 0.37


class TestFormatHms:

    @pytest.mark.parametrize("seconds,expected", [
        (0, "00:00:00"),
        (59, "00:00:59"),
        (3600, "01:00:00"),
        (86399, "23:59:59"),
        (98042, "27:14:02"),
        (360000, "100:00:00"),
    ])
    def test_format(self, seconds, expected):
        assert format_hms(seconds) == expected

    def test_negative_rejected(self):
        with pytest.raises(ValueError):
            format_hms(-1)


class TestCountdownEngine:

    def test_counts_down(self):
        clock = FakeClock(1000.0)
        engine = CountdownEngine(1100.0, clock=clock)

        assert engine.tick() == 100
        assert engine.state is CountdownState.COUNTING
        assert engine.remaining == 100
        clock.now = 1001.0
        assert engine.current_display() == "00:01:39"

    def test_expires_and_stays_expired(self):
        clock = FakeClock(1000.0)
        engine = CountdownEngine(1002.0, clock=clock)

        clock.now = 1002.5
        assert engine.tick() == 0
        assert engine.state is CountdownState.EXPIRED

        # clock jumps back: terminal state holds
        clock.now = 900.0
        assert engine.tick() == 0
        assert engine.current_display() == "00:00:00"
        assert engine.is_expired

    def test_backward_jump_while_counting_recomputes(self):
        clock = FakeClock(1000.0)
        engine = CountdownEngine(2000.0, clock=clock)

        clock.now = 1500.0
        assert engine.tick() == 500
        clock.now = 1400.0
        assert engine.tick() == 600

    def test_explicit_now(self):
        engine = CountdownEngine(parse_target(9, 10, 2025), clock=FakeClock(0.0))
        assert engine.current_display(local(2025, 10, 9, 23, 59, 0)) == "00:00:59"
        assert engine.current_display(datetime(2025, 10, 10, 8, 0, 0).astimezone()) == "00:00:00"

    def test_multi_day_not_wrapped(self):
        clock = FakeClock(0.0)
        engine = CountdownEngine(98042.0, clock=clock)
        assert engine.current_display() == "27:14:02"

    def test_undecided_until_first_tick(self):
        engine = CountdownEngine(10.0, clock=FakeClock(20.0))
        assert engine.state is CountdownState.COUNTING
        assert engine.remaining is None

        assert engine.tick() == 0
        assert engine.is_expired

    def test_explicit_now_with_default_clock(self):
        """The wall clock is long past the target; the given now still decides."""
        engine = CountdownEngine(parse_target(9, 10, 2025))
        assert engine.current_display(local(2025, 10, 9, 23, 59, 0)) == "00:00:59"
        assert engine.state is CountdownState.COUNTING

        assert engine.current_display(local(2025, 10, 9, 23, 59, 59)) == "00:00:00"
        assert engine.is_expired

    def test_reset_rearms(self):
        clock = FakeClock(100.0)
        engine = CountdownEngine(50.0, clock=clock)
        engine.tick()
        assert engine.is_expired

        engine.reset(160.0)
        assert engine.state is CountdownState.COUNTING
        assert engine.current_display() == "00:01:00"
