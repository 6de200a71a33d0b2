"""
Countdown to an absolute deadline.

All arithmetic is duration based (epoch seconds), so the hours field keeps
counting past 24 and DST shifts do not change the remaining time.
"""
import logging
import math
import time
from datetime import datetime, tzinfo
from typing import Callable, Optional, Union

from .errors import ConfigurationError
from .model import CountdownState

logger = logging.getLogger(__name__)

Instant = Union[float, datetime]


def _to_int(name: str, raw) -> int:
    if isinstance(raw, bool):
        raise ConfigurationError(f"{name} must be numeric, got {raw!r}")
    if isinstance(raw, int):
        return raw
    try:
        return int(str(raw).strip(), 10)
    except ValueError:
        raise ConfigurationError(f"{name} must be numeric, got {raw!r}") from None


def parse_target(day, month, year, tz: Optional[tzinfo] = None) -> datetime:
    """
    Build the deadline for a calendar date: 23:59:59 on that day.

    Args:
        day, month, year: ints or numeric strings (day/month/year order)
        tz: time zone of the deadline; the viewer's local zone when None

    Raises:
        ConfigurationError: non-numeric field or impossible date
    """
    d = _to_int("day", day)
    m = _to_int("month", month)
    y = _to_int("year", year)

    try:
        naive = datetime(y, m, d, 23, 59, 59)
    except ValueError as e:
        raise ConfigurationError(f"Invalid expiry date {d:02d}/{m:02d}/{y}: {e}") from None

    if tz is None:
        return naive.astimezone()
    return naive.replace(tzinfo=tz)


def parse_target_string(text: str, tz: Optional[tzinfo] = None) -> datetime:
    """Parse a ``dd/mm/yyyy`` date into its end-of-day deadline."""
    parts = str(text).strip().split("/")
    if len(parts) != 3:
        raise ConfigurationError(f"Expiry date must be dd/mm/yyyy, got {text!r}")
    return parse_target(*parts, tz=tz)


def _epoch(instant: Instant) -> float:
    if isinstance(instant, datetime):
        return instant.timestamp()
    return float(instant)


def remaining_seconds(target: Instant, now: Instant) -> int:
    """Whole seconds left until ``target``, floored at 0."""
    return max(0, math.floor(_epoch(target) - _epoch(now)))


def format_hms(seconds: int) -> str:
    """Zero-padded HH:MM:SS. Hours are not wrapped at 24."""
    if seconds < 0:
        raise ValueError(f"seconds must be non-negative, got {seconds}")
    h = seconds // 3600
    m = (seconds % 3600) // 60
    s = seconds % 60
    return f"{h:02d}:{m:02d}:{s:02d}"


class CountdownEngine:
    """
    Two-state countdown: COUNTING until the deadline, then EXPIRED for good.

    Every tick recomputes from the target instead of decrementing, so a
    stalled timer never accumulates drift. The state is first decided by the
    first tick, whose ``now`` (or the clock) the caller chooses; until then
    the engine is COUNTING and ``remaining`` is None.
    """

    def __init__(self, target: Instant, clock: Callable[[], float] = time.time):
        self._clock = clock
        self.reset(target)

    @property
    def target(self) -> float:
        return self._target

    @property
    def state(self) -> CountdownState:
        return self._state

    @property
    def remaining(self) -> Optional[int]:
        return self._remaining

    @property
    def is_expired(self) -> bool:
        return self._state is CountdownState.EXPIRED

    def reset(self, target: Instant) -> None:
        """Re-arm the countdown with a new deadline."""
        self._target = _epoch(target)
        self._state = CountdownState.COUNTING
        self._remaining: Optional[int] = None

    def tick(self, now: Optional[Instant] = None) -> int:
        if self._state is CountdownState.EXPIRED:
            return 0

        if now is None:
            now = self._clock()
        self._remaining = remaining_seconds(self._target, now)

        if self._remaining == 0:
            self._state = CountdownState.EXPIRED
            logger.info("Countdown expired")
        return self._remaining

    def current_display(self, now: Optional[Instant] = None) -> str:
        return format_hms(self.tick(now))
