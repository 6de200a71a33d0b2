"""
Synthetic utilization stream.

The value shape is a deterministic two-sine baseline; the noise comes from an
injectable uniform source so the whole thing can be replayed in tests.
"""
import logging
import math
import random
from dataclasses import dataclass
from typing import Callable, Tuple

from .errors import ConfigurationError
from .model import RenderSplit, Sample
from .sample_window import SampleWindow

logger = logging.getLogger(__name__)

VALUE_MIN = 10
VALUE_MAX = 92
NOISE_SPAN = 12.0

DEFAULT_CAPACITY = 60
DEFAULT_TAIL_SIZE = 15
DEFAULT_PERIOD_MS = 800


@dataclass(frozen=True)
class StreamState:
    t: int = 0              # synthesis clock, incremented before each sample
    next_sequence: int = 0  # id given to the next sample


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def round_half_up(value: float) -> int:
    # Python's round() is banker's rounding; halves must go up here
    return int(math.floor(value + 0.5))


def baseline(t: int) -> float:
    """Smooth quasi-periodic signal, roughly within [2, 68]."""
    return 35 + 25 * math.sin(t / 3) + 8 * math.sin(t / 1.7)


def synthesize_value(t: int, draw: float) -> int:
    """
    Compute the sample value at tick ``t`` for a uniform draw in [0, 1).

    The result is always an integer within [VALUE_MIN, VALUE_MAX].
    """
    if not 0.0 <= draw < 1.0:
        raise ValueError(f"random draw must be in [0, 1), got {draw}")
    noise = (draw - 0.5) * NOISE_SPAN
    return round_half_up(clamp(baseline(t) + noise, VALUE_MIN, VALUE_MAX))


def advance(state: StreamState, draw: float) -> Tuple[StreamState, Sample]:
    """Pure transition: one tick of the stream."""
    t = state.t + 1
    sample = Sample(sequence=state.next_sequence, value=synthesize_value(t, draw))
    return StreamState(t=t, next_sequence=state.next_sequence + 1), sample


class SampleStreamEngine:
    """
    Owns the sample window and produces exactly one sample per ``tick()``.

    The engine never schedules itself; a driver (see telemetry.drivers)
    calls ``tick()`` every ``period_ms``.
    """

    def __init__(
        self,
        capacity: int = DEFAULT_CAPACITY,
        tail_size: int = DEFAULT_TAIL_SIZE,
        period_ms: int = DEFAULT_PERIOD_MS,
        random_source: Callable[[], float] = random.random,
    ):
        if period_ms <= 0:
            raise ConfigurationError(f"period_ms must be positive, got {period_ms}")

        self.period_ms = period_ms
        self._random = random_source
        self._window = SampleWindow(capacity=capacity, tail_size=tail_size)
        self._state = StreamState()

        logger.info(
            f"SampleStreamEngine initialized (capacity={capacity}, "
            f"tail_size={tail_size}, period={period_ms}ms)"
        )

    @property
    def window(self) -> SampleWindow:
        return self._window

    @property
    def state(self) -> StreamState:
        return self._state

    @property
    def ticks(self) -> int:
        return self._state.t

    def tick(self) -> Sample:
        self._state, sample = advance(self._state, self._random())
        evicted = self._window.append(sample)

        if evicted is not None:
            logger.debug(f"Sample {sample.sequence}={sample.value} (evicted {evicted.sequence})")
        else:
            logger.debug(f"Sample {sample.sequence}={sample.value}")
        return sample

    def split(self) -> RenderSplit:
        return self._window.split()

    def reset(self) -> None:
        self._state = StreamState()
        self._window.clear()
        logger.info("SampleStreamEngine reset")
