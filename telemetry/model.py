# telemetry/model.py
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


@dataclass(frozen=True)
class Sample:
    sequence: int      # monotonic id, unique per engine
    value: int         # utilization %, always within [10, 92]


@dataclass(frozen=True)
class LogEntry:
    title: str
    subtitle: str


class CountdownState(Enum):
    COUNTING = "counting"
    EXPIRED = "expired"


@dataclass(frozen=True)
class RenderSplit:
    """
    Observed/projected partition of a sample window.

    ``observed`` is the settled history, ``projected`` the most recent
    tail. Both hold the window's own Sample objects; nothing is copied.
    """

    observed: Tuple[Sample, ...] = ()
    projected: Tuple[Sample, ...] = ()

    @property
    def boundary(self) -> int:
        """Index of the first projected sample within the window."""
        return len(self.observed)

    @property
    def is_empty(self) -> bool:
        return not self.observed and not self.projected

    @property
    def samples(self) -> Tuple[Sample, ...]:
        return self.observed + self.projected

    @property
    def live_edge(self) -> Optional[Sample]:
        if self.projected:
            return self.projected[-1]
        return None
