# telemetry/sample_window.py
from collections import deque
from typing import Deque, Iterator, Optional, Tuple

from .errors import ConfigurationError
from .model import RenderSplit, Sample


class SampleWindow:
    """
    Fixed-capacity, sequence-ordered buffer of the most recent samples.

    When full, appending evicts the oldest sample first (ring buffer).
    The render split is cached per window version, so repeated render
    passes between two appends return the very same RenderSplit.
    """

    def __init__(self, capacity: int = 60, tail_size: int = 15):
        if capacity <= 0:
            raise ConfigurationError(f"capacity must be positive, got {capacity}")
        if tail_size <= 0:
            raise ConfigurationError(f"tail_size must be positive, got {tail_size}")

        self.capacity = capacity
        self.tail_size = tail_size
        self._samples: Deque[Sample] = deque(maxlen=capacity)
        self._version = 0
        self._split_cache: Optional[Tuple[int, RenderSplit]] = None

    def append(self, sample: Sample) -> Optional[Sample]:
        """
        Append one sample. Returns the evicted sample, if any.
        """
        if self._samples and sample.sequence <= self._samples[-1].sequence:
            raise ValueError(
                f"sequence {sample.sequence} is not after {self._samples[-1].sequence}"
            )

        evicted = None
        if len(self._samples) == self.capacity:
            evicted = self._samples[0]

        # deque(maxlen) drops the leftmost entry on overflow
        self._samples.append(sample)
        self._version += 1
        return evicted

    def clear(self) -> None:
        self._samples.clear()
        self._version += 1

    # ------------------ Read-only view ------------------ #

    def __len__(self) -> int:
        return len(self._samples)

    def __iter__(self) -> Iterator[Sample]:
        return iter(self._samples)

    def __getitem__(self, index: int) -> Sample:
        return self._samples[index]

    @property
    def version(self) -> int:
        return self._version

    def samples(self) -> Tuple[Sample, ...]:
        return tuple(self._samples)

    def latest(self) -> Optional[Sample]:
        return self._samples[-1] if self._samples else None

    # ------------------ Render split ------------------ #

    @property
    def boundary_sequence(self) -> Optional[int]:
        """Sequence id of the oldest projected sample."""
        if not self._samples:
            return None
        # Indexed from the right: cost depends on tail_size, not on len
        return self._samples[-min(len(self._samples), self.tail_size)].sequence

    def is_projected(self, sample: Sample) -> bool:
        """True if ``sample`` is one of the most recent ``tail_size`` samples."""
        if not self._samples:
            return False
        if not self.boundary_sequence <= sample.sequence <= self._samples[-1].sequence:
            return False
        # Same sequence id is not enough: it must be the sample held there
        for index in range(1, min(len(self._samples), self.tail_size) + 1):
            held = self._samples[-index]
            if held.sequence == sample.sequence:
                return held == sample
        return False

    def split(self) -> RenderSplit:
        if self._split_cache is not None and self._split_cache[0] == self._version:
            return self._split_cache[1]

        samples = tuple(self._samples)
        boundary = max(0, len(samples) - self.tail_size)
        split = RenderSplit(observed=samples[:boundary], projected=samples[boundary:])
        self._split_cache = (self._version, split)
        return split
