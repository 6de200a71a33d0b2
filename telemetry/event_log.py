# telemetry/event_log.py
import logging
from collections import deque
from typing import Deque, Iterable, Iterator, Optional, Tuple

from .errors import ConfigurationError
from .model import LogEntry

logger = logging.getLogger(__name__)


class EventLog:
    """
    Append-only update log, iterated newest-first.

    Unbounded by default. With ``max_entries`` set, the oldest entries
    fall off the end once the bound is reached.
    """

    def __init__(
        self,
        initial: Iterable[Tuple[str, str]] = (),
        max_entries: Optional[int] = None,
    ):
        if max_entries is not None and max_entries <= 0:
            raise ConfigurationError(f"max_entries must be positive, got {max_entries}")

        self.max_entries = max_entries
        self._entries: Deque[LogEntry] = deque(maxlen=max_entries)

        # initial entries are given oldest-first
        for title, subtitle in initial:
            self._entries.appendleft(LogEntry(title, subtitle))

    def append(self, title: str, subtitle: str) -> LogEntry:
        entry = LogEntry(title=title, subtitle=subtitle)
        self._entries.appendleft(entry)
        logger.info(f"Log: {title} - {subtitle}")
        return entry

    def snapshot(self) -> Tuple[LogEntry, ...]:
        return tuple(self._entries)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[LogEntry]:
        return iter(self.snapshot())
