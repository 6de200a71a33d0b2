"""
Event log: newest-first ordering and snapshot isolation.
"""
import pytest

from telemetry.errors import ConfigurationError
from telemetry.event_log import EventLog
from telemetry.model import LogEntry


class TestEventLog:

    def test_ordering_example(self):
        log = EventLog(initial=[("A", "a")])

        log.append("B", "b")
        assert log.snapshot() == (LogEntry("B", "b"), LogEntry("A", "a"))

        log.append("C", "c")
        assert [e.title for e in log.snapshot()] == ["C", "B", "A"]

    def test_initial_entries_given_oldest_first(self):
        log = EventLog(initial=[("first", ""), ("second", "")])
        assert [e.title for e in log] == ["second", "first"]

    def test_no_deduplication(self):
        log = EventLog()
        log.append("Opened Home", "Action executed")
        log.append("Opened Home", "Action executed")
        assert len(log) == 2

    def test_append_returns_entry(self):
        entry = EventLog().append("Opened Debloat", "Action executed")
        assert entry == LogEntry("Opened Debloat", "Action executed")

    def test_snapshot_does_not_alias(self):
        log = EventLog(initial=[("A", "a")])
        snap = log.snapshot()

        log.append("B", "b")

        assert snap == (LogEntry("A", "a"),)
        assert len(log.snapshot()) == 2

    def test_entries_immutable(self):
        entry = EventLog().append("A", "a")
        with pytest.raises(AttributeError):
            entry.title = "changed"

    def test_unbounded_by_default(self):
        log = EventLog()
        for i in range(1000):
            log.append(str(i), "")
        assert len(log) == 1000

    def test_bounded_drops_oldest(self):
        log = EventLog(max_entries=3)
        for title in "ABCDE":
            log.append(title, "")
        assert [e.title for e in log] == ["E", "D", "C"]

    @pytest.mark.parametrize("bound", [0, -1])
    def test_invalid_bound(self, bound):
        with pytest.raises(ConfigurationError):
            EventLog(max_entries=bound)

    def test_clear(self):
        log = EventLog(initial=[("A", "a")])
        log.clear()
        assert log.snapshot() == ()
