"""
Qt timer drivers for the dashboard engines.

Each driver owns one QTimer on the GUI event loop and is the only thing
that calls its engine's ``tick()``. Stopping a driver guarantees no further
mutation of the engine, even if a timeout was already queued.
"""
import logging

from PyQt5 import QtCore

from .countdown import CountdownEngine, format_hms
from .errors import ConfigurationError
from .stream import SampleStreamEngine

logger = logging.getLogger(__name__)


class PeriodicDriver(QtCore.QObject):
    """Base class: a QTimer that calls ``tick()`` every ``interval_ms``."""

    status_update = QtCore.pyqtSignal(str)

    def __init__(self, interval_ms: int, parent=None):
        super().__init__(parent)
        if interval_ms <= 0:
            raise ConfigurationError(f"interval_ms must be positive, got {interval_ms}")

        self.interval_ms = interval_ms
        self.running = False

        self._timer = QtCore.QTimer(self)
        self._timer.setInterval(interval_ms)
        self._timer.timeout.connect(self._on_timeout)

    @property
    def is_running(self) -> bool:
        return self.running

    def start(self):
        if self.running:
            return
        self.running = True
        self._timer.start()
        self.status_update.emit(f"{type(self).__name__} started ({self.interval_ms}ms)")

    def stop(self):
        """Stop future ticks. Safe to call more than once."""
        if not self.running and not self._timer.isActive():
            return
        self.running = False
        self._timer.stop()
        self.status_update.emit(f"{type(self).__name__} stopped")

    def _on_timeout(self):
        # A late timeout after stop() must not touch the engine
        if not self.running:
            return
        self.tick()

    def tick(self):
        raise NotImplementedError


class StreamDriver(PeriodicDriver):
    """
    Drives a SampleStreamEngine.

    Signals:
        sample_added(Sample) - the sample produced by this tick
        split_changed(RenderSplit) - the window's new observed/projected split
    """

    sample_added = QtCore.pyqtSignal(object)
    split_changed = QtCore.pyqtSignal(object)

    def __init__(self, engine: SampleStreamEngine, parent=None):
        super().__init__(engine.period_ms, parent)
        self.engine = engine

    def tick(self):
        sample = self.engine.tick()
        self.sample_added.emit(sample)
        self.split_changed.emit(self.engine.split())
        return sample


class CountdownDriver(PeriodicDriver):
    """
    Drives a CountdownEngine once per second.

    Signals:
        display_changed(str) - HH:MM:SS after each tick
        expired() - emitted once, after which the timer stops itself
    """

    display_changed = QtCore.pyqtSignal(str)
    expired = QtCore.pyqtSignal()

    def __init__(self, engine: CountdownEngine, interval_ms: int = 1000, parent=None):
        super().__init__(interval_ms, parent)
        self.engine = engine

    def start(self):
        if self.engine.is_expired:
            # Nothing left to count; publish the terminal value only
            self.display_changed.emit(format_hms(0))
            return
        super().start()
        # Publish right away; stops the timer again if already past the target
        self.tick()

    def tick(self):
        was_counting = not self.engine.is_expired
        remaining = self.engine.tick()
        display = format_hms(remaining)
        self.display_changed.emit(display)

        if was_counting and self.engine.is_expired:
            logger.info("Countdown reached 00:00:00, stopping timer")
            self.stop()
            self.expired.emit()
        return display
