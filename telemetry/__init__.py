"""
Dashboard core: sample stream, countdown and update log engines.
"""
from telemetry.config import DashboardConfig
from telemetry.countdown import (
    CountdownEngine,
    format_hms,
    parse_target,
    parse_target_string,
    remaining_seconds,
)
from telemetry.errors import ConfigurationError
from telemetry.event_log import EventLog
from telemetry.model import CountdownState, LogEntry, RenderSplit, Sample
from telemetry.sample_window import SampleWindow
from telemetry.stream import SampleStreamEngine, StreamState, advance, synthesize_value

__all__ = [
    'ConfigurationError',
    'CountdownEngine',
    'CountdownState',
    'DashboardConfig',
    'EventLog',
    'LogEntry',
    'RenderSplit',
    'Sample',
    'SampleStreamEngine',
    'SampleWindow',
    'StreamState',
    'advance',
    'format_hms',
    'parse_target',
    'parse_target_string',
    'remaining_seconds',
    'synthesize_value',
]
