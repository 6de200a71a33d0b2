"""
Dashboard configuration.

Values come from keyword arguments or from ``PULSE_*`` environment
variables (a ``.env`` file is honoured through python-dotenv). Everything is
validated up front so no engine or timer starts in an invalid state.
"""
import logging
import os
from dataclasses import dataclass, field
from datetime import datetime, tzinfo
from typing import List, Optional, Tuple
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import find_dotenv, load_dotenv

from .countdown import parse_target_string
from .errors import ConfigurationError
from .stream import DEFAULT_CAPACITY, DEFAULT_PERIOD_MS, DEFAULT_TAIL_SIZE

ENV_PREFIX = "PULSE_"

DEFAULT_LOG_ENTRIES = [
    ("Security Checks", "Virus Free And Security Safe"),
]


def _env_int(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(ENV_PREFIX + name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw.strip())
    except ValueError:
        raise ConfigurationError(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}") from None


def log_level_from_env(default: str = "INFO") -> int:
    """Numeric logging level named by PULSE_LOG_LEVEL (e.g. DEBUG, INFO)."""
    raw = os.getenv(ENV_PREFIX + "LOG_LEVEL") or default
    level = logging.getLevelName(raw.strip().upper())
    # getLevelName maps unknown names to a "Level X" string
    if not isinstance(level, int):
        raise ConfigurationError(f"{ENV_PREFIX}LOG_LEVEL must be a logging level name, got {raw!r}")
    return level


@dataclass
class DashboardConfig:
    capacity: int = DEFAULT_CAPACITY
    tail_size: int = DEFAULT_TAIL_SIZE
    period_ms: int = DEFAULT_PERIOD_MS
    countdown_interval_ms: int = 1000
    expiry_date: str = "09/10/2025"     # dd/mm/yyyy, deadline is 23:59:59
    timezone: Optional[str] = None      # IANA name; None means local time
    log_capacity: Optional[int] = None  # None keeps every log entry
    membership: str = "Premium"
    user_name: str = "Lenny"
    initial_log: List[Tuple[str, str]] = field(
        default_factory=lambda: list(DEFAULT_LOG_ENTRIES)
    )

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        for name in ("capacity", "tail_size", "period_ms", "countdown_interval_ms"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                raise ConfigurationError(f"{name} must be a positive integer, got {value!r}")

        if self.log_capacity is not None and self.log_capacity <= 0:
            raise ConfigurationError(
                f"log_capacity must be positive or unset, got {self.log_capacity!r}"
            )

        # Both raise ConfigurationError on bad input
        self.tz()
        self.target_instant()

    def tz(self) -> Optional[tzinfo]:
        if not self.timezone:
            return None
        try:
            return ZoneInfo(self.timezone)
        except (ZoneInfoNotFoundError, ValueError):
            raise ConfigurationError(f"Unknown timezone {self.timezone!r}") from None

    def target_instant(self) -> datetime:
        return parse_target_string(self.expiry_date, tz=self.tz())

    @classmethod
    def from_env(cls, dotenv: bool = True) -> "DashboardConfig":
        """
        Build a config from ``PULSE_*`` environment variables.

        Recognized: PULSE_CAPACITY, PULSE_TAIL_SIZE, PULSE_PERIOD_MS,
        PULSE_COUNTDOWN_INTERVAL_MS, PULSE_EXPIRY_DATE, PULSE_TIMEZONE,
        PULSE_LOG_CAPACITY, PULSE_MEMBERSHIP, PULSE_USER_NAME.
        """
        if dotenv:
            load_dotenv(find_dotenv(usecwd=True))

        defaults = cls.__dataclass_fields__
        return cls(
            capacity=_env_int("CAPACITY", defaults["capacity"].default),
            tail_size=_env_int("TAIL_SIZE", defaults["tail_size"].default),
            period_ms=_env_int("PERIOD_MS", defaults["period_ms"].default),
            countdown_interval_ms=_env_int(
                "COUNTDOWN_INTERVAL_MS", defaults["countdown_interval_ms"].default
            ),
            expiry_date=os.getenv(ENV_PREFIX + "EXPIRY_DATE", defaults["expiry_date"].default),
            timezone=os.getenv(ENV_PREFIX + "TIMEZONE") or None,
            log_capacity=_env_int("LOG_CAPACITY", None),
            membership=os.getenv(ENV_PREFIX + "MEMBERSHIP", defaults["membership"].default),
            user_name=os.getenv(ENV_PREFIX + "USER_NAME", defaults["user_name"].default),
        )
