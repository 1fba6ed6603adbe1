"""
Time provider abstraction for deterministic identifiers

Identifiers embed "now" in their date part. Making the clock injectable lets
tests freeze it and step it forward by exact time units.
"""

from datetime import datetime, timedelta, timezone
from typing import Protocol

UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MS = timedelta(milliseconds=1)


def datetime_to_ms(dt: datetime) -> int:
    """
    Milliseconds since the Unix epoch, rounded down

    Naive datetimes are taken to be UTC.
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return (dt - UNIX_EPOCH) // _ONE_MS


def ms_to_datetime(ms: int) -> datetime:
    """UTC datetime for milliseconds since the Unix epoch"""
    return UNIX_EPOCH + timedelta(milliseconds=ms)


class TimeProvider(Protocol):
    """Protocol for time providers - allows deterministic testing"""

    def now(self) -> datetime:
        """Return current UTC datetime"""
        ...


class RealTimeProvider:
    """Production time provider using system clock"""

    def now(self) -> datetime:
        """Return current UTC time from system clock"""
        return datetime.now(timezone.utc)


class FrozenTimeProvider:
    """
    Controllable time provider for deterministic tests

    Allows tests to freeze time and advance it, so the date part of
    every identifier is known in advance.
    """

    def __init__(self, initial_time: datetime | None = None) -> None:
        """
        Initialize with optional fixed time

        Args:
            initial_time: Starting time (defaults to Unix epoch)
        """
        self._current_time = initial_time or UNIX_EPOCH

    def now(self) -> datetime:
        """Return current test time"""
        return self._current_time

    def set_time(self, dt: datetime) -> None:
        """Set current time to specific value"""
        self._current_time = dt

    def advance_ms(self, ms: int) -> None:
        """Advance time by specified milliseconds"""
        self._current_time += timedelta(milliseconds=ms)

    def advance_seconds(self, seconds: int) -> None:
        """Advance time by specified seconds"""
        self._current_time += timedelta(seconds=seconds)


# Global default time provider
default_time_provider: TimeProvider = RealTimeProvider()
