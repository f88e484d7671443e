"""Injectable clock so expiry checks and receipt dates are testable."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date, datetime


class Clock(ABC):

    @abstractmethod
    def today(self) -> date:
        """Return the current calendar date."""

    @abstractmethod
    def now(self) -> datetime:
        """Return the current local date and time."""


class SystemClock(Clock):

    def today(self) -> date:
        return date.today()

    def now(self) -> datetime:
        return datetime.now()


class FixedClock(Clock):
    """Clock pinned to one instant. Used by tests and replays."""

    def __init__(self, moment: datetime | date) -> None:
        if not isinstance(moment, datetime):
            moment = datetime(moment.year, moment.month, moment.day)
        self._moment = moment

    def today(self) -> date:
        return self._moment.date()

    def now(self) -> datetime:
        return self._moment
