"""Abstract repository for Bill aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date

from sms.domain.model.bill import Bill, Channel


class BillRepository(ABC):

    @abstractmethod
    def next_serial_number(self) -> int:
        """Generate the next bill serial number (strictly increasing)."""

    @abstractmethod
    def get_by_serial(self, serial_number: int) -> Bill | None:
        """Return a bill by its serial number, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Bill]:
        """Return every bill, oldest first."""

    @abstractmethod
    def find_by_date(self, day: date, channel: Channel | None = None) -> list[Bill]:
        """Return the bills issued on *day*, oldest first.

        When *channel* is given only bills of that channel are returned.
        """

    @abstractmethod
    def save(self, bill: Bill) -> None:
        """Persist a new bill."""
