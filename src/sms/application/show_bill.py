"""Application services: bill lookups (queries)."""

from __future__ import annotations

from sms.application.dto import BillDTO, bill_to_dto
from sms.domain.exceptions import EntityNotFoundError
from sms.domain.repository.bill_repository import BillRepository


class ShowBillHandler:

    def __init__(self, bill_repo: BillRepository) -> None:
        self._bill_repo = bill_repo

    def handle(self, serial_number: int) -> BillDTO:
        bill = self._bill_repo.get_by_serial(serial_number)
        if bill is None:
            raise EntityNotFoundError(f"Bill #{serial_number} not found")
        return bill_to_dto(bill)


class ListBillsHandler:

    def __init__(self, bill_repo: BillRepository) -> None:
        self._bill_repo = bill_repo

    def handle(self) -> list[BillDTO]:
        """Every stored bill, oldest first."""
        return [bill_to_dto(bill) for bill in self._bill_repo.list_all()]
