"""Income domain service."""

from dataclasses import replace
from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from ridelog.database.base import Database
from ridelog.domain.entities import Income, IncomeSource
from ridelog.domain.errors import NotFoundError, record_not_found
from ridelog.domain.validation import require_non_negative


class IncomeService:
    """Service for managing income entries."""

    def __init__(self, db: Database):
        """Initialize income service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_income(
        self,
        date: datetime,
        amount: Decimal,
        tip_amount: Decimal = Decimal("0"),
        source: IncomeSource = IncomeSource.UBER,
        notes: Optional[str] = None,
    ) -> UUID:
        """Create an income entry.

        Args:
            date: When the income was earned
            amount: Fare amount, excluding tips
            tip_amount: Tips received
            source: Platform or channel
            notes: Optional notes

        Returns:
            Income ID

        Raises:
            ValidationError: If amount or tip is negative
        """
        income = Income(
            date=date,
            amount=amount,
            tip_amount=tip_amount,
            source=source,
            notes=notes,
        )
        self._validate(income)
        return self.db.create_income(income)

    def get_income(self, income_id: UUID) -> Optional[Income]:
        """Get income entry by ID, or None if not found."""
        return self.db.get_income(income_id)

    def require_income(self, income_id: UUID) -> Income:
        """Get income entry by ID.

        Raises:
            NotFoundError: If the entry does not exist
        """
        income = self.db.get_income(income_id)
        if income is None:
            raise NotFoundError(record_not_found("Income", income_id))
        return income

    def list_income(
        self,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        source: Optional[IncomeSource] = None,
    ) -> list[Income]:
        """List income entries, optionally limited to ``[start, end)`` and a source."""
        if source is not None:
            entries = self.db.get_income_by_source(source)
        elif start is not None and end is not None:
            return self.db.get_income_by_date_range(start, end)
        else:
            entries = self.db.get_all_income()

        return [
            entry
            for entry in entries
            if (start is None or entry.date >= start)
            and (end is None or entry.date < end)
        ]

    def update_income(self, income: Income) -> Income:
        """Store changes to an existing income entry.

        Raises:
            ValidationError: If the entry is invalid
            NotFoundError: If the entry does not exist
        """
        self._validate(income)
        self.require_income(income.id)
        updated = replace(income, last_modified=datetime.now())
        self.db.update_income(updated)
        return updated

    def delete_income(self, income_id: UUID) -> None:
        """Delete an income entry.

        Raises:
            NotFoundError: If the entry does not exist
        """
        self.require_income(income_id)
        self.db.delete_income(income_id)

    def list_unsynced_income(self) -> list[Income]:
        """List income entries not yet marked as uploaded."""
        return [i for i in self.db.get_all_income() if not i.is_uploaded]

    def mark_income_synced(self, income_id: UUID) -> None:
        """Flag an income entry as uploaded."""
        income = self.require_income(income_id)
        self.db.update_income(replace(income, is_uploaded=True))

    def _validate(self, income: Income) -> None:
        require_non_negative("Amount", income.amount)
        require_non_negative("Tip amount", income.tip_amount)
