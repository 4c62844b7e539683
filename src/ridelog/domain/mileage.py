"""Mileage domain service."""

from dataclasses import replace
from datetime import datetime
from typing import Optional
from uuid import UUID

from ridelog.database.base import Database
from ridelog.domain.entities import Mileage
from ridelog.domain.errors import NotFoundError, ValidationError, record_not_found
from ridelog.domain.validation import require_non_negative, require_percentage


class MileageService:
    """Service for managing mileage entries.

    When both odometer readings are given, the stored distance is always
    ``end_mileage - start_mileage``; otherwise the given distance is stored
    as-is. Analytics only ever read the stored distance.
    """

    def __init__(self, db: Database):
        """Initialize mileage service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_mileage(
        self,
        date: datetime,
        distance: float = 0.0,
        start_mileage: Optional[float] = None,
        end_mileage: Optional[float] = None,
        purpose: Optional[str] = None,
        is_tax_deductible: bool = True,
        tax_deductible_percentage: int = 100,
        related_fuel_expense_id: Optional[UUID] = None,
    ) -> UUID:
        """Create a mileage entry.

        Args:
            date: Date of the trip
            distance: Distance driven, used when readings are incomplete
            start_mileage: Optional odometer reading at start
            end_mileage: Optional odometer reading at end
            purpose: Optional trip purpose
            is_tax_deductible: Whether the trip is deductible
            tax_deductible_percentage: Business-use share, 0-100
            related_fuel_expense_id: Optional linked fuel expense

        Returns:
            Mileage ID

        Raises:
            ValidationError: If readings, distance or percentage are invalid
        """
        mileage = Mileage(
            date=date,
            distance=distance,
            start_mileage=start_mileage,
            end_mileage=end_mileage,
            purpose=purpose,
            is_tax_deductible=is_tax_deductible,
            tax_deductible_percentage=tax_deductible_percentage,
            related_fuel_expense_id=related_fuel_expense_id,
        )
        mileage = self._resolve(mileage)
        return self.db.create_mileage(mileage)

    def get_mileage(self, mileage_id: UUID) -> Optional[Mileage]:
        """Get mileage entry by ID, or None if not found."""
        return self.db.get_mileage(mileage_id)

    def require_mileage(self, mileage_id: UUID) -> Mileage:
        """Get mileage entry by ID.

        Raises:
            NotFoundError: If the entry does not exist
        """
        mileage = self.db.get_mileage(mileage_id)
        if mileage is None:
            raise NotFoundError(record_not_found("Mileage", mileage_id))
        return mileage

    def list_mileage(
        self, start: Optional[datetime] = None, end: Optional[datetime] = None
    ) -> list[Mileage]:
        """List mileage entries, optionally limited to ``[start, end)``."""
        if start is not None and end is not None:
            return self.db.get_mileage_by_date_range(start, end)
        return [
            entry
            for entry in self.db.get_all_mileage()
            if (start is None or entry.date >= start)
            and (end is None or entry.date < end)
        ]

    def get_mileage_for_fuel_expense(self, expense_id: UUID) -> list[Mileage]:
        """List mileage entries linked to a fuel expense."""
        return self.db.get_mileage_by_fuel_expense(expense_id)

    def update_mileage(self, mileage: Mileage) -> Mileage:
        """Store changes to an existing mileage entry.

        Raises:
            ValidationError: If the entry is invalid
            NotFoundError: If the entry does not exist
        """
        mileage = self._resolve(mileage)
        self.require_mileage(mileage.id)
        updated = replace(mileage, last_modified=datetime.now())
        self.db.update_mileage(updated)
        return updated

    def delete_mileage(self, mileage_id: UUID) -> None:
        """Delete a mileage entry.

        Raises:
            NotFoundError: If the entry does not exist
        """
        self.require_mileage(mileage_id)
        self.db.delete_mileage(mileage_id)

    def list_unsynced_mileage(self) -> list[Mileage]:
        """List mileage entries not yet marked as uploaded."""
        return [m for m in self.db.get_all_mileage() if not m.is_uploaded]

    def mark_mileage_synced(self, mileage_id: UUID) -> None:
        """Flag a mileage entry as uploaded."""
        mileage = self.require_mileage(mileage_id)
        self.db.update_mileage(replace(mileage, is_uploaded=True))

    def _resolve(self, mileage: Mileage) -> Mileage:
        """Validate an entry and derive its distance from the readings."""
        require_non_negative("Start mileage", mileage.start_mileage)
        require_non_negative("End mileage", mileage.end_mileage)
        if (
            mileage.start_mileage is not None
            and mileage.end_mileage is not None
            and mileage.end_mileage < mileage.start_mileage
        ):
            raise ValidationError(
                f"End mileage ({mileage.end_mileage}) is below start mileage "
                f"({mileage.start_mileage})"
            )
        mileage = mileage.with_calculated_distance()
        require_non_negative("Distance", mileage.distance)
        require_percentage(mileage.tax_deductible_percentage)
        return mileage
