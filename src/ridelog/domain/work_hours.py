"""Work hours domain service."""

from dataclasses import replace
from datetime import datetime
from typing import Optional
from uuid import UUID

from ridelog.database.base import Database
from ridelog.domain.entities import WorkHours
from ridelog.domain.errors import NotFoundError, ValidationError, record_not_found
from ridelog.domain.period import Period
from ridelog.domain.validation import require_non_negative


class WorkHoursService:
    """Service for managing work hours entries."""

    def __init__(self, db: Database):
        """Initialize work hours service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_work_hours(
        self,
        date: datetime,
        total_hours: float = 0.0,
        start_time: Optional[datetime] = None,
        end_time: Optional[datetime] = None,
        notes: Optional[str] = None,
    ) -> UUID:
        """Create a work hours entry.

        When both start and end time are given the total is derived from
        them and ``total_hours`` is ignored.

        Returns:
            Work hours ID

        Raises:
            ValidationError: If the end precedes the start or hours are negative
        """
        work_hours = WorkHours(
            date=date,
            total_hours=total_hours,
            start_time=start_time,
            end_time=end_time,
            notes=notes,
        )
        work_hours = self._resolve(work_hours)
        return self.db.create_work_hours(work_hours)

    def get_work_hours(self, work_hours_id: UUID) -> Optional[WorkHours]:
        """Get work hours entry by ID, or None if not found."""
        return self.db.get_work_hours(work_hours_id)

    def require_work_hours(self, work_hours_id: UUID) -> WorkHours:
        """Get work hours entry by ID.

        Raises:
            NotFoundError: If the entry does not exist
        """
        work_hours = self.db.get_work_hours(work_hours_id)
        if work_hours is None:
            raise NotFoundError(record_not_found("Work hours", work_hours_id))
        return work_hours

    def list_work_hours(
        self, start: Optional[datetime] = None, end: Optional[datetime] = None
    ) -> list[WorkHours]:
        """List work hours entries, optionally limited to ``[start, end)``."""
        if start is not None and end is not None:
            return self.db.get_work_hours_by_date_range(start, end)
        return [
            entry
            for entry in self.db.get_all_work_hours()
            if (start is None or entry.date >= start)
            and (end is None or entry.date < end)
        ]

    def get_today_work_hours(self) -> Optional[WorkHours]:
        """Get the first work hours entry dated today, if any."""
        today = Period.DAY.date_range()
        entries = self.db.get_work_hours_by_date_range(today.start, today.end)
        return entries[0] if entries else None

    def update_work_hours(self, work_hours: WorkHours) -> WorkHours:
        """Store changes to an existing work hours entry.

        Raises:
            ValidationError: If the entry is invalid
            NotFoundError: If the entry does not exist
        """
        work_hours = self._resolve(work_hours)
        self.require_work_hours(work_hours.id)
        updated = replace(work_hours, last_modified=datetime.now())
        self.db.update_work_hours(updated)
        return updated

    def delete_work_hours(self, work_hours_id: UUID) -> None:
        """Delete a work hours entry.

        Raises:
            NotFoundError: If the entry does not exist
        """
        self.require_work_hours(work_hours_id)
        self.db.delete_work_hours(work_hours_id)

    def list_unsynced_work_hours(self) -> list[WorkHours]:
        """List work hours entries not yet marked as uploaded."""
        return [w for w in self.db.get_all_work_hours() if not w.is_uploaded]

    def mark_work_hours_synced(self, work_hours_id: UUID) -> None:
        """Flag a work hours entry as uploaded."""
        work_hours = self.require_work_hours(work_hours_id)
        self.db.update_work_hours(replace(work_hours, is_uploaded=True))

    def _resolve(self, work_hours: WorkHours) -> WorkHours:
        """Validate an entry and derive its total from start and end time."""
        if (
            work_hours.start_time is not None
            and work_hours.end_time is not None
            and work_hours.end_time < work_hours.start_time
        ):
            raise ValidationError(
                f"End time ({work_hours.end_time}) is before start time "
                f"({work_hours.start_time})"
            )
        work_hours = work_hours.with_calculated_total_hours()
        require_non_negative("Total hours", work_hours.total_hours)
        return work_hours
