"""Calendar periods used to bucket and compare activity.

All intervals are half-open ``[start, end)`` over naive local datetimes.
Shifting uses calendar arithmetic (``relativedelta``) so month and year
lengths never cause drift.
"""

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from enum import Enum
from typing import Optional, Union

from dateutil.relativedelta import relativedelta

from ridelog.domain.errors import ValidationError


@dataclass(frozen=True)
class DateRange:
    """Half-open datetime interval."""

    start: datetime
    end: datetime

    def __contains__(self, moment: datetime) -> bool:
        return self.start <= moment < self.end


class Period(str, Enum):
    """Named calendar granularity."""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    QUARTER = "quarter"
    YEAR = "year"

    @property
    def display_name(self) -> str:
        return {
            Period.DAY: "Today",
            Period.WEEK: "This week",
            Period.MONTH: "This month",
            Period.QUARTER: "This quarter",
            Period.YEAR: "This year",
        }[self]

    @property
    def step(self) -> relativedelta:
        """One unit of this period as a calendar offset."""
        return {
            Period.DAY: relativedelta(days=1),
            Period.WEEK: relativedelta(days=7),
            Period.MONTH: relativedelta(months=1),
            Period.QUARTER: relativedelta(months=3),
            Period.YEAR: relativedelta(years=1),
        }[self]

    @classmethod
    def parse(cls, value: str) -> "Period":
        """Parse a period name such as ``"month"`` (case-insensitive).

        Raises:
            ValidationError: If the name is not a known period
        """
        try:
            return cls(value.strip().lower())
        except ValueError:
            choices = ", ".join(p.value for p in cls)
            raise ValidationError(
                f"Unknown period: '{value}'. Supported periods: {choices}"
            )

    def date_range(
        self, reference: Optional[Union[date, datetime]] = None
    ) -> DateRange:
        """Get the interval of this period containing ``reference``.

        Args:
            reference: Instant inside the period; defaults to now

        Returns:
            DateRange starting at local midnight of the period's first day
        """
        if reference is None:
            reference = datetime.now()
        day = reference.date() if isinstance(reference, datetime) else reference
        midnight = datetime(day.year, day.month, day.day)

        if self is Period.DAY:
            start = midnight
        elif self is Period.WEEK:
            # Monday-based weeks
            start = midnight - timedelta(days=day.weekday())
        elif self is Period.MONTH:
            start = midnight.replace(day=1)
        elif self is Period.QUARTER:
            first_month = (day.month - 1) // 3 * 3 + 1
            start = midnight.replace(month=first_month, day=1)
        else:
            start = midnight.replace(month=1, day=1)

        return DateRange(start=start, end=start + self.step)

    def previous_range(self, interval: DateRange) -> DateRange:
        """Shift ``interval`` back by exactly one period unit."""
        return DateRange(
            start=interval.start - self.step,
            end=interval.end - self.step,
        )
