"""Domain model entities for ridelog.

These are pure data classes representing the records a driver keeps,
independent of the database schema. Services and the analytics code only
ever see these frozen snapshots.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional
from uuid import UUID, uuid4

from ridelog.domain.period import DateRange, Period


class ExpenseCategory(str, Enum):
    """Expense categories a driver can record."""

    FUEL = "fuel"
    INSURANCE = "insurance"
    MAINTENANCE = "maintenance"
    TAX = "tax"
    LICENSE = "license"
    PARKING = "parking"
    TOLL = "toll"
    CLEANING = "cleaning"
    OTHER = "other"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    @property
    def is_tax_deductible(self) -> bool:
        """Whether expenses in this category are deductible by default."""
        return self not in (
            ExpenseCategory.PARKING,
            ExpenseCategory.CLEANING,
            ExpenseCategory.OTHER,
        )


class CreationMethod(str, Enum):
    """How an expense entered the system."""

    MANUAL = "manual"
    OCR = "ocr"


class IncomeSource(str, Enum):
    """Platform or channel an income entry came from."""

    UBER = "uber"
    BOLT = "bolt"
    FREENOW = "freenow"
    CASH = "cash"
    OTHER = "other"

    @property
    def display_name(self) -> str:
        if self is IncomeSource.FREENOW:
            return "Free Now"
        return self.value.capitalize()


@dataclass(frozen=True)
class Expense:
    """Expense domain entity."""

    date: datetime
    amount: Decimal
    category: ExpenseCategory = ExpenseCategory.OTHER
    description: Optional[str] = None
    is_tax_deductible: bool = False
    tax_deductible_percentage: int = 100
    creation_method: CreationMethod = CreationMethod.MANUAL
    is_uploaded: bool = False
    last_modified: datetime = field(default_factory=datetime.now)
    receipt_ids: tuple[UUID, ...] = ()
    related_mileage_id: Optional[UUID] = None
    id: UUID = field(default_factory=uuid4)

    def tax_deductible_amount(self) -> Decimal:
        """Return the deductible part of the amount (0 when not deductible)."""
        if self.is_tax_deductible:
            return self.amount * self.tax_deductible_percentage / 100
        return Decimal("0")


@dataclass(frozen=True)
class Income:
    """Income domain entity."""

    date: datetime
    amount: Decimal
    tip_amount: Decimal = Decimal("0")
    source: IncomeSource = IncomeSource.UBER
    notes: Optional[str] = None
    is_uploaded: bool = False
    last_modified: datetime = field(default_factory=datetime.now)
    id: UUID = field(default_factory=uuid4)

    def total_amount(self) -> Decimal:
        """Return fare plus tip."""
        return self.amount + self.tip_amount


@dataclass(frozen=True)
class Mileage:
    """Mileage domain entity.

    ``distance`` is the authoritative value. The odometer readings are kept for
    reference and only feed ``distance`` through ``with_calculated_distance``.
    """

    date: datetime
    distance: float = 0.0
    start_mileage: Optional[float] = None
    end_mileage: Optional[float] = None
    purpose: Optional[str] = None
    is_tax_deductible: bool = True
    tax_deductible_percentage: int = 100
    related_fuel_expense_id: Optional[UUID] = None
    is_uploaded: bool = False
    last_modified: datetime = field(default_factory=datetime.now)
    id: UUID = field(default_factory=uuid4)

    def tax_deductible_mileage(self) -> float:
        """Return the deductible part of the distance (0 when not deductible)."""
        if self.is_tax_deductible:
            return self.distance * self.tax_deductible_percentage / 100.0
        return 0.0

    def with_calculated_distance(self) -> "Mileage":
        """Return a copy whose distance is derived from the odometer readings.

        The entry is returned unchanged unless both readings are present.
        """
        if self.start_mileage is None or self.end_mileage is None:
            return self
        return replace(self, distance=self.end_mileage - self.start_mileage)


@dataclass(frozen=True)
class WorkHours:
    """Work hours domain entity."""

    date: datetime
    total_hours: float = 0.0
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    notes: Optional[str] = None
    is_uploaded: bool = False
    last_modified: datetime = field(default_factory=datetime.now)
    id: UUID = field(default_factory=uuid4)

    def with_calculated_total_hours(self) -> "WorkHours":
        """Return a copy whose total is derived from start and end time.

        Only whole minutes count; seconds are ignored.
        """
        if self.start_time is None or self.end_time is None:
            return self
        minutes = int((self.end_time - self.start_time).total_seconds() // 60)
        hours, minutes = divmod(minutes, 60)
        return replace(self, total_hours=hours + minutes / 60.0)

    def formatted_total_hours(self) -> str:
        """Format the total as e.g. ``7h 05m``."""
        hours = int(self.total_hours)
        minutes = int(round((self.total_hours - hours) * 60))
        if minutes == 60:
            hours, minutes = hours + 1, 0
        return f"{hours}h {minutes:02d}m"


@dataclass(frozen=True)
class DashboardSummary:
    """Income and expense totals with prior-period deltas."""

    total_income: Decimal
    total_expense: Decimal
    net_income: Decimal
    income_change_percent: Optional[float]
    expense_change_percent: Optional[float]
    net_income_change_percent: Optional[float]


@dataclass(frozen=True)
class DashboardMetrics:
    """Derived per-period metrics."""

    hourly_rate: float
    cost_per_mile: float
    total_mileage: float
    total_work_hours: float
    total_tax_deductible: Decimal


@dataclass(frozen=True)
class DashboardChartData:
    """Parallel label and value series for a bar chart."""

    labels: tuple[str, ...]
    income_data: tuple[Decimal, ...]
    expense_data: tuple[Decimal, ...]


@dataclass(frozen=True)
class DashboardData:
    """Complete dashboard for one period."""

    period: Period
    date_range: DateRange
    summary: DashboardSummary
    metrics: DashboardMetrics
    chart_data: DashboardChartData


@dataclass(frozen=True)
class MileageCost:
    """Fuel cost per mile over an interval."""

    total_mileage: float
    total_fuel_cost: Decimal
    cost_per_mile: float


@dataclass(frozen=True)
class HourlyRateAnalytics:
    """Earnings per hour worked over an interval."""

    total_hours: float
    total_income: Decimal
    total_tips: Decimal
    hourly_rate: float
    hourly_rate_without_tips: float

    @property
    def tips_percentage(self) -> float:
        """Share of income that came from tips, 0-100."""
        if self.total_income <= 0:
            return 0.0
        return float(self.total_tips / self.total_income * 100)


@dataclass(frozen=True)
class ExpenseAnalytics:
    """Expense totals per category over an interval."""

    total_expense: Decimal
    total_tax_deductible: Decimal
    expenses_by_category: dict[ExpenseCategory, Decimal]

    @property
    def tax_deductible_percentage(self) -> float:
        """Share of spending that is tax deductible, 0-100."""
        if self.total_expense <= 0:
            return 0.0
        return float(self.total_tax_deductible / self.total_expense * 100)

    @property
    def top_categories(self) -> list[tuple[ExpenseCategory, Decimal]]:
        """Categories with their totals, largest first.

        Ties keep the order in which the categories were first seen.
        """
        return sorted(
            self.expenses_by_category.items(), key=lambda item: item[1], reverse=True
        )

