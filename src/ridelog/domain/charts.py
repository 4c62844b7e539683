"""Chart series bucketing for the dashboard."""

from datetime import datetime
from decimal import Decimal
from typing import Callable, Sequence

from ridelog.domain.entities import DashboardChartData, Expense, Income
from ridelog.domain.period import DateRange, Period

WEEKDAY_LABELS = ("M", "T", "W", "T", "F", "S", "S")
MONTH_LABELS = (
    "JAN", "FEB", "MAR", "APR", "MAY", "JUN",
    "JUL", "AUG", "SEP", "OCT", "NOV", "DEC",
)
WEEKS_PER_MONTH = 5


def build_labels(period: Period, interval: DateRange) -> tuple[str, ...]:
    """Get bucket labels for a period.

    Quarter and year labels start at the interval's first month.
    """
    if period is Period.DAY:
        return tuple(f"{hour:02d}" for hour in range(24))
    if period is Period.WEEK:
        return WEEKDAY_LABELS
    if period is Period.MONTH:
        return tuple(f"Week {week}" for week in range(1, WEEKS_PER_MONTH + 1))

    month_count = 3 if period is Period.QUARTER else 12
    first = interval.start.month - 1
    return tuple(MONTH_LABELS[(first + offset) % 12] for offset in range(month_count))


def bucket_index(period: Period, moment: datetime, interval: DateRange) -> int:
    """Get the raw bucket index for a moment; may be out of range."""
    if period is Period.DAY:
        return moment.hour
    if period is Period.WEEK:
        return moment.weekday()
    if period is Period.MONTH:
        day_diff = (moment.date() - interval.start.date()).days
        return day_diff // 7
    return (moment.month - interval.start.month + 12) % 12


def _bucket_series(
    period: Period,
    interval: DateRange,
    size: int,
    items: Sequence,
    value: Callable[..., Decimal],
) -> tuple[Decimal, ...]:
    series = [Decimal("0")] * size
    for item in items:
        index = bucket_index(period, item.date, interval)
        # Clamp so every amount lands in some bucket.
        index = min(max(index, 0), size - 1)
        series[index] += value(item)
    return tuple(series)


def bucketize(
    period: Period,
    expenses: Sequence[Expense],
    income: Sequence[Income],
    interval: DateRange,
) -> DashboardChartData:
    """Sum income and expense per bucket of the period.

    Args:
        period: Granularity of the dashboard
        expenses: Expenses inside ``interval``
        income: Income inside ``interval``
        interval: The period's date range

    Returns:
        DashboardChartData with labels and two series of equal length
    """
    labels = build_labels(period, interval)
    size = len(labels)
    return DashboardChartData(
        labels=labels,
        income_data=_bucket_series(
            period, interval, size, income, lambda item: item.total_amount()
        ),
        expense_data=_bucket_series(
            period, interval, size, expenses, lambda item: item.amount
        ),
    )
