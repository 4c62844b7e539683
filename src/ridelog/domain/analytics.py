"""Pure aggregation functions for dashboard analytics.

This module contains the functional core of the dashboard:
- No I/O (no database, no console)
- Inputs are never mutated
- Every division is guarded, so all functions are total

Money is summed as Decimal. Ratios (percent change, hourly rate, cost per
mile) are returned as float.

Malformed records (negative amounts, percentages outside 0-100) are summed
as given; validation happens on the write path in the record services.
"""

from decimal import Decimal
from typing import Optional, Sequence

from ridelog.domain.entities import (
    DashboardMetrics,
    DashboardSummary,
    Expense,
    ExpenseAnalytics,
    ExpenseCategory,
    HourlyRateAnalytics,
    Income,
    Mileage,
    MileageCost,
    WorkHours,
)

ZERO = Decimal("0")


def percent_change(current: Decimal, previous: Decimal) -> Optional[float]:
    """Calculate relative change against a baseline.

    Args:
        current: Value for the current period
        previous: Value for the preceding period

    Returns:
        Change in percent, or None when the baseline is zero
    """
    if previous == 0:
        return None
    return float((current - previous) / previous * 100)


def _ratio(numerator: Decimal, denominator: float) -> float:
    return float(numerator) / denominator if denominator > 0 else 0.0


def total_expense(expenses: Sequence[Expense]) -> Decimal:
    return sum((expense.amount for expense in expenses), ZERO)


def total_income(income: Sequence[Income]) -> Decimal:
    return sum((item.total_amount() for item in income), ZERO)


def total_tips(income: Sequence[Income]) -> Decimal:
    return sum((item.tip_amount for item in income), ZERO)


def total_mileage(mileage: Sequence[Mileage]) -> float:
    return sum((entry.distance for entry in mileage), 0.0)


def total_work_hours(work_hours: Sequence[WorkHours]) -> float:
    return sum((entry.total_hours for entry in work_hours), 0.0)


def total_fuel_cost(expenses: Sequence[Expense]) -> Decimal:
    return total_expense(
        [expense for expense in expenses if expense.category == ExpenseCategory.FUEL]
    )


def total_tax_deductible(expenses: Sequence[Expense]) -> Decimal:
    return sum((expense.tax_deductible_amount() for expense in expenses), ZERO)


def aggregate_summary(
    current_expenses: Sequence[Expense],
    current_income: Sequence[Income],
    previous_expenses: Sequence[Expense],
    previous_income: Sequence[Income],
) -> DashboardSummary:
    """Build income/expense totals and their change against the prior period."""
    income_total = total_income(current_income)
    expense_total = total_expense(current_expenses)
    previous_income_total = total_income(previous_income)
    previous_expense_total = total_expense(previous_expenses)

    return DashboardSummary(
        total_income=income_total,
        total_expense=expense_total,
        net_income=income_total - expense_total,
        income_change_percent=percent_change(income_total, previous_income_total),
        expense_change_percent=percent_change(expense_total, previous_expense_total),
        net_income_change_percent=percent_change(
            income_total - expense_total,
            previous_income_total - previous_expense_total,
        ),
    )


def aggregate_metrics(
    current_expenses: Sequence[Expense],
    current_income: Sequence[Income],
    current_mileage: Sequence[Mileage],
    current_work_hours: Sequence[WorkHours],
) -> DashboardMetrics:
    """Build derived metrics for the current period.

    The hourly rate divides all income by all hours worked, whether or not
    the income was earned during logged hours.
    """
    mileage_total = total_mileage(current_mileage)
    hours_total = total_work_hours(current_work_hours)

    return DashboardMetrics(
        hourly_rate=_ratio(total_income(current_income), hours_total),
        cost_per_mile=_ratio(total_fuel_cost(current_expenses), mileage_total),
        total_mileage=mileage_total,
        total_work_hours=hours_total,
        total_tax_deductible=total_tax_deductible(current_expenses),
    )


def aggregate(
    current_expenses: Sequence[Expense],
    current_income: Sequence[Income],
    current_mileage: Sequence[Mileage],
    current_work_hours: Sequence[WorkHours],
    previous_expenses: Sequence[Expense],
    previous_income: Sequence[Income],
) -> tuple[DashboardSummary, DashboardMetrics]:
    """Reduce the six period collections into summary and metrics."""
    summary = aggregate_summary(
        current_expenses, current_income, previous_expenses, previous_income
    )
    metrics = aggregate_metrics(
        current_expenses, current_income, current_mileage, current_work_hours
    )
    return summary, metrics


def calculate_mileage_cost(
    mileage: Sequence[Mileage], expenses: Sequence[Expense]
) -> MileageCost:
    """Calculate fuel cost per mile; non-fuel expenses are ignored."""
    mileage_total = total_mileage(mileage)
    fuel_cost = total_fuel_cost(expenses)
    return MileageCost(
        total_mileage=mileage_total,
        total_fuel_cost=fuel_cost,
        cost_per_mile=_ratio(fuel_cost, mileage_total),
    )


def calculate_hourly_rate(
    work_hours: Sequence[WorkHours], income: Sequence[Income]
) -> HourlyRateAnalytics:
    """Calculate hourly earnings with and without tips."""
    hours_total = total_work_hours(work_hours)
    income_total = total_income(income)
    tips_total = total_tips(income)

    return HourlyRateAnalytics(
        total_hours=hours_total,
        total_income=income_total,
        total_tips=tips_total,
        hourly_rate=_ratio(income_total, hours_total),
        hourly_rate_without_tips=_ratio(income_total - tips_total, hours_total),
    )


def analyze_expenses(expenses: Sequence[Expense]) -> ExpenseAnalytics:
    """Group expenses by category.

    Categories appear in the order they are first seen; only categories with
    at least one expense are included.
    """
    by_category: dict[ExpenseCategory, Decimal] = {}
    for expense in expenses:
        by_category[expense.category] = (
            by_category.get(expense.category, ZERO) + expense.amount
        )

    return ExpenseAnalytics(
        total_expense=total_expense(expenses),
        total_tax_deductible=total_tax_deductible(expenses),
        expenses_by_category=by_category,
    )
