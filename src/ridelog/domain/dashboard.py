"""Dashboard domain service."""

import logging
from concurrent.futures import Executor
from datetime import date, datetime
from typing import Any, Callable, Optional, Union

from ridelog.database.base import Database
from ridelog.domain.analytics import (
    aggregate,
    analyze_expenses,
    calculate_hourly_rate,
    calculate_mileage_cost,
)
from ridelog.domain.charts import bucketize
from ridelog.domain.entities import (
    DashboardData,
    ExpenseAnalytics,
    HourlyRateAnalytics,
    MileageCost,
)
from ridelog.domain.period import DateRange, Period

logger = logging.getLogger(__name__)

Reference = Optional[Union[date, datetime]]


class DashboardService:
    """Service computing period dashboards from the record store."""

    def __init__(self, db: Database, executor: Optional[Executor] = None):
        """Initialize dashboard service.

        Args:
            db: Database instance
            executor: Optional executor used to run the record queries
                concurrently. Without one the queries run one after another.
        """
        self.db = db
        self.executor = executor

    def compute_dashboard(
        self, period: Period, reference: Reference = None
    ) -> DashboardData:
        """Compute the dashboard for the period containing ``reference``.

        Args:
            period: Granularity of the dashboard
            reference: Instant inside the period; defaults to now

        Returns:
            DashboardData for the period

        Raises:
            StorageError: If any of the record queries fails. No partial
                dashboard is produced.
        """
        current = period.date_range(reference)
        previous = period.previous_range(current)
        logger.debug(
            "Computing %s dashboard for [%s, %s), previous [%s, %s)",
            period.value,
            current.start,
            current.end,
            previous.start,
            previous.end,
        )

        (
            current_expenses,
            current_income,
            current_mileage,
            current_work_hours,
            previous_expenses,
            previous_income,
        ) = self._fetch_all(
            (self.db.get_expenses_by_date_range, current),
            (self.db.get_income_by_date_range, current),
            (self.db.get_mileage_by_date_range, current),
            (self.db.get_work_hours_by_date_range, current),
            (self.db.get_expenses_by_date_range, previous),
            (self.db.get_income_by_date_range, previous),
        )

        summary, metrics = aggregate(
            current_expenses,
            current_income,
            current_mileage,
            current_work_hours,
            previous_expenses,
            previous_income,
        )
        chart_data = bucketize(period, current_expenses, current_income, current)

        return DashboardData(
            period=period,
            date_range=current,
            summary=summary,
            metrics=metrics,
            chart_data=chart_data,
        )

    def get_mileage_cost(
        self, period: Period, reference: Reference = None
    ) -> MileageCost:
        """Calculate fuel cost per mile for the period containing ``reference``."""
        interval = period.date_range(reference)
        mileage, expenses = self._fetch_all(
            (self.db.get_mileage_by_date_range, interval),
            (self.db.get_expenses_by_date_range, interval),
        )
        return calculate_mileage_cost(mileage, expenses)

    def get_hourly_rate(
        self, period: Period, reference: Reference = None
    ) -> HourlyRateAnalytics:
        """Calculate hourly earnings for the period containing ``reference``."""
        interval = period.date_range(reference)
        work_hours, income = self._fetch_all(
            (self.db.get_work_hours_by_date_range, interval),
            (self.db.get_income_by_date_range, interval),
        )
        return calculate_hourly_rate(work_hours, income)

    def get_expense_analytics(
        self, period: Period, reference: Reference = None
    ) -> ExpenseAnalytics:
        """Break down spending by category for the period containing ``reference``."""
        interval = period.date_range(reference)
        (expenses,) = self._fetch_all((self.db.get_expenses_by_date_range, interval))
        return analyze_expenses(expenses)

    def _fetch_all(
        self, *queries: tuple[Callable[[datetime, datetime], list], DateRange]
    ) -> list[list[Any]]:
        """Run range queries and wait for all of them.

        Results come back in query order. The first failure, in query order,
        is re-raised unchanged.
        """
        if self.executor is None:
            return [query(interval.start, interval.end) for query, interval in queries]

        futures = [
            self.executor.submit(query, interval.start, interval.end)
            for query, interval in queries
        ]
        return [future.result() for future in futures]
