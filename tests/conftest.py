"""Shared pytest fixtures for ridelog tests."""

import tempfile
import os
from datetime import datetime
from decimal import Decimal
import pytest

from ridelog.database.factories import create_sqlite_database
from ridelog.domain.dashboard import DashboardService
from ridelog.domain.entities import ExpenseCategory, IncomeSource
from ridelog.domain.expense import ExpenseService
from ridelog.domain.income import IncomeService
from ridelog.domain.mileage import MileageService
from ridelog.domain.work_hours import WorkHoursService


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def expense_service(temp_db):
    """Create an ExpenseService with a temporary database."""
    return ExpenseService(temp_db)


@pytest.fixture
def income_service(temp_db):
    """Create an IncomeService with a temporary database."""
    return IncomeService(temp_db)


@pytest.fixture
def mileage_service(temp_db):
    """Create a MileageService with a temporary database."""
    return MileageService(temp_db)


@pytest.fixture
def work_hours_service(temp_db):
    """Create a WorkHoursService with a temporary database."""
    return WorkHoursService(temp_db)


@pytest.fixture
def dashboard_service(temp_db):
    """Create a DashboardService with a temporary database."""
    return DashboardService(temp_db)


@pytest.fixture
def march_records(expense_service, income_service, mileage_service, work_hours_service):
    """Populate February and March 2024 with a small set of records.

    March 2024: income 110 + 200, expenses 50 (fuel) + 30 (maintenance)
    + 20 (parking), 200 miles, 10 hours.
    February 2024: income 250, expenses 40.
    """
    income_service.create_income(
        date=datetime(2024, 3, 1, 9, 15),
        amount=Decimal("100"),
        tip_amount=Decimal("10"),
        source=IncomeSource.UBER,
    )
    income_service.create_income(
        date=datetime(2024, 3, 10, 18, 0), amount=Decimal("200"), source=IncomeSource.BOLT
    )
    expense_service.create_expense(
        date=datetime(2024, 3, 2, 8, 0), amount=Decimal("50"), category=ExpenseCategory.FUEL
    )
    expense_service.create_expense(
        date=datetime(2024, 3, 20, 12, 0), amount=Decimal("30"), category=ExpenseCategory.MAINTENANCE
    )
    expense_service.create_expense(
        date=datetime(2024, 3, 31, 23, 59), amount=Decimal("20"), category=ExpenseCategory.PARKING
    )
    mileage_service.create_mileage(date=datetime(2024, 3, 2), distance=120.0)
    mileage_service.create_mileage(
        date=datetime(2024, 3, 10), start_mileage=1000.0, end_mileage=1080.0
    )
    work_hours_service.create_work_hours(
        date=datetime(2024, 3, 10),
        start_time=datetime(2024, 3, 10, 8, 0),
        end_time=datetime(2024, 3, 10, 14, 0),
    )
    work_hours_service.create_work_hours(date=datetime(2024, 3, 11), total_hours=4.0)

    income_service.create_income(date=datetime(2024, 2, 14, 12, 0), amount=Decimal("250"))
    expense_service.create_expense(
        date=datetime(2024, 2, 29, 10, 0), amount=Decimal("40"), category=ExpenseCategory.FUEL
    )
    # Outside both months
    income_service.create_income(date=datetime(2024, 4, 1, 0, 0), amount=Decimal("999"))


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
