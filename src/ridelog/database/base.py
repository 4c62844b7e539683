"""Abstract database interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional
from uuid import UUID

# Import entities directly to avoid circular import through domain/__init__.py
from ridelog.domain.entities import (
    Expense,
    ExpenseCategory,
    Income,
    IncomeSource,
    Mileage,
    WorkHours,
)


class Database(ABC):
    """Abstract record store for ridelog.

    Date-range queries are half-open: ``start <= date < end``. Implementations
    raise ``StorageError`` when the underlying store fails.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Expense operations
    @abstractmethod
    def create_expense(self, expense: Expense) -> UUID:
        """Store a new expense. Returns expense ID."""
        pass

    @abstractmethod
    def get_expense(self, expense_id: UUID) -> Optional[Expense]:
        """Get expense by ID."""
        pass

    @abstractmethod
    def get_all_expenses(self) -> list[Expense]:
        """List all expenses, oldest first."""
        pass

    @abstractmethod
    def get_expenses_by_date_range(self, start: datetime, end: datetime) -> list[Expense]:
        """List expenses dated in ``[start, end)``."""
        pass

    @abstractmethod
    def get_expenses_by_category(self, category: ExpenseCategory) -> list[Expense]:
        """List expenses in a category."""
        pass

    @abstractmethod
    def update_expense(self, expense: Expense) -> None:
        """Replace a stored expense."""
        pass

    @abstractmethod
    def delete_expense(self, expense_id: UUID) -> None:
        """Delete an expense."""
        pass

    # Income operations
    @abstractmethod
    def create_income(self, income: Income) -> UUID:
        """Store a new income entry. Returns income ID."""
        pass

    @abstractmethod
    def get_income(self, income_id: UUID) -> Optional[Income]:
        """Get income entry by ID."""
        pass

    @abstractmethod
    def get_all_income(self) -> list[Income]:
        """List all income entries, oldest first."""
        pass

    @abstractmethod
    def get_income_by_date_range(self, start: datetime, end: datetime) -> list[Income]:
        """List income entries dated in ``[start, end)``."""
        pass

    @abstractmethod
    def get_income_by_source(self, source: IncomeSource) -> list[Income]:
        """List income entries from a source."""
        pass

    @abstractmethod
    def update_income(self, income: Income) -> None:
        """Replace a stored income entry."""
        pass

    @abstractmethod
    def delete_income(self, income_id: UUID) -> None:
        """Delete an income entry."""
        pass

    # Mileage operations
    @abstractmethod
    def create_mileage(self, mileage: Mileage) -> UUID:
        """Store a new mileage entry. Returns mileage ID."""
        pass

    @abstractmethod
    def get_mileage(self, mileage_id: UUID) -> Optional[Mileage]:
        """Get mileage entry by ID."""
        pass

    @abstractmethod
    def get_all_mileage(self) -> list[Mileage]:
        """List all mileage entries, oldest first."""
        pass

    @abstractmethod
    def get_mileage_by_date_range(self, start: datetime, end: datetime) -> list[Mileage]:
        """List mileage entries dated in ``[start, end)``."""
        pass

    @abstractmethod
    def get_mileage_by_fuel_expense(self, expense_id: UUID) -> list[Mileage]:
        """List mileage entries linked to a fuel expense."""
        pass

    @abstractmethod
    def update_mileage(self, mileage: Mileage) -> None:
        """Replace a stored mileage entry."""
        pass

    @abstractmethod
    def delete_mileage(self, mileage_id: UUID) -> None:
        """Delete a mileage entry."""
        pass

    # Work hours operations
    @abstractmethod
    def create_work_hours(self, work_hours: WorkHours) -> UUID:
        """Store a new work hours entry. Returns work hours ID."""
        pass

    @abstractmethod
    def get_work_hours(self, work_hours_id: UUID) -> Optional[WorkHours]:
        """Get work hours entry by ID."""
        pass

    @abstractmethod
    def get_all_work_hours(self) -> list[WorkHours]:
        """List all work hours entries, oldest first."""
        pass

    @abstractmethod
    def get_work_hours_by_date_range(self, start: datetime, end: datetime) -> list[WorkHours]:
        """List work hours entries dated in ``[start, end)``."""
        pass

    @abstractmethod
    def update_work_hours(self, work_hours: WorkHours) -> None:
        """Replace a stored work hours entry."""
        pass

    @abstractmethod
    def delete_work_hours(self, work_hours_id: UUID) -> None:
        """Delete a work hours entry."""
        pass
