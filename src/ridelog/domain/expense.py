"""Expense domain service."""

from dataclasses import replace
from datetime import datetime
from decimal import Decimal
from typing import Optional, Sequence
from uuid import UUID

from ridelog.database.base import Database
from ridelog.domain.entities import CreationMethod, Expense, ExpenseCategory
from ridelog.domain.errors import NotFoundError, record_not_found
from ridelog.domain.validation import require_non_negative, require_percentage


class ExpenseService:
    """Service for managing expenses."""

    def __init__(self, db: Database):
        """Initialize expense service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_expense(
        self,
        date: datetime,
        amount: Decimal,
        category: ExpenseCategory = ExpenseCategory.OTHER,
        description: Optional[str] = None,
        is_tax_deductible: Optional[bool] = None,
        tax_deductible_percentage: int = 100,
        creation_method: CreationMethod = CreationMethod.MANUAL,
        receipt_ids: Sequence[UUID] = (),
        related_mileage_id: Optional[UUID] = None,
    ) -> UUID:
        """Create an expense.

        Args:
            date: When the expense was incurred
            amount: Amount paid
            category: Expense category
            description: Optional description
            is_tax_deductible: Deductibility; defaults to the category's default
            tax_deductible_percentage: Business-use share, 0-100
            creation_method: Manual entry or OCR
            receipt_ids: Receipts attached to the expense
            related_mileage_id: Optional linked mileage entry

        Returns:
            Expense ID

        Raises:
            ValidationError: If amount is negative or percentage is out of range
        """
        if is_tax_deductible is None:
            is_tax_deductible = category.is_tax_deductible

        expense = Expense(
            date=date,
            amount=amount,
            category=category,
            description=description,
            is_tax_deductible=is_tax_deductible,
            tax_deductible_percentage=tax_deductible_percentage,
            creation_method=creation_method,
            receipt_ids=tuple(receipt_ids),
            related_mileage_id=related_mileage_id,
        )
        self._validate(expense)
        return self.db.create_expense(expense)

    def get_expense(self, expense_id: UUID) -> Optional[Expense]:
        """Get expense by ID, or None if not found."""
        return self.db.get_expense(expense_id)

    def require_expense(self, expense_id: UUID) -> Expense:
        """Get expense by ID.

        Raises:
            NotFoundError: If the expense does not exist
        """
        expense = self.db.get_expense(expense_id)
        if expense is None:
            raise NotFoundError(record_not_found("Expense", expense_id))
        return expense

    def list_expenses(
        self,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        category: Optional[ExpenseCategory] = None,
    ) -> list[Expense]:
        """List expenses, optionally limited to ``[start, end)`` and a category."""
        if category is not None:
            expenses = self.db.get_expenses_by_category(category)
        elif start is not None and end is not None:
            return self.db.get_expenses_by_date_range(start, end)
        else:
            expenses = self.db.get_all_expenses()

        return [
            expense
            for expense in expenses
            if (start is None or expense.date >= start)
            and (end is None or expense.date < end)
        ]

    def get_expense_by_receipt(self, receipt_id: UUID) -> Optional[Expense]:
        """Get the expense a receipt is attached to."""
        for expense in self.db.get_all_expenses():
            if receipt_id in expense.receipt_ids:
                return expense
        return None

    def update_expense(self, expense: Expense) -> Expense:
        """Store changes to an existing expense.

        Returns:
            The stored expense with a fresh ``last_modified`` stamp

        Raises:
            ValidationError: If the expense is invalid
            NotFoundError: If the expense does not exist
        """
        self._validate(expense)
        self.require_expense(expense.id)
        updated = replace(expense, last_modified=datetime.now())
        self.db.update_expense(updated)
        return updated

    def delete_expense(self, expense_id: UUID) -> None:
        """Delete an expense.

        Raises:
            NotFoundError: If the expense does not exist
        """
        self.require_expense(expense_id)
        self.db.delete_expense(expense_id)

    def list_unsynced_expenses(self) -> list[Expense]:
        """List expenses not yet marked as uploaded."""
        return [e for e in self.db.get_all_expenses() if not e.is_uploaded]

    def mark_expense_synced(self, expense_id: UUID) -> None:
        """Flag an expense as uploaded."""
        expense = self.require_expense(expense_id)
        self.db.update_expense(replace(expense, is_uploaded=True))

    def _validate(self, expense: Expense) -> None:
        require_non_negative("Amount", expense.amount)
        require_percentage(expense.tax_deductible_percentage)
