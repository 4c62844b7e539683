"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic (UUID text columns, enum values,
receipt id lists) from both the domain entities and the ORM schema.
"""

from typing import Optional
from uuid import UUID

from ridelog.domain import entities as domain
from ridelog.database.models import (
    Expense as ORMExpense,
    Income as ORMIncome,
    Mileage as ORMMileage,
    WorkHours as ORMWorkHours,
)


def _uuid_or_none(value: Optional[str]) -> Optional[UUID]:
    return UUID(value) if value else None


def _str_or_none(value: Optional[UUID]) -> Optional[str]:
    return str(value) if value is not None else None


def _receipt_ids_to_domain(value: Optional[str]) -> tuple[UUID, ...]:
    if not value:
        return ()
    return tuple(UUID(part) for part in value.split(","))


def _receipt_ids_to_orm(receipt_ids: tuple[UUID, ...]) -> Optional[str]:
    if not receipt_ids:
        return None
    return ",".join(str(receipt_id) for receipt_id in receipt_ids)


def expense_to_domain(orm_expense: ORMExpense) -> domain.Expense:
    """Convert SQLAlchemy Expense model to domain Expense entity."""
    return domain.Expense(
        id=UUID(orm_expense.id),
        date=orm_expense.date,
        amount=orm_expense.amount,
        category=domain.ExpenseCategory(orm_expense.category),
        description=orm_expense.description,
        is_tax_deductible=orm_expense.is_tax_deductible,
        tax_deductible_percentage=orm_expense.tax_deductible_percentage,
        creation_method=domain.CreationMethod(orm_expense.creation_method),
        is_uploaded=orm_expense.is_uploaded,
        last_modified=orm_expense.last_modified,
        receipt_ids=_receipt_ids_to_domain(orm_expense.receipt_ids),
        related_mileage_id=_uuid_or_none(orm_expense.related_mileage_id),
    )


def apply_expense(orm_expense: ORMExpense, expense: domain.Expense) -> ORMExpense:
    """Copy domain Expense fields onto a SQLAlchemy Expense model."""
    orm_expense.id = str(expense.id)
    orm_expense.date = expense.date
    orm_expense.amount = expense.amount
    orm_expense.category = expense.category.value
    orm_expense.description = expense.description
    orm_expense.is_tax_deductible = expense.is_tax_deductible
    orm_expense.tax_deductible_percentage = expense.tax_deductible_percentage
    orm_expense.creation_method = expense.creation_method.value
    orm_expense.is_uploaded = expense.is_uploaded
    orm_expense.last_modified = expense.last_modified
    orm_expense.receipt_ids = _receipt_ids_to_orm(expense.receipt_ids)
    orm_expense.related_mileage_id = _str_or_none(expense.related_mileage_id)
    return orm_expense


def income_to_domain(orm_income: ORMIncome) -> domain.Income:
    """Convert SQLAlchemy Income model to domain Income entity."""
    return domain.Income(
        id=UUID(orm_income.id),
        date=orm_income.date,
        amount=orm_income.amount,
        tip_amount=orm_income.tip_amount,
        source=domain.IncomeSource(orm_income.source),
        notes=orm_income.notes,
        is_uploaded=orm_income.is_uploaded,
        last_modified=orm_income.last_modified,
    )


def apply_income(orm_income: ORMIncome, income: domain.Income) -> ORMIncome:
    """Copy domain Income fields onto a SQLAlchemy Income model."""
    orm_income.id = str(income.id)
    orm_income.date = income.date
    orm_income.amount = income.amount
    orm_income.tip_amount = income.tip_amount
    orm_income.source = income.source.value
    orm_income.notes = income.notes
    orm_income.is_uploaded = income.is_uploaded
    orm_income.last_modified = income.last_modified
    return orm_income


def mileage_to_domain(orm_mileage: ORMMileage) -> domain.Mileage:
    """Convert SQLAlchemy Mileage model to domain Mileage entity."""
    return domain.Mileage(
        id=UUID(orm_mileage.id),
        date=orm_mileage.date,
        start_mileage=orm_mileage.start_mileage,
        end_mileage=orm_mileage.end_mileage,
        distance=orm_mileage.distance,
        purpose=orm_mileage.purpose,
        is_tax_deductible=orm_mileage.is_tax_deductible,
        tax_deductible_percentage=orm_mileage.tax_deductible_percentage,
        related_fuel_expense_id=_uuid_or_none(orm_mileage.related_fuel_expense_id),
        is_uploaded=orm_mileage.is_uploaded,
        last_modified=orm_mileage.last_modified,
    )


def apply_mileage(orm_mileage: ORMMileage, mileage: domain.Mileage) -> ORMMileage:
    """Copy domain Mileage fields onto a SQLAlchemy Mileage model."""
    orm_mileage.id = str(mileage.id)
    orm_mileage.date = mileage.date
    orm_mileage.start_mileage = mileage.start_mileage
    orm_mileage.end_mileage = mileage.end_mileage
    orm_mileage.distance = mileage.distance
    orm_mileage.purpose = mileage.purpose
    orm_mileage.is_tax_deductible = mileage.is_tax_deductible
    orm_mileage.tax_deductible_percentage = mileage.tax_deductible_percentage
    orm_mileage.related_fuel_expense_id = _str_or_none(mileage.related_fuel_expense_id)
    orm_mileage.is_uploaded = mileage.is_uploaded
    orm_mileage.last_modified = mileage.last_modified
    return orm_mileage


def work_hours_to_domain(orm_work_hours: ORMWorkHours) -> domain.WorkHours:
    """Convert SQLAlchemy WorkHours model to domain WorkHours entity."""
    return domain.WorkHours(
        id=UUID(orm_work_hours.id),
        date=orm_work_hours.date,
        start_time=orm_work_hours.start_time,
        end_time=orm_work_hours.end_time,
        total_hours=orm_work_hours.total_hours,
        notes=orm_work_hours.notes,
        is_uploaded=orm_work_hours.is_uploaded,
        last_modified=orm_work_hours.last_modified,
    )


def apply_work_hours(
    orm_work_hours: ORMWorkHours, work_hours: domain.WorkHours
) -> ORMWorkHours:
    """Copy domain WorkHours fields onto a SQLAlchemy WorkHours model."""
    orm_work_hours.id = str(work_hours.id)
    orm_work_hours.date = work_hours.date
    orm_work_hours.start_time = work_hours.start_time
    orm_work_hours.end_time = work_hours.end_time
    orm_work_hours.total_hours = work_hours.total_hours
    orm_work_hours.notes = work_hours.notes
    orm_work_hours.is_uploaded = work_hours.is_uploaded
    orm_work_hours.last_modified = work_hours.last_modified
    return orm_work_hours
