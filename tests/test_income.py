"""Tests for the income domain service."""

import pytest
from dataclasses import replace
from datetime import datetime
from decimal import Decimal
from uuid import uuid4

from ridelog.domain.entities import Income, IncomeSource
from ridelog.domain.errors import NotFoundError, ValidationError


def test_create_income(income_service):
    """Test creating and reading back an income entry."""
    income_id = income_service.create_income(
        date=datetime(2024, 3, 1, 22, 30),
        amount=Decimal("84"),
        tip_amount=Decimal("6"),
        source=IncomeSource.FREENOW,
        notes="Airport run",
    )

    income = income_service.get_income(income_id)
    assert isinstance(income, Income)
    assert income.amount == Decimal("84")
    assert income.tip_amount == Decimal("6")
    assert income.total_amount() == Decimal("90")
    assert income.source is IncomeSource.FREENOW
    assert income.source.display_name == "Free Now"
    assert income.notes == "Airport run"


@pytest.mark.parametrize(
    "amount,tip,message",
    [("-5", "0", "Amount"), ("5", "-1", "Tip amount")],
)
def test_create_income_negative_values(income_service, amount, tip, message):
    """Test that negative fares and tips are rejected."""
    with pytest.raises(ValidationError, match=message):
        income_service.create_income(
            date=datetime(2024, 3, 1), amount=Decimal(amount), tip_amount=Decimal(tip)
        )


def test_list_income_by_range(income_service, march_records):
    """Test that April 1 midnight is not part of March."""
    income = income_service.list_income(
        start=datetime(2024, 3, 1), end=datetime(2024, 4, 1)
    )
    assert [i.total_amount() for i in income] == [Decimal("110"), Decimal("200")]


def test_list_income_by_source(income_service, march_records):
    """Test filtering income by source."""
    bolt = income_service.list_income(source=IncomeSource.BOLT)
    assert [i.amount for i in bolt] == [Decimal("200")]

    uber_march = income_service.list_income(
        start=datetime(2024, 3, 1),
        end=datetime(2024, 4, 1),
        source=IncomeSource.UBER,
    )
    assert [i.amount for i in uber_march] == [Decimal("100")]


def test_list_all_income_oldest_first(income_service, march_records):
    """Test that listing without a range returns entries by date."""
    dates = [i.date for i in income_service.list_income()]
    assert dates == sorted(dates)
    assert len(dates) == 4


def test_update_income(income_service):
    """Test updating an income entry."""
    income_id = income_service.create_income(date=datetime(2024, 3, 1), amount=Decimal("10"))
    income = income_service.get_income(income_id)

    income_service.update_income(replace(income, tip_amount=Decimal("2.5")))

    assert income_service.get_income(income_id).tip_amount == Decimal("2.5")


def test_update_missing_income(income_service):
    """Test that updating an unknown entry raises NotFoundError."""
    with pytest.raises(NotFoundError):
        income_service.update_income(Income(date=datetime(2024, 3, 1), amount=Decimal("1")))


def test_delete_income(income_service):
    """Test deleting an income entry."""
    income_id = income_service.create_income(date=datetime(2024, 3, 1), amount=Decimal("10"))
    income_service.delete_income(income_id)
    assert income_service.get_income(income_id) is None


def test_delete_missing_income(income_service):
    """Test that deleting an unknown entry raises NotFoundError."""
    with pytest.raises(NotFoundError, match="not found"):
        income_service.delete_income(uuid4())


def test_sync_flags(income_service):
    """Test listing and marking unsynced income."""
    income_id = income_service.create_income(date=datetime(2024, 3, 1), amount=Decimal("10"))
    assert [i.id for i in income_service.list_unsynced_income()] == [income_id]

    income_service.mark_income_synced(income_id)
    assert income_service.list_unsynced_income() == []
