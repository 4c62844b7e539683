"""Tests for the mileage domain service."""

import pytest
from dataclasses import replace
from datetime import datetime
from decimal import Decimal

from ridelog.domain.entities import ExpenseCategory, Mileage
from ridelog.domain.errors import NotFoundError, ValidationError


def test_create_mileage_with_distance(mileage_service):
    """Test that a plain distance is stored as given."""
    mileage_id = mileage_service.create_mileage(
        date=datetime(2024, 3, 2), distance=42.5, purpose="Airport shift"
    )

    mileage = mileage_service.get_mileage(mileage_id)
    assert isinstance(mileage, Mileage)
    assert mileage.distance == pytest.approx(42.5)
    assert mileage.start_mileage is None
    assert mileage.purpose == "Airport shift"
    assert mileage.is_tax_deductible is True


def test_distance_derived_from_odometer(mileage_service):
    """Test that both readings override the given distance."""
    mileage_id = mileage_service.create_mileage(
        date=datetime(2024, 3, 2),
        distance=999.0,
        start_mileage=10500.0,
        end_mileage=10620.5,
    )
    assert mileage_service.get_mileage(mileage_id).distance == pytest.approx(120.5)


def test_single_reading_keeps_distance(mileage_service):
    """Test that one reading alone does not change the distance."""
    mileage_id = mileage_service.create_mileage(
        date=datetime(2024, 3, 2), distance=15.0, start_mileage=10500.0
    )
    assert mileage_service.get_mileage(mileage_id).distance == pytest.approx(15.0)


def test_end_below_start_rejected(mileage_service):
    """Test that an odometer going backwards is rejected."""
    with pytest.raises(ValidationError, match="below start mileage"):
        mileage_service.create_mileage(
            date=datetime(2024, 3, 2), start_mileage=200.0, end_mileage=100.0
        )


@pytest.mark.parametrize(
    "kwargs",
    [
        {"distance": -1.0},
        {"start_mileage": -5.0, "end_mileage": 10.0},
        {"distance": 10.0, "tax_deductible_percentage": 120},
    ],
)
def test_invalid_mileage_rejected(mileage_service, kwargs):
    """Test validation of distance, readings and percentage."""
    with pytest.raises(ValidationError):
        mileage_service.create_mileage(date=datetime(2024, 3, 2), **kwargs)


def test_tax_deductible_mileage(mileage_service):
    """Test the deductible share of a trip."""
    mileage_id = mileage_service.create_mileage(
        date=datetime(2024, 3, 2), distance=80.0, tax_deductible_percentage=75
    )
    assert mileage_service.get_mileage(mileage_id).tax_deductible_mileage() == pytest.approx(60.0)


def test_list_mileage_by_range(mileage_service, march_records):
    """Test listing mileage in a half-open range."""
    entries = mileage_service.list_mileage(
        start=datetime(2024, 3, 2), end=datetime(2024, 3, 10)
    )
    assert [m.distance for m in entries] == [120.0]


def test_mileage_for_fuel_expense(mileage_service, expense_service):
    """Test finding the trips linked to a fuel expense."""
    fuel_id = expense_service.create_expense(
        date=datetime(2024, 3, 2), amount=Decimal("50"), category=ExpenseCategory.FUEL
    )
    linked = mileage_service.create_mileage(
        date=datetime(2024, 3, 2), distance=30.0, related_fuel_expense_id=fuel_id
    )
    mileage_service.create_mileage(date=datetime(2024, 3, 3), distance=12.0)

    entries = mileage_service.get_mileage_for_fuel_expense(fuel_id)
    assert [m.id for m in entries] == [linked]
    assert entries[0].related_fuel_expense_id == fuel_id


def test_update_mileage_recalculates_distance(mileage_service):
    """Test that updated readings are applied to the stored distance."""
    mileage_id = mileage_service.create_mileage(
        date=datetime(2024, 3, 2), start_mileage=100.0, end_mileage=150.0
    )
    mileage = mileage_service.get_mileage(mileage_id)

    updated = mileage_service.update_mileage(replace(mileage, end_mileage=175.0))

    assert updated.distance == pytest.approx(75.0)
    assert mileage_service.get_mileage(mileage_id).distance == pytest.approx(75.0)


def test_delete_mileage(mileage_service):
    """Test deleting a mileage entry."""
    mileage_id = mileage_service.create_mileage(date=datetime(2024, 3, 2), distance=5.0)
    mileage_service.delete_mileage(mileage_id)

    with pytest.raises(NotFoundError):
        mileage_service.require_mileage(mileage_id)


def test_sync_flags(mileage_service):
    """Test listing and marking unsynced mileage."""
    mileage_id = mileage_service.create_mileage(date=datetime(2024, 3, 2), distance=5.0)
    mileage_service.mark_mileage_synced(mileage_id)
    assert mileage_service.list_unsynced_mileage() == []
