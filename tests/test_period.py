"""Tests for calendar period ranges."""

import pytest
from datetime import date, datetime, timedelta

from ridelog.domain.errors import ValidationError
from ridelog.domain.period import DateRange, Period


def test_day_range():
    """Test that a day runs from midnight to the next midnight."""
    result = Period.DAY.date_range(datetime(2024, 3, 10, 15, 45))
    assert result == DateRange(datetime(2024, 3, 10), datetime(2024, 3, 11))


def test_week_range_starts_on_monday():
    """Test that weeks are Monday-based."""
    # 2024-03-10 is a Sunday
    result = Period.WEEK.date_range(datetime(2024, 3, 10, 23, 0))
    assert result.start == datetime(2024, 3, 4)
    assert result.start.weekday() == 0
    assert result.end == datetime(2024, 3, 11)


def test_week_range_crossing_year():
    """Test a week that starts in the previous year."""
    result = Period.WEEK.date_range(datetime(2025, 1, 1))
    assert result.start == datetime(2024, 12, 30)
    assert result.end == datetime(2025, 1, 6)


def test_month_range_leap_february():
    """Test month range for a leap-year February."""
    result = Period.MONTH.date_range(datetime(2024, 2, 29, 12, 0))
    assert result == DateRange(datetime(2024, 2, 1), datetime(2024, 3, 1))


def test_month_range_december_rolls_year():
    """Test that December ends on January 1 of the next year."""
    result = Period.MONTH.date_range(datetime(2023, 12, 31))
    assert result.end == datetime(2024, 1, 1)


@pytest.mark.parametrize(
    "month,expected_start",
    [(1, 1), (3, 1), (4, 4), (6, 4), (7, 7), (9, 7), (10, 10), (12, 10)],
)
def test_quarter_range(month, expected_start):
    """Test that quarters start on January, April, July and October."""
    result = Period.QUARTER.date_range(datetime(2024, month, 15))
    assert result.start == datetime(2024, expected_start, 1)
    if expected_start < 10:
        assert result.end == datetime(2024, expected_start + 3, 1)
    else:
        assert result.end == datetime(2025, 1, 1)


def test_fourth_quarter_ends_next_year():
    """Test the last quarter ends on January 1 of the next year."""
    result = Period.QUARTER.date_range(datetime(2024, 11, 5))
    assert result == DateRange(datetime(2024, 10, 1), datetime(2025, 1, 1))


def test_year_range():
    """Test that a year runs from January 1 to January 1."""
    result = Period.YEAR.date_range(datetime(2024, 7, 4))
    assert result == DateRange(datetime(2024, 1, 1), datetime(2025, 1, 1))


def test_date_range_accepts_date():
    """Test that a plain date is accepted as reference."""
    assert Period.MONTH.date_range(date(2024, 3, 10)) == Period.MONTH.date_range(
        datetime(2024, 3, 10, 8, 30)
    )


def test_date_range_defaults_to_now():
    """Test that the reference defaults to the current instant."""
    result = Period.DAY.date_range()
    assert result.start <= datetime.now()
    assert result.end - result.start == timedelta(days=1)


def test_previous_month_from_month_end():
    """Test that the previous month of January 31 is December, not a fixed 31 days."""
    current = Period.MONTH.date_range(datetime(2024, 1, 31))
    previous = Period.MONTH.previous_range(current)
    assert current.start == datetime(2024, 1, 1)
    assert previous == DateRange(datetime(2023, 12, 1), datetime(2024, 1, 1))


def test_previous_month_before_march_is_february():
    """Test that shifting March back lands on the whole of February."""
    current = Period.MONTH.date_range(datetime(2024, 3, 31))
    previous = Period.MONTH.previous_range(current)
    assert previous == DateRange(datetime(2024, 2, 1), datetime(2024, 3, 1))


def test_previous_quarter_and_year():
    """Test previous quarter and year use calendar months and years."""
    quarter = Period.QUARTER.date_range(datetime(2024, 2, 10))
    assert Period.QUARTER.previous_range(quarter) == DateRange(
        datetime(2023, 10, 1), datetime(2024, 1, 1)
    )

    year = Period.YEAR.date_range(datetime(2024, 2, 29))
    assert Period.YEAR.previous_range(year) == DateRange(
        datetime(2023, 1, 1), datetime(2024, 1, 1)
    )


@pytest.mark.parametrize("period", list(Period))
@pytest.mark.parametrize(
    "reference",
    [
        datetime(2024, 1, 31, 23, 59),
        datetime(2024, 2, 29, 0, 0),
        datetime(2024, 3, 31, 12, 0),
        datetime(2024, 5, 31, 6, 0),
        datetime(2024, 12, 31, 18, 0),
        datetime(2025, 1, 1, 0, 0),
    ],
)
def test_previous_range_ends_where_current_starts(period, reference):
    """Test that the previous interval ends exactly where the current one starts."""
    current = period.date_range(reference)
    previous = period.previous_range(current)
    assert previous.end == current.start
    assert previous.start < previous.end
    assert reference in current


def test_parse_period():
    """Test parsing period names."""
    assert Period.parse("Month") is Period.MONTH
    assert Period.parse(" quarter ") is Period.QUARTER


def test_parse_unknown_period():
    """Test that an unknown period name is rejected."""
    with pytest.raises(ValidationError, match="Unknown period"):
        Period.parse("fortnight")
