"""Tests for date and amount parsing utilities."""

import pytest
from datetime import datetime, time, timedelta
from decimal import Decimal

from ridelog.utils.amount_parser import parse_amount
from ridelog.utils.date_parser import parse_date, parse_time_of_day


def _midnight(moment: datetime) -> datetime:
    return moment.replace(hour=0, minute=0, second=0, microsecond=0)


def test_parse_absolute_date():
    """Test parsing ISO dates with and without a time."""
    assert parse_date("2024-01-15") == datetime(2024, 1, 15)
    assert parse_date("2024-01-15 14:30") == datetime(2024, 1, 15, 14, 30)


def test_parse_written_date():
    """Test parsing a written-out date."""
    assert parse_date("January 15, 2024") == datetime(2024, 1, 15)


def test_parse_today():
    """Test that relative days resolve to midnight."""
    today = _midnight(datetime.now())
    assert parse_date("today") == today
    assert parse_date("Yesterday") == today - timedelta(days=1)
    assert parse_date("tomorrow") == today + timedelta(days=1)


def test_parse_now_keeps_time():
    """Test that 'now' is the current instant."""
    before = datetime.now()
    result = parse_date("now")
    assert before <= result <= datetime.now()


def test_parse_last_weekday():
    """Test that 'last <weekday>' is strictly in the past week."""
    result = parse_date("last monday")
    today = _midnight(datetime.now())
    assert result.weekday() == 0
    assert timedelta(days=1) <= today - result <= timedelta(days=7)


def test_parse_period_phrases():
    """Test 'this', 'last' and 'next' with period names."""
    this_month = parse_date("this month")
    assert this_month.day == 1
    assert this_month.hour == 0

    last_month = parse_date("last month")
    assert last_month.day == 1
    assert last_month < this_month

    next_year = parse_date("next year")
    assert next_year == datetime(datetime.now().year + 1, 1, 1)

    this_week = parse_date("this week")
    assert this_week.weekday() == 0


def test_parse_invalid_date():
    """Test that unparseable input raises ValueError."""
    with pytest.raises(ValueError, match="Could not parse date"):
        parse_date("not a date")


@pytest.mark.parametrize(
    "text,expected",
    [
        ("123.45", Decimal("123.45")),
        ("$123.45", Decimal("123.45")),
        ("€ 9", Decimal("9")),
        ("£1,234.56", Decimal("1234.56")),
        ("-5", Decimal("-5")),
    ],
)
def test_parse_amount(text, expected):
    """Test parsing amounts with currency symbols and separators."""
    amount = parse_amount(text)
    assert isinstance(amount, Decimal)
    assert amount == expected


@pytest.mark.parametrize("text", ["", "   ", "abc", "$", "nan", "1.2.3"])
def test_parse_invalid_amount(text):
    """Test that invalid amounts raise ValueError."""
    with pytest.raises(ValueError):
        parse_amount(text)


@pytest.mark.parametrize(
    "text,expected",
    [
        ("22:00", time(22, 0)),
        ("02:00", time(2, 0)),
        ("7:30pm", time(19, 30)),
        ("2024-03-10 08:00", None),
        ("yesterday", None),
    ],
)
def test_parse_time_of_day(text, expected):
    """Test that only bare times of day are recognised."""
    assert parse_time_of_day(text) == expected


def test_parse_invalid_time_of_day():
    """Test that an impossible time raises ValueError."""
    with pytest.raises(ValueError):
        parse_time_of_day("25:00")
