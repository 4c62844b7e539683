"""Utility functions for ridelog."""

from ridelog.utils.date_parser import parse_date, parse_time_of_day
from ridelog.utils.amount_parser import parse_amount

__all__ = ["parse_date", "parse_time_of_day", "parse_amount"]
